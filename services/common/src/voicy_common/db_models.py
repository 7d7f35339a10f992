from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, BigInteger, Column, ForeignKey
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, Relationship, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChatRecord(SQLModel, table=True):
    __tablename__ = "chats"

    id: int = Field(
        sa_column=Column(BigInteger, primary_key=True, autoincrement=False)
    )
    engine: str = Field(default="wit", max_length=32)
    google_language: str = Field(default="en-US", max_length=32)
    wit_language: str = Field(default="english", max_length=32)
    google_key: Optional[str] = None
    google_setup_message_id: Optional[int] = Field(
        default=None, sa_column=Column(BigInteger, nullable=True)
    )
    silent: bool = False
    timecodes_enabled: bool = False
    admin_locked: bool = False
    files_banned: bool = False
    language: str = Field(default="en", max_length=8)

    voices: List["VoiceRecord"] = Relationship(back_populates="chat")


class VoiceRecord(SQLModel, table=True):
    __tablename__ = "voices"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    url: str
    text: str
    chat_id: int = Field(
        sa_column=Column(
            BigInteger, ForeignKey("chats.id"), nullable=False, index=True
        )
    )
    duration: int = 0
    text_with_timecodes: List[List[str]] = Field(
        sa_column=Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    )
    file_id: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=_utcnow)

    chat: Optional[ChatRecord] = Relationship(back_populates="voices")
