"""Repository for chat configuration and voice persistence."""

import asyncio

from sqlmodel import Session
from voicy_common import ChatRecord, VoiceRecord, setup_logging

from domain.models import Chat, TranscriptSegment
from exceptions import ChatLookupError, VoicePersistenceError
from infrastructure.interfaces import ChatRepository

logger = setup_logging()


class SqlChatRepository(ChatRepository):
    """
    Handles database operations for chats and voices.

    SQLModel sessions are synchronous, so each operation runs in a worker
    thread to keep the event loop free.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    async def find_chat(self, chat_id: int) -> Chat:
        """
        Loads a chat, creating it with default settings on first contact.

        Raises:
            ChatLookupError: If the database call fails.
        """
        try:
            return await asyncio.to_thread(self._find_chat, chat_id)
        except Exception as e:
            logger.exception("Failed to load chat", extra={"chat_id": chat_id})
            raise ChatLookupError(chat_id, cause=e) from e

    async def record_voice(
        self,
        url: str,
        text: str,
        chat: Chat,
        duration: int,
        segments: list[TranscriptSegment],
        file_id: str,
    ) -> None:
        """
        Stores a transcribed voice with its raw segments.

        Raises:
            VoicePersistenceError: If the database call fails.
        """
        voice = VoiceRecord(
            url=url,
            text=text,
            chat_id=chat.id,
            duration=duration,
            text_with_timecodes=[segment.as_pair() for segment in segments],
            file_id=file_id,
        )
        try:
            await asyncio.to_thread(self._save_voice, voice)
        except Exception as e:
            logger.exception(
                "Failed to persist voice",
                extra={"chat_id": chat.id, "file_id": file_id},
            )
            raise VoicePersistenceError(file_id, cause=e) from e

        logger.info(
            "Voice persisted",
            extra={"chat_id": chat.id, "file_id": file_id, "duration": duration},
        )

    def _find_chat(self, chat_id: int) -> Chat:
        """Gets an existing chat row or creates a default one."""
        with self._session_factory() as db_session:
            record = self._get_or_create_chat(db_session, chat_id)
            return Chat.model_validate(record.model_dump())

    def _get_or_create_chat(self, db_session: Session, chat_id: int) -> ChatRecord:
        record = db_session.get(ChatRecord, chat_id)

        if record:
            return record

        record = ChatRecord(id=chat_id)
        db_session.add(record)
        db_session.commit()
        db_session.refresh(record)
        logger.info("Chat created", extra={"chat_id": chat_id})
        return record

    def _save_voice(self, voice: VoiceRecord) -> None:
        with self._session_factory() as db_session:
            db_session.add(voice)
            db_session.commit()
