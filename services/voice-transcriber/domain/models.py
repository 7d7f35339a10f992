"""Domain models for the voice transcription service."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from exceptions import UnsupportedUpdateError

# Telegram refuses bot downloads above 20 MB; stay a megabyte under it.
MAX_FILE_SIZE_BYTES = 19 * 1024 * 1024
MAX_MESSAGE_LENGTH = 4000

MARKDOWN = "Markdown"


class AttachmentKind(str, Enum):
    """Message fields that can carry transcribable media, in lookup order."""

    VOICE = "voice"
    DOCUMENT = "document"
    AUDIO = "audio"
    VIDEO_NOTE = "video_note"


class Engine(str, Enum):
    """Speech-to-text providers a chat can select."""

    WIT = "wit"
    GOOGLE = "google"

    @property
    def requires_credential(self) -> bool:
        """Whether the engine fails closed without a user-supplied key."""
        return self is Engine.GOOGLE

    @property
    def exposes_raw_error(self) -> bool:
        """Whether raw engine error text is shown to the user."""
        return self is Engine.GOOGLE


class Phase(str, Enum):
    """Tags identifying which pipeline stage a reported failure came from."""

    HANDLE_MESSAGE = "handleMessage"
    SEND_ACTION = "sendAction"
    SEND_TRANSCRIPTION = "sendTranscription"
    SEND_TRANSCRIPTION_SILENT = "sendTranscription.silent"
    UPDATE_WITH_ERROR = "updateMessagewithError"


class Attachment(BaseModel, frozen=True):
    """A media file attached to an incoming message."""

    file_id: str
    file_size: int | None = None
    kind: AttachmentKind

    @property
    def is_oversized(self) -> bool:
        return self.file_size is not None and self.file_size >= MAX_FILE_SIZE_BYTES


class SanitizedChat(BaseModel, frozen=True):
    """The subset of chat settings handed to the transcription engine."""

    id: int
    engine: Engine = Engine.WIT
    google_language: str = "en-US"
    wit_language: str = "english"
    admin_locked: bool = False
    silent: bool = False
    files_banned: bool = False
    google_setup_message_id: int | None = None
    google_key: str | None = None
    language: str = "en"

    @property
    def engine_language(self) -> str:
        """Locale configured for the selected engine."""
        if self.engine is Engine.GOOGLE:
            return self.google_language
        return self.wit_language


class Chat(SanitizedChat, frozen=True):
    """Snapshot of a chat's configuration for one request."""

    timecodes_enabled: bool = False

    @property
    def has_credential(self) -> bool:
        return bool(self.google_key)

    def sanitized(self) -> SanitizedChat:
        """Projects the chat down to the fields the engine may see."""
        return SanitizedChat.model_validate(
            self.model_dump(include=set(SanitizedChat.model_fields))
        )


class TranscriptSegment(BaseModel, frozen=True):
    """A piece of recognized text and where it occurred in the audio."""

    timecode: str
    text: str

    def as_pair(self) -> list[str]:
        return [self.timecode, self.text]


class Transcription(BaseModel, frozen=True):
    """Engine output: ordered segments plus audio duration in seconds."""

    segments: list[TranscriptSegment]
    duration: int = 0


class SentMessage(BaseModel, frozen=True):
    """A message accepted by the chat platform."""

    chat_id: int
    message_id: int


class MessageOptions(BaseModel, frozen=True):
    """Rendering and threading options for an outgoing message."""

    parse_mode: str | None = MARKDOWN
    disable_web_page_preview: bool = False
    reply_to_message_id: int | None = None


class _TelegramFile(BaseModel):
    file_id: str
    file_size: int | None = None


class _TelegramChat(BaseModel):
    id: int


class _TelegramMessage(BaseModel):
    message_id: int
    chat: _TelegramChat
    voice: _TelegramFile | None = None
    document: _TelegramFile | None = None
    audio: _TelegramFile | None = None
    video_note: _TelegramFile | None = None


class _TelegramUpdate(BaseModel):
    update_id: int
    message: _TelegramMessage | None = None
    channel_post: _TelegramMessage | None = None


class MediaMessage(BaseModel, frozen=True):
    """
    Request context for one incoming media message.

    Identifies the chat and message that carried the attachment and records
    when the update was received, for timing.
    """

    chat_id: int
    message_id: int
    attachment: Attachment
    received_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_update(
        cls, payload: dict[str, Any], received_at: datetime | None = None
    ) -> "MediaMessage":
        """
        Builds a media message from a raw Telegram update.

        Args:
            payload: Decoded Telegram update JSON.
            received_at: When the update was received; defaults to now.

        Returns:
            MediaMessage for the first supported attachment in the update.

        Raises:
            pydantic.ValidationError: If the payload is not a Telegram update.
            UnsupportedUpdateError: If the update carries no supported media.
        """
        update = _TelegramUpdate.model_validate(payload)
        message = update.message or update.channel_post

        if message is None:
            raise UnsupportedUpdateError(
                update.update_id, "update has no message or channel post"
            )

        for kind in AttachmentKind:
            media = getattr(message, kind.value)
            if media is not None:
                break
        else:
            raise UnsupportedUpdateError(
                update.update_id, "message has no voice, audio or document"
            )

        return cls(
            chat_id=message.chat.id,
            message_id=message.message_id,
            attachment=Attachment(
                file_id=media.file_id,
                file_size=media.file_size,
                kind=kind,
            ),
            received_at=received_at or datetime.now(timezone.utc),
        )
