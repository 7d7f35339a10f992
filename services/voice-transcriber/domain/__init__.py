"""Domain layer exports."""

from .chunker import split
from .models import (
    MARKDOWN,
    MAX_FILE_SIZE_BYTES,
    MAX_MESSAGE_LENGTH,
    Attachment,
    AttachmentKind,
    Chat,
    Engine,
    MediaMessage,
    MessageOptions,
    Phase,
    SanitizedChat,
    SentMessage,
    Transcription,
    TranscriptSegment,
)
from .text_formatter import PromoPolicy, TextFormatter, is_ru_chat

__all__ = [
    "MARKDOWN",
    "MAX_FILE_SIZE_BYTES",
    "MAX_MESSAGE_LENGTH",
    "Attachment",
    "AttachmentKind",
    "Chat",
    "Engine",
    "MediaMessage",
    "MessageOptions",
    "Phase",
    "SanitizedChat",
    "SentMessage",
    "Transcription",
    "TranscriptSegment",
    "PromoPolicy",
    "TextFormatter",
    "is_ru_chat",
    "split",
]
