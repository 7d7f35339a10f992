"""Infrastructure interface exports."""

from voicy_common.infrastructure.interfaces import MessageBroker

from infrastructure.interfaces.chat_messenger import ChatMessenger
from infrastructure.interfaces.chat_repository import ChatRepository
from infrastructure.interfaces.error_reporter import ErrorReporter
from infrastructure.interfaces.transcription_service import TranscriptionService
from infrastructure.interfaces.translator import Translator

__all__ = [
    "ChatMessenger",
    "ChatRepository",
    "ErrorReporter",
    "MessageBroker",
    "TranscriptionService",
    "Translator",
]
