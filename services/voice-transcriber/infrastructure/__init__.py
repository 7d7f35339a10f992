"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .json_translator import JsonTranslator
from .logging_error_reporter import LoggingErrorReporter
from .rabbitmq_broker import RabbitMQBroker
from .telegram_messenger import TelegramMessenger

__all__ = [
    "AssemblyAITranscriber",
    "JsonTranslator",
    "LoggingErrorReporter",
    "RabbitMQBroker",
    "TelegramMessenger",
]
