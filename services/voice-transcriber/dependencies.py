"""Dependency injection configuration for the voice-transcriber service."""

from contextlib import contextmanager

import assemblyai as aai
import pika
from sqlmodel import Session, SQLModel, create_engine
from telegram import Bot
from voicy_common import setup_logging

from config import load_config
from domain import TextFormatter
from handlers import VoiceMessageHandler
from infrastructure import (
    AssemblyAITranscriber,
    JsonTranslator,
    LoggingErrorReporter,
    RabbitMQBroker,
    TelegramMessenger,
)
from repositories import SqlChatRepository
from worker import Worker

logger = setup_logging()

_config = load_config()

# PostgreSQL database
_db_engine = create_engine(_config.postgres.url)
SQLModel.metadata.create_all(_db_engine)
logger.info("Database initialized", extra={"host": _config.postgres.host})


@contextmanager
def _session_factory():
    """Creates a database session context manager."""
    with Session(_db_engine) as session:
        yield session


_repository = SqlChatRepository(_session_factory)

# RabbitMQ broker
_credentials = pika.PlainCredentials(_config.rabbitmq.user, _config.rabbitmq.password)
_parameters = pika.ConnectionParameters(
    host=_config.rabbitmq.host,
    credentials=_credentials,
    heartbeat=0,
)
_rabbit_connection = pika.BlockingConnection(_parameters)
_rabbit_channel = _rabbit_connection.channel()
_broker = RabbitMQBroker(_rabbit_channel, _config.rabbitmq)
_broker.setup()

# Telegram
_messenger = TelegramMessenger(Bot(token=_config.telegram.bot_token))

# AssemblyAI
aai.settings.api_key = _config.assemblyai.api_key
_transcription_service = AssemblyAITranscriber(aai.Transcriber())

# Service composition
_formatter = TextFormatter(_config.promo)
_translator = JsonTranslator.from_directory(_config.locales_dir)
_reporter = LoggingErrorReporter()


def get_handler() -> VoiceMessageHandler:
    """Returns the configured voice message handler."""
    return VoiceMessageHandler(
        _repository,
        _messenger,
        _transcription_service,
        _formatter,
        _translator,
        _reporter,
    )


def get_worker() -> Worker:
    """Returns the configured worker."""
    return Worker(_broker, get_handler(), _config.rabbitmq)
