from voicy_common.config import PostgresConfig, QueueConfig, RabbitMQConfig
from voicy_common.db_models import ChatRecord, VoiceRecord
from voicy_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "PostgresConfig",
    "QueueConfig",
    "RabbitMQConfig",
    "ChatRecord",
    "VoiceRecord",
]
