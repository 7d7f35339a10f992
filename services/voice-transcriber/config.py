"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel
from voicy_common import PostgresConfig, QueueConfig, RabbitMQConfig

from domain import PromoPolicy
from domain.text_formatter import DEFAULT_PROMO_EXEMPT_CHAT_IDS


class TelegramConfig(BaseModel, frozen=True):
    """Telegram Bot API configuration."""

    bot_token: str


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    telegram: TelegramConfig
    rabbitmq: RabbitMQConfig
    postgres: PostgresConfig
    assemblyai: AssemblyAIConfig
    promo: PromoPolicy = PromoPolicy()
    locales_dir: Path = Path("locales")


def _parse_chat_ids(value: str | None) -> frozenset[int]:
    """Parses a comma-separated list of chat ids, e.g. '-100123,-456'."""
    if not value:
        return DEFAULT_PROMO_EXEMPT_CHAT_IDS
    return frozenset(int(item) for item in value.split(",") if item.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        telegram=TelegramConfig(
            bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        ),
        rabbitmq=RabbitMQConfig(
            host=os.getenv("RABBITMQ_HOST", "rabbitmq"),
            user=os.getenv("RABBITMQ_USER", ""),
            password=os.getenv("RABBITMQ_PASSWORD", ""),
            queue_config=QueueConfig(
                name="voice_transcription_queue",
                queue_type="quorum",
                max_delivery_count=3,
                expected_routing_key="telegram.update.received",
                dlq_name="dlq_voice_transcriber",
                dlq_exchange_name="dead_letter_exchange",
                dlq_routing_key="telegram.update.failed",
                prefetch_count=int(os.getenv("RABBITMQ_PREFETCH_COUNT", "10")),
            ),
        ),
        postgres=PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            database=os.getenv("POSTGRES_DB", "voicy"),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
        promo=PromoPolicy(
            exempt_chat_ids=_parse_chat_ids(os.getenv("PROMO_EXEMPT_CHAT_IDS")),
        ),
        locales_dir=Path(
            os.getenv("LOCALES_DIR", str(Path(__file__).parent / "locales"))
        ),
    )
