"""Handler layer exports."""

from handlers.delivery_strategies import (
    DeliveryStrategy,
    InteractiveDelivery,
    SilentDelivery,
)
from handlers.voice_message_handler import VoiceMessageHandler

__all__ = [
    "DeliveryStrategy",
    "InteractiveDelivery",
    "SilentDelivery",
    "VoiceMessageHandler",
]
