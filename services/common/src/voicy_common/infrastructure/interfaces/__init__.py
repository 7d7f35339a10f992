from voicy_common.infrastructure.interfaces.message_broker import MessageBroker

__all__ = [
    "MessageBroker",
]
