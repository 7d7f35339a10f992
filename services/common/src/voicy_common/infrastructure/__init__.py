from voicy_common.infrastructure.interfaces import MessageBroker

__all__ = ["MessageBroker"]
