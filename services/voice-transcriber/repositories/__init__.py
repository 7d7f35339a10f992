"""Repository layer exports."""

from repositories.chat_repository import SqlChatRepository

__all__ = ["SqlChatRepository"]
