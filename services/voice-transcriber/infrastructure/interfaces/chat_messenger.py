"""Abstract interface for chat platform messaging."""

from abc import ABC, abstractmethod

from domain.models import MessageOptions, SentMessage


class ChatMessenger(ABC):
    """Abstract base class for the chat platform client."""

    @abstractmethod
    async def reply(
        self, chat_id: int, text: str, options: MessageOptions
    ) -> SentMessage:
        """
        Sends a new message to a chat.

        Args:
            chat_id: Target chat.
            text: Message text.
            options: Parse mode, link preview and reply threading options.

        Returns:
            The sent message.

        Raises:
            MessengerError: If the platform rejects the message.
        """

    @abstractmethod
    async def edit_message(
        self, chat_id: int, message_id: int, text: str, options: MessageOptions
    ) -> None:
        """
        Replaces the text of an existing message.

        Raises:
            MessengerError: If the platform rejects the edit.
        """

    @abstractmethod
    async def show_typing(self, chat_id: int) -> None:
        """
        Shows the transient "typing" indicator in a chat.

        Raises:
            MessengerError: If the platform rejects the action.
        """

    @abstractmethod
    async def resolve_file_url(self, file_id: str) -> str:
        """
        Resolves a platform file id to a downloadable URL.

        Raises:
            MessengerError: If the file cannot be looked up.
        """
