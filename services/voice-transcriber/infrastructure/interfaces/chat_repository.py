"""Abstract interface for chat and voice persistence."""

from abc import ABC, abstractmethod

from domain.models import Chat, TranscriptSegment


class ChatRepository(ABC):
    """Abstract base class for chat lookup and voice storage."""

    @abstractmethod
    async def find_chat(self, chat_id: int) -> Chat:
        """
        Loads a chat's configuration, creating defaults for unknown chats.

        Raises:
            ChatLookupError: If the chat cannot be loaded.
        """

    @abstractmethod
    async def record_voice(
        self,
        url: str,
        text: str,
        chat: Chat,
        duration: int,
        segments: list[TranscriptSegment],
        file_id: str,
    ) -> None:
        """
        Stores a transcribed voice message.

        Args:
            url: URL the audio was transcribed from.
            text: Plain transcription text, without timecodes or promo.
            chat: Chat the voice was sent to.
            duration: Audio duration in seconds.
            segments: Raw timecoded segments.
            file_id: Platform file id of the attachment.

        Raises:
            VoicePersistenceError: If the record cannot be saved.
        """
