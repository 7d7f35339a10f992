"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from domain.models import SanitizedChat, Transcription


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    async def transcribe(self, file_url: str, chat: SanitizedChat) -> Transcription:
        """
        Transcribes the audio file behind a URL.

        Args:
            file_url: Downloadable URL of the audio file.
            chat: Sanitized settings of the chat the file came from.

        Returns:
            Transcription with ordered timecoded segments and duration.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
