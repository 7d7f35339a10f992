"""Abstract interface for the error-reporting sink."""

from abc import ABC, abstractmethod

from domain.models import MediaMessage, Phase


class ErrorReporter(ABC):
    """Abstract base class for error sinks."""

    @abstractmethod
    def report(self, media: MediaMessage, error: BaseException, phase: Phase) -> None:
        """
        Records a failure that happened while handling a media message.

        Implementations must never raise.

        Args:
            media: The message being processed.
            error: The failure.
            phase: Pipeline stage that failed.
        """
