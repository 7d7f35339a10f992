"""Abstract interface for localized strings."""

from abc import ABC, abstractmethod


class Translator(ABC):
    """Abstract base class for translation catalogs."""

    @abstractmethod
    def translate(self, key: str, language: str) -> str:
        """Returns the text for ``key`` in ``language``."""
