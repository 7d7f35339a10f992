"""Custom exceptions for the voice-transcriber service."""


class TranscriptionError(Exception):
    """Raised when the speech-to-text engine fails to transcribe a file."""

    def __init__(
        self,
        file_url: str,
        message: str | None = None,
        cause: Exception | None = None,
    ):
        self.file_url = file_url
        self.cause = cause
        super().__init__(message or "Failed to transcribe audio file")


class MessengerError(Exception):
    """Raised when the chat platform rejects a send, edit or file lookup."""

    def __init__(
        self,
        operation: str,
        chat_id: int | None,
        cause: Exception | None = None,
    ):
        self.operation = operation
        self.chat_id = chat_id
        self.cause = cause
        super().__init__(f"Telegram {operation} failed for chat '{chat_id}'")


class ChatLookupError(Exception):
    """Raised when a chat configuration cannot be loaded."""

    def __init__(self, chat_id: int, cause: Exception | None = None):
        self.chat_id = chat_id
        self.cause = cause
        super().__init__(f"Failed to load chat '{chat_id}'")


class VoicePersistenceError(Exception):
    """Raised when saving a voice record to the database fails."""

    def __init__(self, file_id: str, cause: Exception | None = None):
        self.file_id = file_id
        self.cause = cause
        super().__init__(f"Failed to persist voice '{file_id}' to database")


class UnsupportedUpdateError(Exception):
    """Raised when a Telegram update carries no transcribable attachment."""

    def __init__(self, update_id: int, reason: str):
        self.update_id = update_id
        self.reason = reason
        super().__init__(f"Unsupported update '{update_id}': {reason}")
