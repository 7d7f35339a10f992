"""Splits long text into message-sized pieces."""

from .models import MAX_MESSAGE_LENGTH


def split(text: str, max_length: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """
    Splits text into consecutive chunks of at most ``max_length`` characters.

    Newlines are treated like any other character, so joining the chunks
    gives back the original text.

    Args:
        text: Text to split.
        max_length: Maximum chunk length, must be positive.

    Returns:
        Ordered chunks; empty only when ``text`` is empty.
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")
    return [text[i : i + max_length] for i in range(0, len(text), max_length)]
