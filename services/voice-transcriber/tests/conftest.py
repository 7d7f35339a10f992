"""Shared fixtures for voice-transcriber tests."""

import itertools
from unittest.mock import MagicMock

import pytest

from domain import (
    Attachment,
    AttachmentKind,
    Chat,
    MediaMessage,
    SentMessage,
    TranscriptSegment,
    Transcription,
)
from infrastructure.interfaces import (
    ChatMessenger,
    ChatRepository,
    ErrorReporter,
    TranscriptionService,
    Translator,
)

CHAT_ID = 4242
MESSAGE_ID = 7


def make_chat(**overrides) -> Chat:
    """Creates an interactive wit chat unless overridden."""
    values = {"id": CHAT_ID}
    values.update(overrides)
    return Chat(**values)


def make_media(file_size: int | None = 1024, **overrides) -> MediaMessage:
    values = {
        "chat_id": CHAT_ID,
        "message_id": MESSAGE_ID,
        "attachment": Attachment(
            file_id="file-1", file_size=file_size, kind=AttachmentKind.VOICE
        ),
    }
    values.update(overrides)
    return MediaMessage(**values)


def make_transcription(*pairs: tuple[str, str], duration: int = 5) -> Transcription:
    return Transcription(
        segments=[TranscriptSegment(timecode=t, text=text) for t, text in pairs],
        duration=duration,
    )


@pytest.fixture
def messenger():
    """ChatMessenger mock whose replies get increasing message ids from 100."""
    mock = MagicMock(spec=ChatMessenger)
    message_ids = itertools.count(100)

    async def reply(chat_id, text, options):
        return SentMessage(chat_id=chat_id, message_id=next(message_ids))

    mock.reply.side_effect = reply
    mock.resolve_file_url.return_value = "https://files.example/voice.oga"
    return mock


@pytest.fixture
def translator():
    mock = MagicMock(spec=Translator)
    mock.translate.side_effect = lambda key, language: f"<{key}>"
    return mock


@pytest.fixture
def reporter():
    return MagicMock(spec=ErrorReporter)


@pytest.fixture
def repository():
    mock = MagicMock(spec=ChatRepository)
    mock.find_chat.return_value = make_chat()
    return mock


@pytest.fixture
def transcription_service():
    mock = MagicMock(spec=TranscriptionService)
    mock.transcribe.return_value = make_transcription(
        ("0:00", "hello "), ("0:05", "world")
    )
    return mock
