from datetime import datetime, timezone

import pytest
from conftest import make_chat
from pydantic import ValidationError

from domain import MAX_FILE_SIZE_BYTES, Attachment, AttachmentKind, Engine, MediaMessage
from exceptions import UnsupportedUpdateError


def _update(message_key: str = "message", **media) -> dict:
    return {
        "update_id": 1,
        message_key: {
            "message_id": 55,
            "date": 1700000000,
            "chat": {"id": -100, "type": "supergroup"},
            **media,
        },
    }


class TestMediaMessageFromUpdate:
    def test_voice_message(self):
        received_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        payload = _update(voice={"file_id": "v1", "file_size": 2048, "duration": 3})

        media = MediaMessage.from_update(payload, received_at=received_at)

        assert media.chat_id == -100
        assert media.message_id == 55
        assert media.attachment == Attachment(
            file_id="v1", file_size=2048, kind=AttachmentKind.VOICE
        )
        assert media.received_at == received_at

    def test_channel_post(self):
        media = MediaMessage.from_update(
            _update("channel_post", audio={"file_id": "a1"})
        )

        assert media.attachment.kind is AttachmentKind.AUDIO
        assert media.attachment.file_size is None

    def test_voice_preferred_over_document(self):
        media = MediaMessage.from_update(
            _update(document={"file_id": "d1"}, voice={"file_id": "v1"})
        )

        assert media.attachment.file_id == "v1"

    def test_video_note(self):
        media = MediaMessage.from_update(_update(video_note={"file_id": "n1"}))

        assert media.attachment.kind is AttachmentKind.VIDEO_NOTE

    def test_message_without_media(self):
        with pytest.raises(UnsupportedUpdateError):
            MediaMessage.from_update(_update(text="hello"))

    def test_update_without_message(self):
        with pytest.raises(UnsupportedUpdateError):
            MediaMessage.from_update({"update_id": 3, "edited_message": {}})

    def test_malformed_update(self):
        with pytest.raises(ValidationError):
            MediaMessage.from_update({"message": {"message_id": "x"}})


class TestAttachment:
    @pytest.mark.parametrize(
        ("file_size", "oversized"),
        [
            (None, False),
            (MAX_FILE_SIZE_BYTES - 1, False),
            (19 * 1024 * 1024, True),
            (20 * 1024 * 1024, True),
        ],
    )
    def test_is_oversized(self, file_size, oversized):
        attachment = Attachment(
            file_id="f", file_size=file_size, kind=AttachmentKind.VOICE
        )

        assert attachment.is_oversized is oversized


class TestChat:
    def test_engine_capabilities(self):
        assert Engine.GOOGLE.requires_credential
        assert Engine.GOOGLE.exposes_raw_error
        assert not Engine.WIT.requires_credential
        assert not Engine.WIT.exposes_raw_error

    def test_engine_language(self):
        chat = make_chat(google_language="de-DE", wit_language="german")

        assert chat.engine_language == "german"
        assert chat.model_copy(update={"engine": Engine.GOOGLE}).engine_language == (
            "de-DE"
        )

    def test_sanitized_projection(self):
        chat = make_chat(
            engine="google", google_key="secret", timecodes_enabled=True, silent=True
        )

        sanitized = chat.sanitized()

        assert set(sanitized.model_dump()) == {
            "id",
            "engine",
            "google_language",
            "wit_language",
            "admin_locked",
            "silent",
            "files_banned",
            "google_setup_message_id",
            "google_key",
            "language",
        }
        assert sanitized.engine is Engine.GOOGLE
        assert sanitized.google_key == "secret"
        assert sanitized.silent is True
