from unittest.mock import MagicMock

import pytest
from telegram import Bot
from telegram.constants import ChatAction
from telegram.error import NetworkError

from domain import MARKDOWN, MessageOptions, SentMessage
from exceptions import MessengerError
from infrastructure import TelegramMessenger


@pytest.fixture
def bot():
    mock = MagicMock(spec=Bot)
    mock.send_message.return_value = MagicMock(chat_id=5, message_id=77)
    mock.get_file.return_value = MagicMock(
        file_path="https://api.telegram.org/file/botTOKEN/voice/file_1.oga"
    )
    return mock


class TestTelegramMessenger:
    async def test_reply_threads_and_disables_previews(self, bot):
        options = MessageOptions(
            parse_mode=MARKDOWN, disable_web_page_preview=True, reply_to_message_id=9
        )

        sent = await TelegramMessenger(bot).reply(5, "text", options)

        assert sent == SentMessage(chat_id=5, message_id=77)
        kwargs = bot.send_message.await_args.kwargs
        assert kwargs["chat_id"] == 5
        assert kwargs["text"] == "text"
        assert kwargs["parse_mode"] == MARKDOWN
        assert kwargs["link_preview_options"].is_disabled is True
        assert kwargs["reply_parameters"].message_id == 9

    async def test_plain_reply_has_no_extras(self, bot):
        await TelegramMessenger(bot).reply(5, "text", MessageOptions(parse_mode=None))

        kwargs = bot.send_message.await_args.kwargs
        assert kwargs["parse_mode"] is None
        assert "link_preview_options" not in kwargs
        assert "reply_parameters" not in kwargs

    async def test_edit_message(self, bot):
        options = MessageOptions(disable_web_page_preview=True, reply_to_message_id=1)

        await TelegramMessenger(bot).edit_message(5, 12, "new", options)

        kwargs = bot.edit_message_text.await_args.kwargs
        assert kwargs["chat_id"] == 5
        assert kwargs["message_id"] == 12
        assert kwargs["text"] == "new"
        assert "reply_parameters" not in kwargs

    async def test_show_typing(self, bot):
        await TelegramMessenger(bot).show_typing(5)

        bot.send_chat_action.assert_awaited_once_with(
            chat_id=5, action=ChatAction.TYPING
        )

    async def test_resolve_file_url(self, bot):
        url = await TelegramMessenger(bot).resolve_file_url("file_1")

        bot.get_file.assert_awaited_once_with("file_1")
        assert url == "https://api.telegram.org/file/botTOKEN/voice/file_1.oga"

    async def test_telegram_errors_are_wrapped(self, bot):
        bot.edit_message_text.side_effect = NetworkError("connection reset")

        with pytest.raises(MessengerError) as exc_info:
            await TelegramMessenger(bot).edit_message(5, 12, "new", MessageOptions())

        assert exc_info.value.operation == "edit_message_text"
        assert isinstance(exc_info.value.cause, NetworkError)
