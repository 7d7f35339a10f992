"""Telegram Bot API implementation of the ChatMessenger interface."""

from telegram import Bot, LinkPreviewOptions, ReplyParameters
from telegram.constants import ChatAction
from telegram.error import TelegramError
from voicy_common import setup_logging

from domain.models import MessageOptions, SentMessage
from exceptions import MessengerError

from .interfaces import ChatMessenger

logger = setup_logging()


def _message_kwargs(options: MessageOptions) -> dict:
    kwargs = {"parse_mode": options.parse_mode}
    if options.disable_web_page_preview:
        kwargs["link_preview_options"] = LinkPreviewOptions(is_disabled=True)
    if options.reply_to_message_id is not None:
        kwargs["reply_parameters"] = ReplyParameters(
            message_id=options.reply_to_message_id,
            allow_sending_without_reply=True,
        )
    return kwargs


class TelegramMessenger(ChatMessenger):
    """Sends, edits and resolves files through python-telegram-bot."""

    def __init__(self, bot: Bot):
        self._bot = bot

    async def reply(
        self, chat_id: int, text: str, options: MessageOptions
    ) -> SentMessage:
        try:
            message = await self._bot.send_message(
                chat_id=chat_id, text=text, **_message_kwargs(options)
            )
        except TelegramError as e:
            logger.exception("Telegram send failed", extra={"chat_id": chat_id})
            raise MessengerError("send_message", chat_id, e) from e
        return SentMessage(chat_id=message.chat_id, message_id=message.message_id)

    async def edit_message(
        self, chat_id: int, message_id: int, text: str, options: MessageOptions
    ) -> None:
        kwargs = _message_kwargs(options)
        kwargs.pop("reply_parameters", None)
        try:
            await self._bot.edit_message_text(
                text=text, chat_id=chat_id, message_id=message_id, **kwargs
            )
        except TelegramError as e:
            logger.exception(
                "Telegram edit failed",
                extra={"chat_id": chat_id, "message_id": message_id},
            )
            raise MessengerError("edit_message_text", chat_id, e) from e

    async def show_typing(self, chat_id: int) -> None:
        try:
            await self._bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
        except TelegramError as e:
            logger.exception("Telegram chat action failed", extra={"chat_id": chat_id})
            raise MessengerError("send_chat_action", chat_id, e) from e

    async def resolve_file_url(self, file_id: str) -> str:
        """Returns the download URL python-telegram-bot builds for a file."""
        try:
            file = await self._bot.get_file(file_id)
        except TelegramError as e:
            logger.exception("Telegram file lookup failed", extra={"file_id": file_id})
            raise MessengerError("get_file", None, e) from e
        return file.file_path
