"""Chat-facing behavior for interactive and silent chats."""

import re
from abc import ABC, abstractmethod

from voicy_common import setup_logging

from domain import (
    MARKDOWN,
    MAX_MESSAGE_LENGTH,
    Chat,
    MediaMessage,
    MessageOptions,
    Phase,
    SentMessage,
    split,
)
from infrastructure.interfaces import ChatMessenger, ErrorReporter, Translator

logger = setup_logging()

_TRANSCRIPTION_OPTIONS = MessageOptions(
    parse_mode=MARKDOWN, disable_web_page_preview=True
)

# Telegram file URLs embed the bot token.
_URL_PATTERN = re.compile(r"https?://\S+")
_BOT_TOKEN_PATTERN = re.compile(r"bot\d+:[\w-]+")


def redact_urls(text: str) -> str:
    """Replaces URLs and bare bot tokens in engine error text."""
    text = _URL_PATTERN.sub("<link>", text)
    return _BOT_TOKEN_PATTERN.sub("bot<token>", text)


class DeliveryStrategy(ABC):
    """
    Decides what a chat sees while its voice message is processed.

    One instance handles exactly one media message. ``phase`` tags failures
    raised by the strategy itself; ``failure_phase`` tags engine and delivery
    failures passed to ``fail``.
    """

    phase: Phase
    failure_phase: Phase

    def __init__(
        self,
        media: MediaMessage,
        chat: Chat,
        messenger: ChatMessenger,
        translator: Translator,
        reporter: ErrorReporter,
    ):
        self._media = media
        self._chat = chat
        self._messenger = messenger
        self._translator = translator
        self._reporter = reporter

    def _t(self, key: str) -> str:
        return self._translator.translate(key, self._chat.language)

    @abstractmethod
    async def reject_oversized(self) -> None:
        """Handles an attachment too large to download."""

    @abstractmethod
    async def announce(self) -> None:
        """Gives the chat immediate feedback that work has started."""

    @abstractmethod
    async def reject_missing_credentials(self) -> None:
        """Handles an engine that needs a key the chat has not configured."""

    @abstractmethod
    async def deliver(self, text: str) -> None:
        """Shows the formatted transcription."""

    @abstractmethod
    async def fail(self, error: Exception) -> None:
        """Shows (or hides) an engine or delivery failure."""


class InteractiveDelivery(DeliveryStrategy):
    """Replies with a placeholder and later edits it into the result."""

    phase = Phase.SEND_TRANSCRIPTION
    failure_phase = Phase.SEND_TRANSCRIPTION

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._placeholder: SentMessage | None = None

    async def reject_oversized(self) -> None:
        await self._messenger.reply(
            self._media.chat_id,
            self._t("error_twenty"),
            MessageOptions(reply_to_message_id=self._media.message_id),
        )

    async def announce(self) -> None:
        self._placeholder = await self._messenger.reply(
            self._media.chat_id,
            self._t("initiated"),
            MessageOptions(reply_to_message_id=self._media.message_id),
        )

    async def reject_missing_credentials(self) -> None:
        # Unlike a transcription, the notice carries no promo suffix.
        await self._edit_placeholder(
            self._t("google_error_creds"), _TRANSCRIPTION_OPTIONS
        )

    async def deliver(self, text: str) -> None:
        """
        Edits the placeholder with the transcription.

        Text longer than one message goes into the placeholder in pieces: the
        first chunk replaces it and the rest are threaded replies to it.
        """
        if not text or len(text) <= MAX_MESSAGE_LENGTH:
            await self._edit_placeholder(
                text or self._t("speak_clearly"), _TRANSCRIPTION_OPTIONS
            )
            return

        head, *rest = split(text)
        await self._edit_placeholder(head, _TRANSCRIPTION_OPTIONS)

        thread_options = _TRANSCRIPTION_OPTIONS.model_copy(
            update={"reply_to_message_id": self._placeholder_message().message_id}
        )
        for chunk in rest:
            await self._messenger.reply(self._media.chat_id, chunk, thread_options)

    async def fail(self, error: Exception) -> None:
        try:
            text = self._t("error")
            if self._chat.engine.exposes_raw_error:
                details = redact_urls(str(error)) or "Unknown error"
                text = f"{text}\n\n``` {details}```"
            await self._edit_placeholder(text, MessageOptions(parse_mode=MARKDOWN))
        except Exception as e:
            self._reporter.report(self._media, e, Phase.UPDATE_WITH_ERROR)

    def _placeholder_message(self) -> SentMessage:
        if self._placeholder is None:
            raise RuntimeError("Placeholder message has not been sent")
        return self._placeholder

    async def _edit_placeholder(self, text: str, options: MessageOptions) -> None:
        placeholder = self._placeholder_message()
        await self._messenger.edit_message(
            placeholder.chat_id, placeholder.message_id, text, options
        )


class SilentDelivery(DeliveryStrategy):
    """Shows a typing indicator and only ever sends the final transcription."""

    phase = Phase.SEND_ACTION
    failure_phase = Phase.SEND_TRANSCRIPTION_SILENT

    async def reject_oversized(self) -> None:
        logger.info(
            "Oversized file skipped in silent chat",
            extra={"chat_id": self._media.chat_id},
        )

    async def announce(self) -> None:
        await self._messenger.show_typing(self._media.chat_id)

    async def reject_missing_credentials(self) -> None:
        logger.info(
            "Missing engine credentials in silent chat",
            extra={"chat_id": self._media.chat_id},
        )

    async def deliver(self, text: str) -> None:
        """Replies with the transcription; later chunks reply to the first one."""
        if not text:
            return

        head, *rest = split(text)
        first = await self._messenger.reply(
            self._media.chat_id,
            head,
            _TRANSCRIPTION_OPTIONS.model_copy(
                update={"reply_to_message_id": self._media.message_id}
            ),
        )

        thread_options = _TRANSCRIPTION_OPTIONS.model_copy(
            update={"reply_to_message_id": first.message_id}
        )
        for chunk in rest:
            await self._messenger.reply(self._media.chat_id, chunk, thread_options)

    async def fail(self, error: Exception) -> None:
        return None
