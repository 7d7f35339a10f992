"""Handler for transcribing incoming voice messages."""

from datetime import datetime, timezone

from voicy_common import setup_logging

from domain import Chat, MediaMessage, Phase, TextFormatter
from handlers.delivery_strategies import (
    DeliveryStrategy,
    InteractiveDelivery,
    SilentDelivery,
)
from infrastructure.interfaces import (
    ChatMessenger,
    ChatRepository,
    ErrorReporter,
    TranscriptionService,
    Translator,
)

logger = setup_logging()


class VoiceMessageHandler:
    """Orchestrates voice-to-text operations for one chat message at a time."""

    def __init__(
        self,
        repository: ChatRepository,
        messenger: ChatMessenger,
        transcription_service: TranscriptionService,
        formatter: TextFormatter,
        translator: Translator,
        reporter: ErrorReporter,
    ):
        self._repository = repository
        self._messenger = messenger
        self._transcription_service = transcription_service
        self._formatter = formatter
        self._translator = translator
        self._reporter = reporter

    async def handle_incoming_media(self, media: MediaMessage) -> None:
        """
        Transcribes a media message and delivers the text to its chat.

        Never raises: every failure ends up in the error reporter, tagged with
        the phase it came from.

        Args:
            media: The incoming message and its attachment.
        """
        try:
            chat = await self._repository.find_chat(media.chat_id)
            delivery = self._delivery_for(media, chat)

            if media.attachment.is_oversized:
                logger.info(
                    "Attachment too large",
                    extra={
                        "chat_id": media.chat_id,
                        "file_size": media.attachment.file_size,
                    },
                )
                await delivery.reject_oversized()
                return

            file_url = await self._messenger.resolve_file_url(
                media.attachment.file_id
            )

            try:
                await self._transcribe(media, chat, delivery, file_url)
            except Exception as e:
                self._reporter.report(media, e, delivery.phase)
        except Exception as e:
            self._reporter.report(media, e, Phase.HANDLE_MESSAGE)

    def _delivery_for(self, media: MediaMessage, chat: Chat) -> DeliveryStrategy:
        strategy = SilentDelivery if chat.silent else InteractiveDelivery
        return strategy(media, chat, self._messenger, self._translator, self._reporter)

    async def _transcribe(
        self,
        media: MediaMessage,
        chat: Chat,
        delivery: DeliveryStrategy,
        file_url: str,
    ) -> None:
        """
        Runs the engine, delivers the result and stores the voice record.

        Engine, delivery and persistence failures are handed to the delivery
        strategy and reported; failures of ``announce`` and the credential
        notice propagate to the caller.
        """
        await delivery.announce()

        if chat.engine.requires_credential and not chat.has_credential:
            await delivery.reject_missing_credentials()
            return

        try:
            transcription = await self._transcription_service.transcribe(
                file_url, chat.sanitized()
            )

            text = self._formatter.format(transcription.segments, chat)
            await delivery.deliver(text)

            await self._repository.record_voice(
                file_url,
                self._formatter.aggregate(transcription.segments),
                chat,
                transcription.duration,
                transcription.segments,
                media.attachment.file_id,
            )

            logger.info(
                "Voice transcribed",
                extra={
                    "chat_id": media.chat_id,
                    "segment_count": len(transcription.segments),
                    "duration": transcription.duration,
                },
            )
        except Exception as e:
            await delivery.fail(e)
            self._reporter.report(media, e, delivery.failure_phase)
        finally:
            elapsed = datetime.now(timezone.utc) - media.received_at
            logger.info(
                "Audio message processed",
                extra={
                    "chat_id": media.chat_id,
                    "elapsed_seconds": elapsed.total_seconds(),
                },
            )
