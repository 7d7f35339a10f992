"""Worker that consumes Telegram updates and schedules transcriptions."""

import asyncio
import json
import threading
from concurrent.futures import Future
from typing import Any

from pydantic import ValidationError
from voicy_common import RabbitMQConfig, setup_logging
from voicy_common.infrastructure import MessageBroker

from domain import MediaMessage
from exceptions import UnsupportedUpdateError
from handlers import VoiceMessageHandler

logger = setup_logging()


class Worker:
    """
    Consumes updates from the queue and runs each one as an asyncio task.

    The broker callback runs on the consuming thread; pipeline runs are
    scheduled onto an event loop living in a background thread, so many
    transcriptions can be in flight while consumption continues.
    """

    def __init__(
        self,
        broker: MessageBroker,
        handler: VoiceMessageHandler,
        config: RabbitMQConfig,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self._broker = broker
        self._handler = handler
        self._config = config
        self._loop = loop or asyncio.new_event_loop()

    def start(self) -> None:
        """Starts the event loop thread and consumes messages from the queue."""
        if not self._loop.is_running():
            threading.Thread(
                target=self._loop.run_forever, name="pipeline-loop", daemon=True
            ).start()
        logger.info("Worker initialized, starting message consumption")
        self._broker.consume(self._on_message)

    def _on_message(
        self, body: bytes, delivery_tag: int, headers: dict[str, Any] | None
    ) -> Future | None:
        """Callback for each received message."""
        delivery_count = headers.get("x-delivery-count", 1) if headers else 1

        logger.info(
            "Update received",
            extra={
                "attempt": delivery_count,
                "max_attempts": self._config.queue_config.max_delivery_count,
            },
        )

        try:
            media = MediaMessage.from_update(json.loads(body))
        except (ValidationError, json.JSONDecodeError) as e:
            logger.exception("Invalid update format", extra={"error": str(e)})
            # A malformed update never parses, so redelivery cannot help.
            self._broker.dead_letter(delivery_tag)
            return None
        except UnsupportedUpdateError as e:
            logger.info(
                "Update skipped", extra={"update_id": e.update_id, "reason": e.reason}
            )
            self._broker.acknowledge(delivery_tag)
            return None

        # handle_incoming_media reports its own failures and never raises.
        self._broker.acknowledge(delivery_tag)

        logger.info(
            "Voice message scheduled",
            extra={
                "chat_id": media.chat_id,
                "message_id": media.message_id,
                "kind": media.attachment.kind.value,
            },
        )
        return asyncio.run_coroutine_threadsafe(
            self._handler.handle_incoming_media(media), self._loop
        )
