"""RabbitMQ consumer for relayed Telegram updates."""

from collections.abc import Callable
from typing import Any

from pika.adapters.blocking_connection import BlockingChannel
from voicy_common import QueueConfig, RabbitMQConfig, setup_logging
from voicy_common.infrastructure import MessageBroker

logger = setup_logging()


class RabbitMQBroker(MessageBroker):
    """
    Reads Telegram updates from the transcription queue.

    Updates arrive on a topic exchange under the queue's routing key. The
    queue dead-letters into a direct exchange once an update has been
    nacked ``max_delivery_count`` times, or at once via ``dead_letter``.
    """

    def __init__(self, channel: BlockingChannel, config: RabbitMQConfig):
        if config.queue_config is None:
            raise ValueError("RabbitMQ config for update ingestion needs a queue")
        self._channel = channel
        self._config = config
        self._queue: QueueConfig = config.queue_config

    def acknowledge(self, delivery_tag: int) -> None:
        self._channel.basic_ack(delivery_tag=delivery_tag)

    def reject(self, delivery_tag: int) -> None:
        """Nacks an update so the quorum queue redelivers it."""
        self._channel.basic_nack(delivery_tag=delivery_tag, requeue=True)

    def dead_letter(self, delivery_tag: int) -> None:
        """Nacks an update without requeue so it lands in the DLQ."""
        logger.warning(
            "Update dead-lettered",
            extra={"delivery_tag": delivery_tag, "dlq": self._queue.dlq_name},
        )
        self._channel.basic_nack(delivery_tag=delivery_tag, requeue=False)

    def consume(
        self, callback: Callable[[bytes, int, dict[str, Any] | None], None]
    ) -> None:
        """
        Blocks consuming updates from the transcription queue.

        At most ``prefetch_count`` updates are unacknowledged at a time.

        Args:
            callback: Function called for each update with (body, delivery_tag, headers).
        """

        def on_update(ch, method, properties, body):
            headers = properties.headers if properties else None
            callback(body, method.delivery_tag, headers)

        self._channel.basic_qos(prefetch_count=self._queue.prefetch_count)
        self._channel.basic_consume(
            queue=self._queue.name,
            on_message_callback=on_update,
        )
        logger.info(
            "Started consuming updates",
            extra={
                "queue": self._queue.name,
                "prefetch_count": self._queue.prefetch_count,
            },
        )
        self._channel.start_consuming()

    def setup(self) -> None:
        """Declares the DLQ, the updates exchange and the transcription queue."""
        self._declare_dead_letter_queue()
        self._declare_update_queue()
        logger.info(
            "Queue infrastructure ready",
            extra={
                "queue": self._queue.name,
                "exchange": self._config.exchange_name,
                "routing_key": self._queue.expected_routing_key,
            },
        )

    def _declare_dead_letter_queue(self) -> None:
        self._channel.exchange_declare(
            exchange=self._queue.dlq_exchange_name,
            exchange_type="direct",
            durable=True,
        )
        self._channel.queue_declare(queue=self._queue.dlq_name, durable=True)
        self._channel.queue_bind(
            queue=self._queue.dlq_name,
            exchange=self._queue.dlq_exchange_name,
            routing_key=self._queue.dlq_routing_key,
        )

    def _declare_update_queue(self) -> None:
        self._channel.exchange_declare(
            exchange=self._config.exchange_name,
            exchange_type="topic",
            durable=True,
        )
        self._channel.queue_declare(
            queue=self._queue.name,
            durable=True,
            arguments={
                "x-queue-type": self._queue.queue_type,
                "x-delivery-limit": self._queue.max_delivery_count,
                "x-dead-letter-exchange": self._queue.dlq_exchange_name,
                "x-dead-letter-routing-key": self._queue.dlq_routing_key,
            },
        )
        self._channel.queue_bind(
            queue=self._queue.name,
            exchange=self._config.exchange_name,
            routing_key=self._queue.expected_routing_key,
        )
