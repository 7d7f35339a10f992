from unittest.mock import MagicMock, call

import pytest
from pika.adapters.blocking_connection import BlockingChannel
from voicy_common import QueueConfig, RabbitMQConfig

from infrastructure import RabbitMQBroker

CONFIG = RabbitMQConfig(
    host="rabbitmq",
    user="guest",
    password="guest",
    exchange_name="telegram",
    queue_config=QueueConfig(
        name="voice_transcription_queue",
        max_delivery_count=5,
        expected_routing_key="telegram.update.received",
        dlq_name="dlq_voice_transcriber",
        dlq_exchange_name="dead_letter_exchange",
        dlq_routing_key="telegram.update.failed",
        prefetch_count=4,
    ),
)


@pytest.fixture
def channel():
    return MagicMock(spec=BlockingChannel)


@pytest.fixture
def broker(channel):
    return RabbitMQBroker(channel, CONFIG)


class TestSetup:
    def test_declares_dead_letter_queue_before_update_queue(self, broker, channel):
        broker.setup()

        assert channel.exchange_declare.call_args_list == [
            call(exchange="dead_letter_exchange", exchange_type="direct", durable=True),
            call(exchange="telegram", exchange_type="topic", durable=True),
        ]
        assert channel.queue_declare.call_args_list[0] == call(
            queue="dlq_voice_transcriber", durable=True
        )
        assert channel.queue_bind.call_args_list == [
            call(
                queue="dlq_voice_transcriber",
                exchange="dead_letter_exchange",
                routing_key="telegram.update.failed",
            ),
            call(
                queue="voice_transcription_queue",
                exchange="telegram",
                routing_key="telegram.update.received",
            ),
        ]

    def test_update_queue_dead_letters_after_delivery_limit(self, broker, channel):
        broker.setup()

        channel.queue_declare.assert_called_with(
            queue="voice_transcription_queue",
            durable=True,
            arguments={
                "x-queue-type": "quorum",
                "x-delivery-limit": 5,
                "x-dead-letter-exchange": "dead_letter_exchange",
                "x-dead-letter-routing-key": "telegram.update.failed",
            },
        )

    def test_config_without_queue_is_refused(self, channel):
        config = RabbitMQConfig(host="rabbitmq", user="guest", password="guest")

        with pytest.raises(ValueError):
            RabbitMQBroker(channel, config)


class TestSettlement:
    def test_acknowledge(self, broker, channel):
        broker.acknowledge(7)

        channel.basic_ack.assert_called_once_with(delivery_tag=7)

    def test_reject_requeues(self, broker, channel):
        broker.reject(8)

        channel.basic_nack.assert_called_once_with(delivery_tag=8, requeue=True)

    def test_dead_letter_skips_requeue(self, broker, channel):
        broker.dead_letter(9)

        channel.basic_nack.assert_called_once_with(delivery_tag=9, requeue=False)
        channel.basic_ack.assert_not_called()


class TestConsume:
    def test_limits_prefetch_and_starts_consuming(self, broker, channel):
        broker.consume(MagicMock())

        channel.basic_qos.assert_called_once_with(prefetch_count=4)
        assert channel.basic_consume.call_args.kwargs["queue"] == (
            "voice_transcription_queue"
        )
        channel.start_consuming.assert_called_once_with()

    def test_callback_receives_body_tag_and_headers(self, broker, channel):
        callback = MagicMock()
        broker.consume(callback)
        on_update = channel.basic_consume.call_args.kwargs["on_message_callback"]

        on_update(
            channel,
            MagicMock(delivery_tag=12),
            MagicMock(headers={"x-delivery-count": 2}),
            b'{"update_id": 1}',
        )
        on_update(channel, MagicMock(delivery_tag=13), None, b"{}")

        assert callback.call_args_list == [
            call(b'{"update_id": 1}', 12, {"x-delivery-count": 2}),
            call(b"{}", 13, None),
        ]
