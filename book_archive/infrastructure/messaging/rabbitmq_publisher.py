# book_archive/infrastructure/messaging/rabbitmq_publisher.py

import json

import aio_pika

from book_archive.domain.models.record import BookArchived

EXCHANGE_ARCHIVE_EVENTS = "archive_events"
ROUTING_BOOK_ARCHIVED = "book.archived"


class RabbitMQEventSink:
    """Publishes BookArchived notifications to a durable topic exchange. Implements EventSink."""

    def __init__(self, url: str, exchange_name: str = EXCHANGE_ARCHIVE_EVENTS):
        self._url = url
        self._exchange_name = exchange_name
        self._connection = None
        self._channel = None
        self._exchange = None

    async def connect(self):
        self._connection = await aio_pika.connect_robust(self._url)
        self._channel = await self._connection.channel()
        self._exchange = await self._channel.declare_exchange(
            self._exchange_name,
            aio_pika.ExchangeType.TOPIC,
            durable=True,
        )

    async def publish(self, event: BookArchived) -> None:
        if not self._exchange:
            await self.connect()

        msg = aio_pika.Message(
            body=json.dumps({"event_type": "BookArchived", "submitter": event.submitter}).encode(),
            content_type="application/json",
            delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
        )

        await self._exchange.publish(msg, routing_key=ROUTING_BOOK_ARCHIVED)

    async def close(self):
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            self._channel = None
            self._exchange = None
