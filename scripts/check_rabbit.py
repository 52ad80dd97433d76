# scripts/check_rabbit.py
import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
from book_archive.config.settings import get_settings
from book_archive.domain.models.record import BookArchived
from book_archive.infrastructure.messaging.rabbitmq_publisher import RabbitMQEventSink


async def check():
    sink = RabbitMQEventSink(get_settings().rabbitmq_url)

    await sink.publish(BookArchived(submitter="connectivity-check"))

    print("Published")
    await sink.close()

asyncio.run(check())
