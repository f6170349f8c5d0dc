import asyncio
import logging

from nats.aio.client import Client as NatsClient

logger = logging.getLogger(__name__)


class NatsPublisher:
    """Publishes on a NATS connection owned by an event loop running in another thread.

    `publish` blocks until the message has been handed to the connection, so it must not be called from the
    loop's own thread.
    """

    def __init__(self, *, connection: NatsClient, loop: asyncio.AbstractEventLoop):
        self._connection = connection
        self._loop = loop

    def publish(self, subject: str, payload: bytes) -> None:
        future = asyncio.run_coroutine_threadsafe(self._connection.publish(subject, payload), self._loop)
        future.result()
        logger.debug("Published %d bytes on %s", len(payload), subject)
