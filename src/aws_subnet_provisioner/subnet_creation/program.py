import asyncio
import logging
import signal

import nats
from nats.aio.msg import Msg

from .config import WorkerConfig
from .config import load_worker_config
from .lib import CREATE_SUBNET_SUBJECT
from .lib import CompletionSignaler
from .lib import NatsPublisher
from .lib import SubnetCreationHandler

logger = logging.getLogger(__name__)


async def _log_connection_error(e: Exception) -> None:
    logger.error("NATS connection error: %s", e)


async def run_worker(config: WorkerConfig) -> None:
    """Consume subnet creation requests until SIGINT or SIGTERM, then drain the connection."""
    connection = await nats.connect(servers=[config.nats_uri], error_cb=_log_connection_error)
    loop = asyncio.get_running_loop()
    handler = SubnetCreationHandler(
        signaler=CompletionSignaler(publisher=NatsPublisher(connection=connection, loop=loop))
    )

    async def on_message(msg: Msg) -> None:
        # boto3 calls block, so keep them off the event loop
        await asyncio.to_thread(handler.handle, msg.data)

    _ = await connection.subscribe(CREATE_SUBNET_SUBJECT, cb=on_message)
    logger.info("Listening for %s on %s", CREATE_SUBNET_SUBJECT, config.nats_uri)

    stop = asyncio.Event()
    for signal_number in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(signal_number, stop.set)
    _ = await stop.wait()
    logger.info("Shutting down, draining NATS connection")
    await connection.drain()


def main() -> None:
    config = load_worker_config()
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(run_worker(config))


if __name__ == "__main__":
    main()
