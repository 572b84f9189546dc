"""Process entry point: serve the webhook receiver with uvicorn."""

import structlog
import uvicorn

from webhook_receiver.config import settings
from webhook_receiver.logging_config import configure_logging

logger = structlog.get_logger()


def main() -> None:
    """Run the ASGI server on the configured loopback address.

    uvicorn owns the accept loop and serves every connection on its own task.
    ``log_config=None`` leaves its loggers to the structlog-formatted root
    handler.
    """
    configure_logging(json_logs=not settings.debug, log_level=settings.log_level)
    logger.info("server_starting", url=f"http://{settings.host}:{settings.port}")
    uvicorn.run(
        "webhook_receiver.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
