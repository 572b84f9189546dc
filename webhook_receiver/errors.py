"""Errors raised while handling a webhook delivery.

``PayloadTooLargeError`` is a client-input error reported as 413.
``WebhookProcessingError`` collapses every internal failure (body read,
payload decode) into one opaque kind reported as an empty 500; the original
exception is kept as ``__cause__`` for logging.
"""


class PayloadTooLargeError(Exception):
    """The request body is, or is advertised to be, larger than allowed."""

    def __init__(self, limit: int, size: int | None = None) -> None:
        self.limit = limit
        self.size = size
        super().__init__(f"Request body exceeds {limit} bytes")


class WebhookProcessingError(Exception):
    """A delivery could not be read or decoded."""
