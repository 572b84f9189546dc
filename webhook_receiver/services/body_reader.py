"""Size-limited request body collection.

The limit is checked twice: once against the advertised ``Content-Length``
before any byte is read, and again while the body streams in, so a client
that omits or understates the header cannot push an unbounded body.
"""

from collections.abc import Mapping

from starlette.requests import Request

from webhook_receiver.errors import PayloadTooLargeError


def advertised_length(headers: Mapping[str, str]) -> int | None:
    """Return the declared ``Content-Length``, or None if absent or malformed."""
    raw = headers.get("content-length")
    if raw is None:
        return None
    try:
        length = int(raw)
    except ValueError:
        return None
    return length if length >= 0 else None


def check_advertised_length(headers: Mapping[str, str], limit: int) -> None:
    """Reject a request whose declared body length exceeds *limit*.

    Raises:
        PayloadTooLargeError: If the advertised length is above the limit.
    """
    length = advertised_length(headers)
    if length is not None and length > limit:
        raise PayloadTooLargeError(limit, length)


async def read_limited_body(request: Request, limit: int) -> bytes:
    """Collect the request body into one buffer, stopping past *limit* bytes.

    Raises:
        PayloadTooLargeError: As soon as more than *limit* bytes have arrived.
        starlette.requests.ClientDisconnect: If the client goes away mid-body.
    """
    check_advertised_length(request.headers, limit)

    buffer = bytearray()
    async for chunk in request.stream():
        buffer.extend(chunk)
        if len(buffer) > limit:
            raise PayloadTooLargeError(limit, len(buffer))
    return bytes(buffer)
