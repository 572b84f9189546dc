"""GitHub webhook delivery headers and the supported event kinds."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


class EventKind(str, Enum):
    """Event names this receiver knows how to handle."""

    PING = "ping"
    PUSH = "push"


@dataclass(frozen=True)
class UnknownEvent:
    """Any event name outside :class:`EventKind`, including the empty string."""

    name: str


WebhookEvent = EventKind | UnknownEvent


def parse_event(name: str) -> WebhookEvent:
    """Map an ``X-GitHub-Event`` value onto the closed set of event kinds."""
    try:
        return EventKind(name)
    except ValueError:
        return UnknownEvent(name)


class WebhookHeaders(BaseModel):
    """GitHub-specific headers sent with every webhook delivery.

    Values are copied verbatim; nothing is validated. The signature headers
    are only present when the webhook is configured with a secret.

    Reference: https://docs.github.com/en/webhooks/webhook-events-and-payloads#delivery-headers
    """

    hook_id: str = ""
    event: str = ""
    delivery: str = ""
    signature: str | None = None
    signature_256: str | None = None
    user_agent: str = ""
    installation_target_type: str = ""
    installation_target_id: str = ""

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> WebhookHeaders:
        """Build the record from a request header mapping."""
        return cls(
            hook_id=headers.get("X-GitHub-Hook-ID", ""),
            event=headers.get("X-GitHub-Event", ""),
            delivery=headers.get("X-GitHub-Delivery", ""),
            signature=headers.get("X-Hub-Signature"),
            signature_256=headers.get("X-Hub-Signature-256"),
            user_agent=headers.get("User-Agent", ""),
            installation_target_type=headers.get("X-GitHub-Hook-Installation-Target-Type", ""),
            installation_target_id=headers.get("X-GitHub-Hook-Installation-Target-ID", ""),
        )

    @property
    def event_kind(self) -> WebhookEvent:
        return parse_event(self.event)
