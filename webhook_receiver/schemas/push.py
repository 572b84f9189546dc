"""Pydantic models for the GitHub push webhook payload."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# GitHub truncates the commits array of a push delivery at this many entries.
MAX_PUSH_COMMITS = 2048


class Identity(BaseModel):
    """Git author, committer or pusher metaproperties."""

    model_config = ConfigDict(strict=True, extra="allow")

    name: str
    email: str | None = None
    username: str | None = None
    date: str | None = None


class Commit(BaseModel):
    """A single commit within a GitHub push event."""

    model_config = ConfigDict(strict=True, extra="allow")

    id: str
    tree_id: str
    distinct: bool
    message: str
    timestamp: str
    url: str
    author: Identity
    committer: Identity
    added: list[str]
    modified: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)


class PushEvent(BaseModel):
    """GitHub push webhook event payload.

    ``repository``, ``sender``, ``organization``, ``installation`` and
    ``enterprise`` are kept as opaque JSON values: they are accepted and
    echoed back when the payload is rendered, but never interpreted. Keys no
    model declares are kept as extras, so the rendering echoes the whole
    delivery; declared fields are still type-checked strictly.

    Reference: https://docs.github.com/en/webhooks/webhook-events-and-payloads#push
    """

    model_config = ConfigDict(strict=True, extra="allow")

    ref: str
    before: str
    after: str
    created: bool
    deleted: bool
    forced: bool
    commits: list[Commit] = Field(max_length=MAX_PUSH_COMMITS)
    # Required key; GitHub sends null when the push deletes the ref.
    head_commit: Commit | None
    pusher: Identity
    base_ref: str | None = None
    compare: str | None = None

    repository: Any = None
    sender: Any = None
    organization: Any = None
    installation: Any = None
    enterprise: Any = None

    def render(self) -> str:
        """Pretty-print the fields that were present in the delivery as JSON."""
        return self.model_dump_json(indent=2, exclude_unset=True)
