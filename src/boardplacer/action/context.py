"""Trigger context read from the GitHub Actions event payload."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from boardplacer.logging import get_logger
from boardplacer.placer.labels import normalize_labels
from boardplacer.placer.models import ContentRef

logger = get_logger("action.context")


class LabelPayload(BaseModel):
    """Label attached to an issue or pull request."""

    name: str


class ContentPayload(BaseModel):
    """Issue or pull request fields used for placement."""

    node_id: str | None = None
    number: int | None = None
    html_url: str | None = None
    labels: list[LabelPayload] = Field(default_factory=list)


class OwnerPayload(BaseModel):
    """Repository owner."""

    login: str | None = None


class RepositoryPayload(BaseModel):
    """Repository the event was raised in."""

    owner: OwnerPayload | None = None


class EventPayload(BaseModel):
    """Subset of an issues / pull_request webhook payload."""

    issue: ContentPayload | None = None
    pull_request: ContentPayload | None = None
    repository: RepositoryPayload | None = None

    @property
    def content(self) -> ContentPayload | None:
        """The issue, or failing that the pull request."""
        return self.issue or self.pull_request

    def to_content_ref(self) -> ContentRef:
        """Build the ContentRef handed to the placer.

        Missing issue/pull request or repository data yields None fields.
        """
        content = self.content
        owner = self.repository.owner if self.repository else None
        if content is None:
            logger.warning("Event payload has neither an issue nor a pull request")
            return ContentRef(
                content_id=None,
                owner_login=owner.login if owner else None,
                url=None,
            )

        return ContentRef(
            content_id=content.node_id,
            owner_login=owner.login if owner else None,
            url=content.html_url,
            number=content.number,
            labels=normalize_labels(label.name for label in content.labels),
        )


def load_event(path: str | Path | None) -> EventPayload:
    """Load the event payload from the file GitHub Actions provides.

    An unset or missing path gives an empty payload.
    """
    if not path:
        logger.debug("No event path set; using empty payload")
        return EventPayload()

    event_path = Path(path)
    if not event_path.exists():
        logger.warning("Event file %s does not exist; using empty payload", event_path)
        return EventPayload()

    return EventPayload.model_validate_json(event_path.read_text(encoding="utf-8"))
