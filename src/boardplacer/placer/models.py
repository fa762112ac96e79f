"""Data models for the BoardItemPlacer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from boardplacer.projects.models import BoardItem


class RunState(str, Enum):
    """Per-run placement state."""

    START = "start"
    SKIPPED = "skipped"
    PROJECT_RESOLVED = "project_resolved"
    ITEM_CREATED = "item_created"
    FIELD_ASSIGNED = "field_assigned"
    ITERATION_ASSIGNED = "iteration_assigned"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ContentRef:
    """The issue or pull request that triggered the run.

    Attributes:
        content_id: GraphQL node ID of the issue or pull request.
        owner_login: Login of the repository owner.
        url: HTML URL of the issue or pull request.
        number: Issue or pull request number (for log messages).
        labels: Lowercase label names.
    """

    content_id: str | None
    owner_login: str | None
    url: str | None
    number: int | None = None
    labels: frozenset[str] = frozenset()


@dataclass(frozen=True)
class PlacerInputs:
    """Configuration for a single placement run.

    Attributes:
        project_url: URL of the target project board.
        field_name: Name of the single-select field to set.
        field_option: Name of the option to select.
        labeled: Configured label filter, lowercase.
        label_operator: "and", "not", or anything else for "or".
    """

    project_url: str
    field_name: str
    field_option: str
    labeled: frozenset[str] = frozenset()
    label_operator: str = ""


@dataclass
class PlacementResult:
    """Outcome of a placement run.

    Attributes:
        state: Terminal state reached. DONE or SKIPPED when run returns,
            FAILED when run raised (see BoardItemPlacer.last_result).
        project_id: Resolved project node ID.
        item: Item created on the board.
        field_option_id: Option ID sent in the single-select mutation.
        iteration_id: Iteration the item was assigned to.
        skip_reason: Why the label filter skipped the content.
        published: Every itemId value published, in order.
    """

    state: RunState = RunState.START
    project_id: str | None = None
    item: BoardItem | None = None
    field_option_id: str | None = None
    iteration_id: str | None = None
    skip_reason: str | None = None
    published: list[str] = field(default_factory=list)


class OutputSink(Protocol):
    """Destination for observable run outputs."""

    def set_output(self, name: str, value: str) -> None:
        """Publish an output value. Later writes replace earlier ones."""
        ...
