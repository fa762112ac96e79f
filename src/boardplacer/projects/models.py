"""Data models for the Projects client."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OwnerKind(str, Enum):
    """GraphQL root field that owns a project."""

    ORGANIZATION = "organization"
    USER = "user"


@dataclass(frozen=True)
class ProjectRef:
    """Project location parsed from a project URL.

    Attributes:
        owner_kind: Whether the project belongs to an organization or a user.
        owner_name: Login of the owning organization or user.
        number: Project number (visible in the project URL).
    """

    owner_kind: OwnerKind
    owner_name: str
    number: int


@dataclass(frozen=True)
class AttachedItem:
    """Project item linked to an existing issue or pull request."""

    item_id: str


@dataclass(frozen=True)
class DraftItem:
    """Draft project item standing in for content owned by another account."""

    item_id: str


BoardItem = AttachedItem | DraftItem


@dataclass
class FieldOption:
    """Single option of a single-select field."""

    option_id: str
    name: str


@dataclass
class SingleSelectField:
    """Single-select project field with its options in API order."""

    field_id: str
    options: list[FieldOption] = field(default_factory=list)


@dataclass
class Iteration:
    """Iteration period of an iteration field.

    Attributes:
        iteration_id: GitHub iteration ID.
        start_date: ISO formatted start date (e.g., "2024-02-01").
    """

    iteration_id: str
    start_date: str


@dataclass
class IterationField:
    """Iteration project field with its configured iterations in API order."""

    field_id: str
    iterations: list[Iteration] = field(default_factory=list)
