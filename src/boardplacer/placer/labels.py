"""Label filtering for the triggering issue or pull request."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class LabelDecision:
    """Outcome of the label filter.

    Attributes:
        proceed: Whether the content should be placed on the board.
        reason: Human readable skip reason (empty when proceeding).
    """

    proceed: bool
    reason: str = ""


def parse_labels(raw: str | None) -> frozenset[str]:
    """Parse a comma-separated label list into a normalized set."""
    if not raw:
        return frozenset()
    return frozenset(label.strip().lower() for label in raw.split(",") if label.strip())


def normalize_labels(labels: Iterable[str]) -> frozenset[str]:
    """Lowercase a collection of label names."""
    return frozenset(label.lower() for label in labels)


def should_place(
    labeled: frozenset[str],
    operator: str | None,
    content_labels: frozenset[str],
) -> LabelDecision:
    """Decide whether content qualifies based on its labels.

    Args:
        labeled: Configured labels, lowercase. May be empty.
        operator: "and", "not", anything else means "or". Case-insensitive.
        content_labels: Labels on the content, lowercase.

    Returns:
        LabelDecision telling the caller whether to proceed.
    """
    op = (operator or "").strip().lower()
    configured = ", ".join(sorted(labeled))

    if op == "and":
        if not labeled <= content_labels:
            return LabelDecision(False, f"it doesn't match all the labels: {configured}")
    elif op == "not":
        if labeled and labeled & content_labels:
            return LabelDecision(False, f"it contains one of the labels: {configured}")
    elif labeled and not labeled & content_labels:
        return LabelDecision(False, f"it does not have one of the labels: {configured}")

    return LabelDecision(True)
