"""Placer package - label filtering and board placement sequencing."""

from boardplacer.placer.labels import LabelDecision, normalize_labels, parse_labels, should_place
from boardplacer.placer.locator import owner_kind_for, parse_project_url
from boardplacer.placer.models import (
    ContentRef,
    OutputSink,
    PlacementResult,
    PlacerInputs,
    RunState,
)
from boardplacer.placer.placer import (
    ITEM_ID_OUTPUT,
    BoardItemPlacer,
    find_option_id,
    latest_iteration,
)

__all__ = [
    "ITEM_ID_OUTPUT",
    "BoardItemPlacer",
    "ContentRef",
    "LabelDecision",
    "OutputSink",
    "PlacementResult",
    "PlacerInputs",
    "RunState",
    "find_option_id",
    "latest_iteration",
    "normalize_labels",
    "owner_kind_for",
    "parse_labels",
    "parse_project_url",
    "should_place",
]
