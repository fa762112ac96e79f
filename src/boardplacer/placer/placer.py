"""BoardItemPlacer - places an issue or pull request on a project board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from boardplacer.placer.labels import should_place
from boardplacer.placer.locator import parse_project_url
from boardplacer.placer.models import PlacementResult, RunState
from boardplacer.projects.exceptions import IterationNotFoundError
from boardplacer.projects.models import AttachedItem, DraftItem

if TYPE_CHECKING:
    from boardplacer.placer.models import ContentRef, OutputSink, PlacerInputs
    from boardplacer.projects import ProjectsClient
    from boardplacer.projects.models import (
        BoardItem,
        Iteration,
        ProjectRef,
        SingleSelectField,
    )

logger = logging.getLogger(__name__)

ITEM_ID_OUTPUT = "itemId"


def find_option_id(field: SingleSelectField, option_name: str) -> str | None:
    """Return the ID of the option named exactly option_name, or None."""
    for option in field.options:
        if option.name == option_name:
            return option.option_id
    return None


def latest_iteration(iterations: list[Iteration]) -> Iteration:
    """Pick the iteration with the latest start date.

    Start dates are ISO strings, so string order is chronological. On a tie
    the first iteration in API order wins: a later iteration with an equal
    start date never replaces an earlier one.

    Raises:
        IterationNotFoundError: If there are no iterations.
    """
    if not iterations:
        raise IterationNotFoundError("Iteration field has no iterations")
    return max(iterations, key=lambda iteration: iteration.start_date)


class BoardItemPlacer:
    """Runs the placement sequence for one trigger event.

    The sequence is strictly linear:
    - Label filter (may end the run early without any remote call)
    - Resolve the project from its URL
    - Attach the content, or create a draft item for it
    - Set the configured single-select field
    - Assign the latest iteration

    Any failure stops the run. Mutations already applied are not rolled back.
    """

    def __init__(self, client: ProjectsClient, outputs: OutputSink) -> None:
        """Initialize the placer.

        Args:
            client: ProjectsClient used for every remote call.
            outputs: Sink receiving the itemId output.
        """
        self.client = client
        self.outputs = outputs
        self.last_result: PlacementResult | None = None

    def run(self, inputs: PlacerInputs, content: ContentRef) -> PlacementResult:
        """Place the content on the board.

        Args:
            inputs: Run configuration.
            content: The triggering issue or pull request.

        Returns:
            PlacementResult in state DONE, or SKIPPED if the label filter
            rejected the content.

        Raises:
            ConfigurationError: If the project URL is invalid.
            ProjectsError: If a lookup or mutation fails.
        """
        result = PlacementResult()
        self.last_result = result

        logger.debug("Issue/PR owner: %s", content.owner_login)

        decision = should_place(inputs.labeled, inputs.label_operator, content.labels)
        if not decision.proceed:
            logger.info("Skipping issue %s because %s", content.number, decision.reason)
            result.state = RunState.SKIPPED
            result.skip_reason = decision.reason
            return result

        try:
            self._place(inputs, content, result)
        except Exception as e:
            logger.error("Placement failed after state %s: %s", result.state.value, e)
            result.state = RunState.FAILED
            raise

        result.state = RunState.DONE
        return result

    def _place(self, inputs: PlacerInputs, content: ContentRef, result: PlacementResult) -> None:
        logger.debug("Project URL: %s", inputs.project_url)
        ref = parse_project_url(inputs.project_url)
        logger.debug(
            "Project owner: %s, number: %d, owner type: %s",
            ref.owner_name,
            ref.number,
            ref.owner_kind.value,
        )

        project_id = self.client.get_project_id(ref)
        result.project_id = project_id
        result.state = RunState.PROJECT_RESOLVED
        logger.debug("Content ID: %s", content.content_id)

        item = self.resolve_item(ref, project_id, content)
        result.item = item
        result.state = RunState.ITEM_CREATED
        self._publish(result, item.item_id)
        logger.debug("Created Item ID: %s", item.item_id)

        field = self.client.get_single_select_field(project_id, inputs.field_name)
        logger.debug("Field ID: %s", field.field_id)
        option_id = find_option_id(field, inputs.field_option)
        if option_id is None:
            logger.warning(
                "Option '%s' not found in field '%s'; available: %s",
                inputs.field_option,
                inputs.field_name,
                [option.name for option in field.options],
            )
        logger.debug("Field option ID: %s", option_id)

        result.field_option_id = option_id
        updated_id = self.client.set_single_select_value(
            project_id, item.item_id, field.field_id, option_id
        )
        result.state = RunState.FIELD_ASSIGNED
        self._publish(result, updated_id)

        iteration_field = self.client.get_iteration_field(project_id)
        # Iterations are not expected to overlap
        iteration = latest_iteration(iteration_field.iterations)
        logger.debug("Iteration Field ID: %s", iteration_field.field_id)
        logger.debug("Iteration ID: %s", iteration.iteration_id)

        result.iteration_id = iteration.iteration_id
        updated_id = self.client.set_iteration_value(
            project_id, item.item_id, iteration_field.field_id, iteration.iteration_id
        )
        result.state = RunState.ITERATION_ASSIGNED
        self._publish(result, updated_id)

    def resolve_item(self, ref: ProjectRef, project_id: str, content: ContentRef) -> BoardItem:
        """Add the content to the project.

        Content owned by the project owner is attached directly. Anything else
        becomes a draft item titled with the content URL, since the API cannot
        attach content owned by a different account.
        """
        if content.owner_login == ref.owner_name:
            logger.info("Creating project item")
            return AttachedItem(self.client.add_existing_item(project_id, content.content_id))

        logger.info("Creating draft issue in project")
        return DraftItem(self.client.add_draft_item(project_id, content.url))

    def _publish(self, result: PlacementResult, item_id: str) -> None:
        self.outputs.set_output(ITEM_ID_OUTPUT, item_id)
        result.published.append(item_id)
