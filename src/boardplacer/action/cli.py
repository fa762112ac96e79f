"""CLI entry point for boardplacer.

Every option falls back to the environment variable GitHub Actions sets for
the matching action input, so the command runs unchanged inside a workflow.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import httpx
from pydantic import ValidationError

from boardplacer.action.context import load_event
from boardplacer.action.inputs import ActionInputs, input_env_var
from boardplacer.action.outputs import GitHubOutputs
from boardplacer.exceptions import BoardPlacerError
from boardplacer.logging import get_logger, setup_logging
from boardplacer.placer import BoardItemPlacer, RunState
from boardplacer.projects import DEFAULT_GRAPHQL_URL, ProjectsClient

logger = get_logger("action.cli")


@click.command()
@click.option("--project-url", envvar=input_env_var("project-url"), default="")
@click.option("--github-token", envvar=input_env_var("github-token"), default="")
@click.option("--field-name", envvar=input_env_var("field-name"), default="")
@click.option("--field-option", envvar=input_env_var("field-option"), default="")
@click.option(
    "--labeled",
    envvar=input_env_var("labeled"),
    default="",
    help="Comma-separated labels to filter on",
)
@click.option(
    "--label-operator",
    envvar=input_env_var("label-operator"),
    default="",
    help="'and', 'not', or anything else for 'or'",
)
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the webhook event JSON",
)
@click.option(
    "--output-path",
    envvar="GITHUB_OUTPUT",
    type=click.Path(path_type=Path),
    default=None,
    help="File receiving action outputs (stdout when unset)",
)
@click.option(
    "--graphql-url",
    envvar="GITHUB_GRAPHQL_URL",
    default=DEFAULT_GRAPHQL_URL,
    show_default=True,
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="boardplacer")
def main(
    project_url: str,
    github_token: str,
    field_name: str,
    field_option: str,
    labeled: str,
    label_operator: str,
    event_path: Path | None,
    output_path: Path | None,
    graphql_url: str,
    verbose: bool,
) -> None:
    """Add the triggering issue or pull request to a project board."""
    setup_logging(level="DEBUG" if verbose else None)

    inputs = ActionInputs(
        project_url=project_url,
        github_token=github_token,
        field_name=field_name,
        field_option=field_option,
        labeled=labeled,
        label_operator=label_operator,
        graphql_url=graphql_url,
    )

    try:
        placer_inputs = inputs.to_placer_inputs()
        content = load_event(event_path).to_content_ref()

        with ProjectsClient(inputs.github_token, base_url=inputs.graphql_url) as client:
            placer = BoardItemPlacer(client, GitHubOutputs(output_path))
            result = placer.run(placer_inputs, content)

    except (BoardPlacerError, ValidationError, httpx.HTTPError) as e:
        logger.error("Run failed: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if result.state == RunState.SKIPPED:
        logger.info("Nothing to do")
    else:
        logger.info("Placed item %s on the board", result.item.item_id if result.item else None)


if __name__ == "__main__":
    main()
