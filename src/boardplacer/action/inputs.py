"""Action input configuration."""

from __future__ import annotations

from dataclasses import dataclass

from boardplacer.exceptions import MissingInputError
from boardplacer.placer.labels import parse_labels
from boardplacer.placer.models import PlacerInputs
from boardplacer.projects.client import DEFAULT_GRAPHQL_URL

REQUIRED_INPUTS = ("project-url", "github-token", "field-name", "field-option")


def input_env_var(name: str) -> str:
    """Environment variable GitHub Actions uses for an input, e.g. INPUT_PROJECT-URL."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


@dataclass
class ActionInputs:
    """Raw action inputs as provided by the workflow.

    Attributes:
        project_url: URL of the target project board.
        github_token: Token used for the GraphQL API.
        field_name: Single-select field to set.
        field_option: Option name to select.
        labeled: Comma-separated label filter.
        label_operator: "and", "not", or anything else for "or".
        graphql_url: GraphQL endpoint (GitHub Enterprise support).
    """

    project_url: str = ""
    github_token: str = ""
    field_name: str = ""
    field_option: str = ""
    labeled: str = ""
    label_operator: str = ""
    graphql_url: str = DEFAULT_GRAPHQL_URL

    def validate(self) -> None:
        """Check that every required input was supplied.

        Raises:
            MissingInputError: Naming the first missing input.
        """
        for name in REQUIRED_INPUTS:
            value = getattr(self, name.replace("-", "_"))
            if not value or not value.strip():
                raise MissingInputError(f"Input required and not supplied: {name}")

    def to_placer_inputs(self) -> PlacerInputs:
        """Normalize into the placer's run configuration."""
        self.validate()
        return PlacerInputs(
            project_url=self.project_url.strip(),
            field_name=self.field_name.strip(),
            field_option=self.field_option.strip(),
            labeled=parse_labels(self.labeled),
            label_operator=self.label_operator.strip().lower(),
        )
