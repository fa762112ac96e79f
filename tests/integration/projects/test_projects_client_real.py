"""Integration tests for ProjectsClient against the GitHub API.

These tests require:
- GITHUB_TOKEN environment variable (with project scope)
- GITHUB_TEST_PROJECT_URL environment variable
  (e.g., "https://github.com/users/octocat/projects/1")
- A single-select "Status" field and an "Iteration" field on that project

They create a draft item on the board. Run with: pytest tests/integration/ -m real
"""

import os
from collections.abc import Iterator

import pytest

from boardplacer.placer import latest_iteration, parse_project_url
from boardplacer.projects import ProjectsClient

# Skip all tests in this module if credentials not available
pytestmark = [
    pytest.mark.integration,
    pytest.mark.real,
    pytest.mark.skipif(
        not os.environ.get("GITHUB_TOKEN") or not os.environ.get("GITHUB_TEST_PROJECT_URL"),
        reason="GITHUB_TOKEN and GITHUB_TEST_PROJECT_URL required",
    ),
]


@pytest.fixture
def client() -> Iterator[ProjectsClient]:
    """Create a ProjectsClient for the test project."""
    with ProjectsClient(token=os.environ["GITHUB_TOKEN"]) as client:
        yield client


@pytest.fixture
def project_id(client: ProjectsClient) -> str:
    """Resolve the test project."""
    return client.get_project_id(parse_project_url(os.environ["GITHUB_TEST_PROJECT_URL"]))


class TestDraftPlacement:
    """Draft item -> status -> iteration against a real board."""

    def test_place_draft_item(self, client: ProjectsClient, project_id: str) -> None:
        """Draft item gets the first Status option and the latest iteration."""
        item_id = client.add_draft_item(project_id, "boardplacer integration test")
        assert item_id

        status = client.get_single_select_field(project_id, "Status")
        assert status.options, "Status field has no options"
        updated = client.set_single_select_value(
            project_id, item_id, status.field_id, status.options[0].option_id
        )
        assert updated == item_id

        iteration_field = client.get_iteration_field(project_id)
        iteration = latest_iteration(iteration_field.iterations)
        updated = client.set_iteration_value(
            project_id, item_id, iteration_field.field_id, iteration.iteration_id
        )
        assert updated == item_id
