"""Shared pytest fixtures and configuration."""

import pytest

from boardplacer.placer import ContentRef, PlacerInputs


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: actual GitHub API calls (local only)")


@pytest.fixture
def placer_inputs() -> PlacerInputs:
    """Inputs targeting an organization project with no label filter."""
    return PlacerInputs(
        project_url="https://github.com/orgs/acme/projects/7",
        field_name="Status",
        field_option="Todo",
    )


@pytest.fixture
def same_owner_content() -> ContentRef:
    """An issue in a repository owned by the project owner."""
    return ContentRef(
        content_id="I_kwDOissue",
        owner_login="acme",
        url="https://github.com/acme/widgets/issues/42",
        number=42,
        labels=frozenset({"bug"}),
    )


@pytest.fixture
def other_owner_content() -> ContentRef:
    """An issue in a repository owned by another account."""
    return ContentRef(
        content_id="I_kwDOforeign",
        owner_login="someone-else",
        url="https://github.com/someone-else/tools/issues/5",
        number=5,
        labels=frozenset(),
    )
