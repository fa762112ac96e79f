"""Unit tests for project URL parsing."""

import pytest

from boardplacer.exceptions import (
    ConfigurationError,
    InvalidProjectUrlError,
    UnsupportedOwnerTypeError,
)
from boardplacer.placer import owner_kind_for, parse_project_url
from boardplacer.projects import OwnerKind, ProjectRef


@pytest.mark.unit
class TestOwnerKindFor:
    """Tests for owner_kind_for."""

    def test_orgs(self) -> None:
        """'orgs' maps to the organization root."""
        assert owner_kind_for("orgs") == OwnerKind.ORGANIZATION
        assert owner_kind_for("orgs").value == "organization"

    def test_users(self) -> None:
        """'users' maps to the user root."""
        assert owner_kind_for("users").value == "user"

    @pytest.mark.parametrize("token", ["repos", "ORGS", "", None])
    def test_other_values_raise(self, token: str | None) -> None:
        """Anything else is a configuration error."""
        with pytest.raises(UnsupportedOwnerTypeError) as exc_info:
            owner_kind_for(token)

        assert isinstance(exc_info.value, ConfigurationError)
        assert "'orgs' or 'users'" in str(exc_info.value)


@pytest.mark.unit
class TestParseProjectUrl:
    """Tests for parse_project_url."""

    def test_organization_url(self) -> None:
        """Full https organization URL."""
        ref = parse_project_url("https://github.com/orgs/acme/projects/7")
        assert ref == ProjectRef(OwnerKind.ORGANIZATION, "acme", 7)

    def test_user_url_without_scheme(self) -> None:
        """Scheme is optional."""
        ref = parse_project_url("github.com/users/octocat/projects/12")
        assert ref == ProjectRef(OwnerKind.USER, "octocat", 12)

    def test_trailing_path_allowed(self) -> None:
        """Views and query strings after the number are ignored."""
        ref = parse_project_url("https://github.com/orgs/acme/projects/7/views/2?layout=board")
        assert ref.number == 7

    def test_ref_is_immutable(self) -> None:
        """ProjectRef cannot be modified."""
        ref = parse_project_url("https://github.com/orgs/acme/projects/7")
        with pytest.raises(AttributeError):
            ref.number = 8  # type: ignore[misc]

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/acme/widgets/projects/7",
            "http://github.com/orgs/acme/projects/7",
            "https://gitlab.com/orgs/acme/projects/7",
            "https://github.com/orgs/acme/projects/",
            "https://github.com/orgs/acme/projects/seven",
            "",
        ],
    )
    def test_invalid_urls_raise(self, url: str) -> None:
        """Non-matching URLs raise InvalidProjectUrlError."""
        with pytest.raises(InvalidProjectUrlError) as exc_info:
            parse_project_url(url)

        assert isinstance(exc_info.value, ConfigurationError)
        assert "Invalid project URL" in str(exc_info.value)
