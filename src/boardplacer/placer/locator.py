"""Project URL parsing."""

from __future__ import annotations

import re

from boardplacer.exceptions import InvalidProjectUrlError, UnsupportedOwnerTypeError
from boardplacer.projects.models import OwnerKind, ProjectRef

# https://github.com/orgs|users/<ownerName>/projects/<projectNumber>
PROJECT_URL_PATTERN = re.compile(
    r"^(?:https://)?github\.com/(?P<owner_type>orgs|users)/(?P<owner_name>[^/]+)"
    r"/projects/(?P<number>\d+)"
)

_OWNER_KINDS = {
    "orgs": OwnerKind.ORGANIZATION,
    "users": OwnerKind.USER,
}


def owner_kind_for(owner_type: str | None) -> OwnerKind:
    """Map a URL owner type token to the GraphQL owner root.

    Raises:
        UnsupportedOwnerTypeError: If the token is not 'orgs' or 'users'.
    """
    kind = _OWNER_KINDS.get(owner_type or "")
    if kind is None:
        raise UnsupportedOwnerTypeError(
            f"Unsupported ownerType: {owner_type}. Must be one of 'orgs' or 'users'"
        )
    return kind


def parse_project_url(url: str) -> ProjectRef:
    """Parse a GitHub project URL into a ProjectRef.

    Args:
        url: e.g. "https://github.com/orgs/acme/projects/7"

    Returns:
        ProjectRef for the board.

    Raises:
        InvalidProjectUrlError: If the URL does not match the expected format.
    """
    match = PROJECT_URL_PATTERN.match(url)
    if not match:
        raise InvalidProjectUrlError(
            f"Invalid project URL: {url}. Project URL should match the format "
            "https://github.com/<orgs-or-users>/<ownerName>/projects/<projectNumber>"
        )

    return ProjectRef(
        owner_kind=owner_kind_for(match.group("owner_type")),
        owner_name=match.group("owner_name"),
        number=int(match.group("number")),
    )
