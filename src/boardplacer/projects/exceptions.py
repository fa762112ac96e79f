"""Custom exceptions for the Projects client."""

from boardplacer.exceptions import BoardPlacerError


class ProjectsError(BoardPlacerError):
    """Base exception for GitHub Projects client errors."""


class GraphQLRequestError(ProjectsError):
    """GraphQL request failed at the HTTP level or returned errors."""


class RemoteLookupError(ProjectsError):
    """A lookup against the project returned no result."""


class ProjectNotFoundError(RemoteLookupError):
    """GitHub Project not found for the given owner and number."""


class FieldNotFoundError(RemoteLookupError):
    """Project field with given name does not exist or has the wrong type."""


class IterationNotFoundError(RemoteLookupError):
    """Iteration field has no iterations configured."""
