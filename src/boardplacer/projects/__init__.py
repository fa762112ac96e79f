"""Projects client - GraphQL access to GitHub Projects boards."""

from boardplacer.projects.client import (
    DEFAULT_GRAPHQL_URL,
    ITERATION_FIELD_NAME,
    ProjectsClient,
)
from boardplacer.projects.exceptions import (
    FieldNotFoundError,
    GraphQLRequestError,
    IterationNotFoundError,
    ProjectNotFoundError,
    ProjectsError,
    RemoteLookupError,
)
from boardplacer.projects.models import (
    AttachedItem,
    BoardItem,
    DraftItem,
    FieldOption,
    Iteration,
    IterationField,
    OwnerKind,
    ProjectRef,
    SingleSelectField,
)

__all__ = [
    "DEFAULT_GRAPHQL_URL",
    "ITERATION_FIELD_NAME",
    "AttachedItem",
    "BoardItem",
    "DraftItem",
    "FieldNotFoundError",
    "FieldOption",
    "GraphQLRequestError",
    "Iteration",
    "IterationField",
    "IterationNotFoundError",
    "OwnerKind",
    "ProjectNotFoundError",
    "ProjectRef",
    "ProjectsClient",
    "ProjectsError",
    "RemoteLookupError",
    "SingleSelectField",
]
