"""ProjectsClient - GraphQL operations against GitHub Projects (ProjectsV2)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from boardplacer.projects.exceptions import (
    FieldNotFoundError,
    GraphQLRequestError,
    ProjectNotFoundError,
)
from boardplacer.projects.models import (
    FieldOption,
    Iteration,
    IterationField,
    ProjectRef,
    SingleSelectField,
)

logger = logging.getLogger("boardplacer.projects")

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"

# The iteration field is looked up by this fixed name
ITERATION_FIELD_NAME = "Iteration"

_GET_PROJECT_QUERY = """
query getProject($projectOwnerName: String!, $projectNumber: Int!) {
    %s(login: $projectOwnerName) {
        projectV2(number: $projectNumber) {
            id
        }
    }
}
"""

_ADD_ITEM_MUTATION = """
mutation addIssueToProject($input: AddProjectV2ItemByIdInput!) {
    addProjectV2ItemById(input: $input) {
        item {
            id
        }
    }
}
"""

_ADD_DRAFT_MUTATION = """
mutation addDraftIssueToProject($projectId: ID!, $title: String!) {
    addProjectV2DraftIssue(input: { projectId: $projectId, title: $title }) {
        projectItem {
            id
        }
    }
}
"""

_GET_OPTION_FIELD_QUERY = """
query getOptionField($projectId: ID!, $fieldName: String!) {
    node(id: $projectId) {
        ... on ProjectV2 {
            field(name: $fieldName) {
                ... on ProjectV2SingleSelectField {
                    id
                    options {
                        id
                        name
                    }
                }
            }
        }
    }
}
"""

_SET_OPTION_MUTATION = """
mutation addIssueToColumn($projectId: ID!, $itemId: ID!, $fieldId: ID!, $fieldOption: String!) {
    updateProjectV2ItemFieldValue(
        input: {
            projectId: $projectId
            itemId: $itemId
            fieldId: $fieldId
            value: { singleSelectOptionId: $fieldOption }
        }
    ) {
        projectV2Item {
            id
        }
    }
}
"""

_GET_ITERATION_FIELD_QUERY = """
query getIteration($projectId: ID!, $fieldName: String!) {
    node(id: $projectId) {
        ... on ProjectV2 {
            field(name: $fieldName) {
                ... on ProjectV2IterationField {
                    id
                    configuration {
                        iterations {
                            startDate
                            id
                        }
                    }
                }
            }
        }
    }
}
"""

_SET_ITERATION_MUTATION = """
mutation addIssueToIteration($projectId: ID!, $itemId: ID!, $fieldId: ID!, $iterationId: String!) {
    updateProjectV2ItemFieldValue(
        input: {
            projectId: $projectId
            itemId: $itemId
            fieldId: $fieldId
            value: { iterationId: $iterationId }
        }
    ) {
        projectV2Item {
            id
        }
    }
}
"""


def _item_id(data: dict[str, Any], mutation: str, item_key: str) -> str:
    """Extract the item ID from a mutation payload.

    Raises:
        GraphQLRequestError: If the payload or item is missing
    """
    item = (data.get(mutation) or {}).get(item_key) or {}
    item_id = item.get("id")
    if not item_id:
        raise GraphQLRequestError(f"{mutation} returned no {item_key} ID")
    return str(item_id)


class ProjectsClient:
    """Client for the GitHub Projects (ProjectsV2) GraphQL API.

    Every method issues exactly one blocking request. Nothing is cached
    between calls.
    """

    def __init__(self, token: str, base_url: str = DEFAULT_GRAPHQL_URL) -> None:
        """Initialize the client.

        Args:
            token: GitHub token with project scope
            base_url: GitHub GraphQL API URL (for testing/enterprise)
        """
        self.token = token
        self.base_url = base_url
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GraphQL API."""
        if self._client is None:
            self._client = httpx.Client(
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                },
                timeout=30.0,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> ProjectsClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            Response data

        Raises:
            GraphQLRequestError: If query fails
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = self.client.post(self.base_url, json=payload)

        if response.status_code != 200:
            raise GraphQLRequestError(
                f"GraphQL request failed: {response.status_code} - {response.text}"
            )

        try:
            data: dict[str, Any] = response.json()
        except ValueError as e:
            raise GraphQLRequestError(
                f"GraphQL response is not JSON: {response.text[:200]}"
            ) from e
        if not isinstance(data, dict):
            raise GraphQLRequestError(f"Unexpected GraphQL response: {data!r}")
        if "errors" in data:
            raise GraphQLRequestError(f"GraphQL errors: {data['errors']}")

        return dict(data.get("data") or {})

    def get_project_id(self, ref: ProjectRef) -> str:
        """Resolve a project reference to its node ID.

        Args:
            ref: Parsed project location

        Returns:
            Project node ID

        Raises:
            ProjectNotFoundError: If the owner or project does not exist
        """
        root = ref.owner_kind.value
        data = self._graphql(
            _GET_PROJECT_QUERY % root,
            {"projectOwnerName": ref.owner_name, "projectNumber": ref.number},
        )

        owner = data.get(root) or {}
        project = owner.get("projectV2") or {}
        project_id = project.get("id")
        if not project_id:
            raise ProjectNotFoundError(
                f"Project #{ref.number} not found for {root} {ref.owner_name}"
            )

        logger.debug("Project node ID: %s", project_id)
        return str(project_id)

    def add_existing_item(self, project_id: str, content_id: str | None) -> str:
        """Add an existing issue or pull request to the project.

        Args:
            project_id: Project node ID
            content_id: Node ID of the issue or pull request

        Returns:
            Project item ID
        """
        data = self._graphql(
            _ADD_ITEM_MUTATION,
            {"input": {"projectId": project_id, "contentId": content_id}},
        )
        return _item_id(data, "addProjectV2ItemById", "item")

    def add_draft_item(self, project_id: str, title: str | None) -> str:
        """Add a draft issue to the project.

        Args:
            project_id: Project node ID
            title: Draft issue title

        Returns:
            Project item ID
        """
        data = self._graphql(
            _ADD_DRAFT_MUTATION,
            {"projectId": project_id, "title": title},
        )
        return _item_id(data, "addProjectV2DraftIssue", "projectItem")

    def get_single_select_field(self, project_id: str, field_name: str) -> SingleSelectField:
        """Fetch a single-select field and its options by exact name.

        Args:
            project_id: Project node ID
            field_name: Field name as shown on the board

        Returns:
            SingleSelectField with options in API order

        Raises:
            FieldNotFoundError: If the field is missing or not single-select
        """
        data = self._graphql(
            _GET_OPTION_FIELD_QUERY,
            {"projectId": project_id, "fieldName": field_name},
        )

        field_node = (data.get("node") or {}).get("field")
        if not field_node or "id" not in field_node:
            raise FieldNotFoundError(f"Single-select field '{field_name}' not found in project")

        options = [
            FieldOption(option_id=opt["id"], name=opt["name"])
            for opt in field_node.get("options") or []
        ]
        return SingleSelectField(field_id=field_node["id"], options=options)

    def set_single_select_value(
        self,
        project_id: str,
        item_id: str,
        field_id: str,
        option_id: str | None,
    ) -> str:
        """Set a single-select field value on a project item.

        A None option_id is sent as-is and left for the API to reject.

        Returns:
            Project item ID returned by the mutation
        """
        data = self._graphql(
            _SET_OPTION_MUTATION,
            {
                "projectId": project_id,
                "itemId": item_id,
                "fieldId": field_id,
                "fieldOption": option_id,
            },
        )
        return _item_id(data, "updateProjectV2ItemFieldValue", "projectV2Item")

    def get_iteration_field(self, project_id: str) -> IterationField:
        """Fetch the project's "Iteration" field and its iterations.

        Args:
            project_id: Project node ID

        Returns:
            IterationField with iterations in API order

        Raises:
            FieldNotFoundError: If the project has no iteration field by that name
        """
        data = self._graphql(
            _GET_ITERATION_FIELD_QUERY,
            {"projectId": project_id, "fieldName": ITERATION_FIELD_NAME},
        )

        field_node = (data.get("node") or {}).get("field")
        if not field_node or "id" not in field_node:
            raise FieldNotFoundError(
                f"Iteration field '{ITERATION_FIELD_NAME}' not found in project"
            )

        configuration = field_node.get("configuration") or {}
        iterations = [
            Iteration(iteration_id=it["id"], start_date=it["startDate"])
            for it in configuration.get("iterations") or []
        ]
        return IterationField(field_id=field_node["id"], iterations=iterations)

    def set_iteration_value(
        self,
        project_id: str,
        item_id: str,
        field_id: str,
        iteration_id: str,
    ) -> str:
        """Assign a project item to an iteration.

        Returns:
            Project item ID returned by the mutation
        """
        data = self._graphql(
            _SET_ITERATION_MUTATION,
            {
                "projectId": project_id,
                "itemId": item_id,
                "fieldId": field_id,
                "iterationId": iteration_id,
            },
        )
        return _item_id(data, "updateProjectV2ItemFieldValue", "projectV2Item")
