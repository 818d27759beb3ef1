"""Project discovery and lookup over a GraphQL query executor."""

from __future__ import annotations

import logging
from typing import Any

from ghpm.contracts.exceptions import NotFoundError, RemoteError, TransportError, ValidationError
from ghpm.contracts.executor import QueryExecutor
from ghpm.contracts.project import FieldDescriptor, Project, ProjectScope
from ghpm.providers.github import queries
from ghpm.providers.github.mapper import dig, field_from_node, project_from_node

_LOG = logging.getLogger(__name__)


class ProjectResolver:
    """Lists and resolves projects by repository, organization or user.

    Every listing follows the ``pageInfo`` cursor until the remote reports no
    further pages. A failure on any page aborts the whole call; nothing is
    retried here, retries belong to the executor.
    """

    def __init__(self, executor: QueryExecutor) -> None:
        self._executor = executor

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_for_repository(self, owner: str, repo: str) -> list[Project]:
        nodes = self._paginate(
            f"list projects for repository {owner}/{repo}",
            queries.LIST_REPOSITORY_PROJECTS,
            {"owner": owner, "repo": repo},
            ("repository", "projectsV2"),
        )
        return _projects(nodes)

    def list_for_organization(self, org: str) -> list[Project]:
        nodes = self._paginate(
            f"list projects for organization {org}",
            queries.LIST_ORGANIZATION_PROJECTS,
            {"org": org},
            ("organization", "projectsV2"),
        )
        return _projects(nodes)

    def list_for_user(self, login: str) -> list[Project]:
        nodes = self._paginate(
            f"list projects for user {login}",
            queries.LIST_USER_PROJECTS,
            {"login": login},
            ("user", "projectsV2"),
        )
        return _projects(nodes)

    def list_projects(self, scope: ProjectScope) -> list[Project]:
        """Dispatch to the listing for *scope*'s kind."""
        if scope.kind == "repository":
            return self.list_for_repository(scope.owner, scope.repo)
        if scope.kind == "organization":
            return self.list_for_organization(scope.owner)
        return self.list_for_user(scope.owner or self.viewer_login())

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, scope: ProjectScope, *, name: str | None = None, number: int = 0) -> Project:
        """Find one project in *scope* by number, or else by title.

        A positive *number* takes precedence and the name is ignored. Titles
        match case-insensitively and exactly.

        Raises:
            ValidationError: If neither a name nor a positive number is given.
            NotFoundError: If nothing in *scope* matches.
            RemoteError: If listing the scope fails.
        """
        if number <= 0 and not name:
            raise ValidationError("a project name or number is required")

        projects = self.list_projects(scope)
        if number > 0:
            for project in projects:
                if project.number == number:
                    return project
            raise NotFoundError(f"project #{number} not found in {scope.label}")

        wanted = (name or "").lower()
        for project in projects:
            if project.title.lower() == wanted:
                return project
        raise NotFoundError(f"project {name!r} not found in {scope.label}")

    def fetch_fields(self, project_id: str) -> list[FieldDescriptor]:
        """Fetch every field of a project; unrecognised node shapes are skipped."""
        nodes = self._paginate(
            f"fetch fields for project {project_id}",
            queries.FETCH_PROJECT_FIELDS,
            {"projectId": project_id},
            ("node", "fields"),
        )
        fields = [field_from_node(node) for node in nodes]
        return [field for field in fields if field is not None]

    def viewer_login(self) -> str:
        """Return the login of the authenticated user."""
        data = self._execute("fetch the authenticated user", queries.VIEWER_LOGIN, {})
        login = dig(data, ("viewer", "login"))
        if not login:
            raise RemoteError("failed to fetch the authenticated user: response has no viewer login")
        return login

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _execute(self, operation: str, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        try:
            return self._executor.execute(query, variables)
        except TransportError as exc:
            raise RemoteError(f"failed to {operation}: {exc}") from exc

    def _paginate(
        self,
        operation: str,
        query: str,
        variables: dict[str, Any],
        path: tuple[str, ...],
    ) -> list[dict[str, Any]]:
        nodes: list[dict[str, Any]] = []
        cursor: str | None = None
        page = 0
        while True:
            page += 1
            data = self._execute(operation, query, {**variables, "cursor": cursor})
            connection = dig(data, path)
            if connection is None:
                _LOG.debug("%s: no connection at %s", operation, ".".join(path))
                break
            nodes.extend(node for node in connection.get("nodes") or [] if node)
            page_info = connection.get("pageInfo") or {}
            _LOG.debug("%s: page %d, %d node(s) so far", operation, page, len(nodes))
            if not page_info.get("hasNextPage"):
                break
            cursor = page_info.get("endCursor")
            if not cursor:
                raise RemoteError(f"failed to {operation}: page {page} has more results but no end cursor")
        return nodes


def _projects(nodes: list[dict[str, Any]]) -> list[Project]:
    projects = [project_from_node(node) for node in nodes]
    return [project for project in projects if project is not None]
