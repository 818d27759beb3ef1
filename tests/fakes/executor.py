"""Scripted GraphQL executor for resolver and manager tests."""

from __future__ import annotations

from typing import Any


class FakeExecutor:
    """Returns queued responses in order; queued exceptions are raised instead."""

    def __init__(self, responses: list[dict[str, Any] | Exception] | None = None) -> None:
        self._responses = list(responses or [])
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def queue(self, *responses: dict[str, Any] | Exception) -> None:
        self._responses.extend(responses)

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        self.calls.append((query, dict(variables or {})))
        if not self._responses:
            raise AssertionError(f"unexpected query: {query.strip().splitlines()[0]}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def remaining(self) -> int:
        return len(self._responses)


def project_node(number: int, title: str, *, owner: str = "acme", typename: str = "Organization") -> dict[str, Any]:
    return {
        "id": f"PVT_{number}",
        "number": number,
        "title": title,
        "url": f"https://github.com/orgs/{owner}/projects/{number}",
        "owner": {"__typename": typename, "login": owner},
    }


def connection_page(
    root: str,
    connection: str,
    nodes: list[dict[str, Any]],
    *,
    has_next: bool = False,
    cursor: str | None = None,
) -> dict[str, Any]:
    return {root: {connection: {"nodes": nodes, "pageInfo": {"hasNextPage": has_next, "endCursor": cursor}}}}


def field_node(
    field_id: str,
    name: str,
    data_type: str = "SINGLE_SELECT",
    options: list[tuple[str, str]] | None = None,
) -> dict[str, Any]:
    node: dict[str, Any] = {"id": field_id, "name": name, "dataType": data_type}
    if options is not None:
        node["options"] = [{"id": option_id, "name": option_name} for option_id, option_name in options]
    return node
