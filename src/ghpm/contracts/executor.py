"""Query executor contract."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class QueryExecutor(Protocol):
    """Runs one GraphQL operation and returns its ``data`` payload.

    Implementations own authentication, retries and transport timeouts, and
    raise :class:`ghpm.contracts.exceptions.TransportError` on failure.
    """

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]: ...
