"""GraphQL client for the GitHub API built on httpx."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from ghpm.contracts.exceptions import TransportError
from ghpm.providers.github._retrying_transport import RetryingTransport

_LOG = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"


class GitHubGraphQLClient:
    """Executes GraphQL operations against GitHub with a bearer token.

    Owns its ``httpx.Client`` unless one is injected. Use as a context manager
    so the connection pool is closed::

        with GitHubGraphQLClient(token=token) as client:
            resolver = ProjectResolver(client)
    """

    def __init__(
        self,
        *,
        token: str,
        url: str = GITHUB_GRAPHQL_URL,
        http_client: httpx.Client | None = None,
        max_retries: int = 3,
    ) -> None:
        self._url = url
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": "ghpm",
        }
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(
            transport=RetryingTransport(max_retries=max_retries),
            timeout=httpx.Timeout(30.0),
        )

    def __enter__(self) -> GitHubGraphQLClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Run *query* and return its ``data`` payload.

        Raises:
            TransportError: On HTTP failures, non-2xx responses, GraphQL
                ``errors`` or a missing ``data`` payload.
        """
        _LOG.debug("GraphQL request variables=%s", variables)
        try:
            response = self._http.post(
                self._url,
                json={"query": query, "variables": variables or {}},
                headers=self._headers,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise TransportError(f"GitHub returned HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"GitHub request failed: {exc}") from exc
        except ValueError as exc:
            raise TransportError("GitHub returned a non-JSON response") from exc

        errors = payload.get("errors") or []
        if errors:
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors
            )
            raise TransportError(f"GraphQL returned errors: {messages}")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise TransportError("GraphQL response missing data payload")
        return data
