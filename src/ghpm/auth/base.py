"""Token resolver interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    """Produces the GitHub token used by the GraphQL client."""

    @abstractmethod
    async def resolve(self) -> str:
        """Return a non-empty token or raise :class:`AuthenticationError`."""
