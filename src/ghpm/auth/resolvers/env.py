"""Environment token resolver."""

from __future__ import annotations

import os

from ghpm.auth.base import TokenResolver
from ghpm.contracts.exceptions import AuthenticationError


class EnvTokenResolver(TokenResolver):
    async def resolve(self) -> str:
        token = (os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or "").strip()
        if not token:
            raise AuthenticationError("neither GH_TOKEN nor GITHUB_TOKEN is set")
        return token
