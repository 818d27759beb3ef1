"""Token resolver factory."""

from __future__ import annotations

import asyncio

from ghpm.auth.base import TokenResolver
from ghpm.auth.resolvers.env import EnvTokenResolver
from ghpm.auth.resolvers.gh_cli import GhCliTokenResolver
from ghpm.auth.resolvers.static import StaticTokenResolver
from ghpm.contracts.config import GhPmConfig
from ghpm.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "gh-cli": GhCliTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: GhPmConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "gh-cli":
        return GhCliTokenResolver()
    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")


def resolve_token(config: GhPmConfig) -> str:
    """Resolve the configured token from synchronous code."""
    return asyncio.run(create_token_resolver(config).resolve())
