"""Concrete token resolvers."""

from ghpm.auth.resolvers.env import EnvTokenResolver
from ghpm.auth.resolvers.gh_cli import GhCliTokenResolver
from ghpm.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
