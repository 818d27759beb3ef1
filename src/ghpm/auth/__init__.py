"""Auth module public exports."""

from ghpm.auth.base import TokenResolver
from ghpm.auth.factory import create_token_resolver, resolve_token

__all__ = ["TokenResolver", "create_token_resolver", "resolve_token"]
