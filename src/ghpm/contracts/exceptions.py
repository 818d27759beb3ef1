"""Exception hierarchy for ghpm.

All ghpm exceptions inherit from :class:`GhPmError`, so callers can catch any
library error with a single ``except`` clause while still handling specific
failure modes. Every class carries a ``hint`` the CLI prints after the message.
"""

from __future__ import annotations


class GhPmError(Exception):
    """Base exception for all ghpm errors."""

    hint = ""


class ConfigError(GhPmError):
    """Configuration loading or validation failure."""

    hint = "Check your .gh-pm.json file format and try again."


class ValidationError(GhPmError):
    """A required entity was missing or invalid (e.g. no project selected)."""

    hint = "Check the supplied project name or number and try again."


class NotFoundError(GhPmError):
    """A named or numbered lookup matched nothing in the given scope."""

    hint = "Check the supplied project name or number and try again."


class TransportError(GhPmError):
    """The GraphQL executor failed to deliver a usable response."""

    hint = "Check your network connection and GitHub authentication (gh auth status)."


class RemoteError(GhPmError):
    """A remote query failed; wraps the underlying :class:`TransportError`."""

    hint = "Check your network connection and GitHub authentication (gh auth status)."


class AuthenticationError(GhPmError):
    """Authentication token could not be resolved."""

    hint = "Run `gh auth login` or set GITHUB_TOKEN and retry."
