"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from ghpm.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GhPmError,
    NotFoundError,
    RemoteError,
    TransportError,
    ValidationError,
)

_INPUT_ERRORS = (ConfigError, ValidationError, NotFoundError)
_REMOTE_ERRORS = (AuthenticationError, RemoteError, TransportError)


def _report(exc: GhPmError) -> None:
    print(f"error: {exc}", file=sys.stderr)
    if exc.hint:
        print(exc.hint, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    from ghpm.cli.commands.init import run_init
    from ghpm.cli.commands.metadata import run_metadata_show, run_metadata_sync
    from ghpm.cli.parser import build_parser

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "init":
            return run_init(args)
        if args.metadata_command == "sync":
            return run_metadata_sync(args)
        return run_metadata_show(args)
    except _INPUT_ERRORS as exc:
        _report(exc)
        return 3
    except _REMOTE_ERRORS as exc:
        _report(exc)
        return 4
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 2
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        print("Please report this issue with the output of `ghpm -v`.", file=sys.stderr)
        return 1


__all__ = ["main"]
