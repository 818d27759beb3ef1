"""Tests for RichSyncProgress."""

from __future__ import annotations

import io

from rich.console import Console

from ghpm.cli.progress import RichSyncProgress
from ghpm.contracts.executor import QueryExecutor
from ghpm.contracts.progress import SyncProgress
from ghpm.providers.github.client import GitHubGraphQLClient


def _console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=80)


def test_protocols_are_satisfied() -> None:
    assert issubclass(RichSyncProgress, SyncProgress)
    assert issubclass(GitHubGraphQLClient, QueryExecutor)


def test_context_manager() -> None:
    progress = RichSyncProgress(_console())
    with progress as p:
        assert p is progress


def test_phases_run_sequentially() -> None:
    with RichSyncProgress(_console()) as progress:
        for phase in ("Resolve", "Fields", "Build"):
            progress.phase_start(phase)
            progress.phase_done(phase)

        assert set(progress._task_ids) == {"Resolve", "Fields", "Build"}


def test_unknown_phase_is_noop() -> None:
    with RichSyncProgress(_console()) as progress:
        progress.phase_done("Unknown")
        progress.phase_error("Unknown", RuntimeError("x"))


def test_phase_error_marks_task_failed() -> None:
    with RichSyncProgress(_console()) as progress:
        progress.phase_start("Fields")
        progress.phase_error("Fields", RuntimeError("HTTP 502"))

        task = progress._progress.tasks[0]
        assert "✗" in task.description
