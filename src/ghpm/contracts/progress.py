"""Progress reporting contract for metadata synchronization."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SyncProgress(Protocol):
    def phase_start(self, phase: str, total: int | None = None) -> None: ...

    def phase_done(self, phase: str) -> None: ...

    def phase_error(self, phase: str, error: BaseException) -> None: ...
