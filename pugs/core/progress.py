from __future__ import annotations

"""Progress reporting primitives.

The engine must remain runnable without any specific console or UI.
Long-running use-cases (Gibbs sampling over many iterations and members)
optionally accept a progress callback; the default is a silent no-op so
test runs stay quiet and deterministic.

Callers can adapt their own progress bars to this protocol.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol


class ProgressCallback(Protocol):
    """A minimal progress reporting interface."""

    def init(self, *, total: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:  # pragma: no cover
        ...


class NullProgress:
    """Progress sink that ignores everything."""

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        return None

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        return None

    def finalize(self, *, label: Optional[str] = None) -> None:
        return None


@dataclass
class LoggingProgressCallback:
    """Write progress events to a stdlib logger.

    Used when a caller asks for a non-silent run but supplies no callback.
    """

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("pugs.progress"))
    level: int = logging.INFO
    _total: int = 0

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        self._total = int(total)
        self.logger.log(self.level, "%s (total=%d)", label or "Starting", self._total)

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        pct = 100.0 * current / self._total if self._total else 0.0
        self.logger.log(self.level, "%s : %.2f%% done", label or f"Step {current}", pct)

    def finalize(self, *, label: Optional[str] = None) -> None:
        self.logger.log(self.level, "%s", label or "Done")


def resolve_progress(progress: Optional[ProgressCallback], *, silent: bool) -> ProgressCallback:
    """Return ``progress`` if given, else a logger-backed or no-op callback."""

    if progress is not None:
        return progress
    return NullProgress() if silent else LoggingProgressCallback()
