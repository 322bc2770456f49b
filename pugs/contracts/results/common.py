from __future__ import annotations

"""Result contracts.

These models represent *outputs* produced by the engine and are intended to
be stable for callers.

Design goals:
- JSON-friendly field types (scalars, lists) at the contract boundary.
- Strict top-level validation (extra fields forbidden) to prevent silent drift.

Array-carrying results (the sample tensor) are dataclasses instead; see
:mod:`pugs.contracts.results.inference`.
"""

from pydantic import BaseModel, ConfigDict


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")
