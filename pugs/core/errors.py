"""Engine exception types.

These are intentionally lightweight so they can be raised from compute paths
(sampling, aggregation, scoring) without importing any orchestration modules.
"""

from __future__ import annotations


class PugsError(Exception):
    """Base class for all engine errors."""


class ShapeError(PugsError, ValueError):
    """Raised when an array has the wrong rank or mismatched dimensions."""


class ParameterError(PugsError, ValueError):
    """Raised when a numeric parameter or selector violates its constraint."""


class RetentionError(ShapeError):
    """Raised when burn-in/thinning does not yield exactly ``n_iters`` samples."""


class ChainStepPredictionError(PugsError, ValueError):
    """Raised when a prediction capability returns something other than P(label=1)."""


class ChainSamplingError(PugsError, RuntimeError):
    """Raised when one ensemble member's sampling run fails.

    The whole inference call fails with it; no partial tensor is returned.
    """


class EmptyLabelSetWarning(UserWarning):
    """Emitted when instances/labels with an empty union are dropped from an F-score."""
