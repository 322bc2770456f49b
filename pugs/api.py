"""Public engine API.

This module is the **stable public surface** for inference, aggregation and
scoring. Prefer importing from here instead of reaching into subpackages:

    from pugs.api import EnsembleModel, predict_ecc, summarize, validate_pugs

The underlying implementations live under :mod:`pugs.use_cases`.
"""

from __future__ import annotations

from pugs.use_cases import predict_ecc, summarize, validate_pugs

# Non-use-case names that are still part of the stable public surface.
from pugs.components.interfaces import ChainStepPredictor
from pugs.components.prediction.predictors import (
    CallableChainStepPredictor,
    SklearnChainStepPredictor,
)
from pugs.contracts.ensemble import EnsembleModel
from pugs.contracts.inference_configs import InferenceConfig
from pugs.contracts.results.inference import InferenceResult
from pugs.contracts.results.metrics import MetricsReport
from pugs.core.errors import (
    ChainSamplingError,
    ChainStepPredictionError,
    EmptyLabelSetWarning,
    ParameterError,
    PugsError,
    RetentionError,
    ShapeError,
)
from pugs.core.progress import LoggingProgressCallback, NullProgress, ProgressCallback

__all__ = [
    "predict_ecc",
    "summarize",
    "validate_pugs",
    "ChainStepPredictor",
    "CallableChainStepPredictor",
    "SklearnChainStepPredictor",
    "EnsembleModel",
    "InferenceConfig",
    "InferenceResult",
    "MetricsReport",
    "PugsError",
    "ShapeError",
    "ParameterError",
    "RetentionError",
    "ChainStepPredictionError",
    "ChainSamplingError",
    "EmptyLabelSetWarning",
    "ProgressCallback",
    "NullProgress",
    "LoggingProgressCallback",
]
