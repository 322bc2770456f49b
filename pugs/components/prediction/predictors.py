from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

import numpy as np

from pugs.components.interfaces import ChainStepPredictor
from pugs.core.shapes import Features

from .predicting import positive_column, predict_positive_proba


@dataclass
class SklearnChainStepPredictor(ChainStepPredictor):
    """
    Adapter for scikit-learn-style classifiers (anything with predict_proba).
    No RNG; just returns the class-1 probability column.
    """

    def predict_positive(self, model: Any, X: Features) -> np.ndarray:
        return predict_positive_proba(model, X)


@dataclass
class CallableChainStepPredictor(ChainStepPredictor):
    """
    Adapter for a plain prediction function ``func(model, X, **kwargs)``.

    ``kwargs`` are forwarded verbatim on every call. The function may return a
    probability vector, a one-column matrix, a two-column (P0, P1) matrix or a
    DataFrame with a column named "1".
    """

    func: Callable[..., Any]
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def predict_positive(self, model: Any, X: Features) -> np.ndarray:
        out = self.func(model, X, **self.kwargs)
        return positive_column(out)
