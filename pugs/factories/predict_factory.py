from __future__ import annotations
from typing import Any, Callable, Optional, Union

from pugs.components.interfaces import ChainStepPredictor
from pugs.components.prediction.predictors import (
    CallableChainStepPredictor,
    SklearnChainStepPredictor,
)

PredictorSpec = Union[None, ChainStepPredictor, Callable[..., Any]]


def make_step_predictor(predictor: PredictorSpec = None, **kwargs: Any) -> ChainStepPredictor:
    """Resolve the P(label = 1) capability.

    - None                          -> sklearn-style ``predict_proba`` adapter
    - object with predict_positive  -> used as-is
    - plain callable                -> ``func(model, X, **kwargs)``

    ``kwargs`` are passthrough parameters for a plain callable; they cannot be
    combined with the other two forms.
    """
    if predictor is None or hasattr(predictor, "predict_positive"):
        if kwargs:
            raise TypeError(
                "passthrough prediction arguments are only supported with a plain "
                f"prediction function; got {sorted(kwargs)}"
            )
        return SklearnChainStepPredictor() if predictor is None else predictor

    if callable(predictor):
        return CallableChainStepPredictor(func=predictor, kwargs=dict(kwargs))

    raise TypeError(
        f"predictor must be None, a ChainStepPredictor or a callable; got {type(predictor).__name__}"
    )
