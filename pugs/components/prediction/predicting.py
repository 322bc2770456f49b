from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from pugs.core.errors import ChainStepPredictionError


def positive_column(
    output: Any,
    *,
    classes: Optional[Sequence[Any]] = None,
) -> np.ndarray:
    """
    Pull the P(label = 1) column out of a prediction function's output.

    Accepted shapes
    ---------------
    - 1D vector / Series            -> used as-is
    - DataFrame                     -> column "1" (or 1); a lone column is used as-is
    - 2D array with 1 column        -> that column
    - 2D array with 2 columns       -> column for class 1 (``classes`` if given,
                                       otherwise the second column)

    Raises
    ------
    ChainStepPredictionError
        If no positive-class column can be identified.
    """
    if isinstance(output, pd.Series):
        return output.to_numpy()

    if isinstance(output, pd.DataFrame):
        for key in ("1", 1, 1.0, True):
            if key in output.columns:
                return output[key].to_numpy()
        if output.shape[1] == 1:
            return output.iloc[:, 0].to_numpy()
        raise ChainStepPredictionError(
            f"prediction output has no column named '1'; got columns {list(output.columns)}"
        )

    arr = np.asarray(output)
    if arr.ndim == 1:
        return arr
    if arr.ndim != 2:
        raise ChainStepPredictionError(
            f"prediction output must be 1D or 2D; got shape {arr.shape}"
        )
    if arr.shape[1] == 1:
        return arr[:, 0]

    if classes is not None:
        cls = list(classes)
        for key in (1, "1", True):
            if key in cls:
                return arr[:, cls.index(key)]
        raise ChainStepPredictionError(
            f"positive class 1 not among model classes {cls}"
        )

    if arr.shape[1] == 2:
        return arr[:, 1]

    raise ChainStepPredictionError(
        f"cannot identify the P(label=1) column in output of shape {arr.shape}"
    )


def check_probabilities(p: Any, n_instances: int) -> np.ndarray:
    """Validate a P(label = 1) vector: length n, finite, within [0, 1].

    Out-of-range values are an error (no clamping): a predictor that returns
    them is broken, and silently clipping would hide it.
    """
    try:
        p = np.asarray(p, dtype=float).ravel()
    except (TypeError, ValueError) as e:
        raise ChainStepPredictionError("predicted probabilities must be numeric") from e

    if p.shape[0] != n_instances:
        raise ChainStepPredictionError(
            f"expected one probability per instance ({n_instances}); got {p.shape[0]}"
        )
    if not np.all(np.isfinite(p)):
        raise ChainStepPredictionError("predicted probabilities contain NaN or inf")
    if np.any((p < 0.0) | (p > 1.0)):
        lo, hi = float(p.min()), float(p.max())
        raise ChainStepPredictionError(
            f"predicted probabilities must lie in [0, 1]; got range [{lo:.6g}, {hi:.6g}]"
        )
    return p


def predict_positive_proba(model: Any, X: Any) -> np.ndarray:
    """
    P(label = 1) from a scikit-learn-style binary classifier.

    Uses ``predict_proba`` and ``classes_`` to locate class 1. A model fitted on
    a single class (all 0 or all 1) yields a constant 0 or 1 vector.

    Raises
    ------
    AttributeError
        If `model` has no `.predict_proba(...)`.
    """
    if not hasattr(model, "predict_proba"):
        raise AttributeError("`model` has no `.predict_proba(...)` method.")

    proba = np.asarray(model.predict_proba(X))
    classes = getattr(model, "classes_", None)

    if classes is not None and len(classes) == 1:
        only = classes[0]
        is_pos = only in (1, "1", True)
        return np.full(proba.shape[0], 1.0 if is_pos else 0.0)

    return positive_column(proba, classes=classes)
