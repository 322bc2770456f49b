from __future__ import annotations

"""Public shape/orientation utilities.

Conventions
-----------
- X is 2D: (n_instances, n_features); a pandas DataFrame is kept as-is so
  augmented columns can be named by label.
- Label matrices (ground truth, aggregated predictions) are 2D:
  (n_instances, n_labels) with values in {0, 1}.
- Sample tensors are 4D: (instances, labels, iterations, models).
"""

from typing import Any, Sequence, Union

import numpy as np
import pandas as pd

from pugs.core.errors import ParameterError, ShapeError

Features = Union[np.ndarray, pd.DataFrame]


def coerce_features(X: Any) -> Features:
    """Basic coercion for feature matrices.

    - DataFrames pass through unchanged.
    - 1D arrays are reshaped to (n_instances, 1).
    - Enforces 2D and at least one row.
    """

    if isinstance(X, pd.DataFrame):
        if X.shape[0] < 1:
            raise ShapeError(f"X must have at least 1 instance; got {X.shape}")
        return X

    X = np.asarray(X)
    if X.ndim == 1:
        X = X[:, None]

    if X.ndim != 2:
        raise ShapeError(f"X must be 2D; got {X.shape}")

    if X.shape[0] < 1:
        raise ShapeError(f"X must have at least 1 instance; got {X.shape}")

    return X


def coerce_label_matrix(y: Any, *, name: str = "y") -> np.ndarray:
    """Coerce a ground-truth/prediction label matrix to a 2D int array of 0/1."""

    Y = y.to_numpy() if isinstance(y, pd.DataFrame) else np.asarray(y)
    if Y.ndim == 1:
        Y = Y[:, None]
    if Y.ndim != 2:
        raise ShapeError(f"{name} must be 2D (n_instances, n_labels); got {Y.shape}")

    try:
        Yf = Y.astype(float)
    except (TypeError, ValueError) as e:
        raise ParameterError(f"{name} must be numeric 0/1 values") from e

    if not np.isin(Yf, (0.0, 1.0)).all():
        raise ParameterError(f"{name} must contain only 0/1 values")

    return Yf.astype(np.int64)


def ensure_sample_tensor(preds: Any) -> np.ndarray:
    """Strict check for the (instances, labels, iterations, models) tensor."""

    preds = np.asarray(preds)
    if preds.ndim != 4:
        raise ShapeError(
            "object should contain an instances x labels x iterations x models array; "
            f"got {preds.ndim}D array with shape {preds.shape}"
        )
    return preds


def ensure_same_grid(
    expected: Sequence[int],
    got: Sequence[int],
    *,
    what: str = "prediction set and test set",
) -> None:
    """Require matching (n_instances, n_labels)."""

    if tuple(expected) != tuple(got):
        raise ShapeError(
            f"{what} must have the same number of observations (instances) and "
            f"classes (labels): {tuple(expected)} vs {tuple(got)}"
        )
