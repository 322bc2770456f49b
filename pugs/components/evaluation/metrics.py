from __future__ import annotations

"""Multi-label accuracy metrics.

All functions take (n_instances, n_labels) matrices. ``y_true`` and
``y_pred`` are 0/1; ``y_proba`` holds P(label = 1).
"""

import warnings
from typing import Tuple

import numpy as np
from sklearn.metrics import accuracy_score, hamming_loss as _sk_hamming_loss

from pugs.core.errors import EmptyLabelSetWarning, ShapeError

# Keeps log() finite for predictions that are exactly 0 or 1.
PROBA_EPS = 1e-7


def _check_grid(y_true: np.ndarray, other: np.ndarray, name: str) -> None:
    if y_true.shape != other.shape:
        raise ShapeError(f"Shape mismatch: y_true{y_true.shape} vs {name}{other.shape}.")


def clamp_probabilities(y_proba: np.ndarray, eps: float = PROBA_EPS) -> np.ndarray:
    """Move exact 0 to ``eps`` and exact 1 to ``1 - eps``; other values untouched."""
    p = np.asarray(y_proba, dtype=float)
    return p + eps * (p == 0.0) - eps * (p == 1.0)


def log_loss(y_true: np.ndarray, y_proba: np.ndarray, eps: float = PROBA_EPS) -> float:
    """Mean binary cross-entropy over every (instance, label) cell."""
    y = np.asarray(y_true, dtype=float)
    p = clamp_probabilities(y_proba, eps)
    _check_grid(y, p, "y_proba")
    return float(-np.mean(y * np.log(p) + (1.0 - y) * np.log(1.0 - p)))


def exact_match_ratio(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Fraction of instances whose whole label vector is predicted correctly."""
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)
    _check_grid(y_true, y_pred, "y_pred")
    return float(accuracy_score(y_true, y_pred))


def hamming_loss(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Fraction of (instance, label) cells predicted wrongly."""
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)
    _check_grid(y_true, y_pred, "y_pred")
    return float(_sk_hamming_loss(y_true, y_pred))


def overlap_ratios(y_true: np.ndarray, y_pred: np.ndarray, axis: int) -> np.ndarray:
    """|pred & true| / |pred | true| along ``axis``; NaN where the union is empty."""
    t = np.asarray(y_true) == 1
    p = np.asarray(y_pred) == 1
    _check_grid(t, p, "y_pred")
    inter = np.sum(t & p, axis=axis).astype(float)
    union = np.sum(t | p, axis=axis).astype(float)
    with np.errstate(invalid="ignore", divide="ignore"):
        return inter / union


def mean_excluding_empty(ratios: np.ndarray, *, what: str) -> Tuple[float, int]:
    """Mean over defined ratios; warn once with the number excluded.

    Returns (mean, n_excluded). The mean is NaN when nothing is left.

    The warning goes through the regular ``warnings`` filters, so a repeated
    call with the same count may print nothing (Python's default is once per
    location and message). ``MetricsReport.n_excluded_instances`` and
    ``n_excluded_labels`` always carry the counts.
    """
    ratios = np.asarray(ratios, dtype=float)
    undefined = np.isnan(ratios)
    n_excluded = int(undefined.sum())

    if n_excluded:
        warnings.warn(
            f"{n_excluded} {what} with no predicted and no true labels were removed "
            "from the F-score calculation. This is caused by observations (instances) "
            "which do not have any labels; place heavier emphasis on other accuracy metrics.",
            EmptyLabelSetWarning,
            stacklevel=3,
        )

    kept = ratios[~undefined]
    if kept.size == 0:
        return float("nan"), n_excluded
    return float(np.mean(kept)), n_excluded


def labelling_f_score(y_true: np.ndarray, y_pred: np.ndarray) -> Tuple[float, int]:
    """Per-instance overlap averaged over instances -> (score, n_excluded_instances)."""
    return mean_excluding_empty(overlap_ratios(y_true, y_pred, axis=1), what="instance(s)")


def retrieval_f_score(y_true: np.ndarray, y_pred: np.ndarray) -> Tuple[float, int]:
    """Per-label overlap averaged over labels -> (score, n_excluded_labels)."""
    return mean_excluding_empty(overlap_ratios(y_true, y_pred, axis=0), what="label(s)")
