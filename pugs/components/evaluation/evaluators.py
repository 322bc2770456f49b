from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
import pandas as pd

from pugs.components.aggregation.aggregators import aggregate_class, aggregate_probability
from pugs.contracts.results.inference import InferenceResult
from pugs.contracts.results.metrics import MetricsReport
from pugs.core.shapes import coerce_label_matrix, ensure_same_grid

from .metrics import (
    PROBA_EPS,
    exact_match_ratio,
    hamming_loss,
    labelling_f_score,
    log_loss,
    retrieval_f_score,
)


def align_label_columns(y: Any, y_labels: Sequence[str]) -> Any:
    """Reorder a ground-truth DataFrame to ``y_labels`` when its columns are those labels."""
    if not isinstance(y, pd.DataFrame):
        return y
    by_name = {str(c): c for c in y.columns}
    if len(by_name) == len(y.columns) and set(by_name) == set(y_labels):
        return y[[by_name[lbl] for lbl in y_labels]]
    return y


def score_predictions(
    y_true: Any,
    y_pred: np.ndarray,
    y_proba: np.ndarray,
    *,
    eps: float = PROBA_EPS,
) -> MetricsReport:
    """Compute the report from already aggregated class/probability matrices."""
    Y = coerce_label_matrix(y_true)
    y_pred = coerce_label_matrix(y_pred, name="y_pred")
    y_proba = np.asarray(y_proba, dtype=float)
    ensure_same_grid(y_pred.shape, Y.shape)
    ensure_same_grid(y_proba.shape, Y.shape)

    lab_f, n_inst = labelling_f_score(Y, y_pred)
    ret_f, n_lab = retrieval_f_score(Y, y_pred)

    return MetricsReport(
        log_loss=log_loss(Y, y_proba, eps),
        exact_match_ratio=exact_match_ratio(Y, y_pred),
        labelling_f_score=lab_f,
        retrieval_f_score=ret_f,
        hamming_loss=hamming_loss(Y, y_pred),
        n_excluded_instances=n_inst,
        n_excluded_labels=n_lab,
    )


@dataclass
class MultiLabelEvaluator:
    """
    Score a PUGS result against ground truth.

    Probability aggregation feeds the log loss; class aggregation feeds the
    other four statistics.
    """

    eps: float = PROBA_EPS

    def evaluate(self, result: InferenceResult, y: Any) -> MetricsReport:
        if not isinstance(result, InferenceResult):
            raise TypeError(
                "can only operate on multi-label predictions made using Gibbs sampling "
                f"(InferenceResult objects); got {type(result).__name__}"
            )

        Y = coerce_label_matrix(align_label_columns(y, result.y_labels))
        ensure_same_grid((result.n_instances, result.n_labels), Y.shape)

        return score_predictions(
            Y,
            aggregate_class(result.preds),
            aggregate_probability(result.preds),
            eps=self.eps,
        )
