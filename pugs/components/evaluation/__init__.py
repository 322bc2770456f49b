from .evaluators import MultiLabelEvaluator, score_predictions
from .metrics import (
    PROBA_EPS,
    clamp_probabilities,
    exact_match_ratio,
    hamming_loss,
    labelling_f_score,
    log_loss,
    retrieval_f_score,
)

__all__ = [
    "MultiLabelEvaluator",
    "score_predictions",
    "PROBA_EPS",
    "clamp_probabilities",
    "exact_match_ratio",
    "hamming_loss",
    "labelling_f_score",
    "log_loss",
    "retrieval_f_score",
]
