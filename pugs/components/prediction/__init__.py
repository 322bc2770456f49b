from .predicting import check_probabilities, positive_column, predict_positive_proba
from .predictors import CallableChainStepPredictor, SklearnChainStepPredictor

__all__ = [
    "check_probabilities",
    "positive_column",
    "predict_positive_proba",
    "CallableChainStepPredictor",
    "SklearnChainStepPredictor",
]
