from __future__ import annotations

from typing import Optional

import pandas as pd

from pugs.components.aggregation.aggregators import aggregate_frame
from pugs.contracts.results.inference import InferenceResult


def summarize(result: InferenceResult, mode: Optional[str] = None) -> pd.DataFrame:
    """Collapse samples across iterations and chains into one prediction per cell.

    ``mode="class"`` (default) gives 0/1 majority votes, ``mode="probability"``
    (or ``"prob"``) the averaged empirical P(label = 1).
    """
    if not isinstance(result, InferenceResult):
        raise TypeError(f"expected an InferenceResult; got {type(result).__name__}")
    return aggregate_frame(result.preds, result.y_labels, mode)
