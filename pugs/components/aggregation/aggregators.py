from __future__ import annotations

"""Collapse a (instances, labels, iterations, models) sample tensor.

Both modes reduce iterations first (within each model), then models.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

import numpy as np
import pandas as pd

from pugs.components.interfaces import Aggregator
from pugs.contracts.choices import (
    AGGREGATION_ALIASES,
    DEFAULT_AGGREGATION_MODE,
    AggregationMode,
)
from pugs.core.errors import ParameterError, ShapeError
from pugs.core.shapes import ensure_sample_tensor

# (instances, labels, iterations, models): iterations are reduced first,
# leaving models on the last axis.
ITER_AXIS = 2


def resolve_mode(mode: Optional[str]) -> AggregationMode:
    """None -> default mode; any unrecognized string (including "") is an error."""
    if mode is None:
        return DEFAULT_AGGREGATION_MODE
    if not isinstance(mode, str) or mode not in AGGREGATION_ALIASES:
        raise ParameterError(
            f"type should be either 'class' or 'probability' (alias 'prob'); got {mode!r}"
        )
    return AGGREGATION_ALIASES[mode]


def majority(votes: np.ndarray, axis: int) -> np.ndarray:
    """1 where strictly more than half of ``votes`` along ``axis`` are 1; ties -> 0."""
    return (np.mean(votes, axis=axis) > 0.5).astype(np.int64)


def aggregate_probability(preds: np.ndarray) -> np.ndarray:
    preds = ensure_sample_tensor(preds)
    per_model = np.mean(preds, axis=ITER_AXIS, dtype=float)
    return np.mean(per_model, axis=-1)


def aggregate_class(preds: np.ndarray) -> np.ndarray:
    preds = ensure_sample_tensor(preds)
    per_model = majority(preds, axis=ITER_AXIS)
    return majority(per_model, axis=-1)


_REDUCERS: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "class": aggregate_class,
    "probability": aggregate_probability,
}


@dataclass(frozen=True)
class TensorAggregator(Aggregator):
    """Aggregator bound to one mode."""

    mode: AggregationMode = DEFAULT_AGGREGATION_MODE

    def aggregate(self, preds: np.ndarray) -> np.ndarray:
        return _REDUCERS[self.mode](preds)


def make_aggregator(mode: Optional[str] = None) -> TensorAggregator:
    return TensorAggregator(mode=resolve_mode(mode))


def aggregate_frame(
    preds: np.ndarray,
    y_labels: Sequence[str],
    mode: Optional[str] = None,
) -> pd.DataFrame:
    """Aggregate and label the columns. Returns a fresh frame on every call."""
    agg = make_aggregator(mode)
    out = agg.aggregate(preds)
    if out.shape[1] != len(y_labels):
        raise ShapeError(
            f"{out.shape[1]} aggregated labels but {len(y_labels)} label names"
        )
    return pd.DataFrame(out, columns=list(y_labels))
