from .aggregators import (
    TensorAggregator,
    aggregate_class,
    aggregate_frame,
    aggregate_probability,
    make_aggregator,
    resolve_mode,
)

__all__ = [
    "TensorAggregator",
    "aggregate_class",
    "aggregate_frame",
    "aggregate_probability",
    "make_aggregator",
    "resolve_mode",
]
