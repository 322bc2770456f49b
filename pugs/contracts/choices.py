from __future__ import annotations

"""Literal-based "choice" types used across contracts.

Keep this file dependency-free (stdlib + typing only).
"""

from typing import Dict, Literal, TypeAlias


# -----------------------------
# Aggregation
# -----------------------------

AggregationMode: TypeAlias = Literal["class", "probability"]

# Accepted spellings -> canonical mode. "prob" is the historical short form.
AGGREGATION_ALIASES: Dict[str, AggregationMode] = {
    "class": "class",
    "probability": "probability",
    "prob": "probability",
}

DEFAULT_AGGREGATION_MODE: AggregationMode = "class"


# -----------------------------
# Metrics
# -----------------------------

# Display names used for tabular reports.
METRIC_DISPLAY_NAMES: Dict[str, str] = {
    "log_loss": "Logarithmic Loss",
    "exact_match_ratio": "Exact Match Ratio",
    "labelling_f_score": "Labelling F-score",
    "retrieval_f_score": "Retrieval F-score",
    "hamming_loss": "Hamming Loss",
}
