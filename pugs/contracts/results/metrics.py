from __future__ import annotations

from typing import Dict

import pandas as pd

from pugs.contracts.choices import METRIC_DISPLAY_NAMES

from .common import ResultModel


class MetricsReport(ResultModel):
    """Multi-label accuracy statistics for one prediction set.

    ``n_excluded_instances`` / ``n_excluded_labels`` count rows/columns dropped
    from the Labelling/Retrieval F-scores because neither the prediction nor
    the ground truth had a positive there.
    """

    log_loss: float
    exact_match_ratio: float
    labelling_f_score: float
    retrieval_f_score: float
    hamming_loss: float

    n_excluded_instances: int = 0
    n_excluded_labels: int = 0

    def scores(self) -> Dict[str, float]:
        return {k: float(getattr(self, k)) for k in METRIC_DISPLAY_NAMES}

    def to_frame(self) -> pd.DataFrame:
        """One-row table using the display names."""
        return pd.DataFrame(
            [{METRIC_DISPLAY_NAMES[k]: v for k, v in self.scores().items()}]
        )
