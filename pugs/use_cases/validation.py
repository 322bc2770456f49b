from __future__ import annotations

from typing import Any

from pugs.components.evaluation.evaluators import MultiLabelEvaluator
from pugs.contracts.results.inference import InferenceResult
from pugs.contracts.results.metrics import MetricsReport


def validate_pugs(result: InferenceResult, y: Any) -> MetricsReport:
    """Assess multi-label prediction accuracy of ``result`` against ``y``.

    ``y`` is the (n_instances, n_labels) 0/1 ground truth, in the label order
    of ``result.y_labels``.
    """
    return MultiLabelEvaluator().evaluate(result, y)
