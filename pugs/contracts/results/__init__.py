from .common import ResultModel
from .inference import InferenceResult
from .metrics import MetricsReport

__all__ = ["ResultModel", "InferenceResult", "MetricsReport"]
