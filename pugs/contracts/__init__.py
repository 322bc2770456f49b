"""Engine contracts.

Configuration models (pydantic), choice types and result contracts.

Keep module imports explicit in most of the codebase:
    from pugs.contracts.inference_configs import InferenceConfig
The names re-exported here are a small set of convenience imports.
"""

from .choices import AggregationMode
from .ensemble import EnsembleModel
from .inference_configs import InferenceConfig, build_inference_config
from .results import InferenceResult, MetricsReport

__all__ = [
    "AggregationMode",
    "EnsembleModel",
    "InferenceConfig",
    "build_inference_config",
    "InferenceResult",
    "MetricsReport",
]
