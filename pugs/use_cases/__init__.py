from .inference import predict_ecc
from .summary import summarize
from .validation import validate_pugs

__all__ = ["predict_ecc", "summarize", "validate_pugs"]
