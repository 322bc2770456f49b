from .runner import EnsembleRunner, sample_member

__all__ = ["EnsembleRunner", "sample_member"]
