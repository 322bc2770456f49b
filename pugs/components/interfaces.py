from __future__ import annotations
from typing import Any, Optional, Protocol, Sequence

import numpy as np

from pugs.core.progress import ProgressCallback
from pugs.core.shapes import Features


class ChainStepPredictor(Protocol):
    def predict_positive(self, model: Any, X: Features) -> np.ndarray:
        """Return P(label = 1) per row of X, shape (n_instances,), values in [0, 1].

        X is the original feature matrix augmented with the other labels'
        current samples as binary columns.
        """
        ...


class ChainSampler(Protocol):
    def sample(
        self,
        X: Features,
        models: Sequence[Any],
        *,
        n_steps: int,
        rng: np.random.Generator,
        progress: Optional[ProgressCallback] = None,
    ) -> np.ndarray:
        """Run the full sampling schedule for one chain; return (n, L, n_steps) samples."""
        ...


class Aggregator(Protocol):
    def aggregate(self, preds: np.ndarray) -> np.ndarray:
        """Collapse a (n, L, iterations, models) tensor into an (n, L) matrix."""
        ...
