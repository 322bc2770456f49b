from __future__ import annotations

"""The PUGS result: label names plus the burnt-in, thinned sample tensor."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from pugs.contracts.inference_configs import InferenceConfig
from pugs.core.errors import ShapeError
from pugs.core.shapes import ensure_sample_tensor


@dataclass(frozen=True, eq=False)
class InferenceResult:
    """Output of one inference call.

    Attributes
    ----------
    y_labels : tuple of str
        Label names, one per tensor column on axis 1.
    preds : ndarray of shape (n_instances, n_labels, n_iters, n_models)
        Binary samples. Read-only.
    retained_iterations : ndarray of int, optional
        0-based indices (into each member's raw trajectory) that were kept.
    config : InferenceConfig, optional
        The configuration that produced the tensor.
    """

    y_labels: Tuple[str, ...]
    preds: np.ndarray
    retained_iterations: Optional[np.ndarray] = None
    config: Optional[InferenceConfig] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        preds = ensure_sample_tensor(self.preds)
        labels = tuple(str(lbl) for lbl in self.y_labels)
        if preds.shape[1] != len(labels):
            raise ShapeError(
                f"tensor has {preds.shape[1]} labels on axis 1 but {len(labels)} label names were given"
            )

        preds = np.array(preds, copy=True)
        preds.setflags(write=False)
        object.__setattr__(self, "preds", preds)
        object.__setattr__(self, "y_labels", labels)

        if self.retained_iterations is not None:
            idx = np.array(self.retained_iterations, dtype=np.int64, copy=True)
            idx.setflags(write=False)
            object.__setattr__(self, "retained_iterations", idx)

    @property
    def n_instances(self) -> int:
        return int(self.preds.shape[0])

    @property
    def n_labels(self) -> int:
        return int(self.preds.shape[1])

    @property
    def n_iters(self) -> int:
        return int(self.preds.shape[2])

    @property
    def n_models(self) -> int:
        return int(self.preds.shape[3])
