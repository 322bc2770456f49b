from __future__ import annotations

"""Gibbs-style sampling over one classifier chain.

Each label is re-predicted in turn from the original features plus the other
labels' most recent samples. Within a sweep the order is fixed; a label that
was already updated in the current sweep contributes its fresh value, every
other label contributes the value from the previous sweep.

The sequential dependency is spelled out by :func:`gibbs_step`: it reads the
trajectory and returns the new column without writing anything. Only
:class:`GibbsChainSampler` owns (and writes) the trajectory.
"""

import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from pugs.components.interfaces import ChainSampler, ChainStepPredictor
from pugs.components.prediction.predicting import check_probabilities
from pugs.core.errors import ParameterError, ShapeError
from pugs.core.progress import NullProgress, ProgressCallback
from pugs.core.shapes import Features, coerce_features


def resolve_label_order(label_order: Optional[Sequence[int]], n_labels: int) -> np.ndarray:
    """Validate a sweep order (0-based permutation); None -> natural order."""
    if label_order is None:
        return np.arange(n_labels)
    order = np.asarray(list(label_order), dtype=np.int64)
    if order.shape != (n_labels,) or not np.array_equal(np.sort(order), np.arange(n_labels)):
        raise ParameterError(
            f"label_order must be a permutation of 0..{n_labels - 1}; got {list(label_order)}"
        )
    return order


def check_feature_names(X: Features, label_names: Sequence[str]) -> None:
    """DataFrame features must not already carry a column named like a label."""
    if not isinstance(X, pd.DataFrame):
        return
    clash = set(map(str, label_names)) & set(map(str, X.columns))
    if clash:
        raise ShapeError(f"feature columns collide with label names: {sorted(clash)}")


def order_ranks(order: np.ndarray) -> np.ndarray:
    """rank[l] = position of label l within the sweep."""
    ranks = np.empty_like(order)
    ranks[order] = np.arange(order.size)
    return ranks


def conditioning_sources(iteration: int, label: int, ranks: np.ndarray) -> np.ndarray:
    """Iteration index each label is read from when updating ``label`` at ``iteration``.

    Labels swept before ``label`` are read from ``iteration`` itself; the
    rest (including ``label``) from ``iteration - 1``.
    """
    return np.where(ranks < ranks[label], iteration, iteration - 1)


def conditioning_matrix(
    trajectory: np.ndarray,
    iteration: int,
    label: int,
    ranks: np.ndarray,
) -> np.ndarray:
    """(n, L-1) matrix of the other labels' freshest samples, natural label order."""
    n_labels = trajectory.shape[1]
    src = conditioning_sources(iteration, label, ranks)
    others = [j for j in range(n_labels) if j != label]
    if not others:
        return np.empty((trajectory.shape[0], 0), dtype=trajectory.dtype)
    return np.stack([trajectory[:, j, src[j]] for j in others], axis=1)


def augment_features(
    X: Features,
    conditioning: np.ndarray,
    names: Sequence[str],
) -> Features:
    """Append conditioning columns to X. DataFrames get columns named by label."""
    if isinstance(X, pd.DataFrame):
        check_feature_names(X, names)
        cond = pd.DataFrame(conditioning, index=X.index, columns=list(names))
        return pd.concat([X, cond], axis=1)
    return np.hstack([X, conditioning])


def gibbs_step(
    trajectory: np.ndarray,
    iteration: int,
    label: int,
    *,
    X: Features,
    model: Any,
    predictor: ChainStepPredictor,
    rng: np.random.Generator,
    ranks: np.ndarray,
    label_names: Sequence[str],
) -> np.ndarray:
    """Draw label ``label`` at ``iteration`` for every instance.

    Reads ``trajectory[:, j, iteration]`` for labels swept earlier in this
    pass and ``trajectory[:, j, iteration - 1]`` for the rest. Returns a new
    (n,) uint8 column; ``trajectory`` is not modified.
    """
    if iteration < 1:
        raise ParameterError("iteration 0 is the random seed state; steps start at 1")

    cond = conditioning_matrix(trajectory, iteration, label, ranks)
    names = [label_names[j] for j in range(len(label_names)) if j != label]
    augmented = augment_features(X, cond, names)

    p = check_probabilities(predictor.predict_positive(model, augmented), trajectory.shape[0])
    return rng.binomial(1, p).astype(np.uint8)


@dataclass
class GibbsChainSampler(ChainSampler):
    """
    Sampler for one ensemble member.

    Parameters
    ----------
    predictor : ChainStepPredictor
        The P(label = 1) capability.
    label_names : sequence of str
        Names used for conditioning columns when X is a DataFrame.
    label_order : sequence of int, optional
        Sweep order over labels; natural order when omitted.
    member_id : int
        Only used in progress messages.
    """

    predictor: ChainStepPredictor
    label_names: Sequence[str]
    label_order: Optional[Sequence[int]] = None
    member_id: int = 0

    def sample(
        self,
        X: Features,
        models: Sequence[Any],
        *,
        n_steps: int,
        rng: np.random.Generator,
        progress: Optional[ProgressCallback] = None,
    ) -> np.ndarray:
        X = coerce_features(X)
        models = list(models)
        n_labels = len(self.label_names)

        if len(models) != n_labels:
            raise ShapeError(
                f"chain has {len(models)} models but there are {n_labels} labels"
            )
        if n_steps < 1:
            raise ParameterError(f"n_steps must be >= 1; got {n_steps}")

        ranks = order_ranks(resolve_label_order(self.label_order, n_labels))
        order = np.argsort(ranks)
        progress = progress or NullProgress()

        n = X.shape[0]
        trajectory = np.zeros((n, n_labels, n_steps), dtype=np.uint8)
        trajectory[:, :, 0] = rng.binomial(1, 0.5, size=(n, n_labels))

        progress.init(total=n_steps, label=f"Model {self.member_id}")
        progress.update(current=1, label=f"Model {self.member_id} finished iteration 1")

        for it in range(1, n_steps):
            t0 = time.perf_counter()
            for label in order:
                trajectory[:, label, it] = gibbs_step(
                    trajectory,
                    it,
                    int(label),
                    X=X,
                    model=models[label],
                    predictor=self.predictor,
                    rng=rng,
                    ranks=ranks,
                    label_names=self.label_names,
                )
            elapsed = time.perf_counter() - t0
            progress.update(
                current=it + 1,
                label=f"Model {self.member_id} finished iteration {it + 1} (took {elapsed:.3f} seconds)",
            )

        progress.finalize(label=f"Model {self.member_id} done")
        return trajectory
