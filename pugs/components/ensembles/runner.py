from __future__ import annotations

"""Ensemble execution harness.

One Gibbs sampler per ensemble member. Members share no mutable state
(X and the model handles are only read), so they can run in separate worker
processes; within a member everything is strictly sequential.

Every member draws from its own seeded stream, so the tensor does not depend
on the worker count or on the order in which members finish.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import numpy as np
from joblib import Parallel, delayed

from pugs.components.interfaces import ChainStepPredictor
from pugs.components.sampling.gibbs import (
    GibbsChainSampler,
    check_feature_names,
    resolve_label_order,
)
from pugs.components.sampling.retention import (
    retain_iterations,
    retained_iteration_indices,
    sampling_horizon,
)
from pugs.contracts.ensemble import EnsembleModel
from pugs.contracts.results.inference import InferenceResult
from pugs.core.errors import ChainSamplingError, ParameterError, ShapeError
from pugs.core.progress import NullProgress, ProgressCallback
from pugs.core.shapes import Features, coerce_features
from pugs.runtime.random.rng import RngManager


def sample_member(
    member_id: int,
    X: Features,
    models: Sequence[Any],
    *,
    predictor: ChainStepPredictor,
    label_names: Sequence[str],
    label_order: Optional[Sequence[int]],
    n_steps: int,
    seed: int,
    progress: Optional[ProgressCallback] = None,
) -> np.ndarray:
    """Run one member's full schedule.

    Shape and parameter errors propagate as-is; any other failure becomes
    ChainSamplingError naming the member.
    """
    sampler = GibbsChainSampler(
        predictor=predictor,
        label_names=label_names,
        label_order=label_order,
        member_id=member_id,
    )
    try:
        return sampler.sample(
            X,
            models,
            n_steps=n_steps,
            rng=np.random.default_rng(seed),
            progress=progress,
        )
    except (ParameterError, ShapeError):
        raise
    except Exception as e:
        raise ChainSamplingError(
            f"ensemble member {member_id} failed: {type(e).__name__}: {e}"
        ) from e


@dataclass
class EnsembleRunner:
    """
    Run every member's sampler and stack the retained samples.

    Parameters
    ----------
    predictor : ChainStepPredictor
    n_iters, burn_in, thin : int
        Retention schedule (see :mod:`pugs.components.sampling.retention`).
    n_jobs : int
        1 runs members sequentially in-process; otherwise passed to
        ``joblib.Parallel`` (-1 = all cores).
    label_order : sequence of int, optional
    backend : str, optional
        joblib backend override (default: joblib's, i.e. loky processes).
    """

    predictor: ChainStepPredictor
    n_iters: int
    burn_in: int
    thin: int
    n_jobs: int = 1
    label_order: Optional[Sequence[int]] = None
    backend: Optional[str] = None

    def __post_init__(self) -> None:
        # Fails fast on a bad schedule.
        self._n_steps = sampling_horizon(self.n_iters, self.burn_in, self.thin)
        if self.n_jobs == 0:
            raise ParameterError("n_jobs must be non-zero")

    @property
    def n_steps(self) -> int:
        return self._n_steps

    def run(
        self,
        ensemble: EnsembleModel,
        X: Features,
        *,
        rngm: RngManager,
        progress: Optional[ProgressCallback] = None,
    ) -> InferenceResult:
        X = coerce_features(X)
        # Caller mistakes fail here, before any member is dispatched.
        resolve_label_order(self.label_order, ensemble.n_labels)
        check_feature_names(X, ensemble.y_labels)

        progress = progress or NullProgress()
        seeds = rngm.member_seeds(ensemble.n_models)

        if self.n_jobs == 1 or ensemble.n_models == 1:
            trajectories = self._run_sequential(ensemble, X, seeds, progress)
        else:
            trajectories = self._run_parallel(ensemble, X, seeds, progress)

        kept = [
            retain_iterations(t, n_iters=self.n_iters, burn_in=self.burn_in, thin=self.thin)
            for t in trajectories
        ]
        preds = np.stack(kept, axis=3)

        return InferenceResult(
            y_labels=ensemble.y_labels,
            preds=preds,
            retained_iterations=retained_iteration_indices(self.n_iters, self.burn_in, self.thin),
        )

    def _run_sequential(
        self,
        ensemble: EnsembleModel,
        X: Features,
        seeds: List[int],
        progress: ProgressCallback,
    ) -> List[np.ndarray]:
        return [
            sample_member(
                k,
                X,
                ensemble.fits[k],
                predictor=self.predictor,
                label_names=ensemble.y_labels,
                label_order=self.label_order,
                n_steps=self.n_steps,
                seed=seeds[k],
                progress=progress,
            )
            for k in range(ensemble.n_models)
        ]

    def _run_parallel(
        self,
        ensemble: EnsembleModel,
        X: Features,
        seeds: List[int],
        progress: ProgressCallback,
    ) -> List[np.ndarray]:
        # Per-iteration progress stays in the workers' (silent) processes;
        # the parent reports member completion only.
        m = ensemble.n_models
        progress.init(total=m, label=f"Sampling {m} ensemble members")

        tasks = (
            delayed(sample_member)(
                k,
                X,
                ensemble.fits[k],
                predictor=self.predictor,
                label_names=ensemble.y_labels,
                label_order=self.label_order,
                n_steps=self.n_steps,
                seed=seeds[k],
            )
            for k in range(m)
        )
        parallel = Parallel(n_jobs=self.n_jobs, backend=self.backend, return_as="generator")

        trajectories: List[np.ndarray] = []
        for k, traj in enumerate(parallel(tasks)):
            trajectories.append(traj)
            progress.update(current=k + 1, label=f"Model {k} finished")

        progress.finalize(label="All ensemble members finished")
        return trajectories
