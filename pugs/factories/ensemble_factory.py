from __future__ import annotations

from typing import Optional

from pugs.components.ensembles.runner import EnsembleRunner
from pugs.components.interfaces import ChainStepPredictor
from pugs.contracts.inference_configs import InferenceConfig


def make_ensemble_runner(
    cfg: InferenceConfig,
    *,
    predictor: ChainStepPredictor,
    backend: Optional[str] = None,
) -> EnsembleRunner:
    """Factory for the ensemble runner.

    Worker count comes from ``cfg.n_jobs()``: 1 unless ``run_parallel`` is set,
    in which case ``max_workers`` (None -> all cores).
    """
    return EnsembleRunner(
        predictor=predictor,
        n_iters=cfg.n_iters,
        burn_in=cfg.burn_in,
        thin=cfg.thin,
        n_jobs=cfg.n_jobs(),
        label_order=cfg.label_order,
        backend=backend,
    )
