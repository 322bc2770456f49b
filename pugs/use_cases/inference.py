from __future__ import annotations

"""Gibbs-sampling inference over an Ensemble of Classifier Chains."""

import dataclasses
from typing import Any, Mapping, Optional, Union

from pugs.contracts.ensemble import EnsembleModel
from pugs.contracts.inference_configs import InferenceConfig, build_inference_config
from pugs.contracts.results.inference import InferenceResult
from pugs.core.progress import ProgressCallback, resolve_progress
from pugs.core.shapes import Features, coerce_features
from pugs.factories.ensemble_factory import make_ensemble_runner
from pugs.factories.predict_factory import PredictorSpec, make_step_predictor
from pugs.runtime.random.rng import RngManager

from ._deps import resolve_seed


def predict_ecc(
    ensemble: EnsembleModel,
    X: Features,
    *,
    cfg: Union[None, InferenceConfig, Mapping[str, Any]] = None,
    predictor: PredictorSpec = None,
    progress: Optional[ProgressCallback] = None,
    **predictor_kwargs: Any,
) -> InferenceResult:
    """Classify new instances with a trained ECC using Gibbs sampling.

    Parameters
    ----------
    ensemble : EnsembleModel
        Trained chains; ``ensemble.fits[k][l]`` is member k's model for label l.
    X : ndarray or DataFrame, shape (n_instances, n_features)
        Same feature layout the chains were trained on (without label columns).
    cfg : InferenceConfig or dict, optional
        Sampling schedule, parallelism, seed, label order.
    predictor : callable or ChainStepPredictor, optional
        How to get P(label = 1) from one per-label model. Defaults to
        scikit-learn ``predict_proba``.
    progress : ProgressCallback, optional
        Receives per-iteration events. When omitted, ``cfg.silent`` picks a
        no-op (default) or a logging callback.
    **predictor_kwargs
        Forwarded verbatim to a plain prediction function.

    Returns
    -------
    InferenceResult
        Label names plus the burnt-in, thinned (n, L, n_iters, m) tensor.
    """
    if not isinstance(ensemble, EnsembleModel):
        raise TypeError(f"ensemble must be an EnsembleModel; got {type(ensemble).__name__}")

    cfg = build_inference_config(cfg)
    X = coerce_features(X)

    step_predictor = make_step_predictor(predictor, **predictor_kwargs)
    runner = make_ensemble_runner(cfg, predictor=step_predictor)

    seed = resolve_seed(cfg.seed)
    rngm = RngManager(seed)

    result = runner.run(
        ensemble,
        X,
        rngm=rngm,
        progress=resolve_progress(progress, silent=cfg.silent),
    )
    # Record the seed actually used so an unseeded run can be replayed.
    return dataclasses.replace(result, config=cfg.model_copy(update={"seed": seed}))
