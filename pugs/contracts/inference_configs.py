from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pugs.components.sampling.retention import sampling_horizon
from pugs.core.errors import ParameterError


class InferenceConfig(BaseModel):
    """
    Configuration for one Gibbs-sampling inference call over an ECC.

    Notes:
      - Defaults mirror the historical ``predict`` signature (300/100/2).
      - ``max_workers`` is only consulted when ``run_parallel`` is True;
        None means "all available cores" (joblib ``n_jobs=-1``).
      - ``label_order`` is the sweep order over labels (0-based permutation);
        None means natural order.
    """
    model_config = ConfigDict(extra="forbid")

    n_iters: int = Field(300, ge=1)
    burn_in: int = Field(100, ge=0)
    thin: int = Field(2, ge=1)

    run_parallel: bool = False
    max_workers: Optional[int] = 1
    silent: bool = True

    seed: Optional[int] = None
    label_order: Optional[List[int]] = None

    @model_validator(mode="after")
    def _check_workers(self) -> "InferenceConfig":
        if self.max_workers is not None and self.max_workers == 0:
            raise ValueError("max_workers must be non-zero (use -1 or None for all cores)")
        if self.max_workers is not None and self.max_workers < -1:
            raise ValueError("max_workers must be >= 1, -1 or None")
        return self

    @property
    def horizon(self) -> int:
        """Total number of sampler iterations needed to retain ``n_iters`` samples."""
        return sampling_horizon(self.n_iters, self.burn_in, self.thin)

    def n_jobs(self) -> int:
        """Resolved worker count for the ensemble runner."""
        if not self.run_parallel:
            return 1
        return -1 if self.max_workers is None else int(self.max_workers)


def build_inference_config(
    cfg: Union[None, InferenceConfig, Mapping[str, Any]] = None,
    **overrides: Any,
) -> InferenceConfig:
    """Normalize ``cfg`` (model, dict or None) plus keyword overrides.

    Raises
    ------
    ParameterError
        With pydantic's description of the violated constraint.
    """
    if isinstance(cfg, InferenceConfig):
        data = cfg.model_dump()
    elif cfg is None:
        data = {}
    else:
        data = dict(cfg)
    data.update(overrides)

    try:
        return InferenceConfig(**data)
    except ValidationError as e:
        raise ParameterError(str(e)) from e
