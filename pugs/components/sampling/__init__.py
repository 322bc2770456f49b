from .gibbs import GibbsChainSampler, gibbs_step
from .retention import retain_iterations, retained_iteration_indices, sampling_horizon

__all__ = [
    "GibbsChainSampler",
    "gibbs_step",
    "retain_iterations",
    "retained_iteration_indices",
    "sampling_horizon",
]
