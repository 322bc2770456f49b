from __future__ import annotations

"""Burn-in and thinning.

Samples are kept by explicit index, never by reshaping raw buffers: with
1-based iterations the retained ones are ``burn_in + 1, burn_in + 1 + thin, ...``,
i.e. 0-based ``burn_in + k * thin`` for ``k = 0 .. n_iters - 1``.
"""

import numpy as np

from pugs.core.errors import ParameterError, RetentionError


def check_schedule(n_iters: int, burn_in: int, thin: int) -> None:
    if n_iters < 1:
        raise ParameterError(f"n_iters must be >= 1; got {n_iters}")
    if burn_in < 0:
        raise ParameterError(f"burn_in must be >= 0; got {burn_in}")
    if thin < 1:
        raise ParameterError(f"thin must be >= 1; got {thin}")


def sampling_horizon(n_iters: int, burn_in: int, thin: int) -> int:
    """Number of sampler iterations needed to retain exactly ``n_iters`` samples."""
    check_schedule(n_iters, burn_in, thin)
    return burn_in + 1 + (n_iters - 1) * thin


def retained_iteration_indices(n_iters: int, burn_in: int, thin: int) -> np.ndarray:
    """0-based trajectory indices kept after burn-in and thinning."""
    check_schedule(n_iters, burn_in, thin)
    return burn_in + thin * np.arange(n_iters, dtype=np.int64)


def retain_iterations(
    trajectory: np.ndarray,
    *,
    n_iters: int,
    burn_in: int,
    thin: int,
) -> np.ndarray:
    """Select the retained iterations from a (n, L, T) trajectory.

    Raises
    ------
    RetentionError
        If the trajectory is too short, or the selection does not contain
        exactly ``n_iters`` iterations.
    """
    trajectory = np.asarray(trajectory)
    if trajectory.ndim != 3:
        raise RetentionError(f"trajectory must be (n, L, T); got shape {trajectory.shape}")

    idx = retained_iteration_indices(n_iters, burn_in, thin)
    n_steps = trajectory.shape[2]
    if idx[-1] >= n_steps:
        raise RetentionError(
            f"trajectory has {n_steps} iterations but burn_in={burn_in}, thin={thin}, "
            f"n_iters={n_iters} needs {int(idx[-1]) + 1}"
        )

    kept = trajectory[:, :, idx]
    if kept.shape[2] != n_iters:
        raise RetentionError(
            f"retained {kept.shape[2]} post-burn-in samples but n_iters={n_iters}"
        )
    return kept
