"""Dependency helpers for engine use-cases.

Use-cases accept dependencies (seed, progress) explicitly instead of reading
globals. This module keeps *small* helpers only.
"""

from __future__ import annotations

from typing import Optional

import numpy as np


def resolve_seed(seed: Optional[int], *, rng: Optional[np.random.Generator] = None) -> int:
    """Return a concrete root seed.

    An explicit ``seed`` is used as-is. Otherwise fresh entropy is drawn so
    unseeded calls stay stochastic, as the sampler is meant to be.
    """

    if seed is not None:
        return int(seed)
    gen = rng if rng is not None else np.random.default_rng()
    return int(gen.integers(0, 2**32 - 1))
