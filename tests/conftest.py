"""
Shared fixtures for the PUGS engine tests.

Model handles in most tests are plain floats: the stub predictors below read
the handle as P(label = 1), which makes sampled values predictable.
"""

import numpy as np
import pytest

from pugs.api import EnsembleModel


class ConstantPredictor:
    """P(label = 1) equals the model handle for every instance."""

    def predict_positive(self, model, X):
        return np.full(np.shape(X)[0], float(model))


class RecordingPredictor(ConstantPredictor):
    """ConstantPredictor that keeps a copy of every augmented matrix it sees."""

    def __init__(self):
        self.calls = []

    def predict_positive(self, model, X):
        self.calls.append((model, np.array(X, copy=True)))
        return super().predict_positive(model, X)


class RecordingProgress:
    def __init__(self):
        self.events = []

    def init(self, *, total, label=None):
        self.events.append(("init", total, label))

    def update(self, *, current, label=None):
        self.events.append(("update", current, label))

    def finalize(self, *, label=None):
        self.events.append(("finalize", None, label))


@pytest.fixture
def constant_predictor():
    return ConstantPredictor()


@pytest.fixture
def recording_predictor():
    return RecordingPredictor()


@pytest.fixture
def recording_progress():
    return RecordingProgress()


@pytest.fixture
def features():
    rng = np.random.default_rng(7)
    return rng.normal(size=(6, 2))


@pytest.fixture
def small_ensemble():
    """Three members, three labels, mixed probabilities."""
    fits = [
        [0.9, 0.1, 0.5],
        [0.8, 0.2, 0.5],
        [0.7, 0.3, 0.5],
    ]
    return EnsembleModel(fits, ["action", "comedy", "drama"])


@pytest.fixture
def tensor_from_labels():
    """Build (n, L, n_iters, n_models) tensors that aggregate back to a given 0/1 matrix."""

    def build(y, n_iters=3, n_models=2):
        y = np.asarray(y, dtype=np.uint8)
        return np.repeat(np.repeat(y[:, :, None, None], n_iters, axis=2), n_models, axis=3)

    return build
