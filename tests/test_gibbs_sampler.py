"""
Tests for the single-chain Gibbs sampler.

Tests cover:
- Random seed state at iteration 1
- Sequential sweep: freshest available value per conditioning label
- Custom sweep order
- Predictor output contract
- DataFrame features with label-named conditioning columns
- Progress events
"""

import numpy as np
import pandas as pd
import pytest

from pugs.components.sampling.gibbs import (
    GibbsChainSampler,
    augment_features,
    conditioning_sources,
    gibbs_step,
    order_ranks,
    resolve_label_order,
)
from pugs.core.errors import ChainStepPredictionError, ParameterError, ShapeError

LABELS = ["a", "b", "c"]


def make_sampler(predictor, label_order=None):
    return GibbsChainSampler(predictor=predictor, label_names=LABELS, label_order=label_order)


class TestConditioningSources:

    def test_natural_order(self):
        ranks = order_ranks(resolve_label_order(None, 3))
        # Updating label 1 at iteration 5: label 0 already swept (5), label 2 not yet (4).
        np.testing.assert_array_equal(conditioning_sources(5, 1, ranks), [5, 4, 4])
        np.testing.assert_array_equal(conditioning_sources(5, 0, ranks), [4, 4, 4])
        np.testing.assert_array_equal(conditioning_sources(5, 2, ranks), [5, 5, 4])

    def test_custom_order(self):
        ranks = order_ranks(resolve_label_order([2, 0, 1], 3))
        np.testing.assert_array_equal(conditioning_sources(5, 0, ranks), [4, 4, 5])
        np.testing.assert_array_equal(conditioning_sources(5, 1, ranks), [5, 4, 5])

    @pytest.mark.parametrize("order", [[0, 1], [0, 0, 1], [0, 1, 3]])
    def test_invalid_order(self, order):
        with pytest.raises(ParameterError):
            resolve_label_order(order, 3)


class TestGibbsStep:

    def test_step_does_not_modify_trajectory(self, recording_predictor):
        rng = np.random.default_rng(0)
        trajectory = rng.integers(0, 2, size=(4, 3, 3)).astype(np.uint8)
        before = trajectory.copy()

        col = gibbs_step(
            trajectory,
            1,
            0,
            X=np.zeros((4, 2)),
            model=1.0,
            predictor=recording_predictor,
            rng=rng,
            ranks=order_ranks(np.arange(3)),
            label_names=LABELS,
        )

        np.testing.assert_array_equal(trajectory, before)
        np.testing.assert_array_equal(col, np.ones(4))
        assert col.dtype == np.uint8

    def test_step_zero_is_rejected(self, recording_predictor):
        with pytest.raises(ParameterError):
            gibbs_step(
                np.zeros((2, 3, 2), dtype=np.uint8),
                0,
                0,
                X=np.zeros((2, 1)),
                model=0.5,
                predictor=recording_predictor,
                rng=np.random.default_rng(0),
                ranks=order_ranks(np.arange(3)),
                label_names=LABELS,
            )


class TestGibbsChainSampler:

    def test_shape_and_binary_values(self, constant_predictor, features):
        traj = make_sampler(constant_predictor).sample(
            features, [0.3, 0.6, 0.9], n_steps=5, rng=np.random.default_rng(1)
        )
        assert traj.shape == (features.shape[0], 3, 5)
        assert set(np.unique(traj)) <= {0, 1}

    def test_degenerate_probabilities_after_seed_iteration(self, constant_predictor, features):
        traj = make_sampler(constant_predictor).sample(
            features, [1.0, 0.0, 1.0], n_steps=4, rng=np.random.default_rng(1)
        )
        assert np.all(traj[:, 0, 1:] == 1)
        assert np.all(traj[:, 1, 1:] == 0)
        assert np.all(traj[:, 2, 1:] == 1)

    def test_conditioning_uses_freshest_values(self, recording_predictor):
        X = np.zeros((4, 2))
        traj = make_sampler(recording_predictor).sample(
            X, [1.0, 0.0, 1.0], n_steps=3, rng=np.random.default_rng(3)
        )
        calls = recording_predictor.calls
        assert len(calls) == 2 * 3

        # iteration 1, label a: b and c from the seed iteration
        np.testing.assert_array_equal(calls[0][1][:, 2:], traj[:, [1, 2], 0])
        # iteration 1, label b: a fresh, c stale
        np.testing.assert_array_equal(
            calls[1][1][:, 2:], np.column_stack([traj[:, 0, 1], traj[:, 2, 0]])
        )
        # iteration 1, label c: a and b fresh
        np.testing.assert_array_equal(calls[2][1][:, 2:], traj[:, [0, 1], 1])
        # original features are passed through untouched
        np.testing.assert_array_equal(calls[0][1][:, :2], X)

    def test_custom_order_calls_labels_in_that_order(self, recording_predictor):
        make_sampler(recording_predictor, label_order=[2, 0, 1]).sample(
            np.zeros((2, 1)), [0.1, 0.2, 0.3], n_steps=2, rng=np.random.default_rng(0)
        )
        assert [m for m, _ in recording_predictor.calls] == [0.3, 0.1, 0.2]

    def test_same_seed_same_samples(self, constant_predictor, features):
        sampler = make_sampler(constant_predictor)
        a = sampler.sample(features, [0.3, 0.5, 0.7], n_steps=6, rng=np.random.default_rng(9))
        b = sampler.sample(features, [0.3, 0.5, 0.7], n_steps=6, rng=np.random.default_rng(9))
        np.testing.assert_array_equal(a, b)

    def test_model_count_must_match_labels(self, constant_predictor, features):
        with pytest.raises(ShapeError):
            make_sampler(constant_predictor).sample(
                features, [0.5, 0.5], n_steps=2, rng=np.random.default_rng(0)
            )

    @pytest.mark.parametrize("bad", [1.5, -0.1, np.nan])
    def test_out_of_range_probabilities_raise(self, constant_predictor, features, bad):
        with pytest.raises(ChainStepPredictionError):
            make_sampler(constant_predictor).sample(
                features, [0.5, bad, 0.5], n_steps=2, rng=np.random.default_rng(0)
            )

    def test_wrong_length_output_raises(self, features):
        class ShortPredictor:
            def predict_positive(self, model, X):
                return np.full(1, 0.5)

        with pytest.raises(ChainStepPredictionError, match="one probability per instance"):
            make_sampler(ShortPredictor()).sample(
                features, [0.5, 0.5, 0.5], n_steps=2, rng=np.random.default_rng(0)
            )

    def test_dataframe_features_get_label_named_columns(self):
        X = pd.DataFrame({"x1": [0.1, 0.2], "x2": [1.0, 2.0]}, index=[10, 11])
        seen = []

        class FramePredictor:
            def predict_positive(self, model, Xa):
                seen.append(Xa)
                return np.full(len(Xa), 0.5)

        make_sampler(FramePredictor()).sample(
            X, [0.5, 0.5, 0.5], n_steps=2, rng=np.random.default_rng(0)
        )
        assert list(seen[0].columns) == ["x1", "x2", "b", "c"]
        assert list(seen[1].columns) == ["x1", "x2", "a", "c"]
        assert list(seen[2].columns) == ["x1", "x2", "a", "b"]
        assert list(seen[0].index) == [10, 11]

    def test_feature_label_name_collision(self):
        X = pd.DataFrame({"a": [0.0]})
        with pytest.raises(ShapeError):
            augment_features(X, np.zeros((1, 1)), ["a"])

    def test_progress_events(self, constant_predictor, features, recording_progress):
        make_sampler(constant_predictor).sample(
            features,
            [0.5, 0.5, 0.5],
            n_steps=4,
            rng=np.random.default_rng(0),
            progress=recording_progress,
        )
        kinds = [e[0] for e in recording_progress.events]
        assert kinds == ["init", "update", "update", "update", "update", "finalize"]
        assert [e[1] for e in recording_progress.events if e[0] == "update"] == [1, 2, 3, 4]
        assert recording_progress.events[0][1] == 4

    def test_progress_does_not_change_samples(self, constant_predictor, features, recording_progress):
        sampler = make_sampler(constant_predictor)
        quiet = sampler.sample(features, [0.4] * 3, n_steps=5, rng=np.random.default_rng(2))
        loud = sampler.sample(
            features, [0.4] * 3, n_steps=5, rng=np.random.default_rng(2), progress=recording_progress
        )
        np.testing.assert_array_equal(quiet, loud)
