"""
Tests for multi-label accuracy metrics.

Tests cover:
- Perfect predictions
- Log-loss clamping
- Empty-union exclusion in F-scores (with its diagnostic)
- Shape / type / value validation
"""

import warnings

import numpy as np
import pandas as pd
import pytest

from pugs.api import EmptyLabelSetWarning, InferenceResult, MetricsReport, validate_pugs
from pugs.components.evaluation.metrics import (
    PROBA_EPS,
    clamp_probabilities,
    exact_match_ratio,
    hamming_loss,
    labelling_f_score,
    log_loss,
    retrieval_f_score,
)
from pugs.core.errors import ParameterError, ShapeError


def result_for(y, tensor_from_labels, labels=("l1", "l2")):
    return InferenceResult(y_labels=labels, preds=tensor_from_labels(y))


class TestPerfectPrediction:

    def test_scenario(self, tensor_from_labels):
        y = np.array([[1, 0], [0, 1]])
        report = validate_pugs(result_for(y, tensor_from_labels), y)

        assert isinstance(report, MetricsReport)
        assert report.exact_match_ratio == 1.0
        assert report.hamming_loss == 0.0
        assert report.labelling_f_score == 1.0
        assert report.retrieval_f_score == 1.0
        assert report.n_excluded_instances == 0
        assert report.n_excluded_labels == 0
        # certain predictions are clamped, so the loss is tiny but positive
        assert 0.0 < report.log_loss < 1e-6


class TestLogLoss:

    def test_clamping_keeps_loss_finite(self):
        y = np.array([[1]])
        loss = log_loss(y, np.array([[0.0]]))
        assert np.isfinite(loss)
        assert loss == pytest.approx(-np.log(PROBA_EPS))

    def test_clamp_only_touches_extremes(self):
        p = np.array([0.0, 0.3, 1.0])
        np.testing.assert_allclose(clamp_probabilities(p), [PROBA_EPS, 0.3, 1 - PROBA_EPS])

    def test_matches_hand_computation(self):
        y = np.array([[1, 0]])
        p = np.array([[0.8, 0.4]])
        expected = -np.mean([np.log(0.8), np.log(0.6)])
        assert log_loss(y, p) == pytest.approx(expected)

    def test_confidently_wrong_tensor(self, tensor_from_labels):
        y = np.array([[1, 1]])
        report = validate_pugs(result_for(np.array([[0, 0]]), tensor_from_labels), y)
        assert np.isfinite(report.log_loss)
        assert report.log_loss > 10


class TestSimpleScores:

    def test_hamming_and_exact_match(self):
        y = np.array([[1, 0], [0, 1]])
        y_hat = np.array([[1, 1], [0, 1]])
        assert hamming_loss(y, y_hat) == 0.25
        assert exact_match_ratio(y, y_hat) == 0.5

    def test_exact_match_bounds(self):
        rng = np.random.default_rng(0)
        for _ in range(10):
            y = rng.integers(0, 2, size=(5, 3))
            y_hat = rng.integers(0, 2, size=(5, 3))
            emr = exact_match_ratio(y, y_hat)
            assert 0.0 <= emr <= 1.0
            if emr == 1.0:
                np.testing.assert_array_equal(y, y_hat)

    def test_hamming_equals_disagreement_rate(self):
        rng = np.random.default_rng(1)
        y = rng.integers(0, 2, size=(8, 4))
        y_hat = rng.integers(0, 2, size=(8, 4))
        assert hamming_loss(y, y_hat) == pytest.approx(np.mean(y != y_hat))

    def test_partial_overlap(self):
        y = np.array([[1, 1, 0], [0, 1, 1]])
        y_hat = np.array([[1, 0, 0], [0, 1, 1]])
        lab, n_lab = labelling_f_score(y, y_hat)
        ret, n_ret = retrieval_f_score(y, y_hat)
        assert lab == pytest.approx((0.5 + 1.0) / 2)
        assert ret == pytest.approx((1.0 + 0.5 + 1.0) / 3)
        assert n_lab == n_ret == 0


class TestEmptyUnionExclusion:

    def test_instance_without_labels_is_excluded_once(self, tensor_from_labels):
        y = np.array([[0, 0], [1, 1]])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            report = validate_pugs(result_for(y, tensor_from_labels), y)

        empty = [w for w in caught if issubclass(w.category, EmptyLabelSetWarning)]
        assert len(empty) == 1
        assert "1 instance" in str(empty[0].message)
        assert report.n_excluded_instances == 1
        assert report.n_excluded_labels == 0
        assert report.labelling_f_score == 1.0

    def test_repeated_validation_still_reports_counts(self, tensor_from_labels):
        y = np.array([[0, 0], [1, 1]])
        result = result_for(y, tensor_from_labels)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", EmptyLabelSetWarning)
            first = validate_pugs(result, y)
            second = validate_pugs(result, y)
        assert first.n_excluded_instances == second.n_excluded_instances == 1

    def test_label_never_present_is_excluded(self):
        y = np.array([[1, 0], [1, 0]])
        with pytest.warns(EmptyLabelSetWarning, match="label"):
            score, n_excluded = retrieval_f_score(y, y)
        assert n_excluded == 1
        assert score == 1.0

    def test_everything_excluded_gives_nan(self):
        y = np.zeros((2, 2), dtype=int)
        with pytest.warns(EmptyLabelSetWarning):
            score, n_excluded = labelling_f_score(y, y)
        assert n_excluded == 2
        assert np.isnan(score)


class TestValidation:

    def test_shape_mismatch(self, tensor_from_labels):
        result = result_for(np.array([[1, 0], [0, 1]]), tensor_from_labels)
        with pytest.raises(ShapeError):
            validate_pugs(result, np.array([[1, 0, 1], [0, 1, 0]]))
        with pytest.raises(ShapeError):
            validate_pugs(result, np.array([[1, 0]]))

    def test_wrong_object(self):
        with pytest.raises(TypeError):
            validate_pugs(np.zeros((1, 2, 1, 1)), np.array([[1, 0]]))

    def test_non_binary_ground_truth(self, tensor_from_labels):
        result = result_for(np.array([[1, 0]]), tensor_from_labels)
        with pytest.raises(ParameterError):
            validate_pugs(result, np.array([[2, 0]]))

    def test_dataframe_columns_are_aligned_by_label(self, tensor_from_labels):
        y = np.array([[1, 0], [0, 1]])
        result = result_for(y, tensor_from_labels)
        shuffled = pd.DataFrame({"l2": [0, 1], "l1": [1, 0]})
        report = validate_pugs(result, shuffled)
        assert report.exact_match_ratio == 1.0

    def test_report_table(self, tensor_from_labels):
        y = np.array([[1, 0], [0, 1]])
        frame = validate_pugs(result_for(y, tensor_from_labels), y).to_frame()
        assert list(frame.columns) == [
            "Logarithmic Loss",
            "Exact Match Ratio",
            "Labelling F-score",
            "Retrieval F-score",
            "Hamming Loss",
        ]
        assert frame.shape == (1, 5)
