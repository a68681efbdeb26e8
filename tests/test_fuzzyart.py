# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Tests for FuzzyART and its gamma-normalized variant.
"""

import unittest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from adaptiveresonance import DataConfig, FuzzyART, GammaNormalizedFuzzyART
from adaptiveresonance.functions import (
    basic_activation,
    basic_match,
    gamma_activation,
    gamma_match,
)


def make_blobs(seed=0, n_per_blob=30):
    """Three well separated 2-D blobs, as (n_features, n_samples)."""
    rng = np.random.default_rng(seed)
    centers = np.array([[0.0, 0.0], [5.0, 5.0], [0.0, 5.0]])
    data = np.hstack(
        [c[:, np.newaxis] + 0.3 * rng.normal(size=(2, n_per_blob)) for c in centers]
    )
    labels = np.repeat([1, 2, 3], n_per_blob)
    order = rng.permutation(data.shape[1])
    return data[:, order], labels[order]


class FuzzyARTTest(unittest.TestCase):
    """Test cases for FuzzyART."""

    def setUp(self):
        self.corners = np.array([[0.0, 1.0], [0.0, 1.0]])
        self.data, self.labels = make_blobs()

    def test_two_corners(self):
        """Test that opposite corners form two categories."""
        art = FuzzyART(rho=0.5)
        y_hat = art.train(self.corners)

        assert_array_equal(y_hat, [1, 2])
        self.assertEqual(art.n_categories, 2)
        self.assertEqual(art.labels, [1, 2])
        self.assertEqual(art.classify(np.array([0.0, 0.0])), 1)
        self.assertEqual(art.classify(np.array([1.0, 1.0])), 2)

    def test_mismatch_sentinel(self):
        """Test that a point equidistant from both categories mismatches."""
        art = FuzzyART(rho=0.9)
        art.train(self.corners)

        self.assertEqual(art.classify(np.array([0.5, 0.5])), -1)
        # Ties are broken by category index
        self.assertEqual(art.classify(np.array([0.5, 0.5]), get_bmu=True), 1)

    def test_classify_untrained(self):
        """Test that an untrained module always mismatches."""
        art = FuzzyART()
        art.config = DataConfig(0.0, 1.0, 2)
        self.assertEqual(art.classify(np.array([0.5, 0.5])), -1)

    def test_state_invariants(self):
        """Test that weights, labels and counts stay aligned."""
        art = FuzzyART(rho=0.7)
        art.train(self.data)

        self.assertEqual(art.W.shape, (4, art.n_categories))
        self.assertEqual(len(art.labels), art.n_categories)
        self.assertEqual(len(art.n_instance), art.n_categories)
        self.assertEqual(sum(art.n_instance), self.data.shape[1])

    def test_determinism(self):
        """Test that two modules trained identically agree."""
        art1 = FuzzyART(rho=0.7)
        art2 = FuzzyART(rho=0.7)
        y1 = art1.train(self.data)
        y2 = art2.train(self.data)

        assert_array_equal(y1, y2)
        assert_array_equal(art1.W, art2.W)

    def test_incremental_batch_equivalence(self):
        """Test that sample-by-sample and batch training agree."""
        batch = FuzzyART(rho=0.75)
        y_batch = batch.train(self.data)

        incremental = FuzzyART(rho=0.75)
        incremental.data_setup(self.data)
        y_inc = [incremental.train(self.data[:, i]) for i in range(self.data.shape[1])]

        assert_array_equal(y_batch, y_inc)
        assert_array_equal(batch.W, incremental.W)
        self.assertEqual(batch.labels, incremental.labels)

    def test_vigilance_monotonicity(self):
        """Test that a higher vigilance never yields fewer categories."""
        # Ordered 1-D grid: categories are runs of width at most 1 - rho
        grid = np.linspace(0.0, 1.0, 11)[np.newaxis, :]
        counts = []
        for rho in (0.05, 0.45, 0.75, 0.95):
            art = FuzzyART(rho=rho)
            art.train(grid)
            counts.append(art.n_categories)
        self.assertEqual(counts, [2, 2, 4, 11])

    def test_supervised_training(self):
        """Test that supervised categories never mix labels."""
        art = FuzzyART(rho=0.3)
        y_hat = art.train(self.data, y=self.labels)

        assert_array_equal(y_hat, self.labels)
        self.assertEqual(set(art.labels), {1, 2, 3})

    def test_supervised_new_label(self):
        """Test that an unseen label immediately creates a category."""
        art = FuzzyART(rho=0.0)
        art.config = DataConfig(0.0, 1.0, 1)
        art.train(np.array([0.2]), y=1)
        art.train(np.array([0.21]), y=7)
        self.assertEqual(art.labels, [1, 7])

    def test_supervised_skips_other_label(self):
        """Test that a resonant category with another label is passed over."""
        art = FuzzyART(rho=0.5)
        art.config = DataConfig(0.0, 1.0, 1)
        art.train(np.array([0.3]), y=1)
        art.train(np.array([0.1]), y=2)

        # Category 1 ranks first (|x^W| = 0.92 against 0.88) and resonates
        self.assertEqual(art.train(np.array([0.22]), y=2), 2)
        self.assertEqual(art.n_categories, 2)
        self.assertEqual(art.labels, [1, 2])
        assert_allclose(art.W[:, 0], [0.3, 0.7])
        assert_allclose(art.W[:, 1], [0.1, 0.78])
        self.assertEqual(art.n_instance, [1, 2])

    def test_label_count_mismatch(self):
        """Test that batch labels must match the number of samples."""
        art = FuzzyART()
        with self.assertRaises(ValueError):
            art.train(self.data, y=self.labels[:-1])

    def test_fixed_point_stopping(self):
        """Test that training stops once the weights stop changing."""
        art = FuzzyART(rho=0.5, maxIter=10)
        art.train(self.corners)
        self.assertEqual(art.epoch, 2)

    def test_max_epochs(self):
        """Test that training never exceeds maxIter epochs."""
        art = FuzzyART(rho=0.8, beta=0.5, maxIter=3)
        art.train(self.data)
        self.assertLessEqual(art.epoch, 3)

    def test_uncommitted_learning(self):
        """Test that uncommitted nodes learn the sample from all-ones weights."""
        art = FuzzyART(beta=0.5, uncommitted=True)
        art.train(np.array([0.2, 0.6, 0.8, 0.4]), preprocessed=True)
        assert_allclose(art.W[:, 0], [0.6, 0.8, 0.9, 0.7])

    def test_stats(self):
        """Test the runtime statistics of the last step."""
        art = FuzzyART(rho=0.9)
        art.train(self.corners)
        art.classify(np.array([0.5, 0.5]))
        self.assertTrue(art.stats["mismatch"])
        self.assertEqual(art.stats["bmu"], 0)
        self.assertAlmostEqual(art.stats["M"], 0.5)

        art.classify(np.array([0.0, 0.0]))
        self.assertFalse(art.stats["mismatch"])
        self.assertAlmostEqual(art.stats["M"], 1.0)

    def test_display(self):
        """Test training with the progress display enabled."""
        art = FuzzyART(rho=0.7, display=True)
        with self.assertLogs("adaptiveresonance.base", level="INFO"):
            y_hat = art.train(self.data)
        assert_array_equal(y_hat, FuzzyART(rho=0.7).train(self.data))

    def test_batch_classify(self):
        """Test that every training sample resonates with some category."""
        art = FuzzyART(rho=0.7)
        art.train(self.data)
        y_hat = art.classify(self.data)
        self.assertEqual(y_hat.shape, (self.data.shape[1],))
        self.assertNotIn(-1, y_hat)
        self.assertTrue(set(y_hat) <= set(art.labels))


class GammaNormalizedFuzzyARTTest(unittest.TestCase):
    """Test cases for gamma normalization."""

    def test_forces_gamma_functions(self):
        """Test that gamma normalization selects the gamma functions."""
        art = GammaNormalizedFuzzyART(rho=0.6)
        self.assertTrue(art.getGammaNormalization())
        self.assertIs(art._activation_fn, gamma_activation)
        self.assertIs(art._match_fn, gamma_match)
        # The stored function options are left untouched
        self.assertEqual(art.getActivation(), "basic_activation")
        self.assertEqual(art.getMatch(), "basic_match")

    def test_disable_restores_functions(self):
        """Test that turning gamma normalization off restores the chosen functions."""
        data = np.array([[0.0, 0.15, 1.0], [0.0, 0.15, 1.0]])
        art = FuzzyART(rho=0.9, gammaNormalization=True).setGammaNormalization(False)

        self.assertIs(art._activation_fn, basic_activation)
        self.assertIs(art._match_fn, basic_match)
        art.train(data)
        self.assertEqual(art.n_categories, 3)

    def test_threshold(self):
        """Test that the threshold scales with the dimension."""
        art = GammaNormalizedFuzzyART(rho=0.6, gammaRef=1.0)
        data, _ = make_blobs()
        art.train(data)
        self.assertAlmostEqual(art.threshold, 1.2)

    def test_two_corners(self):
        """Test the corner scenario under gamma normalization."""
        art = GammaNormalizedFuzzyART(rho=0.5)
        art.train(np.array([[0.0, 1.0], [0.0, 1.0]]))
        self.assertEqual(art.n_categories, 2)
        self.assertEqual(art.classify(np.array([0.0, 0.0])), 1)


class FuzzyARTParamsTest(unittest.TestCase):
    """Test cases for FuzzyART options."""

    def test_defaults(self):
        """Test the default option values."""
        art = FuzzyART()
        self.assertAlmostEqual(art.getRho(), 0.6)
        self.assertAlmostEqual(art.getAlpha(), 1e-3)
        self.assertAlmostEqual(art.getBeta(), 1.0)
        self.assertAlmostEqual(art.getGamma(), 3.0)
        self.assertAlmostEqual(art.getGammaRef(), 1.0)
        self.assertFalse(art.getGammaNormalization())
        self.assertFalse(art.getUncommitted())
        self.assertEqual(art.getActivation(), "basic_activation")
        self.assertEqual(art.getMatch(), "basic_match")
        self.assertEqual(art.getUpdate(), "basic_update")
        self.assertEqual(art.getMaxIter(), 1)
        self.assertFalse(art.getDisplay())

    def test_setters(self):
        """Test the option setters."""
        art = FuzzyART()
        art.setRho(0.8).setAlpha(0.01).setMaxIter(5)
        self.assertAlmostEqual(art.getRho(), 0.8)
        self.assertAlmostEqual(art.getAlpha(), 0.01)
        self.assertEqual(art.getMaxIter(), 5)

        art.setActivation("choice_by_difference")
        self.assertEqual(art.getActivation(), "choice_by_difference")

    def test_out_of_range(self):
        """Test that out-of-range options are rejected."""
        for kwargs in (
            {"rho": 1.5},
            {"rho": -0.1},
            {"alpha": 0.0},
            {"beta": 0.0},
            {"beta": 1.5},
            {"gamma": 0.5},
            {"gammaRef": 4.0},
            {"maxIter": 0},
        ):
            with self.assertRaises(ValueError):
                FuzzyART(**kwargs)

    def test_setter_validation(self):
        """Test that setters validate their values."""
        art = FuzzyART()
        with self.assertRaises(ValueError):
            art.setRho(2.0)

    def test_rejected_value_is_not_kept(self):
        """Test that a rejected option leaves the previous options in place."""
        art = FuzzyART(rho=0.5)
        with self.assertRaises(ValueError):
            art.setRho(2.0)
        self.assertAlmostEqual(art.getRho(), 0.5)

        with self.assertRaises(ValueError):
            art.setParams(alpha=0.01, beta=1.5)
        self.assertAlmostEqual(art.getAlpha(), 1e-3)
        self.assertAlmostEqual(art.getBeta(), 1.0)

        with self.assertRaises(TypeError):
            art.setRho("high")
        self.assertAlmostEqual(art.getRho(), 0.5)

        art.config = DataConfig(0.0, 1.0, 2)
        art.train(np.array([[0.0, 0.01, 0.02], [0.0, 0.01, 0.02]]))
        self.assertEqual(art.n_categories, 1)

    def test_unknown_function(self):
        """Test that an unknown function name is rejected."""
        with self.assertRaises(ValueError):
            FuzzyART(activation="nonexistent")
        with self.assertRaises(ValueError):
            FuzzyART(match="nonexistent")

    def test_invalid_type(self):
        """Test that values of the wrong type are rejected."""
        with self.assertRaises(TypeError):
            FuzzyART(rho="high")

    def test_keyword_only(self):
        """Test that options must be passed by keyword."""
        with self.assertRaises(TypeError):
            FuzzyART(0.5)


if __name__ == "__main__":
    unittest.main()
