# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Tests for DVFA and DDVFA.
"""

import unittest
import numpy as np
from numpy.testing import assert_array_equal

from adaptiveresonance import DDVFA, DVFA, DataConfig
from adaptiveresonance.art import LINKAGE_METHODS


def make_blobs(seed=0, n_per_blob=25):
    """Two well separated 2-D blobs, as (n_features, n_samples)."""
    rng = np.random.default_rng(seed)
    centers = np.array([[0.0, 0.0], [6.0, 6.0]])
    data = np.hstack(
        [c[:, np.newaxis] + 0.4 * rng.normal(size=(2, n_per_blob)) for c in centers]
    )
    return data[:, rng.permutation(data.shape[1])]


class DVFATest(unittest.TestCase):
    """Test cases for DVFA."""

    def test_dual_vigilance(self):
        """Test learning, same-cluster categories and new clusters."""
        art = DVFA(rhoLb=0.5, rhoUb=0.8)
        y_hat = art.train(np.array([[0.0, 0.1, 0.35, 1.0]]))

        assert_array_equal(y_hat, [1, 1, 1, 2])
        self.assertEqual(art.n_categories, 3)
        self.assertEqual(art.n_clusters, 2)
        self.assertEqual(art.labels, [1, 1, 2])
        self.assertAlmostEqual(art.threshold_ub, 0.8)
        self.assertAlmostEqual(art.threshold_lb, 0.5)

    def test_classify(self):
        """Test classification against the upper threshold."""
        art = DVFA(rhoLb=0.5, rhoUb=0.8)
        art.train(np.array([[0.0, 0.1, 0.35, 1.0]]))
        self.assertEqual(art.classify(np.array([0.05])), 1)
        self.assertEqual(art.classify(np.array([0.95])), 2)
        self.assertEqual(art.classify(np.array([0.65])), -1)

    def test_clusters_span_categories(self):
        """Test that clusters group one or more categories."""
        art = DVFA(rhoLb=0.4, rhoUb=0.9)
        art.train(make_blobs())
        self.assertLessEqual(art.n_clusters, art.n_categories)
        self.assertEqual(len(set(art.labels)), art.n_clusters)

    def test_supervised(self):
        """Test that supervised categories never mix labels."""
        data = make_blobs()
        labels = (data[0] > 3.0).astype(int) + 1
        art = DVFA(rhoLb=0.2, rhoUb=0.5)
        assert_array_equal(art.train(data, y=labels), labels)
        self.assertEqual(art.n_clusters, 2)

    def test_invalid_bounds(self):
        """Test that the lower vigilance may not exceed the upper one."""
        with self.assertRaises(ValueError):
            DVFA(rhoLb=0.9, rhoUb=0.5)

    def test_rejects_gamma_functions(self):
        """Test that the gamma functions are rejected."""
        with self.assertRaises(ValueError):
            DVFA(match="gamma_match")


class DDVFATest(unittest.TestCase):
    """Test cases for DDVFA."""

    def setUp(self):
        self.data = make_blobs()

    def test_two_corners(self):
        """Test that opposite corners form two F2 nodes."""
        art = DDVFA()
        y_hat = art.train(np.array([[0.0, 1.0], [0.0, 1.0]]))

        assert_array_equal(y_hat, [1, 2])
        self.assertEqual(art.n_categories, 2)
        self.assertEqual(art.labels, [1, 2])
        self.assertEqual(art.classify(np.array([0.0, 0.0])), 1)

    def test_threshold(self):
        """Test the gamma-normalized threshold."""
        art = DDVFA(rhoLb=0.7)
        art.train(self.data)
        self.assertAlmostEqual(art.threshold, 1.4)

    def test_state_invariants(self):
        """Test that F2 nodes, labels and weights stay aligned."""
        art = DDVFA(rhoLb=0.6, rhoUb=0.85)
        art.train(self.data)

        self.assertEqual(len(art.F2), art.n_categories)
        self.assertEqual(len(art.labels), art.n_categories)
        self.assertEqual(len(art.get_W()), art.n_categories)
        self.assertEqual(art.get_n_weights(), sum(art.get_n_weights_vec()))
        self.assertGreaterEqual(art.get_n_weights(), art.n_categories)
        for W in art.get_W():
            self.assertEqual(W.shape[0], 4)

    def test_subopts(self):
        """Test that F2 nodes inherit the shared options."""
        art = DDVFA(rhoUb=0.9, alpha=0.01, beta=0.5)
        art.train(self.data)
        node = art.F2[0]
        self.assertAlmostEqual(node.getRho(), 0.9)
        self.assertAlmostEqual(node.getAlpha(), 0.01)
        self.assertAlmostEqual(node.getBeta(), 0.5)
        self.assertTrue(node.getGammaNormalization())

    def test_incremental_batch_equivalence(self):
        """Test that sample-by-sample and batch training agree."""
        batch = DDVFA(rhoLb=0.6, rhoUb=0.8)
        y_batch = batch.train(self.data)

        incremental = DDVFA(rhoLb=0.6, rhoUb=0.8)
        incremental.data_setup(self.data)
        y_inc = [incremental.train(self.data[:, i]) for i in range(self.data.shape[1])]

        assert_array_equal(y_batch, y_inc)
        self.assertEqual(batch.get_n_weights_vec(), incremental.get_n_weights_vec())
        for W_batch, W_inc in zip(batch.get_W(), incremental.get_W()):
            assert_array_equal(W_batch, W_inc)

    def test_determinism(self):
        """Test that two modules trained identically agree."""
        y1 = DDVFA(rhoLb=0.6).train(self.data)
        y2 = DDVFA(rhoLb=0.6).train(self.data)
        assert_array_equal(y1, y2)

    def test_linkage_methods(self):
        """Test training and classification with every linkage method."""
        for method in LINKAGE_METHODS:
            art = DDVFA(rhoLb=0.5, rhoUb=0.85, similarity=method)
            y_hat = art.train(self.data)
            self.assertTrue(set(y_hat) <= set(art.labels), method)
            predictions = art.classify(self.data, get_bmu=True)
            self.assertTrue(set(predictions) <= set(art.labels), method)

    def test_separates_blobs(self):
        """Test that distant blobs never share an F2 node."""
        art = DDVFA(rhoLb=0.7, rhoUb=0.85)
        y_hat = art.train(self.data)
        left = set(y_hat[self.data[0] < 3.0])
        right = set(y_hat[self.data[0] >= 3.0])
        self.assertFalse(left & right)

    def test_mismatch_sentinel(self):
        """Test that an unmatched point returns -1 unless the bmu is requested."""
        art = DDVFA(rhoLb=0.95, rhoUb=0.99)
        art.train(np.array([[0.0, 1.0], [0.0, 1.0]]))
        self.assertEqual(art.classify(np.array([0.5, 0.5])), -1)
        self.assertIn(art.classify(np.array([0.5, 0.5]), get_bmu=True), art.labels)

    def test_winning_values(self):
        """Test that the winning activation and match are recorded."""
        art = DDVFA()
        art.train(np.array([[0.0, 1.0], [0.0, 1.0]]))
        art.classify(np.array([0.0, 0.0]))
        self.assertGreater(art.T_win, 0.0)
        self.assertGreaterEqual(art.M_win, art.threshold)

    def test_fixed_point_stopping(self):
        """Test that training stops once the F2 weights stop changing."""
        art = DDVFA(maxIter=10)
        art.train(np.array([[0.0, 1.0], [0.0, 1.0]]))
        self.assertEqual(art.epoch, 2)

    def test_supervised(self):
        """Test supervised training returns the supplied labels."""
        labels = (self.data[0] > 3.0).astype(int) + 1
        art = DDVFA(rhoLb=0.3)
        assert_array_equal(art.train(self.data, y=labels), labels)

    def test_supervised_skips_other_label(self):
        """Test that a resonant F2 node with another label is passed over."""
        art = DDVFA(rhoLb=0.5)
        art.config = DataConfig(0.0, 1.0, 1)
        art.train(np.array([0.3]), y=1)
        # Resonates with the first node (M ~ 0.51) but carries another label
        art.train(np.array([0.1]), y=2)
        self.assertEqual(art.get_n_weights_vec(), [1, 1])

        # The first node ranks highest (M ~ 0.78) and resonates; the second
        # node (M ~ 0.68) learns the sample
        self.assertEqual(art.train(np.array([0.22]), y=2), 2)
        self.assertEqual(art.n_categories, 2)
        self.assertEqual(art.labels, [1, 2])
        self.assertEqual(art.get_n_weights_vec(), [1, 2])

    def test_rejected_value_is_not_kept(self):
        """Test that a rejected option leaves the previous options in place."""
        art = DDVFA()
        with self.assertRaises(ValueError):
            art.setParams(rhoLb=0.5, gammaRef=3.0)
        self.assertAlmostEqual(art.getRhoLb(), 0.7)
        self.assertAlmostEqual(art.getGammaRef(), 1.0)
        with self.assertRaises(ValueError):
            art.setSimilarity("ward")
        self.assertEqual(art.getSimilarity(), "single")

    def test_invalid_options(self):
        """Test that invalid options are rejected."""
        with self.assertRaises(ValueError):
            DDVFA(similarity="ward")
        with self.assertRaises(ValueError):
            DDVFA(gammaRef=3.0, gamma=3.0)
        with self.assertRaises(ValueError):
            DDVFA(rhoLb=1.2)

    def test_setters(self):
        """Test the option getters and setters."""
        art = DDVFA()
        self.assertAlmostEqual(art.getRhoLb(), 0.7)
        self.assertAlmostEqual(art.getRhoUb(), 0.85)
        self.assertEqual(art.getSimilarity(), "single")
        art.setSimilarity("average").setRhoLb(0.5)
        self.assertEqual(art.getSimilarity(), "average")
        self.assertAlmostEqual(art.getRhoLb(), 0.5)


if __name__ == "__main__":
    unittest.main()
