# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Shared state and incremental statistics of the cluster validity indices.

Every index can be fed one (sample, label) pair at a time with ``param_inc``
or a whole labeled batch with ``param_batch``; both produce the same
statistics. Labels are arbitrary integers; clusters are indexed in order of
first appearance.
"""

from typing import Dict, Tuple

import numpy as np

from ..common import get_data_shape


class CVI:
    """
    Base class of every cluster validity index.

    Attributes
    ----------
    n_samples : int
        Number of samples seen so far.

    n_clusters : int
        Number of distinct labels seen so far.

    criterion_value : float
        Value computed by the last call to ``evaluate``.
    """

    def __init__(self):
        self.n_samples = 0
        self.n_clusters = 0
        self.criterion_value = 0.0
        self.label_map: Dict[int, int] = {}

    def _label_index(self, label: int) -> Tuple[int, bool]:
        """Internal cluster index of ``label``, and whether the label is new."""
        label = int(label)
        if label in self.label_map:
            return self.label_map[label], False
        self.label_map[label] = len(self.label_map)
        return self.label_map[label], True

    def _check_batch(self, data, labels) -> Tuple[np.ndarray, np.ndarray]:
        data = np.asarray(data, dtype=float)
        labels = np.asarray(labels, dtype=int).ravel()
        if data.ndim != 2:
            raise ValueError("Expected a 2-D batch, got %d dimension(s)." % data.ndim)
        _, n_samples = get_data_shape(data)
        if n_samples != len(labels):
            raise ValueError(
                "Got %d labels for %d samples." % (len(labels), n_samples)
            )
        return data, labels

    def param_inc(self, sample, label: int) -> None:
        raise NotImplementedError

    def param_batch(self, data, labels) -> None:
        raise NotImplementedError

    def evaluate(self) -> float:
        raise NotImplementedError

    def get_icvi(self, sample, label: int) -> float:
        """Update the index with one labeled sample and return its value."""
        self.param_inc(sample, label)
        return self.evaluate()

    def get_cvi(self, data, labels) -> float:
        """Compute the index over a labeled batch and return its value."""
        self.param_batch(data, labels)
        return self.evaluate()


class CentroidCVI(CVI):
    """
    Centroid-based index state shared by XB, DB and PS.

    Attributes
    ----------
    dim : int
        Feature dimension.

    mu_data : np.ndarray
        Mean of all samples.

    n : np.ndarray
        Number of samples per cluster.

    v : np.ndarray
        Cluster centroids of shape (dim, n_clusters).

    CP : np.ndarray
        Compactness per cluster: sum of squared distances to the centroid.

    G : np.ndarray
        Sum of the sample-to-centroid vectors per cluster, shape (dim, n_clusters).

    D : np.ndarray
        Squared Euclidean distances between centroids.
    """

    def __init__(self):
        super(CentroidCVI, self).__init__()
        self._reset()

    def _reset(self) -> None:
        self.n_samples = 0
        self.n_clusters = 0
        self.label_map = {}
        self.dim = 0
        self.mu_data = np.zeros(0)
        self.n = np.zeros(0)
        self.v = np.zeros((0, 0))
        self.CP = np.zeros(0)
        self.G = np.zeros((0, 0))
        self.D = np.zeros((0, 0))

    def _distances_to(self, index: int) -> np.ndarray:
        diff = self.v - self.v[:, [index]]
        return (diff ** 2).sum(axis=0)

    def _refresh_distances(self, index: int) -> None:
        d = self._distances_to(index)
        d[index] = 0.0
        self.D[:, index] = d
        self.D[index, :] = d

    def param_inc(self, sample, label: int) -> None:
        """Update the statistics with a single labeled sample."""
        x = np.asarray(sample, dtype=float).ravel()
        if self.n_samples == 0:
            self.dim = len(x)
            self.mu_data = np.zeros(self.dim)
            self.v = np.zeros((self.dim, 0))
            self.G = np.zeros((self.dim, 0))
        elif len(x) != self.dim:
            raise ValueError("Expected %d features, got %d." % (self.dim, len(x)))

        self.n_samples += 1
        self.mu_data = self.mu_data + (x - self.mu_data) / self.n_samples

        index, is_new = self._label_index(label)
        if is_new:
            self.n_clusters += 1
            self.n = np.append(self.n, 1.0)
            self.v = np.hstack([self.v, x[:, np.newaxis]])
            self.CP = np.append(self.CP, 0.0)
            self.G = np.hstack([self.G, np.zeros((self.dim, 1))])
            D = np.zeros((self.n_clusters, self.n_clusters))
            D[:-1, :-1] = self.D
            self.D = D
        else:
            n_old = self.n[index]
            n_new = n_old + 1
            v_old = self.v[:, index]
            v_new = v_old + (x - v_old) / n_new
            delta_v = v_old - v_new
            diff_x_v = x - v_new
            G_old = self.G[:, index]

            self.CP[index] = (
                self.CP[index]
                + diff_x_v @ diff_x_v
                + n_old * (delta_v @ delta_v)
                + 2.0 * (delta_v @ G_old)
            )
            self.G[:, index] = G_old + diff_x_v + n_old * delta_v
            self.n[index] = n_new
            self.v[:, index] = v_new
        self._refresh_distances(index)

    def param_batch(self, data, labels) -> None:
        """Recompute the statistics from a labeled batch of shape (dim, n_samples)."""
        data, labels = self._check_batch(data, labels)
        self._reset()
        self.dim, self.n_samples = get_data_shape(data)
        self.mu_data = data.mean(axis=1)

        indices = np.array([self._label_index(label)[0] for label in labels], dtype=int)
        self.n_clusters = len(self.label_map)
        self.n = np.zeros(self.n_clusters)
        self.v = np.zeros((self.dim, self.n_clusters))
        self.CP = np.zeros(self.n_clusters)
        self.G = np.zeros((self.dim, self.n_clusters))
        for ix in range(self.n_clusters):
            subset = data[:, indices == ix]
            self.n[ix] = subset.shape[1]
            self.v[:, ix] = subset.mean(axis=1)
            diff_x_v = subset - self.v[:, [ix]]
            self.CP[ix] = (diff_x_v ** 2).sum()
            self.G[:, ix] = diff_x_v.sum(axis=1)

        diff = self.v[:, :, np.newaxis] - self.v[:, np.newaxis, :]
        self.D = (diff ** 2).sum(axis=0)

    def _off_diagonal(self) -> np.ndarray:
        """Centroid distances with the diagonal masked to +inf."""
        D = self.D.copy()
        np.fill_diagonal(D, np.inf)
        return D
