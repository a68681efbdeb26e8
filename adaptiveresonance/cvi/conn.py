# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
CONN_Index: the connectivity-based validity index of Tasdemir and Merenyi.

The index is computed over a set of prototypes (for example the categories
of an ART module) rather than over the raw samples. Each sample contributes
the pair of its best and second-best matching prototypes, which builds the
cumulative adjacency matrix ``CADJ``. Prototypes inherit the cluster label of
the first sample they win.

References
----------
K. Tasdemir and E. Merenyi, "A Validity Index for Prototype-Based Clustering
of Data Sets With Complex Cluster Structures," IEEE Transactions on Systems,
Man, and Cybernetics, Part B, vol. 41, no. 4, pp. 1039-1053, 2011.
"""

import numpy as np

from .base import CVI


def bmu_pairs(data, prototypes) -> np.ndarray:
    """
    First and second best-matching prototypes of every sample.

    Parameters
    ----------
    data : array-like
        Samples of shape (dim, n_samples).

    prototypes : array-like
        Prototypes of shape (dim, n_prototypes).

    Returns
    -------
    np.ndarray
        Integer array of shape (2, n_samples): best prototype index in the first
        row, second-best in the second row (-1 with a single prototype).
    """
    data = np.asarray(data, dtype=float)
    prototypes = np.asarray(prototypes, dtype=float)
    if data.ndim != 2 or prototypes.ndim != 2:
        raise ValueError("Data and prototypes must both be 2-D.")
    if data.shape[0] != prototypes.shape[0]:
        raise ValueError(
            "Data has %d features but prototypes have %d."
            % (data.shape[0], prototypes.shape[0])
        )
    if prototypes.shape[1] == 0:
        raise ValueError("At least one prototype is required.")

    distances = ((data[:, :, np.newaxis] - prototypes[:, np.newaxis, :]) ** 2).sum(axis=0)
    order = np.argsort(distances, axis=1, kind="stable")
    pairs = np.full((2, data.shape[1]), -1, dtype=int)
    pairs[0] = order[:, 0]
    if prototypes.shape[1] > 1:
        pairs[1] = order[:, 1]
    return pairs


class CONN(CVI):
    """
    Connectivity index ``mean(Intra) * (1 - mean(Inter))``. Higher is better.

    ``param_inc`` takes a ``(bmu, second_bmu)`` pair of prototype indices and
    the cluster label of the sample; ``param_batch`` takes those pairs stacked
    as an integer array of shape (2, n_samples). A missing second prototype is
    written as -1 and only registers the best one.

    The per-cluster connectivity sums behind Intra and Inter are cached and
    updated locally by ``param_inc``, so ``evaluate`` only touches
    (n_clusters, n_clusters) arrays.

    Attributes
    ----------
    n_prototypes : int
        Number of prototypes seen so far.

    CADJ : np.ndarray
        Cumulative adjacency: ``CADJ[i, j]`` counts the samples with best
        prototype ``i`` and second-best ``j``.

    CONN : np.ndarray
        Symmetric connectivity ``CADJ + CADJ.T``.

    proto_cluster : np.ndarray
        Cluster index of every prototype, -1 until it wins a sample.

    intra_num, intra_den : np.ndarray
        Per cluster, the adjacency within the cluster and the adjacency
        leaving its prototypes.

    inter_num, inter_den : np.ndarray
        Per cluster pair (k, l), the connectivity from cluster k to cluster l
        and the total connectivity of the prototypes of k that touch l.

    Examples
    --------
    >>> pairs = bmu_pairs(data, prototypes)
    >>> CONN().get_cvi(pairs, labels)
    """

    def __init__(self):
        super(CONN, self).__init__()
        self._reset()

    def _reset(self) -> None:
        self.n_samples = 0
        self.n_clusters = 0
        self.label_map = {}
        self.n_prototypes = 0
        self._CADJ = np.zeros((0, 0))
        self._CONN = np.zeros((0, 0))
        self._proto_cluster = np.zeros(0, dtype=int)
        self._cadj_sum = np.zeros(0)
        self._conn_sum = np.zeros(0)
        # Connectivity of every prototype to every cluster
        self._conn_to = np.zeros((0, 0))
        self._intra_num = np.zeros(0)
        self._intra_den = np.zeros(0)
        self._inter_num = np.zeros((0, 0))
        self._inter_den = np.zeros((0, 0))

    @property
    def CADJ(self) -> np.ndarray:
        return self._CADJ[: self.n_prototypes, : self.n_prototypes]

    @property
    def CONN(self) -> np.ndarray:
        return self._CONN[: self.n_prototypes, : self.n_prototypes]

    @property
    def proto_cluster(self) -> np.ndarray:
        return self._proto_cluster[: self.n_prototypes]

    @property
    def intra_num(self) -> np.ndarray:
        return self._intra_num[: self.n_clusters]

    @property
    def intra_den(self) -> np.ndarray:
        return self._intra_den[: self.n_clusters]

    @property
    def inter_num(self) -> np.ndarray:
        return self._inter_num[: self.n_clusters, : self.n_clusters]

    @property
    def inter_den(self) -> np.ndarray:
        return self._inter_den[: self.n_clusters, : self.n_clusters]

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def _grow_prototypes(self, n_prototypes: int) -> None:
        capacity = len(self._proto_cluster)
        if n_prototypes > capacity:
            capacity = max(n_prototypes, 2 * capacity)
            n, k = self.n_prototypes, self._conn_to.shape[1]
            CADJ = np.zeros((capacity, capacity))
            CADJ[:n, :n] = self.CADJ
            CONN = np.zeros((capacity, capacity))
            CONN[:n, :n] = self.CONN
            conn_to = np.zeros((capacity, k))
            conn_to[:n] = self._conn_to[:n]
            proto_cluster = np.full(capacity, -1, dtype=int)
            proto_cluster[:n] = self.proto_cluster
            cadj_sum = np.zeros(capacity)
            cadj_sum[:n] = self._cadj_sum[:n]
            conn_sum = np.zeros(capacity)
            conn_sum[:n] = self._conn_sum[:n]
            self._CADJ, self._CONN, self._conn_to = CADJ, CONN, conn_to
            self._proto_cluster = proto_cluster
            self._cadj_sum, self._conn_sum = cadj_sum, conn_sum
        self.n_prototypes = max(self.n_prototypes, n_prototypes)

    def _grow_clusters(self, n_clusters: int) -> None:
        capacity = len(self._intra_num)
        if n_clusters > capacity:
            capacity = max(n_clusters, 2 * capacity)
            k = self.n_clusters
            conn_to = np.zeros((self._conn_to.shape[0], capacity))
            conn_to[:, :k] = self._conn_to[:, :k]
            intra_num = np.zeros(capacity)
            intra_num[:k] = self.intra_num
            intra_den = np.zeros(capacity)
            intra_den[:k] = self.intra_den
            inter_num = np.zeros((capacity, capacity))
            inter_num[:k, :k] = self.inter_num
            inter_den = np.zeros((capacity, capacity))
            inter_den[:k, :k] = self.inter_den
            self._conn_to = conn_to
            self._intra_num, self._intra_den = intra_num, intra_den
            self._inter_num, self._inter_den = inter_num, inter_den
        self.n_clusters = n_clusters

    # ------------------------------------------------------------------
    # Incremental updates
    # ------------------------------------------------------------------

    def _den_row(self, i: int) -> np.ndarray:
        """Contribution of prototype ``i`` to the inter denominators of its cluster."""
        return (self._conn_to[i, : self.n_clusters] > 0) * self._conn_sum[i]

    def _assign(self, p: int, k: int) -> None:
        """Make cluster ``k`` the cluster of prototype ``p``."""
        n = self.n_prototypes
        self._proto_cluster[p] = k
        clusters = self.proto_cluster
        members = clusters == k

        self._intra_den[k] += self._cadj_sum[p]
        self._intra_num[k] += (
            self._CADJ[p, :n][members].sum() + self._CADJ[:n, p][members].sum()
        )

        # Every assigned prototype now also connects to cluster k through p
        column = self._CONN[:n, p]
        assigned = clusters >= 0
        gained = assigned & (column > 0) & (self._conn_to[:n, k] == 0)
        np.add.at(self._inter_den[:, k], clusters[gained], self._conn_sum[:n][gained])
        np.add.at(self._inter_num[:, k], clusters[assigned], column[assigned])
        self._conn_to[:n, k] += column

        self._inter_num[k, : self.n_clusters] += self._conn_to[p, : self.n_clusters]
        self._inter_den[k, : self.n_clusters] += self._den_row(p)

    def _add_edge(self, b: int, s: int) -> None:
        """Register one sample with best prototype ``b`` and second-best ``s``."""
        kb, ks = self._proto_cluster[b], self._proto_cluster[s]
        old_b = self._den_row(b)
        old_s = self._den_row(s)

        self._CADJ[b, s] += 1
        self._CONN[b, s] += 1
        self._CONN[s, b] += 1
        self._cadj_sum[b] += 1
        self._conn_sum[b] += 1
        self._conn_sum[s] += 1

        self._intra_den[kb] += 1
        self._conn_to[s, kb] += 1
        if ks >= 0:
            if ks == kb:
                self._intra_num[kb] += 1
            self._conn_to[b, ks] += 1
            self._inter_num[kb, ks] += 1
            self._inter_num[ks, kb] += 1
            self._inter_den[ks, : self.n_clusters] += self._den_row(s) - old_s
        self._inter_den[kb, : self.n_clusters] += self._den_row(b) - old_b

    def param_inc(self, sample, label: int) -> None:
        """Update the adjacency with one (bmu, second_bmu) pair and its label."""
        bmu, second = (int(p) for p in np.asarray(sample).ravel()[:2])
        if bmu < 0:
            raise ValueError("The best-matching prototype index must be >= 0, got %d" % bmu)

        self.n_samples += 1
        index, is_new = self._label_index(label)
        if is_new:
            self._grow_clusters(self.n_clusters + 1)

        self._grow_prototypes(max(bmu, second) + 1)
        if self._proto_cluster[bmu] < 0:
            self._assign(bmu, index)

        if second >= 0 and second != bmu:
            self._add_edge(bmu, second)

    # ------------------------------------------------------------------
    # Batch updates
    # ------------------------------------------------------------------

    def _membership(self) -> np.ndarray:
        P = np.zeros((self.n_prototypes, self.n_clusters))
        assigned = np.nonzero(self.proto_cluster >= 0)[0]
        P[assigned, self.proto_cluster[assigned]] = 1.0
        return P

    def param_batch(self, data, labels) -> None:
        """Rebuild the adjacency from (2, n_samples) prototype pairs and labels."""
        pairs, labels = self._check_batch(data, labels)
        pairs = pairs.astype(int)
        if pairs.shape[0] != 2:
            raise ValueError("Expected prototype pairs of shape (2, n_samples).")
        bmus, seconds = pairs
        if np.any(bmus < 0):
            raise ValueError("The best-matching prototype indices must be >= 0.")

        self._reset()
        self.n_samples = len(labels)
        indices = np.array([self._label_index(label)[0] for label in labels], dtype=int)
        self._grow_clusters(len(self.label_map))
        self._grow_prototypes(int(pairs.max()) + 1 if self.n_samples else 0)

        valid = (seconds >= 0) & (seconds != bmus)
        n = self.n_prototypes
        np.add.at(self._CADJ, (bmus[valid], seconds[valid]), 1.0)
        self._CONN[:n, :n] = self.CADJ + self.CADJ.T
        winners, first = np.unique(bmus, return_index=True)
        self._proto_cluster[winners] = indices[first]

        k = self.n_clusters
        P = self._membership()
        self._cadj_sum[:n] = self.CADJ.sum(axis=1)
        self._conn_sum[:n] = self.CONN.sum(axis=1)
        self._conn_to[:n, :k] = self.CONN @ P
        self._intra_num[:k] = np.diag(P.T @ self.CADJ @ P)
        self._intra_den[:k] = P.T @ self._cadj_sum[:n]
        self._inter_num[:k, :k] = P.T @ self._conn_to[:n, :k]
        self._inter_den[:k, :k] = P.T @ (
            (self._conn_to[:n, :k] > 0) * self._conn_sum[:n, np.newaxis]
        )

    def evaluate(self) -> float:
        """Compute the index from the cached connectivity sums."""
        if self.n_clusters <= 1:
            self.criterion_value = 0.0
            return self.criterion_value

        intra_num, intra_den = self.intra_num, self.intra_den
        intra = np.divide(
            intra_num, intra_den, out=np.zeros_like(intra_num), where=intra_den > 0
        )

        inter_num, inter_den = self.inter_num, self.inter_den
        ratio = np.divide(
            inter_num, inter_den, out=np.zeros_like(inter_num), where=inter_den > 0
        )
        np.fill_diagonal(ratio, 0.0)
        inter = ratio.max(axis=1)

        self.criterion_value = float(intra.mean() * (1.0 - inter.mean()))
        return self.criterion_value
