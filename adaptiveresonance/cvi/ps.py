# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Partition Separation (PS) cluster validity index.

References
----------
M.-S. Yang and K.-L. Wu, "A new validity index for fuzzy clustering," 10th
IEEE International Conference on Fuzzy Systems, vol. 1, pp. 89-92, 2001.

M. Moshtaghi, J. C. Bezdek, S. M. Erfani, C. Leckie, and J. Bailey, "Online
Cluster Validity Indices for Streaming Data," arXiv:1801.02937, 2018.
"""

import numpy as np

from .base import CentroidCVI


class PS(CentroidCVI):
    """
    Partition Separation index, computed from the crisp cluster sizes and the
    squared centroid distances. Higher is better.

    ``PS = sum_i (n_i / max(n) - exp(-min_{j != i} D_ij / beta_t))`` where
    ``beta_t`` is the mean squared distance of the centroids to their mean.
    """

    def evaluate(self) -> float:
        """Compute the index from the current statistics."""
        if self.n_clusters <= 1:
            self.criterion_value = 0.0
            return self.criterion_value

        v_bar = self.v.mean(axis=1)
        beta_t = float(((self.v - v_bar[:, np.newaxis]) ** 2).sum(axis=0).mean())
        if beta_t == 0.0:
            self.criterion_value = 0.0
            return self.criterion_value

        nearest = self._off_diagonal().min(axis=1)
        values = self.n / self.n.max() - np.exp(-nearest / beta_t)
        self.criterion_value = float(values.sum())
        return self.criterion_value
