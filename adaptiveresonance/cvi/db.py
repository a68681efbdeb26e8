# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Davies-Bouldin (DB) cluster validity index.

References
----------
D. L. Davies and D. W. Bouldin, "A cluster separation measure," IEEE
Transactions on Pattern Analysis and Machine Intelligence, vol. PAMI-1,
no. 2, pp. 224-227, 1979.
"""

import numpy as np

from .base import CentroidCVI


class DB(CentroidCVI):
    """
    Davies-Bouldin index: the mean over clusters of the worst ratio of summed
    scatter to centroid separation. Scatter is the mean squared distance of a
    cluster's samples to its centroid. Lower is better.

    Pairs of coincident centroids contribute zero.
    """

    def evaluate(self) -> float:
        """Compute the index from the current statistics."""
        if self.n_clusters <= 1:
            self.criterion_value = 0.0
            return self.criterion_value

        S = self.CP / self.n
        scatter = S[:, np.newaxis] + S[np.newaxis, :]
        separated = self.D > 0.0
        np.fill_diagonal(separated, False)
        R = np.zeros_like(self.D)
        R[separated] = scatter[separated] / self.D[separated]
        self.criterion_value = float(R.max(axis=1).mean())
        return self.criterion_value
