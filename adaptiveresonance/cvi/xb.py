# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Xie-Beni (XB) cluster validity index.

References
----------
X. L. Xie and G. Beni, "A Validity Measure for Fuzzy Clustering," IEEE
Transactions on Pattern Analysis and Machine Intelligence, vol. 13, no. 8,
pp. 841-847, 1991.

M. Moshtaghi, J. C. Bezdek, S. M. Erfani, C. Leckie, and J. Bailey, "Online
cluster validity indices for performance monitoring of streaming data
clustering," Int. J. Intell. Syst., pp. 1-23, 2018.
"""

from .base import CentroidCVI


class XB(CentroidCVI):
    """
    Xie-Beni index: within-group sum of squares over the number of samples
    times the smallest squared centroid separation. Lower is better.

    Examples
    --------
    >>> cvi = XB()
    >>> for x, label in zip(data.T, labels):
    ...     value = cvi.get_icvi(x, label)
    """

    def evaluate(self) -> float:
        """Compute the index from the current statistics."""
        if self.n_clusters <= 1:
            self.criterion_value = 0.0
            return self.criterion_value

        separation = self._off_diagonal().min()
        if separation == 0.0:
            self.criterion_value = 0.0
        else:
            self.criterion_value = float(self.CP.sum() / (self.n_samples * separation))
        return self.criterion_value
