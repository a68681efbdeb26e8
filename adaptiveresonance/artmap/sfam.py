# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Simplified Fuzzy ARTMAP (SFAM) and Default ARTMAP (DAM).

References
----------
G. A. Carpenter, S. Grossberg, N. Markuzon, J. H. Reynolds, and D. B. Rosen,
"Fuzzy ARTMAP: A Neural Network Architecture for Incremental Supervised
Learning of Analog Multidimensional Maps," IEEE Trans. Neural Networks,
vol. 3, no. 5, pp. 698-713, 1992.

G. P. Amis and G. A. Carpenter, "Default ARTMAP 2," IJCNN 2007,
pp. 777-782.
"""

import logging

import numpy as np

from pyspark import keyword_only

from ..base import MISMATCH_LABEL
from .base import ARTMAP, ARTMAPParams

logger = logging.getLogger(__name__)


class SFAM(ARTMAP, ARTMAPParams):
    """
    Simplified Fuzzy ARTMAP.

    Each category carries a class label directly. A sample that resonates
    with a category of another label triggers match tracking: the vigilance
    is raised just above that category's match and the search restarts.

    Parameters
    ----------
    rho : float, default=0.75
        Baseline vigilance, in [0, 1].

    alpha : float, default=1e-7
        Choice parameter (> 0).

    epsilon : float, default=1e-3
        Match tracking increment, in (0, 1).

    beta : float, default=1.0
        Learning parameter, in (0, 1].

    uncommitted : bool, default=True
        Learn new categories from an all-ones weight.

    activation : str, default="basic_activation"
    match : str, default="basic_match"
    update : str, default="basic_update"
        Strategy function names.

    maxIter : int, default=1
        Maximum number of epochs during batch training.

    display : bool, default=False
        Show a progress bar during batch loops.

    Examples
    --------
    >>> art = SFAM(rho=0.8)
    >>> art.train(x_train, y_train)
    >>> y_hat = art.classify(x_test, get_bmu=True)
    """

    @keyword_only
    def __init__(
        self,
        *,
        rho: float = 0.75,
        alpha: float = 1e-7,
        epsilon: float = 1e-3,
        beta: float = 1.0,
        uncommitted: bool = True,
        activation: str = "basic_activation",
        match: str = "basic_match",
        update: str = "basic_update",
        maxIter: int = 1,
        display: bool = False,
    ):
        super(SFAM, self).__init__()
        self._setDefault(
            rho=0.75,
            alpha=1e-7,
            epsilon=1e-3,
            beta=1.0,
            uncommitted=True,
            activation="basic_activation",
            match="basic_match",
            update="basic_update",
            maxIter=1,
            display=False,
        )
        kwargs = self._input_kwargs
        self.setParams(**kwargs)

    @keyword_only
    def setParams(
        self,
        *,
        rho: float = 0.75,
        alpha: float = 1e-7,
        epsilon: float = 1e-3,
        beta: float = 1.0,
        uncommitted: bool = True,
        activation: str = "basic_activation",
        match: str = "basic_match",
        update: str = "basic_update",
        maxIter: int = 1,
        display: bool = False,
    ):
        """
        Set parameters for SFAM.
        """
        kwargs = self._input_kwargs
        return self._update_params(kwargs)

    def setRho(self, value: float):
        """Sets the value of rho."""
        return self.setParams(rho=value)

    def setEpsilon(self, value: float):
        """Sets the value of epsilon."""
        return self.setParams(epsilon=value)

    def setMaxIter(self, value: int):
        """Sets the value of maxIter."""
        return self.setParams(maxIter=value)

    def _train_sample(self, x: np.ndarray, y: int) -> int:
        if y not in self.labels:
            self._create_category(x, y)
            return y

        self._activation_match(x)
        index = self._rank()

        vigilance = self.getRho()
        reset = set()
        while True:
            candidate = None
            for jx in index:
                if jx not in reset and self.M[jx] >= vigilance:
                    candidate = jx
                    break

            if candidate is None:
                logger.debug("Mismatch, creating category %d", self.n_categories + 1)
                self._log_stats(index[0], True)
                self._create_category(x, y)
                return y

            if self.labels[candidate] == y:
                self._learn(x, candidate)
                self.n_instance[candidate] += 1
                self._log_stats(candidate, False)
                return y

            logger.debug("Match tracking on category %d", candidate + 1)
            vigilance = self.M[candidate] + self.getEpsilon()
            reset.add(candidate)

    def _classify_sample(self, x: np.ndarray, get_bmu: bool) -> int:
        if self.n_categories == 0:
            return MISMATCH_LABEL

        self._activation_match(x)
        index = self._rank()

        for bmu in index:
            if self.M[bmu] >= self.threshold:
                self._log_stats(bmu, False)
                return self.labels[bmu]

        bmu = index[0]
        self._log_stats(bmu, True)
        return self.labels[bmu] if get_bmu else MISMATCH_LABEL


def DAM(**kwargs) -> SFAM:
    """
    Default ARTMAP: SFAM with the choice-by-difference activation.
    """
    kwargs.setdefault("activation", "choice_by_difference")
    return SFAM(**kwargs)
