# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Fuzzy ARTMAP (FAM) with an explicit map field.

The ART_a categories are linked to class nodes through the map field weight
matrix ``W_ab``. A category passes the map-field test for class ``y`` when
``W_ab[J, y] / 1 >= rhoAb``; otherwise match tracking raises the ART_a
vigilance just above the category's match and the search continues.

References
----------
G. A. Carpenter, S. Grossberg, N. Markuzon, J. H. Reynolds, and D. B. Rosen,
"Fuzzy ARTMAP: A Neural Network Architecture for Incremental Supervised
Learning of Analog Multidimensional Maps," IEEE Trans. Neural Networks,
vol. 3, no. 5, pp. 698-713, 1992.
"""

import logging
from typing import List

import numpy as np

from pyspark import keyword_only
from pyspark.ml.param import Param, Params, TypeConverters

from ..base import MISMATCH_LABEL
from ..params import check_unit_interval
from .base import ARTMAP, ARTMAPParams

logger = logging.getLogger(__name__)


class FAMParams(ARTMAPParams):
    """
    Params for FAM.

    Parameters
    ----------
    rho : float, default=0.6
        Baseline ART_a vigilance, in [0, 1].

    rhoAb : float, default=0.95
        Map field vigilance, in [0, 1].

    alpha : float, default=1e-7
    epsilon : float, default=1e-3
    beta : float, default=1.0
    uncommitted : bool, default=True
    maxIter : int, default=1
    display : bool, default=False
        As for SFAM.
    """

    rhoAb = Param(
        Params._dummy(),
        "rhoAb",
        "Map field vigilance parameter, rhoAb in [0, 1].",
        typeConverter=TypeConverters.toFloat,
    )

    def __init__(self):
        super(FAMParams, self).__init__()

    def getRhoAb(self) -> float:
        """Gets the value of rhoAb or its default value."""
        return self.getOrDefault(self.rhoAb)


class FAM(ARTMAP, FAMParams):
    """
    Fuzzy ARTMAP.

    Attributes
    ----------
    W_ab : np.ndarray
        Map field weights of shape (n_categories, n_classes).

    classes : list of int
        Class label of each map field column, in order of first appearance.

    Examples
    --------
    >>> art = FAM(rho=0.7, rhoAb=0.9)
    >>> art.train(x_train, y_train)
    >>> y_hat = art.classify(x_test)
    """

    @keyword_only
    def __init__(
        self,
        *,
        rho: float = 0.6,
        rhoAb: float = 0.95,
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
        super(FAM, self).__init__()
        self.W_ab = np.zeros((0, 0))
        self.classes: List[int] = []
        self._setDefault(
            rho=0.6,
            rhoAb=0.95,
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
        rho: float = 0.6,
        rhoAb: float = 0.95,
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
        Set parameters for FAM.
        """
        kwargs = self._input_kwargs
        return self._update_params(kwargs)

    def setRho(self, value: float):
        """Sets the value of rho."""
        return self.setParams(rho=value)

    def setRhoAb(self, value: float):
        """Sets the value of rhoAb."""
        return self.setParams(rhoAb=value)

    def _check_params(self):
        super(FAM, self)._check_params()
        check_unit_interval("rhoAb", self.getRhoAb())

    def _weights_snapshot(self) -> List[np.ndarray]:
        return [self.W.copy(), self.W_ab.copy()]

    # ------------------------------------------------------------------
    # Map field
    # ------------------------------------------------------------------

    def _class_index(self, y: int) -> int:
        """Column of class ``y`` in the map field, adding it if unseen."""
        if y not in self.classes:
            self.classes.append(y)
            # Committed categories never predicted the new class
            self.W_ab = np.hstack([self.W_ab, np.zeros((self.W_ab.shape[0], 1))])
        return self.classes.index(y)

    def _map_update(self, index: int, target: np.ndarray) -> None:
        beta = self.getBeta()
        self.W_ab[index] = beta * np.minimum(target, self.W_ab[index]) + (1.0 - beta) * self.W_ab[index]

    def _create_category(self, x: np.ndarray, y: int) -> None:
        super(FAM, self)._create_category(x, y)
        target = np.zeros(len(self.classes))
        target[self.classes.index(y)] = 1.0
        self.W_ab = np.vstack([self.W_ab, np.ones((1, len(self.classes)))])
        self._map_update(self.n_categories - 1, target)

    # ------------------------------------------------------------------
    # Algorithm
    # ------------------------------------------------------------------

    def _train_sample(self, x: np.ndarray, y: int) -> int:
        column = self._class_index(y)
        if self.n_categories == 0:
            self._create_category(x, y)
            return y

        target = np.zeros(len(self.classes))
        target[column] = 1.0

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

            map_match = np.minimum(target, self.W_ab[candidate]).sum() / target.sum()
            if map_match >= self.getRhoAb():
                self._learn(x, candidate)
                self._map_update(candidate, target)
                self.labels[candidate] = self._predict(candidate)
                self.n_instance[candidate] += 1
                self._log_stats(candidate, False)
                return y

            logger.debug("Map field mismatch, match tracking on category %d", candidate + 1)
            vigilance = self.M[candidate] + self.getEpsilon()
            reset.add(candidate)

    def _predict(self, index: int) -> int:
        return self.classes[int(np.argmax(self.W_ab[index]))]

    def _classify_sample(self, x: np.ndarray, get_bmu: bool) -> int:
        if self.n_categories == 0:
            return MISMATCH_LABEL

        self._activation_match(x)
        index = self._rank()

        for bmu in index:
            if self.M[bmu] >= self.threshold:
                self._log_stats(bmu, False)
                return self._predict(bmu)

        bmu = index[0]
        self._log_stats(bmu, True)
        return self._predict(bmu) if get_bmu else MISMATCH_LABEL
