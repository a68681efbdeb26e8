# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Dual Vigilance Fuzzy ART (DVFA).

An upper vigilance governs learning within a category, a lower vigilance
lets several categories be grouped under one cluster label.

References
----------
L. E. Brito da Silva, I. Elnabarawy and D. C. Wunsch II, "Dual vigilance
fuzzy adaptive resonance theory," Neural Networks, vol. 109, pp. 1-5, 2019.
"""

import logging
from typing import Optional

import numpy as np

from pyspark import keyword_only
from pyspark.ml.param import Param, Params, TypeConverters

from ..base import MISMATCH_LABEL, SingleART
from ..params import check_unit_interval

logger = logging.getLogger(__name__)


class DVFAParams(Params):
    """
    Params for DVFA.

    Parameters
    ----------
    rhoLb : float, default=0.55
        Lower bound vigilance, in [0, 1].

    rhoUb : float, default=0.75
        Upper bound vigilance, in [0, 1].

    alpha, beta, uncommitted, activation, match, update, maxIter, display
        As for FuzzyART. The default match is ``unnormalized_match``.
    """

    rhoLb = Param(
        Params._dummy(),
        "rhoLb",
        "Lower bound vigilance parameter, rhoLb in [0, 1].",
        typeConverter=TypeConverters.toFloat,
    )

    rhoUb = Param(
        Params._dummy(),
        "rhoUb",
        "Upper bound vigilance parameter, rhoUb in [0, 1].",
        typeConverter=TypeConverters.toFloat,
    )

    def __init__(self):
        super(DVFAParams, self).__init__()

    def getRhoLb(self) -> float:
        """Gets the value of rhoLb or its default value."""
        return self.getOrDefault(self.rhoLb)

    def getRhoUb(self) -> float:
        """Gets the value of rhoUb or its default value."""
        return self.getOrDefault(self.rhoUb)


class DVFA(SingleART, DVFAParams):
    """
    Dual Vigilance Fuzzy ART.

    A sample whose best match clears the upper threshold updates that
    category. A sample that only clears the lower threshold creates a new
    category inside the same cluster, so clusters may span several
    hyperboxes.

    Attributes
    ----------
    threshold_ub, threshold_lb : float
        Operating upper and lower thresholds, ``rho * dim``.

    n_clusters : int
        Number of distinct clusters (unsupervised labels).

    Examples
    --------
    >>> art = DVFA(rhoLb=0.5, rhoUb=0.8)
    >>> y_hat = art.train(data)
    >>> art.n_clusters <= art.n_categories
    True
    """

    @keyword_only
    def __init__(
        self,
        *,
        rhoLb: float = 0.55,
        rhoUb: float = 0.75,
        alpha: float = 1e-3,
        beta: float = 1.0,
        uncommitted: bool = False,
        activation: str = "basic_activation",
        match: str = "unnormalized_match",
        update: str = "basic_update",
        maxIter: int = 1,
        display: bool = False,
    ):
        super(DVFA, self).__init__()
        self.threshold_ub = 0.0
        self.threshold_lb = 0.0
        self.n_clusters = 0
        self._setDefault(
            rhoLb=0.55,
            rhoUb=0.75,
            alpha=1e-3,
            beta=1.0,
            uncommitted=False,
            activation="basic_activation",
            match="unnormalized_match",
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
        rhoLb: float = 0.55,
        rhoUb: float = 0.75,
        alpha: float = 1e-3,
        beta: float = 1.0,
        uncommitted: bool = False,
        activation: str = "basic_activation",
        match: str = "unnormalized_match",
        update: str = "basic_update",
        maxIter: int = 1,
        display: bool = False,
    ):
        """
        Set parameters for DVFA.
        """
        kwargs = self._input_kwargs
        return self._update_params(kwargs)

    def setRhoLb(self, value: float):
        """Sets the value of rhoLb."""
        return self.setParams(rhoLb=value)

    def setRhoUb(self, value: float):
        """Sets the value of rhoUb."""
        return self.setParams(rhoUb=value)

    def setMaxIter(self, value: int):
        """Sets the value of maxIter."""
        return self.setParams(maxIter=value)

    def _check_params(self):
        self._check_common_params()
        check_unit_interval("rhoLb", self.getRhoLb())
        check_unit_interval("rhoUb", self.getRhoUb())
        if self.getRhoLb() > self.getRhoUb():
            raise ValueError(
                "rhoLb (%s) must not exceed rhoUb (%s)"
                % (self.getRhoLb(), self.getRhoUb())
            )
        if self.getActivation() == "gamma_activation" or self.getMatch() == "gamma_match":
            raise ValueError("DVFA does not support the gamma-normalized functions")

    def _set_threshold(self):
        self.threshold_ub = self.getRhoUb() * self.config.dim
        self.threshold_lb = self.getRhoLb() * self.config.dim
        self.threshold = self.threshold_ub

    def _create_category(self, x: np.ndarray, y: int, new_cluster: bool = True) -> None:
        super(DVFA, self)._create_category(x, y)
        if new_cluster:
            self.n_clusters += 1

    def _train_sample(self, x: np.ndarray, y: Optional[int]) -> int:
        supervised = y is not None

        if self.n_categories == 0:
            y_hat = y if supervised else 1
            self._create_category(x, y_hat)
            return y_hat

        if supervised and y not in self.labels:
            self._create_category(x, y)
            return y

        self._activation_match(x)
        index = self._rank()

        mismatch = True
        bmu = index[0]
        for bmu in index:
            if supervised and self.labels[bmu] != y:
                continue
            if self.M[bmu] >= self.threshold_ub:
                self._learn(x, bmu)
                self.n_instance[bmu] += 1
                y_hat = self.labels[bmu]
                mismatch = False
                break
            if self.M[bmu] >= self.threshold_lb:
                y_hat = self.labels[bmu]
                self._create_category(x, y_hat, new_cluster=False)
                mismatch = False
                break

        if mismatch:
            bmu = index[0]
            y_hat = y if supervised else self.n_clusters + 1
            logger.debug("Mismatch, creating a category with label %d", y_hat)
            self._create_category(x, y_hat, new_cluster=not supervised)

        self._log_stats(bmu, mismatch)
        return y_hat

    def _classify_sample(self, x: np.ndarray, get_bmu: bool) -> int:
        if self.n_categories == 0:
            return MISMATCH_LABEL

        self._activation_match(x)
        index = self._rank()

        for bmu in index:
            if self.M[bmu] >= self.threshold_ub:
                self._log_stats(bmu, False)
                return self.labels[bmu]

        bmu = index[0]
        self._log_stats(bmu, True)
        return self.labels[bmu] if get_bmu else MISMATCH_LABEL
