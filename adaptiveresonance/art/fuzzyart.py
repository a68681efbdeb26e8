# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Fuzzy ART with optional gamma normalization.

References
----------
G. Carpenter, S. Grossberg, and D. Rosen, "Fuzzy ART: Fast stable learning
and categorization of analog patterns by an adaptive resonance system,"
Neural Networks, vol. 4, no. 6, pp. 759-771, 1991.
"""

import logging
from typing import Optional

import numpy as np

from pyspark import keyword_only
from pyspark.ml.param import Param, Params, TypeConverters

from ..base import MISMATCH_LABEL, SingleART
from ..params import HasGamma, check_unit_interval

logger = logging.getLogger(__name__)


class FuzzyARTParams(HasGamma):
    """
    Params for FuzzyART.

    Parameters
    ----------
    rho : float, default=0.6
        Vigilance parameter, in [0, 1].

    alpha : float, default=1e-3
        Choice parameter (> 0).

    beta : float, default=1.0
        Learning parameter, in (0, 1].

    gamma : float, default=3.0
        Pseudo kernel width (>= 1).

    gammaRef : float, default=1.0
        Reference gamma for normalization, in [0, gamma].

    gammaNormalization : bool, default=False
        Normalize the threshold by the feature dimension. While enabled,
        the gamma activation and match functions replace ``activation`` and
        ``match``; the stored options are left untouched.

    uncommitted : bool, default=False
        Learn new categories from an all-ones weight instead of fast
        committing the sample.

    activation : str, default="basic_activation"
        Activation function name.

    match : str, default="basic_match"
        Match function name.

    update : str, default="basic_update"
        Weight update function name.

    maxIter : int, default=1
        Maximum number of epochs during batch training.

    display : bool, default=False
        Show a progress bar during batch loops.
    """

    rho = Param(
        Params._dummy(),
        "rho",
        "Vigilance parameter, rho in [0, 1].",
        typeConverter=TypeConverters.toFloat,
    )

    def __init__(self, *args):
        super(FuzzyARTParams, self).__init__(*args)

    def getRho(self) -> float:
        """Gets the value of rho or its default value."""
        return self.getOrDefault(self.rho)


class FuzzyART(SingleART, FuzzyARTParams):
    """
    Fuzzy ART unsupervised category learner.

    Each category is a hyperbox prototype (a complement coded weight column).
    A sample resonates with the highest-activation category whose match
    clears the vigilance threshold, which then learns the sample; otherwise a
    new category is created.

    Examples
    --------
    >>> import numpy as np
    >>> from adaptiveresonance.art import FuzzyART
    >>>
    >>> art = FuzzyART(rho=0.5)
    >>> labels = art.train(np.array([[0.0, 1.0], [0.0, 1.0]]))
    >>> art.n_categories
    2
    >>> art.classify(np.array([0.0, 0.0]))
    1

    Notes
    -----
    With gamma normalization enabled, the threshold becomes
    ``rho * dim ** gammaRef`` and the gamma activation/match functions are
    used regardless of the ``activation``/``match`` options.
    """

    @keyword_only
    def __init__(
        self,
        *,
        rho: float = 0.6,
        alpha: float = 1e-3,
        beta: float = 1.0,
        gamma: float = 3.0,
        gammaRef: float = 1.0,
        gammaNormalization: bool = False,
        uncommitted: bool = False,
        activation: str = "basic_activation",
        match: str = "basic_match",
        update: str = "basic_update",
        maxIter: int = 1,
        display: bool = False,
    ):
        """
        Initialize a FuzzyART module.
        """
        super(FuzzyART, self).__init__()
        self._setDefault(
            rho=0.6,
            alpha=1e-3,
            beta=1.0,
            gamma=3.0,
            gammaRef=1.0,
            gammaNormalization=False,
            uncommitted=False,
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
        alpha: float = 1e-3,
        beta: float = 1.0,
        gamma: float = 3.0,
        gammaRef: float = 1.0,
        gammaNormalization: bool = False,
        uncommitted: bool = False,
        activation: str = "basic_activation",
        match: str = "basic_match",
        update: str = "basic_update",
        maxIter: int = 1,
        display: bool = False,
    ):
        """
        Set parameters for FuzzyART.
        """
        kwargs = self._input_kwargs
        return self._update_params(kwargs)

    def setRho(self, value: float):
        """Sets the value of rho."""
        return self.setParams(rho=value)

    def setAlpha(self, value: float):
        """Sets the value of alpha."""
        return self.setParams(alpha=value)

    def setBeta(self, value: float):
        """Sets the value of beta."""
        return self.setParams(beta=value)

    def setGamma(self, value: float):
        """Sets the value of gamma."""
        return self.setParams(gamma=value)

    def setGammaRef(self, value: float):
        """Sets the value of gammaRef."""
        return self.setParams(gammaRef=value)

    def setGammaNormalization(self, value: bool):
        """Sets the value of gammaNormalization."""
        return self.setParams(gammaNormalization=value)

    def setUncommitted(self, value: bool):
        """Sets the value of uncommitted."""
        return self.setParams(uncommitted=value)

    def setActivation(self, value: str):
        """Sets the value of activation."""
        return self.setParams(activation=value)

    def setMatch(self, value: str):
        """Sets the value of match."""
        return self.setParams(match=value)

    def setMaxIter(self, value: int):
        """Sets the value of maxIter."""
        return self.setParams(maxIter=value)

    def setDisplay(self, value: bool):
        """Sets the value of display."""
        return self.setParams(display=value)

    def _function_names(self):
        if self.getGammaNormalization():
            return "gamma_activation", "gamma_match"
        return super(FuzzyART, self)._function_names()

    def _check_params(self):
        self._check_common_params()
        check_unit_interval("rho", self.getRho())
        if self.getGamma() < 1.0:
            raise ValueError("gamma must be >= 1, got %s" % self.getGamma())
        if not 0.0 <= self.getGammaRef() <= self.getGamma():
            raise ValueError(
                "gammaRef must be in [0, gamma], got %s" % self.getGammaRef()
            )

    # ------------------------------------------------------------------
    # Algorithm
    # ------------------------------------------------------------------

    def _set_threshold(self):
        if self.getGammaNormalization():
            self.threshold = self.getRho() * (self.config.dim ** self.getGammaRef())
        else:
            self.threshold = self.getRho()

    def initialize(self, x: np.ndarray, y: Optional[int] = None) -> None:
        """Seed an empty module with a preprocessed sample as category 1 (or ``y``)."""
        self._set_threshold()
        self._create_category(x, 1 if y is None else y)

    def _train_sample(self, x: np.ndarray, y: Optional[int]) -> int:
        supervised = y is not None

        if self.n_categories == 0:
            y_hat = y if supervised else 1
            self.initialize(x, y_hat)
            return y_hat

        # A new supervised label always gets its own category
        if supervised and y not in self.labels:
            self._create_category(x, y)
            return y

        self._activation_match(x)
        index = self._rank()

        mismatch = True
        bmu = index[0]
        for bmu in index:
            if self.M[bmu] >= self.threshold:
                if supervised and self.labels[bmu] != y:
                    continue
                self._learn(x, bmu)
                self.n_instance[bmu] += 1
                y_hat = self.labels[bmu]
                mismatch = False
                break

        if mismatch:
            bmu = index[0]
            y_hat = y if supervised else self.n_categories + 1
            logger.debug("Mismatch, creating category %d", self.n_categories + 1)
            self._create_category(x, y_hat)

        self._log_stats(bmu, mismatch)
        return y_hat

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


def GammaNormalizedFuzzyART(**kwargs) -> FuzzyART:
    """
    FuzzyART with ``gammaNormalization=True``.

    The gamma activation and match functions are used in addition to the
    keyword options provided.
    """
    kwargs["gammaNormalization"] = True
    return FuzzyART(**kwargs)
