# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Distributed Dual Vigilance Fuzzy ART (DDVFA).

Every top-level category ("F2 node") is itself a FuzzyART module. A linkage
method aggregates the activations and matches of a node's internal
prototypes into one similarity value per node.

References
----------
L. E. Brito da Silva, I. Elnabarawy, and D. C. Wunsch, "Distributed dual
vigilance fuzzy adaptive resonance theory learns online, retrieves
arbitrarily-shaped clusters, and mitigates order dependence," Neural
Networks, vol. 121, pp. 208-228, 2020, doi: 10.1016/j.neunet.2019.08.033.
"""

import logging
from typing import Callable, Dict, List, Optional

import numpy as np

from pyspark import keyword_only
from pyspark.ml.param import Param, Params, TypeConverters

from ..base import MISMATCH_LABEL, ARTModule
from ..params import HasGamma, check_unit_interval
from .fuzzyart import FuzzyART

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Linkage methods
# -----------------------------------------------------------------------------


def _field(node: FuzzyART, activation: bool) -> np.ndarray:
    return node.T if activation else node.M


def single(node: FuzzyART, x: np.ndarray, activation: bool) -> float:
    """Single linkage: the largest prototype value."""
    return float(np.max(_field(node, activation)))


def average(node: FuzzyART, x: np.ndarray, activation: bool) -> float:
    """Average linkage: the mean prototype value."""
    return float(np.mean(_field(node, activation)))


def complete(node: FuzzyART, x: np.ndarray, activation: bool) -> float:
    """Complete linkage: the smallest prototype value."""
    return float(np.min(_field(node, activation)))


def median(node: FuzzyART, x: np.ndarray, activation: bool) -> float:
    """Median linkage."""
    return float(np.median(_field(node, activation)))


def weighted(node: FuzzyART, x: np.ndarray, activation: bool) -> float:
    """Prototype values weighted by the number of samples each prototype learned."""
    n_instance = np.asarray(node.n_instance, dtype=float)
    return float(_field(node, activation) @ (n_instance / n_instance.sum()))


def centroid(node: FuzzyART, x: np.ndarray, activation: bool) -> float:
    """
    Centroid linkage: the node's activation or match against the element-wise
    minimum of all of its prototypes.
    """
    Wc = node.W.min(axis=1)[:, np.newaxis]
    if activation:
        return float(node._activation_fn(node, x, Wc)[0])
    return float(node._match_fn(node, x, Wc)[0])


LINKAGE_METHODS: Dict[str, Callable] = {
    "single": single,
    "average": average,
    "complete": complete,
    "median": median,
    "weighted": weighted,
    "centroid": centroid,
}


# -----------------------------------------------------------------------------
# DDVFA
# -----------------------------------------------------------------------------


class DDVFAParams(HasGamma):
    """
    Params for DDVFA.

    Parameters
    ----------
    rhoLb : float, default=0.7
        Lower bound (global) vigilance, in [0, 1]. Governs whether a sample
        joins an existing F2 node.

    rhoUb : float, default=0.85
        Upper bound (local) vigilance, in [0, 1]. Used as the vigilance of
        every F2 node.

    similarity : str, default="single"
        Linkage method: single, average, complete, median, weighted, centroid.

    alpha : float, default=1e-3
        Choice parameter (> 0).

    beta : float, default=1.0
        Learning parameter, in (0, 1].

    gamma : float, default=3.0
        Pseudo kernel width (>= 1).

    gammaRef : float, default=1.0
        Reference gamma for normalization, in [0, gamma).

    gammaNormalization : bool, default=True
        Normalize the thresholds by the feature dimension.

    uncommitted : bool, default=False
        Learn new prototypes from an all-ones weight.

    activation : str, default="gamma_activation"
    match : str, default="gamma_match"
        Functions used by every F2 node.

    maxIter : int, default=1
        Maximum number of epochs during batch training.

    display : bool, default=False
        Show a progress bar during batch loops.
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

    similarity = Param(
        Params._dummy(),
        "similarity",
        "Linkage method: single, average, complete, median, weighted, centroid",
        typeConverter=TypeConverters.toString,
    )

    def __init__(self):
        super(DDVFAParams, self).__init__()

    def getRhoLb(self) -> float:
        """Gets the value of rhoLb or its default value."""
        return self.getOrDefault(self.rhoLb)

    def getRhoUb(self) -> float:
        """Gets the value of rhoUb or its default value."""
        return self.getOrDefault(self.rhoUb)

    def getSimilarity(self) -> str:
        """Gets the value of similarity or its default value."""
        return self.getOrDefault(self.similarity)


class DDVFA(ARTModule, DDVFAParams):
    """
    Distributed Dual Vigilance Fuzzy ART.

    A two-level clusterer: the outer level ranks F2 nodes by a linkage over
    their prototypes and tests the linkage match against ``rhoLb``; the
    winning node then trains its own FuzzyART (vigilance ``rhoUb``) on the
    sample. Clusters can therefore take arbitrary shapes.

    Attributes
    ----------
    F2 : list of FuzzyART
        One FuzzyART module per category, owned by this module.

    T, M : np.ndarray
        Linkage activation and match of every F2 node for the last sample.
        Match values are only computed for the nodes that were tested.

    T_win, M_win : float
        Activation and match of the winning (or best-matching) node.

    Examples
    --------
    >>> art = DDVFA(rhoLb=0.6, rhoUb=0.8, similarity="average")
    >>> y_hat = art.train(data)
    >>> art.get_n_weights() >= art.n_categories
    True
    """

    @keyword_only
    def __init__(
        self,
        *,
        rhoLb: float = 0.7,
        rhoUb: float = 0.85,
        alpha: float = 1e-3,
        beta: float = 1.0,
        gamma: float = 3.0,
        gammaRef: float = 1.0,
        similarity: str = "single",
        gammaNormalization: bool = True,
        uncommitted: bool = False,
        activation: str = "gamma_activation",
        match: str = "gamma_match",
        update: str = "basic_update",
        maxIter: int = 1,
        display: bool = False,
    ):
        """
        Initialize a DDVFA module.
        """
        super(DDVFA, self).__init__()
        self.F2: List[FuzzyART] = []
        self.T = np.zeros(0)
        self.M = np.zeros(0)
        self.T_win = 0.0
        self.M_win = 0.0
        self._setDefault(
            rhoLb=0.7,
            rhoUb=0.85,
            alpha=1e-3,
            beta=1.0,
            gamma=3.0,
            gammaRef=1.0,
            similarity="single",
            gammaNormalization=True,
            uncommitted=False,
            activation="gamma_activation",
            match="gamma_match",
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
        rhoLb: float = 0.7,
        rhoUb: float = 0.85,
        alpha: float = 1e-3,
        beta: float = 1.0,
        gamma: float = 3.0,
        gammaRef: float = 1.0,
        similarity: str = "single",
        gammaNormalization: bool = True,
        uncommitted: bool = False,
        activation: str = "gamma_activation",
        match: str = "gamma_match",
        update: str = "basic_update",
        maxIter: int = 1,
        display: bool = False,
    ):
        """
        Set parameters for DDVFA.
        """
        kwargs = self._input_kwargs
        return self._update_params(kwargs)

    def setRhoLb(self, value: float):
        """Sets the value of rhoLb."""
        return self.setParams(rhoLb=value)

    def setRhoUb(self, value: float):
        """Sets the value of rhoUb."""
        return self.setParams(rhoUb=value)

    def setSimilarity(self, value: str):
        """Sets the value of similarity."""
        return self.setParams(similarity=value)

    def setMaxIter(self, value: int):
        """Sets the value of maxIter."""
        return self.setParams(maxIter=value)

    def setDisplay(self, value: bool):
        """Sets the value of display."""
        return self.setParams(display=value)

    def _configure(self):
        super(DDVFA, self)._configure()
        method = self.getSimilarity()
        if method not in LINKAGE_METHODS:
            raise ValueError(
                "Unknown similarity method '%s'. Options: %s"
                % (method, ", ".join(LINKAGE_METHODS))
            )
        self._linkage_fn = LINKAGE_METHODS[method]

    def _check_params(self):
        self._check_common_params()
        check_unit_interval("rhoLb", self.getRhoLb())
        check_unit_interval("rhoUb", self.getRhoUb())
        if self.getGamma() < 1.0:
            raise ValueError("gamma must be >= 1, got %s" % self.getGamma())
        if not 0.0 <= self.getGammaRef() < self.getGamma():
            raise ValueError(
                "gammaRef must be in [0, gamma), got %s" % self.getGammaRef()
            )

    def subopts(self) -> Dict:
        """FuzzyART options shared by every F2 node."""
        return dict(
            rho=self.getRhoUb(),
            alpha=self.getAlpha(),
            beta=self.getBeta(),
            gamma=self.getGamma(),
            gammaRef=self.getGammaRef(),
            gammaNormalization=self.getGammaNormalization(),
            uncommitted=self.getUncommitted(),
            activation=self.getActivation(),
            match=self.getMatch(),
            update=self.getUpdate(),
            display=False,
        )

    # ------------------------------------------------------------------
    # Algorithm
    # ------------------------------------------------------------------

    def _set_threshold(self):
        if self.getGammaNormalization():
            self.threshold = self.getRhoLb() * (self.config.dim ** self.getGammaRef())
        else:
            self.threshold = self.getRhoLb()

    def _weights_snapshot(self) -> List[np.ndarray]:
        return [node.W.copy() for node in self.F2]

    def _create_category(self, x: np.ndarray, y: int) -> None:
        node = FuzzyART(**self.subopts())
        node.train(x, preprocessed=True)
        self.F2.append(node)
        self.labels.append(y)
        self.n_categories += 1

    def _similarity(self, node: FuzzyART, x: np.ndarray, activation: bool) -> float:
        return self._linkage_fn(node, x, activation)

    def _activations(self, x: np.ndarray) -> np.ndarray:
        self.T = np.zeros(self.n_categories)
        self.M = np.zeros(self.n_categories)
        for jx, node in enumerate(self.F2):
            node._activation_match(x)
            self.T[jx] = self._similarity(node, x, True)
        return np.argsort(-self.T, kind="stable")

    def _train_sample(self, x: np.ndarray, y: Optional[int]) -> int:
        supervised = y is not None

        if self.n_categories == 0:
            y_hat = y if supervised else 1
            self._create_category(x, y_hat)
            return y_hat

        index = self._activations(x)
        for bmu in index:
            self.M[bmu] = self._similarity(self.F2[bmu], x, False)
            if self.M[bmu] >= self.threshold:
                if supervised and self.labels[bmu] != y:
                    continue
                self.T_win = self.T[bmu]
                self.M_win = self.M[bmu]
                self.F2[bmu].train(x, preprocessed=True)
                return self.labels[bmu]

        bmu = index[0]
        self.T_win = self.T[bmu]
        self.M_win = self._similarity(self.F2[bmu], x, False)
        y_hat = y if supervised else self.n_categories + 1
        logger.debug("Mismatch, creating F2 node %d", self.n_categories + 1)
        self._create_category(x, y_hat)
        return y_hat

    def _classify_sample(self, x: np.ndarray, get_bmu: bool) -> int:
        if self.n_categories == 0:
            return MISMATCH_LABEL

        index = self._activations(x)
        for bmu in index:
            self.M[bmu] = self._similarity(self.F2[bmu], x, False)
            if self.M[bmu] >= self.threshold:
                self.T_win = self.T[bmu]
                self.M_win = self.M[bmu]
                return self.labels[bmu]

        bmu = index[0]
        self.T_win = self.T[bmu]
        self.M_win = self._similarity(self.F2[bmu], x, False)
        return self.labels[bmu] if get_bmu else MISMATCH_LABEL

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def get_W(self) -> List[np.ndarray]:
        """The weight matrix of every F2 node."""
        return [node.W for node in self.F2]

    def get_n_weights_vec(self) -> List[int]:
        """The number of prototypes in every F2 node."""
        return [node.n_categories for node in self.F2]

    def get_n_weights(self) -> int:
        """The total number of prototypes across all F2 nodes."""
        return sum(self.get_n_weights_vec())
