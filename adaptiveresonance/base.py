# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Training and classification drivers shared by all ART and ARTMAP modules.

``ARTModule`` handles preprocessing, dispatch between incremental (1-D) and
batch (2-D) data, the epoch loop and progress display. Concrete modules
implement ``_train_sample``, ``_classify_sample``, ``_set_threshold`` and
``_weights_snapshot``.

``SingleART`` adds the single-layer category storage (a column-wise weight
matrix grown by amortized append) used by FuzzyART, DVFA and the ARTMAP
modules.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from .common import (
    DataConfig,
    complement_code,
    data_setup,
    get_dim,
    get_n_samples,
)
from .functions import (
    ACTIVATION_FUNCTIONS,
    MATCH_FUNCTIONS,
    UPDATE_FUNCTIONS,
    get_function,
)
from .params import ARTParams

logger = logging.getLogger(__name__)

# Label returned by classification when no category resonates
MISMATCH_LABEL = -1


def _check_preprocessed_dim(dim_comp: int) -> int:
    if dim_comp % 2 != 0:
        raise ValueError(
            "Declared that the data is preprocessed, but its dimension (%d) is not even"
            % dim_comp
        )
    return dim_comp // 2


class ARTModule(ARTParams):
    """
    Base class of every ART and ARTMAP module.

    Attributes
    ----------
    config : DataConfig
        Feature bounds used to complement code raw data.

    labels : list of int
        Label of each category.

    n_categories : int
        Number of categories.

    threshold : float
        Operating vigilance threshold.

    epoch : int
        Current (or last) training epoch.
    """

    def __init__(self):
        super(ARTModule, self).__init__()
        self.config = DataConfig()
        self.labels: List[int] = []
        self.n_categories = 0
        self.threshold = 0.0
        self.epoch = 0

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def _update_params(self, kwargs):
        """Set options and reconfigure, restoring the previous options on error."""
        previous = self._paramMap.copy()
        try:
            self._set(**kwargs)
            self._configure()
        except (TypeError, ValueError):
            self._paramMap = previous
            self._configure()
            raise
        return self

    def _function_names(self) -> Tuple[str, str]:
        """Names of the activation and match functions in effect."""
        return self.getActivation(), self.getMatch()

    def _configure(self):
        """Validate the options and resolve the named functions."""
        self._check_params()
        activation, match = self._function_names()
        self._activation_fn = get_function(ACTIVATION_FUNCTIONS, activation, "activation")
        self._match_fn = get_function(MATCH_FUNCTIONS, match, "match")
        self._update_fn = get_function(UPDATE_FUNCTIONS, self.getUpdate(), "update")

    def _check_params(self):
        self._check_common_params()

    # ------------------------------------------------------------------
    # Data configuration
    # ------------------------------------------------------------------

    def data_setup(self, data) -> None:
        """Set up the module's data configuration from a 2-D batch."""
        data_setup(self.config, data)

    def _init_train_sample(self, x: np.ndarray, preprocessed: bool) -> np.ndarray:
        if not preprocessed:
            if not self.config.is_set:
                raise ValueError(
                    "%s: cannot preprocess data before being setup." % type(self).__name__
                )
            return complement_code(x, self.config)
        if not self.config.is_set:
            self.config = DataConfig(0.0, 1.0, _check_preprocessed_dim(len(x)))
        return x

    def _init_train_batch(self, x: np.ndarray, preprocessed: bool) -> np.ndarray:
        if not preprocessed:
            if not self.config.is_set:
                data_setup(self.config, x)
            return complement_code(x, self.config)
        if not self.config.is_set:
            self.config = DataConfig(0.0, 1.0, _check_preprocessed_dim(get_dim(x)))
        return x

    def _init_classify(self, x: np.ndarray, preprocessed: bool) -> np.ndarray:
        if not preprocessed:
            if not self.config.is_set:
                raise ValueError(
                    "%s: cannot preprocess data before being setup." % type(self).__name__
                )
            return complement_code(x, self.config)
        return x

    # ------------------------------------------------------------------
    # Training and classification
    # ------------------------------------------------------------------

    def train(self, x, y=None, preprocessed: bool = False):
        """
        Train the module on a single sample or a batch of samples.

        Parameters
        ----------
        x : array-like
            A 1-D sample or a 2-D batch of shape (n_features, n_samples).

        y : int or array-like of int, optional
            Supervisory label(s). Omit for unsupervised training.

        preprocessed : bool, default=False
            Whether ``x`` is already normalized and complement coded.

        Returns
        -------
        int or np.ndarray
            The label assigned to the sample, or one label per sample.
        """
        x = np.asarray(x, dtype=float)
        if x.ndim == 1:
            sample = self._init_train_sample(x, preprocessed)
            self._set_threshold()
            return self._train_sample(sample, None if y is None else int(y))
        if x.ndim == 2:
            return self._train_batch(x, y, preprocessed)
        raise ValueError("Expected 1-D or 2-D data, got %d dimensions." % x.ndim)

    def classify(self, x, preprocessed: bool = False, get_bmu: bool = False):
        """
        Predict the labels of a single sample or a batch of samples.

        Parameters
        ----------
        x : array-like
            A 1-D sample or a 2-D batch of shape (n_features, n_samples).

        preprocessed : bool, default=False
            Whether ``x`` is already normalized and complement coded.

        get_bmu : bool, default=False
            On mismatch, return the label of the best-matching unit instead
            of -1.

        Returns
        -------
        int or np.ndarray
            The predicted label, or one label per sample.
        """
        x = np.asarray(x, dtype=float)
        if x.ndim == 1:
            sample = self._init_classify(x, preprocessed)
            return self._classify_sample(sample, get_bmu)
        if x.ndim == 2:
            return self._classify_batch(x, preprocessed, get_bmu)
        raise ValueError("Expected 1-D or 2-D data, got %d dimensions." % x.ndim)

    def _train_batch(self, x: np.ndarray, y, preprocessed: bool) -> np.ndarray:
        if self.getDisplay():
            logger.info("Training %s", type(self).__name__)

        n_samples = get_n_samples(x)
        labels = self._check_batch_labels(y, n_samples)

        x = self._init_train_batch(x, preprocessed)
        self._set_threshold()

        y_hat = np.zeros(n_samples, dtype=int)
        self.epoch = 0
        while True:
            self.epoch += 1
            weights_old = self._weights_snapshot()
            iterator = self._get_iterator(n_samples)
            for i in iterator:
                self._update_iter(iterator, i)
                local_y = None if labels is None else int(labels[i])
                y_hat[i] = self._train_sample(x[:, i], local_y)
            if self._stopping_conditions(weights_old):
                break
        return y_hat

    def _classify_batch(self, x: np.ndarray, preprocessed: bool, get_bmu: bool) -> np.ndarray:
        if self.getDisplay():
            logger.info("Testing %s", type(self).__name__)

        x = self._init_classify(x, preprocessed)
        n_samples = get_n_samples(x)
        y_hat = np.zeros(n_samples, dtype=int)
        iterator = self._get_iterator(n_samples)
        for i in iterator:
            self._update_iter(iterator, i)
            y_hat[i] = self._classify_sample(x[:, i], get_bmu)
        return y_hat

    def _check_batch_labels(self, y, n_samples: int) -> Optional[np.ndarray]:
        if y is None:
            return None
        labels = np.asarray(y, dtype=int).ravel()
        if len(labels) != n_samples:
            raise ValueError(
                "Got %d labels for %d samples." % (len(labels), n_samples)
            )
        return labels

    def _stopping_conditions(self, weights_old: List[np.ndarray]) -> bool:
        """Stop at maxIter epochs or when the weights reached a fixed point."""
        if self.epoch >= self.getMaxIter():
            return True
        weights_new = self._weights_snapshot()
        return len(weights_old) == len(weights_new) and all(
            np.array_equal(old, new) for old, new in zip(weights_old, weights_new)
        )

    def _get_iterator(self, n_samples: int):
        if self.getDisplay():
            return tqdm(range(n_samples))
        return range(n_samples)

    def _update_iter(self, iterator, i: int) -> None:
        if isinstance(iterator, tqdm):
            iterator.set_description(
                "Ep: %d, ID: %d, Cat: %d" % (self.epoch, i + 1, self.n_categories)
            )

    def _weights_snapshot(self) -> List[np.ndarray]:
        raise NotImplementedError

    def _set_threshold(self) -> None:
        raise NotImplementedError

    def _train_sample(self, x: np.ndarray, y: Optional[int]) -> int:
        raise NotImplementedError

    def _classify_sample(self, x: np.ndarray, get_bmu: bool) -> int:
        raise NotImplementedError


class SingleART(ARTModule):
    """
    Base class of the single-layer modules: one weight column per category.

    Attributes
    ----------
    W : np.ndarray
        Category weight matrix of shape (dim_comp, n_categories).

    n_instance : list of int
        Number of samples each category has learned.

    T, M : np.ndarray
        Activation and match values of every category for the last sample.

    stats : dict
        Activation ("T"), match ("M"), best-matching unit ("bmu") and
        mismatch flag ("mismatch") of the last training/classification step.
    """

    def __init__(self):
        super(SingleART, self).__init__()
        self._W = np.zeros((0, 0))
        self.n_instance: List[int] = []
        self.T = np.zeros(0)
        self.M = np.zeros(0)
        self.stats = {"T": 0.0, "M": 0.0, "bmu": 0, "mismatch": False}

    @property
    def W(self) -> np.ndarray:
        return self._W[:, : self.n_categories]

    def _weights_snapshot(self) -> List[np.ndarray]:
        return [self.W.copy()]

    def _append_weight(self, w: np.ndarray) -> None:
        capacity = self._W.shape[1]
        if self._W.shape[0] != len(w):
            self._W = np.zeros((len(w), max(capacity, 1)))
        elif self.n_categories == capacity:
            grown = np.zeros((len(w), max(1, 2 * capacity)))
            grown[:, :capacity] = self._W
            self._W = grown
        self._W[:, self.n_categories] = w
        self.n_categories += 1

    def _new_weight(self, x: np.ndarray) -> np.ndarray:
        if self.getUncommitted():
            return self._update_fn(self, x, np.ones(self.config.dim_comp))
        return x.copy()

    def _create_category(self, x: np.ndarray, y: int) -> None:
        self._append_weight(self._new_weight(x))
        self.n_instance.append(1)
        self.labels.append(y)

    def _learn(self, x: np.ndarray, index: int) -> None:
        self._W[:, index] = self._update_fn(self, x, self._W[:, index])

    def _activation_match(self, x: np.ndarray) -> None:
        """Compute the activation and match of every category for ``x``."""
        W = self.W
        self.T = self._activation_fn(self, x, W)
        self.M = self._match_fn(self, x, W)

    def _rank(self) -> np.ndarray:
        """Category indices by descending activation, ties in index order."""
        return np.argsort(-self.T, kind="stable")

    def _log_stats(self, bmu: int, mismatch: bool) -> None:
        self.stats["T"] = float(self.T[bmu]) if len(self.T) else 0.0
        self.stats["M"] = float(self.M[bmu]) if len(self.M) else 0.0
        self.stats["bmu"] = int(bmu)
        self.stats["mismatch"] = mismatch
