# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Shared supervised driver for the ARTMAP modules.
"""

from typing import Optional

import numpy as np

from pyspark.ml.param import Param, Params, TypeConverters

from ..base import SingleART
from ..params import HasEpsilon, check_unit_interval


class ARTMAPParams(HasEpsilon):
    """Params shared by SFAM, DAM and FAM: baseline vigilance and epsilon."""

    rho = Param(
        Params._dummy(),
        "rho",
        "Baseline vigilance parameter, rho in [0, 1].",
        typeConverter=TypeConverters.toFloat,
    )

    def __init__(self):
        super(ARTMAPParams, self).__init__()

    def getRho(self) -> float:
        """Gets the value of rho or its default value."""
        return self.getOrDefault(self.rho)


class ARTMAP(SingleART):
    """
    Base class of the supervised ARTMAP modules.

    Labels are mandatory for training, and training returns the supplied
    label(s). Classification resonates on the baseline vigilance ``rho``.
    """

    def train(self, x, y=None, preprocessed: bool = False):
        """
        Train the module on a labeled sample or a labeled batch.

        Parameters
        ----------
        x : array-like
            A 1-D sample or a 2-D batch of shape (n_features, n_samples).

        y : int or array-like of int
            Supervisory label(s).

        preprocessed : bool, default=False
            Whether ``x`` is already normalized and complement coded.

        Returns
        -------
        int or np.ndarray
            The supplied label(s).
        """
        if y is None:
            raise ValueError("%s requires labels for training." % type(self).__name__)
        return super(ARTMAP, self).train(x, y, preprocessed=preprocessed)

    def _check_params(self):
        self._check_common_params()
        check_unit_interval("rho", self.getRho())
        if not 0.0 < self.getEpsilon() < 1.0:
            raise ValueError("epsilon must be in (0, 1), got %s" % self.getEpsilon())

    def _set_threshold(self):
        self.threshold = self.getRho()

    def _check_batch_labels(self, y, n_samples: int) -> Optional[np.ndarray]:
        if y is None:
            raise ValueError("%s requires labels for training." % type(self).__name__)
        return super(ARTMAP, self)._check_batch_labels(y, n_samples)
