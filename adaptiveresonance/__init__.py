# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Adaptive Resonance
==================

Adaptive Resonance Theory (ART) clustering and classification: FuzzyART,
DVFA and DDVFA for unsupervised learning, SFAM, DAM and FAM for supervised
learning, and incremental cluster validity indices.

Example:
    >>> import numpy as np
    >>> from adaptiveresonance import DDVFA
    >>>
    >>> data = np.random.rand(4, 200)      # (n_features, n_samples)
    >>> art = DDVFA(rhoLb=0.6, rhoUb=0.8, maxIter=3)
    >>> labels = art.train(data)
    >>> art.classify(data[:, 0], get_bmu=True)
"""

from .art import DDVFA, DVFA, FuzzyART, GammaNormalizedFuzzyART
from .artmap import DAM, FAM, SFAM
from .common import (
    DataConfig,
    complement_code,
    data_setup,
    linear_normalization,
    performance,
)
from .cvi import CONN, DB, PS, XB, bmu_pairs

__version__ = "0.1.0"
__all__ = [
    "art",
    "artmap",
    "cvi",
    "FuzzyART",
    "GammaNormalizedFuzzyART",
    "DVFA",
    "DDVFA",
    "SFAM",
    "DAM",
    "FAM",
    "XB",
    "DB",
    "PS",
    "CONN",
    "bmu_pairs",
    "DataConfig",
    "data_setup",
    "linear_normalization",
    "complement_code",
    "performance",
]
