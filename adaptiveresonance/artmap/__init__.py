# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Supervised ARTMAP modules
=========================

Classes:
    SFAM: Simplified Fuzzy ARTMAP with match tracking
    FAM: Fuzzy ARTMAP with an explicit map field

Functions:
    DAM: Default ARTMAP (SFAM with choice-by-difference activation)

Example:
    >>> from adaptiveresonance.artmap import SFAM
    >>>
    >>> art = SFAM(rho=0.8)
    >>> art.train(x_train, y_train)
    >>> y_hat = art.classify(x_test, get_bmu=True)
"""

from .fam import FAM
from .sfam import DAM, SFAM

__all__ = ["SFAM", "DAM", "FAM"]
