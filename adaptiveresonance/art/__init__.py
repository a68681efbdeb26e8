# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Unsupervised ART modules
========================

Classes:
    FuzzyART: Fuzzy ART with optional gamma normalization
    DVFA: Dual Vigilance Fuzzy ART
    DDVFA: Distributed Dual Vigilance Fuzzy ART

Functions:
    GammaNormalizedFuzzyART: FuzzyART with gamma normalization enabled
"""

from .ddvfa import DDVFA, LINKAGE_METHODS
from .dvfa import DVFA
from .fuzzyart import FuzzyART, GammaNormalizedFuzzyART

__all__ = ["FuzzyART", "GammaNormalizedFuzzyART", "DVFA", "DDVFA", "LINKAGE_METHODS"]
