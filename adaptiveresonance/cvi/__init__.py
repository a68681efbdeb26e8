# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Cluster Validity Indices
========================

Batch and incremental cluster validity indices. Every index exposes
``param_inc``/``param_batch`` to update its statistics, ``evaluate`` to
compute the criterion value, and the ``get_icvi``/``get_cvi`` shortcuts.

Classes:
    XB: Xie-Beni index (lower is better)
    DB: Davies-Bouldin index (lower is better)
    PS: Partition Separation index (higher is better)
    CONN: Tasdemir-Merenyi connectivity index over prototypes (higher is better)

Functions:
    bmu_pairs: best and second-best matching prototypes of every sample, the
        input of CONN
"""

from .base import CVI
from .conn import CONN, bmu_pairs
from .db import DB
from .ps import PS
from .xb import XB

__all__ = ["CVI", "XB", "DB", "PS", "CONN", "bmu_pairs"]
