# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Data configuration and preprocessing shared by every ART/ARTMAP module.

All modules follow the (n_features, n_samples) convention: features are rows
and samples are columns. A single sample is a 1-D array of length n_features.
"""

import logging
from typing import Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

# Axis conventions for 2-D data
ART_DIM = 0
ART_SAMPLES = 1


class DataConfig:
    """
    Container for the feature bounds used to normalize and complement code data.

    Parameters
    ----------
    mins : array-like or float, optional
        Per-feature minimums, or a single minimum shared by every feature.

    maxs : array-like or float, optional
        Per-feature maximums, or a single maximum shared by every feature.

    dim : int, optional
        Feature dimension. Required when ``mins`` and ``maxs`` are scalars.

    Attributes
    ----------
    is_set : bool
        Whether the bounds have been configured.

    mins, maxs : np.ndarray
        Feature bounds, each of length ``dim``.

    dim : int
        Number of features.

    dim_comp : int
        Complement coded dimension, ``2 * dim``.

    Examples
    --------
    >>> config = DataConfig()                    # empty, set up later
    >>> config = DataConfig([0.0, -1.0], [1.0, 1.0])
    >>> config = DataConfig(0.0, 1.0, 4)
    >>> config = DataConfig.from_data(np.random.rand(4, 100))
    """

    def __init__(self, mins=None, maxs=None, dim: int = None):
        self.is_set = False
        self.mins = np.zeros(0)
        self.maxs = np.zeros(0)
        self.dim = 0
        self.dim_comp = 0

        if mins is None and maxs is None:
            return
        if mins is None or maxs is None:
            raise ValueError("Both mins and maxs must be provided.")

        if np.isscalar(mins) and np.isscalar(maxs):
            if dim is None:
                raise ValueError(
                    "The feature dimension must be provided with scalar bounds."
                )
            mins = np.full(int(dim), float(mins))
            maxs = np.full(int(dim), float(maxs))
        else:
            mins = np.asarray(mins, dtype=float).ravel()
            maxs = np.asarray(maxs, dtype=float).ravel()
            if len(mins) != len(maxs):
                raise ValueError("Mins and maxs must be the same length.")

        self.mins = mins
        self.maxs = maxs
        self.dim = len(mins)
        self.dim_comp = 2 * self.dim
        self.is_set = True

    @classmethod
    def from_data(cls, data) -> "DataConfig":
        """Infer a data configuration from a 2-D batch of data."""
        config = cls()
        data_setup(config, data)
        return config

    def __repr__(self) -> str:
        return "DataConfig(is_set=%s, dim=%d)" % (self.is_set, self.dim)


def get_dim(data: np.ndarray) -> int:
    """Feature dimension of a 2-D batch."""
    return data.shape[ART_DIM]


def get_n_samples(data: np.ndarray) -> int:
    """Number of samples in a 2-D batch."""
    return data.shape[ART_SAMPLES]


def get_data_shape(data: np.ndarray) -> Tuple[int, int]:
    """(dim, n_samples) of a 2-D batch."""
    return get_dim(data), get_n_samples(data)


def data_setup(config: DataConfig, data) -> None:
    """
    Set up ``config`` from the per-feature extrema of a 2-D batch.

    Overwrites (with a warning) a configuration that is already set.

    Parameters
    ----------
    config : DataConfig
        The configuration to populate in place.

    data : array-like
        Batch of shape (n_features, n_samples).
    """
    data = np.asarray(data, dtype=float)
    if data.ndim != 2:
        raise ValueError(
            "Data setup requires a 2-D batch, got %d dimension(s)." % data.ndim
        )

    if config.is_set:
        logger.warning("Data configuration already set up, overwriting config")
    else:
        config.is_set = True

    config.dim = get_dim(data)
    config.dim_comp = 2 * config.dim
    config.mins = data.min(axis=ART_SAMPLES)
    config.maxs = data.max(axis=ART_SAMPLES)


def linear_normalization(data, config: DataConfig) -> np.ndarray:
    """
    Normalize a sample or a batch to [0, 1] along each feature.

    Features whose minimum equals their maximum carry no information and are
    normalized to zero.

    Parameters
    ----------
    data : array-like
        A 1-D sample or a 2-D batch of shape (n_features, n_samples).

    config : DataConfig
        A configuration that has been set up.

    Returns
    -------
    np.ndarray
        Normalized data with the same shape as ``data``.
    """
    if not config.is_set:
        raise ValueError("Attempting to normalize data without a setup DataConfig")

    if np.any(config.maxs < config.mins):
        raise ValueError(
            "Got a data max index that is smaller than the corresponding min"
        )

    data = np.asarray(data, dtype=float)
    if data.shape[ART_DIM] != config.dim:
        raise ValueError(
            "Expected %d features, got %d." % (config.dim, data.shape[ART_DIM])
        )

    denominator = config.maxs - config.mins
    valid = denominator != 0
    safe_denominator = np.where(valid, denominator, 1.0)

    if data.ndim == 1:
        return np.where(valid, (data - config.mins) / safe_denominator, 0.0)

    mins = config.mins[:, np.newaxis]
    normalized = (data - mins) / safe_denominator[:, np.newaxis]
    return np.where(valid[:, np.newaxis], normalized, 0.0)


def complement_code(data, config: DataConfig) -> np.ndarray:
    """
    Normalize ``data`` and return the augmented array ``[x; 1 - x]``.

    The complement is stacked along the feature axis, doubling the feature
    dimension of a sample or a batch.
    """
    x_raw = linear_normalization(data, config)
    return np.concatenate([x_raw, 1.0 - x_raw], axis=ART_DIM)


def performance(y_hat: Union[Sequence[int], np.ndarray], y: Union[Sequence[int], np.ndarray]) -> float:
    """
    Fraction of estimated labels ``y_hat`` that equal the true labels ``y``.

    Raises
    ------
    ValueError
        If the label vectors differ in length.
    """
    y_hat = np.asarray(y_hat)
    y = np.asarray(y)
    if len(y_hat) != len(y):
        raise ValueError("Label vectors must be the same length")
    if len(y) == 0:
        return 0.0
    return float(np.sum(y_hat == y)) / len(y)
