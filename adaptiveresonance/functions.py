# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Activation, match and weight update functions.

Every activation and match function takes the module (for its options and
data configuration), a complement coded sample ``x`` of shape (dim_comp,) and
a weight matrix ``W`` of shape (dim_comp, n) and returns an array of ``n``
values, one per weight column. Update functions take a single weight column
and return the updated column.

Modules look up their functions by name in the tables at the bottom of this
file once, when their options are set.
"""

from typing import Callable, Dict

import numpy as np


def x_W_min_norm(x: np.ndarray, W: np.ndarray) -> np.ndarray:
    """L1 norm of the fuzzy AND of the sample with each weight column."""
    return np.minimum(x[:, np.newaxis], W).sum(axis=0)


def W_norm(W: np.ndarray) -> np.ndarray:
    """L1 norm of each weight column."""
    return W.sum(axis=0)


def basic_activation(art, x: np.ndarray, W: np.ndarray) -> np.ndarray:
    """Fuzzy ART choice function ``|x ^ W| / (alpha + |W|)``."""
    return x_W_min_norm(x, W) / (art.getAlpha() + W_norm(W))


def unnormalized_match(art, x: np.ndarray, W: np.ndarray) -> np.ndarray:
    """Unnormalized match ``|x ^ W|``."""
    return x_W_min_norm(x, W)


def choice_by_difference(art, x: np.ndarray, W: np.ndarray) -> np.ndarray:
    """Default ARTMAP choice-by-difference activation."""
    return x_W_min_norm(x, W) + (1.0 - art.getAlpha()) * (art.config.dim - W_norm(W))


def gamma_activation(art, x: np.ndarray, W: np.ndarray) -> np.ndarray:
    """Gamma-normalized activation, the basic activation raised to ``gamma``."""
    return basic_activation(art, x, W) ** art.getGamma()


def basic_match(art, x: np.ndarray, W: np.ndarray) -> np.ndarray:
    """Fuzzy ART match ``|x ^ W| / dim``."""
    return x_W_min_norm(x, W) / art.config.dim


def gamma_match(art, x: np.ndarray, W: np.ndarray) -> np.ndarray:
    """Gamma-normalized match ``|W| ** gamma_ref * gamma_activation``."""
    return (W_norm(W) ** art.getGammaRef()) * gamma_activation(art, x, W)


def basic_update(art, x: np.ndarray, W: np.ndarray) -> np.ndarray:
    """Fuzzy ART learning rule ``beta * (x ^ W) + (1 - beta) * W``."""
    beta = art.getBeta()
    return beta * np.minimum(x, W) + (1.0 - beta) * W


ACTIVATION_FUNCTIONS: Dict[str, Callable] = {
    "basic_activation": basic_activation,
    "unnormalized_match": unnormalized_match,
    "choice_by_difference": choice_by_difference,
    "gamma_activation": gamma_activation,
}

MATCH_FUNCTIONS: Dict[str, Callable] = {
    "basic_match": basic_match,
    "gamma_match": gamma_match,
    "unnormalized_match": unnormalized_match,
}

UPDATE_FUNCTIONS: Dict[str, Callable] = {
    "basic_update": basic_update,
}


def get_function(table: Dict[str, Callable], name: str, kind: str) -> Callable:
    """Look up ``name`` in ``table``, failing with the list of valid options."""
    try:
        return table[name]
    except KeyError:
        raise ValueError(
            "Unknown %s function '%s'. Options: %s"
            % (kind, name, ", ".join(sorted(table)))
        ) from None
