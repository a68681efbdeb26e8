# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Shared option mixins for ART and ARTMAP modules.

Options are declared as ``pyspark.ml.param.Param`` attributes, in the same
way as the shared ``HasXxx`` mixins of ``pyspark.ml.param.shared``. Only the
pure-Python parameter machinery is used: no SparkContext is ever created.
"""

from pyspark.ml.param import Param, Params, TypeConverters
from pyspark.ml.param.shared import HasMaxIter


class HasAlpha(Params):
    """Mixin for param alpha: choice parameter (> 0)."""

    alpha = Param(
        Params._dummy(),
        "alpha",
        "Choice parameter (alpha > 0).",
        typeConverter=TypeConverters.toFloat,
    )

    def __init__(self):
        super(HasAlpha, self).__init__()

    def getAlpha(self) -> float:
        """Gets the value of alpha or its default value."""
        return self.getOrDefault(self.alpha)


class HasBeta(Params):
    """Mixin for param beta: learning parameter in (0, 1]."""

    beta = Param(
        Params._dummy(),
        "beta",
        "Learning parameter, beta in (0, 1].",
        typeConverter=TypeConverters.toFloat,
    )

    def __init__(self):
        super(HasBeta, self).__init__()

    def getBeta(self) -> float:
        """Gets the value of beta or its default value."""
        return self.getOrDefault(self.beta)


class HasGamma(Params):
    """Mixin for the gamma-normalization params: gamma, gammaRef, gammaNormalization."""

    gamma = Param(
        Params._dummy(),
        "gamma",
        "Pseudo kernel width (gamma >= 1).",
        typeConverter=TypeConverters.toFloat,
    )

    gammaRef = Param(
        Params._dummy(),
        "gammaRef",
        "Reference gamma for normalization (0 <= gammaRef <= gamma).",
        typeConverter=TypeConverters.toFloat,
    )

    gammaNormalization = Param(
        Params._dummy(),
        "gammaNormalization",
        "Normalize the threshold by the feature dimension. Forces the gamma "
        "activation and match functions.",
        typeConverter=TypeConverters.toBoolean,
    )

    def __init__(self):
        super(HasGamma, self).__init__()

    def getGamma(self) -> float:
        """Gets the value of gamma or its default value."""
        return self.getOrDefault(self.gamma)

    def getGammaRef(self) -> float:
        """Gets the value of gammaRef or its default value."""
        return self.getOrDefault(self.gammaRef)

    def getGammaNormalization(self) -> bool:
        """Gets the value of gammaNormalization or its default value."""
        return self.getOrDefault(self.gammaNormalization)


class HasDisplay(Params):
    """Mixin for param display: show a progress bar over batch loops."""

    display = Param(
        Params._dummy(),
        "display",
        "Show a progress bar during batch training and classification.",
        typeConverter=TypeConverters.toBoolean,
    )

    def __init__(self):
        super(HasDisplay, self).__init__()

    def getDisplay(self) -> bool:
        """Gets the value of display or its default value."""
        return self.getOrDefault(self.display)


class HasUncommitted(Params):
    """Mixin for param uncommitted: learn new categories from an all-ones node."""

    uncommitted = Param(
        Params._dummy(),
        "uncommitted",
        "Create new weights as ones and learn the sample instead of fast "
        "committing the sample.",
        typeConverter=TypeConverters.toBoolean,
    )

    def __init__(self):
        super(HasUncommitted, self).__init__()

    def getUncommitted(self) -> bool:
        """Gets the value of uncommitted or its default value."""
        return self.getOrDefault(self.uncommitted)


class HasFunctions(Params):
    """Mixin for the activation, match and update function names."""

    activation = Param(
        Params._dummy(),
        "activation",
        "Activation function: basic_activation, unnormalized_match, "
        "choice_by_difference, gamma_activation",
        typeConverter=TypeConverters.toString,
    )

    match = Param(
        Params._dummy(),
        "match",
        "Match function: basic_match, gamma_match, unnormalized_match",
        typeConverter=TypeConverters.toString,
    )

    update = Param(
        Params._dummy(),
        "update",
        "Weight update function: basic_update",
        typeConverter=TypeConverters.toString,
    )

    def __init__(self):
        super(HasFunctions, self).__init__()

    def getActivation(self) -> str:
        """Gets the value of activation or its default value."""
        return self.getOrDefault(self.activation)

    def getMatch(self) -> str:
        """Gets the value of match or its default value."""
        return self.getOrDefault(self.match)

    def getUpdate(self) -> str:
        """Gets the value of update or its default value."""
        return self.getOrDefault(self.update)


class ARTParams(HasMaxIter, HasAlpha, HasBeta, HasDisplay, HasUncommitted, HasFunctions):
    """
    Params common to every ART and ARTMAP module.

    maxIter is the maximum number of training epochs over a batch.
    """

    def __init__(self):
        super(ARTParams, self).__init__()

    def _check_common_params(self):
        if self.getMaxIter() < 1:
            raise ValueError("maxIter must be >= 1, got %d" % self.getMaxIter())
        if not self.getAlpha() > 0.0:
            raise ValueError("alpha must be > 0, got %s" % self.getAlpha())
        if not 0.0 < self.getBeta() <= 1.0:
            raise ValueError("beta must be in (0, 1], got %s" % self.getBeta())


def check_unit_interval(name: str, value: float) -> None:
    """Raise if a vigilance-style option is outside [0, 1]."""
    if not 0.0 <= value <= 1.0:
        raise ValueError("%s must be in [0, 1], got %s" % (name, value))


class HasEpsilon(Params):
    """Mixin for param epsilon: match tracking increment in (0, 1)."""

    epsilon = Param(
        Params._dummy(),
        "epsilon",
        "Match tracking parameter, epsilon in (0, 1).",
        typeConverter=TypeConverters.toFloat,
    )

    def __init__(self):
        super(HasEpsilon, self).__init__()

    def getEpsilon(self) -> float:
        """Gets the value of epsilon or its default value."""
        return self.getOrDefault(self.epsilon)
