"""Distributions and priors for regularising parameterised models."""

from importlib.metadata import PackageNotFoundError, version

from priorkit.distributions import (
    DIST_VERSION,
    Distribution,
    GammaDistribution,
    GaussianDistribution,
    WangDistribution,
    available_distributions,
    read_dist,
    write_dist,
)
from priorkit.exceptions import FileFormatError, PriorkitError
from priorkit.priors import ParamPriors, PriorBinding
from priorkit.regularisable import Regularisable

try:
    __version__ = version("priorkit")
except PackageNotFoundError:
    pass

__all__ = [
    "DIST_VERSION",
    "Distribution",
    "FileFormatError",
    "GammaDistribution",
    "GaussianDistribution",
    "ParamPriors",
    "PriorBinding",
    "PriorkitError",
    "Regularisable",
    "WangDistribution",
    "available_distributions",
    "read_dist",
    "write_dist",
]
