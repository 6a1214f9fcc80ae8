"""Distributions that can be attached as priors."""

from .base import Distribution
from .gamma import GammaDistribution
from .gaussian import GaussianDistribution
from .io import (
    DIST_VERSION,
    available_distributions,
    make_distribution,
    read_dist,
    write_dist,
)
from .wang import WangDistribution

__all__ = [
    "DIST_VERSION",
    "Distribution",
    "GammaDistribution",
    "GaussianDistribution",
    "WangDistribution",
    "available_distributions",
    "make_distribution",
    "read_dist",
    "write_dist",
]
