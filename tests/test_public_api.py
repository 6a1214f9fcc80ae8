"""Unit tests for public API."""

from __future__ import annotations

import priorkit
from priorkit import (
    DIST_VERSION,
    Distribution,
    FileFormatError,
    GammaDistribution,
    GaussianDistribution,
    ParamPriors,
    Regularisable,
    WangDistribution,
)


def test_public_all_contains_core_types():
    """Test that __all__ exposes the distribution and prior types."""
    expected = {
        "Distribution",
        "GaussianDistribution",
        "GammaDistribution",
        "WangDistribution",
        "ParamPriors",
        "Regularisable",
        "FileFormatError",
    }
    assert expected.issubset(set(priorkit.__all__))


def test_families_share_the_base_class():
    """Test that every built-in family is a Distribution."""
    for cls in (GaussianDistribution, GammaDistribution, WangDistribution):
        assert issubclass(cls, Distribution)


def test_version_constant():
    """Test the distribution format version."""
    assert DIST_VERSION == "0.1"
    assert ParamPriors is not None and Regularisable is not None and FileFormatError is not None
