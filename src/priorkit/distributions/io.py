"""Reading and writing distributions as tagged text blocks.

A serialized distribution looks like::

    distVersion=0.1
    type=gaussian
    numParams=1
    param0=2.0 precision

The ``type`` line selects the family from a fixed table of built-in
distributions; the remaining lines are the family's parameter block (see
:meth:`priorkit.distributions.base.Distribution.write_params`).

Notes:
    - Family tags are case/spacing/punctuation insensitive on read, and
      aliases (e.g. ``"scale"`` for ``"wang"``) are accepted.
    - For the canonical tags call ``available_distributions()``.
"""

from __future__ import annotations

import re
from typing import Mapping, TextIO, Type

from priorkit.distributions.base import Distribution
from priorkit.distributions.gamma import GammaDistribution
from priorkit.distributions.gaussian import GaussianDistribution
from priorkit.distributions.wang import WangDistribution
from priorkit.exceptions import FileFormatError
from priorkit.logger import priorkit_logger
from priorkit.utils.strings import read_key_value

__all__ = [
    "DIST_VERSION",
    "available_distributions",
    "make_distribution",
    "write_dist",
    "read_dist",
]

DIST_VERSION = "0.1"

# The built-in families. Reading a tag that is not listed here is a format error.
_DISTRIBUTION_SPECS: tuple[tuple[str, Type[Distribution], tuple[str, ...]], ...] = (
    ("gaussian", GaussianDistribution, ("normal",)),
    ("gamma", GammaDistribution, ()),
    ("wang", WangDistribution, ("scale",)),
)


def _norm(s: str) -> str:
    """Normalizes a family tag for robust matching."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


def _build_distribution_maps() -> tuple[Mapping[str, Type[Distribution]], tuple[str, ...]]:
    """Builds the tag lookup table.

    Returns:
        A pair ``(tag_map, canonical_tags)`` where ``tag_map`` maps
        normalized tags and aliases to distribution classes.
    """
    tag_map: dict[str, Type[Distribution]] = {}
    canonical: list[str] = []
    for tag, cls, aliases in _DISTRIBUTION_SPECS:
        tag_map[_norm(tag)] = cls
        canonical.append(tag)
        for alias in aliases:
            tag_map[_norm(alias)] = cls
    return tag_map, tuple(sorted(canonical))


_TAG_MAP, _CANONICAL_TAGS = _build_distribution_maps()


def available_distributions() -> list[str]:
    """Lists the canonical family tags.

    Returns:
        Sorted list of tags.
    """
    return list(_CANONICAL_TAGS)


def make_distribution(dist_type: str) -> Distribution:
    """Builds a distribution of the given family with default parameters.

    Args:
        dist_type: Family tag or alias.

    Returns:
        A new distribution instance.

    Raises:
        ValueError: If ``dist_type`` is not a known family.
    """
    try:
        cls = _TAG_MAP[_norm(dist_type)]
    except KeyError:
        opts = ", ".join(_CANONICAL_TAGS)
        raise ValueError(f"Unknown distribution type '{dist_type}'. Choose one of {{{opts}}}.") from None
    return cls()


def write_dist(dist: Distribution, out: TextIO) -> None:
    """Writes ``dist`` as a tagged block.

    Args:
        dist: Distribution to write.
        out: Text stream.
    """
    out.write(f"distVersion={DIST_VERSION}\n")
    out.write(f"type={dist.dist_type}\n")
    dist.write_params(out)


def read_dist(stream: TextIO) -> Distribution:
    """Reads a tagged block written by :func:`write_dist`.

    Args:
        stream: Text stream positioned at the ``distVersion`` line.

    Returns:
        A new distribution of the family named in the block.

    Raises:
        FileFormatError: If the block is malformed or names an unknown family.
    """
    version = read_key_value(stream, "distVersion")
    if version != DIST_VERSION:
        priorkit_logger.warning(
            "Reading distribution written with format version %s (library version is %s).",
            version,
            DIST_VERSION,
        )
    dist_type = read_key_value(stream, "type")
    try:
        dist = make_distribution(dist_type)
    except ValueError as exc:
        raise FileFormatError(str(exc), line=f"type={dist_type}") from exc
    dist.read_params(stream)
    return dist
