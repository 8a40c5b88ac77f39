# Copyright (c) 2024 The pfasstkit developers
"""Submodule for quadrature rules on the unit interval.

Five families are available, selected by ``QuadratureType``:

- ``GaussLegendre``: interior nodes only, highest order;
- ``GaussLobatto``: both interval ends are nodes;
- ``GaussRadau``: the right interval end is a node;
- ``ClenshawCurtis``: Chebyshev extrema including both ends;
- ``Uniform``: equidistant nodes including both ends.

All nodes lie in ``[0, 1]``.
"""

import functools
import logging
from enum import Enum

from pfasstkit.base.errors import InvalidConfiguration
from pfasstkit.base.quadraturebase import (
    QuadratureBase,
    check_num_nodes,
    compute_interp,
    compute_q_matrix,
    compute_q_vec,
    compute_s_matrix,
)
from pfasstkit.base.vectypes import *
from .closed import ClenshawCurtis, Uniform
from .gauss import GaussLegendre, GaussLobatto, GaussRadau

logger = logging.getLogger(__name__)


class QuadratureType(Enum):
    """Quadrature families. The values are the tags used in option files."""

    GaussLegendre = "gauss-legendre"
    GaussLobatto = "gauss-lobatto"
    GaussRadau = "gauss-radau"
    ClenshawCurtis = "clenshaw-curtis"
    Uniform = "uniform"


_CLASS_QUADRATURE: dict[QuadratureType, type[QuadratureBase]] = {
    QuadratureType.GaussLegendre: GaussLegendre,
    QuadratureType.GaussLobatto: GaussLobatto,
    QuadratureType.GaussRadau: GaussRadau,
    QuadratureType.ClenshawCurtis: ClenshawCurtis,
    QuadratureType.Uniform: Uniform,
}


def quadrature_type(tag: QuadratureType | str) -> QuadratureType:
    """Convert a tag such as ``"gauss-lobatto"`` to a ``QuadratureType``.

    Raises:
        InvalidConfiguration: If the tag is not one of the five known tags.
    """
    if isinstance(tag, QuadratureType):
        return tag
    for qtype in QuadratureType:
        if tag == qtype.value:
            return qtype
    raise InvalidConfiguration(f"Quadrature type '{tag}' not known.")


@functools.lru_cache
def _build(qtype: QuadratureType, num_nodes: int) -> QuadratureBase:
    logger.debug("building %s quadrature with %d nodes", qtype.value, num_nodes)
    return _CLASS_QUADRATURE[qtype](num_nodes)


def quadrature_factory(num_nodes: int, qtype: QuadratureType | str) -> QuadratureBase:
    """Return the quadrature rule of the given type and number of nodes.

    Rules are immutable, so the same object is returned for repeated requests.

    Args:
        num_nodes: Number of quadrature nodes.
        qtype: A ``QuadratureType`` or its string tag, e.g. ``"gauss-radau"``.

    Returns:
        The quadrature rule.

    Raises:
        InvalidConfiguration: If ``qtype`` is unknown or ``num_nodes`` is below
            the minimum of the family.
    """
    qtype = quadrature_type(qtype)
    # validated before the cache lookup, which would accept 3.0 as 3
    return _build(qtype, check_num_nodes(num_nodes))


def compute_nodes(num_nodes: int, qtype: QuadratureType | str) -> VecFloat:
    """Nodes of the quadrature rule of the given type and number of nodes."""
    return quadrature_factory(num_nodes, qtype).nodes


__all__ = [
    "ClenshawCurtis",
    "GaussLegendre",
    "GaussLobatto",
    "GaussRadau",
    "QuadratureBase",
    "QuadratureType",
    "Uniform",
    "compute_interp",
    "compute_nodes",
    "compute_q_matrix",
    "compute_q_vec",
    "compute_s_matrix",
    "quadrature_factory",
    "quadrature_type",
]
