# Copyright (c) 2024 The pfasstkit developers
"""Quadrature rules with nodes at the roots of Legendre-type polynomials."""

import scipy.special

from pfasstkit.base.quadraturebase import QuadratureBase
from pfasstkit.base.vectypes import *


def _to_unit(x: VecFloat) -> VecFloat:
    """Map points from [-1, 1] to [0, 1]."""
    return 0.5 * (1.0 + np.sort(x))


class GaussLegendre(QuadratureBase):
    """Legendre-Gauss rule.

    The nodes are the roots of the Legendre polynomial ``P_m``; neither end
    of the interval is a node. Exact for polynomials of degree ``2m - 1``.
    """

    min_nodes = 1
    left_is_node = False
    right_is_node = False

    def _compute_nodes(self) -> VecFloat:
        x, _ = scipy.special.roots_legendre(self.num_nodes)
        return _to_unit(x)


class GaussLobatto(QuadratureBase):
    """Legendre-Gauss-Lobatto rule.

    Both ends of the interval are nodes, the interior nodes are the roots of
    ``P'_{m-1}``. Exact for polynomials of degree ``2m - 3``.
    """

    min_nodes = 2
    left_is_node = True
    right_is_node = True

    def _compute_nodes(self) -> VecFloat:
        n_interior = self.num_nodes - 2
        if n_interior > 0:
            # P'_{m-1} is proportional to the Jacobi polynomial P^{(1,1)}_{m-2}
            x, _ = scipy.special.roots_jacobi(n_interior, 1.0, 1.0)
        else:
            x = np.empty(0, dtype=np.float64)
        return np.concatenate(([0.0], _to_unit(x), [1.0]))


class GaussRadau(QuadratureBase):
    """Right Legendre-Gauss-Radau rule.

    The right end of the interval is a node, the others are the roots of
    ``(P_m - P_{m-1}) / (x - 1)``. Exact for polynomials of degree ``2m - 2``.
    """

    min_nodes = 2
    left_is_node = False
    right_is_node = True

    def _compute_nodes(self) -> VecFloat:
        # (P_m - P_{m-1}) / (x - 1) is proportional to P^{(1,0)}_{m-1}
        x, _ = scipy.special.roots_jacobi(self.num_nodes - 1, 1.0, 0.0)
        return np.concatenate((_to_unit(x), [1.0]))
