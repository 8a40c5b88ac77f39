# Copyright (c) 2024 The pfasstkit developers
"""Quadrature rules with closed-form nodes including both interval ends."""

from pfasstkit.base.quadraturebase import QuadratureBase
from pfasstkit.base.vectypes import *


class ClenshawCurtis(QuadratureBase):
    """Clenshaw-Curtis rule.

    The nodes are the Chebyshev extrema ``(1 - cos(j pi / (m - 1))) / 2``.
    """

    min_nodes = 2
    left_is_node = True
    right_is_node = True

    def _compute_nodes(self) -> VecFloat:
        j = np.arange(self.num_nodes, dtype=np.float64)
        nodes = 0.5 * (1.0 - np.cos(j * np.pi / (self.num_nodes - 1)))
        nodes[0] = 0.0
        nodes[-1] = 1.0
        return nodes


class Uniform(QuadratureBase):
    """Interpolatory rule on equidistant nodes ``j / (m - 1)``."""

    min_nodes = 2
    left_is_node = True
    right_is_node = True

    def _compute_nodes(self) -> VecFloat:
        return np.linspace(0.0, 1.0, self.num_nodes)
