# Copyright (c) 2024 The pfasstkit developers
import logging
from abc import ABC, abstractmethod
from typing import Iterable

import numba as nb
import scipy.special

from .errors import InvalidConfiguration
from .vectypes import *

logger = logging.getLogger(__name__)

CLAMP_THRESHOLD = 1e-32
"""Entries of an interpolation matrix with smaller magnitude are set to
exactly zero."""


@nb.njit
def _interpolation_kernel(dst: VecFloat, src: VecFloat) -> MatFloat:
    n_dst = len(dst)
    n_src = len(src)
    mat = np.zeros((n_dst, n_src), dtype=np.float64)
    for i in range(n_dst):
        for j in range(n_src):
            num = 1.0
            den = 1.0
            for k in range(n_src):
                if k == j:
                    continue
                num *= dst[i] - src[k]
                den *= src[j] - src[k]
            value = num / den
            if abs(value) >= CLAMP_THRESHOLD:
                mat[i, j] = value
    return mat


@nb.njit
def _lagrange_values(
    points: VecFloat, nodes: VecFloat, weights_bary: VecFloat
) -> MatFloat:
    """Evaluate all Lagrange basis polynomials of ``nodes`` at ``points`` with
    the barycentric formula.

    Returns:
        A matrix of shape ``(len(points), len(nodes))`` with
        ``L[k, j] = L_j(points[k])``.
    """
    n_eval = len(points)
    n = len(nodes)
    L = np.zeros((n_eval, n), dtype=np.float64)
    for k in range(n_eval):
        x = points[k]
        hit = -1
        for s in range(n):
            if x == nodes[s]:
                hit = s
                break
        if hit >= 0:
            L[k, hit] = 1.0
            continue
        total = 0.0
        for s in range(n):
            L[k, s] = weights_bary[s] / (x - nodes[s])
            total += L[k, s]
        for s in range(n):
            L[k, s] /= total
    return L


def _as_nodes(nodes: Iterable[float], name: str) -> VecFloat:
    nodes = np.ascontiguousarray(nodes, dtype=np.float64)
    if nodes.ndim != 1:
        raise InvalidConfiguration(
            f"{name} must be one-dimensional, got shape {nodes.shape}"
        )
    return nodes


def _check_distinct(nodes: VecFloat, name: str) -> None:
    gaps = np.diff(np.sort(nodes))
    if np.any(np.isclose(gaps, 0.0, rtol=0.0, atol=1e-13)):
        raise InvalidConfiguration(f"{name} must contain distinct nodes")


def barycentric_weights(nodes: VecFloat) -> VecFloat:
    """Barycentric weights ``w_j = 1 / prod_{k != j} (x_j - x_k)``."""
    diff = nodes[:, np.newaxis] - nodes[np.newaxis, :]
    np.fill_diagonal(diff, 1.0)
    return 1.0 / np.prod(diff, axis=1)


def compute_interp(dst: Iterable[float], src: Iterable[float]) -> MatFloat:
    """Interpolation matrix from nodes ``src`` to nodes ``dst``.

    Entry ``(i, j)`` is the Lagrange basis polynomial of ``src`` belonging to
    node ``j``, evaluated at ``dst[i]``. Values with magnitude below
    ``CLAMP_THRESHOLD`` are set to zero.

    Args:
        dst: Nodes to interpolate to.
        src: Distinct nodes where function values are known.

    Returns:
        A matrix ``P`` of shape ``(len(dst), len(src))`` such that
        ``P @ f(src) = p(dst)`` for the interpolation polynomial ``p`` of ``f``.

    Raises:
        InvalidConfiguration: If ``src`` contains duplicated nodes.
    """
    dst = _as_nodes(dst, "dst")
    src = _as_nodes(src, "src")
    _check_distinct(src, "src")
    return _interpolation_kernel(dst, src)


def compute_q_matrix(
    from_nodes: Iterable[float], to_nodes: Iterable[float]
) -> MatFloat:
    """Integration matrix of the Lagrange basis of ``from_nodes``.

    The integration starts at 0, so a target node at 0 yields a zero row.
    The integrals are evaluated with a Gauss-Legendre rule of sufficient
    order, which is exact for the polynomial basis.

    Args:
        from_nodes: Distinct nodes where function values are known.
        to_nodes: Upper integration limits.

    Returns:
        A matrix ``Q`` of shape ``(len(to_nodes), len(from_nodes))`` such that
        ``(Q @ f)[i]`` is the integral of the interpolation polynomial of ``f``
        from 0 to ``to_nodes[i]``.
    """
    from_nodes = _as_nodes(from_nodes, "from_nodes")
    to_nodes = _as_nodes(to_nodes, "to_nodes")
    n = len(from_nodes)
    if n == 0:
        return np.zeros((len(to_nodes), 0), dtype=np.float64)
    _check_distinct(from_nodes, "from_nodes")

    x_ref, w_ref = scipy.special.roots_legendre(max(30, 3 * n))
    # map [-1, 1] onto [0, t] for every upper limit t
    half = 0.5 * to_nodes[:, np.newaxis]
    points = half * (x_ref[np.newaxis, :] + 1.0)
    weights = half * w_ref[np.newaxis, :]

    L = _lagrange_values(points.ravel(), from_nodes, barycentric_weights(from_nodes))
    L = L.reshape(len(to_nodes), len(x_ref), n)
    return np.einsum("tq,tqj->tj", weights, L)


def compute_s_matrix(q_mat: MatFloat) -> MatFloat:
    """Node-to-node integration matrix from a matrix of ``compute_q_matrix``.

    Row 0 is kept, row ``i > 0`` becomes ``q_mat[i] - q_mat[i - 1]``.
    """
    s_mat = np.array(q_mat, dtype=np.float64)
    s_mat[1:] -= q_mat[:-1]
    return s_mat


def compute_q_vec(nodes: Iterable[float]) -> VecFloat:
    """Integrals of the Lagrange basis polynomials of ``nodes`` over [0, 1]."""
    return compute_q_matrix(nodes, [1.0])[0]


def check_num_nodes(num_nodes: int) -> int:
    """Return ``num_nodes`` as an ``int``.

    Raises:
        InvalidConfiguration: If ``num_nodes`` is not an integer.
    """
    if isinstance(num_nodes, bool) or not isinstance(num_nodes, (int, np.integer)):
        raise InvalidConfiguration(
            f"number of nodes must be an integer, got {type(num_nodes).__name__}"
        )
    return int(num_nodes)


def _frozen(a: np.ndarray) -> np.ndarray:
    a.setflags(write=False)
    return a


class QuadratureBase(ABC):
    """Quadrature rule on the unit interval.

    A rule is fully determined by its type and number of nodes. Everything is
    computed in the constructor and stored in read-only arrays, so a rule can
    be shared freely.
    """

    min_nodes: int = 1
    """Minimum number of nodes of the family."""
    left_is_node: bool
    """Whether 0 is a node."""
    right_is_node: bool
    """Whether 1 is a node."""

    num_nodes: int
    """Number of nodes."""
    nodes: VecFloat
    """Nodes in [0, 1], strictly increasing."""
    q_vec: VecFloat
    """Weights for integration over [0, 1]."""
    q_mat: MatFloat
    """Integration from 0 to each node, shape ``(num_nodes, num_nodes)``."""
    s_mat: MatFloat
    """Integration from node to node, shape ``(num_nodes, num_nodes)``. Row 0
    integrates from 0 to the first node."""
    b_mat: MatFloat
    """``q_vec`` as a matrix of shape ``(1, num_nodes)``."""
    delta_nodes: VecFloat
    """Distance of each node to its predecessor; the first entry is the
    distance to 0."""

    def __init__(self, num_nodes: int) -> None:
        """
        Args:
            num_nodes: Number of quadrature nodes.

        Raises:
            InvalidConfiguration: If ``num_nodes`` is below the family's minimum.
        """
        num_nodes = check_num_nodes(num_nodes)
        if num_nodes < self.min_nodes:
            raise InvalidConfiguration(
                f"{type(self).__name__} quadrature requires at least "
                f"{self.min_nodes} nodes, got {num_nodes}"
            )
        self.num_nodes = num_nodes

        nodes = self._compute_nodes()
        q_mat = compute_q_matrix(nodes, nodes)
        q_vec = compute_q_vec(nodes)

        self.nodes = _frozen(nodes)
        self.q_mat = _frozen(q_mat)
        self.s_mat = _frozen(compute_s_matrix(q_mat))
        self.q_vec = _frozen(q_vec)
        self.b_mat = _frozen(q_vec.reshape(1, -1).copy())
        self.delta_nodes = _frozen(np.diff(nodes, prepend=0.0))
        logger.debug("constructed %r", self)

    @abstractmethod
    def _compute_nodes(self) -> VecFloat:
        """Compute the ascending nodes of the rule in [0, 1]."""

    @property
    def weights(self) -> VecFloat:
        """Weights for integration over [0, 1]; same as ``q_vec``."""
        return self.q_vec

    def integrate(self, values: Iterable[float]) -> float:
        """Approximate the integral over [0, 1] of a function with the given
        values at the nodes."""
        return float(np.dot(self.q_vec, np.asarray(values, dtype=np.float64)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.num_nodes})"
