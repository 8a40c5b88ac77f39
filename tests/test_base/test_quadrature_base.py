# Copyright (c) 2024 The pfasstkit developers
import numpy as np
import pytest

from pfasstkit.base.errors import InvalidConfiguration
from pfasstkit.base.quadraturebase import (
    barycentric_weights,
    check_num_nodes,
    compute_interp,
    compute_q_matrix,
    compute_q_vec,
    compute_s_matrix,
)


def test_compute_interp_identity():
    x = np.array([0.0, 0.2, 0.5, 0.9, 1.0])
    assert np.allclose(compute_interp(x, x), np.eye(5), rtol=0.0, atol=1e-14)

    x = np.linspace(0, 1, 9)
    P = compute_interp(x, x)
    assert np.allclose(P, np.eye(9), rtol=0.0, atol=1e-12)
    # off-diagonal entries vanish exactly
    assert np.all(P[~np.eye(9, dtype=bool)] == 0.0)


def test_compute_interp_polynomial():
    src = np.array([0.0, 0.3, 0.7, 1.0])
    dst = np.linspace(0, 1, 11)
    P = compute_interp(dst, src)
    assert P.shape == (11, 4)
    y = 2 * src**3 - src + 4
    assert np.allclose(P @ y, 2 * dst**3 - dst + 4)

    src = np.cos(np.linspace(0, np.pi, 15)) * 0.5 + 0.5
    dst = np.linspace(0, 1, 7)
    P = compute_interp(dst, src)
    assert np.allclose(P @ np.exp(src), np.exp(dst), atol=1e-10)


def test_compute_interp_rows_sum_to_one():
    src = np.array([0.1, 0.4, 0.6, 0.95])
    dst = np.array([0.0, 0.25, 0.5, 1.0, 1.3])
    assert np.allclose(compute_interp(dst, src).sum(axis=1), 1.0)


def test_compute_interp_single_node():
    assert np.allclose(compute_interp([0.1, 0.7], [0.5]), [[1.0], [1.0]])


def test_compute_interp_duplicated_nodes():
    with pytest.raises(InvalidConfiguration):
        compute_interp([0.5], [0.0, 0.5, 0.5])


def test_barycentric_weights():
    x = np.array([0.0, 0.5, 1.0])
    assert np.allclose(barycentric_weights(x), [2.0, -4.0, 2.0])


def test_compute_q_matrix():
    x = np.array([0.0, 0.25, 0.6, 1.0])
    Q = compute_q_matrix(x, x)
    assert Q.shape == (4, 4)
    assert np.allclose(Q[0], 0.0)
    assert np.allclose(Q @ (3 * x**2), x**3)
    assert np.allclose(Q @ np.ones(4), x)

    t = np.array([0.1, 0.9])
    Q = compute_q_matrix(x, t)
    assert Q.shape == (2, 4)
    assert np.allclose(Q @ (4 * x**3), t**4)


def test_compute_s_matrix():
    x = np.array([0.1, 0.4, 0.8])
    Q = compute_q_matrix(x, x)
    S = compute_s_matrix(Q)
    assert np.allclose(S[0], Q[0])
    assert np.allclose(S[1:], Q[1:] - Q[:-1])
    assert np.allclose(S @ (2 * x), np.diff(x**2, prepend=0.0))
    assert np.allclose(S.sum(axis=0), Q[-1])


def test_compute_q_vec():
    x = np.array([0.0, 0.5, 1.0])
    assert np.allclose(compute_q_vec(x), [1 / 6, 2 / 3, 1 / 6])


def test_check_num_nodes():
    assert check_num_nodes(4) == 4
    assert type(check_num_nodes(np.int32(4))) is int
    for bad in (3.0, True, "3", None):
        with pytest.raises(InvalidConfiguration, match="integer"):
            check_num_nodes(bad)
