# Copyright (c) 2024 The pfasstkit developers
"""# pfasstkit: building blocks for spectral deferred correction

**pfasstkit** provides the numerical core of spectral deferred correction (SDC)
and PFASST time integrators:

- 📦 **Encapsulated states:** ``pfasstkit.encap`` defines an in-place mutable
  solution state with the vector-space operations SDC sweeps need
  (``zero``, ``copy``, ``saxpy``, ``mat_apply``, ``norm0``) and a factory to
  allocate them.
- 📐 **Quadrature:** ``pfasstkit.quadrature`` computes nodes, weights and
  node-to-node integration matrices on ``[0, 1]`` for Gauss-Legendre,
  Gauss-Lobatto, Gauss-Radau, Clenshaw-Curtis and uniform nodes, and
  Lagrange interpolation matrices between arbitrary node sets.

Sweepers, controllers and problem definitions are built on top of these
primitives and are not part of this package.
"""

__author__ = "The pfasstkit developers"
__copyright__ = "Copyright (c) 2024 The pfasstkit developers"
