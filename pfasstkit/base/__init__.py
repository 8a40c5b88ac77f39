# Copyright (c) 2024 The pfasstkit developers
"""This submodule contains the abstractions shared by the rest of pfasstkit:
the encapsulated solution state, its factory, the quadrature rule base class
and the Lagrange kernels the concrete quadrature families in
``pfasstkit.quadrature`` are built from."""
