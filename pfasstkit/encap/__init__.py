# Copyright (c) 2024 The pfasstkit developers
"""Submodule for concrete encapsulated states.

``VectorEncapsulation`` stores the degrees of freedom of a solution in a
contiguous array and is suitable for any problem whose state can be flattened
to a vector.
"""

from pfasstkit.base.encapsulation import EncapFactory, EncapType, Encapsulation, mat_apply
from .vector import VectorEncapsulation, VectorFactory

__all__ = [
    "EncapFactory",
    "EncapType",
    "Encapsulation",
    "VectorEncapsulation",
    "VectorFactory",
    "mat_apply",
]
