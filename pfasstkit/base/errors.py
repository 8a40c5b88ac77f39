# Copyright (c) 2024 The pfasstkit developers
"""Exceptions raised by pfasstkit.

Each exception also derives from the builtin exception it refines, so callers
catching ``ValueError``, ``TypeError`` or ``MemoryError`` keep working.
"""


class PfasstError(Exception):
    """Base class of all pfasstkit errors."""


class InvalidConfiguration(PfasstError, ValueError):
    """A rule, state or option was requested with invalid parameters, e.g. too
    few quadrature nodes or an unknown quadrature type."""


class TypeMismatch(PfasstError, TypeError):
    """Two encapsulated states of incompatible variants (class, precision or
    size) were combined."""


class ResourceExhaustion(PfasstError, MemoryError):
    """Storage for a new encapsulated state could not be allocated."""
