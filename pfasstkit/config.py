# Copyright (c) 2024 The pfasstkit developers
"""Resolution of already-parsed options into pfasstkit types.

pfasstkit reads no files and no command lines; the surrounding solver passes
its options as a mapping from option name to value.
"""

from typing import Any, Mapping, Optional

from pfasstkit.base.errors import InvalidConfiguration
from pfasstkit.quadrature import QuadratureType, quadrature_type


def get_value(
    options: Mapping[str, Any],
    name: str,
    default: Optional[QuadratureType] = None,
) -> QuadratureType:
    """Look up the option ``name`` and resolve it to a ``QuadratureType``.

    Args:
        options: Parsed options.
        name: Name of the option.
        default: Returned if the option is not set.

    Returns:
        The quadrature type given by the option, or ``default``.

    Raises:
        InvalidConfiguration: If the option holds an unknown tag, or if it is
            not set and no default is given.
    """
    if name in options:
        return quadrature_type(options[name])
    if default is None:
        raise InvalidConfiguration(f"option '{name}' is not set")
    return default


__all__ = ["get_value", "quadrature_type"]
