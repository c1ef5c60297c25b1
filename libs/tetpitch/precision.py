"""Floating-point precision selection for pitch values.

Pitch values are numpy scalars so the same stepping algorithm runs in single
(float32) or double (float64) precision.
"""

from __future__ import annotations

from typing import Dict, Type, Union

import numpy as np


PRECISIONS: Dict[str, Type[np.floating]] = {
    "single": np.float32,
    "double": np.float64,
}

DTypeLike = Union[str, Type[np.floating], np.dtype]


def resolve_dtype(precision: DTypeLike) -> Type[np.floating]:
    """Map a precision name or numpy dtype to a numpy float scalar type.

    Accepts 'single', 'double', 'float32', 'float64', ``np.float32``,
    ``np.float64`` or an equivalent ``np.dtype``.
    """
    # np.dtype(None) is float64; a missing precision is an error here.
    if precision is None:
        raise ValueError("Precision must be given, got None")
    if isinstance(precision, str):
        name = precision.strip().lower()
        if name in PRECISIONS:
            return PRECISIONS[name]
        precision = name

    try:
        dtype = np.dtype(precision)
    except TypeError as e:
        raise ValueError(f"Unknown precision: {precision}") from e

    if dtype.type not in PRECISIONS.values():
        raise ValueError(f"Unsupported precision: {dtype.name}")
    return dtype.type


__all__ = ["PRECISIONS", "resolve_dtype"]
