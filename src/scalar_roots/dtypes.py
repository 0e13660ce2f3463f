"""
Resolution of the numeric type used by a root-finding call.
"""
from numbers import Integral
from typing import Any, Callable, Optional

import numpy as np

# types


DType = Callable[[Any], Any]


def get_dtype(value: Any, dtype: Optional[DType] = None) -> DType:
    """Determine the number type for a root-finding call.
    :param value: the starting point of the iteration.
    :param dtype: (optional) an explicit number type, e.g. `float`, `np.float32` or `decimal.Decimal`.
    :returns: 'dtype' if given, `float` for integer starting points, the scalar type of numpy
        values (including 0-d arrays) and the type of 'value' otherwise.
    """
    if dtype is not None:
        return dtype

    if isinstance(value, (np.ndarray, np.generic)):
        value = value.dtype.type(0)

    # integer arithmetic would truncate the Newton/secant updates.
    if isinstance(value, (Integral, np.integer, np.bool_)):
        return float

    return type(value)


def cast(value: Any, dtype: DType) -> Any:
    """Convert 'value' to 'dtype'.

    Floats go through their shortest decimal representation so that exact types
    (`Decimal`, `Fraction`) receive 1e-6 rather than its binary expansion.
    """
    if type(value) is dtype:
        return value
    if isinstance(value, float):
        return dtype(str(value))

    return dtype(value)


def infinity(dtype: DType) -> Any:
    """Positive infinity in the given number type.

    Types without an infinity (e.g. `Fraction`) get a float infinity, which still
    compares and subtracts correctly against their values.
    """
    try:
        return dtype("inf")
    except (ValueError, TypeError):
        return float("inf")
