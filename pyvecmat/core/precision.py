"""
Numerical precision constants and utilities.

Provides machine epsilon and the ULP-based approximate equality used by
the containers for floating-point comparisons and zero checks.
"""

import numpy as np

from pyvecmat.core.defaults import DEFAULT_ULPS


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Smallest positive normal float64
TINY_64: float = float(np.finfo(np.float64).tiny)  # ~2.23e-308


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def smallest_normal(dtype: np.dtype | type = np.float64) -> float:
    """Get the smallest positive normal number for a floating dtype."""
    return float(np.finfo(dtype).tiny)


def floating_type(*dtypes: np.dtype | type) -> np.dtype:
    """
    Get the floating type in which values of the given dtypes are compared.

    Integer-only combinations compare as float64.
    """
    dtype = np.result_type(*dtypes)
    if not np.issubdtype(dtype, np.floating):
        return np.dtype(np.float64)
    return dtype


def approximately_equal(
    a: float,
    b: float,
    ulps: int = DEFAULT_ULPS,
    eps: float = EPSILON_64,
    tiny: float = TINY_64,
) -> bool:
    """
    Check if two floats are equal up to a tolerance in units in the last place.

    The machine epsilon is scaled to the larger operand magnitude and
    multiplied by the desired precision in ULPs:

        |a - b| <= eps * ulps * 2 * max(|a|, |b|)

    The scale never overflows, even near the top of the float range.
    Differences smaller than the smallest normal number (subnormal results)
    are also treated as equal. Identical values, including equal infinities,
    always compare equal. NaN never compares equal.

    Args:
        a: First value
        b: Second value
        ulps: Tolerance in units in the last place
        eps: Machine epsilon of the element type
        tiny: Smallest positive normal number of the element type

    Returns:
        True if the values are approximately equal
    """
    a = float(a)
    b = float(b)
    if a == b:
        return True

    # Unequal infinities or any nan
    if not (np.isfinite(a) and np.isfinite(b)):
        return False

    diff = abs(a - b)
    return diff <= eps * ulps * 2.0 * max(abs(a), abs(b)) or diff < tiny


def is_approximately_zero(
    value: float,
    ulps: int = DEFAULT_ULPS,
    eps: float = EPSILON_64,
    tiny: float = TINY_64,
) -> bool:
    """Check if a value is approximately zero in the ULP sense."""
    return approximately_equal(value, 0.0, ulps, eps, tiny)
