"""
Core infrastructure for PyVecMat.

This module provides the shared abstractions used by the vector and
matrix containers.

Key components:
    exceptions: Exception and warning hierarchy
    validation: Element type and dimension contract checks
    precision: ULP-based approximate equality
    elementwise: In-place transforms over flat storage buffers
    protocols: TextSink protocol for rendering
    defaults: Default dtype, sizes and tolerances
"""

from pyvecmat.core.protocols import TextSink
from pyvecmat.core.precision import approximately_equal, is_approximately_zero
from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    ElementTypeError,
    OrientationWarning,
)

__all__ = [
    # Protocols
    "TextSink",
    # Precision
    "approximately_equal",
    "is_approximately_zero",
    # Exceptions
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "ElementTypeError",
    "OrientationWarning",
]
