"""
Exception hierarchy for PyVecMat.

All exceptions inherit from PyVecMatError to allow catching any
library-specific error. Contract violations that a statically typed
container would reject at compile time (non-numeric element types,
wrong dimensions) are raised here at construction or call time.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyVecMatError(Exception):
    """Base exception for all PyVecMat errors."""
    pass


class ValidationError(PyVecMatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Container dimensions are incorrect or inconsistent.

    Raised when a size is negative, when two operands have mismatched
    lengths or declared shapes, or when an operation requires a shape
    the operand does not have (square factories, cross product).

    Attributes:
        expected: Description of the required dimension(s), if available
        actual: The dimension(s) actually supplied, if available
    """

    def __init__(
        self,
        message: str,
        expected: object | None = None,
        actual: object | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ElementTypeError(ValidationError):
    """
    Element type is not numeric.

    Raised when a container is asked to hold a dtype that is neither an
    integer nor a floating-point type, or when supplied values cannot be
    converted to a numeric array.

    Attributes:
        dtype: The offending dtype, if one could be determined
    """

    def __init__(self, message: str, dtype: object | None = None):
        super().__init__(message)
        self.dtype = dtype


class OrientationWarning(UserWarning):
    """
    Physical-order arithmetic on matrices with different orientations.

    Matrix addition and subtraction combine the physical row-major buffers
    and ignore the lazy transpose flag. When the two operands disagree on
    the flag, logically different positions are combined.
    """
    pass
