"""
Common Base utilities shared across the package.

Contains helpers used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any) -> str:
    """
    Get the class name of an object or a class.

    Both `class_name(10)` and `class_name(int)` return 'int'.
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    return cls.__name__


def is_number(value: Any) -> bool:
    """
    Check whether value is a plain numeric value accepted by formatters.

    Only int and float qualify; bool is rejected although it subclasses int.

    Examples:
        >>> is_number(1.5)
        True
        >>> is_number(True)
        False
        >>> is_number("1.5")
        False
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """Check whether value is a number and neither NaN nor infinite.

    Ints are always finite, even those too large to convert to float.
    """
    return is_number(value) and (isinstance(value, int) or math.isfinite(value))
