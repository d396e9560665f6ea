"""
Option records for number formatters.

Formatters accept options in several call shapes: a bare number, a mapping,
an options instance or nothing at all. Each shape is resolved once at the call
boundary into a frozen dataclass, so formatting code only ever sees canonical
records with valid values.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name, is_finite_number, is_number

log = logging.getLogger(__name__)

# @formatter:off

SMALL_THRESHOLD = 10

SMALL_DECIMAL = 8
LARGE_DECIMAL = 2
RETAIN_DECIMAL = 2

# Divisor and unit suffix, largest divisor first
LARGE_UNITS = (
    (100_000_000, "亿"),
    (10_000, "万"),
)

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class _OptionsMixin:
    """
    Shared construction helpers for option dataclasses.
    """

    @classmethod
    def from_any(cls, option: Any = None) -> Self:
        """
        Resolve an option argument into an options instance.

        Args:
            option: None, an instance of this class, or a mapping of field names.

        Returns:
            Options instance. Unknown mapping keys are ignored, any other
            option type yields all defaults.
        """
        if option is None:
            return cls()
        if isinstance(option, cls):
            return option
        if isinstance(option, abc.Mapping):
            names = {f.name for f in fields(cls)}
            unknown = [key for key in option if key not in names]
            if unknown:
                log.debug("unknown %s keys ignored: %r", cls.__name__, unknown)
            return cls(**{key: value for key, value in option.items() if key in names})
        log.debug("unsupported %s <%s> replaced by defaults", cls.__name__, class_name(option))
        return cls()


@dataclass(frozen=True)
class SmallOptions(_OptionsMixin):
    """Formatting options for values with absolute value below 10.

    Attributes:
        decimal: Decimal places to retain; invalid values fall back to 8.
        remove_extra_zero: Strip trailing zeros of the decimal part.
        fill_zero_in_front: Prefix a literal '0' to single-digit values.
    """

    decimal: int = SMALL_DECIMAL
    remove_extra_zero: bool = True
    fill_zero_in_front: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "decimal", valid_decimal(self.decimal, default=SMALL_DECIMAL))


@dataclass(frozen=True)
class LargeOptions(_OptionsMixin):
    """Formatting options for values with absolute value of 10 and above.

    Attributes:
        decimal: Decimal places to retain; invalid values fall back to 2.
        remove_extra_zero: Strip trailing zeros of the decimal part.
        split_value_and_unit: Return UnitValue instead of a joined string.
        attach_thousand_symbol: Group integer digits by thousands.
        thousand_symbol: Separator inserted between thousands groups.
        units: Pairs of (divisor, unit suffix), largest divisor first.
    """

    decimal: int = LARGE_DECIMAL
    remove_extra_zero: bool = True
    split_value_and_unit: bool = False
    attach_thousand_symbol: bool = False
    thousand_symbol: str = ","
    units: tuple[tuple[int, str], ...] = field(default=LARGE_UNITS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "decimal", valid_decimal(self.decimal, default=LARGE_DECIMAL))
        units = tuple((divisor, str(unit)) for divisor, unit in self.units)
        for divisor, _ in units:
            if not is_number(divisor) or divisor <= 0:
                raise ValueError(f"unit divisor must be a positive number, but got {divisor!r}")
        object.__setattr__(self, "units", tuple(sorted(units, key=lambda pair: pair[0], reverse=True)))


@dataclass(frozen=True)
class FormatOption:
    """Options for both magnitude regimes of number_format().

    Attributes:
        small: Options applied when abs(value) < 10.
        large: Options applied otherwise.
    """

    small: SmallOptions = field(default_factory=SmallOptions)
    large: LargeOptions = field(default_factory=LargeOptions)

    @classmethod
    def from_number(cls, decimal: int | float) -> Self:
        """Apply the same decimal places to both regimes."""
        return cls(
            small=SmallOptions(decimal=decimal, remove_extra_zero=True, fill_zero_in_front=False),
            large=LargeOptions(decimal=decimal, remove_extra_zero=True),
        )

    @classmethod
    def from_any(cls, option: Any = None) -> Self:
        """
        Resolve any supported call shape into a FormatOption.

        Dispatch Logic:
            - number → same decimal for both regimes (from_number)
            - FormatOption → returned as is
            - Mapping → 'small' and 'large' entries, each resolved by its options class
            - anything else → all defaults

        Examples:
            >>> FormatOption.from_any(3).large.decimal
            3
            >>> FormatOption.from_any({"small": {"decimal": 0}}).small.decimal
            0
            >>> FormatOption.from_any("bogus") == FormatOption()
            True
        """
        if is_number(option):
            return cls.from_number(option)
        if isinstance(option, cls):
            return option
        if isinstance(option, abc.Mapping):
            return cls(
                small=SmallOptions.from_any(option.get("small")),
                large=LargeOptions.from_any(option.get("large")),
            )
        return cls()


# Methods --------------------------------------------------------------------------------------------------------------

def valid_decimal(decimal: Any, default: int) -> int:
    """
    Return decimal places as a non-negative int, or default when invalid.

    Non-numbers, NaN, infinities and negatives are invalid. Floats are truncated.
    """
    if not is_finite_number(decimal) or decimal < 0:
        log.debug("invalid decimal places %r replaced by default %d", decimal, default)
        return default
    return int(decimal)
