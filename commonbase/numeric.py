"""
Format numbers as display strings.

Values below 10 in magnitude are printed with many decimals, larger values are
scaled to ten-thousand or hundred-million units. All rounding goes through
retain_decimal(), which rounds the shortest decimal text of a value instead of
its binary float, so 2.55 rounds to 2.6 rather than 2.5.

Every formatter returns non-numeric input unchanged.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, localcontext
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .options import (
    FormatOption,
    LargeOptions,
    RETAIN_DECIMAL,
    SMALL_THRESHOLD,
    SmallOptions,
    valid_decimal,
)
from .utils import is_number


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class UnitValue:
    """Formatted large value kept apart from its unit suffix.

    Attributes:
        value: Scaled and rounded number text, e.g. '1.23'.
        unit: Unit suffix, e.g. '亿', or '' for unscaled values.
    """

    value: str
    unit: str

    def __str__(self) -> str:
        return self.value + self.unit


# Methods --------------------------------------------------------------------------------------------------------------


def number_format(value: Any, format_option: Any = None) -> str | UnitValue | Any:
    """
    Format a number choosing options by its magnitude.

    Args:
        value: Number to format.
        format_option: Bare number of decimal places for both regimes, FormatOption,
            mapping with 'small' and/or 'large' entries, or None for defaults.
            Any other value is treated as None.

    Returns:
        small_number_format() result when abs(value) < 10, large_number_format()
        result otherwise, or value unchanged if it is not a number.

    Examples:
        >>> number_format(3.14159265358)
        '3.14159265'
        >>> number_format(123456, 1)
        '12.3万'
        >>> number_format("n/a")
        'n/a'
    """
    if not is_number(value):
        return value

    option = FormatOption.from_any(format_option)
    if abs(value) < SMALL_THRESHOLD:
        return small_number_format(value, option.small)
    return large_number_format(value, option.large)


def small_number_format(value: Any, option: SmallOptions | dict | None = None) -> str | Any:
    """
    Format a number of small magnitude.

    With fill_zero_in_front a literal '0' is prefixed to the text of any value
    with abs(value) < 10. The prefix is not sign-aware: -5 becomes '0-5'.

    Examples:
        >>> small_number_format(0.123456789)
        '0.12345679'
        >>> small_number_format(5, {"decimal": 0, "fill_zero_in_front": True})
        '05'
    """
    if not is_number(value):
        return value

    option = SmallOptions.from_any(option)
    text = retain_decimal(value, option.decimal, option.remove_extra_zero)
    if option.fill_zero_in_front and abs(value) < SMALL_THRESHOLD:
        text = "0" + text
    return text


def large_number_format(value: Any, option: LargeOptions | dict | None = None) -> str | UnitValue | Any:
    """
    Format a number of large magnitude, scaling it to a unit.

    The first unit of option.units whose divisor does not exceed abs(value) is
    used; values below every divisor are printed unscaled with an empty unit.

    Returns:
        'value' + 'unit' string, UnitValue if option.split_value_and_unit,
        or value unchanged if it is not a number.

    Examples:
        >>> large_number_format(123456789)
        '1.23亿'
        >>> large_number_format(50000)
        '5万'
        >>> large_number_format(98765432, {"split_value_and_unit": True})
        UnitValue(value='9876.54', unit='万')
        >>> large_number_format(1234.5, {"attach_thousand_symbol": True})
        '1,234.5'
    """
    if not is_number(value):
        return value

    option = LargeOptions.from_any(option)
    divisor, unit = _select_unit(abs(value), option.units)
    if isinstance(value, int) and divisor != 1:
        # Ints may exceed the float range, divide them exactly
        scaled = _divide_exact(value, divisor, option.decimal)
        text = _round_text(scaled, option.decimal, option.remove_extra_zero)
    else:
        scaled = value / divisor if divisor != 1 else value
        text = retain_decimal(scaled, option.decimal, option.remove_extra_zero)

    if option.attach_thousand_symbol:
        text = _group_thousands(text, option.thousand_symbol)

    if option.split_value_and_unit:
        return UnitValue(value=text, unit=unit)
    return text + unit


def percent_format(value: Any, attach_symbol: bool = True) -> str | Any:
    """
    Format a ratio as percent with 2 decimals at most.

    Non-zero values get a '+' or '-' sign when attach_symbol is set; without it
    the sign is dropped entirely.

    Examples:
        >>> percent_format(0.1234)
        '+12.34%'
        >>> percent_format(-0.05)
        '-5%'
        >>> percent_format(-0.05, attach_symbol=False)
        '5%'
    """
    if not is_number(value):
        return value

    sign = ""
    if attach_symbol and value != 0:
        sign = "+" if value > 0 else "-"

    text = retain_decimal(abs(value) * 100, RETAIN_DECIMAL)
    return sign + text + "%"


def retain_decimal(value: Any, decimal: int = RETAIN_DECIMAL, remove_extra_zero: bool = True) -> str | Any:
    """
    Round a number to a fixed count of decimal places.

    Float rounding at a decimal position is unreliable since most decimal
    fractions have no exact binary form (2.55 is stored as 2.54999...).
    The shortest decimal text of the value, the one repr() prints, is rounded
    instead, using exact decimal arithmetic and round-half-up on magnitude.

    Args:
        value: Number to round.
        decimal: Decimal places to retain. Non-numbers, NaN and negatives fall back to 2.
        remove_extra_zero: Strip trailing zeros and a bare trailing point.

    Returns:
        Fixed-point text of the rounded value, str(value) for NaN and infinities,
        or value unchanged if it is not a number.

    Examples:
        >>> retain_decimal(2.55, 1, False)
        '2.6'
        >>> retain_decimal(-2.55, 1)
        '-2.6'
        >>> retain_decimal(0, 3, False)
        '0.000'
        >>> retain_decimal(1.2, 0)
        '1'
        >>> retain_decimal(1.50, 2)
        '1.5'
    """
    if not is_number(value):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)

    decimal = valid_decimal(decimal, default=RETAIN_DECIMAL)
    return _round_text(_exact_decimal(value), decimal, remove_extra_zero)


# Private methods ------------------------------------------------------------------------------------------------------

def _exact_decimal(value: int | float) -> Decimal:
    """Exact digits of an int, shortest decimal text of a float."""
    return Decimal(value) if isinstance(value, int) else Decimal(repr(value))


def _divide_exact(value: int, divisor: int | float, decimal: int) -> Decimal:
    """Divide keeping all integer digits and a few guard digits past the rounding place."""
    digits = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits.adjusted() + decimal + 4)
        # Truncated guard digits keep the later half-up decision exact
        ctx.rounding = ROUND_DOWN
        return digits / _exact_decimal(divisor)


def _round_text(digits: Decimal, decimal: int, remove_extra_zero: bool) -> str:
    with localcontext() as ctx:
        # Keep every integer digit of large values
        ctx.prec = max(ctx.prec, digits.adjusted() + decimal + 2)
        rounded = digits.quantize(Decimal(1).scaleb(-decimal), rounding=ROUND_HALF_UP)

    if rounded.is_zero():
        rounded = rounded.copy_abs()

    text = f"{rounded:f}"
    if remove_extra_zero and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _select_unit(magnitude: float, units: tuple[tuple[int, str], ...]) -> tuple[int, str]:
    for divisor, unit in units:
        if magnitude >= divisor:
            return divisor, unit
    return 1, ""


def _group_thousands(text: str, symbol: str) -> str:
    """Insert symbol between thousands groups of the integer part, keeping sign and decimals."""
    sign, body = ("-", text[1:]) if text.startswith("-") else ("", text)
    integer, point, fraction = body.partition(".")
    if not integer.isdigit():
        return text
    grouped = f"{int(integer):,}".replace(",", symbol)
    return sign + grouped + point + fraction
