#
# Common Base Date & Time Formatting
#

# Standard library -----------------------------------------------------------------------------------------------------
from datetime import datetime
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import small_number_format
from .options import SmallOptions
from .utils import is_finite_number

DEFAULT_EXPRESS = "yyyyMMdd hh:mm:ss"

# Longer tokens first, so 'yyyy' is consumed before 'yy' and 'MM' before 'M'
TOKENS = ("yyyy", "MM", "dd", "hh", "mm", "ss", "yy", "M", "d", "h", "m", "s")

_TWO_DIGITS = SmallOptions(decimal=0, fill_zero_in_front=True)


# Methods --------------------------------------------------------------------------------------------------------------

def datetime_format(value: Any, express: str = DEFAULT_EXPRESS) -> str | Any:
    """
    Format an epoch timestamp in milliseconds as local date and time.

    Supported tokens: yyyy, yy, MM, M, dd, d, hh, h (24-hour), mm, m, ss, s.
    Each token is substituted at its first occurrence only. Repeats are left
    to the shorter tokens that follow, so at 07:08 'hh hh' gives '07 7h'.

    Args:
        value: Milliseconds since the epoch, converted in the host's local time zone.
        express: Pattern to substitute tokens in.

    Returns:
        Formatted string, or value unchanged if it is not a finite number.

    Raises:
        OverflowError, OSError, ValueError: If the timestamp is out of the platform's range.

    Examples:
        >>> datetime_format(1700000000000, "yyyy-MM-dd")  # doctest: +SKIP
        '2023-11-14'
    """
    if not is_finite_number(value):
        return value

    fields = _datetime_fields(datetime.fromtimestamp(value / 1000))

    text = express
    for token in TOKENS:
        text = text.replace(token, fields[token], 1)
    return text


# Private methods ------------------------------------------------------------------------------------------------------

def _datetime_fields(moment: datetime) -> dict[str, str]:
    fields = {
        "yyyy": str(moment.year),
        "M": str(moment.month),
        "d": str(moment.day),
        "h": str(moment.hour),
        "m": str(moment.minute),
        "s": str(moment.second),
    }
    fields["yy"] = fields["yyyy"][-2:]
    for token, number in (("MM", moment.month), ("dd", moment.day), ("hh", moment.hour),
                          ("mm", moment.minute), ("ss", moment.second)):
        fields[token] = small_number_format(number, _TWO_DIGITS)
    return fields
