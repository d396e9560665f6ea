#
# Common Base - Dates Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from datetime import datetime

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from commonbase.dates import DEFAULT_EXPRESS, datetime_format


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDatetimeFormat:

    def test_default_express(self, local_ms):
        assert DEFAULT_EXPRESS == "yyyyMMdd hh:mm:ss"
        assert datetime_format(local_ms(2024, 3, 5, 7, 8, 9)) == "20240305 07:08:09"

    @pytest.mark.parametrize(
        "express, expected",
        [
            pytest.param("yyyy-MM-dd", "2024-03-05", id="date"),
            pytest.param("hh:mm:ss", "07:08:09", id="time"),
            pytest.param("yy-M-d h:m:s", "24-3-5 7:8:9", id="short"),
            pytest.param("yyyy年M月d日", "2024年3月5日", id="cjk"),
            pytest.param("--/--", "--/--", id="literal"),
        ],
    )
    def test_tokens(self, local_ms, express, expected):
        assert datetime_format(local_ms(2024, 3, 5, 7, 8, 9), express) == expected

    def test_two_digit_fields_unpadded(self, local_ms):
        assert datetime_format(local_ms(2023, 11, 25, 23, 45, 56)) == "20231125 23:45:56"

    def test_repeated_token_first_only(self, local_ms):
        """Substitute a repeated token once, leaving the rest to shorter tokens."""
        assert datetime_format(local_ms(2024, 3, 5, 7, 8, 9), "hh hh") == "07 7h"

    def test_milliseconds_ignored(self, local_ms):
        assert datetime_format(local_ms(2024, 3, 5, 7, 8, 9) + 999, "ss") == "09"

    def test_epoch_local_time(self):
        """Convert the epoch in the host's local time zone."""
        assert datetime_format(0, "yyyy-MM-dd") == datetime.fromtimestamp(0).strftime("%Y-%m-%d")

    def test_float_timestamp(self, local_ms):
        assert datetime_format(float(local_ms(2024, 3, 5, 7, 8, 9)), "yyyyMMdd") == "20240305"

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("1700000000000", id="str"),
            pytest.param(None, id="none"),
            pytest.param(True, id="bool"),
            pytest.param(float("nan"), id="nan"),
            pytest.param(float("inf"), id="inf"),
        ],
    )
    def test_passthrough(self, value):
        assert datetime_format(value) is value
