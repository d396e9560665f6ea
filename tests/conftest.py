#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
from datetime import datetime

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def local_ms():
    """Fixture to convert local calendar fields to epoch milliseconds."""

    def _to_ms(*args: int) -> int:
        return round(datetime(*args).timestamp() * 1000)

    return _to_ms
