from datetime import datetime

import pytest
from dateutil import tz


@pytest.fixture
def utc():
    return tz.UTC


@pytest.fixture
def pacific():
    """Fixed -08:00 offset, as in the floor examples."""
    return tz.tzoffset(None, -8 * 3600)


@pytest.fixture
def los_angeles():
    return tz.gettz("America/Los_Angeles")


@pytest.fixture
def sample_value(pacific) -> datetime:
    """2009-06-24 13:24:51.476 -08:00"""
    return datetime(2009, 6, 24, 13, 24, 51, 476000, tzinfo=pacific)
