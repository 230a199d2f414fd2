"""
Timezone conversion tests.
"""

from datetime import datetime

import pytest
import pytz

from interval_index import timezone_utils
from interval_index.timezone_utils import from_timestamp, to_timestamp, to_utc_datetime


class TestTimestamps:

    def test_int_passthrough(self):
        assert to_timestamp(42) == 42
        assert to_timestamp(-7) == -7

    def test_aware_datetime(self):
        assert to_timestamp(datetime(1970, 1, 1, tzinfo=pytz.UTC)) == 0
        assert to_timestamp(datetime(2024, 1, 1, 0, 0, 0, 250000, tzinfo=pytz.UTC)) == 1704067200250

    def test_naive_datetime_uses_configured_zone(self):
        timezone_utils.set_timezone("Europe/Amsterdam")
        # CET is UTC+1 in January
        assert to_timestamp(datetime(2024, 1, 1, 1, 0)) == to_timestamp(datetime(2024, 1, 1, tzinfo=pytz.UTC))

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_timestamp("2024-01-01")
        with pytest.raises(TypeError):
            to_timestamp(True)

    def test_from_timestamp(self):
        assert from_timestamp(1704067200250) == datetime(2024, 1, 1, 0, 0, 0, 250000, tzinfo=pytz.UTC)
        assert from_timestamp(-1000) == datetime(1969, 12, 31, 23, 59, 59, tzinfo=pytz.UTC)


class TestTimezones:

    def test_unknown_zone_falls_back(self):
        timezone_utils.set_timezone("Not/AZone")
        assert timezone_utils.get_local_timezone() is not None

    def test_to_utc_datetime(self):
        timezone_utils.set_timezone("Europe/Amsterdam")
        result = to_utc_datetime(datetime(2024, 7, 1, 14, 0))
        assert result == datetime(2024, 7, 1, 12, 0, tzinfo=pytz.UTC)
        assert result.tzinfo is pytz.UTC

    def test_to_local_datetime(self):
        timezone_utils.set_timezone("Europe/Amsterdam")
        local = timezone_utils.to_local_datetime(datetime(2024, 7, 1, 12, 0, tzinfo=pytz.UTC))
        assert (local.hour, local.utcoffset().total_seconds()) == (14, 7200)
        naive = datetime(2024, 7, 1, 12, 0)
        assert timezone_utils.to_local_datetime(naive) is naive
