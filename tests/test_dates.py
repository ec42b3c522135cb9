"""Tests for wifilog/dates.py"""

import logging

import pytest

from wifilog.dates import MONTHS, normalize_date


class TestMonths:
    def test_twelve_months(self):
        assert len(MONTHS) == 12
        assert MONTHS["Jan"] == "01"
        assert MONTHS["Dec"] == "12"

    def test_read_only(self):
        with pytest.raises(TypeError):
            MONTHS["Foo"] = "13"


class TestNormalizeDate:
    @pytest.mark.parametrize("raw,expected", [
        ("Oct 11 23:50:53 2013", "2013-10-11 23:50:53"),
        ("May 4 09:00:00 2013", "2013-05-04 09:00:00"),
        ("May  4 09:00:00 2013", "2013-05-04 09:00:00"),
        ("Jan 01 00:00:01 2014", "2014-01-01 00:00:01"),
    ])
    def test_known_formats(self, raw, expected):
        assert normalize_date(raw) == expected

    def test_no_match_returns_none(self):
        assert normalize_date("2013-10-11 23:50:53") is None
        assert normalize_date("") is None

    def test_unknown_month_passes_through_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wifilog.dates"):
            result = normalize_date("OCT 11 23:50:53 2013")
        assert result == "2013-OCT-11 23:50:53"
        assert "Unknown month" in caplog.text

    def test_idempotent(self):
        assert normalize_date("Oct 11 23:50:53 2013") == normalize_date("Oct 11 23:50:53 2013")
