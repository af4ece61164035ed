"""Tests for canonical timestamp assembly."""

from __future__ import annotations

import logging

import pytest

from isonorm.errors import InvalidComponent, InvalidFormat, InvalidLength
from isonorm.format.timestamp import assemble_timestamp, split_timestamp
from isonorm.options import NormalizeOptions


class TestAssembleTimestamp:
    """Tests for assemble_timestamp()."""

    def test_extended_with_hour_offset(self, options: NormalizeOptions) -> None:
        assert (
            assemble_timestamp("2014-11-01T05:35:00+05", options)
            == "20141101T053500+050000"
        )

    def test_basic_with_hour_offset(self, options: NormalizeOptions) -> None:
        assert (
            assemble_timestamp("20141101T053000+10", options)
            == "20141101T053000+100000"
        )

    def test_zulu(self, options: NormalizeOptions) -> None:
        assert assemble_timestamp("2014-12-30T12:59:25Z", options) == "20141230T125925Z"

    def test_no_offset_is_zulu(self, options: NormalizeOptions) -> None:
        assert assemble_timestamp("2014-12-30T12:59", options) == "20141230T125900Z"

    def test_negative_offset(self, options: NormalizeOptions) -> None:
        assert (
            assemble_timestamp("2014-12-30T11:30-07:00", options)
            == "20141230T113000-070000"
        )

    def test_partial_date_and_time(self, options: NormalizeOptions) -> None:
        """Low-precision parts are padded independently."""
        assert assemble_timestamp("2014-11T05", options) == "20141101T050000Z"

    def test_logs_result(
        self, options: NormalizeOptions, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="isonorm.format.timestamp"):
            assemble_timestamp("2014-12-30T12Z", options)
        assert "20141230T120000Z" in caplog.text


class TestAssembleTimestampErrors:
    """Tests for rejected timestamps."""

    def test_missing_separator(self, options: NormalizeOptions) -> None:
        with pytest.raises(InvalidFormat, match="'T'"):
            assemble_timestamp("20141101053000", options)

    def test_repeated_separator(self, options: NormalizeOptions) -> None:
        with pytest.raises(InvalidFormat):
            assemble_timestamp("2014T1101T05", options)

    def test_bad_date(self, options: NormalizeOptions) -> None:
        with pytest.raises(InvalidComponent):
            assemble_timestamp("2014-13-01T05:35", options)

    def test_bad_time(self, options: NormalizeOptions) -> None:
        with pytest.raises(InvalidComponent):
            assemble_timestamp("2014-11-01T24:00", options)

    def test_bad_time_length(self, options: NormalizeOptions) -> None:
        with pytest.raises(InvalidLength):
            assemble_timestamp("2014-11-01T5", options)

    def test_bad_offset(self, options: NormalizeOptions) -> None:
        with pytest.raises(InvalidComponent):
            assemble_timestamp("2014-11-01T05:35+25", options)

    def test_negative_zero_offset(self, options: NormalizeOptions) -> None:
        with pytest.raises(InvalidComponent):
            assemble_timestamp("2014-11-01T05:35-00:00", options)

    def test_lowercase_not_accepted(self, options: NormalizeOptions) -> None:
        """Only parse_instant() upper-cases its input."""
        with pytest.raises(InvalidFormat):
            assemble_timestamp("2014-11-01t05:35", options)


class TestSplitTimestamp:
    """Tests for split_timestamp()."""

    def test_split(self) -> None:
        assert split_timestamp("2014-11-01T05:35Z") == ("2014-11-01", "05:35Z")

    def test_empty_time_part(self) -> None:
        """An empty time part is left for the normalizers to reject."""
        assert split_timestamp("2014T") == ("2014", "")
