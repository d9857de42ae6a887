"""Tests for timestamp and flexible scalar codecs."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from gh_rest.core.timestamp import IntOrString, Timestamp, format_timestamp, parse_timestamp


class Stamped(BaseModel):
    at: Timestamp
    id: IntOrString | None = None


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_rfc3339_with_z(self) -> None:
        """Test parsing an RFC 3339 string with Z suffix."""
        assert parse_timestamp("2024-01-02T03:04:05Z") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)

    def test_rfc3339_with_offset_normalized_to_utc(self) -> None:
        """Test that offsets are converted to UTC."""
        result = parse_timestamp("2024-01-02T05:04:05+02:00")
        assert result == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert result.utcoffset() == timedelta(0)

    def test_epoch_int(self) -> None:
        """Test parsing Unix epoch seconds."""
        assert parse_timestamp(1234567890) == datetime.fromtimestamp(1234567890, tz=UTC)

    def test_epoch_numeric_string(self) -> None:
        """Test parsing epoch seconds sent as a string (rate limit reset header)."""
        assert parse_timestamp("1234567890") == datetime.fromtimestamp(1234567890, tz=UTC)

    def test_naive_datetime_assumed_utc(self) -> None:
        """Test that naive datetimes are taken as UTC."""
        assert parse_timestamp(datetime(2024, 6, 1, 12, 0)) == datetime(2024, 6, 1, 12, 0, tzinfo=UTC)

    def test_aware_datetime_converted(self) -> None:
        """Test that aware datetimes are converted to UTC."""
        tz = timezone(timedelta(hours=-5))
        assert parse_timestamp(datetime(2024, 6, 1, 7, 0, tzinfo=tz)) == datetime(
            2024, 6, 1, 12, 0, tzinfo=UTC
        )

    def test_bool_rejected(self) -> None:
        """Test that booleans are not mistaken for epoch 0/1."""
        with pytest.raises(ValueError, match="Invalid timestamp"):
            parse_timestamp(True)

    def test_garbage_rejected(self) -> None:
        """Test that non-timestamp strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid timestamp"):
            parse_timestamp("yesterday")

    @pytest.mark.parametrize("value", [10**20, str(10**20), -(10**20)])
    def test_epoch_out_of_range_rejected(self, value: int | str) -> None:
        with pytest.raises(ValueError, match="out of range"):
            parse_timestamp(value)


class TestTimestampField:
    """Tests for the Timestamp pydantic field type."""

    def test_decodes_both_encodings(self) -> None:
        """Test that string and epoch encodings decode to the same instant."""
        a = Stamped.model_validate({"at": "2009-02-13T23:31:30Z"})
        b = Stamped.model_validate({"at": 1234567890})
        assert a.at == b.at

    def test_serializes_rfc3339_z(self) -> None:
        """Test JSON serialization uses RFC 3339 with Z."""
        model = Stamped(at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC))
        assert model.model_dump(mode="json")["at"] == "2024-01-02T03:04:05Z"

    def test_python_dump_keeps_datetime(self) -> None:
        """Test python-mode dumps keep datetime objects."""
        model = Stamped(at=datetime(2024, 1, 2, tzinfo=UTC))
        assert isinstance(model.model_dump()["at"], datetime)

    def test_invalid_value_is_validation_error(self) -> None:
        """Test that invalid timestamps surface as pydantic validation errors."""
        with pytest.raises(PydanticValidationError):
            Stamped.model_validate({"at": "not a time"})

    def test_format_timestamp(self) -> None:
        """Test format_timestamp output."""
        assert format_timestamp(datetime(2024, 12, 31, 23, 59, 59, tzinfo=UTC)) == (
            "2024-12-31T23:59:59Z"
        )


class TestIntOrString:
    """Tests for the IntOrString field type."""

    def test_int_kept(self) -> None:
        assert Stamped.model_validate({"at": 0, "id": 42}).id == 42

    def test_digit_string_becomes_int(self) -> None:
        """Test that numeric strings decode to int."""
        assert Stamped.model_validate({"at": 0, "id": "42"}).id == 42

    def test_other_string_kept(self) -> None:
        """Test that non-numeric strings stay strings."""
        assert Stamped.model_validate({"at": 0, "id": "MDQ6VXNlcjE="}).id == "MDQ6VXNlcjE="

    def test_bool_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            Stamped.model_validate({"at": 0, "id": True})
