"""
Unit tests for field-level decoders.

Covers numeric strings, coded enums under both unknown-code policies,
frequency windows and the smaller helpers used by traffic and train models.
"""

from datetime import datetime, timedelta, timezone

import pytest

from lta_datamall.api.exceptions import DecodeException, UnknownVariantException
from lta_datamall.models.common import BusFreq, Coordinates
from lta_datamall.models.enums import BusFeature, BusLoad, BusType, Operator, TrainStatus
from lta_datamall.utils.decoders import (
    CodePolicy,
    bool_from_flag,
    bus_freq_from_str,
    coordinates_from_str,
    datetime_from_str,
    enum_from_code,
    number_from_str,
    optional_enum_from_code,
    optional_number_from_str,
    str_list_from_csv,
)


class TestNumberFromStr:
    """Test numeric-from-string decoding."""

    def test_integer_string(self):
        assert number_from_str("83139", int, "BusStopCode") == 83139

    def test_leading_zero_integer(self):
        assert number_from_str("01012", int, "BusStopCode") == 1012

    def test_float_string(self):
        assert number_from_str("1.3154918333333334", float, "Latitude") == pytest.approx(1.3154918333)

    def test_json_numbers_pass_through(self):
        assert number_from_str(1, int, "Direction") == 1
        assert number_from_str(103.9, float, "Longitude") == 103.9
        assert number_from_str(2.0, int, "Direction") == 2

    def test_trailing_garbage_names_field(self):
        with pytest.raises(DecodeException) as exc_info:
            number_from_str("83139x", int, "BusStopCode")

        assert exc_info.value.field == "BusStopCode"
        assert exc_info.value.value == "83139x"
        assert "BusStopCode" in str(exc_info.value)
        assert "83139x" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["", "1_000", "1.5", "abc", " "])
    def test_invalid_integers(self, value):
        with pytest.raises(DecodeException):
            number_from_str(value, int, "VisitNumber")

    def test_no_silent_zero_for_empty(self):
        with pytest.raises(DecodeException):
            number_from_str("", float, "Latitude")

    def test_rejects_booleans_and_non_strings(self):
        with pytest.raises(DecodeException):
            number_from_str(True, int, "Direction")
        with pytest.raises(DecodeException):
            number_from_str(None, int, "Direction")
        with pytest.raises(DecodeException):
            number_from_str(1.5, int, "Direction")

    def test_optional_number(self):
        assert optional_number_from_str("", float, "Distance") is None
        assert optional_number_from_str(None, float, "Distance") is None
        assert optional_number_from_str("4.6", float, "Distance") == 4.6


class TestEnumFromCode:
    """Test enum-from-code decoding."""

    @pytest.mark.parametrize("member", list(Operator))
    def test_every_operator_code_maps_to_its_variant(self, member):
        assert enum_from_code(member.value, Operator, "Operator") is member

    @pytest.mark.parametrize("member", [m for m in BusLoad if m is not BusLoad.UNKNOWN])
    def test_every_load_code_maps_to_its_variant(self, member):
        assert enum_from_code(member.value, BusLoad, "Load", CodePolicy.LENIENT) is member

    def test_strict_unknown_code_raises(self):
        with pytest.raises(UnknownVariantException) as exc_info:
            enum_from_code("XYZ", Operator, "Operator")

        assert exc_info.value.field == "Operator"
        assert exc_info.value.value == "XYZ"
        assert exc_info.value.enum_name == "Operator"

    def test_unknown_variant_is_a_decode_error(self):
        with pytest.raises(DecodeException):
            enum_from_code("XYZ", Operator, "Operator")

    def test_lenient_unknown_code_maps_to_unknown(self):
        assert enum_from_code("XYZ", BusType, "Type", CodePolicy.LENIENT) is BusType.UNKNOWN
        assert enum_from_code("", BusLoad, "Load", CodePolicy.LENIENT) is BusLoad.UNKNOWN

    def test_lenient_is_deterministic(self):
        results = {enum_from_code("NEW", BusType, "Type", CodePolicy.LENIENT) for _ in range(5)}
        assert results == {BusType.UNKNOWN}

    def test_unknown_member_name_is_not_a_wire_code(self):
        with pytest.raises(UnknownVariantException):
            enum_from_code("UNKNOWN", BusLoad, "Load")

    def test_lenient_requires_unknown_member(self):
        with pytest.raises(TypeError):
            enum_from_code("XYZ", Operator, "Operator", CodePolicy.LENIENT)

    def test_numeric_codes(self):
        assert enum_from_code(2, TrainStatus, "Status") is TrainStatus.DISRUPTED
        assert enum_from_code("1", TrainStatus, "Status") is TrainStatus.NORMAL

    def test_missing_value_is_decode_error(self):
        with pytest.raises(DecodeException) as exc_info:
            enum_from_code(None, Operator, "Operator")
        assert not isinstance(exc_info.value, UnknownVariantException)

    def test_member_passes_through(self):
        assert enum_from_code(Operator.SMRT, Operator, "Operator") is Operator.SMRT

    def test_optional_enum(self):
        assert optional_enum_from_code("", BusFeature, "Feature") is None
        assert optional_enum_from_code(None, BusFeature, "Feature") is None
        assert optional_enum_from_code("WAB", BusFeature, "Feature") is BusFeature.WHEELCHAIR_ACCESSIBLE
        with pytest.raises(UnknownVariantException):
            optional_enum_from_code("XYZ", BusFeature, "Feature")


class TestBusFreqFromStr:
    """Test frequency window decoding."""

    def test_range(self):
        assert bus_freq_from_str("7-10", "AM_Peak_Freq") == BusFreq(min=7, max=10)

    def test_single_value_has_no_max(self):
        assert bus_freq_from_str("5", "AM_Peak_Freq") == BusFreq(min=5, max=None)

    def test_dash_means_no_timing(self):
        assert bus_freq_from_str("-", "PM_Offpeak_Freq") == BusFreq(min=None, max=None)

    def test_empty_means_no_timing(self):
        assert bus_freq_from_str("", "PM_Offpeak_Freq") == BusFreq.no_timing()

    def test_leading_zeros(self):
        assert bus_freq_from_str("08-12", "AM_Offpeak_Freq") == BusFreq.new(8, 12)

    def test_min_greater_than_max_passes_through(self):
        assert bus_freq_from_str("12-8", "AM_Offpeak_Freq").as_tuple() == (12, 8)

    @pytest.mark.parametrize("value", ["abc", "7-", "-7", "7-10-12", "7.5", "7 10"])
    def test_malformed(self, value):
        with pytest.raises(DecodeException) as exc_info:
            bus_freq_from_str(value, "AM_Peak_Freq")
        assert exc_info.value.field == "AM_Peak_Freq"

    def test_non_string(self):
        with pytest.raises(DecodeException):
            bus_freq_from_str(None, "AM_Peak_Freq")


class TestOtherDecoders:
    """Test timestamp, coordinate, list and flag decoders."""

    def test_iso_timestamp_with_offset(self):
        result = datetime_from_str("2024-03-01T14:46:27+08:00", "EstimatedArrival")
        assert result == datetime(2024, 3, 1, 14, 46, 27, tzinfo=timezone(timedelta(hours=8)))

    def test_space_separated_timestamp_with_fraction(self):
        result = datetime_from_str("2014-04-12 01:58:00.0", "StartDate")
        assert result == datetime(2014, 4, 12, 1, 58)

    def test_date_only(self):
        assert datetime_from_str("2017-10-01", "StartDate") == datetime(2017, 10, 1)

    def test_optional_timestamp(self):
        assert datetime_from_str("", "EndDate", optional=True) is None
        with pytest.raises(DecodeException):
            datetime_from_str("", "StartDate")

    def test_bad_timestamp(self):
        with pytest.raises(DecodeException):
            datetime_from_str("yesterday", "StartDate")

    def test_coordinates(self):
        assert coordinates_from_str("1.29375 103.85718", "Location") == Coordinates(1.29375, 103.85718)
        assert coordinates_from_str("", "Location") is None
        with pytest.raises(DecodeException):
            coordinates_from_str("1.29375", "Location")
        with pytest.raises(DecodeException):
            coordinates_from_str("north east", "Location")

    def test_csv(self):
        assert str_list_from_csv("NE1, NE3,,NE4", "Stations") == ["NE1", "NE3", "NE4"]
        assert str_list_from_csv("", "Stations") == []
        assert str_list_from_csv(None, "Stations") == []

    def test_flags(self):
        assert bool_from_flag("Y", "ShelterIndicator") is True
        assert bool_from_flag("No", "Bfa") is False
        with pytest.raises(DecodeException):
            bool_from_flag("maybe", "Bfa")
