"""
Unit tests for traffic, taxi and passenger volume models.
"""

from datetime import datetime

import pytest

from lta_datamall.api.decoding import decode_response
from lta_datamall.api.exceptions import DecodeException
from lta_datamall.models.base import RawValueEnvelope
from lta_datamall.models.common import Coordinates
from lta_datamall.models.crowd import RawPassengerVolLink
from lta_datamall.models.enums import (
    CarParkAgency,
    CarParkLotType,
    FaultyLightType,
    IncidentType,
    TaxiStandOwner,
    TaxiStandType,
)
from lta_datamall.models.taxi import RawTaxiPos, RawTaxiStand, TaxiPos
from lta_datamall.models.traffic import (
    RawBikeParking,
    RawCarPark,
    RawEstTravelTime,
    RawFaultyTrafficLight,
    RawRoadDetails,
    RawTrafficImage,
    RawTrafficIncident,
)

URL = "http://datamall2.mytransport.sg/ltaodataservice/test"


def decode_list(raw_model, records):
    return decode_response(RawValueEnvelope[raw_model], {"value": records}, URL)


class TestCarPark:
    """Test CarParkAvailabilityv2 decoding."""

    @pytest.fixture
    def record(self):
        return {
            "CarParkID": "1",
            "Area": "Marina",
            "Development": "Suntec City",
            "Location": "1.29375 103.85718",
            "AvailableLots": 1104,
            "LotType": "C",
            "Agency": "LTA",
        }

    def test_decodes_car_park(self, record):
        car_park = decode_list(RawCarPark, [record])[0]

        assert car_park.car_park_id == "1"
        assert car_park.area == "Marina"
        assert car_park.location == Coordinates(1.29375, 103.85718)
        assert car_park.available_lots == 1104
        assert car_park.lot_type == CarParkLotType.CARS
        assert car_park.agency == CarParkAgency.LTA

    def test_blank_location_and_area(self, record):
        record["Location"] = ""
        record["Area"] = ""

        car_park = decode_list(RawCarPark, [record])[0]

        assert car_park.location is None
        assert car_park.area == ""

    def test_unknown_codes_are_lenient(self, record):
        record["LotType"] = "L"
        record["Agency"] = "JTC"

        car_park = decode_list(RawCarPark, [record])[0]

        assert car_park.lot_type == CarParkLotType.UNKNOWN
        assert car_park.agency == CarParkAgency.UNKNOWN


class TestTrafficRecords:
    """Test the remaining traffic endpoints."""

    def test_est_travel_time(self):
        record = {
            "Name": "AYE",
            "Direction": 1,
            "FarEndPoint": "TUAS CHECKPOINT",
            "StartPoint": "AYE/MCE INTERCHANGE",
            "EndPoint": "TELOK BLANGAH RD",
            "EstTime": 2,
        }

        travel_time = decode_list(RawEstTravelTime, [record])[0]

        assert travel_time.name == "AYE"
        assert travel_time.direction == 1
        assert travel_time.est_travel_time == 2

    def test_faulty_traffic_light(self):
        record = {
            "AlarmID": "GL703034136",
            "NodeID": "3034136",
            "Type": 4,
            "StartDate": "2014-04-12 01:58:00.0",
            "EndDate": "",
            "Message": "(12/4)1:58 Flashing Yellow at Bedok North Interchange",
        }

        light = decode_list(RawFaultyTrafficLight, [record])[0]

        assert light.fault_type == FaultyLightType.BLACKOUT
        assert light.start_date == datetime(2014, 4, 12, 1, 58)
        assert light.end_date is None

    def test_road_details(self):
        record = {
            "EventID": "RMAPP-201603-0900",
            "StartDate": "2016-03-31",
            "EndDate": "2016-09-30",
            "SvcDept": "SBS TRANSIT LTD",
            "RoadName": "WOODLANDS AVENUE 4",
            "Other": "For details, please call 6225 5582",
        }

        details = decode_list(RawRoadDetails, [record])[0]

        assert details.event_id == "RMAPP-201603-0900"
        assert details.start_date == datetime(2016, 3, 31)
        assert details.service_dept == "SBS TRANSIT LTD"

    def test_traffic_image(self):
        record = {
            "CameraID": "1001",
            "Latitude": 1.29531332,
            "Longitude": 103.871146,
            "ImageLink": "https://images.data.gov.sg/api/traffic/1001.jpg",
        }

        image = decode_list(RawTrafficImage, [record])[0]

        assert image.camera_id == "1001"
        assert image.lat == pytest.approx(1.29531332)
        assert image.image_link.endswith("1001.jpg")

    def test_traffic_incident(self):
        records = [
            {"Type": "Misc.", "Latitude": 1.3, "Longitude": 103.8, "Message": "(1/3)08:00 Misc."},
            {"Type": "Flood", "Latitude": 1.3, "Longitude": 103.8, "Message": "(1/3)08:05 Flood"},
        ]

        incidents = decode_list(RawTrafficIncident, records)

        assert incidents[0].incident_type == IncidentType.MISC
        assert incidents[1].incident_type == IncidentType.UNKNOWN

    def test_bike_parking(self):
        record = {
            "Description": "Bus Stop 43267",
            "Latitude": 1.3927176,
            "Longitude": 103.9048,
            "RackType": "Yellow Box",
            "RackCount": 10,
            "ShelterIndicator": "N",
        }

        parking = decode_list(RawBikeParking, [record])[0]

        assert parking.rack_count == 10
        assert parking.is_sheltered is False

    def test_bad_latitude_rejects_payload(self):
        records = [
            {"Type": "Accident", "Latitude": 1.3, "Longitude": 103.8, "Message": "ok"},
            {"Type": "Accident", "Latitude": "n/a", "Longitude": 103.8, "Message": "bad"},
        ]

        with pytest.raises(DecodeException) as exc_info:
            decode_list(RawTrafficIncident, records)

        assert exc_info.value.field == "Latitude"


class TestTaxi:
    """Test taxi decoding."""

    def test_taxi_positions(self):
        positions = decode_list(RawTaxiPos, [{"Latitude": 1.3, "Longitude": 103.9}])
        assert positions == [TaxiPos(lat=1.3, long=103.9)]

    def test_taxi_stand(self):
        record = {
            "TaxiCode": "A01",
            "Latitude": 1.303980684,
            "Longitude": 103.9191828,
            "Bfa": "Yes",
            "Ownership": "LTA",
            "Type": "Stand",
            "Name": "Katong Village",
        }

        stand = decode_list(RawTaxiStand, [record])[0]

        assert stand.code == "A01"
        assert stand.is_barrier_free is True
        assert stand.owner == TaxiStandOwner.LTA
        assert stand.stand_type == TaxiStandType.STAND

    def test_taxi_stand_unknown_owner(self):
        record = {
            "TaxiCode": "A02",
            "Latitude": 1.3,
            "Longitude": 103.9,
            "Bfa": "No",
            "Ownership": "NEA",
            "Type": "Stop",
            "Name": "Somewhere",
        }

        stand = decode_list(RawTaxiStand, [record])[0]

        assert stand.owner == TaxiStandOwner.UNKNOWN
        assert stand.stand_type == TaxiStandType.STOP


class TestPassengerVolume:
    """Test passenger volume link decoding."""

    def test_links(self):
        links = decode_list(RawPassengerVolLink, [{"Link": "https://example.com/vol.zip"}])
        assert links == ["https://example.com/vol.zip"]
