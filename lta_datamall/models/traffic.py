"""
Traffic data models.

Covers car park availability, estimated travel times, faulty traffic
lights, road openings and works, traffic camera images, traffic incidents
and bicycle parking.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import RawModel
from .common import Coordinates
from .enums import CarParkAgency, CarParkLotType, FaultyLightType, IncidentType
from ..utils.decoders import (
    CodePolicy,
    bool_from_flag,
    coordinates_from_str,
    datetime_from_str,
    enum_from_code,
    number_from_str,
)


# Domain records


@dataclass(frozen=True)
class CarPark:
    car_park_id: str
    area: str
    development: str
    location: Optional[Coordinates]
    available_lots: int
    lot_type: CarParkLotType
    agency: CarParkAgency


@dataclass(frozen=True)
class EstTravelTime:
    """Estimated travel time along an expressway segment, in minutes."""

    name: str
    direction: int
    far_end_point: str
    start_point: str
    end_point: str
    est_travel_time: int


@dataclass(frozen=True)
class FaultyTrafficLight:
    alarm_id: str
    node_id: str
    fault_type: FaultyLightType
    start_date: datetime
    end_date: Optional[datetime]
    message: str


@dataclass(frozen=True)
class RoadDetails:
    """A planned road opening or road work."""

    event_id: str
    start_date: datetime
    end_date: datetime
    service_dept: str
    road_name: str
    other: str


@dataclass(frozen=True)
class TrafficImage:
    camera_id: str
    lat: float
    long: float
    image_link: str


@dataclass(frozen=True)
class TrafficIncident:
    incident_type: IncidentType
    lat: float
    long: float
    message: str


@dataclass(frozen=True)
class BikeParking:
    description: str
    lat: float
    long: float
    rack_type: str
    rack_count: int
    is_sheltered: bool


# Raw wire shapes


class _RawLatLong(RawModel):
    lat: float = Field(alias="Latitude")
    long: float = Field(alias="Longitude")

    @field_validator("lat", "long", mode="before")
    @classmethod
    def _decode_float(cls, value: Any, info: ValidationInfo) -> float:
        return number_from_str(value, float, cls.wire_name(info.field_name))


class RawCarPark(RawModel):
    car_park_id: str = Field(alias="CarParkID")
    area: str = Field(default="", alias="Area")
    development: str = Field(alias="Development")
    location: Optional[Coordinates] = Field(default=None, alias="Location")
    available_lots: int = Field(alias="AvailableLots")
    lot_type: CarParkLotType = Field(alias="LotType")
    agency: CarParkAgency = Field(alias="Agency")

    @field_validator("location", mode="before")
    @classmethod
    def _decode_location(cls, value: Any, info: ValidationInfo) -> Optional[Coordinates]:
        return coordinates_from_str(value, cls.wire_name(info.field_name))

    @field_validator("available_lots", mode="before")
    @classmethod
    def _decode_lots(cls, value: Any, info: ValidationInfo) -> int:
        return number_from_str(value, int, cls.wire_name(info.field_name))

    @field_validator("lot_type", mode="before")
    @classmethod
    def _decode_lot_type(cls, value: Any, info: ValidationInfo) -> CarParkLotType:
        return enum_from_code(value, CarParkLotType, cls.wire_name(info.field_name), CodePolicy.LENIENT)

    @field_validator("agency", mode="before")
    @classmethod
    def _decode_agency(cls, value: Any, info: ValidationInfo) -> CarParkAgency:
        return enum_from_code(value, CarParkAgency, cls.wire_name(info.field_name), CodePolicy.LENIENT)

    def into(self) -> CarPark:
        return CarPark(
            car_park_id=self.car_park_id,
            area=self.area,
            development=self.development,
            location=self.location,
            available_lots=self.available_lots,
            lot_type=self.lot_type,
            agency=self.agency,
        )


class RawEstTravelTime(RawModel):
    name: str = Field(alias="Name")
    direction: int = Field(alias="Direction")
    far_end_point: str = Field(alias="FarEndPoint")
    start_point: str = Field(alias="StartPoint")
    end_point: str = Field(alias="EndPoint")
    est_travel_time: int = Field(alias="EstTime")

    @field_validator("direction", "est_travel_time", mode="before")
    @classmethod
    def _decode_int(cls, value: Any, info: ValidationInfo) -> int:
        return number_from_str(value, int, cls.wire_name(info.field_name))

    def into(self) -> EstTravelTime:
        return EstTravelTime(
            name=self.name,
            direction=self.direction,
            far_end_point=self.far_end_point,
            start_point=self.start_point,
            end_point=self.end_point,
            est_travel_time=self.est_travel_time,
        )


class RawFaultyTrafficLight(RawModel):
    alarm_id: str = Field(alias="AlarmID")
    node_id: str = Field(alias="NodeID")
    fault_type: FaultyLightType = Field(alias="Type")
    start_date: datetime = Field(alias="StartDate")
    end_date: Optional[datetime] = Field(default=None, alias="EndDate")
    message: str = Field(default="", alias="Message")

    @field_validator("fault_type", mode="before")
    @classmethod
    def _decode_type(cls, value: Any, info: ValidationInfo) -> FaultyLightType:
        return enum_from_code(value, FaultyLightType, cls.wire_name(info.field_name), CodePolicy.LENIENT)

    @field_validator("start_date", mode="before")
    @classmethod
    def _decode_start(cls, value: Any, info: ValidationInfo) -> datetime:
        return datetime_from_str(value, cls.wire_name(info.field_name))

    @field_validator("end_date", mode="before")
    @classmethod
    def _decode_end(cls, value: Any, info: ValidationInfo) -> Optional[datetime]:
        return datetime_from_str(value, cls.wire_name(info.field_name), optional=True)

    def into(self) -> FaultyTrafficLight:
        return FaultyTrafficLight(
            alarm_id=self.alarm_id,
            node_id=self.node_id,
            fault_type=self.fault_type,
            start_date=self.start_date,
            end_date=self.end_date,
            message=self.message,
        )


class RawRoadDetails(RawModel):
    event_id: str = Field(alias="EventID")
    start_date: datetime = Field(alias="StartDate")
    end_date: datetime = Field(alias="EndDate")
    service_dept: str = Field(alias="SvcDept")
    road_name: str = Field(alias="RoadName")
    other: str = Field(default="", alias="Other")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _decode_date(cls, value: Any, info: ValidationInfo) -> datetime:
        return datetime_from_str(value, cls.wire_name(info.field_name))

    def into(self) -> RoadDetails:
        return RoadDetails(
            event_id=self.event_id,
            start_date=self.start_date,
            end_date=self.end_date,
            service_dept=self.service_dept,
            road_name=self.road_name,
            other=self.other,
        )


class RawTrafficImage(_RawLatLong):
    camera_id: str = Field(alias="CameraID")
    image_link: str = Field(alias="ImageLink")

    def into(self) -> TrafficImage:
        return TrafficImage(
            camera_id=self.camera_id,
            lat=self.lat,
            long=self.long,
            image_link=self.image_link,
        )


class RawTrafficIncident(_RawLatLong):
    incident_type: IncidentType = Field(alias="Type")
    message: str = Field(alias="Message")

    @field_validator("incident_type", mode="before")
    @classmethod
    def _decode_type(cls, value: Any, info: ValidationInfo) -> IncidentType:
        return enum_from_code(value, IncidentType, cls.wire_name(info.field_name), CodePolicy.LENIENT)

    def into(self) -> TrafficIncident:
        return TrafficIncident(
            incident_type=self.incident_type,
            lat=self.lat,
            long=self.long,
            message=self.message,
        )


class RawBikeParking(_RawLatLong):
    description: str = Field(alias="Description")
    rack_type: str = Field(alias="RackType")
    rack_count: int = Field(alias="RackCount")
    is_sheltered: bool = Field(alias="ShelterIndicator")

    @field_validator("rack_count", mode="before")
    @classmethod
    def _decode_count(cls, value: Any, info: ValidationInfo) -> int:
        return number_from_str(value, int, cls.wire_name(info.field_name))

    @field_validator("is_sheltered", mode="before")
    @classmethod
    def _decode_shelter(cls, value: Any, info: ValidationInfo) -> bool:
        return bool_from_flag(value, cls.wire_name(info.field_name))

    def into(self) -> BikeParking:
        return BikeParking(
            description=self.description,
            lat=self.lat,
            long=self.long,
            rack_type=self.rack_type,
            rack_count=self.rack_count,
            is_sheltered=self.is_sheltered,
        )
