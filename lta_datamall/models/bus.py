"""
Bus data models.

Raw models mirror the BusArrivalv2, BusServices, BusRoutes and BusStops
payloads; the frozen dataclasses are what callers receive. Stop codes are
sent as strings and decoded to integers, so a code such as ``"01012"``
becomes ``1012``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import RawModel
from .common import BusFreq
from .enums import BusCategory, BusFeature, BusLoad, BusType, Operator
from ..utils.decoders import (
    CodePolicy,
    bus_freq_from_str,
    datetime_from_str,
    enum_from_code,
    number_from_str,
    optional_enum_from_code,
    optional_number_from_str,
)


# Domain records


@dataclass(frozen=True)
class NextBus:
    """An upcoming bus at a stop."""

    origin_code: int
    dest_code: int
    est_arrival: datetime
    lat: float
    long: float
    visit_no: int
    load: BusLoad
    feature: Optional[BusFeature]
    bus_type: BusType

    @property
    def is_wheelchair_accessible(self) -> bool:
        return self.feature == BusFeature.WHEELCHAIR_ACCESSIBLE

    def minutes_until(self, now: datetime) -> int:
        """Get whole minutes from ``now`` until the estimated arrival."""
        return int((self.est_arrival - now).total_seconds() // 60)


@dataclass(frozen=True)
class ArrivalBusService:
    """Arrival estimates of one service at a stop."""

    service_no: str
    operator: Operator
    next_bus: Optional[NextBus]
    next_bus_2: Optional[NextBus]
    next_bus_3: Optional[NextBus]

    @property
    def next_buses(self) -> List[NextBus]:
        """Get the upcoming buses that the API actually reported."""
        return [bus for bus in (self.next_bus, self.next_bus_2, self.next_bus_3) if bus is not None]


@dataclass(frozen=True)
class BusArrivalResp:
    """Real-time arrivals for a bus stop."""

    bus_stop_code: int
    services: List[ArrivalBusService] = field(default_factory=list)


@dataclass(frozen=True)
class BusService:
    """Service information for a bus in operation."""

    service_no: str
    operator: Operator
    direction: int
    category: BusCategory
    origin_code: int
    dest_code: int
    am_peak_freq: BusFreq
    am_offpeak_freq: BusFreq
    pm_peak_freq: BusFreq
    pm_offpeak_freq: BusFreq
    loop_desc: Optional[str]

    @property
    def is_loop(self) -> bool:
        return self.origin_code == self.dest_code


@dataclass(frozen=True)
class BusRoute:
    """A stop along a bus service's route, with first/last bus timings."""

    service_no: str
    operator: Operator
    direction: int
    stop_seq: int
    bus_stop_code: int
    dist: Optional[float]
    wd_first: str
    wd_last: str
    sat_first: str
    sat_last: str
    sun_first: str
    sun_last: str


@dataclass(frozen=True)
class BusStop:
    """A bus stop currently being serviced."""

    bus_stop_code: int
    road_name: str
    description: str
    lat: float
    long: float


# Raw wire shapes


class RawNextBus(RawModel):
    origin_code: int = Field(alias="OriginCode")
    dest_code: int = Field(alias="DestinationCode")
    est_arrival: datetime = Field(alias="EstimatedArrival")
    lat: float = Field(alias="Latitude")
    long: float = Field(alias="Longitude")
    visit_no: int = Field(alias="VisitNumber")
    load: BusLoad = Field(alias="Load")
    feature: Optional[BusFeature] = Field(default=None, alias="Feature")
    bus_type: BusType = Field(alias="Type")

    @field_validator("origin_code", "dest_code", "visit_no", mode="before")
    @classmethod
    def _decode_int(cls, value: Any, info: ValidationInfo) -> int:
        return number_from_str(value, int, cls.wire_name(info.field_name))

    @field_validator("lat", "long", mode="before")
    @classmethod
    def _decode_float(cls, value: Any, info: ValidationInfo) -> float:
        return number_from_str(value, float, cls.wire_name(info.field_name))

    @field_validator("est_arrival", mode="before")
    @classmethod
    def _decode_arrival(cls, value: Any, info: ValidationInfo) -> datetime:
        return datetime_from_str(value, cls.wire_name(info.field_name))

    @field_validator("load", mode="before")
    @classmethod
    def _decode_load(cls, value: Any, info: ValidationInfo) -> BusLoad:
        return enum_from_code(value, BusLoad, cls.wire_name(info.field_name), CodePolicy.LENIENT)

    @field_validator("bus_type", mode="before")
    @classmethod
    def _decode_type(cls, value: Any, info: ValidationInfo) -> BusType:
        return enum_from_code(value, BusType, cls.wire_name(info.field_name), CodePolicy.LENIENT)

    @field_validator("feature", mode="before")
    @classmethod
    def _decode_feature(cls, value: Any, info: ValidationInfo) -> Optional[BusFeature]:
        return optional_enum_from_code(value, BusFeature, cls.wire_name(info.field_name))

    def into(self) -> NextBus:
        return NextBus(
            origin_code=self.origin_code,
            dest_code=self.dest_code,
            est_arrival=self.est_arrival,
            lat=self.lat,
            long=self.long,
            visit_no=self.visit_no,
            load=self.load,
            feature=self.feature,
            bus_type=self.bus_type,
        )


def _is_blank_next_bus(value: Any) -> bool:
    # Slots with no upcoming bus are sent with empty strings and no arrival estimate
    if value is None:
        return True
    if isinstance(value, dict):
        return not value.get("EstimatedArrival")
    return False


class RawArrivalBusService(RawModel):
    service_no: str = Field(alias="ServiceNo")
    operator: Operator = Field(alias="Operator")
    next_bus: Optional[RawNextBus] = Field(default=None, alias="NextBus")
    next_bus_2: Optional[RawNextBus] = Field(default=None, alias="NextBus2")
    next_bus_3: Optional[RawNextBus] = Field(default=None, alias="NextBus3")

    @field_validator("operator", mode="before")
    @classmethod
    def _decode_operator(cls, value: Any, info: ValidationInfo) -> Operator:
        return enum_from_code(value, Operator, cls.wire_name(info.field_name))

    @field_validator("next_bus", "next_bus_2", "next_bus_3", mode="before")
    @classmethod
    def _drop_blank_slot(cls, value: Any) -> Any:
        return None if _is_blank_next_bus(value) else value

    def into(self) -> ArrivalBusService:
        return ArrivalBusService(
            service_no=self.service_no,
            operator=self.operator,
            next_bus=self.next_bus.into() if self.next_bus else None,
            next_bus_2=self.next_bus_2.into() if self.next_bus_2 else None,
            next_bus_3=self.next_bus_3.into() if self.next_bus_3 else None,
        )


class RawBusArrivalResp(RawModel):
    bus_stop_code: int = Field(alias="BusStopCode")
    services: List[RawArrivalBusService] = Field(default_factory=list, alias="Services")

    @field_validator("bus_stop_code", mode="before")
    @classmethod
    def _decode_stop_code(cls, value: Any, info: ValidationInfo) -> int:
        return number_from_str(value, int, cls.wire_name(info.field_name))

    def into(self) -> BusArrivalResp:
        return BusArrivalResp(
            bus_stop_code=self.bus_stop_code,
            services=[service.into() for service in self.services],
        )


class RawBusService(RawModel):
    service_no: str = Field(alias="ServiceNo")
    operator: Operator = Field(alias="Operator")
    direction: int = Field(alias="Direction")
    category: BusCategory = Field(alias="Category")
    origin_code: int = Field(alias="OriginCode")
    dest_code: int = Field(alias="DestinationCode")
    am_peak_freq: BusFreq = Field(alias="AM_Peak_Freq")
    am_offpeak_freq: BusFreq = Field(alias="AM_Offpeak_Freq")
    pm_peak_freq: BusFreq = Field(alias="PM_Peak_Freq")
    pm_offpeak_freq: BusFreq = Field(alias="PM_Offpeak_Freq")
    loop_desc: Optional[str] = Field(default=None, alias="LoopDesc")

    @field_validator("operator", mode="before")
    @classmethod
    def _decode_operator(cls, value: Any, info: ValidationInfo) -> Operator:
        return enum_from_code(value, Operator, cls.wire_name(info.field_name))

    @field_validator("category", mode="before")
    @classmethod
    def _decode_category(cls, value: Any, info: ValidationInfo) -> BusCategory:
        return enum_from_code(value, BusCategory, cls.wire_name(info.field_name))

    @field_validator("direction", "origin_code", "dest_code", mode="before")
    @classmethod
    def _decode_int(cls, value: Any, info: ValidationInfo) -> int:
        return number_from_str(value, int, cls.wire_name(info.field_name))

    @field_validator(
        "am_peak_freq", "am_offpeak_freq", "pm_peak_freq", "pm_offpeak_freq", mode="before"
    )
    @classmethod
    def _decode_freq(cls, value: Any, info: ValidationInfo) -> BusFreq:
        return bus_freq_from_str(value, cls.wire_name(info.field_name))

    @field_validator("loop_desc", mode="before")
    @classmethod
    def _blank_loop_desc(cls, value: Any) -> Any:
        return value or None

    def into(self) -> BusService:
        return BusService(
            service_no=self.service_no,
            operator=self.operator,
            direction=self.direction,
            category=self.category,
            origin_code=self.origin_code,
            dest_code=self.dest_code,
            am_peak_freq=self.am_peak_freq,
            am_offpeak_freq=self.am_offpeak_freq,
            pm_peak_freq=self.pm_peak_freq,
            pm_offpeak_freq=self.pm_offpeak_freq,
            loop_desc=self.loop_desc,
        )


class RawBusRoute(RawModel):
    service_no: str = Field(alias="ServiceNo")
    operator: Operator = Field(alias="Operator")
    direction: int = Field(alias="Direction")
    stop_seq: int = Field(alias="StopSequence")
    bus_stop_code: int = Field(alias="BusStopCode")
    dist: Optional[float] = Field(default=None, alias="Distance")
    wd_first: str = Field(alias="WD_FirstBus")
    wd_last: str = Field(alias="WD_LastBus")
    sat_first: str = Field(alias="SAT_FirstBus")
    sat_last: str = Field(alias="SAT_LastBus")
    sun_first: str = Field(alias="SUN_FirstBus")
    sun_last: str = Field(alias="SUN_LastBus")

    @field_validator("operator", mode="before")
    @classmethod
    def _decode_operator(cls, value: Any, info: ValidationInfo) -> Operator:
        return enum_from_code(value, Operator, cls.wire_name(info.field_name))

    @field_validator("direction", "stop_seq", "bus_stop_code", mode="before")
    @classmethod
    def _decode_int(cls, value: Any, info: ValidationInfo) -> int:
        return number_from_str(value, int, cls.wire_name(info.field_name))

    @field_validator("dist", mode="before")
    @classmethod
    def _decode_dist(cls, value: Any, info: ValidationInfo) -> Optional[float]:
        return optional_number_from_str(value, float, cls.wire_name(info.field_name))

    def into(self) -> BusRoute:
        return BusRoute(
            service_no=self.service_no,
            operator=self.operator,
            direction=self.direction,
            stop_seq=self.stop_seq,
            bus_stop_code=self.bus_stop_code,
            dist=self.dist,
            wd_first=self.wd_first,
            wd_last=self.wd_last,
            sat_first=self.sat_first,
            sat_last=self.sat_last,
            sun_first=self.sun_first,
            sun_last=self.sun_last,
        )


class RawBusStop(RawModel):
    bus_stop_code: int = Field(alias="BusStopCode")
    road_name: str = Field(alias="RoadName")
    description: str = Field(alias="Description")
    lat: float = Field(alias="Latitude")
    long: float = Field(alias="Longitude")

    @field_validator("bus_stop_code", mode="before")
    @classmethod
    def _decode_stop_code(cls, value: Any, info: ValidationInfo) -> int:
        return number_from_str(value, int, cls.wire_name(info.field_name))

    @field_validator("lat", "long", mode="before")
    @classmethod
    def _decode_float(cls, value: Any, info: ValidationInfo) -> float:
        return number_from_str(value, float, cls.wire_name(info.field_name))

    def into(self) -> BusStop:
        return BusStop(
            bus_stop_code=self.bus_stop_code,
            road_name=self.road_name,
            description=self.description,
            lat=self.lat,
            long=self.long,
        )
