"""
Train service alert models.

Unlike the list endpoints, TrainServiceAlerts wraps a single object in the
``value`` key.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List

from pydantic import Field, ValidationInfo, field_validator

from .base import RawModel
from .enums import MrtLine, TrainStatus
from ..utils.decoders import datetime_from_str, enum_from_code, str_list_from_csv


@dataclass(frozen=True)
class AffectedSegment:
    """A stretch of line affected by a disruption."""

    line: MrtLine
    direction: str
    stations: List[str]
    free_public_bus: List[str]
    free_mrt_shuttle: List[str]
    mrt_shuttle_direction: str


@dataclass(frozen=True)
class AlertMessage:
    """A published service message."""

    content: str
    created_date: datetime


@dataclass(frozen=True)
class TrainServiceAlert:
    """Current train network status with any disruptions."""

    status: TrainStatus
    affected_segments: List[AffectedSegment] = field(default_factory=list)
    messages: List[AlertMessage] = field(default_factory=list)

    @property
    def is_disrupted(self) -> bool:
        return self.status == TrainStatus.DISRUPTED


class RawAffectedSegment(RawModel):
    line: MrtLine = Field(alias="Line")
    direction: str = Field(default="", alias="Direction")
    stations: List[str] = Field(default_factory=list, alias="Stations")
    free_public_bus: List[str] = Field(default_factory=list, alias="FreePublicBus")
    free_mrt_shuttle: List[str] = Field(default_factory=list, alias="FreeMRTShuttle")
    mrt_shuttle_direction: str = Field(default="", alias="MRTShuttleDirection")

    @field_validator("line", mode="before")
    @classmethod
    def _decode_line(cls, value: Any, info: ValidationInfo) -> MrtLine:
        return enum_from_code(value, MrtLine, cls.wire_name(info.field_name))

    @field_validator("stations", "free_public_bus", "free_mrt_shuttle", mode="before")
    @classmethod
    def _decode_csv(cls, value: Any, info: ValidationInfo) -> List[str]:
        return str_list_from_csv(value, cls.wire_name(info.field_name))

    def into(self) -> AffectedSegment:
        return AffectedSegment(
            line=self.line,
            direction=self.direction,
            stations=list(self.stations),
            free_public_bus=list(self.free_public_bus),
            free_mrt_shuttle=list(self.free_mrt_shuttle),
            mrt_shuttle_direction=self.mrt_shuttle_direction,
        )


class RawAlertMessage(RawModel):
    content: str = Field(alias="Content")
    created_date: datetime = Field(alias="CreatedDate")

    @field_validator("created_date", mode="before")
    @classmethod
    def _decode_created(cls, value: Any, info: ValidationInfo) -> datetime:
        return datetime_from_str(value, cls.wire_name(info.field_name))

    def into(self) -> AlertMessage:
        return AlertMessage(content=self.content, created_date=self.created_date)


class RawTrainServiceAlert(RawModel):
    status: TrainStatus = Field(alias="Status")
    affected_segments: List[RawAffectedSegment] = Field(default_factory=list, alias="AffectedSegments")
    messages: List[RawAlertMessage] = Field(default_factory=list, alias="Message")

    @field_validator("status", mode="before")
    @classmethod
    def _decode_status(cls, value: Any, info: ValidationInfo) -> TrainStatus:
        return enum_from_code(value, TrainStatus, cls.wire_name(info.field_name))

    @field_validator("affected_segments", "messages", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def into(self) -> TrainServiceAlert:
        return TrainServiceAlert(
            status=self.status,
            affected_segments=[segment.into() for segment in self.affected_segments],
            messages=[message.into() for message in self.messages],
        )


class RawTrainServiceAlertResp(RawModel):
    value: RawTrainServiceAlert

    def into(self) -> TrainServiceAlert:
        return self.value.into()
