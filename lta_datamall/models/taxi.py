"""
Taxi data models.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from .base import RawModel
from .enums import TaxiStandOwner, TaxiStandType
from ..utils.decoders import CodePolicy, bool_from_flag, enum_from_code, number_from_str


@dataclass(frozen=True)
class TaxiPos:
    """Location of a taxi available for hire."""

    lat: float
    long: float


@dataclass(frozen=True)
class TaxiStand:
    """A taxi stand or taxi stop."""

    code: str
    lat: float
    long: float
    is_barrier_free: bool
    owner: TaxiStandOwner
    stand_type: TaxiStandType
    name: str


class RawTaxiPos(RawModel):
    lat: float = Field(alias="Latitude")
    long: float = Field(alias="Longitude")

    @field_validator("lat", "long", mode="before")
    @classmethod
    def _decode_float(cls, value: Any, info: ValidationInfo) -> float:
        return number_from_str(value, float, cls.wire_name(info.field_name))

    def into(self) -> TaxiPos:
        return TaxiPos(lat=self.lat, long=self.long)


class RawTaxiStand(RawModel):
    code: str = Field(alias="TaxiCode")
    lat: float = Field(alias="Latitude")
    long: float = Field(alias="Longitude")
    is_barrier_free: bool = Field(alias="Bfa")
    owner: TaxiStandOwner = Field(alias="Ownership")
    stand_type: TaxiStandType = Field(alias="Type")
    name: str = Field(alias="Name")

    @field_validator("lat", "long", mode="before")
    @classmethod
    def _decode_float(cls, value: Any, info: ValidationInfo) -> float:
        return number_from_str(value, float, cls.wire_name(info.field_name))

    @field_validator("is_barrier_free", mode="before")
    @classmethod
    def _decode_bfa(cls, value: Any, info: ValidationInfo) -> bool:
        return bool_from_flag(value, cls.wire_name(info.field_name))

    @field_validator("owner", mode="before")
    @classmethod
    def _decode_owner(cls, value: Any, info: ValidationInfo) -> TaxiStandOwner:
        return enum_from_code(value, TaxiStandOwner, cls.wire_name(info.field_name), CodePolicy.LENIENT)

    @field_validator("stand_type", mode="before")
    @classmethod
    def _decode_type(cls, value: Any, info: ValidationInfo) -> TaxiStandType:
        return enum_from_code(value, TaxiStandType, cls.wire_name(info.field_name), CodePolicy.LENIENT)

    def into(self) -> TaxiStand:
        return TaxiStand(
            code=self.code,
            lat=self.lat,
            long=self.long,
            is_barrier_free=self.is_barrier_free,
            owner=self.owner,
            stand_type=self.stand_type,
            name=self.name,
        )
