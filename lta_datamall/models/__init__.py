"""
Data models for the LTA DataMall client.

Each resource module pairs raw wire-shaped pydantic models with the frozen
dataclasses handed to callers. Shared value types and the coded
enumerations are re-exported here.
"""

from .common import BusFreq, Coordinates
from .enums import (
    BusCategory,
    BusFeature,
    BusLoad,
    BusType,
    CarParkAgency,
    CarParkLotType,
    FaultyLightType,
    IncidentType,
    MrtLine,
    Operator,
    RoadDetailsType,
    TaxiStandOwner,
    TaxiStandType,
    TrainStatus,
    VolType,
)

__all__ = [
    "BusFreq",
    "Coordinates",
    "BusCategory",
    "BusFeature",
    "BusLoad",
    "BusType",
    "CarParkAgency",
    "CarParkLotType",
    "FaultyLightType",
    "IncidentType",
    "MrtLine",
    "Operator",
    "RoadDetailsType",
    "TaxiStandOwner",
    "TaxiStandType",
    "TrainStatus",
    "VolType",
]
