"""
Coded enumerations used by the LTA DataMall API.

Each member's value is the exact code the API sends on the wire, so the
enum itself is the code table. Enums that can absorb codes the API adds in
the future carry an ``UNKNOWN`` member, which never matches a wire code.
"""

from enum import Enum


class Operator(Enum):
    """Public bus operators."""

    SBST = "SBST"  # SBS Transit
    SMRT = "SMRT"  # SMRT Corporation
    TTS = "TTS"  # Tower Transit Singapore
    GAS = "GAS"  # Go Ahead Singapore


class BusCategory(Enum):
    """Bus service categories."""

    EXPRESS = "EXPRESS"
    FEEDER = "FEEDER"
    INDUSTRIAL = "INDUSTRIAL"
    TOWNLINK = "TOWNLINK"
    TRUNK = "TRUNK"
    CITY_LINK = "CITY_LINK"
    TWO_TIER_FLAT_FARE = "2 TIER FLAT FARE"
    FLAT_FEE_1_10 = "FLAT FEE $1.10"
    FLAT_FEE_1_90 = "FLAT FEE $1.90"
    FLAT_FEE_3_50 = "FLAT FEE $3.50"
    FLAT_FEE_3_80 = "FLAT FEE $3.80"


class BusLoad(Enum):
    """Passenger load of an arriving bus."""

    SEATS_AVAILABLE = "SEA"
    STANDING_AVAILABLE = "SDA"
    LIMITED_STANDING = "LSD"
    UNKNOWN = "UNKNOWN"


class BusType(Enum):
    """Vehicle type of an arriving bus."""

    SINGLE_DECK = "SD"
    DOUBLE_DECK = "DD"
    BENDY = "BD"
    UNKNOWN = "UNKNOWN"


class BusFeature(Enum):
    """Accessibility features of an arriving bus."""

    WHEELCHAIR_ACCESSIBLE = "WAB"


class MrtLine(Enum):
    """MRT and LRT lines."""

    CCL = "CCL"  # Circle Line
    CEL = "CEL"  # Circle Line Extension
    CGL = "CGL"  # Changi Airport Branch Line
    DTL = "DTL"  # Downtown Line
    EWL = "EWL"  # East West Line
    NEL = "NEL"  # North East Line
    NSL = "NSL"  # North South Line
    TEL = "TEL"  # Thomson-East Coast Line
    BPL = "BPL"  # Bukit Panjang LRT
    SLRT = "SLRT"  # Sengkang LRT
    PLRT = "PLRT"  # Punggol LRT


class TrainStatus(Enum):
    """Overall train network status reported with service alerts."""

    NORMAL = "1"
    DISRUPTED = "2"


class TaxiStandOwner(Enum):
    """Owner of a taxi stand."""

    LTA = "LTA"
    CCS = "CCS"
    PRIVATE = "Private"
    UNKNOWN = "UNKNOWN"


class TaxiStandType(Enum):
    """Kind of taxi stand."""

    STAND = "Stand"
    STOP = "Stop"
    UNKNOWN = "UNKNOWN"


class CarParkLotType(Enum):
    """Lot type of a car park availability record."""

    CARS = "C"
    HEAVY_VEHICLES = "H"
    MOTORCYCLES = "Y"
    UNKNOWN = "UNKNOWN"


class CarParkAgency(Enum):
    """Agency managing a car park."""

    HDB = "HDB"
    LTA = "LTA"
    URA = "URA"
    UNKNOWN = "UNKNOWN"


class IncidentType(Enum):
    """Traffic incident categories."""

    ACCIDENT = "Accident"
    ROAD_WORK = "Roadwork"
    VEHICLE_BREAKDOWN = "Vehicle breakdown"
    WEATHER = "Weather"
    OBSTACLE = "Obstacle"
    ROAD_BLOCK = "Road Block"
    HEAVY_TRAFFIC = "Heavy Traffic"
    MISC = "Misc."
    DIVERSION = "Diversion"
    UNATTENDED_VEHICLE = "Unattended Vehicle"
    UNKNOWN = "UNKNOWN"


class FaultyLightType(Enum):
    """Fault reported for a traffic light."""

    BLACKOUT = "4"
    FLASHING_YELLOW = "13"
    UNKNOWN = "UNKNOWN"


class VolType(Enum):
    """Passenger volume datasets; values are the endpoint paths."""

    BUS_STOPS = "/PV/Bus"
    OD_BUS_STOP = "/PV/ODBus"
    TRAIN = "/PV/Train"
    OD_TRAIN = "/PV/ODTrain"


class RoadDetailsType(Enum):
    """Road detail datasets; values are the endpoint paths."""

    ROAD_OPENING = "/RoadOpenings"
    ROAD_WORKS = "/RoadWorks"
