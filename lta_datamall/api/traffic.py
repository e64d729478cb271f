"""
Traffic endpoints.
"""

from typing import Optional

from .client import BaseLTAClient
from .query import list_paginated, lookup
from ..models.base import RawValueEnvelope
from ..models.enums import RoadDetailsType
from ..models.traffic import (
    RawBikeParking,
    RawCarPark,
    RawEstTravelTime,
    RawFaultyTrafficLight,
    RawRoadDetails,
    RawTrafficImage,
    RawTrafficIncident,
)

CARPARK_AVAIL_PATH = "/CarParkAvailabilityv2"
EST_TRAVEL_TIMES_PATH = "/EstTravelTimes"
FAULTY_TRAFFIC_LIGHTS_PATH = "/FaultyTrafficLights"
TRAFFIC_IMAGES_PATH = "/Traffic-Imagesv2"
TRAFFIC_INCIDENTS_PATH = "/TrafficIncidents"
BIKE_PARKING_PATH = "/BicycleParkingv2"

# Search radius in km used by the API when Dist is omitted
DEFAULT_BIKE_PARKING_DIST = 0.5


def get_carpark_avail(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get available lots for HDB, LTA and URA car parks.

    Update freq: 1 min.

    Returns:
        List[CarPark]
    """
    return list_paginated(
        client, client.api_url(CARPARK_AVAIL_PATH), RawValueEnvelope[RawCarPark], skip
    )


def get_est_travel_time(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get estimated travel times along expressway segments.

    Update freq: 5 min.

    Returns:
        List[EstTravelTime]
    """
    return list_paginated(
        client, client.api_url(EST_TRAVEL_TIMES_PATH), RawValueEnvelope[RawEstTravelTime], skip
    )


def get_faulty_traffic_lights(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get traffic lights currently faulty or under scheduled maintenance.

    Update freq: 2 min.

    Returns:
        List[FaultyTrafficLight]
    """
    return list_paginated(
        client,
        client.api_url(FAULTY_TRAFFIC_LIGHTS_PATH),
        RawValueEnvelope[RawFaultyTrafficLight],
        skip,
    )


def get_road_details(
    client: BaseLTAClient, road_details_type: RoadDetailsType, skip: Optional[int] = None
):
    """
    Get planned road openings or approved road works.

    Update freq: 24 hours.

    Returns:
        List[RoadDetails]
    """
    return list_paginated(
        client,
        client.api_url(road_details_type.value),
        RawValueEnvelope[RawRoadDetails],
        skip,
    )


def get_traffic_images(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get links to current traffic camera images. Links expire after 5 min.

    Update freq: 1 to 5 min.

    Returns:
        List[TrafficImage]
    """
    return list_paginated(
        client, client.api_url(TRAFFIC_IMAGES_PATH), RawValueEnvelope[RawTrafficImage], skip
    )


def get_traffic_incidents(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get current traffic incidents.

    Update freq: 2 min.

    Returns:
        List[TrafficIncident]
    """
    return list_paginated(
        client,
        client.api_url(TRAFFIC_INCIDENTS_PATH),
        RawValueEnvelope[RawTrafficIncident],
        skip,
    )


def get_bike_parking(
    client: BaseLTAClient, lat: float, long: float, dist: Optional[float] = None
):
    """
    Get bicycle parking locations within ``dist`` km of a point.

    Update freq: monthly.

    Args:
        client: Authenticated client
        lat: Latitude of the search centre
        long: Longitude of the search centre
        dist: Search radius in km, 0.5 when omitted

    Returns:
        List[BikeParking]
    """
    radius = DEFAULT_BIKE_PARKING_DIST if dist is None else dist
    return lookup(
        client,
        client.api_url(BIKE_PARKING_PATH),
        RawValueEnvelope[RawBikeParking],
        lambda rb: rb.query([("Lat", lat), ("Long", long), ("Dist", radius)]),
    )
