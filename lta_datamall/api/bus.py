"""
Bus endpoints.

Every function works with both clients: with LTAClient it returns the
decoded value, with AsyncLTAClient it returns an awaitable of it.
"""

from typing import Optional

from .client import BaseLTAClient
from .query import list_paginated, lookup
from ..models.base import RawValueEnvelope
from ..models.bus import RawBusArrivalResp, RawBusRoute, RawBusService, RawBusStop

BUS_ARRIVAL_PATH = "/BusArrivalv2"
BUS_SERVICES_PATH = "/BusServices"
BUS_ROUTES_PATH = "/BusRoutes"
BUS_STOPS_PATH = "/BusStops"


def get_arrival(client: BaseLTAClient, bus_stop_code: int, service_no: Optional[str] = None):
    """
    Get real-time arrivals for the services at a bus stop.

    An empty service list means nothing is running at that stop right now.
    Update freq: 1 min.

    Args:
        client: Authenticated client
        bus_stop_code: Bus stop to query
        service_no: Restrict to a single service

    Returns:
        BusArrivalResp
    """

    def apply_query(rb):
        params = [("BusStopCode", bus_stop_code)]
        if service_no is not None:
            params.append(("ServiceNo", service_no))
        return rb.query(params)

    return lookup(client, client.api_url(BUS_ARRIVAL_PATH), RawBusArrivalResp, apply_query)


def get_bus_services(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get service information for all buses in operation, including first and
    last stops and peak/off-peak dispatch frequencies.

    Update freq: ad hoc.

    Returns:
        List[BusService]
    """
    return list_paginated(
        client, client.api_url(BUS_SERVICES_PATH), RawValueEnvelope[RawBusService], skip
    )


def get_bus_routes(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get route information for all services, including every stop along each
    route and first/last bus timings at each stop.

    Update freq: ad hoc.

    Returns:
        List[BusRoute]
    """
    return list_paginated(
        client, client.api_url(BUS_ROUTES_PATH), RawValueEnvelope[RawBusRoute], skip
    )


def get_bus_stops(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get all bus stops currently being serviced, with their coordinates.

    Update freq: ad hoc.

    Returns:
        List[BusStop]
    """
    return list_paginated(
        client, client.api_url(BUS_STOPS_PATH), RawValueEnvelope[RawBusStop], skip
    )
