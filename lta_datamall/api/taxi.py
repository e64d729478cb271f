"""
Taxi endpoints.
"""

from typing import Optional

from .client import BaseLTAClient
from .query import list_paginated
from ..models.base import RawValueEnvelope
from ..models.taxi import RawTaxiPos, RawTaxiStand

TAXI_AVAIL_PATH = "/Taxi-Availability"
TAXI_STANDS_PATH = "/TaxiStands"


def get_taxi_avail(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get locations of all taxis currently available for hire. Hired and busy
    taxis are not included.

    Update freq: 1 min.

    Returns:
        List[TaxiPos]
    """
    return list_paginated(
        client, client.api_url(TAXI_AVAIL_PATH), RawValueEnvelope[RawTaxiPos], skip
    )


def get_taxi_stands(client: BaseLTAClient, skip: Optional[int] = None):
    """
    Get all taxi stands, with ownership and barrier-free access.

    Update freq: monthly.

    Returns:
        List[TaxiStand]
    """
    return list_paginated(
        client, client.api_url(TAXI_STANDS_PATH), RawValueEnvelope[RawTaxiStand], skip
    )
