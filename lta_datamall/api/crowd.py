"""
Crowd endpoints.
"""

import datetime
from typing import Optional, Union

from .client import BaseLTAClient
from .exceptions import UnknownVariantException
from .query import list_paginated, lookup
from ..models.base import RawValueEnvelope
from ..models.crowd import DATE_FORMAT, RawPassengerVolLink
from ..models.enums import VolType


def _resolve_vol_type(vol_type: Union[VolType, str]) -> VolType:
    if isinstance(vol_type, VolType):
        return vol_type
    if isinstance(vol_type, str) and vol_type.upper() in VolType.__members__:
        return VolType[vol_type.upper()]
    raise UnknownVariantException(
        f"Unknown passenger volume type {vol_type!r}",
        value=vol_type,
        enum_name=VolType.__name__,
    )


def get_passenger_vol_by(
    client: BaseLTAClient,
    vol_type: Union[VolType, str],
    date: Optional[datetime.date] = None,
    skip: Optional[int] = None,
):
    """
    Get download links for monthly passenger volume files.

    Files for the previous month are published by the 15th. Links expire
    five minutes after they are issued.

    Args:
        client: Authenticated client
        vol_type: Dataset to fetch (VolType member or its name)
        date: Month to fetch; the latest month when omitted. ``skip`` is
            ignored when a date is given.
        skip: Number of records to skip

    Returns:
        List[str]

    Raises:
        UnknownVariantException: If ``vol_type`` is not a known dataset
    """
    resolved = _resolve_vol_type(vol_type)
    url = client.api_url(resolved.value)
    raw_model = RawValueEnvelope[RawPassengerVolLink]

    if date is not None:
        formatted = date.strftime(DATE_FORMAT)
        return lookup(client, url, raw_model, lambda rb: rb.query([("Date", formatted)]))
    return list_paginated(client, url, raw_model, skip)
