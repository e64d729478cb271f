"""
LTA DataMall client

Typed bindings for the Singapore LTA DataMall open-data API: bus arrivals,
services, routes and stops, taxis, train service alerts, passenger volume
and traffic data.

Usage:
    from lta_datamall import LTAClient, bus

    client = LTAClient.with_api_key("YOUR_API_KEY")
    arrivals = bus.get_arrival(client, 83139)
"""

from version import __version__

from .api import bus, crowd, taxi, traffic, train
from .api.async_client import AsyncLTAClient
from .api.client import BaseLTAClient, RequestBuilder
from .api.exceptions import (
    APIException,
    AuthenticationException,
    ConfigurationException,
    DecodeException,
    LTAException,
    NetworkException,
    UnknownVariantException,
)
from .api.sync_client import LTAClient

__all__ = [
    "__version__",
    "bus",
    "crowd",
    "taxi",
    "traffic",
    "train",
    "AsyncLTAClient",
    "BaseLTAClient",
    "LTAClient",
    "RequestBuilder",
    "APIException",
    "AuthenticationException",
    "ConfigurationException",
    "DecodeException",
    "LTAException",
    "NetworkException",
    "UnknownVariantException",
]
