"""
Client capability shared by the blocking and async transports.

A client is an authenticated handle: it holds the API key and an underlying
pooled transport, and is never mutated once constructed, so one instance can
be shared by any number of concurrent calls. Everything above this layer
only needs ``request_builder`` and ``execute``.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping, Optional, Tuple, Type, Union

from version import __api_base_url__, __api_key_header__

from .exceptions import ConfigurationException
from ..models.base import RawModel

logger = logging.getLogger(__name__)

DATAMALL_BASE_URL = __api_base_url__
API_KEY_HEADER = __api_key_header__

QueryPairs = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def mask_api_key(value: Optional[str]) -> Optional[str]:
    """Mask an API key for logging, keeping the last four characters."""
    if not value:
        return value
    if len(value) <= 6:
        return "****"
    return f"****{value[-4:]}"


@dataclass(frozen=True)
class RequestBuilder:
    """
    An outbound GET request that has not been sent yet.

    Builders are immutable: ``query`` and ``header`` return a new builder,
    so a builder handed to a query function cannot be changed behind the
    caller's back.
    """

    url: str
    headers: Tuple[Tuple[str, str], ...] = ()
    params: Tuple[Tuple[str, str], ...] = ()

    def query(self, pairs: QueryPairs) -> "RequestBuilder":
        """Return a builder with extra query parameters appended."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        extra = tuple((str(key), str(value)) for key, value in items)
        return replace(self, params=self.params + extra)

    def header(self, name: str, value: str) -> "RequestBuilder":
        """Return a builder with an extra header."""
        return replace(self, headers=self.headers + ((name, value),))

    def header_dict(self) -> dict:
        return dict(self.headers)

    def param_list(self) -> list:
        return list(self.params)

    def describe(self) -> str:
        """Describe the request for logs, with the API key masked."""
        headers = {
            name: mask_api_key(value) if name == API_KEY_HEADER else value
            for name, value in self.headers
        }
        return f"GET {self.url} params={self.param_list()} headers={headers}"


class BaseLTAClient(ABC):
    """
    Abstract authenticated handle for the LTA DataMall API.

    Subclasses supply the transport; this class owns the credential and
    builds requests from it.
    """

    def __init__(self, api_key: Optional[str], base_url: str = DATAMALL_BASE_URL):
        """
        Initialize the client.

        Args:
            api_key: DataMall account key. An empty string counts as no key.
            base_url: API root that resource paths are joined onto
        """
        self._api_key = api_key or None
        self._base_url = base_url.rstrip("/")

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def has_api_key(self) -> bool:
        return self._api_key is not None

    def api_url(self, path: str) -> str:
        """Join a resource path such as ``/BusStops`` onto the base URL."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def request_builder(self, url: str) -> RequestBuilder:
        """
        Build a GET request for ``url`` carrying the API key header.

        Raises:
            ConfigurationException: If the client has no API key
        """
        if not self._api_key:
            raise ConfigurationException(
                f"Cannot build request for {url}: no API key configured"
            )
        return RequestBuilder(url=url, headers=((API_KEY_HEADER, self._api_key),))

    @abstractmethod
    def execute(self, builder: RequestBuilder, raw_model: Type[RawModel]) -> Any:
        """
        Send the request and decode the body into ``raw_model``'s domain value.

        Blocking clients return the value; async clients return an awaitable.
        """
        pass

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self._base_url!r}, "
            f"api_key={mask_api_key(self._api_key)!r})"
        )
