"""
Blocking LTA DataMall client built on httpx.

The calling thread waits for the HTTP round trip and the decode. The
underlying ``httpx.Client`` keeps a connection pool, so create one client
and reuse it.
"""

import logging
import time
from typing import Any, Optional, Type

import httpx

from version import get_user_agent

from .client import DATAMALL_BASE_URL, BaseLTAClient, RequestBuilder
from .decoding import check_status, decode_response, parse_json
from .exceptions import NetworkException
from ..managers.config_manager import APIConfig, DEFAULT_TIMEOUT_SECONDS
from ..models.base import RawModel

logger = logging.getLogger(__name__)


def make_session(
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS, user_agent: Optional[str] = None
) -> httpx.Client:
    """Create an httpx client with the library's default settings."""
    return httpx.Client(
        timeout=httpx.Timeout(timeout_seconds),
        headers={"User-Agent": user_agent or get_user_agent(), "Accept": "application/json"},
    )


class LTAClient(BaseLTAClient):
    """
    Blocking client for the LTA DataMall API.

    Pass a preconfigured ``httpx.Client`` to control timeouts, proxies or
    compression; otherwise one is created with default settings.
    """

    def __init__(
        self,
        api_key: Optional[str],
        session: Optional[httpx.Client] = None,
        base_url: str = DATAMALL_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: Optional[str] = None,
    ):
        super().__init__(api_key, base_url)
        self._owns_session = session is None
        if session is None:
            session = make_session(timeout_seconds, user_agent)
        self._session = session

    @classmethod
    def with_api_key(cls, api_key: str) -> "LTAClient":
        """Create a client with default transport settings."""
        return cls(api_key)

    @classmethod
    def from_config(cls, config: APIConfig, session: Optional[httpx.Client] = None) -> "LTAClient":
        """Create a client from an APIConfig."""
        return cls(
            config.resolved_api_key,
            session=session,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
        )

    @property
    def session(self) -> httpx.Client:
        return self._session

    def execute(self, builder: RequestBuilder, raw_model: Type[RawModel]) -> Any:
        """
        Send the request and decode the response.

        Raises:
            NetworkException: For connection failures and timeouts
            APIException: For non-success HTTP statuses
            DecodeException: For payloads that do not match ``raw_model``
        """
        logger.debug(builder.describe())
        t0 = time.perf_counter()
        try:
            response = self._session.get(
                builder.url,
                params=builder.param_list(),
                headers=builder.header_dict(),
            )
        except httpx.RequestError as e:
            raise NetworkException(f"Network error for {builder.url}: {e!r}") from e

        logger.debug(
            f"GET {builder.url} completed in {time.perf_counter() - t0:.2f}s "
            f"status={response.status_code}"
        )
        check_status(response.status_code, response.text, builder.url)
        payload = parse_json(response.content, builder.url)
        return decode_response(raw_model, payload, builder.url)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "LTAClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
