"""
Async LTA DataMall client built on aiohttp.

Calls suspend at the network boundary (sending the request and reading the
body) and share the decoding pipeline with the blocking client.
"""

import asyncio
import logging
import time
from typing import Any, Optional, Type

import aiohttp

from version import get_user_agent

from .client import DATAMALL_BASE_URL, BaseLTAClient, RequestBuilder
from .decoding import check_status, decode_response, parse_json
from .exceptions import ConfigurationException, NetworkException
from ..managers.config_manager import APIConfig, DEFAULT_TIMEOUT_SECONDS
from ..models.base import RawModel

logger = logging.getLogger(__name__)


class AsyncLTAClient(BaseLTAClient):
    """
    Async client for the LTA DataMall API.

    Either pass a preconfigured ``aiohttp.ClientSession`` (for custom
    timeouts, proxies or connectors), or use the client as an async context
    manager and let it own a session:

        async with AsyncLTAClient.with_api_key(key) as client:
            stops = await bus.get_bus_stops(client)
    """

    def __init__(
        self,
        api_key: Optional[str],
        session: Optional[aiohttp.ClientSession] = None,
        base_url: str = DATAMALL_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: Optional[str] = None,
    ):
        super().__init__(api_key, base_url)
        self._session = session
        self._owns_session = session is None
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent or get_user_agent()

    @classmethod
    def with_api_key(cls, api_key: str) -> "AsyncLTAClient":
        """Create a client that opens its own session on ``async with``."""
        return cls(api_key)

    @classmethod
    def from_config(
        cls, config: APIConfig, session: Optional[aiohttp.ClientSession] = None
    ) -> "AsyncLTAClient":
        """Create a client from an APIConfig."""
        return cls(
            config.resolved_api_key,
            session=session,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            user_agent=config.user_agent,
        )

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        return self._session

    async def __aenter__(self) -> "AsyncLTAClient":
        """Async context manager entry."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout_seconds),
                headers={"User-Agent": self._user_agent, "Accept": "application/json"},
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def execute(self, builder: RequestBuilder, raw_model: Type[RawModel]) -> Any:
        """
        Send the request and decode the response.

        Raises:
            ConfigurationException: If no session is available
            NetworkException: For connection failures and timeouts
            APIException: For non-success HTTP statuses
            DecodeException: For payloads that do not match ``raw_model``
        """
        if self._session is None:
            raise ConfigurationException(
                "Session not initialized: pass a session or use 'async with'"
            )

        logger.debug(builder.describe())
        t0 = time.perf_counter()
        try:
            async with self._session.get(
                builder.url,
                params=builder.param_list(),
                headers=builder.header_dict(),
            ) as response:
                status = response.status
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkException(f"Network error for {builder.url}: {e!r}") from e

        logger.debug(
            f"GET {builder.url} completed in {time.perf_counter() - t0:.2f}s status={status}"
        )
        check_status(status, body.decode("utf-8", errors="replace"), builder.url)
        payload = parse_json(body, builder.url)
        return decode_response(raw_model, payload, builder.url)
