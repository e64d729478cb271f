"""
Request shapes shared by every resource endpoint.

Both helpers return whatever the client's ``execute`` returns: the decoded
value for LTAClient, an awaitable of it for AsyncLTAClient. Resource
modules therefore serve both transports with a single function.
"""

from typing import Any, Callable, Optional, Type

from .client import BaseLTAClient, RequestBuilder
from ..models.base import RawModel

SKIP_PARAM = "$skip"

QueryFn = Callable[[RequestBuilder], RequestBuilder]


def list_paginated(
    client: BaseLTAClient,
    url: str,
    raw_model: Type[RawModel],
    skip: Optional[int] = None,
) -> Any:
    """
    Fetch one page of a bulk listing.

    Args:
        client: Authenticated client
        url: Endpoint URL
        raw_model: Raw wire shape of the response
        skip: Number of records to skip, defaults to 0. Further pages are
            the caller's job.
    """
    offset = 0 if skip is None else skip
    builder = client.request_builder(url).query([(SKIP_PARAM, offset)])
    return client.execute(builder, raw_model)


def lookup(
    client: BaseLTAClient,
    url: str,
    raw_model: Type[RawModel],
    apply_query: QueryFn,
) -> Any:
    """
    Fetch an endpoint with caller-specific query parameters.

    Args:
        client: Authenticated client
        url: Endpoint URL
        raw_model: Raw wire shape of the response
        apply_query: Adds this request's parameters to the builder
    """
    builder = apply_query(client.request_builder(url))
    return client.execute(builder, raw_model)
