"""
Response decoding shared by both transports.

A response goes through three checks: the HTTP status, the JSON body, and
the raw model's shape (including its field decoders). The raw model is then
converted into the domain value. Any failure rejects the whole payload.
"""

import json
import logging
from typing import Any, Type, Union

from pydantic import ValidationError

from .exceptions import APIException, AuthenticationException, DecodeException
from ..models.base import RawModel

logger = logging.getLogger(__name__)

_BODY_SNIPPET_LENGTH = 300


def check_status(status_code: int, body: str, url: str) -> None:
    """
    Raise for a non-success HTTP status.

    Raises:
        AuthenticationException: For 401 and 403
        APIException: For any other status outside 2xx
    """
    if 200 <= status_code < 300:
        return

    snippet = (body or "")[:_BODY_SNIPPET_LENGTH]
    if status_code in (401, 403):
        raise AuthenticationException(
            f"API rejected credentials ({status_code}): {snippet}",
            status_code=status_code,
            url=url,
        )
    raise APIException(f"API error {status_code}: {snippet}", status_code=status_code, url=url)


def parse_json(body: Union[str, bytes], url: str) -> Any:
    """Parse a response body as JSON, raising DecodeException on failure."""
    try:
        return json.loads(body)
    except ValueError as e:
        raise DecodeException(f"Response body is not valid JSON: {e}", endpoint=url) from e


def _describe_validation_error(error: ValidationError) -> tuple:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return location or None, first.get("input"), first.get("msg", "invalid value")


def decode_response(raw_model: Type[RawModel], payload: Any, url: str) -> Any:
    """
    Decode a parsed JSON payload into ``raw_model`` and convert it.

    Args:
        raw_model: Raw wire shape expected from the endpoint
        payload: Parsed JSON body
        url: Request URL, attached to any error

    Returns:
        Any: The domain value produced by ``raw_model.into()``

    Raises:
        DecodeException: If the payload does not match the raw shape
        UnknownVariantException: If a mandatory coded field has an unknown code
    """
    try:
        raw = raw_model.model_validate(payload)
    except DecodeException as e:
        if e.endpoint is None:
            e.endpoint = url
        raise
    except ValidationError as e:
        field, value, reason = _describe_validation_error(e)
        raise DecodeException(
            f"Payload does not match {raw_model.__name__} at '{field}': {reason}",
            field=field,
            value=value,
            endpoint=url,
        ) from e

    result = raw.into()
    if isinstance(result, list):
        logger.debug(f"Decoded {len(result)} records from {url}")
    else:
        logger.debug(f"Decoded {type(result).__name__} from {url}")
    return result
