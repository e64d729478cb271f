"""
Field-level decoders for LTA DataMall payloads.

The API transmits most numbers as strings, enumerations as short codes and
bus frequency windows as range strings. These functions turn a single raw
field value into its typed counterpart, or raise DecodeException naming the
wire field and the offending value. They never fall back to a default.
"""

import logging
import re
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Type, TypeVar, Union

from ..api.exceptions import DecodeException, UnknownVariantException
from ..models.common import BusFreq, Coordinates

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
Number = Union[int, float]

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_FREQ_RANGE_RE = re.compile(r"^(\d+)\s*-\s*(\d+)$")
_FREQ_SINGLE_RE = re.compile(r"^(\d+)$")

# Tokens the API uses for "no dispatch in this period"
NO_TIMING_TOKENS = frozenset({"", "-"})

_DATETIME_FORMATS = (
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
)

_FLAG_VALUES = {
    "y": True,
    "yes": True,
    "true": True,
    "n": False,
    "no": False,
    "false": False,
}


class CodePolicy(Enum):
    """What to do with a wire code missing from an enum's code table."""

    STRICT = "strict"  # raise UnknownVariantException
    LENIENT = "lenient"  # map to the enum's UNKNOWN member


def number_from_str(value: Any, kind: Type[Number], field: str) -> Number:
    """
    Decode a decimal integer or float transmitted as a string.

    JSON numbers are accepted as-is. Booleans are rejected.

    Args:
        value: Raw field value
        kind: ``int`` or ``float``
        field: Wire field name, used in error messages

    Returns:
        Number: The decoded value

    Raises:
        DecodeException: If the value is not a well-formed number
    """
    if isinstance(value, bool):
        raise DecodeException(
            f"Field '{field}': expected {kind.__name__}, got boolean {value!r}",
            field=field,
            value=value,
        )

    if isinstance(value, (int, float)):
        if kind is int and isinstance(value, float) and not value.is_integer():
            raise DecodeException(
                f"Field '{field}': expected integer, got {value!r}",
                field=field,
                value=value,
            )
        return kind(value)

    if not isinstance(value, str):
        raise DecodeException(
            f"Field '{field}': expected numeric string, got {type(value).__name__}",
            field=field,
            value=value,
        )

    text = value.strip()
    pattern = _INT_RE if kind is int else _FLOAT_RE
    if not pattern.match(text):
        raise DecodeException(
            f"Field '{field}': cannot decode {value!r} as {kind.__name__}",
            field=field,
            value=value,
        )
    return kind(text)


def optional_number_from_str(value: Any, kind: Type[Number], field: str) -> Optional[Number]:
    """Like number_from_str, but an empty or missing value decodes to None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return number_from_str(value, kind, field)


def enum_from_code(
    value: Any,
    enum_cls: Type[E],
    field: str,
    policy: CodePolicy = CodePolicy.STRICT,
) -> E:
    """
    Look up a wire code in an enum's code table.

    Args:
        value: Raw field value (a string code, or a number for numeric codes)
        enum_cls: Enum whose member values are the wire codes
        field: Wire field name, used in error messages
        policy: Behaviour for codes absent from the table

    Returns:
        E: The matching member, or ``UNKNOWN`` under the lenient policy

    Raises:
        UnknownVariantException: If the code is unknown under the strict policy
        DecodeException: If the value is missing or not a code at all
    """
    if isinstance(value, enum_cls):
        return value

    if value is None or isinstance(value, (bool, dict, list)):
        raise DecodeException(
            f"Field '{field}': expected {enum_cls.__name__} code, got {value!r}",
            field=field,
            value=value,
        )

    code = str(value).strip()
    for member in enum_cls:
        if member.name != "UNKNOWN" and member.value == code:
            return member

    if policy is CodePolicy.LENIENT:
        unknown = enum_cls.__members__.get("UNKNOWN")
        if unknown is None:
            raise TypeError(f"{enum_cls.__name__} has no UNKNOWN member for lenient decoding")
        logger.debug(f"Unrecognised {enum_cls.__name__} code {code!r} in '{field}', using UNKNOWN")
        return unknown

    raise UnknownVariantException(
        f"Field '{field}': unknown {enum_cls.__name__} code {value!r}",
        field=field,
        value=value,
        enum_name=enum_cls.__name__,
    )


def optional_enum_from_code(
    value: Any,
    enum_cls: Type[E],
    field: str,
    policy: CodePolicy = CodePolicy.STRICT,
) -> Optional[E]:
    """Like enum_from_code, but an empty or missing code decodes to None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return enum_from_code(value, enum_cls, field, policy)


def bus_freq_from_str(value: Any, field: str) -> BusFreq:
    """
    Decode a dispatch frequency window.

    ``"7-10"`` gives both bounds, ``"5"`` only a lower bound, and ``"-"`` or
    an empty string means the service does not run in that period.

    Raises:
        DecodeException: For any other shape
    """
    if isinstance(value, BusFreq):
        return value
    if not isinstance(value, str):
        raise DecodeException(
            f"Field '{field}': expected frequency string, got {value!r}",
            field=field,
            value=value,
        )

    text = value.strip()
    if text in NO_TIMING_TOKENS:
        return BusFreq.no_timing()

    match = _FREQ_RANGE_RE.match(text)
    if match:
        return BusFreq.new(int(match.group(1)), int(match.group(2)))

    match = _FREQ_SINGLE_RE.match(text)
    if match:
        return BusFreq.no_max(int(match.group(1)))

    raise DecodeException(
        f"Field '{field}': cannot decode {value!r} as a frequency window",
        field=field,
        value=value,
    )


def datetime_from_str(value: Any, field: str, optional: bool = False) -> Optional[datetime]:
    """
    Decode an ISO-8601 or ``YYYY-MM-DD HH:MM:SS[.f]`` timestamp.

    An empty value decodes to None only when ``optional`` is set.
    """
    if isinstance(value, datetime):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        if optional:
            return None
        raise DecodeException(f"Field '{field}': missing timestamp", field=field, value=value)
    if not isinstance(value, str):
        raise DecodeException(
            f"Field '{field}': expected timestamp string, got {value!r}",
            field=field,
            value=value,
        )

    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise DecodeException(
        f"Field '{field}': cannot decode {value!r} as a timestamp",
        field=field,
        value=value,
    )


def coordinates_from_str(value: Any, field: str) -> Optional[Coordinates]:
    """Decode a ``"<lat> <long>"`` pair; an empty value decodes to None."""
    if isinstance(value, Coordinates):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if not isinstance(value, str):
        raise DecodeException(
            f"Field '{field}': expected coordinate string, got {value!r}",
            field=field,
            value=value,
        )

    parts = value.split()
    if len(parts) != 2:
        raise DecodeException(
            f"Field '{field}': cannot decode {value!r} as 'lat long'",
            field=field,
            value=value,
        )
    return Coordinates(
        lat=number_from_str(parts[0], float, field),
        long=number_from_str(parts[1], float, field),
    )


def str_list_from_csv(value: Any, field: str) -> List[str]:
    """Decode a comma separated list such as ``"NE1,NE3,NE4"``."""
    if isinstance(value, list):
        return [str(item) for item in value]
    if value is None:
        return []
    if not isinstance(value, str):
        raise DecodeException(
            f"Field '{field}': expected comma separated string, got {value!r}",
            field=field,
            value=value,
        )
    return [item.strip() for item in value.split(",") if item.strip()]


def bool_from_flag(value: Any, field: str) -> bool:
    """Decode ``Y``/``N`` and ``Yes``/``No`` flags."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        flag = _FLAG_VALUES.get(value.strip().lower())
        if flag is not None:
            return flag
    raise DecodeException(
        f"Field '{field}': cannot decode {value!r} as a yes/no flag",
        field=field,
        value=value,
    )
