"""
Value types shared by several resource models.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class BusFreq:
    """
    Dispatch frequency window of a bus service, in minutes.

    Either bound may be missing: ``min`` without ``max`` means no upper bound
    is published, and neither bound means the service does not run in that
    period. ``min > max`` is kept as received.
    """

    min: Optional[int] = None
    max: Optional[int] = None

    @classmethod
    def new(cls, min_minutes: int, max_minutes: int) -> "BusFreq":
        return cls(min=min_minutes, max=max_minutes)

    @classmethod
    def no_max(cls, min_minutes: int) -> "BusFreq":
        return cls(min=min_minutes, max=None)

    @classmethod
    def no_timing(cls) -> "BusFreq":
        return cls(min=None, max=None)

    @property
    def has_timing(self) -> bool:
        """Check if the service is scheduled in this period."""
        return self.min is not None or self.max is not None

    def as_tuple(self) -> Tuple[Optional[int], Optional[int]]:
        return (self.min, self.max)


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 latitude/longitude pair."""

    lat: float
    long: float
