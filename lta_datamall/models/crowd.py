"""
Passenger volume models.

The passenger volume endpoints return download links to zipped CSV files,
which expire a few minutes after they are issued.
"""

from pydantic import Field

from .base import RawModel


# Date query parameter format, e.g. 202401 for January 2024
DATE_FORMAT = "%Y%m"


class RawPassengerVolLink(RawModel):
    link: str = Field(alias="Link")

    def into(self) -> str:
        return self.link
