"""The document header."""

import datetime
from typing import Optional

import attr

from opendrive.core.additional_data import AdditionalData
from opendrive.core.errors import warn
from opendrive.core.model import XmlElement, additional_data, attribute, child, text
from opendrive.core.units import Angle, Length

#: Formats tried, in order, when interpreting ``header/@date``.
DATE_FORMATS = ("%a %b %d %H:%M:%S %Y",)


@attr.s(auto_attribs=True, kw_only=True)
class GeoReference(XmlElement):
    """Projection of the document's coordinates, as a PROJ string."""

    text: str = text()
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Offset(XmlElement):
    """Inertial offset applied to all coordinates before projection."""

    hdg: Angle = attribute("hdg", Angle)
    x: Length = attribute("x", Length)
    y: Length = attribute("y", Length)
    z: Length = attribute("z", Length)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Header(XmlElement):
    rev_major: int = attribute("revMajor", int)
    rev_minor: int = attribute("revMinor", int)
    name: Optional[str] = attribute("name", required=False)
    version: Optional[str] = attribute("version", required=False)
    #: Date of creation, kept verbatim; see `parsed_date`.
    date: Optional[str] = attribute("date", required=False)
    north: Optional[Length] = attribute("north", Length, required=False)
    south: Optional[Length] = attribute("south", Length, required=False)
    east: Optional[Length] = attribute("east", Length, required=False)
    west: Optional[Length] = attribute("west", Length, required=False)
    vendor: Optional[str] = attribute("vendor", required=False)
    geo_reference: Optional[GeoReference] = child("geoReference", GeoReference)
    offset: Optional[Offset] = child("offset", Offset)
    additional_data: AdditionalData = additional_data()

    def parsed_date(self):
        """The creation date as a `datetime.datetime`, if it can be interpreted.

        Both the C-style format used by many tools (``Mon Oct 28 14:02:13 2019``)
        and ISO 8601 are understood. Returns `None` if there is no date, and warns
        if the date is not in a known format.
        """
        if self.date is None:
            return None
        date = self.date.strip()
        for dateFormat in DATE_FORMATS:
            try:
                return datetime.datetime.strptime(date, dateFormat)
            except ValueError:
                pass
        try:
            return datetime.datetime.fromisoformat(date)
        except ValueError:
            warn(f"unrecognized header date {self.date!r}")
            return None
