"""Elevation and lateral profiles of roads."""

from typing import List

import attr

from opendrive.core.additional_data import AdditionalData
from opendrive.core.model import XmlElement, additional_data, attribute, children
from opendrive.core.units import Length


@attr.s(auto_attribs=True, kw_only=True)
class Elevation(XmlElement):
    """Cubic elevation polynomial starting at ``s``."""

    s: Length = attribute("s", Length)
    a: float = attribute("a", float)
    b: float = attribute("b", float)
    c: float = attribute("c", float)
    d: float = attribute("d", float)


@attr.s(auto_attribs=True, kw_only=True)
class ElevationProfile(XmlElement):
    elevation: List[Elevation] = children("elevation", Elevation)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Superelevation(XmlElement):
    """Cubic roll-angle polynomial (in radians) starting at ``s``."""

    s: Length = attribute("s", Length)
    a: float = attribute("a", float)
    b: float = attribute("b", float)
    c: float = attribute("c", float)
    d: float = attribute("d", float)


@attr.s(auto_attribs=True, kw_only=True)
class Shape(XmlElement):
    """Cubic height polynomial along ``t``, for the cross section at ``s``."""

    s: Length = attribute("s", Length)
    t: Length = attribute("t", Length)
    a: float = attribute("a", float)
    b: float = attribute("b", float)
    c: float = attribute("c", float)
    d: float = attribute("d", float)


@attr.s(auto_attribs=True, kw_only=True)
class LateralProfile(XmlElement):
    superelevation: List[Superelevation] = children("superelevation", Superelevation)
    shape: List[Shape] = children("shape", Shape)
    additional_data: AdditionalData = additional_data()
