"""Road surface descriptions (references to OpenCRG files)."""

from typing import List, Optional

import attr

from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, children
from opendrive.core.units import Angle, Length


class CrgMode(StringEnum):
    ATTACHED = "attached"
    ATTACHED0 = "attached0"
    GENUINE = "genuine"
    GLOBAL = "global"


class CrgOrientation(StringEnum):
    SAME = "same"
    OPPOSITE = "opposite"


class CrgPurpose(StringEnum):
    ELEVATION = "elevation"
    FRICTION = "friction"


@attr.s(auto_attribs=True, kw_only=True)
class Crg(XmlElement):
    """An OpenCRG file describing the surface over ``[sStart, sEnd]``."""

    file: str = attribute("file")
    s_start: Length = attribute("sStart", Length)
    s_end: Length = attribute("sEnd", Length)
    orientation: CrgOrientation = attribute("orientation", CrgOrientation)
    mode: CrgMode = attribute("mode", CrgMode)
    purpose: Optional[CrgPurpose] = attribute("purpose", CrgPurpose, required=False)
    s_offset: Optional[Length] = attribute("sOffset", Length, required=False)
    t_offset: Optional[Length] = attribute("tOffset", Length, required=False)
    z_offset: Optional[Length] = attribute("zOffset", Length, required=False)
    z_scale: Optional[float] = attribute("zScale", float, required=False)
    h_offset: Optional[Angle] = attribute("hOffset", Angle, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class Surface(XmlElement):
    crg: List[Crg] = children("CRG", Crg)
    additional_data: AdditionalData = additional_data()
