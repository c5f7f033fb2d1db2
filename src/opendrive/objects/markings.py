"""Markings and borders of objects.

Both refer to the corners of an object's outline by id, via `CornerReference`.
"""

from typing import List, Optional

import attr

from opendrive.common import RoadMarkColor, RoadMarkWeight
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, children
from opendrive.core.sequences import Sequence1
from opendrive.core.units import Length
from opendrive.core.values import UNSIGNED


class SideType(StringEnum):
    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"
    REAR = "rear"


class BorderType(StringEnum):
    CONCRETE = "concrete"
    CURB = "curb"


@attr.s(auto_attribs=True, kw_only=True)
class CornerReference(XmlElement):
    id_: int = attribute("id", UNSIGNED)


@attr.s(auto_attribs=True, kw_only=True)
class Marking(XmlElement):
    """A repeated line marking along the outline or one side of an object."""

    side: Optional[SideType] = attribute("side", SideType, required=False)
    weight: Optional[RoadMarkWeight] = attribute("weight", RoadMarkWeight, required=False)
    width: Optional[Length] = attribute("width", Length, required=False)
    color: RoadMarkColor = attribute("color", RoadMarkColor)
    z_offset: Optional[Length] = attribute("zOffset", Length, required=False)
    space_length: Length = attribute("spaceLength", Length)
    line_length: Length = attribute("lineLength", Length)
    start_offset: Length = attribute("startOffset", Length)
    stop_offset: Length = attribute("stopOffset", Length)
    corner_reference: List[CornerReference] = children(
        "cornerReference", CornerReference
    )
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Markings(XmlElement):
    marking: Sequence1[Marking] = children("marking", Marking, non_empty=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Border(XmlElement):
    """A border (e.g. a curb) along an outline of an object."""

    width: Length = attribute("width", Length)
    type_: BorderType = attribute("type", BorderType)
    outline_id: int = attribute("outlineId", UNSIGNED)
    use_complete_outline: Optional[bool] = attribute(
        "useCompleteOutline", bool, required=False
    )
    corner_reference: List[CornerReference] = children(
        "cornerReference", CornerReference
    )
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Borders(XmlElement):
    border: Sequence1[Border] = children("border", Border, non_empty=True)
    additional_data: AdditionalData = additional_data()
