"""Road markings of lanes."""

from typing import List, Optional

import attr

from opendrive.common import RoadMarkColor, RoadMarkWeight
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.errors import warn
from opendrive.core.model import XmlElement, additional_data, attribute, child, children
from opendrive.core.sequences import Sequence1
from opendrive.core.units import Length


class RoadMarkTypeSimplified(StringEnum):
    NONE = "none"
    SOLID = "solid"
    BROKEN = "broken"
    SOLID_SOLID = "solid solid"
    SOLID_BROKEN = "solid broken"
    BROKEN_SOLID = "broken solid"
    BROKEN_BROKEN = "broken broken"
    BOTTS_DOTS = "botts dots"
    GRASS = "grass"
    CURB = "curb"
    CUSTOM = "custom"
    EDGE = "edge"


class RoadMarkRule(StringEnum):
    NO_PASSING = "no passing"
    CAUTION = "caution"
    NONE = "none"


class LaneChange(StringEnum):
    """Which lane changes the marking permits."""

    INCREASE = "increase"
    DECREASE = "decrease"
    BOTH = "both"
    NONE = "none"


@attr.s(auto_attribs=True, kw_only=True)
class Sway(XmlElement):
    """Lateral displacement of the marking, as a cubic polynomial in ``ds``."""

    ds: Length = attribute("ds", Length)
    a: float = attribute("a", float)
    b: float = attribute("b", float)
    c: float = attribute("c", float)
    d: float = attribute("d", float)


@attr.s(auto_attribs=True, kw_only=True)
class RoadMarkTypeLine(XmlElement):
    """One repeated line of a detailed road mark type."""

    length: Length = attribute("length", Length)
    space: Length = attribute("space", Length)
    t_offset: Length = attribute("tOffset", Length)
    s_offset: Length = attribute("sOffset", Length)
    rule: Optional[RoadMarkRule] = attribute("rule", RoadMarkRule, required=False)
    width: Optional[Length] = attribute("width", Length, required=False)
    color: Optional[RoadMarkColor] = attribute("color", RoadMarkColor, required=False)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class RoadMarkType(XmlElement):
    """Detailed description of a road mark as a set of repeated lines."""

    name: str = attribute("name")
    width: Length = attribute("width", Length)
    line: Sequence1[RoadMarkTypeLine] = children("line", RoadMarkTypeLine, non_empty=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class ExplicitLine(XmlElement):
    """One non-repeating line of an explicit road mark."""

    length: Length = attribute("length", Length)
    t_offset: Length = attribute("tOffset", Length)
    s_offset: Length = attribute("sOffset", Length)
    rule: Optional[RoadMarkRule] = attribute("rule", RoadMarkRule, required=False)
    width: Optional[Length] = attribute("width", Length, required=False)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Explicit(XmlElement):
    """Irregular road marking given line by line."""

    line: Sequence1[ExplicitLine] = children("line", ExplicitLine, non_empty=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class RoadMark(XmlElement):
    s_offset: Length = attribute("sOffset", Length)
    type_: RoadMarkTypeSimplified = attribute("type", RoadMarkTypeSimplified)
    weight: Optional[RoadMarkWeight] = attribute("weight", RoadMarkWeight, required=False)
    color: RoadMarkColor = attribute("color", RoadMarkColor)
    material: Optional[str] = attribute("material", required=False)
    width: Optional[Length] = attribute("width", Length, required=False)
    lane_change: Optional[LaneChange] = attribute("laneChange", LaneChange, required=False)
    height: Optional[Length] = attribute("height", Length, required=False)
    sway: List[Sway] = children("sway", Sway)
    type_detail: Optional[RoadMarkType] = child("type", RoadMarkType)
    explicit: Optional[Explicit] = child("explicit", Explicit)
    additional_data: AdditionalData = additional_data()

    @classmethod
    def missing_attribute(cls, read, name):
        if name == "color" and read.options.workaround_missing_road_mark_color:
            warn(f"roadMark without color at {read.path}; assuming 'standard'")
            return RoadMarkColor.STANDARD
        return super().missing_attribute(read, name)
