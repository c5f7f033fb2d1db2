"""Lanes and lane sections.

The lanes of a road are grouped into lane sections, within which the number
and arrangement of lanes is constant. In each section the lanes are split into
left (positive ids), center (id 0), and right (negative ids) groups.
"""

from typing import List, Optional, Union

import attr

from opendrive.common import LaneType, SpeedUnit
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, child, children
from opendrive.core.sequences import Sequence1
from opendrive.core.units import Length
from opendrive.lane.road_mark import RoadMark

## Lane offsets


@attr.s(auto_attribs=True, kw_only=True)
class LaneOffset(XmlElement):
    """Lateral shift of the center lane from the reference line (cubic in ``ds``)."""

    s: Length = attribute("s", Length)
    a: float = attribute("a", float)
    b: float = attribute("b", float)
    c: float = attribute("c", float)
    d: float = attribute("d", float)


## Lane records


@attr.s(auto_attribs=True, kw_only=True)
class LanePredecessorSuccessor(XmlElement):
    id_: int = attribute("id", int)


@attr.s(auto_attribs=True, kw_only=True)
class LaneLink(XmlElement):
    predecessor: List[LanePredecessorSuccessor] = children(
        "predecessor", LanePredecessorSuccessor
    )
    successor: List[LanePredecessorSuccessor] = children(
        "successor", LanePredecessorSuccessor
    )
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Width(XmlElement):
    """Lane width as a cubic polynomial in ``ds``, starting at ``sOffset``."""

    s_offset: Length = attribute("sOffset", Length)
    a: float = attribute("a", float)
    b: float = attribute("b", float)
    c: float = attribute("c", float)
    d: float = attribute("d", float)


@attr.s(auto_attribs=True, kw_only=True)
class Border(XmlElement):
    """Outer lane border offset as a cubic polynomial in ``ds``."""

    s_offset: Length = attribute("sOffset", Length)
    a: float = attribute("a", float)
    b: float = attribute("b", float)
    c: float = attribute("c", float)
    d: float = attribute("d", float)


#: Either kind of lane width record.
LaneChoice = Union[Width, Border]

LANE_CHOICES = {"width": Width, "border": Border}


@attr.s(auto_attribs=True, kw_only=True)
class LaneMaterial(XmlElement):
    s_offset: Length = attribute("sOffset", Length)
    surface: Optional[str] = attribute("surface", required=False)
    friction: float = attribute("friction", float)
    roughness: Optional[float] = attribute("roughness", float, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class LaneSpeed(XmlElement):
    s_offset: Length = attribute("sOffset", Length)
    max: float = attribute("max", float)
    unit: Optional[SpeedUnit] = attribute("unit", SpeedUnit, required=False)


class AccessRestriction(StringEnum):
    SIMULATOR = "simulator"
    AUTONOMOUS_TRAFFIC = "autonomousTraffic"
    PEDESTRIAN = "pedestrian"
    PASSENGER_CAR = "passengerCar"
    BUS = "bus"
    DELIVERY = "delivery"
    EMERGENCY = "emergency"
    TAXI = "taxi"
    THROUGH_TRAFFIC = "throughTraffic"
    TRUCK = "truck"
    BICYCLE = "bicycle"
    MOTORCYCLE = "motorcycle"
    NONE = "none"
    TRUCKS = "trucks"


class AccessRule(StringEnum):
    ALLOW = "allow"
    DENY = "deny"


@attr.s(auto_attribs=True, kw_only=True)
class LaneAccess(XmlElement):
    s_offset: Length = attribute("sOffset", Length)
    rule: Optional[AccessRule] = attribute("rule", AccessRule, required=False)
    restriction: AccessRestriction = attribute("restriction", AccessRestriction)


@attr.s(auto_attribs=True, kw_only=True)
class LaneHeight(XmlElement):
    """Height of a lane (e.g. a sidewalk) above the road surface."""

    s_offset: Length = attribute("sOffset", Length)
    inner: Length = attribute("inner", Length)
    outer: Length = attribute("outer", Length)


@attr.s(auto_attribs=True, kw_only=True)
class LaneRule(XmlElement):
    s_offset: Length = attribute("sOffset", Length)
    value: str = attribute("value")


## Lanes


@attr.s(auto_attribs=True, kw_only=True)
class Lane(XmlElement):
    id_: int = attribute("id", int)
    type_: LaneType = attribute("type", LaneType)
    #: Whether the lane stays level rather than following superelevation.
    level: Optional[bool] = attribute("level", bool, required=False)
    link: Optional[LaneLink] = child("link", LaneLink)
    #: Width and border records, in document order.
    choice: List[LaneChoice] = children(LANE_CHOICES)
    road_mark: List[RoadMark] = children("roadMark", RoadMark)
    material: List[LaneMaterial] = children("material", LaneMaterial)
    speed: List[LaneSpeed] = children("speed", LaneSpeed)
    access: List[LaneAccess] = children("access", LaneAccess)
    height: List[LaneHeight] = children("height", LaneHeight)
    rule: List[LaneRule] = children("rule", LaneRule)
    additional_data: AdditionalData = additional_data()

    @property
    def widths(self):
        return [entry for entry in self.choice if isinstance(entry, Width)]

    @property
    def borders(self):
        return [entry for entry in self.choice if isinstance(entry, Border)]


@attr.s(auto_attribs=True, kw_only=True)
class Left(XmlElement):
    lane: Sequence1[Lane] = children("lane", Lane, non_empty=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Center(XmlElement):
    lane: Sequence1[Lane] = children("lane", Lane, non_empty=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Right(XmlElement):
    lane: Sequence1[Lane] = children("lane", Lane, non_empty=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class LaneSection(XmlElement):
    s: Length = attribute("s", Length)
    #: Whether the section applies to one side of the road only.
    single_side: Optional[bool] = attribute("singleSide", bool, required=False)
    left: Optional[Left] = child("left", Left)
    center: Center = child("center", Center, required=True)
    right: Optional[Right] = child("right", Right)
    additional_data: AdditionalData = additional_data()

    def lanes(self):
        """All lanes of the section, from left to right."""
        result = []
        for group in (self.left, self.center, self.right):
            if group is not None:
                result.extend(group.lane)
        return result


@attr.s(auto_attribs=True, kw_only=True)
class Lanes(XmlElement):
    lane_offset: List[LaneOffset] = children("laneOffset", LaneOffset)
    lane_section: Sequence1[LaneSection] = children(
        "laneSection", LaneSection, non_empty=True
    )
    additional_data: AdditionalData = additional_data()
