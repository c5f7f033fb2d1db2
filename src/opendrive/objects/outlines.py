"""Object outlines.

An outline describes the shape of an object as a polygon of corners, given
either in road coordinates (`CornerRoad`) or in the object's local coordinates
(`CornerLocal`). Outlines normally use one kind throughout; the corners are kept
in document order either way.
"""

from typing import Optional, Union

import attr

from opendrive.common import LaneType
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, children
from opendrive.core.sequences import Sequence1
from opendrive.core.units import Length
from opendrive.core.values import UNSIGNED


class OutlineFillType(StringEnum):
    GRASS = "grass"
    CONCRETE = "concrete"
    COBBLE = "cobble"
    ASPHALT = "asphalt"
    PAVEMENT = "pavement"
    GRAVEL = "gravel"
    SOIL = "soil"


@attr.s(auto_attribs=True, kw_only=True)
class CornerRoad(XmlElement):
    """Corner given in road coordinates, with height above the road."""

    s: Length = attribute("s", Length)
    t: Length = attribute("t", Length)
    dz: Length = attribute("dz", Length)
    height: Length = attribute("height", Length)
    id_: Optional[int] = attribute("id", UNSIGNED, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class CornerLocal(XmlElement):
    """Corner given in the local u/v/z coordinates of the object."""

    u: Length = attribute("u", Length)
    v: Length = attribute("v", Length)
    z: Length = attribute("z", Length)
    height: Length = attribute("height", Length)
    id_: Optional[int] = attribute("id", UNSIGNED, required=False)


Corner = Union[CornerRoad, CornerLocal]

CORNER_TYPES = {"cornerRoad": CornerRoad, "cornerLocal": CornerLocal}


@attr.s(auto_attribs=True, kw_only=True)
class Outline(XmlElement):
    id_: Optional[int] = attribute("id", UNSIGNED, required=False)
    fill_type: Optional[OutlineFillType] = attribute(
        "fillType", OutlineFillType, required=False
    )
    #: Whether this is the outer outline of the object.
    outer: Optional[bool] = attribute("outer", bool, required=False)
    closed: Optional[bool] = attribute("closed", bool, required=False)
    lane_type: Optional[LaneType] = attribute("laneType", LaneType, required=False)
    corner: Sequence1[Corner] = children(CORNER_TYPES, non_empty=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Outlines(XmlElement):
    outline: Sequence1[Outline] = children("outline", Outline, non_empty=True)
    additional_data: AdditionalData = additional_data()
