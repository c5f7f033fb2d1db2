"""Junctions and junction groups.

A junction connects incoming roads to connecting roads lane by lane. Roads and
lanes are referred to by id; nothing here resolves those references.
"""

from typing import List, Optional

import attr

from opendrive.common import ContactPoint, ElementDir, Orientation
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, child, children
from opendrive.core.sequences import Sequence1
from opendrive.core.units import Length
from opendrive.core.values import UNSIGNED


class JunctionType(StringEnum):
    DEFAULT = "default"
    VIRTUAL = "virtual"
    DIRECT = "direct"


class ConnectionType(StringEnum):
    DEFAULT = "default"
    VIRTUAL = "virtual"


class JunctionGroupType(StringEnum):
    ROUNDABOUT = "roundabout"
    UNKNOWN = "unknown"


class JunctionCrgMode(StringEnum):
    GLOBAL = "global"


class JunctionCrgPurpose(StringEnum):
    ELEVATION = "elevation"
    FRICTION = "friction"


## Connections


@attr.s(auto_attribs=True, kw_only=True)
class JunctionPredecessorSuccessor(XmlElement):
    """Road linked at either end of a virtual connection."""

    element_type: str = attribute("elementType")
    element_id: str = attribute("elementId")
    element_s: Length = attribute("elementS", Length)
    element_dir: ElementDir = attribute("elementDir", ElementDir)


@attr.s(auto_attribs=True, kw_only=True)
class JunctionLaneLink(XmlElement):
    """Maps a lane of the incoming road to a lane of the connecting road."""

    from_: int = attribute("from", int)
    to: int = attribute("to", int)


@attr.s(auto_attribs=True, kw_only=True)
class Connection(XmlElement):
    id_: str = attribute("id")
    type_: Optional[ConnectionType] = attribute("type", ConnectionType, required=False)
    incoming_road: Optional[str] = attribute("incomingRoad", required=False)
    connecting_road: Optional[str] = attribute("connectingRoad", required=False)
    #: For direct junctions: the road linked directly to the incoming road.
    linked_road: Optional[str] = attribute("linkedRoad", required=False)
    contact_point: Optional[ContactPoint] = attribute(
        "contactPoint", ContactPoint, required=False
    )
    predecessor: Optional[JunctionPredecessorSuccessor] = child(
        "predecessor", JunctionPredecessorSuccessor
    )
    successor: Optional[JunctionPredecessorSuccessor] = child(
        "successor", JunctionPredecessorSuccessor
    )
    lane_link: List[JunctionLaneLink] = children("laneLink", JunctionLaneLink)
    additional_data: AdditionalData = additional_data()


## Other junction content


@attr.s(auto_attribs=True, kw_only=True)
class Priority(XmlElement):
    """Priority of one connecting road over another."""

    high: Optional[str] = attribute("high", required=False)
    low: Optional[str] = attribute("low", required=False)


@attr.s(auto_attribs=True, kw_only=True)
class JunctionController(XmlElement):
    """Reference to a signal controller acting in the junction."""

    id_: str = attribute("id")
    type_: Optional[str] = attribute("type", required=False)
    sequence: Optional[int] = attribute("sequence", UNSIGNED, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class JunctionCrg(XmlElement):
    file: str = attribute("file")
    mode: JunctionCrgMode = attribute("mode", JunctionCrgMode)
    purpose: Optional[JunctionCrgPurpose] = attribute(
        "purpose", JunctionCrgPurpose, required=False
    )
    z_offset: Optional[Length] = attribute("zOffset", Length, required=False)
    z_scale: Optional[float] = attribute("zScale", float, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class JunctionSurface(XmlElement):
    crg: List[JunctionCrg] = children("CRG", JunctionCrg)
    additional_data: AdditionalData = additional_data()


## Junctions


@attr.s(auto_attribs=True, kw_only=True)
class Junction(XmlElement):
    id_: str = attribute("id")
    name: Optional[str] = attribute("name", required=False)
    type_: Optional[JunctionType] = attribute("type", JunctionType, required=False)
    #: For virtual junctions: the road the junction lies on.
    main_road: Optional[str] = attribute("mainRoad", required=False)
    s_start: Optional[Length] = attribute("sStart", Length, required=False)
    s_end: Optional[Length] = attribute("sEnd", Length, required=False)
    orientation: Optional[Orientation] = attribute(
        "orientation", Orientation, required=False
    )
    connection: Sequence1[Connection] = children("connection", Connection, non_empty=True)
    priority: List[Priority] = children("priority", Priority)
    controller: List[JunctionController] = children("controller", JunctionController)
    surface: Optional[JunctionSurface] = child("surface", JunctionSurface)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class JunctionReference(XmlElement):
    junction: str = attribute("junction")


@attr.s(auto_attribs=True, kw_only=True)
class JunctionGroup(XmlElement):
    """A group of junctions forming a larger structure, e.g. a roundabout."""

    id_: str = attribute("id")
    name: Optional[str] = attribute("name", required=False)
    type_: JunctionGroupType = attribute("type", JunctionGroupType)
    junction_reference: Sequence1[JunctionReference] = children(
        "junctionReference", JunctionReference, non_empty=True
    )
    additional_data: AdditionalData = additional_data()
