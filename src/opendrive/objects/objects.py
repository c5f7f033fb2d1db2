"""Objects placed along roads, and references to them.

An `Object` is located by road coordinates ``(s, t)`` and a height offset.
Its extent is either a box (``width``/``length``/``height``) or a cylinder
(``radius``/``height``), optionally refined by outlines.
"""

from typing import List, Optional

import attr

from opendrive.common import Orientation
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, child, children
from opendrive.core.units import Angle, Length
from opendrive.core.values import YES_NO
from opendrive.objects.markings import Borders, Markings
from opendrive.objects.outlines import Outline, Outlines


class ObjectType(StringEnum):
    NONE = "none"
    OBSTACLE = "obstacle"
    CAR = "car"
    POLE = "pole"
    TREE = "tree"
    VEGETATION = "vegetation"
    BARRIER = "barrier"
    BUILDING = "building"
    PARKING_SPACE = "parkingSpace"
    PATCH = "patch"
    RAILING = "railing"
    TRAFFIC_ISLAND = "trafficIsland"
    CROSSWALK = "crosswalk"
    STREET_LAMP = "streetLamp"
    GANTRY = "gantry"
    SOUND_BARRIER = "soundBarrier"
    VAN = "van"
    BUS = "bus"
    TRAILER = "trailer"
    BIKE = "bike"
    MOTORBIKE = "motorbike"
    TRAM = "tram"
    TRAIN = "train"
    PEDESTRIAN = "pedestrian"
    WIND = "wind"
    ROAD_MARK = "roadMark"


class ParkingSpaceAccess(StringEnum):
    ALL = "all"
    CAR = "car"
    WOMEN = "women"
    HANDICAPPED = "handicapped"
    BUS = "bus"
    TRUCK = "truck"
    ELECTRIC = "electric"
    RESIDENTS = "residents"


class TunnelType(StringEnum):
    STANDARD = "standard"
    UNDERPASS = "underpass"


class BridgeType(StringEnum):
    CONCRETE = "concrete"
    STEEL = "steel"
    BRICK = "brick"
    WOOD = "wood"


## Object details


@attr.s(auto_attribs=True, kw_only=True)
class LaneValidity(XmlElement):
    """Restricts validity to the lanes with ids in ``[fromLane, toLane]``."""

    from_lane: int = attribute("fromLane", int)
    to_lane: int = attribute("toLane", int)


@attr.s(auto_attribs=True, kw_only=True)
class Repeat(XmlElement):
    """Repetition of an object along the road.

    Attributes given here override those of the repeated object, possibly
    varying linearly between their start and end values.
    """

    s: Length = attribute("s", Length)
    length: Length = attribute("length", Length)
    distance: Length = attribute("distance", Length)
    t_start: Length = attribute("tStart", Length)
    t_end: Length = attribute("tEnd", Length)
    height_start: Length = attribute("heightStart", Length)
    height_end: Length = attribute("heightEnd", Length)
    z_offset_start: Optional[Length] = attribute("zOffsetStart", Length, required=False)
    z_offset_end: Optional[Length] = attribute("zOffsetEnd", Length, required=False)
    width_start: Optional[Length] = attribute("widthStart", Length, required=False)
    width_end: Optional[Length] = attribute("widthEnd", Length, required=False)
    length_start: Optional[Length] = attribute("lengthStart", Length, required=False)
    length_end: Optional[Length] = attribute("lengthEnd", Length, required=False)
    radius_start: Optional[Length] = attribute("radiusStart", Length, required=False)
    radius_end: Optional[Length] = attribute("radiusEnd", Length, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class ObjectMaterial(XmlElement):
    surface: Optional[str] = attribute("surface", required=False)
    friction: Optional[float] = attribute("friction", float, required=False)
    roughness: Optional[float] = attribute("roughness", float, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class ParkingSpace(XmlElement):
    access: ParkingSpaceAccess = attribute("access", ParkingSpaceAccess)
    restrictions: Optional[str] = attribute("restrictions", required=False)


@attr.s(auto_attribs=True, kw_only=True)
class ObjectCrg(XmlElement):
    """OpenCRG data describing the surface of an object."""

    file: Optional[str] = attribute("file", required=False)
    hide_road_surface_crg: Optional[bool] = attribute(
        "hideRoadSurfaceCRG", bool, required=False
    )
    z_scale: Optional[float] = attribute("zScale", float, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class ObjectSurface(XmlElement):
    crg: Optional[ObjectCrg] = child("CRG", ObjectCrg)
    additional_data: AdditionalData = additional_data()


## Objects


@attr.s(auto_attribs=True, kw_only=True)
class Object(XmlElement):
    type_: Optional[ObjectType] = attribute("type", ObjectType, required=False)
    subtype: Optional[str] = attribute("subtype", required=False)
    #: Whether the object is dynamic; written as ``yes``/``no``.
    dynamic: Optional[bool] = attribute("dynamic", YES_NO, required=False)
    id_: str = attribute("id")
    name: Optional[str] = attribute("name", required=False)
    perp_to_road: Optional[bool] = attribute("perpToRoad", bool, required=False)
    s: Length = attribute("s", Length)
    t: Length = attribute("t", Length)
    z_offset: Length = attribute("zOffset", Length)
    valid_length: Optional[Length] = attribute("validLength", Length, required=False)
    orientation: Optional[Orientation] = attribute(
        "orientation", Orientation, required=False
    )
    hdg: Optional[Angle] = attribute("hdg", Angle, required=False)
    pitch: Optional[Angle] = attribute("pitch", Angle, required=False)
    roll: Optional[Angle] = attribute("roll", Angle, required=False)
    height: Optional[Length] = attribute("height", Length, required=False)
    length: Optional[Length] = attribute("length", Length, required=False)
    width: Optional[Length] = attribute("width", Length, required=False)
    radius: Optional[Length] = attribute("radius", Length, required=False)
    repeat: List[Repeat] = children("repeat", Repeat)
    #: Single outline (deprecated in favour of `outlines`).
    outline: Optional[Outline] = child("outline", Outline)
    outlines: Optional[Outlines] = child("outlines", Outlines)
    material: List[ObjectMaterial] = children("material", ObjectMaterial)
    validity: List[LaneValidity] = children("validity", LaneValidity)
    parking_space: Optional[ParkingSpace] = child("parkingSpace", ParkingSpace)
    markings: Optional[Markings] = child("markings", Markings)
    borders: Optional[Borders] = child("borders", Borders)
    surface: Optional[ObjectSurface] = child("surface", ObjectSurface)
    additional_data: AdditionalData = additional_data()

    @property
    def is_cylinder(self):
        return self.radius is not None


@attr.s(auto_attribs=True, kw_only=True)
class ObjectReference(XmlElement):
    """Reference to an object defined on another road."""

    s: Length = attribute("s", Length)
    t: Length = attribute("t", Length)
    id_: str = attribute("id")
    z_offset: Optional[Length] = attribute("zOffset", Length, required=False)
    valid_length: Optional[Length] = attribute("validLength", Length, required=False)
    orientation: Orientation = attribute("orientation", Orientation)
    validity: List[LaneValidity] = children("validity", LaneValidity)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Tunnel(XmlElement):
    s: Length = attribute("s", Length)
    length: Length = attribute("length", Length)
    name: Optional[str] = attribute("name", required=False)
    id_: str = attribute("id")
    type_: TunnelType = attribute("type", TunnelType)
    #: Degree of artificial lighting, from 0.0 to 1.0.
    lighting: Optional[float] = attribute("lighting", float, required=False)
    #: Degree of daylight intrusion, from 0.0 to 1.0.
    daylight: Optional[float] = attribute("daylight", float, required=False)
    validity: List[LaneValidity] = children("validity", LaneValidity)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Bridge(XmlElement):
    s: Length = attribute("s", Length)
    length: Length = attribute("length", Length)
    name: Optional[str] = attribute("name", required=False)
    id_: str = attribute("id")
    type_: BridgeType = attribute("type", BridgeType)
    validity: List[LaneValidity] = children("validity", LaneValidity)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Objects(XmlElement):
    object_: List[Object] = children("object", Object)
    object_reference: List[ObjectReference] = children(
        "objectReference", ObjectReference
    )
    tunnel: List[Tunnel] = children("tunnel", Tunnel)
    bridge: List[Bridge] = children("bridge", Bridge)
    additional_data: AdditionalData = additional_data()
