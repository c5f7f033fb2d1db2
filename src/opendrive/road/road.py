"""Roads."""

from typing import List, Optional

import attr

from opendrive.common import ContactPoint, CountryCode, ElementDir, MaxSpeed, SpeedUnit
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, child, children
from opendrive.core.units import Length
from opendrive.lane.lanes import Lanes
from opendrive.objects.objects import Objects
from opendrive.road.geometry import PlanView
from opendrive.road.profiles import ElevationProfile, LateralProfile
from opendrive.road.railroad import Railroad
from opendrive.road.surface import Surface
from opendrive.signals import Signals


class TrafficRule(StringEnum):
    RIGHT_HAND_TRAFFIC = "RHT"
    LEFT_HAND_TRAFFIC = "LHT"


class ElementType(StringEnum):
    """Kind of element a road is linked to."""

    ROAD = "road"
    JUNCTION = "junction"


class RoadTypeKind(StringEnum):
    UNKNOWN = "unknown"
    RURAL = "rural"
    MOTORWAY = "motorway"
    TOWN = "town"
    LOW_SPEED = "lowSpeed"
    PEDESTRIAN = "pedestrian"
    BICYCLE = "bicycle"
    TOWN_EXPRESSWAY = "townExpressway"
    TOWN_COLLECTOR = "townCollector"
    TOWN_ARTERIAL = "townArterial"
    TOWN_PRIVATE = "townPrivate"
    TOWN_LOCAL = "townLocal"
    TOWN_PLAY_STREET = "townPlayStreet"


## Links


@attr.s(auto_attribs=True, kw_only=True)
class RoadPredecessorSuccessor(XmlElement):
    """The road or junction at one end of a road.

    Roads are linked by ``contactPoint``; junctions of type ``virtual`` are
    linked by ``elementS`` and ``elementDir``.
    """

    element_type: Optional[ElementType] = attribute(
        "elementType", ElementType, required=False
    )
    element_id: str = attribute("elementId")
    contact_point: Optional[ContactPoint] = attribute(
        "contactPoint", ContactPoint, required=False
    )
    element_s: Optional[Length] = attribute("elementS", Length, required=False)
    element_dir: Optional[ElementDir] = attribute("elementDir", ElementDir, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class RoadLink(XmlElement):
    predecessor: Optional[RoadPredecessorSuccessor] = child(
        "predecessor", RoadPredecessorSuccessor
    )
    successor: Optional[RoadPredecessorSuccessor] = child(
        "successor", RoadPredecessorSuccessor
    )
    additional_data: AdditionalData = additional_data()


## Road types


@attr.s(auto_attribs=True, kw_only=True)
class RoadSpeed(XmlElement):
    """Speed limit for a road type; in m/s unless another unit is given."""

    max: MaxSpeed = attribute("max", MaxSpeed)
    unit: Optional[SpeedUnit] = attribute("unit", SpeedUnit, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class RoadType(XmlElement):
    """Kind of road from ``s`` onwards."""

    s: Length = attribute("s", Length)
    type_: RoadTypeKind = attribute("type", RoadTypeKind)
    country: Optional[CountryCode] = attribute("country", CountryCode, required=False)
    speed: Optional[RoadSpeed] = child("speed", RoadSpeed)
    additional_data: AdditionalData = additional_data()


## Roads


@attr.s(auto_attribs=True, kw_only=True)
class Road(XmlElement):
    name: Optional[str] = attribute("name", required=False)
    length: Length = attribute("length", Length)
    id_: str = attribute("id")
    #: Id of the junction the road belongs to, or ``-1``.
    junction: str = attribute("junction")
    rule: Optional[TrafficRule] = attribute("rule", TrafficRule, required=False)
    link: Optional[RoadLink] = child("link", RoadLink)
    type_: List[RoadType] = children("type", RoadType)
    plan_view: PlanView = child("planView", PlanView, required=True)
    elevation_profile: Optional[ElevationProfile] = child(
        "elevationProfile", ElevationProfile
    )
    lateral_profile: Optional[LateralProfile] = child("lateralProfile", LateralProfile)
    lanes: Lanes = child("lanes", Lanes, required=True)
    objects: Optional[Objects] = child("objects", Objects)
    signals: Optional[Signals] = child("signals", Signals)
    surface: Optional[Surface] = child("surface", Surface)
    railroad: Optional[Railroad] = child("railroad", Railroad)
    additional_data: AdditionalData = additional_data()

    @property
    def in_junction(self):
        return self.junction != "-1"
