"""Signals, signal references, and signal controllers."""

from typing import List, Optional, Union

import attr

from opendrive.common import CountryCode, Orientation, Unit
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, child, children
from opendrive.core.sequences import Sequence1
from opendrive.core.units import Angle, Length
from opendrive.core.values import UNSIGNED, YES_NO
from opendrive.objects.objects import LaneValidity

## Positions


@attr.s(auto_attribs=True, kw_only=True)
class PositionInertial(XmlElement):
    """Position of a signal in inertial coordinates."""

    x: Length = attribute("x", Length)
    y: Length = attribute("y", Length)
    z: Length = attribute("z", Length)
    hdg: Angle = attribute("hdg", Angle)
    pitch: Optional[Angle] = attribute("pitch", Angle, required=False)
    roll: Optional[Angle] = attribute("roll", Angle, required=False)


@attr.s(auto_attribs=True, kw_only=True)
class PositionRoad(XmlElement):
    """Position of a signal relative to another road."""

    road_id: str = attribute("roadId")
    s: Length = attribute("s", Length)
    t: Length = attribute("t", Length)
    z_offset: Length = attribute("zOffset", Length)
    h_offset: Angle = attribute("hOffset", Angle)
    pitch: Optional[Angle] = attribute("pitch", Angle, required=False)
    roll: Optional[Angle] = attribute("roll", Angle, required=False)


SignalPosition = Union[PositionInertial, PositionRoad]

POSITION_TYPES = {"positionInertial": PositionInertial, "positionRoad": PositionRoad}


## Signals


class ReferenceElementType(StringEnum):
    OBJECT = "object"
    SIGNAL = "signal"


@attr.s(auto_attribs=True, kw_only=True)
class Dependency(XmlElement):
    """Another signal controlled together with this one (e.g. a sign board)."""

    id_: str = attribute("id")
    type_: Optional[str] = attribute("type", required=False)


@attr.s(auto_attribs=True, kw_only=True)
class Reference(XmlElement):
    """Link from a signal to an object or another signal."""

    element_type: ReferenceElementType = attribute("elementType", ReferenceElementType)
    element_id: str = attribute("elementId")
    type_: Optional[str] = attribute("type", required=False)


@attr.s(auto_attribs=True, kw_only=True)
class Signal(XmlElement):
    s: Length = attribute("s", Length)
    t: Length = attribute("t", Length)
    id_: str = attribute("id")
    name: Optional[str] = attribute("name", required=False)
    #: Whether the signal is dynamic (e.g. a traffic light); written as ``yes``/``no``.
    dynamic: bool = attribute("dynamic", YES_NO)
    orientation: Orientation = attribute("orientation", Orientation)
    z_offset: Length = attribute("zOffset", Length)
    country: Optional[CountryCode] = attribute("country", CountryCode, required=False)
    country_revision: Optional[str] = attribute("countryRevision", required=False)
    type_: str = attribute("type")
    subtype: str = attribute("subtype")
    value: Optional[float] = attribute("value", float, required=False)
    unit: Optional[Unit] = attribute("unit", Unit, required=False)
    height: Optional[Length] = attribute("height", Length, required=False)
    width: Optional[Length] = attribute("width", Length, required=False)
    text: Optional[str] = attribute("text", required=False)
    h_offset: Optional[Angle] = attribute("hOffset", Angle, required=False)
    pitch: Optional[Angle] = attribute("pitch", Angle, required=False)
    roll: Optional[Angle] = attribute("roll", Angle, required=False)
    validity: List[LaneValidity] = children("validity", LaneValidity)
    dependency: List[Dependency] = children("dependency", Dependency)
    reference: List[Reference] = children("reference", Reference)
    #: Explicit position, overriding ``s``/``t`` if given.
    position: Optional[SignalPosition] = child(POSITION_TYPES)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class SignalReference(XmlElement):
    """Reference to a signal defined on another road."""

    s: Length = attribute("s", Length)
    t: Length = attribute("t", Length)
    id_: str = attribute("id")
    orientation: Orientation = attribute("orientation", Orientation)
    validity: List[LaneValidity] = children("validity", LaneValidity)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Signals(XmlElement):
    signal: List[Signal] = children("signal", Signal)
    signal_reference: List[SignalReference] = children(
        "signalReference", SignalReference
    )
    additional_data: AdditionalData = additional_data()


## Controllers


@attr.s(auto_attribs=True, kw_only=True)
class Control(XmlElement):
    signal_id: str = attribute("signalId")
    type_: Optional[str] = attribute("type", required=False)


@attr.s(auto_attribs=True, kw_only=True)
class Controller(XmlElement):
    """A group of signals switched together (e.g. the lights of a crossing)."""

    id_: str = attribute("id")
    name: Optional[str] = attribute("name", required=False)
    #: Order of evaluation among the controllers of a junction.
    sequence: Optional[int] = attribute("sequence", UNSIGNED, required=False)
    control: Sequence1[Control] = children("control", Control, non_empty=True)
    additional_data: AdditionalData = additional_data()
