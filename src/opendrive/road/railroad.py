"""Railroad switches and stations."""

from typing import List, Optional

import attr

from opendrive.common import ElementDir
from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, child, children
from opendrive.core.sequences import Sequence1
from opendrive.core.units import Length

## Switches


class SwitchPosition(StringEnum):
    DYNAMIC = "dynamic"
    STRAIGHT = "straight"
    TURN = "turn"


@attr.s(auto_attribs=True, kw_only=True)
class Track(XmlElement):
    """The track (road) on one side of a switch."""

    id_: str = attribute("id")
    s: Length = attribute("s", Length)
    dir: ElementDir = attribute("dir", ElementDir)


@attr.s(auto_attribs=True, kw_only=True)
class SwitchPartner(XmlElement):
    """The partner switch of a switch."""

    name: Optional[str] = attribute("name", required=False)
    id_: str = attribute("id")


@attr.s(auto_attribs=True, kw_only=True)
class Switch(XmlElement):
    name: str = attribute("name")
    id_: str = attribute("id")
    position: SwitchPosition = attribute("position", SwitchPosition)
    main_track: Track = child("mainTrack", Track, required=True)
    side_track: Track = child("sideTrack", Track, required=True)
    partner: Optional[SwitchPartner] = child("partner", SwitchPartner)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Railroad(XmlElement):
    switch: List[Switch] = children("switch", Switch)
    additional_data: AdditionalData = additional_data()


## Stations


class StationType(StringEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class SegmentSide(StringEnum):
    LEFT = "left"
    RIGHT = "right"


@attr.s(auto_attribs=True, kw_only=True)
class Segment(XmlElement):
    """Stretch of a road along which a platform lies."""

    road_id: str = attribute("roadId")
    s_start: Length = attribute("sStart", Length)
    s_end: Length = attribute("sEnd", Length)
    side: SegmentSide = attribute("side", SegmentSide)


@attr.s(auto_attribs=True, kw_only=True)
class Platform(XmlElement):
    name: Optional[str] = attribute("name", required=False)
    id_: str = attribute("id")
    segment: Sequence1[Segment] = children("segment", Segment, non_empty=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Station(XmlElement):
    name: str = attribute("name")
    id_: str = attribute("id")
    type_: Optional[StationType] = attribute("type", StationType, required=False)
    platform: Sequence1[Platform] = children("platform", Platform, non_empty=True)
    additional_data: AdditionalData = additional_data()
