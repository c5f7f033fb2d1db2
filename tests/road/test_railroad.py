import pytest

from opendrive.common import ElementDir
from opendrive.core.errors import ElementMissing
from opendrive.core.units import Length
from opendrive.road.railroad import (
    Railroad,
    SegmentSide,
    Station,
    StationType,
    SwitchPosition,
)
from tests.utils import document, parseDocument, parseElement

SWITCH = """
<railroad>
    <switch name="W1" id="10" position="dynamic">
        <mainTrack id="1" s="20.0" dir="+"/>
        <sideTrack id="2" s="0.0" dir="-"/>
        <partner id="11"/>
    </switch>
</railroad>
"""


def test_switch():
    railroad = parseElement(Railroad, SWITCH)
    (switch,) = railroad.switch
    assert switch.position is SwitchPosition.DYNAMIC
    assert switch.main_track.s == Length(20.0)
    assert switch.side_track.dir is ElementDir.MINUS
    assert switch.partner.id_ == "11"
    assert switch.partner.name is None


def test_switch_requires_both_tracks():
    with pytest.raises(ElementMissing, match="sideTrack"):
        parseElement(Railroad, SWITCH.replace('<sideTrack id="2" s="0.0" dir="-"/>', ""))


def test_station():
    network = parseDocument(
        document(
            """
            <station name="Hauptbahnhof" id="100" type="large">
                <platform id="1">
                    <segment roadId="5" sStart="0" sEnd="50" side="left"/>
                    <segment roadId="6" sStart="0" sEnd="20" side="right"/>
                </platform>
            </station>
            """
        )
    )
    (station,) = network.station
    assert station.type_ is StationType.LARGE
    (platform,) = station.platform
    assert [segment.road_id for segment in platform.segment] == ["5", "6"]
    assert platform.segment[1].side is SegmentSide.RIGHT


def test_station_requires_platform():
    with pytest.raises(ElementMissing, match="platform"):
        parseElement(Station, '<station name="S" id="1"/>')
