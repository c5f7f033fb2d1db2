"""Writing a tree and parsing it back gives the same tree."""

import pytest

from opendrive import OpenDrive
from opendrive.core.arbitrary import arbitrary
from opendrive.core.header import Header
from opendrive.junction import Junction
from opendrive.lane.lanes import Lane
from opendrive.objects.objects import Objects
from opendrive.road.road import Road
from opendrive.signals import Signals
from tests.utils import document, elementClasses, road, roundTrip, roundTripElement


@pytest.mark.parametrize(
    "cls,name",
    [
        (Header, "header"),
        (Road, "road"),
        (Lane, "lane"),
        (Objects, "objects"),
        (Signals, "signals"),
        (Junction, "junction"),
    ],
)
def test_elements(cls, name, rng):
    for _ in range(20):
        value = arbitrary(cls, rng)
        assert roundTripElement(cls, name, value) == value


@pytest.mark.parametrize("cls", elementClasses(), ids=lambda cls: cls.__name__)
def test_every_element_class(cls, rng):
    for _ in range(5):
        value = arbitrary(cls, rng, depth=2)
        assert roundTripElement(cls, "element", value) == value


@pytest.mark.slow
def test_documents(rng):
    for _ in range(30):
        network = arbitrary(OpenDrive, rng)
        assert roundTrip(network) == network


@pytest.mark.slow
def test_pretty_documents(rng):
    for _ in range(100):
        network = arbitrary(OpenDrive, rng, depth=4)
        assert roundTrip(network, pretty=True) == network


def test_parse_is_idempotent():
    text = document(
        road(
            """
            <type s="0" type="town"><speed max="no limit"/></type>
            <objects><object id="1" s="0.1" t="0.2" zOffset="0" dynamic="YES"/></objects>
            """
        )
    )
    network = OpenDrive.from_xml_str(text)
    once = network.to_xml_string()
    assert OpenDrive.from_xml_str(once) == network
    assert OpenDrive.from_xml_str(once).to_xml_string() == once
