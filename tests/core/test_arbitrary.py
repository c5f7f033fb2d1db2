from opendrive import OpenDrive
from opendrive.core.additional_data import AdditionalData, Element, UserData
from opendrive.core.arbitrary import arbitrary, arbitrary_element
from opendrive.core.sequences import Sequence1
from opendrive.lane.lanes import Lanes
from opendrive.road.geometry import GEOMETRY_TYPES, Geometry


def depthOf(element):
    return 1 + max((depthOf(child) for child in element.children), default=0)


def test_required_content_is_present(rng):
    for _ in range(20):
        lanes = arbitrary(Lanes, rng, depth=0)
        assert isinstance(lanes.lane_section, Sequence1)
        assert lanes.lane_section.head.center.lane.head is not None
        assert lanes.lane_offset == []


def test_variants(rng):
    kinds = {type(arbitrary(Geometry, rng).type_) for _ in range(100)}
    assert kinds == set(GEOMETRY_TYPES.values())


def test_depth_is_bounded(rng):
    for _ in range(50):
        assert depthOf(arbitrary_element(rng, depth=3)) <= 4


def test_generic_elements(rng):
    for _ in range(50):
        element = arbitrary(Element, rng)
        assert element.name.startswith("vendor")
        assert all(name.isalpha() for name in element.attributes)


def test_special_classes(rng):
    assert isinstance(arbitrary(AdditionalData, rng), AdditionalData)
    assert isinstance(arbitrary(UserData, rng), UserData)


def test_reproducible(rng):
    state = rng.getstate()
    first = arbitrary(OpenDrive, rng, depth=3)
    rng.setstate(state)
    assert arbitrary(OpenDrive, rng, depth=3) == first
