"""Every enumeration accepts exactly the canonical spellings of its variants."""

import pytest

from opendrive import common, junction, signals
from opendrive.core import additional_data
from opendrive.core.enums import StringEnum
from opendrive.core.errors import InvalidEnumValue
from opendrive.lane import lanes, road_mark
from opendrive.objects import markings, objects, outlines
from opendrive.road import geometry, railroad, road, surface

modules = (
    additional_data,
    common,
    geometry,
    junction,
    lanes,
    markings,
    objects,
    outlines,
    railroad,
    road,
    road_mark,
    signals,
    surface,
)

enums = sorted(
    {
        value
        for module in modules
        for value in vars(module).values()
        if isinstance(value, type)
        and issubclass(value, StringEnum)
        and value is not StringEnum
    },
    key=lambda cls: cls.__qualname__,
)


@pytest.mark.parametrize("cls", enums, ids=lambda cls: cls.__name__)
def test_canonical_spellings(cls):
    for member in cls:
        assert cls.from_xml(member.to_xml()) is member
        assert str(member) == member.value


@pytest.mark.parametrize("cls", enums, ids=lambda cls: cls.__name__)
def test_other_spellings_rejected(cls):
    spellings = {member.value for member in cls}
    candidates = ["", "bogus", " " + next(iter(cls)).value]
    for member in cls:
        candidates.append(member.value.upper())
        candidates.append(member.value.capitalize())
    for candidate in candidates:
        if candidate in spellings:
            continue
        with pytest.raises(InvalidEnumValue) as info:
            cls.from_xml(candidate)
        assert info.value.value == candidate
        assert info.value.type_ == cls.__name__


def test_lane_type_is_case_sensitive():
    assert common.LaneType.from_xml("driving") is common.LaneType.DRIVING
    with pytest.raises(InvalidEnumValue, match="Driving"):
        common.LaneType.from_xml("Driving")
    assert common.LaneType.from_xml("HOV") is common.LaneType.HOV


def test_arbitrary_member(rng):
    assert common.RoadMarkColor.arbitrary(rng) in common.RoadMarkColor
