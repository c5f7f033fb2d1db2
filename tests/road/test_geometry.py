import pytest

from opendrive.core.errors import (
    ChildMissing,
    ElementMissing,
    InvalidEnumValue,
    OpenDriveWriteError,
)
from opendrive.core.model import XmlElement
from opendrive.core.units import Angle, Curvature, Length
from opendrive.road.geometry import (
    Arc,
    Geometry,
    Line,
    ParamPoly3,
    ParamPoly3Range,
    PlanView,
    Poly3,
    Spiral,
)
from tests.utils import elementToXml, parseElement

GEOMETRY = '<geometry s="0" x="1" y="2" hdg="0.5" length="10">{}</geometry>'


@pytest.mark.parametrize(
    "shape,expected",
    [
        ("<line/>", Line()),
        (
            '<spiral curvStart="0" curvEnd="0.01"/>',
            Spiral(curv_start=Curvature(0.0), curv_end=Curvature(0.01)),
        ),
        ('<arc curvature="-0.02"/>', Arc(curvature=Curvature(-0.02))),
        ('<poly3 a="0" b="1" c="2" d="3"/>', Poly3(a=0.0, b=1.0, c=2.0, d=3.0)),
        (
            '<paramPoly3 aU="0" bU="1" cU="0" dU="0" aV="0" bV="0" cV="0.5" dV="0" '
            'pRange="normalized"/>',
            ParamPoly3(
                a_u=0.0,
                b_u=1.0,
                c_u=0.0,
                d_u=0.0,
                a_v=0.0,
                b_v=0.0,
                c_v=0.5,
                d_v=0.0,
                p_range=ParamPoly3Range.NORMALIZED,
            ),
        ),
    ],
)
def test_shapes(shape, expected):
    geometry = parseElement(Geometry, GEOMETRY.format(shape))
    assert geometry.type_ == expected
    assert geometry.x == Length(1.0)
    assert geometry.hdg == Angle(0.5)
    xml = elementToXml("geometry", geometry)
    assert parseElement(Geometry, xml) == geometry


def test_shape_element_name_follows_variant():
    geometry = Geometry(
        s=Length(0),
        x=Length(0),
        y=Length(0),
        hdg=Angle(0),
        length=Length(1),
        type_=Arc(curvature=Curvature(0.1)),
    )
    xml = elementToXml("geometry", geometry)
    assert '<arc curvature="1.0000000000000001e-01" />' in xml


def test_missing_shape():
    with pytest.raises(ChildMissing) as info:
        parseElement(Geometry, GEOMETRY.format(""))
    assert info.value.type_ == "Geometry"
    assert "paramPoly3" in info.value.alternatives
    assert info.value.path == "geometry"


def test_shape_of_wrong_type_cannot_be_written():
    class Clothoid(XmlElement):
        pass

    geometry = Geometry(
        s=Length(0), x=Length(0), y=Length(0), hdg=Angle(0), length=Length(1), type_=Clothoid()
    )
    with pytest.raises(OpenDriveWriteError, match="Clothoid"):
        elementToXml("geometry", geometry)


def test_bad_parameter_range():
    with pytest.raises(InvalidEnumValue):
        parseElement(
            Geometry,
            GEOMETRY.format(
                '<paramPoly3 aU="0" bU="1" cU="0" dU="0" aV="0" bV="0" cV="0" dV="0" '
                'pRange="Normalized"/>'
            ),
        )


def test_plan_view_requires_geometry():
    with pytest.raises(ElementMissing, match="geometry"):
        parseElement(PlanView, "<planView/>")


def test_plan_view_keeps_order():
    planView = parseElement(
        PlanView,
        "<planView>"
        + GEOMETRY.format("<line/>")
        + GEOMETRY.format('<arc curvature="0.1"/>').replace('s="0"', 's="10"')
        + "</planView>",
    )
    assert [type(geometry.type_) for geometry in planView.geometry] == [Line, Arc]
    assert planView.geometry.tail[0].s == Length(10.0)
