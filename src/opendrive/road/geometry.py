"""Reference line geometry.

The plan view of a road is a sequence of geometry records, each starting at
``(x, y)`` with heading ``hdg`` at reference-line coordinate ``s`` and covering
``length`` metres. The shape of each piece is one of the variants `Line`,
`Spiral`, `Arc`, `Poly3`, or `ParamPoly3`.
"""

from typing import Union

import attr

from opendrive.core.additional_data import AdditionalData
from opendrive.core.enums import StringEnum
from opendrive.core.model import XmlElement, additional_data, attribute, child, children
from opendrive.core.sequences import Sequence1
from opendrive.core.units import Angle, Curvature, Length


@attr.s(auto_attribs=True, kw_only=True)
class Line(XmlElement):
    """A straight line."""

    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Spiral(XmlElement):
    """An Euler spiral (clothoid), with linearly varying curvature."""

    curv_start: Curvature = attribute("curvStart", Curvature)
    curv_end: Curvature = attribute("curvEnd", Curvature)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Arc(XmlElement):
    """A circular arc of constant curvature."""

    curvature: Curvature = attribute("curvature", Curvature)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class Poly3(XmlElement):
    """A cubic polynomial ``v(u) = a + b*u + c*u**2 + d*u**3`` in local coordinates.

    Deprecated in OpenDRIVE 1.6 in favour of `ParamPoly3`.
    """

    a: float = attribute("a", float)
    b: float = attribute("b", float)
    c: float = attribute("c", float)
    d: float = attribute("d", float)
    additional_data: AdditionalData = additional_data()


class ParamPoly3Range(StringEnum):
    """Range of the parameter ``p`` of a `ParamPoly3`."""

    #: ``p`` ranges over ``[0, length]``.
    ARC_LENGTH = "arcLength"
    #: ``p`` ranges over ``[0, 1]``.
    NORMALIZED = "normalized"


@attr.s(auto_attribs=True, kw_only=True)
class ParamPoly3(XmlElement):
    """Parametric cubic curve ``(u(p), v(p))`` in local coordinates."""

    a_u: float = attribute("aU", float)
    b_u: float = attribute("bU", float)
    c_u: float = attribute("cU", float)
    d_u: float = attribute("dU", float)
    a_v: float = attribute("aV", float)
    b_v: float = attribute("bV", float)
    c_v: float = attribute("cV", float)
    d_v: float = attribute("dV", float)
    p_range: ParamPoly3Range = attribute("pRange", ParamPoly3Range)
    additional_data: AdditionalData = additional_data()


GeometryType = Union[Line, Spiral, Arc, Poly3, ParamPoly3]

GEOMETRY_TYPES = {
    "line": Line,
    "spiral": Spiral,
    "arc": Arc,
    "poly3": Poly3,
    "paramPoly3": ParamPoly3,
}


@attr.s(auto_attribs=True, kw_only=True)
class Geometry(XmlElement):
    s: Length = attribute("s", Length)
    x: Length = attribute("x", Length)
    y: Length = attribute("y", Length)
    hdg: Angle = attribute("hdg", Angle)
    length: Length = attribute("length", Length)
    #: The shape of this piece.
    type_: GeometryType = child(GEOMETRY_TYPES, required=True)
    additional_data: AdditionalData = additional_data()


@attr.s(auto_attribs=True, kw_only=True)
class PlanView(XmlElement):
    geometry: Sequence1[Geometry] = children("geometry", Geometry, non_empty=True)
    additional_data: AdditionalData = additional_data()
