"""Dimensioned quantities.

Physical quantities appearing as attributes are wrapped in small value types
storing their magnitude in canonical SI units: `Length` (metres), `Angle`
(radians), and `Curvature` (radians per metre). Quantities of different kinds
never compare equal, even with identical magnitudes. No unit conversion takes
place when reading or writing XML.
"""

import attr

from opendrive.core.values import arbitrary_float, format_float, parse_float


@attr.s(frozen=True, slots=True, repr=False)
class Quantity:
    """A scalar magnitude tagged with a unit."""

    value: float = attr.ib(converter=float)

    unit = ""

    @classmethod
    def from_xml(cls, text):
        return cls(parse_float(text))

    def to_xml(self):
        return format_float(self.value)

    @classmethod
    def arbitrary(cls, rng):
        return cls(arbitrary_float(rng))

    def __float__(self):
        return self.value

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r} {self.unit})"


class Length(Quantity):
    unit = "m"

    @classmethod
    def from_metres(cls, metres):
        return cls(metres)

    @property
    def metres(self):
        return self.value


class Angle(Quantity):
    unit = "rad"

    @classmethod
    def from_radians(cls, radians):
        return cls(radians)

    @property
    def radians(self):
        return self.value


class Curvature(Quantity):
    unit = "rad/m"

    @classmethod
    def from_radians_per_metre(cls, curvature):
        return cls(curvature)

    @property
    def radians_per_metre(self):
        return self.value
