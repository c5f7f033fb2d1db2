"""Enumerations and value types shared by several parts of the schema."""

import string
from typing import Optional

import attr

from opendrive.core.enums import StringEnum
from opendrive.core.errors import InvalidEnumValue
from opendrive.core.values import arbitrary_float, format_float, parse_float

## Topology


class ContactPoint(StringEnum):
    START = "start"
    END = "end"


class ElementDir(StringEnum):
    PLUS = "+"
    MINUS = "-"


class Orientation(StringEnum):
    """Validity of an object or signal with respect to the road direction."""

    PLUS = "+"
    MINUS = "-"
    NONE = "none"


## Units


class DistanceUnit(StringEnum):
    METRE = "m"
    KILOMETRE = "km"
    FOOT = "ft"
    MILE = "mile"


class SpeedUnit(StringEnum):
    METRES_PER_SECOND = "m/s"
    MILES_PER_HOUR = "mph"
    KILOMETRES_PER_HOUR = "km/h"


class MassUnit(StringEnum):
    KILOGRAM = "kg"
    TON = "t"


class SlopeUnit(StringEnum):
    PERCENT = "%"


class Unit(StringEnum):
    """Any unit allowed for signal values."""

    METRE = "m"
    KILOMETRE = "km"
    FOOT = "ft"
    MILE = "mile"
    METRES_PER_SECOND = "m/s"
    MILES_PER_HOUR = "mph"
    KILOMETRES_PER_HOUR = "km/h"
    KILOGRAM = "kg"
    TON = "t"
    PERCENT = "%"

    @property
    def kind(self):
        """Which of `DistanceUnit`, `SpeedUnit`, `MassUnit`, `SlopeUnit` this is."""
        for family in (DistanceUnit, SpeedUnit, MassUnit, SlopeUnit):
            if self.value in family._value2member_map_:
                return family
        raise AssertionError(self)


## Lanes and markings


class LaneType(StringEnum):
    SHOULDER = "shoulder"
    BORDER = "border"
    DRIVING = "driving"
    STOP = "stop"
    NONE = "none"
    RESTRICTED = "restricted"
    PARKING = "parking"
    MEDIAN = "median"
    BIKING = "biking"
    SIDEWALK = "sidewalk"
    CURB = "curb"
    EXIT = "exit"
    ENTRY = "entry"
    ON_RAMP = "onRamp"
    OFF_RAMP = "offRamp"
    CONNECTING_RAMP = "connectingRamp"
    BIDIRECTIONAL = "bidirectional"
    SPECIAL1 = "special1"
    SPECIAL2 = "special2"
    SPECIAL3 = "special3"
    ROAD_WORKS = "roadWorks"
    TRAM = "tram"
    RAIL = "rail"
    BUS = "bus"
    TAXI = "taxi"
    HOV = "HOV"
    MWY_ENTRY = "mwyEntry"
    MWY_EXIT = "mwyExit"


class RoadMarkColor(StringEnum):
    STANDARD = "standard"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"
    ORANGE = "orange"
    VIOLET = "violet"


class RoadMarkWeight(StringEnum):
    STANDARD = "standard"
    BOLD = "bold"


## Value types


_DEPRECATED_COUNTRIES = (
    "OpenDRIVE",
    "Austria",
    "Brazil",
    "China",
    "France",
    "Germany",
    "Italy",
    "Switzerland",
)


@attr.s(frozen=True, slots=True)
class CountryCode:
    """A country code: ISO 3166-1 alpha-2 or alpha-3, or a deprecated name.

    The deprecated names are those of OpenDRIVE 1.4 (``Germany``, ``OpenDRIVE``,
    etc.); ``USA`` is read as an alpha-3 code.
    """

    code: str = attr.ib()

    @property
    def is_alpha2(self):
        return len(self.code) == 2

    @property
    def is_alpha3(self):
        return len(self.code) == 3

    @property
    def is_deprecated(self):
        return self.code in _DEPRECATED_COUNTRIES

    @classmethod
    def from_xml(cls, text):
        if len(text) in (2, 3) and all(c in string.ascii_letters for c in text):
            return cls(text)
        if text in _DEPRECATED_COUNTRIES:
            return cls(text)
        raise InvalidEnumValue(cls.__name__, text)

    def to_xml(self):
        return self.code

    @classmethod
    def arbitrary(cls, rng):
        if rng.random() < 0.25:
            return cls(rng.choice(_DEPRECATED_COUNTRIES))
        length = rng.choice((2, 3))
        return cls("".join(rng.choice(string.ascii_uppercase) for _ in range(length)))


@attr.s(frozen=True, slots=True)
class MaxSpeed:
    """A speed limit: a number, or one of ``no limit`` and ``undefined``."""

    #: The limit, or `None` for the special values.
    limit: Optional[float] = attr.ib(default=None)
    #: ``"no limit"`` or ``"undefined"`` if `limit` is `None`.
    special: Optional[str] = attr.ib(default=None)

    NO_LIMIT_TEXT = "no limit"
    UNDEFINED_TEXT = "undefined"

    @classmethod
    def of(cls, limit):
        return cls(limit=float(limit))

    @classmethod
    def no_limit(cls):
        return cls(special=cls.NO_LIMIT_TEXT)

    @classmethod
    def undefined(cls):
        return cls(special=cls.UNDEFINED_TEXT)

    @classmethod
    def from_xml(cls, text):
        lowered = text.strip().lower()
        if lowered == cls.NO_LIMIT_TEXT:
            return cls.no_limit()
        if lowered == cls.UNDEFINED_TEXT:
            return cls.undefined()
        try:
            return cls.of(parse_float(text))
        except ValueError:
            raise InvalidEnumValue(cls.__name__, text) from None

    def to_xml(self):
        if self.limit is None:
            return self.special or self.UNDEFINED_TEXT
        return format_float(self.limit)

    @classmethod
    def arbitrary(cls, rng):
        choice = rng.randrange(3)
        if choice == 0:
            return cls.no_limit()
        if choice == 1:
            return cls.undefined()
        return cls.of(arbitrary_float(rng))
