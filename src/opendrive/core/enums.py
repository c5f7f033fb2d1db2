"""String enumerations.

Each member's value is its canonical XML spelling. Parsing is exact and
case-sensitive: ``"Driving"`` is not a spelling of ``LaneType.DRIVING``.
"""

import enum

from opendrive.core.errors import InvalidEnumValue


class StringEnum(enum.Enum):
    """Base class for enumerations spelled as attribute strings."""

    @classmethod
    def from_xml(cls, text):
        member = cls._value2member_map_.get(text)
        if member is None:
            raise InvalidEnumValue(cls.__name__, text)
        return member

    def to_xml(self):
        return self.value

    @classmethod
    def arbitrary(cls, rng):
        return rng.choice(list(cls))

    def __str__(self):
        return self.value
