"""Attribute value codecs.

A *codec* converts between the text of an XML attribute and a Python value.
The built-in codecs cover the primitive types used by OpenDRIVE; any class
providing ``from_xml``/``to_xml`` (string enumerations, dimensioned
quantities, and the other value types in `opendrive.common`) can be used as a
codec directly, see `codec_for`.

Floating-point values are always written in scientific notation with 17
significant digits, which is enough to round-trip every finite double.
"""

import math
import re
import string
import struct

import numpy

from opendrive.core.errors import ParseErrorKind

## Float formatting


def format_float(value):
    """Format a float in scientific notation, e.g. ``1.0000000000000000e+02``.

    The output always has a decimal point and a signed exponent, and parses back to
    the same double bit for bit. Infinities are written as ``inf``/``-inf``.
    """
    return numpy.format_float_scientific(float(value), precision=16, unique=False)


_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def parse_float(text):
    """Parse an XML Schema double; Python-only spellings such as ``1_0`` are rejected."""
    text = text.strip()
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError(text)
    return float(text)


def arbitrary_float(rng):
    """A random double drawn from its bit pattern, never NaN."""
    if rng.random() < 0.5:
        return rng.choice((0.0, -0.0, 1.0, -1.0, 0.5, 3.57, 1e-300, 1e300))
    while True:
        value = struct.unpack("<d", struct.pack("<Q", rng.getrandbits(64)))[0]
        if not math.isnan(value):
            return value


_TEXT_ALPHABET = string.ascii_letters + string.digits + " _-."


def arbitrary_text(rng, maxLength=8):
    length = rng.randint(0, maxLength)
    return "".join(rng.choice(_TEXT_ALPHABET) for _ in range(length))


## Codecs


class Codec:
    """Conversion between attribute text and a Python value.

    Subclasses implement `parse`, `format`, and `arbitrary`. A codec signals a
    malformed value by raising `ValueError`; the parse context turns this into a
    `ParseError` of the codec's **kind**.
    """

    kind = ParseErrorKind.FLOAT

    def parse(self, text):
        raise NotImplementedError

    def format(self, value):
        raise NotImplementedError

    def arbitrary(self, rng):
        raise NotImplementedError


class IntegerCodec(Codec):
    kind = ParseErrorKind.INT

    def __init__(self, signed=True, bits=64):
        self.signed = signed
        if signed:
            self.low, self.high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
        else:
            self.low, self.high = 0, 2**bits - 1

    def parse(self, text):
        text = text.strip()
        if not text or not text.lstrip("+-").isdigit():
            raise ValueError(text)
        value = int(text)
        if not self.low <= value <= self.high:
            raise ValueError(text)
        return value

    def format(self, value):
        return str(int(value))

    def arbitrary(self, rng):
        if rng.random() < 0.5:
            return rng.randint(max(self.low, -10), 10)
        return rng.randint(self.low, self.high)

    def __repr__(self):
        return f"IntegerCodec(signed={self.signed})"


class FloatCodec(Codec):
    kind = ParseErrorKind.FLOAT

    def parse(self, text):
        return parse_float(text)

    def format(self, value):
        return format_float(value)

    def arbitrary(self, rng):
        return arbitrary_float(rng)

    def __repr__(self):
        return "FloatCodec()"


class BooleanCodec(Codec):
    """XML Schema booleans; always written as ``true``/``false``."""

    kind = ParseErrorKind.BOOL
    trueValues = ("true", "1")
    falseValues = ("false", "0")

    def parse(self, text):
        text = text.strip()
        if text in self.trueValues:
            return True
        if text in self.falseValues:
            return False
        raise ValueError(text)

    def format(self, value):
        return "true" if value else "false"

    def arbitrary(self, rng):
        return rng.random() < 0.5

    def __repr__(self):
        return "BooleanCodec()"


class YesNoCodec(BooleanCodec):
    """Booleans spelled ``yes``/``no`` (case-insensitive), as in ``@dynamic``."""

    def parse(self, text):
        text = text.strip().lower()
        if text == "yes":
            return True
        if text == "no":
            return False
        raise ValueError(text)

    def format(self, value):
        return "yes" if value else "no"

    def __repr__(self):
        return "YesNoCodec()"


class StringCodec(Codec):
    def parse(self, text):
        return text

    def format(self, value):
        return str(value)

    def arbitrary(self, rng):
        return arbitrary_text(rng)

    def __repr__(self):
        return "StringCodec()"


class ValueTypeCodec(Codec):
    """Codec delegating to a class implementing ``from_xml``/``to_xml``."""

    def __init__(self, valueType):
        self.valueType = valueType
        self.kind = getattr(valueType, "parseErrorKind", ParseErrorKind.FLOAT)

    def parse(self, text):
        return self.valueType.from_xml(text)

    def format(self, value):
        return value.to_xml()

    def arbitrary(self, rng):
        return self.valueType.arbitrary(rng)

    def __repr__(self):
        return f"ValueTypeCodec({self.valueType.__name__})"


INTEGER = IntegerCodec()
UNSIGNED = IntegerCodec(signed=False)
FLOAT = FloatCodec()
BOOLEAN = BooleanCodec()
YES_NO = YesNoCodec()
STRING = StringCodec()

_builtinCodecs = {int: INTEGER, float: FLOAT, bool: BOOLEAN, str: STRING}


def codec_for(thing):
    """Find the codec for a codec, builtin type, or value type."""
    if isinstance(thing, Codec):
        return thing
    codec = _builtinCodecs.get(thing)
    if codec is not None:
        return codec
    if isinstance(thing, type) and hasattr(thing, "from_xml"):
        return ValueTypeCodec(thing)
    raise TypeError(f"no attribute codec for {thing!r}")
