"""Common exceptions and warnings."""

import enum
import warnings

## Warnings


class OpenDriveWarning(UserWarning):
    """Warning about a tolerated deviation from the OpenDRIVE schema."""

    pass


def warn(message):
    warnings.warn(message, OpenDriveWarning, stacklevel=2)


## Exceptions


class OpenDriveError(Exception):
    """An error produced while reading or writing an OpenDRIVE document."""

    pass


class OpenDriveParseError(OpenDriveError):
    """An error produced while parsing an OpenDRIVE document.

    Attributes:
        path (str): Slash-separated path of the element being parsed when the
            error occurred, e.g. ``OpenDRIVE/road/lanes``. May be `None` for
            errors raised outside of any element.
    """

    def __init__(self, message, path=None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self):
        if self.path:
            return f"{self.message} (at {self.path})"
        return self.message


class XmlError(OpenDriveParseError):
    """The underlying XML parser rejected the input (malformed or truncated)."""

    def __init__(self, message, path=None, position=None):
        super().__init__(message, path)
        self.position = position


class AttributeMissing(OpenDriveParseError):
    """A required attribute is absent on the current element."""

    def __init__(self, name, path=None):
        super().__init__(f"missing required attribute {name!r}", path)
        self.name = name


class ElementMissing(OpenDriveParseError):
    """A required child element was not encountered before the element ended."""

    def __init__(self, name, path=None):
        super().__init__(f"missing required child element {name!r}", path)
        self.name = name


class ChildMissing(OpenDriveParseError):
    """A required variant slot had no matching child element."""

    def __init__(self, type_, alternatives=(), path=None):
        message = f"missing child element for {type_}"
        if alternatives:
            message += " (expected one of " + ", ".join(alternatives) + ")"
        super().__init__(message, path)
        self.type_ = type_
        self.alternatives = tuple(alternatives)


class InvalidEnumValue(OpenDriveParseError, ValueError):
    """An attribute string does not map to any variant of an enumeration."""

    def __init__(self, type_, value, path=None):
        super().__init__(f"invalid value {value!r} for {type_}", path)
        self.type_ = type_
        self.value = value
        self.attribute = None


@enum.unique
class ParseErrorKind(enum.Enum):
    INT = "integer"
    FLOAT = "float"
    BOOL = "boolean"


class ParseError(OpenDriveParseError):
    """An attribute value could not be parsed as a primitive type."""

    def __init__(self, name, kind, value, path=None):
        super().__init__(
            f"attribute {name!r} is not a valid {kind.value}: {value!r}", path
        )
        self.name = name
        self.kind = kind
        self.value = value


class InvalidValueFor(OpenDriveParseError):
    """Generic invalid content for an attribute or element."""

    def __init__(self, name, value, path=None):
        super().__init__(f"invalid value for {name}: {value!r}", path)
        self.name = name
        self.value = value


class OpenDriveWriteError(OpenDriveError):
    """An error produced while serializing an OpenDRIVE document."""

    pass


class WriteIoError(OpenDriveWriteError):
    """The output stream reported an I/O failure."""

    pass


class FromUtf8Error(OpenDriveWriteError):
    """The serialized document could not be decoded as UTF-8."""

    pass
