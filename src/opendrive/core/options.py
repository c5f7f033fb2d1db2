"""Options controlling how documents are parsed."""

import dataclasses
import enum


@enum.unique
class UnknownElementPolicy(enum.Enum):
    """What to do with unknown children of elements permitting extensions."""

    #: Keep them as generic `Element` trees in `AdditionalData.elements`.
    PRESERVE = "preserve"
    #: Drop them (they are logged at debug level).
    SKIP = "skip"
    #: Fail with `InvalidValueFor`.
    ERROR = "error"


@dataclasses.dataclass(frozen=True)
class ParseOptions:
    """Options for parsing a document.

    Producer workarounds are disabled by default; applying one issues an
    `OpenDriveWarning`.
    """

    #: Treat a missing ``roadMark/@color`` as ``standard`` (for SUMO output).
    workaround_missing_road_mark_color: bool = False
    #: Handling of unknown extension elements.
    unknown_elements: UnknownElementPolicy = UnknownElementPolicy.PRESERVE

    @classmethod
    def sumo(cls, **kwargs):
        """Options tolerating the known deviations of SUMO's OpenDRIVE export."""
        return cls(workaround_missing_road_mark_color=True, **kwargs)

    @classmethod
    def strict(cls, **kwargs):
        """Options rejecting unknown extension elements instead of keeping them."""
        return cls(unknown_elements=UnknownElementPolicy.ERROR, **kwargs)


DEFAULT_OPTIONS = ParseOptions()
