"""Extension data attached to OpenDRIVE elements.

Most elements may carry ``<dataQuality>``, ``<include>``, and ``<userData>``
children in addition to their own content. These, together with any other
unrecognised children, are collected into an `AdditionalData` bucket which is
written back after the element's own children.
"""

import logging
from typing import List, Optional

import attr

from opendrive.core.enums import StringEnum
from opendrive.core.errors import InvalidValueFor
from opendrive.core.events import EndElement, StartElement
from opendrive.core.model import XmlElement, attribute, child, emit_element
from opendrive.core.options import UnknownElementPolicy
from opendrive.core.parser import names_match
from opendrive.core.units import Length

log = logging.getLogger(__name__)

## Generic elements


@attr.s(auto_attribs=True, kw_only=True)
class Element:
    """An arbitrary XML element, kept verbatim except for character data.

    Attributes form an unordered mapping; child order is preserved. Trees are
    read and written without recursion, so nesting depth is not limited by the
    Python stack.
    """

    name: str
    attributes: dict = attr.ib(factory=dict)
    children: list = attr.ib(factory=list)

    @classmethod
    def from_context(cls, read):
        root = cls(name=read.name, attributes=dict(read.attributes()))
        stack = [root]
        for event in read.subtree():
            if isinstance(event, StartElement):
                element = cls(name=event.name, attributes=dict(event.attributes))
                stack[-1].children.append(element)
                stack.append(element)
            elif isinstance(event, EndElement):
                stack.pop()
        return root

    def emit_attributes(self, visitor):
        visitor(list(self.attributes.items()))

    def emit_children(self, visitor):
        stack = [(None, iter(self.children))]
        while stack:
            name, remaining = stack[-1]
            element = next(remaining, None)
            if element is None:
                stack.pop()
                if name is not None:
                    visitor(EndElement(name))
                continue
            visitor(StartElement(element.name, list(element.attributes.items())))
            stack.append((element.name, iter(element.children)))


## Extension elements


@attr.s(auto_attribs=True, kw_only=True)
class Include(XmlElement):
    """Reference to an external file with additional content."""

    file: str = attribute("file")


@attr.s(auto_attribs=True, kw_only=True)
class UserData(XmlElement):
    """Free-form user data: a code, an optional value, and arbitrary children."""

    code: str = attribute("code")
    value: Optional[str] = attribute("value", required=False)
    elements: List[Element] = attr.ib(factory=list)

    @classmethod
    def from_context(cls, read):
        elements = []
        read.children(
            lambda name, context: elements.append(Element.from_context(context))
        )
        return cls(
            code=read.attribute("code"),
            value=read.attribute_opt("value"),
            elements=elements,
        )

    def emit_children(self, visitor):
        for element in self.elements:
            emit_element(element.name, element, visitor)


class PostProcessing(StringEnum):
    RAW = "raw"
    CLEANED = "cleaned"
    PROCESSED = "processed"
    FUSED = "fused"


class DataSource(StringEnum):
    SENSOR = "sensor"
    CADASTER = "cadaster"
    CUSTOM = "custom"


@attr.s(auto_attribs=True, kw_only=True)
class DataQualityError(XmlElement):
    """Absolute and relative error ranges of the data."""

    xy_absolute: Length = attribute("xyAbsolute", Length)
    z_absolute: Length = attribute("zAbsolute", Length)
    xy_relative: Length = attribute("xyRelative", Length)
    z_relative: Length = attribute("zRelative", Length)


@attr.s(auto_attribs=True, kw_only=True)
class RawData(XmlElement):
    """Provenance of the raw data."""

    date: str = attribute("date")
    source: DataSource = attribute("source", DataSource)
    source_comment: Optional[str] = attribute("sourceComment", required=False)
    post_processing: PostProcessing = attribute("postProcessing", PostProcessing)
    post_processing_comment: Optional[str] = attribute(
        "postProcessingComment", required=False
    )


@attr.s(auto_attribs=True, kw_only=True)
class DataQuality(XmlElement):
    error: Optional[DataQualityError] = child("error", DataQualityError)
    raw_data: Optional[RawData] = child("rawData", RawData)


## The bucket


@attr.s(auto_attribs=True, kw_only=True)
class AdditionalData:
    """Extension data and unrecognised children of an element."""

    data_quality: Optional[DataQuality] = None
    include: List[Include] = attr.ib(factory=list)
    user_data: List[UserData] = attr.ib(factory=list)
    #: Unrecognised children, kept according to `ParseOptions.unknown_elements`.
    elements: List[Element] = attr.ib(factory=list)

    def is_empty(self):
        return not (self.data_quality or self.include or self.user_data or self.elements)

    def absorb(self, name, read):
        """Take in a child element not recognised by the enclosing element."""
        if names_match("dataQuality", name):
            self.data_quality = DataQuality.from_context(read)
        elif names_match("include", name):
            self.include.append(Include.from_context(read))
        elif names_match("userData", name):
            self.user_data.append(UserData.from_context(read))
        else:
            policy = read.options.unknown_elements
            if policy is UnknownElementPolicy.PRESERVE:
                self.elements.append(Element.from_context(read))
            elif policy is UnknownElementPolicy.SKIP:
                log.debug("dropping unknown element %s", read.path)
            else:
                raise InvalidValueFor("AdditionalData", name, path=read.path)

    def emit_children(self, visitor):
        if self.data_quality is not None:
            emit_element("dataQuality", self.data_quality, visitor)
        for include in self.include:
            emit_element("include", include, visitor)
        for userData in self.user_data:
            emit_element("userData", userData, visitor)
        for element in self.elements:
            emit_element(element.name, element, visitor)
