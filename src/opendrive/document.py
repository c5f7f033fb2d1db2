"""The OpenDRIVE document root and its parse/emit entry points."""

from typing import List

import attr

from opendrive.core.additional_data import AdditionalData
from opendrive.core.errors import ElementMissing
from opendrive.core.events import EventReader, EventWriter
from opendrive.core.header import Header
from opendrive.core.model import XmlElement, additional_data, child, children, emit_element
from opendrive.core.parser import ReadContext, names_match
from opendrive.junction import Junction, JunctionGroup
from opendrive.road.railroad import Station
from opendrive.road.road import Road
from opendrive.signals import Controller

ROOT_ELEMENT = "OpenDRIVE"


@attr.s(auto_attribs=True, kw_only=True)
class OpenDrive(XmlElement):
    """A complete OpenDRIVE road network.

    Roads, junctions, and the other top-level elements refer to each other
    only by id; the tree is kept exactly as written in the document.
    """

    header: Header = child("header", Header, required=True)
    road: List[Road] = children("road", Road)
    junction: List[Junction] = children("junction", Junction)
    junction_group: List[JunctionGroup] = children("junctionGroup", JunctionGroup)
    controller: List[Controller] = children("controller", Controller)
    station: List[Station] = children("station", Station)
    additional_data: AdditionalData = additional_data()

    ## Parsing

    @classmethod
    def from_reader(cls, events, options=None):
        """Parse a document from an iterator of XML events.

        The first top-level element named ``OpenDRIVE`` (in any case) is taken
        as the root; other top-level elements are skipped.

        Args:
            events: Iterator of XML events, such as an `EventReader`.
            options (ParseOptions): Parsing options; defaults to `ParseOptions()`.

        Raises:
            `ElementMissing`: if the document has no ``OpenDRIVE`` root.
            `OpenDriveParseError`: if the document is otherwise invalid.
        """
        document = ReadContext.for_document(events, options)
        roots = []

        def handler(name, context):
            if not roots and names_match(ROOT_ELEMENT, name):
                roots.append(cls.from_context(context))

        document.children(handler)
        if not roots:
            raise ElementMissing(ROOT_ELEMENT)
        return roots[0]

    @classmethod
    def from_xml_str(cls, text, options=None):
        """Parse a document from a string; leading whitespace is ignored."""
        return cls.from_reader(EventReader(text.strip()), options)

    @classmethod
    def from_stream(cls, stream, options=None):
        """Parse a document from a binary file-like object."""
        return cls.from_reader(EventReader(stream), options)

    @classmethod
    def from_file(cls, path, options=None):
        with open(path, "rb") as stream:
            return cls.from_stream(stream, options)

    ## Emission

    def emit_attributes(self, visitor):
        visitor([])

    def to_writer(self):
        """Emit the document into a new `EventWriter`, which is returned."""
        writer = EventWriter()
        emit_element(ROOT_ELEMENT, self, writer)
        return writer

    def to_xml_bytes(self, pretty=False):
        return self.to_writer().to_bytes(pretty)

    def to_xml_string(self, pretty=False):
        """The document as a string, starting with the XML declaration.

        Args:
            pretty (bool): Whether to indent nested elements.
        """
        return self.to_writer().to_string(pretty)

    def write(self, stream, pretty=False):
        """Write the UTF-8 encoded document to a binary stream."""
        self.to_writer().write_to(stream, pretty)
