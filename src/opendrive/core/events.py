"""XML event streams.

`EventReader` turns a document into a pull-based stream of `StartElement`,
`Characters`, and `EndElement` events, using ElementTree's incremental parser
and discarding each element once it has been reported. `EventWriter` is the
symmetric sink: it consumes the same events and builds the output document.
"""

import xml.etree.ElementTree as ET

import attr

from opendrive.core.errors import (
    FromUtf8Error,
    OpenDriveWriteError,
    WriteIoError,
    XmlError,
)

XML_DECLARATION = b'<?xml version="1.0" standalone="yes"?>\n'

## Events


@attr.s(frozen=True, slots=True)
class StartElement:
    name: str = attr.ib()
    #: Attributes as a sequence of ``(name, value)`` pairs.
    attributes: tuple = attr.ib(default=(), converter=tuple)


@attr.s(frozen=True, slots=True)
class EndElement:
    name: str = attr.ib()


@attr.s(frozen=True, slots=True)
class Characters:
    text: str = attr.ib()


def local_name(tag):
    """Strip any ``{namespace}`` prefix from an ElementTree tag."""
    if tag[:1] == "{":
        return tag.rpartition("}")[2]
    return tag


## Reading


class EventReader:
    """Pull-based iterator over the XML events of a document.

    Args:
        source: The document, as a `str`, `bytes`, or a file-like object with a
            ``read`` method (binary or text).
        chunkSize (int): Number of bytes/characters read from a stream at a time.
    """

    def __init__(self, source, chunkSize=64 * 1024):
        self.source = source
        self.chunkSize = chunkSize
        self._events = self._generate()

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._events)

    def _chunks(self):
        if isinstance(self.source, (str, bytes)):
            yield self.source
            return
        while True:
            try:
                data = self.source.read(self.chunkSize)
            except OSError as e:
                raise XmlError(f"failed to read document: {e}") from e
            if not data:
                return
            yield data

    def _generate(self):
        parser = ET.XMLPullParser(events=("start", "end"))
        stack = []
        try:
            for chunk in self._chunks():
                parser.feed(chunk)
                yield from self._drain(parser, stack)
            parser.close()
            yield from self._drain(parser, stack)
        except ET.ParseError as e:
            raise XmlError(f"malformed XML: {e}", position=e.position) from e

    @staticmethod
    def _drain(parser, stack):
        for event, element in parser.read_events():
            if event == "start":
                stack.append(element)
                attributes = tuple(
                    (local_name(key), value) for key, value in element.attrib.items()
                )
                yield StartElement(local_name(element.tag), attributes)
            else:
                stack.pop()
                if element.text:
                    yield Characters(element.text)
                yield EndElement(local_name(element.tag))
                # Release the finished subtree
                if stack:
                    stack[-1].remove(element)
                element.clear()


## Writing


class EventWriter:
    """Sink consuming emit events and building the output document.

    Instances are callable, so they can be passed directly as the visitor of
    the ``emit_*`` methods of value types.
    """

    def __init__(self):
        self._builder = ET.TreeBuilder()
        self._open = []
        #: Elements given character data; indenting must leave their text alone.
        self._textElements = []
        self.root = None

    def __call__(self, event):
        self.write(event)

    def write(self, event):
        if isinstance(event, StartElement):
            if self.root is not None:
                raise OpenDriveWriteError("document already has a root element")
            self._open.append(self._builder.start(event.name, dict(event.attributes)))
        elif isinstance(event, EndElement):
            if not self._open:
                raise OpenDriveWriteError(f"unbalanced end of element {event.name!r}")
            self._builder.end(self._open.pop().tag)
            if not self._open:
                self.root = self._builder.close()
        elif isinstance(event, Characters):
            if self._open:
                self._textElements.append(self._open[-1])
            self._builder.data(event.text)
        else:
            raise TypeError(f"unknown XML event {event!r}")

    def to_bytes(self, pretty=False):
        if self.root is None:
            raise OpenDriveWriteError("document is incomplete")
        try:
            if pretty:
                texts = [(element, element.text) for element in self._textElements]
                ET.indent(self.root)
                for element, text in texts:
                    element.text = text
            return XML_DECLARATION + ET.tostring(self.root, encoding="utf-8")
        except RecursionError as e:
            # ElementTree serializes recursively
            raise OpenDriveWriteError("document is nested too deeply to write") from e

    def to_string(self, pretty=False):
        try:
            return self.to_bytes(pretty).decode("utf-8")
        except UnicodeDecodeError as e:
            raise FromUtf8Error(f"document is not valid UTF-8: {e}") from e

    def write_to(self, stream, pretty=False):
        """Write the document to a binary stream."""
        try:
            stream.write(self.to_bytes(pretty))
        except OSError as e:
            raise WriteIoError(f"failed to write document: {e}") from e
