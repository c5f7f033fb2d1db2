import io

import pytest

from opendrive.core.errors import FromUtf8Error, OpenDriveWriteError, WriteIoError, XmlError
from opendrive.core.events import (
    Characters,
    EndElement,
    EventReader,
    EventWriter,
    StartElement,
    local_name,
)


def test_reader_events():
    events = list(EventReader('<a x="1"><b>text</b><c/></a>'))
    assert events == [
        StartElement("a", (("x", "1"),)),
        StartElement("b"),
        Characters("text"),
        EndElement("b"),
        StartElement("c"),
        EndElement("c"),
        EndElement("a"),
    ]


def test_reader_accepts_streams():
    text = '<a><b y="2"/></a>'
    fromBytes = list(EventReader(io.BytesIO(text.encode()), chunkSize=3))
    fromText = list(EventReader(io.StringIO(text), chunkSize=3))
    assert fromBytes == fromText == list(EventReader(text))


def test_reader_cdata():
    events = list(EventReader("<g><![CDATA[+proj=utm +zone=32]]></g>"))
    assert Characters("+proj=utm +zone=32") in events


def test_reader_strips_namespaces():
    events = list(EventReader('<r xmlns="urn:x"><s/></r>'))
    assert events[0] == StartElement("r")
    assert local_name("{urn:x}s") == "s"


@pytest.mark.parametrize("text", ["<a><b></a>", "<a>", "not xml"])
def test_reader_malformed(text):
    with pytest.raises(XmlError) as info:
        list(EventReader(text))
    assert info.value.__cause__ is not None


def test_writer():
    writer = EventWriter()
    for event in (
        StartElement("a", [("x", "1"), ("y", "<&>")]),
        StartElement("b"),
        Characters("text"),
        EndElement("b"),
        EndElement("a"),
    ):
        writer(event)
    assert writer.to_string() == (
        '<?xml version="1.0" standalone="yes"?>\n'
        '<a x="1" y="&lt;&amp;&gt;"><b>text</b></a>'
    )


def test_writer_pretty():
    writer = EventWriter()
    for event in (StartElement("a"), StartElement("b"), EndElement("b"), EndElement("a")):
        writer(event)
    assert writer.to_string(pretty=True).endswith("<a>\n  <b />\n</a>")


@pytest.mark.parametrize("text", ["", "x", "  "])
def test_writer_pretty_keeps_character_data(text):
    writer = EventWriter()
    for event in (
        StartElement("a"),
        Characters(text),
        StartElement("b"),
        EndElement("b"),
        EndElement("a"),
    ):
        writer(event)
    assert writer.to_string(pretty=True).endswith(f"<a>{text}<b />\n</a>")


def test_writer_incomplete():
    writer = EventWriter()
    writer(StartElement("a"))
    with pytest.raises(OpenDriveWriteError):
        writer.to_string()
    with pytest.raises(OpenDriveWriteError):
        EventWriter().write(EndElement("a"))


def test_writer_stream_failure():
    class BrokenStream:
        def write(self, data):
            raise OSError("disk full")

    writer = EventWriter()
    writer(StartElement("a"))
    writer(EndElement("a"))
    with pytest.raises(WriteIoError, match="disk full"):
        writer.write_to(BrokenStream())
    assert issubclass(FromUtf8Error, OpenDriveWriteError)
