"""Utilities used throughout the test suite."""

import inspect

from opendrive import OpenDrive
from opendrive.core.events import XML_DECLARATION, EventWriter
from opendrive.core.model import ChildSpec, emit_element, xml_fields

## Document builders

HEADER = (
    '<header revMajor="1" revMinor="7" name="" version="1.00" '
    'date="Tue Feb 25 13:02:27 2020" north="0.0000000000000000e+00" '
    'south="0.0000000000000000e+00" east="0.0000000000000000e+00" '
    'west="0.0000000000000000e+00"></header>'
)

LANES = """
    <lanes>
        <laneSection s="0.0000000000000000e+00">
            <center>
                <lane id="0" type="none" level="false"/>
            </center>
            <right>
                <lane id="-1" type="driving" level="false">
                    <width sOffset="0.0" a="3.5" b="0.0" c="0.0" d="0.0"/>
                    <roadMark sOffset="0.0" type="solid" weight="standard" color="white"/>
                </lane>
            </right>
        </laneSection>
    </lanes>
"""

PLAN_VIEW = """
    <planView>
        <geometry s="0.0" x="0.0" y="0.0" hdg="0.0" length="1.0000000000000000e+02">
            <line/>
        </geometry>
    </planView>
"""


def document(*body, header=HEADER):
    """An OpenDRIVE document with the given header and top-level elements."""
    return (
        '<?xml version="1.0" standalone="yes"?>\n<OpenDRIVE>'
        + header
        + "".join(inspect.cleandoc(part) for part in body)
        + "</OpenDRIVE>"
    )


def road(*content, lanes=LANES, planView=PLAN_VIEW, attributes=None):
    """A ``<road>`` element with a straight plan view and one driving lane."""
    if attributes is None:
        attributes = 'rule="RHT" name="" length="1.0000000000000000e+02" id="1" junction="-1"'
    return (
        f"<road {attributes}>"
        + inspect.cleandoc(planView)
        + inspect.cleandoc(lanes)
        + "".join(inspect.cleandoc(part) for part in content)
        + "</road>"
    )


def elementClasses(root=OpenDrive):
    """All element classes reachable from the given one."""
    found = []
    pending = [root]
    while pending:
        cls = pending.pop()
        if cls in found:
            continue
        found.append(cls)
        for name, spec in xml_fields(cls):
            if isinstance(spec, ChildSpec):
                pending.extend(spec.variants.values())
    return found


## Parsing and writing


def parseDocument(text, options=None):
    return OpenDrive.from_xml_str(text, options)


def parseElement(cls, xml, options=None):
    """Parse a standalone element of the given class."""
    return cls.from_xml_fragment(inspect.cleandoc(xml), options)


def elementToXml(name, value):
    """Serialize a single element, without the XML declaration."""
    writer = EventWriter()
    emit_element(name, value, writer)
    return writer.to_bytes()[len(XML_DECLARATION) :].decode("utf-8")


def roundTrip(network, pretty=False):
    """Write a document and parse it back."""
    return OpenDrive.from_xml_str(network.to_xml_string(pretty=pretty))


def roundTripElement(cls, name, value):
    return cls.from_xml_fragment(elementToXml(name, value))
