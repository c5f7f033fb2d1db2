import logging

import pytest

from opendrive.core.additional_data import (
    AdditionalData,
    DataQuality,
    DataSource,
    Element,
    Include,
    PostProcessing,
    UserData,
)
from opendrive.core.errors import InvalidValueFor, OpenDriveWriteError
from opendrive.core.header import Header
from opendrive.core.options import ParseOptions, UnknownElementPolicy
from opendrive.core.units import Length
from tests.utils import HEADER, document, elementToXml, parseDocument, parseElement

VENDOR_HEADER = HEADER.replace(
    "</header>", '<vendorExtension foo="bar"><nested a="1" b="2"/></vendorExtension></header>'
)


def test_unknown_element_is_preserved():
    network = parseDocument(document(header=VENDOR_HEADER))
    (element,) = network.header.additional_data.elements
    assert element == Element(
        name="vendorExtension",
        attributes={"foo": "bar"},
        children=[Element(name="nested", attributes={"a": "1", "b": "2"})],
    )
    xml = network.to_xml_string()
    assert '<vendorExtension foo="bar"><nested a="1" b="2" /></vendorExtension></header>' in xml


def test_unknown_element_survives_round_trip():
    network = parseDocument(document(header=VENDOR_HEADER))
    assert parseDocument(network.to_xml_string()) == network


def test_unknown_element_skipped(caplog):
    options = ParseOptions(unknown_elements=UnknownElementPolicy.SKIP)
    with caplog.at_level(logging.DEBUG, logger="opendrive.core.additional_data"):
        network = parseDocument(document(header=VENDOR_HEADER), options)
    assert network.header.additional_data.is_empty()
    assert "OpenDRIVE/header/vendorExtension" in caplog.text


def test_unknown_element_rejected():
    options = ParseOptions(unknown_elements=UnknownElementPolicy.ERROR)
    with pytest.raises(InvalidValueFor) as info:
        parseDocument(document(header=VENDOR_HEADER), options)
    assert info.value.value == "vendorExtension"
    assert info.value.path == "OpenDRIVE/header/vendorExtension"


def test_strict_options():
    options = ParseOptions.strict()
    assert options.unknown_elements is UnknownElementPolicy.ERROR
    assert ParseOptions.strict(workaround_missing_road_mark_color=True) == ParseOptions(
        unknown_elements=UnknownElementPolicy.ERROR,
        workaround_missing_road_mark_color=True,
    )
    with pytest.raises(InvalidValueFor):
        parseDocument(document(header=VENDOR_HEADER), options)
    network = parseDocument(document(header=HEADER), options)
    assert network.header.additional_data.is_empty()


def test_extension_elements():
    header = parseElement(
        Header,
        """
        <header revMajor="1" revMinor="7">
            <userData code="tool" value="v2"><setting key="x"><sub/></setting></userData>
            <include file="signs.xml"/>
            <dataQuality>
                <error xyAbsolute="0.1" zAbsolute="0.2" xyRelative="0.3" zRelative="0.4"/>
                <rawData date="2020-02-25" source="sensor" postProcessing="cleaned"/>
            </dataQuality>
            <userData code="empty"/>
        </header>
        """,
    )
    data = header.additional_data
    assert data.include == [Include(file="signs.xml")]
    assert [userData.code for userData in data.user_data] == ["tool", "empty"]
    tool = data.user_data[0]
    assert tool.value == "v2"
    assert tool.elements == [
        Element(name="setting", attributes={"key": "x"}, children=[Element(name="sub")])
    ]
    assert data.user_data[1].value is None
    assert data.data_quality.error.z_relative == Length(0.4)
    assert data.data_quality.raw_data.source is DataSource.SENSOR
    assert data.data_quality.raw_data.post_processing is PostProcessing.CLEANED
    assert data.elements == []


def test_emission_order():
    data = AdditionalData(
        data_quality=DataQuality(),
        include=[Include(file="a")],
        user_data=[UserData(code="c")],
        elements=[Element(name="vendor")],
    )
    header = Header(rev_major=1, rev_minor=7, additional_data=data)
    assert elementToXml("header", header) == (
        '<header revMajor="1" revMinor="7"><dataQuality /><include file="a" />'
        '<userData code="c" /><vendor /></header>'
    )


def test_later_data_quality_wins():
    header = parseElement(
        Header,
        """
        <header revMajor="1" revMinor="7">
            <dataQuality><rawData date="1" source="custom" postProcessing="raw"/></dataQuality>
            <dataQuality/>
        </header>
        """,
    )
    assert header.additional_data.data_quality == DataQuality()


def test_is_empty():
    assert AdditionalData().is_empty()
    assert not AdditionalData(include=[Include(file="x")]).is_empty()


def nestedHeader(depth, name="vendorX"):
    nested = f"<{name}>" * depth + f"</{name}>" * depth
    return HEADER.replace("</header>", nested + "</header>")


def innermost(element, depth):
    for _ in range(depth - 1):
        (element,) = element.children
    return element


@pytest.mark.parametrize("depth", [500, 5000])
def test_deeply_nested_unknown_elements(depth):
    network = parseDocument(document(header=nestedHeader(depth)))
    (element,) = network.header.additional_data.elements
    assert innermost(element, depth).children == []


def test_deeply_nested_user_data():
    depth = 5000
    header = nestedHeader(depth).replace("<vendorX>", "<userData code='u'>", 1)
    header = header.replace("</vendorX></header>", "</userData></header>")
    network = parseDocument(document(header=header))
    (userData,) = network.header.additional_data.user_data
    (element,) = userData.elements
    assert innermost(element, depth - 1).children == []


def test_nested_unknown_elements_are_written():
    depth = 500
    network = parseDocument(document(header=nestedHeader(depth)))
    xml = network.to_xml_string()
    assert xml.count("<vendorX>") == depth - 1
    assert xml.count("<vendorX />") == 1
    (element,) = parseDocument(xml).header.additional_data.elements
    assert innermost(element, depth).children == []


def test_too_deep_to_write():
    network = parseDocument(document(header=nestedHeader(5000)))
    with pytest.raises(OpenDriveWriteError, match="nested too deeply"):
        network.to_xml_string()
