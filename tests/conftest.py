"""Shared test fixtures for xmljson tests."""

from __future__ import annotations

import pytest

from xmljson.config import XMLToJSONConfig
from xmljson.models import NullValue


@pytest.fixture
def default_config() -> XMLToJSONConfig:
    """Return a default XMLToJSONConfig."""
    return XMLToJSONConfig()


@pytest.fixture
def custom_config() -> XMLToJSONConfig:
    """Blank attribute prefix, ``text`` text nodes, leading zeros kept."""
    return XMLToJSONConfig(
        leading_zero_as_string=True,
        xml_attr_prefix="",
        xml_text_node_prop_name="text",
        null_value_policy=NullValue.NULL,
    )


@pytest.fixture
def sample_xml_mixed() -> str:
    """XML with attributes, text nodes and repeated siblings."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<catalog version="2">
    <book id="bk101" available="true">
        <author>Gambardella, Matthew</author>
        <price>44.95</price>
    </book>
    <book id="bk102" available="false">
        <author>Ralls, Kim</author>
        <price>5.95</price>
    </book>
</catalog>"""


@pytest.fixture
def sample_xml_namespaced() -> str:
    """XML with namespace declarations."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<root xmlns:ns="http://example.com/ns" xmlns:other="http://example.com/other">
    <ns:item ns:code="7">Namespaced item</ns:item>
    <other:data>Other data</other:data>
</root>"""
