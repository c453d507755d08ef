"""xmljson -- configurable XML to JSON conversion.

Public API re-exports for convenient access.
"""

from xmljson.api import XMLToJSONConverter, xml_string_to_json
from xmljson.config import XMLToJSONConfig
from xmljson.converter import convert_node, convert_tree, merge_child, xml_to_json
from xmljson.errors import ConversionError, ErrorCode, XMLConversionError
from xmljson.inference import parse_text
from xmljson.models import (
    ArrayPolicy,
    ConversionResult,
    JsonArray,
    JsonType,
    JsonTypeKind,
    NullValue,
)
from xmljson.overrides import OverrideResolver
from xmljson.security import XMLSecurityScanner

__all__ = [
    "XMLToJSONConverter",
    "XMLToJSONConfig",
    "ErrorCode",
    "ConversionError",
    "XMLConversionError",
    "ArrayPolicy",
    "JsonType",
    "JsonTypeKind",
    "JsonArray",
    "NullValue",
    "ConversionResult",
    "OverrideResolver",
    "XMLSecurityScanner",
    "xml_string_to_json",
    "xml_to_json",
    "convert_tree",
    "convert_node",
    "merge_child",
    "parse_text",
]
