"""Unit tests for xmljson.errors -- error codes, model and exception."""

from __future__ import annotations

from xmljson.errors import ConversionError, ErrorCode, XMLConversionError


class TestErrorCodeValues:
    """All ErrorCode values should equal their names."""

    def test_all_values_equal_names(self):
        for code in ErrorCode:
            assert code.value == code.name

    def test_all_members_are_strings(self):
        for code in ErrorCode:
            assert isinstance(code, str)

    def test_fatal_codes_start_with_E(self):
        fatal = [c for c in ErrorCode if c.value.startswith("E_")]
        assert len(fatal) == 6

    def test_warning_codes_start_with_W(self):
        warnings = [c for c in ErrorCode if c.value.startswith("W_")]
        assert len(warnings) == 2


class TestConversionError:
    """Tests for the ConversionError model."""

    def test_has_xpath_field(self):
        err = ConversionError(
            code=ErrorCode.E_CONVERT_DEPTH_EXCEEDED,
            message="test",
            stage="convert",
            xpath="/root/item",
        )
        assert err.xpath == "/root/item"

    def test_defaults(self):
        err = ConversionError(code=ErrorCode.E_PARSE_EMPTY, message="test")
        assert err.xpath is None
        assert err.stage is None
        assert err.recoverable is False

    def test_code_accepts_string_value(self):
        err = ConversionError(code="W_LARGE_INPUT", message="test")
        assert err.code is ErrorCode.W_LARGE_INPUT


class TestXMLConversionError:
    """Tests for the raisable wrapper."""

    def test_wraps_model(self):
        exc = XMLConversionError(
            code=ErrorCode.E_SECURITY_INVALID_XML,
            message="Invalid XML: mismatched tag",
            stage="parse",
        )
        assert isinstance(exc.error, ConversionError)
        assert exc.code is ErrorCode.E_SECURITY_INVALID_XML
        assert exc.message == "Invalid XML: mismatched tag"
        assert exc.stage == "parse"
        assert exc.xpath is None
        assert str(exc) == "Invalid XML: mismatched tag"

    def test_is_exception(self):
        assert issubclass(XMLConversionError, Exception)
