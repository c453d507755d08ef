"""Error codes and structured error model for the xmljson package.

``ErrorCode`` contains every error/warning code the converter can report.
``ConversionError`` is a Pydantic model (data structure) with an ``xpath``
field for location context.  ``XMLConversionError`` wraps it so it can be
used with ``raise``/``except``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes for XML to JSON conversion.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
    """

    # Security / pre-flight
    E_SECURITY_TOO_LARGE = "E_SECURITY_TOO_LARGE"
    E_SECURITY_ENTITY_DECLARATION = "E_SECURITY_ENTITY_DECLARATION"
    E_SECURITY_INVALID_XML = "E_SECURITY_INVALID_XML"

    # Parse
    E_PARSE_EMPTY = "E_PARSE_EMPTY"

    # Conversion
    E_CONVERT_DEPTH_EXCEEDED = "E_CONVERT_DEPTH_EXCEEDED"

    # Configuration
    E_CONFIG_INVALID_OVERRIDE = "E_CONFIG_INVALID_OVERRIDE"

    # Warnings (non-fatal)
    W_LARGE_INPUT = "W_LARGE_INPUT"
    W_UNUSED_OVERRIDE = "W_UNUSED_OVERRIDE"


class ConversionError(BaseModel):
    """Structured error with code, message, and XML location context.

    Note: This is a Pydantic model, not a Python Exception.  To raise
    errors, use ``XMLConversionError`` which wraps this model.
    """

    code: ErrorCode
    message: str
    stage: str | None = None
    recoverable: bool = False
    xpath: str | None = None


class XMLConversionError(Exception):
    """Raisable exception wrapping a ``ConversionError`` data model.

    Carries the structured error as the ``.error`` attribute for
    inspection and serialization.
    """

    def __init__(self, **kwargs: object) -> None:
        self.error = ConversionError(**kwargs)  # type: ignore[arg-type]
        super().__init__(self.error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def stage(self) -> str | None:
        return self.error.stage

    @property
    def xpath(self) -> str | None:
        return self.error.xpath
