"""Policy types and result models for the xmljson package.

Contains the override policy types (``ArrayPolicy``, ``JsonType``,
``JsonArray``), the empty-element policy ``NullValue`` and the
``ConversionResult`` returned by ``XMLToJSONConverter.process()``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from xmljson.errors import ConversionError


class NullValue(str, Enum):
    """How an empty element such as ``<x/>`` is represented.

    ``IGNORE`` and ``NULL`` both yield ``null`` for the element;
    ``EMPTY_OBJECT`` yields ``{}``.
    """

    IGNORE = "ignore"
    NULL = "null"
    EMPTY_OBJECT = "empty_object"


class ArrayPolicy(str, Enum):
    """Whether a child element is wrapped in a JSON array."""

    INFER = "infer"
    ALWAYS = "always"


class JsonTypeKind(str, Enum):
    """How raw XML text is converted into a JSON scalar."""

    INFER = "infer"
    ALWAYS_STRING = "always_string"
    BOOL = "bool"


class JsonType(BaseModel):
    """Scalar type policy for a single path.

    ``true_values`` is only consulted for ``JsonTypeKind.BOOL``: text equal
    to one of the literals becomes ``true``, anything else ``false``.
    """

    model_config = ConfigDict(frozen=True)

    kind: JsonTypeKind = JsonTypeKind.INFER
    true_values: frozenset[str] = frozenset()

    @classmethod
    def infer(cls) -> JsonType:
        return cls()

    @classmethod
    def always_string(cls) -> JsonType:
        return cls(kind=JsonTypeKind.ALWAYS_STRING)

    @classmethod
    def boolean(cls, true_values: Any) -> JsonType:
        """Build a ``BOOL`` policy from an iterable of true literals."""
        if isinstance(true_values, str):
            true_values = [true_values]
        return cls(kind=JsonTypeKind.BOOL, true_values=frozenset(true_values))


class JsonArray(BaseModel):
    """Override registered for one absolute path.

    Pairs an ``ArrayPolicy`` (only meaningful for element paths) with the
    ``JsonType`` applied to the text found at that path.
    """

    model_config = ConfigDict(frozen=True)

    array: ArrayPolicy = ArrayPolicy.INFER
    json_type: JsonType = JsonType()

    @classmethod
    def infer(cls, json_type: JsonType | None = None) -> JsonArray:
        return cls(array=ArrayPolicy.INFER, json_type=json_type or JsonType())

    @classmethod
    def always(cls, json_type: JsonType | None = None) -> JsonArray:
        return cls(array=ArrayPolicy.ALWAYS, json_type=json_type or JsonType())


class TreeConversion(BaseModel):
    """Internal model for the output of ``convert_tree()``."""

    value: dict[str, Any]
    root_tag: str
    total_elements: int
    max_depth: int
    unused_overrides: list[str] = []


class ConversionResult(BaseModel):
    """Final result of a conversion via ``XMLToJSONConverter.process()``."""

    value: Any = None
    root_tag: str | None = None
    total_elements: int = 0
    max_depth: int = 0
    errors: list[str] = []
    warnings: list[str] = []
    error_details: list[ConversionError] = []
    processing_time_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        """True when no fatal error was recorded."""
        return not self.errors
