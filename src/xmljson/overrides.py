"""Per-path override lookup.

``OverrideResolver`` maps an absolute path to the ``JsonArray`` registered
for it.  Lookups are exact-match only; unregistered paths fall back to
``ArrayPolicy.INFER`` and ``JsonType.infer()``.

``coerce_override()`` turns the loose shapes accepted in config files
(strings and dicts) into ``JsonArray`` instances.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from xmljson.models import ArrayPolicy, JsonArray, JsonType, JsonTypeKind

logger = logging.getLogger("xmljson")

_DEFAULT_JSON_TYPE = JsonType()


class OverrideResolver:
    """Resolve override policies for absolute paths.

    One resolver is created per conversion.  The override mapping itself is
    never modified; the resolver only records which paths were hit so that
    unused overrides can be reported afterwards.
    """

    def __init__(self, overrides: Mapping[str, JsonArray]) -> None:
        self._overrides = overrides
        self._hits: set[str] = set()

    def resolve(self, path: str) -> JsonArray | None:
        """Return the override for *path*, or None if none is registered."""
        override = self._overrides.get(path)
        if override is not None:
            self._hits.add(path)
            logger.debug(
                "xmljson | override path=%s | array=%s | type=%s",
                path,
                override.array.value,
                override.json_type.kind.value,
            )
        return override

    def json_type_for(self, path: str) -> JsonType:
        override = self.resolve(path)
        return override.json_type if override is not None else _DEFAULT_JSON_TYPE

    def array_policy_for(self, path: str) -> ArrayPolicy:
        override = self.resolve(path)
        return override.array if override is not None else ArrayPolicy.INFER

    def unused_paths(self) -> list[str]:
        """Registered paths that were never looked up, sorted."""
        return sorted(p for p in self._overrides if p not in self._hits)


def coerce_override(value: Any) -> JsonArray:
    """Build a ``JsonArray`` from a loosely-typed override value.

    Accepted shapes:

    - a ``JsonArray`` (returned unchanged) or a ``JsonType`` (wrapped with
      ``ArrayPolicy.INFER``);
    - a type name string: ``"infer"``, ``"always_string"``;
    - a dict with optional ``array``, ``type`` and ``true_values`` keys, or
      the ``array`` / ``json_type`` shape produced by ``model_dump()``.

    Raises
    ------
    ValueError
        If *value* has none of the shapes above.
    """
    if isinstance(value, JsonArray):
        return value
    if isinstance(value, JsonType):
        return JsonArray.infer(value)
    if isinstance(value, str):
        return JsonArray.infer(_coerce_json_type(value, None))
    if isinstance(value, Mapping):
        if "json_type" in value:
            return JsonArray.model_validate(value)
        unknown = set(value) - {"array", "type", "true_values"}
        if unknown:
            raise ValueError(f"Unknown override keys: {sorted(unknown)}")
        try:
            array = ArrayPolicy(value.get("array", ArrayPolicy.INFER.value))
        except ValueError as exc:
            raise ValueError(f"Unknown array policy: {value.get('array')!r}") from exc
        json_type = _coerce_json_type(
            value.get("type", JsonTypeKind.INFER.value), value.get("true_values")
        )
        return JsonArray(array=array, json_type=json_type)
    raise ValueError(f"Cannot build an override from {type(value).__name__}")


def _coerce_json_type(kind: str, true_values: Any) -> JsonType:
    try:
        json_kind = JsonTypeKind(kind)
    except ValueError as exc:
        raise ValueError(f"Unknown JSON type: {kind!r}") from exc

    if json_kind is JsonTypeKind.BOOL:
        if not true_values:
            raise ValueError("A 'bool' override needs a non-empty 'true_values' list")
        return JsonType.boolean(true_values)
    if true_values:
        raise ValueError("'true_values' is only valid for the 'bool' type")
    return JsonType(kind=json_kind)
