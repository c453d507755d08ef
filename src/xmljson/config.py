"""Configuration model for the xmljson converter.

Provides ``XMLToJSONConfig`` with all tunable parameters and sensible
defaults.  The model is frozen: ``add_json_type_override()`` returns a new
config instead of mutating the receiver, so one config can be shared by
concurrent conversions.  Supports loading settings from YAML or JSON files
via the ``from_file()`` classmethod.
"""

from __future__ import annotations

import json
import logging
import pathlib
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from xmljson.errors import ErrorCode, XMLConversionError
from xmljson.models import ArrayPolicy, JsonArray, NullValue
from xmljson.overrides import coerce_override
from xmljson.paths import is_attribute_path, normalize_path

logger = logging.getLogger("xmljson")


class XMLToJSONConfig(BaseModel):
    """All tunable parameters with sensible defaults for XML to JSON conversion.

    Override individual values via constructor kwargs or load a complete
    config from a file with ``XMLToJSONConfig.from_file(path)``.
    """

    model_config = ConfigDict(frozen=True)

    # --- Naming ---
    xml_attr_prefix: str = Field(
        default="@",
        description="Prefix for property names derived from attributes.",
    )
    xml_text_node_prop_name: str = Field(
        default="#text",
        description="Property name for element text next to attributes or children.",
    )

    # --- Type inference ---
    leading_zero_as_string: bool = Field(
        default=False,
        description="Keep all-digit values with a leading zero (e.g. '007') as strings.",
    )
    null_value_policy: NullValue = NullValue.NULL
    json_type_overrides: dict[str, JsonArray] = Field(
        default_factory=dict,
        description="Absolute path (/a/b or /a/@attr) -> array and type policy.",
    )

    # --- Input handling ---
    strip_namespaces: bool = True

    # --- Security / Resource Limits ---
    max_depth: int = Field(default=256, ge=1)
    max_input_size_mb: int = Field(default=100, ge=0)
    reject_entity_declarations: bool = True

    @field_validator("json_type_overrides", mode="before")
    @classmethod
    def _coerce_overrides(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {normalize_path(str(path)): coerce_override(v) for path, v in value.items()}

    def add_json_type_override(self, path: str, override: Any) -> XMLToJSONConfig:
        """Return a copy of this config with one more override registered.

        *path* uses the ``/a/b`` (element) or ``/a/b/@c`` (attribute)
        notation; a missing leading ``/`` is added.  *override* is a
        ``JsonArray``, a ``JsonType`` or any shape ``coerce_override()``
        accepts.

        Raises
        ------
        XMLConversionError
            With ``E_CONFIG_INVALID_OVERRIDE`` if the path is empty or the
            override cannot be interpreted.
        """
        if not path or not path.strip("/"):
            raise XMLConversionError(
                code=ErrorCode.E_CONFIG_INVALID_OVERRIDE,
                message="Override path must name at least one element",
                stage="config",
                xpath=path,
            )
        try:
            json_array = coerce_override(override)
        except ValueError as exc:
            raise XMLConversionError(
                code=ErrorCode.E_CONFIG_INVALID_OVERRIDE,
                message=f"Invalid override for {path}: {exc}",
                stage="config",
                xpath=path,
            ) from exc

        path = normalize_path(path)
        if json_array.array is ArrayPolicy.ALWAYS and is_attribute_path(path):
            logger.warning(
                "xmljson | override path=%s | array policy has no effect on attributes",
                path,
            )

        overrides = dict(self.json_type_overrides)
        overrides[path] = json_array
        return self.model_copy(update={"json_type_overrides": overrides})

    @classmethod
    def from_file(cls, path: str) -> XMLToJSONConfig:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Any keys present in the file override the
        corresponding defaults; keys not present retain their defaults.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            import yaml

            with open(file_path) as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}

        return cls(**data)
