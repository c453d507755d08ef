"""Core XML to JSON conversion logic.

Provides ``convert_tree()`` / ``xml_to_json()`` to recursively walk an XML
element tree and build the equivalent JSON value, and ``merge_child()``
which groups repeated sibling tags into arrays.

The input tree is read-only.  Every conversion builds its own
``OverrideResolver``, so a config may be shared between threads.

Known limitation: text inside CDATA sections is taken as the parser
reports it and is not repaired.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from xmljson.config import XMLToJSONConfig
from xmljson.errors import ErrorCode, XMLConversionError
from xmljson.inference import parse_text
from xmljson.models import ArrayPolicy, NullValue, TreeConversion
from xmljson.overrides import OverrideResolver
from xmljson.paths import ROOT_PATH, attribute_path, element_path, path_segments


def xml_to_json(
    root: ET.Element,
    config: XMLToJSONConfig | None = None,
) -> dict[str, Any]:
    """Convert an element tree into ``{root_tag: value}``.

    Raises
    ------
    XMLConversionError
        With ``E_CONVERT_DEPTH_EXCEEDED`` if the tree is nested deeper than
        ``config.max_depth``.
    """
    return convert_tree(root, config or XMLToJSONConfig()).value


def convert_tree(root: ET.Element, config: XMLToJSONConfig) -> TreeConversion:
    """Convert an element tree and collect traversal statistics.

    Parameters
    ----------
    root:
        The root element of the parsed XML tree.
    config:
        Naming, inference, null handling and override settings.

    Returns
    -------
    TreeConversion
        The JSON value wrapped under the root tag, element count, maximum
        depth and the override paths that never matched.
    """
    resolver = OverrideResolver(config.json_type_overrides)
    state = {"element_count": 0, "max_depth": 0}

    root_tag = local_name(root.tag, config)
    try:
        value = _convert_recursive(
            root,
            path=element_path(ROOT_PATH, root_tag),
            depth=1,
            config=config,
            resolver=resolver,
            state=state,
        )
    except RecursionError as exc:
        # max_depth was raised past what the interpreter stack can hold
        raise XMLConversionError(
            code=ErrorCode.E_CONVERT_DEPTH_EXCEEDED,
            message=(
                f"XML nesting depth {state['max_depth']} exceeds the "
                "interpreter recursion limit"
            ),
            stage="convert",
        ) from exc

    return TreeConversion(
        value={root_tag: value},
        root_tag=root_tag,
        total_elements=state["element_count"],
        max_depth=state["max_depth"],
        unused_overrides=resolver.unused_paths(),
    )


def convert_node(
    element: ET.Element,
    path: str,
    config: XMLToJSONConfig,
    resolver: OverrideResolver | None = None,
    depth: int | None = None,
) -> Any:
    """Convert a single element (and its subtree) into a JSON value.

    *path* is the element's own absolute path, e.g. ``/a/b``.  *depth*
    defaults to the number of segments in *path*.
    """
    if resolver is None:
        resolver = OverrideResolver(config.json_type_overrides)
    state = {"element_count": 0, "max_depth": 0}
    if depth is None:
        depth = len(path_segments(path)) or 1
    return _convert_recursive(element, path, depth, config, resolver, state)


def _convert_recursive(
    element: ET.Element,
    path: str,
    depth: int,
    config: XMLToJSONConfig,
    resolver: OverrideResolver,
    state: dict[str, int],
) -> Any:
    """Recursive helper for ``convert_tree``.

    Tracks element_count/max_depth in *state*.
    """
    if depth > config.max_depth:
        raise XMLConversionError(
            code=ErrorCode.E_CONVERT_DEPTH_EXCEEDED,
            message=(
                f"XML nesting depth exceeds limit of {config.max_depth}"
            ),
            stage="convert",
            xpath=path,
        )
    if depth > state["max_depth"]:
        state["max_depth"] = depth
    state["element_count"] += 1

    data: dict[str, Any] = {}
    json_type = resolver.json_type_for(path)

    # x:id and y:id share a key once namespaces are stripped
    for raw_name, raw_value in element.attrib.items():
        name = local_name(raw_name, config)
        attr_type = resolver.json_type_for(attribute_path(path, name))
        merge_child(
            data,
            config.xml_attr_prefix + name,
            parse_text(raw_value, attr_type, config.leading_zero_as_string),
        )

    children = [child for child in element if isinstance(child.tag, str)]
    for child in children:
        tag = local_name(child.tag, config)
        child_path = element_path(path, tag)
        value = _convert_recursive(
            child, child_path, depth + 1, config, resolver, state
        )
        merge_child(data, tag, value, resolver.array_policy_for(child_path))

    text = element_text(element)

    if not element.attrib and not children:
        if text:
            return parse_text(text, json_type, config.leading_zero_as_string)
        if config.null_value_policy is NullValue.EMPTY_OBJECT:
            return {}
        return None

    if text:
        merge_child(
            data,
            config.xml_text_node_prop_name,
            parse_text(text, json_type, config.leading_zero_as_string),
            ArrayPolicy.INFER,
        )

    return data


def merge_child(
    data: dict[str, Any],
    key: str,
    value: Any,
    array_policy: ArrayPolicy = ArrayPolicy.INFER,
) -> None:
    """Merge *value* into *data* under *key*, grouping repeats into a list.

    - *key* absent: store *value* as is, or ``[value]`` under
      ``ArrayPolicy.ALWAYS``.
    - *key* holds a list: append.
    - *key* holds anything else: replace it with ``[existing, value]``.

    Converted element values are never lists, so a list under *key* is
    always a sibling group and never has fewer than one item.
    """
    if key not in data:
        data[key] = [value] if array_policy is ArrayPolicy.ALWAYS else value
        return

    existing = data[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        data[key] = [existing, value]


def element_text(element: ET.Element) -> str:
    """Return the element's own character data, stripped.

    ElementTree stores text after a child element in that child's
    ``tail``; all of it belongs to *element*.
    """
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts).strip()


def local_name(name: str, config: XMLToJSONConfig) -> str:
    """Remove the ``{uri}`` namespace prefix ElementTree puts on names.

    If the name is ``{http://example.com}localname``, returns ``localname``
    unless namespace stripping is disabled.
    """
    if config.strip_namespaces and name.startswith("{"):
        return name.split("}", 1)[1]
    return name
