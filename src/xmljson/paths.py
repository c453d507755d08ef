"""XPath-like absolute paths used as override lookup keys.

Element segments are ``/name``, attribute segments ``/@name``.  Repeated
siblings share one path: ``<a><b/><b/></a>`` yields ``/a/b`` twice.
"""

from __future__ import annotations

ROOT_PATH = ""


def element_path(parent: str, name: str) -> str:
    """Return the path of child element *name* under *parent*."""
    return f"{parent}/{name}"


def attribute_path(parent: str, name: str) -> str:
    """Return the path of attribute *name* on the element at *parent*."""
    return f"{parent}/@{name}"


def normalize_path(path: str) -> str:
    """Add the leading ``/`` if it is missing."""
    if path.startswith("/"):
        return path
    return f"/{path}"


def path_segments(path: str) -> list[str]:
    """Split *path* on ``/``, leaving ``{uri}`` namespace prefixes intact."""
    segments: list[str] = []
    current: list[str] = []
    in_uri = False
    for char in path:
        if char == "{":
            in_uri = True
        elif char == "}":
            in_uri = False
        elif char == "/" and not in_uri:
            if current:
                segments.append("".join(current))
                current = []
            continue
        current.append(char)
    if current:
        segments.append("".join(current))
    return segments


def is_attribute_path(path: str) -> bool:
    """Return True if the last segment of *path* names an attribute."""
    segments = path_segments(path)
    return bool(segments) and segments[-1].startswith("@")
