"""Unit tests for xmljson.paths -- absolute path building."""

from __future__ import annotations

from xmljson.paths import (
    ROOT_PATH,
    attribute_path,
    element_path,
    is_attribute_path,
    normalize_path,
    path_segments,
)


class TestPathBuilding:
    def test_root_element(self):
        assert element_path(ROOT_PATH, "a") == "/a"

    def test_nested_element(self):
        assert element_path(element_path(ROOT_PATH, "a"), "b") == "/a/b"

    def test_attribute(self):
        assert attribute_path("/a", "attr1") == "/a/@attr1"

    def test_siblings_share_a_path(self):
        assert element_path("/a", "b") == element_path("/a", "b")


class TestNormalizePath:
    def test_adds_leading_slash(self):
        assert normalize_path("a/@attr1") == "/a/@attr1"

    def test_keeps_existing_slash(self):
        assert normalize_path("/a/@attr1") == "/a/@attr1"


class TestIsAttributePath:
    def test_attribute(self):
        assert is_attribute_path("/a/b/@c") is True

    def test_element(self):
        assert is_attribute_path("/a/b") is False

    def test_namespaced_element(self):
        assert is_attribute_path("/{http://example.com/ns}a/{http://example.com/ns}b") is False

    def test_namespaced_attribute(self):
        assert is_attribute_path("/{http://example.com/ns}a/@{http://example.com/x}id") is True

    def test_attribute_uri_on_parent_ignored(self):
        assert is_attribute_path("/{http://example.com/@x}a") is False

    def test_empty_path(self):
        assert is_attribute_path("") is False


class TestPathSegments:
    def test_plain(self):
        assert path_segments("/a/b/@c") == ["a", "b", "@c"]

    def test_namespace_uri_kept_whole(self):
        assert path_segments("/{http://example.com/ns}root/{http://example.com/ns}item") == [
            "{http://example.com/ns}root",
            "{http://example.com/ns}item",
        ]

    def test_root(self):
        assert path_segments(ROOT_PATH) == []
