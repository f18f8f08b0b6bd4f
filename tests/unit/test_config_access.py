"""Tests for configuration access helpers."""

import pytest

from snowflake_loader.core.config_access import get_path, get_section, has_keys


class TestGetSection:
    """Tests for get_section."""

    def test_existing_section(self):
        """A nested mapping is returned as-is."""
        section = {"s3_bucket_name": "b"}
        assert get_section({"loading_method": section}, "loading_method") is section

    def test_missing_section(self):
        """A missing key yields an empty mapping."""
        assert dict(get_section({}, "loading_method")) == {}

    def test_non_mapping_section(self):
        """A scalar or list value yields an empty mapping."""
        assert dict(get_section({"loading_method": "x"}, "loading_method")) == {}
        assert dict(get_section({"loading_method": None}, "loading_method")) == {}

    def test_empty_section_is_read_only(self):
        """The empty mapping handed out cannot be modified."""
        section = get_section({}, "loading_method")
        with pytest.raises(TypeError):
            section["s3_bucket_name"] = "b"  # type: ignore[index]


class TestHasKeys:
    """Tests for has_keys."""

    def test_all_present(self):
        assert has_keys({"a": 1, "b": ""}, "a", "b") is True

    def test_one_missing(self):
        assert has_keys({"a": 1}, "a", "b") is False

    def test_values_ignored(self):
        assert has_keys({"a": None}, "a") is True


class TestGetPath:
    """Tests for get_path."""

    def test_nested_value(self):
        document = {"properties": {"host": {"pattern": "^x$"}}}
        assert get_path(document, "properties.host.pattern") == "^x$"

    def test_missing_segment_raises(self):
        with pytest.raises(KeyError):
            get_path({"properties": {}}, "properties.host.pattern")

    def test_missing_segment_default(self):
        assert get_path({"properties": {}}, "properties.host.pattern", default=None) is None

    def test_non_mapping_segment(self):
        assert get_path({"properties": "x"}, "properties.host", default="d") == "d"
