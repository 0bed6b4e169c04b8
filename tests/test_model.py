"""
Tests for the configuration model objects.

These tests verify:
    - Transformation kind matching
    - FieldTransformer immutability and defaults
    - Retrieval of entries by kind
"""

import dataclasses

import pytest
from sensorcfg.model import (
    STELLAR_TRANSFORMATION_CLASS,
    FieldTransformationKind,
    FieldTransformer,
    SensorParserConfig,
)


class TestFieldTransformationKind:
    """Test kind tag matching."""

    def test_matches_enum_name(self):
        assert FieldTransformationKind.STELLAR.matches("STELLAR")

    def test_matches_case_insensitively(self):
        """Tags written in lower case still name the kind."""
        assert FieldTransformationKind.STELLAR.matches("stellar")

    def test_matches_mapping_class(self):
        """The implementation class name is an alternative spelling."""
        assert FieldTransformationKind.STELLAR.matches(STELLAR_TRANSFORMATION_CLASS)

    def test_other_kinds_do_not_match(self):
        assert not FieldTransformationKind.STELLAR.matches("REMOVE")
        assert not FieldTransformationKind.STELLAR.matches("MY_CUSTOM_KIND")

    def test_missing_tag_matches_nothing(self):
        assert not FieldTransformationKind.STELLAR.matches(None)


class TestFieldTransformer:
    """Test FieldTransformer objects."""

    def test_defaults(self):
        t = FieldTransformer()
        assert t.transformation is None
        assert t.config == {}
        assert t.output is None
        assert t.extras == {}

    def test_is_stellar(self):
        assert FieldTransformer(transformation="STELLAR").is_stellar
        assert not FieldTransformer(transformation="IP_PROTOCOL").is_stellar

    def test_is_immutable(self):
        """Entries are replaced, never reassigned in place."""
        t = FieldTransformer(transformation="STELLAR")
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.transformation = "REMOVE"


class TestSensorParserConfig:
    """Test SensorParserConfig objects."""

    def test_empty_config(self):
        c = SensorParserConfig()
        assert c.field_transformations == []
        assert c.fields == {}
        assert c.transformations_position is None

    def test_other_kinds_are_recognised(self):
        assert FieldTransformer(transformation="REMOVE").is_kind(FieldTransformationKind.REMOVE)
        assert FieldTransformer(transformation="ip_protocol").is_kind(FieldTransformationKind.IP_PROTOCOL)
        assert not FieldTransformer(transformation="REMOVE").is_kind(FieldTransformationKind.IP_PROTOCOL)

    def test_source_is_not_compared(self):
        """Entries read from a document equal the same entry built by hand."""
        built = FieldTransformer(transformation="REMOVE")
        read = FieldTransformer(transformation="REMOVE", source={"transformation": "REMOVE"})
        assert built == read
