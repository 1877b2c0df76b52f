"""
Tests for the declaration model objects.

These tests verify:
    - Declarations and members are immutable
    - Retrieval methods
    - Positions render for diagnostics
"""

import pytest
from explicit_null.model import (
    ClassifiedField,
    ComputedProperty,
    DeclarationKind,
    Field,
    RecordDeclaration,
    Required,
    SourcePosition,
    StoredField,
)
from explicit_null.shapes import Named


def build_declaration() -> RecordDeclaration:
    return RecordDeclaration(
        name="Account",
        members=(
            StoredField("id", Named("int", int)),
            ComputedProperty("label"),
            StoredField("label_cache"),
        ),
    )


class TestRecordDeclaration:
    """Test RecordDeclaration objects."""

    def test_defaults(self):
        decl = RecordDeclaration(name="Empty")
        assert decl.kind == DeclarationKind.RECORD
        assert decl.members == ()
        assert decl.position is None

    def test_stored_fields(self):
        assert [f.name for f in build_declaration().stored_fields()] == ["id", "label_cache"]

    def test_get_member(self):
        decl = build_declaration()
        assert decl.get_member("label") == ComputedProperty("label")
        assert decl.get_member("missing") is None

    def test_immutable(self):
        decl = build_declaration()
        with pytest.raises(AttributeError):
            decl.name = "Other"


class TestStoredField:
    """Test StoredField objects."""

    def test_untyped_by_default(self):
        member = StoredField("x")
        assert member.declared_type is None
        assert member.init is True


class TestSourcePosition:
    """Test SourcePosition rendering."""

    def test_file_and_line(self):
        assert str(SourcePosition("models.py", 4)) == "models.py:4"

    def test_file_only(self):
        assert str(SourcePosition("models.py")) == "models.py"

    def test_unknown(self):
        assert str(SourcePosition()) == "<unknown>"


class TestClassifiedField:
    """Test ClassifiedField objects."""

    def test_name_from_field(self):
        classified = ClassifiedField(field=Field("id", Named("int", int)), optionality=Required())
        assert classified.name == "id"
