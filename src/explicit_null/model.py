"""
Core Declaration Model Objects

Defines the data structures the generator works on:
    - Declarations (the thing a decorator is attached to)
    - Members (stored fields, computed properties, nested types, methods)
    - Fields (eligible stored fields, name + shape)
    - Optionality classes (Required / SingleOptional / DoubleOptional)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about Python source generation
        - Are immutable
        - Are derived fresh for every generation call
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .shapes import TypeShape


class DeclarationKind(Enum):
    """Category of the declaration a generator is attached to."""
    RECORD = "record"
    CLASS = "class"
    ENUM = "enum"
    PROTOCOL = "protocol"
    FUNCTION = "function"


@dataclass(frozen=True)
class SourcePosition:
    """
    Where a declaration lives, for diagnostics.

    Properties:
        filename: Source file (may be None for dynamically built classes)
        line: 1-based line of the declaration (optional)
    """

    filename: Optional[str] = None
    line: Optional[int] = None

    def __str__(self) -> str:
        if self.filename is None:
            return "<unknown>"
        if self.line is None:
            return self.filename
        return f"{self.filename}:{self.line}"


class Member:
    """Base class for anything declared inside a record."""
    name: str


@dataclass(frozen=True)
class StoredField(Member):
    """
    A stored field.

    Properties:
        name: Field identifier
        declared_type:
            Shape of the explicit type annotation.
            None when the field has no annotation; such fields are skipped.
        init:
            Whether the constructor accepts this field.
            Fields outside the constructor are skipped.
    """

    name: str
    declared_type: Optional[TypeShape] = None
    init: bool = True


@dataclass(frozen=True)
class ComputedProperty(Member):
    """A property with a getter (and maybe a setter); never coded."""

    name: str


@dataclass(frozen=True)
class NestedType(Member):
    """A class declared inside the record."""

    name: str


@dataclass(frozen=True)
class Method(Member):
    """A function declared inside the record."""

    name: str


@dataclass(frozen=True)
class RecordDeclaration:
    """
    Everything the generator may look at for one target.

    Built by the extractor from a Python class, or by hand when the
    record shape comes from an explicit schema.

    Properties:
        name: Declared type name
        kind: DeclarationKind; only RECORD is accepted
        members: Members in declaration order
        position: Where to point diagnostics
    """

    name: str
    kind: DeclarationKind = DeclarationKind.RECORD
    members: Tuple[Member, ...] = field(default_factory=tuple)
    position: Optional[SourcePosition] = None

    def stored_fields(self) -> List[StoredField]:
        return [m for m in self.members if isinstance(m, StoredField)]

    def get_member(self, name: str) -> Optional[Member]:
        """
        Retrieve a member by name.

        Returns:
            First member with that name, or None if not found
        """
        for member in self.members:
            if member.name == name:
                return member
        return None


@dataclass(frozen=True)
class Field:
    """
    One eligible stored field.

    Identity is the name.
    """

    name: str
    declared_type: TypeShape


class OptionalityClass:
    """Base class for the three optionality arities."""
    pass


@dataclass(frozen=True)
class Required(OptionalityClass):
    """Always written, must always be present on read."""
    pass


@dataclass(frozen=True)
class SingleOptional(OptionalityClass):
    """
    Two-state field: missing-or-null vs value.

    Absent keys and explicit nulls both collapse to the missing state.

    Properties:
        inner: Shape under the single optional wrapper
    """

    inner: TypeShape


@dataclass(frozen=True)
class DoubleOptional(OptionalityClass):
    """
    Three-state field: absent, present-null, present-value.

    Properties:
        inner:
            Shape under the outer wrapper. Itself still optional,
            so its null/value state tells present-null from present-value.
    """

    inner: TypeShape


@dataclass(frozen=True)
class ClassifiedField:
    """A field together with its optionality class."""

    field: Field
    optionality: OptionalityClass

    @property
    def name(self) -> str:
        return self.field.name
