"""
Field Extractor (Python class -> RecordDeclaration -> Fields).

Two steps:
    1. declaration_from_class: read a Python class into the declaration model
    2. extract_fields: pick the stored, typed, constructor-settable fields

Syntax Notes:
    - Records are dataclasses
    - Properties are computed members and never coded
    - ClassVar annotations are not fields (dataclasses already drops them)
"""

import dataclasses
import enum
import inspect
import logging
from typing import Any, List, get_type_hints

from .model import (
    ComputedProperty,
    DeclarationKind,
    Field,
    Member,
    Method,
    NestedType,
    RecordDeclaration,
    SourcePosition,
    StoredField,
)
from .shapes import shape_from_annotation


logger = logging.getLogger(__name__)


def _kind_of(obj: Any) -> DeclarationKind:
    if not isinstance(obj, type):
        return DeclarationKind.FUNCTION
    if issubclass(obj, enum.Enum):
        return DeclarationKind.ENUM
    if getattr(obj, "_is_protocol", False):
        return DeclarationKind.PROTOCOL
    if dataclasses.is_dataclass(obj):
        return DeclarationKind.RECORD
    return DeclarationKind.CLASS


def _body_line(lines: List[str], start: int) -> int:
    """Line of the first member: the one after the class/def header."""
    header = None
    for offset, text in enumerate(lines):
        stripped = text.lstrip()
        if header is None and stripped.startswith(("class ", "def ", "async def ")):
            header = offset
        if header is not None and text.split("#", 1)[0].rstrip().endswith(":"):
            return start + offset + 1
    return start


def _position_of(obj: Any) -> SourcePosition:
    try:
        filename = inspect.getsourcefile(obj)
    except TypeError:
        return SourcePosition()
    try:
        lines, start = inspect.getsourcelines(obj)
    except (OSError, TypeError):
        return SourcePosition(filename=filename)
    return SourcePosition(filename=filename, line=_body_line(lines, start))


def _other_members(cls: type, field_names: set) -> List[Member]:
    members: List[Member] = []
    for name, value in vars(cls).items():
        if name in field_names or (name.startswith("__") and name.endswith("__")):
            continue
        if isinstance(value, property):
            members.append(ComputedProperty(name))
        elif isinstance(value, type):
            members.append(NestedType(name))
        elif callable(value) or isinstance(value, (staticmethod, classmethod)):
            members.append(Method(name))
    return members


def declaration_from_class(obj: Any) -> RecordDeclaration:
    """
    Build a RecordDeclaration from whatever a decorator was applied to.

    Args:
        obj: Usually a dataclass; anything else yields a non-record kind

    Returns:
        RecordDeclaration (members only filled in for records)

    Raises:
        NameError: If a string annotation cannot be resolved
    """
    kind = _kind_of(obj)
    name = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", repr(obj))
    position = _position_of(obj)

    if kind != DeclarationKind.RECORD:
        logger.debug("%s is a %s, not a record", name, kind.value)
        return RecordDeclaration(name=name, kind=kind, position=position)

    hints = get_type_hints(obj)
    members: List[Member] = []
    for f in dataclasses.fields(obj):
        annotation = hints.get(f.name)
        shape = shape_from_annotation(annotation) if f.name in hints else None
        members.append(StoredField(name=f.name, declared_type=shape, init=f.init))

    members.extend(_other_members(obj, {m.name for m in members}))
    return RecordDeclaration(name=name, kind=kind, members=tuple(members), position=position)


def extract_fields(declaration: RecordDeclaration) -> List[Field]:
    """
    Ordered eligible fields of a record.

    Skips computed properties, nested types, methods, stored fields
    without a type annotation and stored fields outside the constructor.
    """
    fields: List[Field] = []
    for member in declaration.members:
        if not isinstance(member, StoredField):
            continue
        if member.declared_type is None or not member.init:
            logger.debug("skipping field %s.%s", declaration.name, member.name)
            continue
        fields.append(Field(name=member.name, declared_type=member.declared_type))
    return fields
