"""
Example records for the demo and tests.

ProfilePatch is a partial-update payload: a client leaves a key out to
keep the stored value, sends null to clear it, or sends a value to set it.
Only the tri-state fields can express all three.
"""
from dataclasses import dataclass
from typing import List, Optional

from explicit_null.macros import explicit_null_codable
from explicit_null.model import (
    ComputedProperty,
    DeclarationKind,
    Method,
    RecordDeclaration,
    StoredField,
)
from explicit_null.shapes import ABSENT, Absentable, Named, OptionalOf


@explicit_null_codable
@dataclass
class ProfilePatch:
    user_id: int
    nickname: Absentable[Optional[str]] = ABSENT
    age: Absentable[Optional[int]] = ABSENT
    is_blocked: Absentable[Optional[bool]] = ABSENT
    tags: Optional[List[str]] = None
    newsletter: Optional[bool] = None

    @property
    def is_noop(self) -> bool:
        return (
            self.nickname is ABSENT
            and self.age is ABSENT
            and self.is_blocked is ABSENT
            and self.tags is None
            and self.newsletter is None
        )


def build_example_declaration() -> RecordDeclaration:
    """
    The same shape as ProfilePatch, written as an explicit schema.

    Includes members the extractor must skip: an untyped stored field,
    a computed property and a method.
    """
    return RecordDeclaration(
        name="ProfilePatch",
        kind=DeclarationKind.RECORD,
        members=(
            StoredField("user_id", Named("int", int)),
            StoredField("nickname", OptionalOf(OptionalOf(Named("str", str)))),
            StoredField("age", OptionalOf(OptionalOf(Named("int", int)))),
            StoredField("is_blocked", OptionalOf(OptionalOf(Named("bool", bool)))),
            StoredField("tags", OptionalOf(Named("List[str]", List[str]))),
            StoredField("newsletter", OptionalOf(Named("bool", bool))),
            StoredField("revision"),
            ComputedProperty("is_noop"),
            Method("apply_to"),
        ),
    )
