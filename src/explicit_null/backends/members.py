"""Generated member artifacts shared by the key, encoder and decoder backends."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from explicit_null.config import GeneratorSettings


class MemberKind(Enum):
    """What a generated member is."""
    KEYS = "keys"
    ENCODER = "encoder"
    DECODER = "decoder"


@dataclass(frozen=True)
class GeneratedMember:
    """
    One member to splice into a record.

    Properties:
        name: Attribute name on the record (e.g., "CodingKeys", "encode")
        kind: MemberKind
        source: Python source defining `name` at module level
        bindings: Extra global names the source refers to (payload types, key helpers)
    """

    name: str
    kind: MemberKind
    source: str
    bindings: Dict[str, Any] = field(default_factory=dict)


INDENT = "    "

# Names the key class body refers to; a field with one of these names would
# shadow the helper while the body runs.
KEY_CLASS = "_CodingKey"
KEY_SET_CLASS = "_CodingKeySet"


def type_binding(field_name: str) -> str:
    """Global name under which a field's payload type is bound."""
    return f"_type_{field_name}"


def join_lines(lines: List[str]) -> str:
    return "\n".join(lines) + "\n"


def reserved_names(settings: GeneratorSettings) -> List[str]:
    """Field names that would collide with generated members or helpers."""
    return [
        settings.keys_name,
        settings.encode_name,
        settings.decode_name,
        KEY_CLASS,
        KEY_SET_CLASS,
    ]
