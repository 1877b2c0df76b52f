"""
Key enumeration generator.

Emits one CodingKey per field, named after the field, in declaration
order. Encoder and decoder both refer to this class by name, so the
two always agree on the key set.

    class CodingKeys(_CodingKeySet):
        name = _CodingKey("name", 0)
        age = _CodingKey("age", 1)

The helpers are bound under private names so that a field called
CodingKey cannot shadow the constructor inside the class body.
"""

from typing import List, Sequence

from explicit_null.codec import CodingKey, CodingKeySet
from explicit_null.config import DEFAULT_SETTINGS, GeneratorSettings
from explicit_null.model import ClassifiedField

from .members import INDENT, KEY_CLASS, KEY_SET_CLASS, GeneratedMember, MemberKind, join_lines


def generate_coding_keys(
    fields: Sequence[ClassifiedField],
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> GeneratedMember:
    """
    Generate the key class source.

    Args:
        fields: Classified fields in declaration order
        settings: Generator settings (keys_name)

    Returns:
        GeneratedMember of kind KEYS
    """
    lines: List[str] = [f"class {settings.keys_name}({KEY_SET_CLASS}):"]
    for index, classified in enumerate(fields):
        lines.append(f'{INDENT}{classified.name} = {KEY_CLASS}("{classified.name}", {index})')
    if not fields:
        lines.append(f"{INDENT}pass")
    return GeneratedMember(
        name=settings.keys_name,
        kind=MemberKind.KEYS,
        source=join_lines(lines),
        bindings={KEY_CLASS: CodingKey, KEY_SET_CLASS: CodingKeySet},
    )
