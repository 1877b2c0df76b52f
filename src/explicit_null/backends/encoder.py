"""
Encoder generator.

Per-field rules:
    Required        always written, no null check
    SingleOptional  written only when holding a value (never as null)
    DoubleOptional  nothing when ABSENT, otherwise written as-is,
                    so None becomes an explicit null

Write failures from the container propagate untouched.
"""

from typing import List, Sequence

from explicit_null.config import DEFAULT_SETTINGS, GeneratorSettings
from explicit_null.model import ClassifiedField, DoubleOptional, SingleOptional

from .members import INDENT, GeneratedMember, MemberKind, join_lines


def _encode_statement(classified: ClassifiedField, keys_name: str) -> List[str]:
    name = classified.name
    key = f"{keys_name}.{name}"
    if isinstance(classified.optionality, DoubleOptional):
        return [
            f"if self.{name} is not ABSENT:",
            f"{INDENT}container.write(self.{name}, {key})",
        ]
    if isinstance(classified.optionality, SingleOptional):
        return [f"container.write_if_present(self.{name}, {key})"]
    return [f"container.write(self.{name}, {key})"]


def generate_encoder(
    fields: Sequence[ClassifiedField],
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> GeneratedMember:
    """
    Generate the encode method source.

    Args:
        fields: Classified fields in declaration order
        settings: Generator settings (keys_name, encode_name)

    Returns:
        GeneratedMember of kind ENCODER
    """
    lines: List[str] = [
        f"def {settings.encode_name}(self, encoder):",
        f"{INDENT}container = encoder.container(keyed_by={settings.keys_name})",
    ]
    for classified in fields:
        for statement in _encode_statement(classified, settings.keys_name):
            lines.append(f"{INDENT}{statement}")
    return GeneratedMember(
        name=settings.encode_name,
        kind=MemberKind.ENCODER,
        source=join_lines(lines),
    )
