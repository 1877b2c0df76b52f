"""
Decoder generator.

Emits a constructor-style classmethod. Per-field rules:
    Required        read(), fails on absent / null / mismatch
    SingleOptional  read_if_present(); absent and null both give None
    DoubleOptional  ABSENT when the key is missing, otherwise
                    read_if_present() so null gives None

Read failures from the container propagate untouched; they already
carry the key that failed.
"""

from typing import Any, Dict, List, Sequence

from explicit_null.classifier import payload_type
from explicit_null.config import DEFAULT_SETTINGS, GeneratorSettings
from explicit_null.model import ClassifiedField, DoubleOptional, SingleOptional

from .members import INDENT, GeneratedMember, MemberKind, join_lines, type_binding


def _decode_statement(classified: ClassifiedField, keys_name: str) -> List[str]:
    name = classified.name
    key = f"{keys_name}.{name}"
    type_name = type_binding(name)
    target = f'values["{name}"]'
    if isinstance(classified.optionality, DoubleOptional):
        return [
            f"if container.contains({key}):",
            f"{INDENT}{target} = container.read_if_present({type_name}, {key})",
            "else:",
            f"{INDENT}{target} = ABSENT",
        ]
    if isinstance(classified.optionality, SingleOptional):
        return [f"{target} = container.read_if_present({type_name}, {key})"]
    return [f"{target} = container.read({type_name}, {key})"]


def generate_decoder(
    fields: Sequence[ClassifiedField],
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> GeneratedMember:
    """
    Generate the decode classmethod source.

    Args:
        fields: Classified fields in declaration order
        settings: Generator settings (keys_name, decode_name)

    Returns:
        GeneratedMember of kind DECODER, with payload types in bindings
    """
    lines: List[str] = [
        "@classmethod",
        f"def {settings.decode_name}(cls, decoder):",
        f"{INDENT}container = decoder.container(keyed_by={settings.keys_name})",
        f"{INDENT}values = {{}}",
    ]
    bindings: Dict[str, Any] = {}
    for classified in fields:
        bindings[type_binding(classified.name)] = payload_type(classified.field.declared_type)
        for statement in _decode_statement(classified, settings.keys_name):
            lines.append(f"{INDENT}{statement}")
    lines.append(f"{INDENT}return cls(**values)")
    return GeneratedMember(
        name=settings.decode_name,
        kind=MemberKind.DECODER,
        source=join_lines(lines),
        bindings=bindings,
    )
