"""
Generation pipeline.

    RecordDeclaration
        -> validate_declaration     (diagnostics stop everything)
        -> extract_fields
        -> classify_fields
        -> keys / encoder / decoder backends
        -> GenerationResult

expand() is a pure function of its arguments. It never touches the
target class; attaching the result is the host's job (see macros).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .backends import GeneratedMember, generate_coding_keys, generate_decoder, generate_encoder
from .classifier import classify_fields
from .config import DEFAULT_SETTINGS, GeneratorSettings
from .diagnostics import Diagnostic, validate_declaration
from .extractor import extract_fields
from .model import RecordDeclaration
from .shapes import render_shape


logger = logging.getLogger(__name__)


class Conformance(Enum):
    """Capabilities a record gains from generation."""
    ENCODABLE = "Encodable"
    DECODABLE = "Decodable"


class Capability(Enum):
    """Requested generation mode."""
    ENCODABLE = "explicit_null_encodable"
    DECODABLE = "explicit_null_decodable"
    CODABLE = "explicit_null_codable"

    @property
    def generator_name(self) -> str:
        return self.value

    @property
    def encodes(self) -> bool:
        return self in (Capability.ENCODABLE, Capability.CODABLE)

    @property
    def decodes(self) -> bool:
        return self in (Capability.DECODABLE, Capability.CODABLE)


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one generation call.

    Either members/conformances are filled in, or diagnostics are;
    never both.
    """

    members: Tuple[GeneratedMember, ...] = field(default_factory=tuple)
    conformances: Tuple[Conformance, ...] = field(default_factory=tuple)
    diagnostics: Tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def get_member(self, name: str) -> Optional[GeneratedMember]:
        for member in self.members:
            if member.name == name:
                return member
        return None


def expand(
    declaration: RecordDeclaration,
    capability: Capability = Capability.CODABLE,
    settings: Optional[GeneratorSettings] = None,
) -> GenerationResult:
    """
    Generate members and conformances for one declaration.

    Args:
        declaration: Target declaration
        capability: Encode-only, decode-only, or both
        settings: Generator settings (defaults if None)

    Returns:
        GenerationResult
    """
    settings = settings or DEFAULT_SETTINGS

    diagnostics = validate_declaration(declaration, capability.generator_name, settings)
    if diagnostics:
        logger.debug("%s rejected %s: %d diagnostic(s)",
                     capability.generator_name, declaration.name, len(diagnostics))
        return GenerationResult(diagnostics=tuple(diagnostics))

    fields = classify_fields(extract_fields(declaration))
    logger.debug("%s: %s has %d coded field(s)",
                 capability.generator_name, declaration.name, len(fields))
    for classified in fields:
        logger.debug("  %s: %s -> %s", classified.name,
                     render_shape(classified.field.declared_type),
                     type(classified.optionality).__name__)

    members: List[GeneratedMember] = [generate_coding_keys(fields, settings)]
    conformances: List[Conformance] = []
    if capability.encodes:
        members.append(generate_encoder(fields, settings))
        conformances.append(Conformance.ENCODABLE)
    if capability.decodes:
        members.append(generate_decoder(fields, settings))
        conformances.append(Conformance.DECODABLE)

    return GenerationResult(members=tuple(members), conformances=tuple(conformances))
