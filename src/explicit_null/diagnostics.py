"""
Validation and diagnostics.

Generation either proceeds or produces diagnostics, never both:
a rejected declaration gets no keys, no encoder, no decoder and no
conformances.

How a diagnostic is surfaced (warning, exception, collected list)
is the sink's business, not the generator's.
"""

import warnings
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .backends.members import reserved_names
from .config import DEFAULT_SETTINGS, GeneratorSettings
from .errors import GenerationError
from .model import DeclarationKind, RecordDeclaration, SourcePosition


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


@dataclass(frozen=True)
class Diagnostic:
    """
    A structured problem report.

    Properties:
        position: Where the problem is (the declaration's member list)
        message: "<generator>: <reason>"
        severity: Always ERROR for this generator
    """

    position: Optional[SourcePosition]
    message: str
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        where = str(self.position) if self.position is not None else "<unknown>"
        return f"{where}: {self.severity.value}: {self.message}"


class DiagnosticWarning(UserWarning):
    """Category used by WarningsSink."""
    pass


class DiagnosticSink(ABC):
    """Receives diagnostics from a generation call."""

    @abstractmethod
    def report(self, diagnostic: Diagnostic) -> None:
        ...


class CollectingSink(DiagnosticSink):
    """Keeps every diagnostic in a list."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)


class WarningsSink(DiagnosticSink):
    """Issues each diagnostic as a DiagnosticWarning."""

    def report(self, diagnostic: Diagnostic) -> None:
        warnings.warn(str(diagnostic), DiagnosticWarning, stacklevel=2)


class RaisingSink(DiagnosticSink):
    """Turns the first diagnostic into a GenerationError."""

    def report(self, diagnostic: Diagnostic) -> None:
        raise GenerationError([diagnostic])


def validate_declaration(
    declaration: RecordDeclaration,
    generator_name: str,
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> List[Diagnostic]:
    """
    Decide whether generation may proceed.

    Args:
        declaration: Target declaration
        generator_name: Used as message prefix (e.g., "explicit_null_codable")
        settings: Generator settings

    Returns:
        Empty list to proceed, otherwise the error diagnostics
    """
    if declaration.kind != DeclarationKind.RECORD:
        return [
            Diagnostic(
                position=declaration.position,
                message=f"{generator_name}: target declaration is not a record type",
            )
        ]

    diagnostics: List[Diagnostic] = []
    if settings.reject_duplicate_fields:
        counts = Counter(f.name for f in declaration.stored_fields())
        for name, count in counts.items():
            if count > 1:
                diagnostics.append(
                    Diagnostic(
                        position=declaration.position,
                        message=f"{generator_name}: duplicate field name '{name}'",
                    )
                )

    reserved = reserved_names(settings)
    for member in declaration.stored_fields():
        if member.name in reserved:
            diagnostics.append(
                Diagnostic(
                    position=declaration.position,
                    message=f"{generator_name}: field name '{member.name}' is reserved for generated code",
                )
            )
    return diagnostics
