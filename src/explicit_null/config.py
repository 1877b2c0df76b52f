"""Generator settings."""

from dataclasses import dataclass
from enum import Enum


class DiagnosticMode(Enum):
    """What the decorators do with diagnostics when no sink is given."""
    WARN = "warn"      # warnings.warn, class returned unchanged
    RAISE = "raise"    # GenerationError


@dataclass(frozen=True)
class GeneratorSettings:
    """
    Names and switches used by the generator.

    Properties:
        keys_name: Name of the generated key class
        encode_name: Name of the generated encode method
        decode_name: Name of the generated constructor-style classmethod
        reject_duplicate_fields: Report duplicate stored field names as errors
        diagnostic_mode: Default sink behaviour for the decorators
    """

    keys_name: str = "CodingKeys"
    encode_name: str = "encode"
    decode_name: str = "from_decoder"
    reject_duplicate_fields: bool = True
    diagnostic_mode: DiagnosticMode = DiagnosticMode.WARN


DEFAULT_SETTINGS = GeneratorSettings()
