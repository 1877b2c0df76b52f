"""
Exceptions raised by generated code, the codec adapter and the decorators.

Runtime failures are never swallowed or replaced by defaults:
tri-state correctness depends on exact presence/null/value distinctions.
"""

from typing import Sequence


class CodingError(Exception):
    """Base class for encode/decode failures."""
    pass


class EncodingError(CodingError):
    """Raised when a document cannot be written."""
    pass


class DecodingError(CodingError):
    """Raised when a document cannot be read."""
    pass


class FieldEncodeFailure(EncodingError):
    """Raised when a container refuses to write a field's value."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Cannot encode key '{key}': {reason}")


class FieldDecodeFailure(DecodingError):
    """Raised when a field's key is missing, null or holds the wrong payload."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Cannot decode key '{key}': {reason}")


class GenerationError(Exception):
    """Raised by RaisingSink when a declaration is rejected."""

    def __init__(self, diagnostics: Sequence):
        self.diagnostics = list(diagnostics)
        super().__init__("; ".join(d.message for d in self.diagnostics))
