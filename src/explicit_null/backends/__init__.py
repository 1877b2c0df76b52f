"""Backends emitting Python source for keys, encoders and decoders."""

from .decoder import generate_decoder
from .encoder import generate_encoder
from .keys import generate_coding_keys
from .members import GeneratedMember, MemberKind, reserved_names

__all__ = [
    "GeneratedMember",
    "MemberKind",
    "generate_coding_keys",
    "generate_encoder",
    "generate_decoder",
    "reserved_names",
]
