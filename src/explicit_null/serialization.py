"""
Serialization helpers for explicit-null records.

Provides JSON/YAML text on top of the generated encode/from_decoder
members via an intermediate dict representation.

Key order follows field declaration order in every format; nothing is
sorted, so absent keys and explicit nulls stay visible in the output.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Type, TypeVar

import yaml

from explicit_null.codec import DictDecoder, DictEncoder
from explicit_null.config import DEFAULT_SETTINGS, GeneratorSettings


R = TypeVar("R")


def to_dict(obj: Any, settings: GeneratorSettings = DEFAULT_SETTINGS) -> Dict[str, Any]:
    encode = getattr(obj, settings.encode_name, None)
    if encode is None:
        raise TypeError(f"{type(obj).__name__} has no generated {settings.encode_name}()")
    encoder = DictEncoder()
    encode(encoder)
    return encoder.document


def from_dict(cls: Type[R], d: Any, settings: GeneratorSettings = DEFAULT_SETTINGS) -> R:
    decode = getattr(cls, settings.decode_name, None)
    if decode is None:
        raise TypeError(f"{cls.__name__} has no generated {settings.decode_name}()")
    return decode(DictDecoder(d))


def to_json(obj: Any, settings: GeneratorSettings = DEFAULT_SETTINGS) -> str:
    return json.dumps(to_dict(obj, settings), separators=(",", ":"))


def from_json(cls: Type[R], s: str, settings: GeneratorSettings = DEFAULT_SETTINGS) -> R:
    d = json.loads(s)
    return from_dict(cls, d, settings)


def to_yaml(obj: Any, settings: GeneratorSettings = DEFAULT_SETTINGS) -> str:
    return yaml.safe_dump(to_dict(obj, settings), sort_keys=False)


def from_yaml(cls: Type[R], s: str, settings: GeneratorSettings = DEFAULT_SETTINGS) -> R:
    d = yaml.safe_load(s)
    return from_dict(cls, d, settings)
