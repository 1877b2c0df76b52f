"""
Keyed container contracts and a dict-backed implementation.

Generated code talks to documents only through these calls:

    encoder.container(keyed_by=CodingKeys) -> KeyedEncodingContainer
        write(value, key)              always writes (None -> explicit null)
        write_if_present(value, key)   writes nothing for None / ABSENT

    decoder.container(keyed_by=CodingKeys) -> KeyedDecodingContainer
        contains(key)                  key present in the document
        read(type_, key)               fails on absent, null or mismatch
                                       (element types of List, Tuple and
                                       Dict payloads are checked too)
        read_if_present(type_, key)    None on absent or null

DictEncoder / DictDecoder are the in-memory implementation; JSON and
YAML text are handled in explicit_null.serialization on top of them.
"""

import types
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union, get_args, get_origin

from .errors import DecodingError, FieldDecodeFailure, FieldEncodeFailure
from .shapes import ABSENT


@dataclass(frozen=True)
class CodingKey:
    """
    One symbolic key.

    Properties:
        string_value: Key as written in the document
        int_value: Position in the key set (declaration order)
    """

    string_value: str
    int_value: int

    def __str__(self) -> str:
        return self.string_value


class _CodingKeySetMeta(type):
    # Lives on the metaclass so a field called "keys" or "get" cannot shadow it.

    def __new__(mcs, name, bases, namespace):
        cls = super().__new__(mcs, name, bases, namespace)
        cls.__coding_keys__ = tuple(v for v in namespace.values() if isinstance(v, CodingKey))
        return cls

    def __iter__(cls):
        return iter(cls.__coding_keys__)

    def __len__(cls) -> int:
        return len(cls.__coding_keys__)

    def __contains__(cls, value: str) -> bool:
        return any(key.string_value == value for key in cls.__coding_keys__)

    def __getitem__(cls, value: str) -> CodingKey:
        for key in cls.__coding_keys__:
            if key.string_value == value:
                return key
        raise KeyError(value)


class CodingKeySet(metaclass=_CodingKeySetMeta):
    """
    Base class for generated key classes.

    Subclasses declare CodingKey class attributes. Iterating the class
    yields them in declaration order; CodingKeys["name"] looks one up
    by its string value.
    """
    pass


class KeyedEncodingContainer(ABC):

    @abstractmethod
    def write(self, value: Any, key: CodingKey) -> None:
        ...

    @abstractmethod
    def write_if_present(self, value: Any, key: CodingKey) -> None:
        ...


class KeyedDecodingContainer(ABC):

    @abstractmethod
    def contains(self, key: CodingKey) -> bool:
        ...

    @abstractmethod
    def read(self, type_: Any, key: CodingKey) -> Any:
        ...

    @abstractmethod
    def read_if_present(self, type_: Any, key: CodingKey) -> Any:
        ...


class Encoder(ABC):

    @abstractmethod
    def container(self, keyed_by: type) -> KeyedEncodingContainer:
        ...


class Decoder(ABC):

    @abstractmethod
    def container(self, keyed_by: type) -> KeyedDecodingContainer:
        ...


class Encodable(ABC):
    """Conformance marker for classes with a generated encoder."""
    pass


class Decodable(ABC):
    """Conformance marker for classes with a generated decoder."""
    pass


# =========================================================================
# PAYLOAD CHECKS
# =========================================================================

_SCALARS = (bool, int, float, str)


def _unencodable(value: Any) -> Optional[str]:
    """Return a reason if value cannot go into a document, else None."""
    if value is None or isinstance(value, _SCALARS):
        return None
    if isinstance(value, (list, tuple)):
        for item in value:
            reason = _unencodable(item)
            if reason:
                return reason
        return None
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                return f"mapping key {k!r} is not a string"
            reason = _unencodable(v)
            if reason:
                return reason
        return None
    return f"unsupported payload type {type(value).__name__}"


def _matches(value: Any, type_: Any) -> bool:
    """Check value against type_, descending into list, tuple and dict payloads."""
    if type_ is None or type_ is Any or type_ is object:
        return True
    origin = get_origin(type_)
    args = get_args(type_)
    if origin is Union or origin is types.UnionType:
        return any(_matches(value, arg) for arg in args)
    base = origin if origin is not None else type_
    if not isinstance(base, type):
        return True
    if isinstance(value, bool) and base is not bool:
        return False
    if base is float and isinstance(value, int):
        return True
    if base is tuple and isinstance(value, list):
        value = tuple(value)
    if not isinstance(value, base):
        return False
    if not args:
        return True

    if base is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return all(_matches(item, args[0]) for item in value)
        return len(value) == len(args) and all(
            _matches(item, arg) for item, arg in zip(value, args)
        )
    if isinstance(value, (list, set, frozenset)):
        return all(_matches(item, args[0]) for item in value)
    if isinstance(value, dict) and len(args) == 2:
        return all(
            _matches(k, args[0]) and _matches(v, args[1]) for k, v in value.items()
        )
    return True


def _type_label(type_: Any) -> str:
    if isinstance(type_, type):
        return type_.__name__
    return repr(type_).replace("typing.", "")


# =========================================================================
# DICT-BACKED IMPLEMENTATION
# =========================================================================


class DictEncodingContainer(KeyedEncodingContainer):

    def __init__(self, storage: Dict[str, Any]):
        self._storage = storage

    def write(self, value: Any, key: CodingKey) -> None:
        reason = _unencodable(value)
        if reason:
            raise FieldEncodeFailure(key.string_value, reason)
        if isinstance(value, tuple):
            value = list(value)
        self._storage[key.string_value] = value

    def write_if_present(self, value: Any, key: CodingKey) -> None:
        if value is None or value is ABSENT:
            return
        self.write(value, key)


class DictDecodingContainer(KeyedDecodingContainer):

    def __init__(self, storage: Mapping[str, Any]):
        self._storage = storage

    def contains(self, key: CodingKey) -> bool:
        return key.string_value in self._storage

    def read(self, type_: Any, key: CodingKey) -> Any:
        name = key.string_value
        if name not in self._storage:
            raise FieldDecodeFailure(name, "key not found")
        value = self._storage[name]
        if value is None:
            raise FieldDecodeFailure(name, f"expected {_type_label(type_)} but found null")
        if not _matches(value, type_):
            raise FieldDecodeFailure(
                name, f"expected {_type_label(type_)} but found {type(value).__name__}"
            )
        if get_origin(type_) is tuple or type_ is tuple:
            return tuple(value)
        return value

    def read_if_present(self, type_: Any, key: CodingKey) -> Any:
        if self._storage.get(key.string_value) is None:
            return None
        return self.read(type_, key)


class DictEncoder(Encoder):
    """
    Collects one keyed container into a dict.

    Keys appear in write order, which is declaration order for
    generated encoders.
    """

    def __init__(self):
        self.document: Dict[str, Any] = {}

    def container(self, keyed_by: type) -> KeyedEncodingContainer:
        return DictEncodingContainer(self.document)


class DictDecoder(Decoder):
    """Reads one keyed container from a mapping."""

    def __init__(self, document: Any):
        self.document = document

    def container(self, keyed_by: type) -> KeyedDecodingContainer:
        if not isinstance(self.document, Mapping):
            raise DecodingError(
                f"Expected a keyed container for {getattr(keyed_by, '__qualname__', keyed_by)}, "
                f"found {type(self.document).__name__}"
            )
        return DictDecodingContainer(self.document)


__all__: List[str] = [
    "CodingKey",
    "CodingKeySet",
    "KeyedEncodingContainer",
    "KeyedDecodingContainer",
    "Encoder",
    "Decoder",
    "Encodable",
    "Decodable",
    "DictEncoder",
    "DictDecoder",
]
