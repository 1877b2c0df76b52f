"""
Type Shapes for Explicit-Null Coding

Every field's declared type is reduced to a tiny tree before anything
is generated from it. The tree only knows one thing about a type:
whether it is "optional-of-X", recursively.

    int                      -> Named("int")
    Optional[int]            -> OptionalOf(Named("int"))
    Absentable[Optional[int]] -> OptionalOf(OptionalOf(Named("int")))

ARCHITECTURAL RULE:
    Shapes are structure only.
    Classification lives in the classifier.
    Source text lives in the backends.
"""

import types
from abc import ABC
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union, get_args, get_origin


T = TypeVar("T")


class _AbsentType:
    """Type of the ABSENT singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_AbsentType, ())


ABSENT = _AbsentType()
"""
Outer-absent state of a double-optional field.

    ABSENT        -> key not written / key not found
    None          -> key written with an explicit null
    anything else -> key written with that value
"""


class Absentable(Generic[T]):
    """
    Annotation marker for an outer optional layer.

    Python folds Optional[Optional[X]] into Optional[X], so the outer
    layer of a tri-state field has to be spelled differently:

        name: Absentable[Optional[str]] = ABSENT

    Never instantiated. It only exists to be read back from annotations.
    """

    def __new__(cls, *args, **kwargs):
        raise TypeError("Absentable is an annotation marker and cannot be instantiated")


class TypeShape(ABC):
    """
    Base class for all type shapes.

    Intentionally minimal; exists to give the shape variants a common type.
    """
    pass


@dataclass(frozen=True)
class Named(TypeShape):
    """
    A non-optional type.

    Properties:
        name: Display name of the type (e.g., "int", "List[str]")
        py_type: The runtime type used for decode checks.
                 None means "accept any payload".
    """

    name: str
    py_type: Any = None


@dataclass(frozen=True)
class OptionalOf(TypeShape):
    """
    One optional wrapper around another shape.

    Properties:
        wrapped: The shape inside this wrapper
    """

    wrapped: TypeShape


def _type_name(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def _is_union(annotation: Any) -> bool:
    origin = get_origin(annotation)
    return origin is Union or origin is types.UnionType


def shape_from_annotation(annotation: Any) -> TypeShape:
    """
    Translate a resolved Python annotation into a TypeShape.

    Args:
        annotation: Annotation as returned by typing.get_type_hints

    Returns:
        Named or OptionalOf tree
    """
    if get_origin(annotation) is Absentable:
        (inner,) = get_args(annotation)
        return OptionalOf(shape_from_annotation(inner))

    if _is_union(annotation):
        args = get_args(annotation)
        rest = [arg for arg in args if arg is not type(None)]
        if len(rest) == len(args):
            return Named(_type_name(annotation), annotation)
        if len(rest) == 1:
            return OptionalOf(shape_from_annotation(rest[0]))
        # Optional over a multi-member union: payload stays opaque
        payload = Union[tuple(rest)]
        return OptionalOf(Named(_type_name(payload), payload))

    if annotation is Any:
        return Named("Any", None)

    return Named(_type_name(annotation), annotation)


def render_shape(shape: Optional[TypeShape]) -> str:
    """Readable form of a shape, for logs and diagnostics."""
    if shape is None:
        return "?"
    if isinstance(shape, OptionalOf):
        return f"Optional[{render_shape(shape.wrapped)}]"
    if isinstance(shape, Named):
        return shape.name
    return "?"
