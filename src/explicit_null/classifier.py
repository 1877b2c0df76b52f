"""
Optionality Classifier

Maps a field's TypeShape to exactly one OptionalityClass:

    Named                        -> Required
    OptionalOf(Named)            -> SingleOptional(Named)
    OptionalOf(OptionalOf(...))  -> DoubleOptional(OptionalOf(...))

Only two wrapper levels are recognized. A third or deeper wrapper is
classified as DoubleOptional with everything under the outer wrapper
as inner; no error is raised for it.
"""

from typing import Any, List, Sequence

from .model import (
    ClassifiedField,
    DoubleOptional,
    Field,
    OptionalityClass,
    Required,
    SingleOptional,
)
from .shapes import Named, OptionalOf, TypeShape


def classify(shape: TypeShape) -> OptionalityClass:
    """
    Classify one declared type shape.

    Pure and total: every shape gets exactly one class.
    """
    if not isinstance(shape, OptionalOf):
        return Required()
    if isinstance(shape.wrapped, OptionalOf):
        return DoubleOptional(inner=shape.wrapped)
    return SingleOptional(inner=shape.wrapped)


def classify_fields(fields: Sequence[Field]) -> List[ClassifiedField]:
    """Classify every field, keeping declaration order."""
    return [ClassifiedField(field=f, optionality=classify(f.declared_type)) for f in fields]


def payload_shape(shape: TypeShape) -> TypeShape:
    """Peel every optional wrapper."""
    while isinstance(shape, OptionalOf):
        shape = shape.wrapped
    return shape


def payload_type(shape: TypeShape) -> Any:
    """
    Runtime type a decoder should check the payload against.

    Returns None when the shape carries no runtime type.
    """
    inner = payload_shape(shape)
    if isinstance(inner, Named):
        return inner.py_type
    return None
