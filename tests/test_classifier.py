"""
Tests for the optionality classifier.

Classification must be total: every shape maps to exactly one of
Required, SingleOptional or DoubleOptional.
"""

from typing import List

import pytest
from explicit_null.classifier import classify, classify_fields, payload_shape, payload_type
from explicit_null.model import (
    DoubleOptional,
    Field,
    Required,
    SingleOptional,
)
from explicit_null.shapes import Named, OptionalOf


INT = Named("int", int)


class TestClassify:
    """Test classify() on each arity."""

    def test_named_is_required(self):
        assert classify(INT) == Required()

    def test_single_wrapper(self):
        assert classify(OptionalOf(INT)) == SingleOptional(inner=INT)

    def test_double_wrapper(self):
        """Inner of a double optional is the still-optional shape."""
        assert classify(OptionalOf(OptionalOf(INT))) == DoubleOptional(inner=OptionalOf(INT))

    def test_triple_wrapper_is_double(self):
        """Deeper nesting is a documented limitation, not an error."""
        shape = OptionalOf(OptionalOf(OptionalOf(INT)))
        result = classify(shape)
        assert isinstance(result, DoubleOptional)
        assert result.inner == OptionalOf(OptionalOf(INT))

    @pytest.mark.parametrize("shape", [
        INT,
        Named("Any"),
        OptionalOf(INT),
        OptionalOf(OptionalOf(INT)),
        OptionalOf(OptionalOf(OptionalOf(OptionalOf(INT)))),
        OptionalOf(Named("List[str]", List[str])),
    ])
    def test_totality(self, shape):
        """Every shape gets exactly one class."""
        result = classify(shape)
        matches = [isinstance(result, cls) for cls in (Required, SingleOptional, DoubleOptional)]
        assert matches.count(True) == 1

    def test_deterministic(self):
        shape = OptionalOf(OptionalOf(INT))
        assert classify(shape) == classify(shape)


class TestClassifyFields:
    """Test classify_fields()."""

    def test_order_preserved(self):
        fields = [
            Field("z", INT),
            Field("a", OptionalOf(INT)),
            Field("m", OptionalOf(OptionalOf(INT))),
        ]
        classified = classify_fields(fields)
        assert [c.name for c in classified] == ["z", "a", "m"]
        assert isinstance(classified[0].optionality, Required)
        assert isinstance(classified[1].optionality, SingleOptional)
        assert isinstance(classified[2].optionality, DoubleOptional)

    def test_empty(self):
        assert classify_fields([]) == []


class TestPayload:
    """Test payload extraction used by decoders."""

    def test_payload_shape_peels_all(self):
        assert payload_shape(OptionalOf(OptionalOf(OptionalOf(INT)))) == INT

    def test_payload_type(self):
        assert payload_type(OptionalOf(OptionalOf(Named("str", str)))) is str

    def test_payload_type_unknown(self):
        assert payload_type(Named("Any")) is None
