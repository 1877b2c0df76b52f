"""
Tests for the class decorators.

These tests verify:
    - Generated members are compiled and attached
    - Encode-only / decode-only / both attach the right members
    - Conformances are registered only on success
    - Non-records are reported and left untouched
"""

from dataclasses import dataclass, make_dataclass
from typing import Optional

import pytest
from explicit_null.codec import CodingKeySet, Decodable, DictDecoder, DictEncoder, Encodable
from explicit_null.config import DiagnosticMode, GeneratorSettings
from explicit_null.diagnostics import CollectingSink, DiagnosticWarning
from explicit_null.errors import GenerationError
from explicit_null.macros import (
    explicit_null_codable,
    explicit_null_decodable,
    explicit_null_encodable,
)
from explicit_null.shapes import ABSENT, Absentable


@explicit_null_encodable
@dataclass
class EncodeOnly:
    value: Absentable[Optional[int]] = ABSENT


@explicit_null_decodable
@dataclass
class DecodeOnly:
    value: Absentable[Optional[int]] = ABSENT


@explicit_null_codable
@dataclass(frozen=True)
class Frozen:
    value: int
    note: Optional[str] = None


class TestAttach:
    """Test member attachment."""

    def test_codable_members(self):
        assert issubclass(Frozen.CodingKeys, CodingKeySet)
        assert [k.string_value for k in Frozen.CodingKeys] == ["value", "note"]
        assert callable(Frozen.encode)
        assert callable(Frozen.from_decoder)

    def test_qualnames(self):
        assert Frozen.CodingKeys.__qualname__ == "Frozen.CodingKeys"
        assert Frozen.encode.__qualname__ == "Frozen.encode"
        assert Frozen.from_decoder.__func__.__qualname__ == "Frozen.from_decoder"

    def test_module(self):
        assert Frozen.CodingKeys.__module__ == __name__
        assert Frozen.encode.__module__ == __name__

    def test_frozen_dataclass_round_trip(self):
        encoder = DictEncoder()
        Frozen(value=1).encode(encoder)
        assert encoder.document == {"value": 1}
        assert Frozen.from_decoder(DictDecoder(encoder.document)) == Frozen(value=1)

    def test_encode_only(self):
        assert hasattr(EncodeOnly, "encode")
        assert not hasattr(EncodeOnly, "from_decoder")
        assert issubclass(EncodeOnly, Encodable)
        assert not issubclass(EncodeOnly, Decodable)

    def test_decode_only(self):
        assert hasattr(DecodeOnly, "from_decoder")
        assert not hasattr(DecodeOnly, "encode")
        assert issubclass(DecodeOnly, Decodable)
        assert not issubclass(DecodeOnly, Encodable)
        assert DecodeOnly.from_decoder(DictDecoder({"value": None})) == DecodeOnly(value=None)

    def test_instances_conform(self):
        assert isinstance(Frozen(value=1), Encodable)
        assert isinstance(Frozen(value=1), Decodable)

    def test_custom_member_names(self):
        settings = GeneratorSettings(keys_name="Keys", encode_name="dump", decode_name="load")

        @explicit_null_codable(settings=settings)
        @dataclass
        class Renamed:
            value: int

        assert [k.string_value for k in Renamed.Keys] == ["value"]
        encoder = DictEncoder()
        Renamed(3).dump(encoder)
        assert Renamed.load(DictDecoder(encoder.document)) == Renamed(3)
        assert not hasattr(Renamed, "encode")


    def test_field_named_coding_key(self):
        @explicit_null_codable
        @dataclass
        class K:
            CodingKey: int
            other: int

        assert [k.string_value for k in K.CodingKeys] == ["CodingKey", "other"]
        encoder = DictEncoder()
        K(1, 2).encode(encoder)
        assert encoder.document == {"CodingKey": 1, "other": 2}
        assert K.from_decoder(DictDecoder(encoder.document)) == K(1, 2)

    def test_generated_code_filenames(self):
        assert Frozen.encode.__code__.co_filename == "<explicit_null Frozen.encode>"
        assert Frozen.from_decoder.__func__.__code__.co_filename == (
            "<explicit_null Frozen.from_decoder>"
        )


class TestRejection:
    """Test non-record targets."""

    def test_plain_class_warns_and_is_untouched(self):
        class Plain:
            value: int

        with pytest.warns(DiagnosticWarning, match="explicit_null_codable: target declaration is not a record type"):
            result = explicit_null_codable(Plain)

        assert result is Plain
        assert not hasattr(Plain, "CodingKeys")
        assert not hasattr(Plain, "encode")
        assert not hasattr(Plain, "from_decoder")
        assert not issubclass(Plain, Encodable)
        assert not issubclass(Plain, Decodable)

    def test_decorator_order_matters(self):
        """Applied below @dataclass, the target is not a record yet."""
        sink = CollectingSink()

        @dataclass
        @explicit_null_encodable(sink=sink)
        class Reversed:
            value: int

        assert len(sink.diagnostics) == 1
        assert not hasattr(Reversed, "encode")

    def test_collecting_sink(self):
        sink = CollectingSink()

        def not_a_class():
            pass

        assert explicit_null_decodable(sink=sink)(not_a_class) is not_a_class
        assert [d.message for d in sink.diagnostics] == [
            "explicit_null_decodable: target declaration is not a record type"
        ]

    @pytest.mark.parametrize("name", ["encode", "from_decoder", "CodingKeys"])
    def test_field_clashing_with_generated_member(self, name):
        sink = CollectingSink()
        target = make_dataclass("Clash", [("value", int), (name, int, 0)])

        assert explicit_null_codable(sink=sink)(target) is target
        assert [d.message for d in sink.diagnostics] == [
            f"explicit_null_codable: field name '{name}' is reserved for generated code"
        ]
        assert not issubclass(target, Encodable)
        assert not issubclass(target, Decodable)
        assert getattr(target, name) == 0

    def test_raise_mode(self):
        settings = GeneratorSettings(diagnostic_mode=DiagnosticMode.RAISE)

        class Plain:
            pass

        with pytest.raises(GenerationError, match="not a record type"):
            explicit_null_encodable(settings=settings)(Plain)
        assert not issubclass(Plain, Encodable)
