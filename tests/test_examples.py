"""
Test the ProfilePatch example record.

Validates that the decorated example and its hand-written schema agree,
and that a patch's three field states survive JSON.
"""

from explicit_null.examples import ProfilePatch, build_example_declaration
from explicit_null.extractor import declaration_from_class, extract_fields
from explicit_null.serialization import from_json, to_json
from explicit_null.shapes import ABSENT


def test_schema_matches_decorated_class():
    from_class = extract_fields(declaration_from_class(ProfilePatch))
    from_schema = extract_fields(build_example_declaration())
    assert [f.name for f in from_class] == [f.name for f in from_schema]
    assert [f.declared_type for f in from_class] == [f.declared_type for f in from_schema]


def test_noop_patch():
    patch = ProfilePatch(user_id=7)
    assert patch.is_noop
    assert to_json(patch) == '{"user_id":7}'


def test_clearing_and_setting():
    patch = ProfilePatch(user_id=7, nickname=None, age=31, newsletter=False, tags=["a"])
    text = to_json(patch)
    assert text == '{"user_id":7,"nickname":null,"age":31,"tags":["a"],"newsletter":false}'

    restored = from_json(ProfilePatch, text)
    assert restored == patch
    assert restored.nickname is None
    assert restored.is_blocked is ABSENT
    assert not restored.is_noop
