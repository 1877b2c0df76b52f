#!/usr/bin/env python3
"""
Demo: explicit-null coding of a partial-update payload.

Shows the generated source, then encodes and decodes ProfilePatch
values in JSON and YAML.
"""

from explicit_null.examples import ProfilePatch, build_example_declaration
from explicit_null.generator import expand
from explicit_null.serialization import from_json, to_json, to_yaml


def main():
    print("=" * 80)
    print("GENERATED SOURCE")
    print("=" * 80)

    result = expand(build_example_declaration())
    for member in result.members:
        print(member.source)

    print("=" * 80)
    print("ENCODING")
    print("=" * 80)

    patches = [
        ProfilePatch(user_id=7),
        ProfilePatch(user_id=7, nickname=None),
        ProfilePatch(user_id=7, nickname="ada", age=None, newsletter=True),
    ]
    for patch in patches:
        text = to_json(patch)
        print(f"\n{patch}")
        print(f"  JSON: {text}")
        print(f"  back: {from_json(ProfilePatch, text)}")

    print("\nYAML:")
    print(to_yaml(patches[-1]))


if __name__ == "__main__":
    main()
