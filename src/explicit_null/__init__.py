"""
Explicit-Null Codable

Generates encode/decode members for records whose fields must tell
three wire states apart:

    absent        key not in the document
    explicit null key present, value null
    value         key present with a value

Per field, the declared type picks the arity:

    T                        Required
    Optional[T]              SingleOptional   (absent and null collapse)
    Absentable[Optional[T]]  DoubleOptional   (all three states kept)

ARCHITECTURAL GUARANTEE:
------------------------
The classification and generation core contains ZERO knowledge of:
    - How generated members get attached to a class
    - Which document format is written
    - How diagnostics are shown

Those belong to macros, codec/serialization and the diagnostic sinks.
"""

__version__ = "0.1.0"
