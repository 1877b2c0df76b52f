"""
Class decorators: the host side of generation.

    @explicit_null_codable
    @dataclass
    class ProfilePatch:
        nickname: Absentable[Optional[str]] = ABSENT
        age: Optional[int] = None
        active: bool = True

The decorator reads the class, runs expand(), and either reports the
diagnostics and hands the class back untouched, or compiles each
generated member and sets it on the class.

expand() produces source text, not functions: the same text is what
the demo prints and what the backend tests compare against. Splicing
means compiling that text once per member, under a filename such as
"<explicit_null ProfilePatch.encode>" so tracebacks from generated code
name the member they come from. The compiled globals hold only ABSENT
and the member's own bindings.

Place it above @dataclass: it needs the dataclass fields to exist.
"""

import logging
from typing import Any, Dict, Optional

from .codec import Decodable, Encodable
from .config import DEFAULT_SETTINGS, DiagnosticMode, GeneratorSettings
from .diagnostics import DiagnosticSink, RaisingSink, WarningsSink
from .extractor import declaration_from_class
from .generator import Capability, Conformance, GenerationResult, expand
from .shapes import ABSENT


logger = logging.getLogger(__name__)

_CONFORMANCE_ABCS = {
    Conformance.ENCODABLE: Encodable,
    Conformance.DECODABLE: Decodable,
}


def _default_sink(settings: GeneratorSettings) -> DiagnosticSink:
    if settings.diagnostic_mode == DiagnosticMode.RAISE:
        return RaisingSink()
    return WarningsSink()


def attach(target: type, result: GenerationResult) -> type:
    """
    Compile the generated members into `target` and register conformances.

    Args:
        target: The record class
        result: A successful GenerationResult

    Returns:
        target, modified in place
    """
    namespace: Dict[str, Any] = {
        "__name__": target.__module__,
        "ABSENT": ABSENT,
    }
    for member in result.members:
        namespace.update(member.bindings)
        filename = f"<explicit_null {target.__qualname__}.{member.name}>"
        exec(compile(member.source, filename, "exec"), namespace)
        value = namespace[member.name]
        func = getattr(value, "__func__", value)
        func.__qualname__ = f"{target.__qualname__}.{member.name}"
        setattr(target, member.name, value)
        logger.debug("attached %s to %s", func.__qualname__, target.__module__)

    for conformance in result.conformances:
        _CONFORMANCE_ABCS[conformance].register(target)
    return target


def apply(
    target: Any,
    capability: Capability,
    settings: Optional[GeneratorSettings] = None,
    sink: Optional[DiagnosticSink] = None,
) -> Any:
    """
    Run generation for `target` and attach the result.

    On rejection every diagnostic goes to `sink` and `target` is
    returned without any generated member or conformance.
    """
    settings = settings or DEFAULT_SETTINGS
    result = expand(declaration_from_class(target), capability, settings)
    if not result.ok:
        sink = sink or _default_sink(settings)
        for diagnostic in result.diagnostics:
            sink.report(diagnostic)
        return target
    return attach(target, result)


def _decorator(capability: Capability, cls: Any, settings, sink) -> Any:
    def wrap(target: Any) -> Any:
        return apply(target, capability, settings=settings, sink=sink)

    if cls is None:
        return wrap
    return wrap(cls)


def explicit_null_encodable(
    cls: Any = None,
    *,
    settings: Optional[GeneratorSettings] = None,
    sink: Optional[DiagnosticSink] = None,
) -> Any:
    """Add CodingKeys and encode(); register as Encodable."""
    return _decorator(Capability.ENCODABLE, cls, settings, sink)


def explicit_null_decodable(
    cls: Any = None,
    *,
    settings: Optional[GeneratorSettings] = None,
    sink: Optional[DiagnosticSink] = None,
) -> Any:
    """Add CodingKeys and from_decoder(); register as Decodable."""
    return _decorator(Capability.DECODABLE, cls, settings, sink)


def explicit_null_codable(
    cls: Any = None,
    *,
    settings: Optional[GeneratorSettings] = None,
    sink: Optional[DiagnosticSink] = None,
) -> Any:
    """Add CodingKeys, encode() and from_decoder(); register as both."""
    return _decorator(Capability.CODABLE, cls, settings, sink)


__all__ = [
    "apply",
    "attach",
    "explicit_null_encodable",
    "explicit_null_decodable",
    "explicit_null_codable",
]
