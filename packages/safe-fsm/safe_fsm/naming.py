"""Reserved words and the derived method-name convention."""
from __future__ import annotations

import keyword
import re

_UNSAFE_WORDS = (
    "break", "case", "catch", "class", "const", "continue",
    "debugger", "default", "delete", "do", "else", "enum",
    "export", "extends", "false", "final", "finally", "for",
    "function", "if", "implements", "import", "in", "instanceof",
    "interface", "let", "module", "new", "null", "package",
    "private", "protected", "public", "return", "static", "super",
    "switch", "this", "throw", "try", "true", "type", "typeof",
    "var", "void", "while", "with", "yield", "as", "any", "boolean",
    "byte", "char", "double", "int", "long", "object", "short",
    "string", "undefined", "declare", "namespace", "require",
    "from", "keyof", "get", "set",
)

RESERVED_WORDS: frozenset[str] = frozenset(
    (*_UNSAFE_WORDS, *keyword.kwlist, *keyword.softkwlist)
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def method_name(*parts: str) -> str:
    """Join ``parts`` into a lower snake_case method name.

    ``method_name("before", "condense")`` is ``"before_condense"`` and
    ``method_name("on", "startWork")`` is ``"on_start_work"``.
    """
    token = "_".join(p for p in parts if p)
    token = _CAMEL_BOUNDARY.sub("_", token)
    return "_".join(seg for seg in token.lower().split("_") if seg)


def is_valid_event(event: str) -> bool:
    """True when ``event`` is non-empty and neither it nor its shortcut is reserved."""
    if not event:
        return False
    return event not in RESERVED_WORDS and method_name(event) not in RESERVED_WORDS
