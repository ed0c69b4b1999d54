"""
Struct tag resolution.

Derives a field's external name, optionality and validation rules from its
raw Go struct tag.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

# Naming keys in priority order: wire name, form field, route param, query param
NAME_TAG_KEYS = ("json", "form", "param", "query")
VALIDATION_TAG_KEYS = ("binding", "validate")

IGNORED_NAME = "-"
OMIT_EMPTY = "omitempty"

_TAG_PAIR = re.compile(r'([^\s:"]+):"((?:[^"\\]|\\.)*)"')


@dataclass(frozen=True)
class TagResolution:
    """What a struct tag says about a field."""

    name: str
    optional: bool
    validation_rules: list[str] = field(default_factory=list)


def strip_tag_literal(literal: str) -> str:
    """Remove the quotes of a raw (`...`) or interpreted ("...") string literal."""
    if len(literal) >= 2 and literal[0] == literal[-1] and literal[0] in "`\"":
        body = literal[1:-1]
        if literal[0] == '"':
            body = body.replace('\\"', '"').replace("\\\\", "\\")
        return body
    return literal


def parse_tag(raw_tag: str) -> dict[str, str]:
    """
    Split a struct tag into key/value pairs.

    Follows reflect.StructTag conventions: space separated key:"value"
    pairs. The first occurrence of a key wins.
    """
    pairs: dict[str, str] = {}
    for match in _TAG_PAIR.finditer(raw_tag):
        key = match.group(1)
        if key in pairs:
            continue
        pairs[key] = match.group(2).replace('\\"', '"').replace("\\\\", "\\")
    return pairs


def resolve_tag(
    raw_tag: Optional[str],
    field_name: str,
    is_pointer: bool,
) -> TagResolution:
    """
    Resolve a field's external name, optionality and validation rules.

    The naming keys are consulted in fixed priority order (json, form,
    param, query), whatever order they appear in the tag. The first key
    with a usable name wins and its modifiers decide optionality. If keys
    are present but none names the field, the highest-priority key's
    modifiers still apply.

    Args:
        raw_tag: Tag text without the surrounding string quotes, or None.
        field_name: Go identifier of the field.
        is_pointer: Whether the field's declared type is a pointer.

    Returns:
        The resolved tag information.
    """
    if not raw_tag:
        return TagResolution(name=field_name, optional=is_pointer)

    pairs = parse_tag(raw_tag)

    name = field_name
    modifiers: Optional[list[str]] = None
    for key in NAME_TAG_KEYS:
        value = pairs.get(key)
        if value is None:
            continue
        parts = value.split(",")
        if modifiers is None:
            modifiers = parts[1:]
        if parts[0] and parts[0] != IGNORED_NAME:
            name = parts[0]
            modifiers = parts[1:]
            break

    optional = is_pointer or (modifiers is not None and OMIT_EMPTY in modifiers)

    rules = [
        f"{key}: {pairs[key]}"
        for key in VALIDATION_TAG_KEYS
        if pairs.get(key)
    ]

    return TagResolution(name=name, optional=optional, validation_rules=rules)
