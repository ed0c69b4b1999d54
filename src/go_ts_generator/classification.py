"""
Naming and classification predicates.

Pure functions deciding whether a Go identifier is exported, whether a
type is wire-facing, and how identifiers are re-cased for TypeScript.
"""

from typing import Iterable, Optional

DEFAULT_API_PATH_TOKENS = ("controller", "handler", "api", "form")
DEFAULT_API_NAME_TOKENS = ("Request", "Response", "Params", "Param", "Form")


def is_exported_name(name: str) -> bool:
    """Check whether a Go identifier is exported (starts upper case)."""
    return bool(name) and name[0].isupper()


def is_api_type(
    type_name: str,
    file_path: str,
    path_tokens: Optional[Iterable[str]] = None,
    name_tokens: Optional[Iterable[str]] = None,
) -> bool:
    """
    Decide whether a type is part of a wire-facing API.

    A type is an API type if the path of the file declaring it contains one
    of the path tokens (case-insensitive), or its name contains one of the
    name tokens (case-sensitive).

    Args:
        type_name: Name of the Go type.
        file_path: Path of the declaring file, relative to its source root.
        path_tokens: Path fragments marking API files.
        name_tokens: Name fragments marking API types.

    Returns:
        True if field names of the type should be kept verbatim.
    """
    if path_tokens is None:
        path_tokens = DEFAULT_API_PATH_TOKENS
    if name_tokens is None:
        name_tokens = DEFAULT_API_NAME_TOKENS

    lowered_path = file_path.lower()
    if any(token.lower() in lowered_path for token in path_tokens):
        return True
    return any(token in type_name for token in name_tokens)


def _lower_leading_caps(word: str) -> str:
    """Lower-case a leading run of capitals, keeping the start of the next word."""
    if word.isupper():
        return word.lower()
    run = 0
    while run < len(word) and word[run].isupper():
        run += 1
    if run > 1:
        run -= 1
    return word[:run].lower() + word[run:]


def to_camel_case(name: str) -> str:
    """
    Convert a snake_case or PascalCase identifier to camelCase.

    Examples: ``zip_code`` -> ``zipCode``, ``CreatedAt`` -> ``createdAt``,
    ``ID`` -> ``id``, ``URLPath`` -> ``urlPath``.
    """
    if not name:
        return name
    if "_" not in name and not name[0].isupper():
        return name

    if "_" in name:
        words = name.split("_")
        head = words[0].lower()
        tail = "".join(w[:1].upper() + w[1:].lower() for w in words[1:] if w)
        return head + tail

    return _lower_leading_caps(name)


def to_pascal_case(name: str) -> str:
    """Convert an identifier to PascalCase (``unexportedType`` -> ``UnexportedType``)."""
    if "_" in name:
        return "".join(w[:1].upper() + w[1:] for w in name.split("_") if w)
    return name[:1].upper() + name[1:]
