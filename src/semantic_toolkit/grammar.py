"""
IRI Grammar - Syntactic predicates for IRIs, prefixes and local names.

Every predicate here is total: it returns a bool for any input and never
raises. Non-string values (numbers, dicts, callables, None, compiled
patterns) are simply not IRIs.

Grammars:
- Prefixes and local names follow the XML NCName production
  (https://www.w3.org/TR/xml-names11/#NT-NCName).
- URI schemes follow RFC 3987 ``scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )``.

``is_absolute_iri`` is a weak test for an absolute IRI with a non-empty
hierarchical part, not a full RFC 3987 parser.

Usage:
    from semantic_toolkit.grammar import is_prefixed_name, is_absolute_iri

    is_prefixed_name("rdf:type")                # True
    is_absolute_iri("http://example.org/Person")  # True
"""

import re
from typing import Any

from .namespaces import BLANK_NODE_NAMESPACE

_NAME_START_CHARS = (
    "A-Za-z_"
    "\u00C0-\u00D6"
    "\u00D8-\u00F6"
    "\u00F8-\u02FF"
    "\u0370-\u037D"
    "\u037F-\u1FFF"
    "\u200C-\u200D"
    "\u2070-\u218F"
    "\u2C00-\u2FEF"
    "\u3001-\uD7FF"
    "\uF900-\uFDCF"
    "\uFDF0-\uFFFD"
    "\U00010000-\U000EFFFF"
)

_NAME_CHARS = _NAME_START_CHARS + (
    "0-9"
    "\u00B7"
    "\u0300-\u036F"
    "\u203F-\u2040"
    ".\\-"
)

QUALIFIED_NAME_PATTERN = re.compile(f"[{_NAME_START_CHARS}][{_NAME_CHARS}]*")
SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9.+\-]*")


def is_iri(value: Any) -> bool:
    """Loose IRI gate: any string containing a colon.

    Accepts plenty of non-IRIs (``"foo::bar"``); use :func:`is_valid_iri`
    for a stricter answer.
    """
    return isinstance(value, str) and ":" in value


def _is_qualified_name(value: str) -> bool:
    return QUALIFIED_NAME_PATTERN.fullmatch(value) is not None


def is_prefix(value: Any) -> bool:
    """True for the empty prefix or an NCName."""
    return isinstance(value, str) and (not value or _is_qualified_name(value))


def is_local_name(value: Any) -> bool:
    """True for a non-empty NCName."""
    return isinstance(value, str) and _is_qualified_name(value)


def is_prefixed_name(value: Any) -> bool:
    """
    Check whether a value is a compacted IRI of the shape ``prefix:localName``.

    Args:
        value: Candidate value

    Returns:
        True if the value has exactly one colon, a valid prefix before it
        and a valid local name after it
    """
    if not is_iri(value):
        return False

    parts = value.split(":")

    if len(parts) != 2:
        return False

    prefix, local_name = parts
    return is_prefix(prefix) and is_local_name(local_name)


def is_absolute_iri(value: Any) -> bool:
    """
    Check whether a value looks like an expanded (absolute) IRI.

    The text before the first colon must be a valid scheme and the text
    after it must contain at least one slash.

    Args:
        value: Candidate value

    Returns:
        True if the value passes the weak absolute-IRI test
    """
    if not is_iri(value):
        return False

    scheme, _, hier_part = value.partition(":")
    return SCHEME_PATTERN.fullmatch(scheme) is not None and "/" in hier_part


def is_valid_iri(value: Any) -> bool:
    """True for an absolute IRI or a prefixed name."""
    return is_absolute_iri(value) or is_prefixed_name(value)


def is_blank_node(value: Any) -> bool:
    """True for a prefixed name in the reserved ``_`` namespace (``_:b0``)."""
    # A prefixed name has a single colon and no "#" or "/", so its namespace
    # is the text before the colon.
    return is_prefixed_name(value) and value.partition(":")[0] == BLANK_NODE_NAMESPACE


# Aliases used by JSON-LD tooling
is_compacted_iri = is_prefixed_name
is_expanded_iri = is_absolute_iri
