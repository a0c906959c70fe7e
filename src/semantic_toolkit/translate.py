"""
IRI Translation - Expansion and compaction algorithms over prefix mappings.

These functions hold the only implementation of expand/compact. They work on
plain mappings so that both :class:`~semantic_toolkit.registry.PrefixRegistry`
and the per-call free functions delegate here.

Two compaction strategies are offered:

- ``CompactionMode.REGISTRY_SPLIT`` (default): split the IRI with
  :func:`~semantic_toolkit.splitter.split_iri`, then look up the namespace by
  exact string match.
- ``CompactionMode.PREFIX_SCAN``: find every known namespace the IRI starts
  with, take the longest, and trim one leading ``#`` or ``/`` from the rest.

The two disagree when the registered namespace is not the split namespace,
e.g. ``http://foo.com/`` registered and ``http://foo.com/bar/baz`` compacted.

Both inputs are assumed valid; garbage in gives garbage out or a lookup error.
"""

import logging
from enum import Enum
from typing import List, Mapping, Optional

from .exceptions import AmbiguousNamespaceError, UnknownNamespaceError, UnknownPrefixError
from .splitter import split_iri

logger = logging.getLogger(__name__)


class CompactionMode(Enum):
    """Strategy used to find the namespace of an IRI during compaction."""
    REGISTRY_SPLIT = "registry_split"
    PREFIX_SCAN = "prefix_scan"


def expand(prefixed_name: str, prefix_map: Mapping[str, str]) -> str:
    """
    Expand ``prefix:localName`` into an absolute IRI.

    Args:
        prefixed_name: Compacted IRI
        prefix_map: Mapping of prefix -> namespace

    Returns:
        ``namespace + localName``; the namespace carries its own delimiter.

    Raises:
        UnknownPrefixError: If the prefix is not in ``prefix_map``.
    """
    prefix, local_name = split_iri(prefixed_name)

    namespace = prefix_map.get(prefix)
    if namespace is None:
        raise UnknownPrefixError(prefix)

    return namespace + local_name


def compact_by_split(absolute_iri: str, namespace_map: Mapping[str, str]) -> str:
    """
    Compact an absolute IRI by splitting it and looking up its namespace.

    Args:
        absolute_iri: Expanded IRI
        namespace_map: Reverse mapping of namespace -> prefix

    Returns:
        ``prefix:localName``

    Raises:
        UnknownNamespaceError: If the split namespace is not registered.
    """
    namespace, local_name = split_iri(absolute_iri)

    prefix = namespace_map.get(namespace)
    if prefix is None:
        raise UnknownNamespaceError(namespace)

    return f"{prefix}:{local_name}"


def matching_namespaces(absolute_iri: str, prefix_map: Mapping[str, str]) -> List[str]:
    """Namespaces that ``absolute_iri`` starts with, longest first."""
    matches = {ns for ns in prefix_map.values() if ns and absolute_iri.startswith(ns)}
    return sorted(matches, key=lambda ns: (-len(ns), ns))


def compact_by_prefix_scan(
    absolute_iri: str,
    prefix_map: Mapping[str, str],
    strict: bool = False,
    namespace_map: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Compact an absolute IRI by scanning for the longest matching namespace.

    When more than one namespace matches, the longest wins and a warning is
    logged; with ``strict=True`` an :class:`AmbiguousNamespaceError` is raised
    instead.

    Args:
        absolute_iri: Expanded IRI
        prefix_map: Mapping of prefix -> namespace
        strict: Refuse to choose between overlapping namespaces
        namespace_map: Reverse mapping used to pick the prefix of a namespace
            bound under several prefixes

    Returns:
        ``prefix:localName``

    Raises:
        UnknownNamespaceError: If no namespace matches.
        AmbiguousNamespaceError: If several match and ``strict`` is set.
    """
    candidates = matching_namespaces(absolute_iri, prefix_map)

    if not candidates:
        raise UnknownNamespaceError(
            absolute_iri, f"Unknown namespace for: {absolute_iri!r}"
        )

    if len(candidates) > 1:
        if strict:
            raise AmbiguousNamespaceError(absolute_iri, candidates)
        logger.warning(
            f"Several namespaces match {absolute_iri}: {candidates}; "
            f"using the longest ({candidates[0]})"
        )

    namespace = candidates[0]
    prefix = (namespace_map or {}).get(namespace)
    if prefix is None:
        prefix = min(p for p, ns in prefix_map.items() if ns == namespace)

    local_name = absolute_iri[len(namespace):]
    if local_name[:1] in ("#", "/"):
        local_name = local_name[1:]

    return f"{prefix}:{local_name}"
