"""
Prefix Registry - Bidirectional prefix <-> namespace bindings.

A registry starts with the rdf, rdfs, xsd and owl bindings, accepts extra
bindings at construction or through :meth:`PrefixRegistry.add_namespace`, and
translates between prefixed names and absolute IRIs.

Registries never shrink and are not synchronized: if one instance is shared
between threads, callers must serialize calls to ``add_namespace``.

Usage:
    from semantic_toolkit import PrefixRegistry

    registry = PrefixRegistry({"ex": "http://example.org/"})
    registry.expand_iri("rdf:type")
    # "http://www.w3.org/1999/02/22-rdf-syntax-ns#type"
    registry.compact_iri("http://example.org/Person")
    # "ex:Person"
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .exceptions import InvalidArgumentError
from .grammar import is_absolute_iri, is_prefix
from .namespaces import DEFAULT_PREFIXES
from .translate import (
    CompactionMode,
    compact_by_prefix_scan,
    compact_by_split,
    expand,
)

if TYPE_CHECKING:
    from rdflib import Graph

    from .config import ToolkitConfig

logger = logging.getLogger(__name__)


def validate_binding(prefix: Any, namespace: Any) -> None:
    """
    Check a single prefix/namespace pair.

    Namespaces must be absolute IRIs; a bare ``"bar"`` or ``"foo:bar"`` is
    rejected here rather than surfacing later as a failed compaction.

    Raises:
        InvalidArgumentError: Naming the malformed argument.
    """
    if not is_prefix(prefix):
        raise InvalidArgumentError("prefix", prefix)
    if not is_absolute_iri(namespace):
        raise InvalidArgumentError("namespace", namespace)


def validate_bindings(bindings: Any) -> Dict[str, str]:
    """
    Check a prefix -> namespace mapping and return a plain-dict copy of it.

    Raises:
        InvalidArgumentError: If ``bindings`` is not a mapping or any entry
            is malformed.
    """
    if not isinstance(bindings, Mapping):
        raise InvalidArgumentError(
            "bindings", bindings,
            f"Bindings must be a mapping of prefix to namespace, got {type(bindings).__name__}",
        )

    for prefix, namespace in bindings.items():
        if not isinstance(prefix, str):
            raise InvalidArgumentError(
                "bindings", bindings, f"Binding keys must be strings, got {prefix!r}"
            )
        validate_binding(prefix, namespace)

    return {str(prefix): str(namespace) for prefix, namespace in bindings.items()}


class PrefixRegistry:
    """
    Registry of prefix <-> namespace bindings.

    The forward map (prefix -> namespace) may show one namespace under
    several prefixes; the reverse map (namespace -> prefix) always points at
    the prefix most recently registered for that namespace.

    Example:
        >>> registry = PrefixRegistry()
        >>> registry.has_prefix("owl")
        True
        >>> registry.compact_iri("http://www.w3.org/2002/07/owl#Class")
        'owl:Class'
    """

    def __init__(self, initial_bindings: Optional[Mapping[str, str]] = None):
        """
        Initialize the registry.

        Args:
            initial_bindings: Extra prefix -> namespace bindings. They take
                precedence over the default bindings on key collision.

        Raises:
            InvalidArgumentError: If the mapping or any entry is malformed.
        """
        extra = validate_bindings({} if initial_bindings is None else initial_bindings)

        self._prefix_map: Dict[str, str] = dict(DEFAULT_PREFIXES)
        self._namespace_map: Dict[str, str] = {}

        self._prefix_map.update(extra)
        for prefix, namespace in self._prefix_map.items():
            self._namespace_map[namespace] = prefix

        overlaps = self.find_overlapping_namespaces()
        if overlaps:
            logger.warning(
                f"Initial bindings contain overlapping namespaces {overlaps}; "
                f"prefix-scan compaction of these IRIs depends on the longest match"
            )

    @classmethod
    def from_config(cls, config: "ToolkitConfig") -> "PrefixRegistry":
        """Build a registry from the ``prefixes`` section of a configuration."""
        return cls(config.prefixes)

    @classmethod
    def from_graph(cls, graph: "Graph") -> "PrefixRegistry":
        """
        Build a registry from the namespace bindings of an rdflib graph.

        Bindings the grammar rejects (rdflib allows a few, e.g. ``urn:``
        namespaces without a slash) are skipped.

        Args:
            graph: rdflib Graph, typically just parsed from Turtle

        Returns:
            New registry holding the defaults plus the graph's bindings.
        """
        registry = cls()
        for prefix, namespace in graph.namespaces():
            try:
                registry.add_namespace(str(prefix), str(namespace))
            except InvalidArgumentError as e:
                logger.debug(f"Skipping graph binding {prefix!s}: {e}")
        return registry

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def has_prefix(self, prefix: Any) -> bool:
        return isinstance(prefix, str) and prefix in self._prefix_map

    def has_namespace(self, namespace: Any) -> bool:
        return isinstance(namespace, str) and namespace in self._namespace_map

    def get_namespace_for_prefix(self, prefix: Any) -> Optional[str]:
        """Namespace bound to ``prefix``, or None."""
        if not isinstance(prefix, str):
            return None
        return self._prefix_map.get(prefix)

    def get_prefix_for_namespace(self, namespace: Any) -> Optional[str]:
        """Prefix most recently bound to ``namespace``, or None."""
        if not isinstance(namespace, str):
            return None
        return self._namespace_map.get(namespace)

    @property
    def prefix_map(self) -> Dict[str, str]:
        """Copy of the prefix -> namespace map."""
        return dict(self._prefix_map)

    @property
    def namespace_map(self) -> Dict[str, str]:
        """Copy of the namespace -> prefix map."""
        return dict(self._namespace_map)

    def __contains__(self, prefix: Any) -> bool:
        return self.has_prefix(prefix)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._prefix_map))

    def __len__(self) -> int:
        return len(self._prefix_map)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._prefix_map!r})"

    def copy(self) -> "PrefixRegistry":
        """Independent registry with the same bindings."""
        clone = self.__class__()
        clone._prefix_map = dict(self._prefix_map)
        clone._namespace_map = dict(self._namespace_map)
        return clone

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_namespace(self, prefix: str, namespace: str) -> None:
        """
        Bind ``prefix`` to ``namespace``, overwriting any previous binding.

        Args:
            prefix: Empty string or NCName
            namespace: Absolute IRI, normally ending in ``#`` or ``/``

        Raises:
            InvalidArgumentError: If either argument is malformed. The
                registry is left untouched.
        """
        validate_binding(prefix, namespace)
        prefix, namespace = str(prefix), str(namespace)

        # Re-insert so that dict order follows registration order
        previous = self._prefix_map.pop(prefix, None)
        self._prefix_map[prefix] = namespace
        self._namespace_map[namespace] = prefix

        if previous is not None and previous != namespace:
            self._release_namespace(previous, prefix)

        overlaps = self._overlaps_with(namespace)
        if overlaps:
            logger.warning(
                f"Namespace {namespace} overlaps registered namespaces {overlaps}; "
                f"prefix-scan compaction of these IRIs depends on the longest match"
            )

        logger.debug(f"Registered prefix {prefix!r} -> {namespace}")

    def add_namespaces(self, bindings: Mapping[str, str]) -> None:
        """
        Register several bindings at once.

        The whole mapping is validated before anything is written.

        Raises:
            InvalidArgumentError: If the mapping or any entry is malformed.
        """
        for prefix, namespace in validate_bindings(bindings).items():
            self.add_namespace(prefix, namespace)

    def _overlaps_with(self, namespace: str) -> List[Tuple[str, str]]:
        # (shorter, longer) pairs involving namespace, one pass over the registry
        pairs = []
        for ns in set(self._prefix_map.values()):
            if ns == namespace:
                continue
            if namespace.startswith(ns):
                pairs.append((ns, namespace))
            elif ns.startswith(namespace):
                pairs.append((namespace, ns))
        return sorted(pairs)

    def _release_namespace(self, namespace: str, old_prefix: str) -> None:
        # The rebound prefix no longer names this namespace; repoint or drop
        # its reverse entry.
        if self._namespace_map.get(namespace) != old_prefix:
            return

        remaining = [p for p, ns in self._prefix_map.items() if ns == namespace]
        if remaining:
            self._namespace_map[namespace] = remaining[-1]
        else:
            del self._namespace_map[namespace]

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def find_overlapping_namespaces(self) -> List[Tuple[str, str]]:
        """
        Pairs of registered namespaces where the first is a string prefix of
        the second, e.g. ``("http://foo.com/", "http://foo.com/bar/")``.
        """
        namespaces = sorted(set(self._prefix_map.values()))
        return [
            (shorter, longer)
            for shorter in namespaces
            for longer in namespaces
            if shorter != longer and longer.startswith(shorter)
        ]

    # -------------------------------------------------------------------------
    # Translation
    # -------------------------------------------------------------------------

    def expand_iri(self, prefixed_name: str) -> str:
        """
        Expand a prefixed name against this registry.

        Raises:
            UnknownPrefixError: If the prefix is not registered.
        """
        return expand(prefixed_name, self._prefix_map)

    def compact_iri(
        self,
        absolute_iri: str,
        mode: CompactionMode = CompactionMode.REGISTRY_SPLIT,
        strict: bool = False,
    ) -> str:
        """
        Compact an absolute IRI against this registry.

        Args:
            absolute_iri: Expanded IRI
            mode: REGISTRY_SPLIT (exact namespace after splitting) or
                PREFIX_SCAN (longest registered namespace the IRI starts with)
            strict: In PREFIX_SCAN mode, raise instead of picking the longest
                of several matching namespaces

        Raises:
            UnknownNamespaceError: If no registered namespace applies.
            AmbiguousNamespaceError: PREFIX_SCAN with ``strict`` and overlapping
                matches.
        """
        if mode is CompactionMode.PREFIX_SCAN:
            return compact_by_prefix_scan(
                absolute_iri, self._prefix_map, strict=strict,
                namespace_map=self._namespace_map,
            )
        return compact_by_split(absolute_iri, self._namespace_map)

    # -------------------------------------------------------------------------
    # rdflib interop
    # -------------------------------------------------------------------------

    def bind_to(self, graph: "Graph", override: bool = True) -> "Graph":
        """
        Bind every registered prefix onto an rdflib graph.

        Args:
            graph: Target rdflib Graph
            override: Replace existing bindings of the same prefix

        Returns:
            The same graph, for chaining.
        """
        from rdflib import Namespace

        for prefix, namespace in self._prefix_map.items():
            graph.bind(prefix, Namespace(namespace), override=override)
        return graph


# =============================================================================
# Free functions
# =============================================================================

def expand_iri(prefixed_name: str, additional_prefixes: Optional[Mapping[str, str]] = None) -> str:
    """
    Expand a prefixed name against the default bindings plus ``additional_prefixes``.

    Raises:
        InvalidArgumentError: If ``additional_prefixes`` is malformed.
        UnknownPrefixError: If the prefix is not known.
    """
    return PrefixRegistry(additional_prefixes).expand_iri(prefixed_name)


def compact_iri(
    absolute_iri: str,
    additional_prefixes: Optional[Mapping[str, str]] = None,
    mode: CompactionMode = CompactionMode.REGISTRY_SPLIT,
    strict: bool = False,
) -> str:
    """
    Compact an absolute IRI against the default bindings plus ``additional_prefixes``.

    See :meth:`PrefixRegistry.compact_iri` for ``mode`` and ``strict``.
    """
    return PrefixRegistry(additional_prefixes).compact_iri(absolute_iri, mode=mode, strict=strict)
