"""Semantic Toolkit - IRI parsing, validation and prefix translation for RDF data."""

__version__ = "1.0.0"
__author__ = "Semantic Toolkit Contributors"

from .exceptions import (
    SemanticToolkitError,
    InvalidArgumentError,
    InvalidIriError,
    UnknownPrefixError,
    UnknownNamespaceError,
    AmbiguousNamespaceError,
)

from .grammar import (
    is_iri,
    is_prefix,
    is_local_name,
    is_prefixed_name,
    is_compacted_iri,
    is_absolute_iri,
    is_expanded_iri,
    is_valid_iri,
    is_blank_node,
)

from .splitter import (
    split_iri,
    get_namespace,
    get_local_name,
    configure_split_cache,
    split_cache_info,
    clear_split_cache,
)

from .namespaces import DEFAULT_PREFIXES

from .translate import CompactionMode

from .registry import (
    PrefixRegistry,
    expand_iri,
    compact_iri,
)

from .config import (
    ToolkitConfig,
    load_config,
    setup_logging,
)

__all__ = [
    # Errors
    "SemanticToolkitError",
    "InvalidArgumentError",
    "InvalidIriError",
    "UnknownPrefixError",
    "UnknownNamespaceError",
    "AmbiguousNamespaceError",
    # Grammar
    "is_iri",
    "is_prefix",
    "is_local_name",
    "is_prefixed_name",
    "is_compacted_iri",
    "is_absolute_iri",
    "is_expanded_iri",
    "is_valid_iri",
    "is_blank_node",
    # Splitter
    "split_iri",
    "get_namespace",
    "get_local_name",
    "configure_split_cache",
    "split_cache_info",
    "clear_split_cache",
    # Registry
    "DEFAULT_PREFIXES",
    "CompactionMode",
    "PrefixRegistry",
    "expand_iri",
    "compact_iri",
    # Configuration
    "ToolkitConfig",
    "load_config",
    "setup_logging",
]
