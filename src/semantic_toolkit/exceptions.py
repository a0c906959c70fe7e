"""
Exception hierarchy for IRI handling.

Classification helpers (``is_*`` predicates, ``has_*`` lookups) never raise;
every failure below comes from a transformation or a registry mutation and is
raised eagerly to the caller.
"""

from typing import Any, List, Optional


class SemanticToolkitError(Exception):
    """Base exception for all toolkit errors."""
    pass


class InvalidArgumentError(SemanticToolkitError, ValueError):
    """Raised when a registry receives a malformed prefix, namespace or mapping.

    Attributes:
        argument: Name of the offending argument ("prefix", "namespace", ...)
        value: The rejected value
    """

    def __init__(self, argument: str, value: Any, message: Optional[str] = None):
        self.argument = argument
        self.value = value
        super().__init__(message or f"Malformed {argument}: {value!r}")


class InvalidIriError(SemanticToolkitError, ValueError):
    """Raised when a value that is not an IRI is passed to the splitter."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Not a valid IRI: {value!r}")


class UnknownPrefixError(SemanticToolkitError, LookupError):
    """Raised when expansion meets a prefix with no bound namespace."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"Unknown prefix: {prefix!r}")


class UnknownNamespaceError(SemanticToolkitError, LookupError):
    """Raised when compaction finds no prefix for the namespace of an IRI."""

    def __init__(self, namespace: str, message: Optional[str] = None):
        self.namespace = namespace
        super().__init__(message or f"Unknown namespace: {namespace!r}")


class AmbiguousNamespaceError(SemanticToolkitError, LookupError):
    """Raised by strict prefix-scan compaction when several namespaces match.

    Attributes:
        iri: The IRI being compacted
        candidates: Matching namespaces, longest first
    """

    def __init__(self, iri: str, candidates: List[str]):
        self.iri = iri
        self.candidates = list(candidates)
        super().__init__(
            f"Ambiguous namespace for {iri!r}: "
            f"{', '.join(repr(c) for c in self.candidates)}",
        )
