"""
IRI Splitter - Partition an IRI into namespace and local name.

The split point is chosen by delimiter priority:

1. last ``#``  -> namespace keeps the ``#``
2. last ``/``  -> namespace keeps the ``/``
3. last ``:``  -> namespace drops the ``:``

so ``http://foo.com/bar`` splits into ``("http://foo.com/", "bar")`` and
``rdf:type`` into ``("rdf", "type")``.

Results are memoized in a bounded, thread-safe LRU cache keyed by the input
string. See:
http://richard.cyganiak.de/blog/2016/02/uris-have-a-namespace-part-right/

Usage:
    from semantic_toolkit.splitter import split_iri

    namespace, local_name = split_iri("http://www.w3.org/2002/07/owl#Class")
"""

import logging
from functools import lru_cache
from typing import Any, Callable, Tuple

from .exceptions import InvalidIriError
from .grammar import is_iri

logger = logging.getLogger(__name__)

DEFAULT_SPLIT_CACHE_SIZE = 1024


def _split(iri: str) -> Tuple[str, str]:
    pound_index = iri.rfind("#") + 1
    if pound_index:
        return iri[:pound_index], iri[pound_index:]

    slash_index = iri.rfind("/") + 1
    if slash_index:
        return iri[:slash_index], iri[slash_index:]

    colon_index = iri.rfind(":")
    return iri[:colon_index], iri[colon_index + 1:]


_cached_split: Callable[[str], Tuple[str, str]] = lru_cache(
    maxsize=DEFAULT_SPLIT_CACHE_SIZE
)(_split)


def split_iri(iri: Any) -> Tuple[str, str]:
    """
    Split an IRI into ``(namespace, local_name)``.

    Args:
        iri: A string containing at least one colon.

    Returns:
        Tuple of namespace and local name; their concatenation is the input
        unless the split fell back to the colon.

    Raises:
        InvalidIriError: If ``iri`` is not a string containing a colon.
    """
    if not is_iri(iri):
        raise InvalidIriError(iri)

    # str() so that str subclasses (rdflib URIRef) share cache entries
    return _cached_split(str(iri))


def get_namespace(iri: Any) -> str:
    """Namespace part of an IRI."""
    return split_iri(iri)[0]


def get_local_name(iri: Any) -> str:
    """Local name part of an IRI."""
    return split_iri(iri)[1]


def configure_split_cache(maxsize: int) -> None:
    """
    Replace the split cache with a new one holding at most ``maxsize`` entries.

    Args:
        maxsize: Maximum number of cached splits; 0 disables caching.

    Raises:
        ValueError: If maxsize is negative or not an int.
    """
    global _cached_split

    if isinstance(maxsize, bool) or not isinstance(maxsize, int) or maxsize < 0:
        raise ValueError(f"Split cache size must be a non-negative int, got {maxsize!r}")

    _cached_split = lru_cache(maxsize=maxsize)(_split)
    logger.debug(f"Split cache resized to {maxsize} entries")


def split_cache_info():
    """Hit/miss statistics of the split cache (``functools._CacheInfo``)."""
    return _cached_split.cache_info()


def clear_split_cache() -> None:
    _cached_split.cache_clear()
