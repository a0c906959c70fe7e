"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Tests exercising rdflib and the filesystem
"""

import logging
import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from semantic_toolkit import PrefixRegistry
from semantic_toolkit.splitter import DEFAULT_SPLIT_CACHE_SIZE, configure_split_cache


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Tests exercising rdflib or the filesystem")


@pytest.fixture
def registry():
    """Registry holding only the default bindings."""
    return PrefixRegistry()


@pytest.fixture
def nested_registry():
    """Registry with two namespaces where one is a string prefix of the other."""
    return PrefixRegistry({
        "foo": "http://foo.com/",
        "foobar": "http://foo.com/bar/",
    })


@pytest.fixture
def sample_ttl_content():
    """Minimal valid TTL content for testing."""
    return '''
        @prefix ex: <http://example.org/> .
        @prefix owl: <http://www.w3.org/2002/07/owl#> .
        @prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .

        ex:Person a owl:Class ;
            rdfs:label "Person" .
    '''


@pytest.fixture
def reset_split_cache():
    """Restore the default split cache after a test resizes it."""
    yield
    configure_split_cache(DEFAULT_SPLIT_CACHE_SIZE)


@pytest.fixture
def restore_logging():
    """Undo setup_logging() changes to the package and root loggers."""
    from semantic_toolkit import config

    root = logging.getLogger()
    package_logger = logging.getLogger(config.PACKAGE_LOGGER)
    root_handlers = list(root.handlers)
    root_level = root.level
    package_level = package_logger.level
    yield
    while config._installed_handlers:
        handler = config._installed_handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(package_level)
    root.handlers = root_handlers
    root.setLevel(root_level)
