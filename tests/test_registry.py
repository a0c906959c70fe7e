"""
Unit tests for PrefixRegistry bindings and lookups.

Run with: python -m pytest tests/test_registry.py -v
"""

import logging
import time

import pytest

from semantic_toolkit import DEFAULT_PREFIXES, PrefixRegistry
from semantic_toolkit.exceptions import InvalidArgumentError

COMMON_NAMESPACES = {
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "owl": "http://www.w3.org/2002/07/owl#",
}


@pytest.mark.unit
class TestConstruction:

    def test_does_not_raise(self):
        PrefixRegistry()
        PrefixRegistry({})
        PrefixRegistry(None)

    def test_knows_common_namespaces(self, registry):
        for prefix, namespace in COMMON_NAMESPACES.items():
            assert registry.has_prefix(prefix)
            assert registry.has_namespace(namespace)
            assert registry.get_namespace_for_prefix(prefix) == namespace
            assert registry.get_prefix_for_namespace(namespace) == prefix

    def test_default_constant_matches(self):
        assert dict(DEFAULT_PREFIXES) == COMMON_NAMESPACES

    def test_does_not_know_all_namespaces(self, registry):
        assert not registry.has_prefix("foaf")
        assert registry.get_namespace_for_prefix("foaf") is None
        assert registry.get_prefix_for_namespace("http://xmlns.com/foaf/0.1/") is None

    def test_accepts_bindings(self):
        registry = PrefixRegistry({
            "": "http://base-namespace.com/",
            "foo": "http://foo.com#",  # with end delimiter
            "bar": "http://bar.com",  # without end delimiter
        })

        assert registry.get_namespace_for_prefix("") == "http://base-namespace.com/"
        assert registry.get_namespace_for_prefix("foo") == "http://foo.com#"
        assert registry.get_namespace_for_prefix("bar") == "http://bar.com"
        assert registry.has_prefix("rdf")
        assert len(registry) == 7

    def test_caller_bindings_take_precedence(self):
        registry = PrefixRegistry({"rdf": "http://example.org/rdf#"})

        assert registry.get_namespace_for_prefix("rdf") == "http://example.org/rdf#"
        assert registry.get_prefix_for_namespace("http://example.org/rdf#") == "rdf"
        assert not registry.has_namespace(COMMON_NAMESPACES["rdf"])

    @pytest.mark.parametrize("bindings", [
        [("ex", "http://example.org/")],
        "ex=http://example.org/",
        111,
        {1: "http://example.org/"},
        {"x!": "http://example.org/"},
        {"ex": "bar"},
        {"ex": "ex:bar"},
        {"ex": None},
    ])
    def test_rejects_malformed_bindings(self, bindings):
        with pytest.raises(InvalidArgumentError):
            PrefixRegistry(bindings)

    def test_error_names_the_bad_argument(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            PrefixRegistry({"ex": "bar"})
        assert exc_info.value.argument == "namespace"
        assert exc_info.value.value == "bar"

        with pytest.raises(InvalidArgumentError) as exc_info:
            PrefixRegistry({"1ex": "http://example.org/"})
        assert exc_info.value.argument == "prefix"

    def test_instances_do_not_share_state(self):
        first = PrefixRegistry()
        second = PrefixRegistry()

        first.add_namespace("ex", "http://example.org/")

        assert first.has_prefix("ex")
        assert not second.has_prefix("ex")
        assert "ex" not in DEFAULT_PREFIXES

    def test_default_constant_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_PREFIXES["ex"] = "http://example.org/"


@pytest.mark.unit
class TestLookups:

    @pytest.mark.parametrize("value", [None, {}, [], 111, lambda: "rdf"])
    def test_lookups_are_total(self, registry, value):
        assert registry.has_prefix(value) is False
        assert registry.has_namespace(value) is False
        assert registry.get_namespace_for_prefix(value) is None
        assert registry.get_prefix_for_namespace(value) is None

    def test_container_protocol(self, registry):
        assert "owl" in registry
        assert "foaf" not in registry
        assert set(registry) == set(COMMON_NAMESPACES)
        assert len(registry) == 4

    def test_maps_are_copies(self, registry):
        registry.prefix_map["ex"] = "http://example.org/"
        registry.namespace_map["http://example.org/"] = "ex"

        assert not registry.has_prefix("ex")
        assert not registry.has_namespace("http://example.org/")

    def test_copy_is_independent(self, registry):
        clone = registry.copy()
        clone.add_namespace("ex", "http://example.org/")

        assert clone.has_prefix("ex")
        assert not registry.has_prefix("ex")


@pytest.mark.unit
class TestAddNamespace:

    def test_adds_binding(self, registry):
        registry.add_namespace("foo", "http://foo.com#")

        assert registry.has_prefix("foo")
        assert registry.has_namespace("http://foo.com#")
        assert registry.get_namespace_for_prefix("foo") == "http://foo.com#"
        assert registry.get_prefix_for_namespace("http://foo.com#") == "foo"

    @pytest.mark.parametrize("prefix, namespace, argument", [
        ({}, "http://foo.com", "prefix"),
        (111, "http://foo.com", "prefix"),
        (None, "http://foo.com", "prefix"),
        ("x!", "http://foo.com", "prefix"),
        ("111", "http://foo.com", "prefix"),
        ("foo", None, "namespace"),
        ("foo", 111, "namespace"),
        ("foo", "bar", "namespace"),
        ("foo", "not-an-iri", "namespace"),
        ("foo", "foo:bar", "namespace"),
    ])
    def test_rejects_malformed_namespaces(self, registry, prefix, namespace, argument):
        with pytest.raises(InvalidArgumentError) as exc_info:
            registry.add_namespace(prefix, namespace)

        assert exc_info.value.argument == argument
        assert not registry.has_prefix("foo")
        assert len(registry) == 4

    def test_namespace_under_new_prefix_repoints_reverse_entry(self, registry):
        registry.add_namespace("a", "http://x.org/")
        registry.add_namespace("b", "http://x.org/")

        assert registry.get_prefix_for_namespace("http://x.org/") == "b"
        assert registry.get_namespace_for_prefix("a") == "http://x.org/"
        assert registry.get_namespace_for_prefix("b") == "http://x.org/"

    def test_rebinding_prefix_leaves_no_stale_reverse_entry(self, registry):
        registry.add_namespace("foo", "http://a.org/")
        registry.add_namespace("foo", "http://b.org/")

        assert registry.get_namespace_for_prefix("foo") == "http://b.org/"
        assert registry.get_prefix_for_namespace("http://b.org/") == "foo"
        assert not registry.has_namespace("http://a.org/")

    def test_rebinding_prefix_falls_back_to_remaining_prefix(self, registry):
        registry.add_namespace("a", "http://x.org/")
        registry.add_namespace("b", "http://x.org/")
        registry.add_namespace("b", "http://y.org/")

        assert registry.get_prefix_for_namespace("http://x.org/") == "a"
        assert registry.get_prefix_for_namespace("http://y.org/") == "b"

    def test_fallback_uses_most_recent_registration(self, registry):
        registry.add_namespace("a", "http://x.org/")
        registry.add_namespace("b", "http://x.org/")
        registry.add_namespace("a", "http://x.org/")
        registry.add_namespace("c", "http://x.org/")
        registry.add_namespace("c", "http://y.org/")

        assert registry.get_prefix_for_namespace("http://x.org/") == "a"
        assert list(registry)[-2:] == ["a", "c"]

    def test_rebinding_to_same_namespace_is_idempotent(self, registry):
        registry.add_namespace("ex", "http://example.org/")
        registry.add_namespace("ex", "http://example.org/")

        assert registry.get_prefix_for_namespace("http://example.org/") == "ex"
        assert len(registry) == 5

    def test_add_namespaces_validates_everything_first(self, registry):
        with pytest.raises(InvalidArgumentError):
            registry.add_namespaces({
                "ex": "http://example.org/",
                "bad": "nope",
            })
        assert not registry.has_prefix("ex")

        registry.add_namespaces({
            "ex": "http://example.org/",
            "foaf": "http://xmlns.com/foaf/0.1/",
        })
        assert registry.has_prefix("ex")
        assert registry.has_prefix("foaf")


@pytest.mark.unit
class TestOverlappingNamespaces:

    def test_defaults_do_not_overlap(self, registry):
        assert registry.find_overlapping_namespaces() == []

    def test_reports_nested_namespaces(self, nested_registry):
        assert nested_registry.find_overlapping_namespaces() == [
            ("http://foo.com/", "http://foo.com/bar/"),
        ]

    def test_construction_warns_on_overlap(self, caplog):
        with caplog.at_level(logging.WARNING, logger="semantic_toolkit.registry"):
            PrefixRegistry({
                "foo": "http://foo.com/",
                "foobar": "http://foo.com/bar/",
            })

        assert "overlapping namespaces" in caplog.text

    def test_construction_without_overlap_is_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="semantic_toolkit.registry"):
            PrefixRegistry({"ex": "http://example.org/"})

        assert caplog.text == ""

    def test_overlap_warning_names_both_directions(self, registry, caplog):
        registry.add_namespace("foobar", "http://foo.com/bar/")

        with caplog.at_level(logging.WARNING, logger="semantic_toolkit.registry"):
            registry.add_namespace("foo", "http://foo.com/")

        assert "http://foo.com/bar/" in caplog.text

    def test_bulk_registration_scales(self, registry):
        bindings = {f"p{i}": f"http://example.org/ns{i}/" for i in range(2000)}

        started = time.perf_counter()
        registry.add_namespaces(bindings)
        elapsed = time.perf_counter() - started

        assert len(registry) == 2004
        assert registry.get_prefix_for_namespace("http://example.org/ns1999/") == "p1999"
        assert elapsed < 5.0

    def test_add_namespace_warns_on_overlap(self, registry, caplog):
        registry.add_namespace("foo", "http://foo.com/")

        with caplog.at_level(logging.WARNING, logger="semantic_toolkit.registry"):
            registry.add_namespace("foobar", "http://foo.com/bar/")

        assert "overlaps" in caplog.text
        assert registry.has_prefix("foobar")
