"""Well-known namespace bindings every registry starts with."""

from types import MappingProxyType
from typing import Mapping

RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"
XSD = "http://www.w3.org/2001/XMLSchema#"
OWL = "http://www.w3.org/2002/07/owl#"

# Read-only; registries take their own copy at construction.
DEFAULT_PREFIXES: Mapping[str, str] = MappingProxyType({
    "rdf": RDF,
    "rdfs": RDFS,
    "xsd": XSD,
    "owl": OWL,
})

# Reserved namespace of blank node labels ("_:b0")
BLANK_NODE_NAMESPACE = "_"
