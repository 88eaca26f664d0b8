"""
Ontology plugin infrastructure.

Specialized ``SubjectNode`` variants register against a namespace and are
picked by the importer when it materializes an element from that namespace.

Usage:
    from rdfgraph.plugins import register_ontology

    @register_ontology("http://purl.org/ontology/po/")
    class Programme(SubjectNode):
        def transform(self) -> None:
            ...

    config = GraphConfig.default()   # snapshots every registration so far
"""

from .registry import (
    NodeFactory,
    OntologyRegistry,
    default_registry,
    get_registered_ontologies,
    register_ontology,
)
from .builtin import FoafAgent

__all__ = [
    # Registry
    "NodeFactory",
    "OntologyRegistry",
    "default_registry",
    # Registration
    "register_ontology",
    "get_registered_ontologies",
    # Built-in variants
    "FoafAgent",
]
