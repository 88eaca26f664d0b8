"""
rdfgraph - an in-memory RDF graph of subject nodes.

Imports RDF/XML markup trees into a ``Document`` of mutable subject nodes,
offers multilingual lookups over their values, and serializes the graph as
Turtle, RDF/XML, tagged-value JSON or an HTML debug view.

Usage:
    from rdfgraph import document_from_file

    doc = document_from_file("people.rdf")
    print(doc.primary_topic().title(["fr", "en"]))
    print(doc.to_turtle())
"""

__version__ = "0.1.0"

from .core import Document, SubjectNode
from .config import GraphConfig, load_graph_config
from .exceptions import ConfigError, RdfGraphError, RegistryFrozenError
from .loaders import (
    document_from_file,
    document_from_tree,
    document_from_url,
    document_from_xml_string,
)
from .models import URI, DateTimeLiteral, Literal, ValueSet, XMLLiteral
from .plugins import register_ontology

__all__ = [
    "__version__",
    "Document",
    "SubjectNode",
    "GraphConfig",
    "load_graph_config",
    "ConfigError",
    "RdfGraphError",
    "RegistryFrozenError",
    "document_from_file",
    "document_from_tree",
    "document_from_url",
    "document_from_xml_string",
    "URI",
    "Literal",
    "XMLLiteral",
    "DateTimeLiteral",
    "ValueSet",
    "register_ontology",
]
