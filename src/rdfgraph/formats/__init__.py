"""
Serializers for documents and subject nodes.

Supported outputs:
- Turtle (turtle.py)
- RDF/XML (rdfxml.py)
- Tagged-value JSON (rdfjson.py)
- HTML debug view (html_dump.py)
- rdflib Graph (rdflib_bridge.py)
"""

from .base import ValueKind, classify
from .html_dump import document_to_html, node_to_html
from .rdfjson import document_as_array, document_to_json, node_as_array
from .rdflib_bridge import document_to_graph
from .rdfxml import document_to_rdfxml, node_to_rdfxml
from .turtle import document_to_turtle, node_to_turtle

FORMATS = {
    "turtle": document_to_turtle,
    "rdfxml": document_to_rdfxml,
    "json": document_to_json,
    "html": document_to_html,
}
"""Output format name to document serializer."""

__all__ = [
    "FORMATS",
    "ValueKind",
    "classify",
    "document_as_array",
    "document_to_graph",
    "document_to_html",
    "document_to_json",
    "document_to_rdfxml",
    "document_to_turtle",
    "node_as_array",
    "node_to_html",
    "node_to_rdfxml",
    "node_to_turtle",
]
