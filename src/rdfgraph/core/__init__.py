"""
Graph core: subject nodes, the document that owns them, and the importer.

Usage:
    from rdfgraph.core import Document, SubjectNode

    doc = Document(location="http://example.org/people.rdf")
    doc.from_import(root_element)
    alice = doc.subject("http://example.org/alice")
"""

from .node import SubjectNode, values_equal
from .document import Document
from .importer import import_document, populate_node

__all__ = [
    "Document",
    "SubjectNode",
    "import_document",
    "populate_node",
    "values_equal",
]
