"""
Bridge to rdflib.

Copies every statement of a document into an ``rdflib.Graph`` so the graph
can be queried with SPARQL or written in any format rdflib supports.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict

from rdflib import OWL, RDF, BNode, Graph, Literal as RDFLiteral, Namespace, URIRef
from rdflib.term import Node

from ..core.node import SubjectNode
from ..models.terms import URI, Literal
from .base import display_types, extra_identities

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from ..core.document import Document

logger = logging.getLogger(__name__)


class _TermMapper:
    """Maps node values to rdflib terms, keeping one ``BNode`` per local identifier."""

    def __init__(self) -> None:
        self._bnodes: Dict[str, BNode] = {}

    def uri(self, uri: URI) -> Node:
        if uri.is_local:
            return self._bnodes.setdefault(uri.value, BNode(uri.value[1:]))
        return URIRef(uri.value)

    def value(self, value: Any) -> Node:
        if isinstance(value, SubjectNode):
            return self.uri(value.subject())
        if isinstance(value, URI):
            return self.uri(value)
        if isinstance(value, Literal):
            if value.datatype:
                return RDFLiteral(value.value, datatype=URIRef(value.datatype))
            return RDFLiteral(value.value, lang=value.lang)
        return RDFLiteral(str(value))


def document_to_graph(doc: "Document") -> Graph:
    """
    Every subject of ``doc`` as rdflib triples.

    Blank nodes keep their local identifiers as labels. Extra identities
    become ``owl:sameAs`` statements.
    """
    graph = Graph()
    for uri, prefix in doc.namespaces.items():
        graph.bind(prefix, Namespace(uri))

    terms = _TermMapper()
    for node in doc:
        subject = terms.uri(node.subject())
        for type_uri in display_types(node):
            graph.add((subject, RDF.type, terms.uri(type_uri)))
        for identity in extra_identities(node):
            graph.add((subject, OWL.sameAs, terms.uri(identity)))
        for predicate, values in node.statements():
            if " " in predicate:
                # Markup-only attributes such as xml:lang have no triple form
                logger.debug(f"Skipping {predicate!r} on {node.subject()}")
                continue
            for value in values:
                graph.add((subject, URIRef(predicate), terms.value(value)))

    logger.info(f"Built rdflib graph with {len(graph)} triples from {len(doc)} subjects")
    return graph
