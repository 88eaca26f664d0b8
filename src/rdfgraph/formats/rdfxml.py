"""
RDF/XML serializer.

Each top-level node becomes a node element named after its first type (or
``rdf:Description``), identified by ``rdf:about`` or, for blank nodes,
``rdf:nodeID``. Singly-referenced nested nodes are written inside their
property element; everything else is referenced with ``rdf:resource`` or
``rdf:nodeID``.

The ``rdf:RDF`` root is assembled after the body, so every prefix generated
while naming elements is declared on it.
"""

import logging
from typing import TYPE_CHECKING, Any, List, Sequence
from xml.sax.saxutils import escape

from ..constants import Predicates
from ..core.node import SubjectNode
from ..models.terms import URI, Literal, XMLLiteral
from .base import ValueKind, classify, display_types, extra_identities

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from ..core.document import Document

logger = logging.getLogger(__name__)

INDENT = "  "
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _attr(value: Any) -> str:
    return escape(str(value), {'"': "&quot;"})


def _reference_attr(uri: URI, doc: "Document") -> str:
    if uri.is_local:
        return f'{doc.namespaced_name(Predicates.NODE_ID)}="{_attr(uri.value[1:])}"'
    return f'{doc.namespaced_name(Predicates.RESOURCE)}="{_attr(uri.value)}"'


def _element_name(uri: Any, doc: "Document") -> str:
    name = doc.namespaced_name(str(uri))
    if name == str(uri):
        logger.warning(f"No element name for {uri}, output will not be well-formed")
    return name


def _node_lines(node: SubjectNode, doc: "Document", depth: int, stack: Sequence[SubjectNode], nested: bool) -> List[str]:
    indent = INDENT * depth
    types = display_types(node) or [URI(Predicates.DESCRIPTION)]
    tag = _element_name(types[0], doc)

    subject = node.subject()
    if not subject.is_local:
        identity = f' {doc.namespaced_name(Predicates.ABOUT)}="{_attr(subject.value)}"'
    elif nested:
        identity = ""
    else:
        identity = f' {doc.namespaced_name(Predicates.NODE_ID)}="{_attr(subject.value[1:])}"'

    body: List[str] = []
    inner = INDENT * (depth + 1)
    type_tag = doc.namespaced_name(Predicates.TYPE)
    for extra in types[1:]:
        body.append(f"{inner}<{type_tag} {_reference_attr(extra, doc)}/>")
    same_as = doc.namespaced_name(Predicates.SAME_AS)
    for extra in extra_identities(node):
        body.append(f"{inner}<{same_as} {_reference_attr(extra, doc)}/>")
    for predicate, values in node.statements():
        name = _element_name(predicate, doc)
        for value in values:
            body.extend(_property_lines(name, value, doc, depth + 1, stack))

    if not body:
        return [f"{indent}<{tag}{identity} />"]
    return [f"{indent}<{tag}{identity}>", *body, f"{indent}</{tag}>"]


def _property_lines(name: str, value: Any, doc: "Document", depth: int, stack: Sequence[SubjectNode]) -> List[str]:
    indent = INDENT * depth
    kind = classify(value, doc, stack)
    if kind is ValueKind.URI:
        return [f"{indent}<{name} {_reference_attr(value, doc)}/>"]
    if kind is ValueKind.REFERENCE:
        return [f"{indent}<{name} {_reference_attr(value.subject(), doc)}/>"]
    if kind is ValueKind.INLINE:
        nested = _node_lines(value, doc, depth + 1, [*stack, value], nested=True)
        return [f"{indent}<{name}>", *nested, f"{indent}</{name}>"]

    if isinstance(value, XMLLiteral):
        parse_type = doc.namespaced_name(Predicates.PARSE_TYPE)
        return [f'{indent}<{name} {parse_type}="Literal">{value.value}</{name}>']
    attrs = ""
    if isinstance(value, Literal):
        if value.datatype:
            attrs += f' {doc.namespaced_name(Predicates.DATATYPE)}="{_attr(value.datatype)}"'
        elif value.lang:
            attrs += f' xml:lang="{_attr(value.lang)}"'
    return [f"{indent}<{name}{attrs}>{escape(str(value))}</{name}>"]


def node_to_rdfxml(node: SubjectNode, doc: "Document", depth: int = 1) -> str:
    """The node element for one top-level node, without the document wrapper."""
    return "\n".join(_node_lines(node, doc, depth, [node], nested=False))


def document_to_rdfxml(doc: "Document") -> str:
    """Serialize every top-level node of ``doc`` inside an ``rdf:RDF`` root."""
    root = doc.namespaced_name(Predicates.RDF_ROOT)
    body = [node_to_rdfxml(node, doc) for node in doc.top_level_nodes()]
    declarations = [
        f'xmlns:{prefix}="{_attr(uri)}"'
        for uri, prefix in doc.namespaces.items()
    ]
    opening = f"<{root}"
    if declarations:
        opening += "\n" + "\n".join(INDENT * 2 + d for d in declarations)
    opening += ">"
    logger.debug(f"Serialized {len(body)} subjects as RDF/XML")
    return "\n".join([XML_DECLARATION, opening, *body, f"</{root}>"]) + "\n"
