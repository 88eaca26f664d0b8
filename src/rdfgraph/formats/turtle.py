"""
Turtle serializer.

Writes the top-level nodes of a document as Turtle blocks, one per subject,
preceded by ``@prefix`` lines for every namespace the output uses.

Nested nodes are inlined where they are singly referenced: a blank node as a
``[ ... ]`` property list, a named node as a reference whose own block
follows its parent's. Multiply-referenced nodes and cycles are always written
by reference.
"""

import logging
import re
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, List, Optional, Sequence, Set

from ..constants import Predicates
from ..core.node import SubjectNode
from ..models.terms import URI, Literal
from .base import ValueKind, classify, display_types, extra_identities

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from ..core.document import Document

logger = logging.getLogger(__name__)

INDENT = "\t"

_PREFIX_RE = re.compile(r"^([A-Za-z][A-Za-z0-9_\-]*)?$")
_LOCAL_RE = re.compile(r"^[A-Za-z0-9_]([A-Za-z0-9_.\-]*[A-Za-z0-9_\-])?$")
_BLANK_LABEL_RE = re.compile(r"[^A-Za-z0-9_\-]")
_IRI_ESCAPES = {" ": "%20", "<": "%3C", ">": "%3E", '"': "%22", "{": "%7B", "}": "%7D", "|": "%7C", "\\": "%5C", "^": "%5E", "`": "%60"}


def _valid_qname(qname: str, doc: "Document") -> bool:
    prefix, sep, local = qname.partition(":")
    if not sep or prefix not in doc.namespaces.values():
        return False
    return bool(_PREFIX_RE.match(prefix)) and bool(_LOCAL_RE.match(local))


def _iri(uri: str) -> str:
    return "<" + "".join(_IRI_ESCAPES.get(ch, ch) for ch in uri) + ">"


def blank_label(uri: URI) -> str:
    return "_:" + _BLANK_LABEL_RE.sub("_", uri.value[1:])


def uri_term(uri: Any, doc: "Document", generate: bool = False) -> str:
    """
    A URI as a Turtle term: ``_:label`` for local identifiers, ``prefix:local``
    when a usable short name exists, ``<uri>`` otherwise.
    """
    uri = uri if isinstance(uri, URI) else URI(str(uri))
    if uri.is_local:
        return blank_label(uri)
    qname = doc.namespaced_name(uri.value, generate=generate)
    if qname != uri.value and _valid_qname(qname, doc):
        return qname
    return _iri(uri.value)


def literal_term(value: Any, doc: "Document") -> str:
    """Quoted text with its datatype or language suffix; long quotes for multi-line text."""
    text = str(value)
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\r", "\\r")
    if "\n" in text:
        quoted = f'"""{escaped}"""'
    else:
        quoted = f'"{escaped}"'
    if isinstance(value, Literal):
        if value.datatype:
            return f"{quoted}^^{uri_term(value.datatype, doc, generate=True)}"
        if value.lang:
            return f"{quoted}@{value.lang}"
    return quoted


class _Writer:
    """Writes blocks for one serialization pass, queueing named nodes met inline."""

    def __init__(self, doc: "Document") -> None:
        self.doc = doc
        self.pending: List[SubjectNode] = []

    def value(self, value: Any, stack: Sequence[SubjectNode]) -> str:
        kind = classify(value, self.doc, stack)
        if kind is ValueKind.URI:
            return uri_term(value, self.doc)
        if kind is ValueKind.LITERAL:
            return literal_term(value, self.doc)
        if kind is ValueKind.INLINE and value.is_blank:
            return self.property_list(value, list(stack) + [value])
        if kind is ValueKind.INLINE:
            self.pending.append(value)
        return uri_term(value.subject(), self.doc)

    def predicate_objects(self, node: SubjectNode, stack: Sequence[SubjectNode]) -> List[str]:
        """``predicate object, object`` fragments for a node, ``a`` first."""
        parts = []
        types = display_types(node)
        if types:
            parts.append("a " + " , ".join(uri_term(t, self.doc, generate=True) for t in types))
        same_as = extra_identities(node)
        if same_as:
            parts.append(
                uri_term(Predicates.SAME_AS, self.doc, generate=True) + " "
                + " , ".join(uri_term(i, self.doc) for i in same_as)
            )
        for predicate, values in node.statements():
            objects = [self.value(v, stack) for v in values]
            parts.append(uri_term(predicate, self.doc, generate=True) + " " + " , ".join(objects))
        return parts

    def property_list(self, node: SubjectNode, stack: Sequence[SubjectNode]) -> str:
        parts = self.predicate_objects(node, stack)
        if not parts:
            return "[]"
        return "[ " + " ; ".join(parts) + " ]"

    def block(self, node: SubjectNode) -> Optional[str]:
        parts = self.predicate_objects(node, [node])
        if not parts:
            return None
        lines = [uri_term(node.subject(), self.doc)]
        for i, part in enumerate(parts):
            end = " ." if i == len(parts) - 1 else " ;"
            lines.append(INDENT + part + end)
        return "\n".join(lines)


def node_to_turtle(node: SubjectNode, doc: "Document") -> str:
    """
    The Turtle block for one node, followed by the blocks of named nodes
    inlined under it. Empty when the node has no statements.
    """
    writer = _Writer(doc)
    return "\n\n".join(_drain(writer, deque([node]), set()))


def _drain(writer: _Writer, queue: Deque[SubjectNode], written: Set[int]) -> List[str]:
    blocks = []
    while queue:
        node = queue.popleft()
        if id(node) in written:
            continue
        written.add(id(node))
        writer.pending = []
        block = writer.block(node)
        if block is not None:
            blocks.append(block)
        # Named nodes met inline are written straight after their parent
        queue.extendleft(reversed(writer.pending))
    return blocks


def document_to_turtle(doc: "Document") -> str:
    """
    Serialize every top-level node of ``doc``.

    The prefix lines are collected after the body so they include any
    prefixes generated while writing it.
    """
    writer = _Writer(doc)
    blocks = _drain(writer, deque(doc.top_level_nodes()), set())
    prefixes = [f"@prefix {prefix}: {_iri(uri)} ." for uri, prefix in doc.namespaces.items()]
    logger.debug(f"Serialized {len(blocks)} subjects as Turtle")
    sections = []
    if prefixes:
        sections.append("\n".join(prefixes))
    sections.extend(blocks)
    return "\n\n".join(sections) + "\n"
