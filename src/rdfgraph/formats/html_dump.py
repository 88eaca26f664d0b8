"""
HTML debug view.

Renders nodes as definition lists: the subject as a ``<dt>`` link, each
statement as a ``<dd>`` with linked predicate and values. Singly-referenced
nested nodes are shown as a nested list under their value link.

Without a document, URIs are shown in full; with one, short names are used
where a prefix is already known.
"""

import logging
from html import escape
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from ..constants import Predicates
from ..core.node import SubjectNode
from ..models.terms import Literal
from .base import ValueKind, classify, display_types

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from ..core.document import Document

logger = logging.getLogger(__name__)

SUBJECT_COLOR = "#aa00aa"
PREDICATE_COLOR = "#00aa00"
OBJECT_COLOR = "#0000aa"


def _label(uri: Any, doc: Optional["Document"], predicate: bool = False) -> str:
    uri = str(uri)
    if predicate and uri == Predicates.TYPE:
        return "a"
    if uri.startswith("#"):
        return "_:" + uri[1:]
    if doc is not None:
        return doc.namespaced_name(uri, generate=False)
    return uri


def _link(uri: Any, doc: Optional["Document"], css: str, color: str, predicate: bool = False) -> str:
    return (
        f'<a class="{css}" href="{escape(str(uri))}" style="color: {color};">'
        f"{escape(_label(uri, doc, predicate))}</a>"
    )


def _literal(value: Any) -> str:
    title = ""
    if isinstance(value, Literal):
        if value.datatype:
            title = f' title="{escape(value.datatype)}"'
        elif value.lang:
            title = f' title="@{escape(value.lang)}"'
    return f'<span class="literal"{title}>&quot;{escape(str(value))}&quot;</span>'


def _value(value: Any, doc: Optional["Document"], stack: Sequence[SubjectNode]) -> str:
    kind = classify(value, doc, stack)
    if kind is ValueKind.URI:
        return _link(value, doc, "uri", OBJECT_COLOR)
    if kind is ValueKind.LITERAL:
        return _literal(value)
    link = _link(value.subject(), doc, "uri", OBJECT_COLOR)
    if kind is ValueKind.REFERENCE:
        return link
    return link + "\n" + "\n".join(_definition_list(value, doc, [*stack, value]))


def _entries(node: SubjectNode, doc: Optional["Document"], stack: Sequence[SubjectNode]) -> List[str]:
    subject = node.subject()
    lines = [f"<dt>{_link(subject, doc, 'subject', SUBJECT_COLOR)}</dt>"]
    rows = []
    types = display_types(node)
    if types:
        rows.append((Predicates.TYPE, types))
    for predicate in Predicates.IDENTITY:
        extra = [v for v in node.values(predicate) if v != subject]
        if extra:
            rows.append((predicate, extra))
    rows.extend(node.statements())
    for predicate, values in rows:
        rendered = ", ".join(_value(v, doc, stack) for v in values)
        prop = _link(predicate, doc, "prop", PREDICATE_COLOR, predicate=True)
        lines.append(f"<dd>&rarr; {prop} &rarr; {rendered}</dd>")
    return lines


def _definition_list(node: SubjectNode, doc: Optional["Document"], stack: Sequence[SubjectNode]) -> List[str]:
    return ["<dl>", *_entries(node, doc, stack), "</dl>"]


def node_to_html(node: SubjectNode, doc: Optional["Document"] = None) -> str:
    """A standalone ``<dl>`` for one node."""
    return "\n".join(_definition_list(node, doc, [node]))


def document_to_html(doc: "Document") -> str:
    """One ``<dl>`` listing every top-level node of ``doc``."""
    lines = ["<dl>"]
    for node in doc.top_level_nodes():
        lines.extend(_entries(node, doc, [node]))
    lines.append("</dl>")
    logger.debug(f"Rendered {len(lines) - 2} debug lines")
    return "\n".join(lines)
