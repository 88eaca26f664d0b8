"""
Tagged-value (RDF/JSON-like) projection.

A node projects to ``{"type": "node", "value": {predicate: [entry, ...]}}``
with ``rdf:about`` and ``rdf:type`` first. Each entry is a tagged value:

- ``{"type": "uri", "value": ...}``
- ``{"type": "literal", "value": ..., "datatype"?: ..., "lang"?: ...}``
- ``{"type": "node", "value": {...}}`` for a singly-referenced nested node
- ``{"type": "uri", "value": subject}`` for any other nested node

A document projects to a list with one predicate map per top-level node.
"""

import json
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..constants import Predicates
from ..core.node import SubjectNode
from ..models.terms import term_as_array
from .base import ValueKind, classify

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from ..core.document import Document

logger = logging.getLogger(__name__)

_LEADING = (Predicates.ABOUT, Predicates.ID, Predicates.TYPE)


def _ordered_items(node: SubjectNode):
    for predicate in _LEADING:
        values = node.values(predicate)
        if values:
            yield predicate, values
    yield from node.statements()


def value_as_array(value: Any, doc: Optional["Document"] = None, stack: Sequence[SubjectNode] = ()) -> Dict[str, Any]:
    if isinstance(value, SubjectNode):
        if classify(value, doc, stack) is ValueKind.INLINE:
            return node_as_array(value, doc, [*stack, value])
        return {"type": "uri", "value": str(value.subject())}
    return term_as_array(value)


def node_as_array(node: SubjectNode, doc: Optional["Document"] = None, stack: Sequence[SubjectNode] = ()) -> Dict[str, Any]:
    """
    Project a node and its singly-referenced descendants to tagged values.

    Without ``doc``, only the reference count decides whether a nested node
    is inlined.
    """
    stack = stack or [node]
    return {
        "type": "node",
        "value": {
            predicate: [value_as_array(v, doc, stack) for v in values]
            for predicate, values in _ordered_items(node)
        },
    }


def document_as_array(doc: "Document") -> List[Dict[str, Any]]:
    return [node_as_array(node, doc)["value"] for node in doc.top_level_nodes()]


def document_to_json(doc: "Document", indent: Optional[int] = None) -> str:
    data = document_as_array(doc)
    logger.debug(f"Serialized {len(data)} subjects as JSON")
    return json.dumps(data, indent=indent, ensure_ascii=False)
