"""
Shared value dispatch for the serializers.

Every serializer walks a node's statements the same way and sorts each value
into one of four kinds; only the syntax differs per format.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from ..constants import Predicates
from ..core.node import SubjectNode
from ..models.terms import URI

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from ..core.document import Document


class ValueKind(str, Enum):
    """How a property value is written."""
    URI = "uri"
    REFERENCE = "reference"
    INLINE = "inline"
    LITERAL = "literal"


def classify(value: Any, doc: Optional["Document"] = None, stack: Sequence[SubjectNode] = ()) -> ValueKind:
    """
    Decide how ``value`` is written.

    A nested node is referenced by identifier when it is held in more than
    one place, when it is written at top level anyway, or when it is already
    being written further up (a cycle); otherwise it is inlined.
    """
    if isinstance(value, SubjectNode):
        if value.refcount > 1 or any(value is seen for seen in stack):
            return ValueKind.REFERENCE
        if doc is not None and doc.is_top_level(value):
            return ValueKind.REFERENCE
        return ValueKind.INLINE
    if isinstance(value, URI):
        return ValueKind.URI
    return ValueKind.LITERAL


def extra_identities(node: SubjectNode) -> List[URI]:
    """Declared identities after the primary subject."""
    return node.subjects()[1:]


def display_types(node: SubjectNode) -> List[URI]:
    """``rdf:type`` values worth writing; a bare ``rdf:Description`` adds nothing."""
    return [t for t in node.types() if str(t) != Predicates.DESCRIPTION]
