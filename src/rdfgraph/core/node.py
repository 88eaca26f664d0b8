"""
Subject Node - a mutable property bag describing one subject.

Each node maps predicate URIs to ordered, duplicate-free value lists. The
identity of the subject lives in the ``rdf:about`` and ``rdf:ID`` predicates;
a node with neither is a blank node known by the synthetic local identifier
assigned at construction.

``refcount`` counts the property slots across a document holding this node
by identity. It does not manage lifetime; serializers use it to decide
between inlining a node and referencing it.

Specialized node variants for known vocabularies subclass ``SubjectNode``,
override ``transform()`` and are registered with
``rdfgraph.plugins.register_ontology``.
"""

import logging
import uuid
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from ..constants import DEFAULT_LANGS, LabelPredicates, Predicates
from ..models.terms import URI, Literal
from ..models.value_set import LangSpec, ValueSet

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from xml.etree.ElementTree import Element
    from .document import Document

logger = logging.getLogger(__name__)

Keys = Union[str, Sequence[str]]

# Predicates whose values are always references
_REFERENCE_PREDICATES = (Predicates.ABOUT, Predicates.ID, Predicates.TYPE)


def values_equal(a: Any, b: Any) -> bool:
    """
    Value equality used for deduplication.

    Nodes are equal when they are the same object or describe the same
    subject; terms compare structurally; plain strings by text.
    """
    a_node = isinstance(a, SubjectNode)
    b_node = isinstance(b, SubjectNode)
    if a_node or b_node:
        if a is b:
            return True
        return a_node and b_node and a.subject() == b.subject()
    if isinstance(a, (URI, Literal)) or isinstance(b, (URI, Literal)):
        return a == b
    return str(a) == str(b)


class SubjectNode:
    """
    A subject and its predicate/value statements.

    Attributes:
        refcount: Number of property slots in the document holding this node.
        local_id: Synthetic ``#``-prefixed identifier, stable for the node's lifetime.
        default_langs: Preferred languages for the multilingual lookups; set
            from the owning document's configuration.
    """

    def __init__(self, uri: Optional[Union[str, URI]] = None, type: Optional[Union[str, URI]] = None) -> None:
        self._properties: Dict[str, List[Any]] = {}
        self.refcount = 0
        self.local_id = URI(f"#n{uuid.uuid4().hex[:16]}")
        self.default_langs: Tuple[str, ...] = DEFAULT_LANGS
        if uri:
            self.add(Predicates.ABOUT, uri)
        if type:
            self.add(Predicates.TYPE, type)

    @classmethod
    def for_element(cls, namespace: str, local_name: str) -> Optional["SubjectNode"]:
        """
        Node factory used by the ontology registry.

        Subclasses may inspect the element name and return ``None`` to fall
        back to a generic node.
        """
        return cls()

    # ------------------------------------------------------------------
    # Property access
    # ------------------------------------------------------------------

    def predicates(self) -> List[str]:
        """Predicates with at least one value, in first-assertion order."""
        return [p for p, values in self._properties.items() if values]

    def values(self, predicate: str) -> List[Any]:
        return list(self._properties.get(predicate, ()))

    def items(self) -> Iterator[Tuple[str, List[Any]]]:
        for predicate, values in self._properties.items():
            if values:
                yield predicate, list(values)

    def _append(self, predicate: str, value: Any) -> bool:
        if predicate in _REFERENCE_PREDICATES and not isinstance(value, (URI, SubjectNode)):
            value = URI(str(value))
        values = self._properties.setdefault(predicate, [])
        for existing in values:
            if values_equal(existing, value):
                return False
        values.append(value)
        return True

    def add(self, predicate: str, *values: Any) -> None:
        """
        Append values to a predicate, skipping any already present.

        A node appended as a value gains one reference.
        """
        for value in values:
            if self._append(predicate, value) and isinstance(value, SubjectNode):
                value.refcount += 1

    def remove(self, predicate: str) -> List[Any]:
        """Drop every value of ``predicate`` and return them."""
        return self._properties.pop(predicate, [])

    def replace_value(self, old: Any, new: Any) -> int:
        """Swap every occurrence of ``old`` (by identity) for ``new``; returns the count."""
        swapped = 0
        for values in self._properties.values():
            for i, value in enumerate(values):
                if value is old:
                    values[i] = new
                    swapped += 1
        return swapped

    def __contains__(self, predicate: str) -> bool:
        return bool(self._properties.get(predicate))

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def subject(self) -> URI:
        """The first ``rdf:about`` value, else the first ``rdf:ID``, else the local identifier."""
        for predicate in Predicates.IDENTITY:
            value = self.first(predicate)
            if value is not None:
                return value
        return self.local_id

    def subjects(self) -> List[URI]:
        """Every declared identity, or the local identifier alone."""
        declared = [v for p in Predicates.IDENTITY for v in self._properties.get(p, ())]
        return declared or [self.local_id]

    @property
    def is_blank(self) -> bool:
        return self.subject().is_local

    def types(self) -> List[URI]:
        return self.values(Predicates.TYPE)

    def is_a(self, type: Union[str, URI, "SubjectNode"]) -> bool:
        """True if ``type`` is among this node's ``rdf:type`` values."""
        if isinstance(type, SubjectNode):
            type = type.subject()
        wanted = str(type)
        return any(str(t) == wanted for t in self._properties.get(Predicates.TYPE, ()))

    # ------------------------------------------------------------------
    # Merging and lookup
    # ------------------------------------------------------------------

    def merge(self, other: "SubjectNode") -> "SubjectNode":
        """
        Merge ``other``'s statements into this node.

        Reference counts are summed. For each predicate, values not already
        present are appended in ``other``'s order.
        """
        if other is self:
            return self
        self.refcount += other.refcount
        for predicate, values in other._properties.items():
            for value in values:
                self._append(predicate, value)
        return self

    def first(self, key: str) -> Any:
        values = self._properties.get(key)
        return values[0] if values else None

    def all(self, keys: Keys, null_on_empty: bool = False) -> Optional[ValueSet]:
        """
        Values of one or more predicates concatenated, as a ``ValueSet``.

        Returns an empty set when nothing matches, or ``None`` if
        ``null_on_empty`` is set.
        """
        if isinstance(keys, str):
            keys = [keys]
        values: List[Any] = []
        for key in keys:
            values.extend(self._properties.get(key, ()))
        if not values and null_on_empty:
            return None
        return ValueSet(values, default_langs=self.default_langs)

    def lang(self, keys: Keys, langs: LangSpec = None, fallback_first: bool = True) -> Optional[str]:
        """Shorthand for ``all(keys).lang(langs, fallback_first)``."""
        return self.all(keys).lang(langs, fallback_first)

    def title(self, langs: LangSpec = None, fallback_first: bool = True) -> Optional[str]:
        return self.lang(LabelPredicates.TITLE, langs, fallback_first)

    def description(self, langs: LangSpec = None, fallback_first: bool = True) -> Optional[str]:
        return self.lang(LabelPredicates.DESCRIPTION, langs, fallback_first)

    def short_desc(self, langs: LangSpec = None, fallback_first: bool = True) -> Optional[str]:
        return self.lang(LabelPredicates.SHORT_DESC, langs, fallback_first)

    def medium_desc(self, langs: LangSpec = None, fallback_first: bool = True) -> Optional[str]:
        return self.lang(LabelPredicates.MEDIUM_DESC, langs, fallback_first)

    def long_desc(self, langs: LangSpec = None, fallback_first: bool = True) -> Optional[str]:
        return self.lang(LabelPredicates.LONG_DESC, langs, fallback_first)

    # ------------------------------------------------------------------
    # Import hooks
    # ------------------------------------------------------------------

    def from_tree(self, element: "Element", doc: "Document") -> "SubjectNode":
        """Populate this node from a node element of a parsed markup tree."""
        from .importer import populate_node
        populate_node(self, element, doc)
        return self

    def transform(self) -> None:
        """
        Called once after import. Specialized variants project predicate
        values onto convenience attributes here.
        """

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def statements(self) -> Iterator[Tuple[str, List[Any]]]:
        """Predicates and values, excluding identity and type, which serializers handle separately."""
        for predicate, values in self.items():
            if predicate in _REFERENCE_PREDICATES:
                continue
            yield predicate, values

    def to_turtle(self, doc: "Document") -> str:
        from ..formats.turtle import node_to_turtle
        return node_to_turtle(self, doc)

    def to_rdfxml(self, doc: "Document") -> str:
        from ..formats.rdfxml import node_to_rdfxml
        return node_to_rdfxml(self, doc)

    def as_array(self, doc: Optional["Document"] = None) -> Dict[str, Any]:
        from ..formats.rdfjson import node_as_array
        return node_as_array(self, doc)

    def dump(self, doc: Optional["Document"] = None) -> str:
        from ..formats.html_dump import node_to_html
        return node_to_html(self, doc)

    def __str__(self) -> str:
        return str(self.subject())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.subject())!r}, refcount={self.refcount})"
