"""
Document - the collection of subject nodes making up one graph.

The document resolves identity (one node per subject URI), remembers which
subjects are top-level for output, owns the namespace -> prefix table used
for short names, and dispatches to the serializers.

Usage:
    doc = Document(location="http://example.org/people.rdf")
    doc.from_import(root_element)
    print(doc.to_turtle())

    me = doc.subject("http://example.org/me")
    me.title(["fr", "en"])
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Union

from ..config import GraphConfig
from ..constants import Predicates, Vocab
from ..models.terms import URI
from .node import SubjectNode
from .uri_utils import split_namespace

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from xml.etree.ElementTree import Element, ElementTree
    from rdflib import Graph

logger = logging.getLogger(__name__)

SubjectRef = Union[str, URI, SubjectNode]


def _key(ref: SubjectRef) -> str:
    if isinstance(ref, SubjectNode):
        ref = ref.subject()
    return str(ref)


class Document:
    """
    An in-memory graph of subject nodes.

    Attributes:
        location: URI the document was loaded from; the base for resolving
            relative references during import.
        primary_topic_id: Explicitly configured primary topic, if any.
        config: Immutable settings (ontology factories, default prefixes,
            preferred languages).
    """

    def __init__(
        self,
        location: Optional[str] = None,
        primary_topic: Optional[str] = None,
        config: Optional[GraphConfig] = None,
    ) -> None:
        self.location = location
        self.primary_topic_id = primary_topic
        self.config = config or GraphConfig.default()
        self._subjects: Dict[str, SubjectNode] = {}
        self._promoted: Dict[str, None] = {}
        self._namespaces: Dict[str, str] = {}
        self._qnames: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def _register(self, key: str, node: SubjectNode, position: Optional[int] = None) -> None:
        node.default_langs = self.config.langs
        if position is None or position >= len(self._subjects):
            self._subjects[key] = node
            return
        items = list(self._subjects.items())
        items.insert(max(position, 0), (key, node))
        self._subjects = dict(items)

    def _find(self, key: str) -> Optional[SubjectNode]:
        node = self._subjects.get(key)
        if node is not None:
            return node
        for candidate in self._subjects.values():
            if any(str(s) == key for s in candidate.subjects()):
                return candidate
        return None

    def subject(
        self,
        ref: SubjectRef,
        type: Optional[Union[str, URI]] = None,
        create: bool = True,
    ) -> Optional[SubjectNode]:
        """
        The node for a subject, matched by stored identifier or declared identity.

        If absent and ``create`` is set, a new (optionally typed) node is
        registered; the document's own location is typed ``rdf:Description``
        by default. Callers promote it explicitly if it belongs at top level.
        """
        key = _key(ref)
        node = self._find(key)
        if node is not None or not create:
            return node
        if type is None and self.location and key == self.location:
            type = Predicates.DESCRIPTION
        node = SubjectNode(key, type)
        self._register(key, node)
        logger.debug(f"Created subject {key}")
        return node

    def get(self, ref: SubjectRef) -> Optional[SubjectNode]:
        """Lookup without creation."""
        return self.subject(ref, create=False)

    def merge(self, node_or_id: SubjectRef, position: Optional[int] = None) -> Optional[SubjectNode]:
        """
        Merge a node into the document.

        If a node for any of its subjects already exists, the statements are
        merged into that node, which is returned. Otherwise the node is
        inserted at ``position`` (appended when ``None``) and returned. An
        identifier that matches no node yields ``None``.
        """
        if not isinstance(node_or_id, SubjectNode):
            return self.subject(node_or_id, create=False)
        node = node_or_id
        for identity in node.subjects():
            existing = self._find(str(identity))
            if existing is not None:
                if existing is not node:
                    existing.merge(node)
                    logger.debug(f"Merged statements into existing subject {existing.subject()}")
                return existing
        self._register(_key(node), node, position)
        return node

    def add(self, node: SubjectNode) -> Optional[SubjectNode]:
        """As ``merge``, then promote the result to top level."""
        merged = self.merge(node)
        if merged is not None:
            self.promote(merged)
        return merged

    def replace(self, node: SubjectNode, add_if_not_found: bool = True) -> Optional[SubjectNode]:
        """
        Swap the node describing the same subject for ``node`` wholesale.

        The replacement inherits the old node's reference count, and every
        property slot that held the old node now holds the new one. When no
        node matches, ``node`` is appended with one more reference if
        ``add_if_not_found`` is set; otherwise ``None`` is returned.
        """
        key = _key(node)
        for stored_key, existing in self._subjects.items():
            if any(str(s) == key for s in existing.subjects()):
                break
        else:
            if not add_if_not_found:
                return None
            self._register(key, node)
            node.refcount += 1
            return node

        node.refcount = existing.refcount
        self._subjects[stored_key] = node
        node.default_langs = self.config.langs
        for other in self._subjects.values():
            other.replace_value(existing, node)
        logger.debug(f"Replaced subject {key}")
        return node

    def promote(self, ref: SubjectRef) -> None:
        """Mark a subject as a top-level entity for output."""
        self._promoted[_key(ref)] = None

    def is_promoted(self, ref: SubjectRef) -> bool:
        return _key(ref) in self._promoted

    def is_top_level(self, node: SubjectNode) -> bool:
        """
        True if the node is output at the root rather than inlined.

        Unreferenced and multiply-referenced nodes are always top level;
        singly-referenced nodes only when promoted.
        """
        if node.refcount == 0 or node.refcount > 1:
            return True
        return any(str(s) in self._promoted for s in node.subjects())

    def top_level_nodes(self) -> List[SubjectNode]:
        return [node for node in self._subjects.values() if self.is_top_level(node)]

    @property
    def subjects(self) -> List[SubjectNode]:
        return list(self._subjects.values())

    def primary_topic(self) -> Optional[SubjectNode]:
        """
        The node this document is about.

        In order: the configured primary topic; the ``foaf:primaryTopic`` of
        the node describing the document's own location; the first node typed
        ``rdf:Description`` (or its primary topic); the first node.
        """
        if self.primary_topic_id:
            return self.subject(self.primary_topic_id, create=False)
        top = file_node = None
        if self.location:
            file_node = self.subject(self.location, create=False)
            if file_node is not None and Predicates.PRIMARY_TOPIC in file_node:
                top = file_node
        if top is None:
            top = next((n for n in self._subjects.values() if n.first(Predicates.TYPE) == URI(Predicates.DESCRIPTION)), None)
        if top is None:
            top = next(iter(self._subjects.values()), None)
        if top is None:
            return None
        topic = top.first(Predicates.PRIMARY_TOPIC)
        if isinstance(topic, SubjectNode):
            return topic
        if topic is not None:
            found = self.subject(topic, create=False)
            if found is not None:
                return found
        if file_node is not None:
            return file_node
        return top

    # ------------------------------------------------------------------
    # Namespaces
    # ------------------------------------------------------------------

    def ns(self, uri: str, prefix: str, overwrite: bool = False) -> str:
        """
        Register a document-local prefix; the first registration wins unless ``overwrite``.

        A prefix already bound to another namespace is not reused; a fresh
        ``nsN`` is assigned instead.
        """
        if overwrite or uri not in self._namespaces:
            if any(p == prefix and u != uri for u, p in self._namespaces.items()):
                taken = prefix
                prefix = self._generate_prefix()
                logger.warning(f"Prefix {taken} is already bound, using {prefix} for {uri}")
            if self._namespaces.get(uri) != prefix:
                self._qnames.clear()
            self._namespaces[uri] = prefix
        return self._namespaces[uri]

    @property
    def namespaces(self) -> Dict[str, str]:
        """Namespace URI -> prefix table in registration order."""
        return dict(self._namespaces)

    def _generate_prefix(self) -> str:
        used = set(self._namespaces.values())
        n = len(self._namespaces)
        while f"ns{n}" in used:
            n += 1
        return f"ns{n}"

    def namespaced_name(self, uri: Any, generate: bool = True) -> str:
        """
        The ``prefix:local`` short name of a URI.

        The prefix comes from the document table, then the configured
        defaults, then (if ``generate``) a fresh ``nsN``. Returns the URI
        unchanged when it has no split point, no local name, or no prefix
        could be found.
        """
        uri = str(uri)
        cached = self._qnames.get(uri)
        if cached is not None:
            return cached
        parts = split_namespace(uri)
        if parts is None:
            return uri
        namespace, local = parts
        if namespace == Vocab.XML:
            return f"xml:{local}"
        if namespace in (Vocab.XMLNS, Vocab.XMLNS.rstrip("/")):
            return f"xmlns:{local}"
        if not local:
            return uri
        prefix = self._namespaces.get(namespace)
        if prefix is None:
            prefix = self.config.prefix_for(namespace)
            if prefix is not None and prefix in self._namespaces.values():
                prefix = None
            if prefix is None:
                if not generate:
                    return uri
                prefix = self._generate_prefix()
                logger.debug(f"Generated prefix {prefix} for {namespace}")
            self._namespaces[namespace] = prefix
        qname = f"{prefix}:{local}"
        self._qnames[uri] = qname
        return qname

    # ------------------------------------------------------------------
    # Import and export
    # ------------------------------------------------------------------

    def from_import(self, tree: Union["Element", "ElementTree", None]) -> List[SubjectNode]:
        """
        Import every top-level node element of a parsed markup tree.

        Returns the top-level nodes imported; an empty list when the tree is
        missing or has no element children.
        """
        from .importer import import_document
        return import_document(self, tree)

    def to_turtle(self) -> str:
        from ..formats.turtle import document_to_turtle
        return document_to_turtle(self)

    def to_rdfxml(self) -> str:
        from ..formats.rdfxml import document_to_rdfxml
        return document_to_rdfxml(self)

    def as_array(self) -> List[Dict[str, Any]]:
        from ..formats.rdfjson import document_as_array
        return document_as_array(self)

    def to_json(self) -> str:
        from ..formats.rdfjson import document_to_json
        return document_to_json(self)

    def dump(self) -> str:
        from ..formats.html_dump import document_to_html
        return document_to_html(self)

    def to_graph(self) -> "Graph":
        from ..formats.rdflib_bridge import document_to_graph
        return document_to_graph(self)

    def __len__(self) -> int:
        return len(self._subjects)

    def __iter__(self) -> Iterator[SubjectNode]:
        return iter(list(self._subjects.values()))

    def __contains__(self, ref: object) -> bool:
        if not isinstance(ref, (str, URI, SubjectNode)):
            return False
        return self._find(_key(ref)) is not None

    def __repr__(self) -> str:
        return f"Document(location={self.location!r}, subjects={len(self._subjects)})"
