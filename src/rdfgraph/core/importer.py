"""
Importer - populates a document from a parsed RDF/XML markup tree.

The tree is an ``xml.etree.ElementTree`` element: tags and attribute keys in
``{namespace}local`` form, character data in ``text``/``tail``. Parsing raw
text into a tree is the caller's job (see ``rdfgraph.loaders``).

For every property element of a node element, the first matching rule wins:

1. Character data only (or ``rdf:parseType="Literal"``): a literal. Plain
   text, upgraded to a typed, language-tagged or date-time literal when the
   element carries a datatype or other attributes, or to an XML literal for
   parse type ``Literal``.
2. Element children: each child element is a nested node, imported
   recursively and merged into the document.
3. Exactly one attribute, ``rdf:resource`` (or ``rdf:nodeID``): a URI
   value; no node is created.
4. Anything else: the property element itself is imported as one anonymous
   nested node.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Union
from xml.etree import ElementTree as ET
from xml.sax.saxutils import escape

from tqdm import tqdm

from ..constants import ImportConfig, Predicates, Vocab
from ..models.terms import URI, make_literal
from .node import SubjectNode
from .uri_utils import qualified_name, split_tag, tag_to_uri

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .document import Document

logger = logging.getLogger(__name__)


def _elements(element: ET.Element) -> List[ET.Element]:
    """Child elements, skipping comments and processing instructions."""
    return [child for child in element if isinstance(child.tag, str)]


def inner_markup(element: ET.Element) -> str:
    """The serialized content of an element, without the element's own tags."""
    parts = [escape(element.text or "")]
    for child in element:
        parts.append(ET.tostring(child, encoding="unicode"))
    return "".join(parts)


def materialize(element: ET.Element, doc: "Document") -> SubjectNode:
    """A fresh node for a node element: the registered variant for its namespace, else a generic node."""
    namespace, local = split_tag(element.tag)
    return doc.config.ontologies.node_for(namespace, local)


def import_document(doc: "Document", tree: Union[ET.Element, ET.ElementTree, None]) -> List[SubjectNode]:
    """
    Import every node element under the root of ``tree`` into ``doc``.

    Each node is merged at the position where it was encountered, gains a
    reference, is promoted to top level and has its ``transform`` hook run.

    Returns:
        The top-level nodes, or an empty list if the tree is missing or
        has no element children.
    """
    if tree is None:
        logger.warning("No markup tree to import")
        return []
    root = tree.getroot() if isinstance(tree, ET.ElementTree) else tree
    if root is None:
        logger.warning("Markup tree has no root element")
        return []
    children = _elements(root)
    if not children:
        logger.warning(f"Root element {root.tag} has no node elements to import")
        return []

    imported: List[SubjectNode] = []
    for element in tqdm(
        children,
        desc="Importing subjects",
        unit="node",
        disable=len(children) < ImportConfig.PROGRESS_THRESHOLD,
    ):
        position = len(doc)
        node = materialize(element, doc)
        populate_node(node, element, doc)
        merged = doc.merge(node, position)
        merged.refcount += 1
        doc.promote(merged)
        merged.transform()
        imported.append(merged)

    logger.info(f"Imported {len(imported)} top-level subjects ({len(doc)} subjects in total)")
    return imported


def populate_node(
    node: SubjectNode,
    element: ET.Element,
    doc: "Document",
    lang: Optional[str] = None,
) -> None:
    """
    Fill ``node`` from a node element: its type, its attributes, then each property element.

    ``xml:*`` attributes are markup, not statements. An ``xml:lang`` on the
    element (or the inherited ``lang``) tags the untagged literals below it.
    """
    node.add(Predicates.TYPE, URI(qualified_name(*split_tag(element.tag))))

    for key, value in element.attrib.items():
        predicate = tag_to_uri(key)
        if predicate == Predicates.XML_LANG:
            lang = value or None
        elif predicate.startswith(Vocab.XML + " "):
            continue
        elif predicate in (Predicates.ABOUT, Predicates.RESOURCE):
            node.add(predicate, URI.resolved(value, doc.location))
        elif predicate == Predicates.ID:
            node.add(predicate, URI.resolved("#" + value, doc.location))
        elif predicate == Predicates.NODE_ID:
            node.add(Predicates.ID, URI("#" + value))
        else:
            node.add(predicate, value)

    for child in _elements(element):
        _import_property(node, child, doc, lang)


def _import_property(
    node: SubjectNode,
    child: ET.Element,
    doc: "Document",
    inherited_lang: Optional[str] = None,
) -> None:
    predicate = tag_to_uri(child.tag)
    datatype: Optional[str] = None
    parse_type: Optional[str] = None
    lang: Optional[str] = None
    attribute_count = 0
    for key, value in child.attrib.items():
        name = tag_to_uri(key)
        if name == Predicates.DATATYPE:
            datatype = value
            continue
        if name == Predicates.PARSE_TYPE:
            parse_type = value
        elif name == Predicates.XML_LANG:
            lang = value or None
        attribute_count += 1
    parse_type = (parse_type or "").lower()
    if lang is None and not datatype:
        lang = inherited_lang

    nested = _elements(child)
    has_content = bool(child.text) or len(child) > 0

    if has_content or parse_type == "literal":
        if parse_type == "literal" or (not len(child) and child.text):
            text = inner_markup(child) if parse_type == "literal" else child.text
            node.add(predicate, make_literal(
                text or "",
                datatype=datatype,
                lang=lang,
                parse_type=parse_type,
                tagged=attribute_count > 0,
            ))
            return
        for grandchild in nested:
            node.add(predicate, _import_nested(grandchild, doc, lang or inherited_lang))
        return

    reference = _compressed_reference(child, doc)
    if reference is not None:
        node.add(predicate, reference)
        return
    node.add(predicate, _import_nested(child, doc, lang or inherited_lang))


def _compressed_reference(child: ET.Element, doc: "Document") -> Optional[URI]:
    """The URI of a property element whose only attribute is a resource reference."""
    if len(child.attrib) != 1:
        return None
    (key, value), = child.attrib.items()
    name = tag_to_uri(key)
    if name == Predicates.RESOURCE:
        return URI.resolved(value, doc.location)
    if name == Predicates.NODE_ID:
        return URI("#" + value)
    return None


def _import_nested(element: ET.Element, doc: "Document", lang: Optional[str] = None) -> SubjectNode:
    node = materialize(element, doc)
    populate_node(node, element, doc, lang)
    merged = doc.merge(node)
    merged.transform()
    logger.debug(f"Imported nested subject {merged.subject()} from {element.tag}")
    return merged
