"""
Document loaders.

Build a ``Document`` from a parsed markup tree, an RDF/XML string, a file on
disk, or a URL. Parsing uses ``xml.etree.ElementTree``; network access is
delegated to a caller-supplied ``Fetcher`` so the graph core itself performs
no I/O beyond reading local files.

Every loader returns ``None`` when the input cannot be loaded; a partially
imported document is never returned.

Usage:
    doc = document_from_file("people.rdf")

    def fetch(url, accept):
        response = session.get(url, headers={"Accept": accept}, timeout=30)
        if not response.ok:
            return None
        return FetchResult(response.content, response.headers.get("Content-Type"))

    doc = document_from_url("http://example.org/people", fetch)
"""

import logging
from pathlib import Path
from typing import NamedTuple, Optional, Protocol, Union
from xml.etree import ElementTree as ET

from .config import GraphConfig
from .constants import ContentTypes
from .core.document import Document
from .core.uri_utils import resolve_uri, strip_fragment

logger = logging.getLogger(__name__)

Payload = Union[str, bytes]


class FetchResult(NamedTuple):
    """A fetched payload and its declared media type."""
    payload: Payload
    content_type: Optional[str] = None


class Fetcher(Protocol):
    """Resolves a URL to a payload, following redirects; ``None`` on failure."""

    def __call__(self, url: str, accept: str) -> Optional[FetchResult]:
        ...


class Autodiscoverer(Protocol):
    """Finds the companion RDF resource linked from an HTML page, if any."""

    def __call__(self, html: str, location: str) -> Optional[str]:
        ...


def _media_type(content_type: Optional[str]) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def _head(payload: Payload) -> str:
    head = payload[:ContentTypes.SNIFF_LENGTH]
    if isinstance(head, bytes):
        head = head.decode("utf-8", errors="replace")
    return head


def is_xml(payload: Optional[Payload], content_type: Optional[str]) -> bool:
    """
    True if the payload should be parsed as XML.

    A declared XML media type is trusted; for generic types the start of the
    payload is sniffed for namespace declarations.
    """
    if payload is None:
        return False
    media_type = _media_type(content_type)
    if media_type in ContentTypes.XML_TYPES:
        return True
    if media_type in ContentTypes.GENERIC_TYPES:
        head = _head(payload)
        return "xmlns=" in head.lower() or "xmlns:" in head
    return False


def is_html(payload: Optional[Payload], content_type: Optional[str]) -> bool:
    """True if the payload is an HTML page rather than RDF."""
    if payload is None:
        return False
    media_type = _media_type(content_type)
    if media_type in ContentTypes.HTML_TYPES:
        return True
    if media_type in ContentTypes.GENERIC_TYPES:
        head = _head(payload).lower()
        return "<html" in head or "<!doctype html" in head
    return False


def document_from_tree(
    root: Union[ET.Element, ET.ElementTree],
    location: Optional[str] = None,
    config: Optional[GraphConfig] = None,
) -> Document:
    """A new document populated from a parsed RDF/XML tree."""
    doc = Document(location=location, config=config)
    doc.from_import(root)
    return doc


def document_from_xml_string(
    text: Payload,
    location: Optional[str] = None,
    config: Optional[GraphConfig] = None,
) -> Optional[Document]:
    """
    Parse RDF/XML text and import it.

    Returns:
        The document, or ``None`` if the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        logger.warning(f"Cannot parse XML from {location or 'string'}: {e}")
        return None
    return document_from_tree(root, location, config)


def document_from_file(
    path: Union[str, Path],
    location: Optional[str] = None,
    config: Optional[GraphConfig] = None,
) -> Optional[Document]:
    """
    Load an RDF/XML file.

    The document location defaults to the file's absolute ``file://`` URI.
    Returns ``None`` if the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.warning(f"Cannot read {path}: {e}")
        return None
    if not location:
        location = path.resolve().as_uri()
    logger.info(f"Loading {path} ({len(data)} bytes)")
    return document_from_xml_string(data, location, config)


def guess_rdf_location(location: str) -> str:
    """
    The conventional RDF companion of an HTML page: the page URL without
    fragment or ``.html`` suffix, plus ``.rdf``.
    """
    href = strip_fragment(location)
    if href.endswith(".html"):
        href = href[: -len(".html")]
    return href + ".rdf"


def _fetch(fetcher: Fetcher, url: str) -> Optional[FetchResult]:
    try:
        result = fetcher(url, ContentTypes.RDF_XML)
    except OSError as e:
        logger.warning(f"Fetching {url} failed: {e}")
        return None
    if result is None:
        logger.warning(f"Fetching {url} returned nothing")
    return result


def document_from_url(
    url: str,
    fetcher: Fetcher,
    autodiscover: Optional[Autodiscoverer] = None,
    config: Optional[GraphConfig] = None,
) -> Optional[Document]:
    """
    Fetch and import the RDF/XML at ``url``.

    An HTML response is followed to its companion RDF resource: the one
    ``autodiscover`` finds, else the conventional ``.rdf`` sibling URL.
    Returns ``None`` when nothing importable is found.
    """
    result = _fetch(fetcher, url)
    if result is None:
        return None

    if is_html(result.payload, result.content_type):
        payload = result.payload
        html = payload.decode("utf-8", errors="replace") if isinstance(payload, bytes) else payload
        href = autodiscover(html, url) if autodiscover is not None else None
        href = resolve_uri(href, url) if href else guess_rdf_location(url)
        logger.info(f"{url} is HTML, following to {href}")
        url = href
        result = _fetch(fetcher, url)
        if result is None:
            return None

    if is_xml(result.payload, result.content_type):
        return document_from_xml_string(result.payload, url, config)

    logger.warning(f"{url} is not RDF/XML (content type {result.content_type!r})")
    return None
