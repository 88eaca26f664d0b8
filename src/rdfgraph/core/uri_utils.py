"""
URI helpers shared by the importer, the document and the registry.

Covers the resolution of references against a base, splitting a URI into
namespace and local name, and translating markup element names of the form
``{namespace}local`` into predicate identifiers.
"""

from typing import Optional, Tuple
from urllib.parse import urldefrag, urljoin

from ..constants import Vocab

# Namespaces without a terminating separator whose names are space-joined
_SPACE_JOINED = (Vocab.XML, Vocab.XMLNS, Vocab.XMLNS.rstrip("/"))


def resolve_uri(ref: str, base: Optional[str] = None) -> str:
    """
    Resolve ``ref`` against ``base``.

    Fragments are kept: ``resolve_uri("#me", "http://example.org/doc")`` gives
    ``http://example.org/doc#me``. Without a base the reference is returned as
    given, so a bare ``#id`` stays document-local.
    """
    if not base:
        return ref
    return urljoin(base, ref)


def strip_fragment(uri: str) -> str:
    """Return ``uri`` without its fragment identifier."""
    return urldefrag(uri)[0]


def split_namespace(uri: str) -> Optional[Tuple[str, str]]:
    """
    Split a URI into ``(namespace, local_name)``.

    The split point is the last ``#``, else the last space (used for
    attribute-like predicates in namespaces without a terminating
    separator), else the last ``/``. The separator stays with the namespace
    except for the space, which is dropped. Returns ``None`` when there is no
    split point.
    """
    pos = uri.rfind("#")
    if pos != -1:
        return uri[:pos + 1], uri[pos + 1:]
    pos = uri.rfind(" ")
    if pos != -1:
        return uri[:pos], uri[pos + 1:]
    pos = uri.rfind("/")
    if pos != -1:
        return uri[:pos + 1], uri[pos + 1:]
    return None


def split_tag(tag: str) -> Tuple[str, str]:
    """Split an ElementTree ``{namespace}local`` name; namespace may be empty."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


def qualified_name(namespace: str, local: str) -> str:
    """
    Join a markup namespace and local name into a predicate identifier.

    Names are concatenated as RDF/XML prescribes, except in the XML
    namespaces, whose URIs carry no terminating separator: those are joined
    with a single space (``xml:lang`` becomes ``<xml-ns> lang``) so that
    ``split_namespace`` can recover both parts.
    """
    if namespace in _SPACE_JOINED:
        return f"{namespace} {local}"
    return namespace + local


def tag_to_uri(tag: str) -> str:
    """Translate an ElementTree tag or attribute key into a predicate identifier."""
    return qualified_name(*split_tag(tag))
