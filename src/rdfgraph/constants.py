"""
Centralized constants for the RDF graph core.

This module provides a single source of truth for vocabulary namespaces,
well-known predicate URIs, default prefix and language tables, exit codes
and logging defaults used throughout the package.
"""

from enum import IntEnum
from typing import Dict, Final, Tuple

from rdflib.namespace import DC, DCTERMS, FOAF, OWL, RDF, RDFS, TIME, XSD

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for the command line host.

    Following Unix conventions:
    - 0: Success
    - 1: General error
    - 2: Usage error
    - 3+: Specific error categories
    """
    SUCCESS = 0
    ERROR = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 5
    IMPORT_FAILED = 9


# ============================================================================
# Vocabularies
# ============================================================================

class Vocab:
    """Namespace URIs of the vocabularies the core knows by name."""

    RDF: Final[str] = str(RDF)
    RDFS: Final[str] = str(RDFS)
    OWL: Final[str] = str(OWL)
    XSD: Final[str] = str(XSD)
    FOAF: Final[str] = str(FOAF)
    DC: Final[str] = str(DC)
    DCTERMS: Final[str] = str(DCTERMS)
    TIME: Final[str] = str(TIME)
    SKOS: Final[str] = "http://www.w3.org/2008/05/skos#"
    RDFG: Final[str] = "http://www.w3.org/2004/03/trix/rdfg-1/"
    FRBR: Final[str] = "http://purl.org/vocab/frbr/core#"
    GEO: Final[str] = "http://www.w3.org/2003/01/geo/wgs84_pos#"
    PO: Final[str] = "http://purl.org/ontology/po/"
    DBPEDIA_OWL: Final[str] = "http://dbpedia.org/ontology/"
    XHTML: Final[str] = "http://www.w3.org/1999/xhtml"
    XHTML_VOCAB: Final[str] = "http://www.w3.org/1999/xhtml/vocab#"
    XML: Final[str] = "http://www.w3.org/XML/1998/namespace"
    XMLNS: Final[str] = "http://www.w3.org/2000/xmlns/"


# ============================================================================
# Well-known predicates
# ============================================================================

class Predicates:
    """Full URIs of predicates with special meaning to the core."""

    ABOUT: Final[str] = Vocab.RDF + "about"
    ID: Final[str] = Vocab.RDF + "ID"
    TYPE: Final[str] = Vocab.RDF + "type"
    RESOURCE: Final[str] = Vocab.RDF + "resource"
    NODE_ID: Final[str] = Vocab.RDF + "nodeID"
    DATATYPE: Final[str] = Vocab.RDF + "datatype"
    PARSE_TYPE: Final[str] = Vocab.RDF + "parseType"
    DESCRIPTION: Final[str] = Vocab.RDF + "Description"
    RDF_ROOT: Final[str] = Vocab.RDF + "RDF"
    SAME_AS: Final[str] = Vocab.OWL + "sameAs"
    PRIMARY_TOPIC: Final[str] = Vocab.FOAF + "primaryTopic"
    XML_LANG: Final[str] = Vocab.XML + " lang"

    IDENTITY: Final[Tuple[str, ...]] = (ABOUT, ID)
    """Predicates which carry the identity of a subject."""


class Datatypes:
    """Datatype URIs with a dedicated literal variant."""

    DATE_TIME: Final[str] = Vocab.XSD + "dateTime"
    XML_LITERAL: Final[str] = Vocab.RDF + "XMLLiteral"


# ============================================================================
# Lookup priorities
# ============================================================================

class LabelPredicates:
    """Fixed predicate priority lists for the multilingual convenience lookups."""

    TITLE: Final[Tuple[str, ...]] = (
        Vocab.SKOS + "prefLabel",
        Vocab.FOAF + "name",
        Vocab.RDFS + "label",
        Vocab.DC + "title",
    )

    DESCRIPTION: Final[Tuple[str, ...]] = (
        Vocab.PO + "medium",
        Vocab.RDFS + "comment",
        Vocab.PO + "short_synopsis",
        Vocab.PO + "long_synopsis",
        Vocab.DCTERMS + "description",
        Vocab.DBPEDIA_OWL + "abstract",
        Vocab.DC + "description",
    )

    SHORT_DESC: Final[Tuple[str, ...]] = (
        Vocab.PO + "short_synopsis",
    )

    MEDIUM_DESC: Final[Tuple[str, ...]] = (
        Vocab.PO + "medium",
        Vocab.RDFS + "comment",
    )

    LONG_DESC: Final[Tuple[str, ...]] = (
        Vocab.PO + "long_synopsis",
        Vocab.DCTERMS + "description",
        Vocab.DBPEDIA_OWL + "abstract",
        Vocab.DC + "description",
    )


# ============================================================================
# Defaults
# ============================================================================

DEFAULT_NAMESPACES: Final[Dict[str, str]] = {
    Vocab.RDF: "rdf",
    Vocab.RDFS: "rdfs",
    Vocab.OWL: "owl",
    Vocab.FOAF: "foaf",
    Vocab.SKOS: "skos",
    Vocab.TIME: "time",
    Vocab.DC: "dc",
    Vocab.DCTERMS: "dct",
    Vocab.RDFG: "rdfg",
    Vocab.GEO: "geo",
    Vocab.FRBR: "frbr",
    Vocab.XHTML: "xhtml",
    Vocab.XHTML_VOCAB: "xhv",
    Vocab.XSD: "xsd",
}
"""Namespace URI to prefix table consulted when a document has no entry."""

DEFAULT_LANGS: Final[Tuple[str, ...]] = ("en",)
"""Preferred languages when a caller gives none."""


# ============================================================================
# Loading
# ============================================================================

class ContentTypes:
    """Media types recognised when loading a fetched payload."""

    RDF_XML: Final[str] = "application/rdf+xml"
    XML_TYPES: Final[Tuple[str, ...]] = ("application/rdf+xml", "text/xml", "application/xml")
    HTML_TYPES: Final[Tuple[str, ...]] = ("text/html", "application/xhtml+xml")
    GENERIC_TYPES: Final[Tuple[str, ...]] = (
        "application/x-unknown",
        "application/octet-stream",
        "text/plain",
    )
    SNIFF_LENGTH: Final[int] = 1024
    """Number of leading characters inspected when sniffing a generic payload."""


class ImportConfig:
    """Import behaviour tuning."""

    PROGRESS_THRESHOLD: Final[int] = 200
    """Top-level element count at which a progress bar is shown."""


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    SUPPORTED_FORMATS: Final[Tuple[str, ...]] = ("text", "json")
    """Supported formatter styles."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""

    ROTATION_ENABLED: Final[bool] = True
    """Rotate log files by default when a log file is configured."""

    DEFAULT_LOG_FILE_NAME: Final[str] = "rdfgraph.log"
    """File name used for fallback log locations."""
