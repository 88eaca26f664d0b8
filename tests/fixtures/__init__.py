"""
Centralized test fixtures for the rdfgraph test suite.

This package provides reusable fixtures for testing, including:
- RDF/XML sample content
- Graph configuration mappings

Usage:
    from fixtures import PERSON_RDF, SHARED_RDF, SAMPLE_GRAPH_CONFIG

Or use the pytest fixtures in conftest.py which import from here.
"""

from .rdfxml_fixtures import (
    # Namespaces
    RDF_NS,
    FOAF_NS,
    EX_NS,
    DC_NS,
    DCT_NS,
    XSD_NS,
    BASE_LOCATION,

    # Simple content
    PERSON_RDF,
    EMPTY_RDF,
    MALFORMED_RDF,

    # Structure
    SHARED_RDF,
    LITERALS_RDF,
    BLANK_NODES_RDF,
    PROFILE_RDF,

    # Stress content
    generate_large_rdf,
)

from .config_fixtures import (
    SAMPLE_GRAPH_CONFIG,
    MINIMAL_GRAPH_CONFIG,
    INVALID_GRAPH_CONFIGS,
)

__all__ = [
    "RDF_NS",
    "FOAF_NS",
    "EX_NS",
    "DC_NS",
    "DCT_NS",
    "XSD_NS",
    "BASE_LOCATION",
    "PERSON_RDF",
    "EMPTY_RDF",
    "MALFORMED_RDF",
    "SHARED_RDF",
    "LITERALS_RDF",
    "BLANK_NODES_RDF",
    "PROFILE_RDF",
    "generate_large_rdf",
    "SAMPLE_GRAPH_CONFIG",
    "MINIMAL_GRAPH_CONFIG",
    "INVALID_GRAPH_CONFIGS",
]
