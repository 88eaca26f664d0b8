"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Import and serialization end to end
    pytest -m cli           # Command line tests

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import json
import os
import sys
from xml.etree import ElementTree as ET

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    BASE_LOCATION,
    BLANK_NODES_RDF,
    LITERALS_RDF,
    PERSON_RDF,
    PROFILE_RDF,
    SAMPLE_GRAPH_CONFIG,
    SHARED_RDF,
)

from rdfgraph import Document, GraphConfig, document_from_xml_string


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Import and serialization end to end")
    config.addinivalue_line("markers", "cli: Command line tests")


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def doc():
    """An empty document with the default configuration."""
    return Document()


@pytest.fixture
def person_doc():
    """Document imported from the single-person sample."""
    return document_from_xml_string(PERSON_RDF)


@pytest.fixture
def shared_doc():
    """Document with one singly-referenced and one doubly-referenced nested subject."""
    return document_from_xml_string(SHARED_RDF)


@pytest.fixture
def literals_doc():
    """Document exercising every literal variant."""
    return document_from_xml_string(LITERALS_RDF)


@pytest.fixture
def blank_doc():
    """Document with blank nodes, resource references and an anonymous property node."""
    return document_from_xml_string(BLANK_NODES_RDF, location=BASE_LOCATION)


@pytest.fixture
def profile_doc():
    """FOAF profile document whose primary topic is declared by the file node."""
    return document_from_xml_string(PROFILE_RDF, location=BASE_LOCATION)


@pytest.fixture
def parse_xml():
    """Parse markup text into an ElementTree root element."""
    return ET.fromstring


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def sample_config():
    """Graph configuration mapping with namespaces, languages and an ontology."""
    return json.loads(json.dumps(SAMPLE_GRAPH_CONFIG))


@pytest.fixture
def default_config():
    return GraphConfig.default()


@pytest.fixture
def temp_config_file(tmp_path, sample_config):
    """Create a temporary graph configuration file."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(sample_config, indent=2))
    return str(config_file)


@pytest.fixture
def temp_rdf_file(tmp_path):
    """Create a temporary RDF/XML file with the shared-subject sample."""
    rdf_file = tmp_path / "people.rdf"
    rdf_file.write_text(SHARED_RDF, encoding="utf-8")
    return str(rdf_file)


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop handlers installed by the CLI logging setup after each test."""
    yield
    from rdfgraph.cli import helpers
    helpers._clear_managed_handlers()
    helpers._LOGGING_SIGNATURE = None
    helpers._LAST_LOG_FILE = None
