"""
Tests for GraphConfig and configuration file loading.
"""

import json

import pytest

from fixtures import INVALID_GRAPH_CONFIGS, MINIMAL_GRAPH_CONFIG

from rdfgraph import GraphConfig, load_graph_config
from rdfgraph.constants import DEFAULT_LANGS, DEFAULT_NAMESPACES, Vocab
from rdfgraph.exceptions import ConfigError
from rdfgraph.plugins import FoafAgent


@pytest.mark.unit
class TestGraphConfig:
    """Immutable copies and lookups."""

    def test_defaults(self, default_config):
        assert default_config.langs == DEFAULT_LANGS
        assert default_config.prefix_for(Vocab.FOAF) == "foaf"
        assert default_config.namespace_for("dct") == Vocab.DCTERMS
        assert default_config.namespace_for("nope") is None

    def test_with_namespace_returns_copy(self, default_config):
        changed = default_config.with_namespace("http://example.org/ns#", "ex")
        assert changed.prefix_for("http://example.org/ns#") == "ex"
        assert default_config.prefix_for("http://example.org/ns#") is None

    def test_existing_namespace_wins(self, default_config):
        assert default_config.with_namespace(Vocab.FOAF, "friend") is default_config
        assert default_config.with_namespace(Vocab.FOAF, "friend", overwrite=True).prefix_for(Vocab.FOAF) == "friend"

    def test_with_langs_from_string(self, default_config):
        assert default_config.with_langs("en-gb, en fr").langs == ("en-gb", "en", "fr")
        assert default_config.with_langs(["de", " "]).langs == ("de",)

    def test_with_ontology_keeps_existing(self, default_config):
        changed = default_config.with_ontology("http://example.org/people#", FoafAgent.for_element)
        assert "http://example.org/people#" in changed.ontologies
        assert Vocab.FOAF in changed.ontologies
        assert changed.ontologies.frozen
        assert "http://example.org/people#" not in default_config.ontologies

    def test_namespaces_are_read_only(self, default_config):
        with pytest.raises(TypeError):
            default_config.namespaces["http://example.org/"] = "x"


@pytest.mark.unit
class TestFromDict:
    """Configuration mappings."""

    def test_sample(self, sample_config):
        config = GraphConfig.from_dict(sample_config)
        assert config.prefix_for("http://example.org/ns#") == "ex"
        assert config.prefix_for("http://purl.org/ontology/po/") == "po"
        assert config.langs == ("fr", "en")
        assert "http://example.org/people#" in config.ontologies
        assert isinstance(config.ontologies.instance_for("http://example.org/people#", "Person"), FoafAgent)
        assert config.logging_options["level"] == "DEBUG"

    def test_minimal(self):
        config = GraphConfig.from_dict(MINIMAL_GRAPH_CONFIG)
        assert dict(config.namespaces) == DEFAULT_NAMESPACES
        assert config.langs == DEFAULT_LANGS
        assert dict(config.logging_options) == {}

    @pytest.mark.parametrize("name", sorted(INVALID_GRAPH_CONFIGS))
    def test_invalid(self, name):
        with pytest.raises(ConfigError):
            GraphConfig.from_dict(INVALID_GRAPH_CONFIGS[name], source="test.json")

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="JSON object"):
            GraphConfig.from_dict(["namespaces"])

    def test_error_names_source(self):
        with pytest.raises(ConfigError) as exc_info:
            GraphConfig.from_dict({"langs": 42}, source="settings.json")
        assert exc_info.value.source == "settings.json"
        assert str(exc_info.value).startswith("settings.json: ")


@pytest.mark.unit
class TestLoadGraphConfig:
    """JSON configuration files."""

    def test_load(self, temp_config_file):
        config = load_graph_config(temp_config_file)
        assert config.langs == ("fr", "en")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_graph_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_graph_config(path)

    def test_invalid_shape(self, tmp_path):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps(INVALID_GRAPH_CONFIGS["langs_not_list"]), encoding="utf-8")
        with pytest.raises(ConfigError):
            load_graph_config(path)
