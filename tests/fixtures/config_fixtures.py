"""
Configuration test fixtures.

Graph configuration mappings in the shape accepted by
``GraphConfig.from_dict`` and ``load_graph_config``.
"""

SAMPLE_GRAPH_CONFIG = {
    "namespaces": {
        "http://example.org/ns#": "ex",
        "http://purl.org/ontology/po/": "po",
    },
    "langs": ["fr", "en"],
    "ontologies": {
        "http://example.org/people#": "rdfgraph.plugins.builtin.foaf:FoafAgent",
    },
    "logging": {
        "level": "DEBUG",
        "format": "text",
    },
}

MINIMAL_GRAPH_CONFIG = {}

INVALID_GRAPH_CONFIGS = {
    "namespaces_not_mapping": {"namespaces": ["ex"]},
    "empty_prefix": {"namespaces": {"http://example.org/ns#": ""}},
    "langs_not_list": {"langs": 42},
    "ontology_without_colon": {"ontologies": {"http://example.org/": "rdfgraph.plugins.builtin.foaf"}},
    "ontology_missing_module": {"ontologies": {"http://example.org/": "no_such_module_xyz:Thing"}},
    "logging_not_mapping": {"logging": "DEBUG"},
}
