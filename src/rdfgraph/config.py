"""
Graph configuration - the explicit, immutable settings handed to a Document.

A ``GraphConfig`` bundles the three pieces of state the graph core would
otherwise keep process-wide:

- the ontology registry (namespace -> node factory)
- the default namespace -> prefix table used for short names
- the default preferred-language list

Build one at start-up and pass it to each ``Document``; the ``with_*`` methods
return modified copies, so a config is safe to share between threads.

Configuration files are JSON, in the shape:

    {
        "namespaces": {"http://purl.org/ontology/po/": "po"},
        "langs": ["en-gb", "en"],
        "ontologies": {"http://purl.org/ontology/po/": "mypkg.po:Programme"},
        "logging": {"level": "DEBUG"}
    }
"""

import importlib
import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .constants import DEFAULT_LANGS, DEFAULT_NAMESPACES
from .exceptions import ConfigError
from .plugins.registry import NodeFactory, OntologyRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphConfig:
    """
    Immutable settings shared by documents.

    Attributes:
        ontologies: Frozen registry consulted by the importer.
        namespaces: Default namespace URI -> prefix table.
        langs: Default preferred languages, most preferred first.
        logging_options: Raw logging section of a configuration file, for hosts.
    """
    ontologies: OntologyRegistry = field(default_factory=lambda: OntologyRegistry().freeze())
    namespaces: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_NAMESPACES)))
    langs: Tuple[str, ...] = DEFAULT_LANGS
    logging_options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def default(cls) -> "GraphConfig":
        """Built-in prefixes and languages plus every ``register_ontology`` registration so far."""
        return cls(ontologies=default_registry().snapshot())

    def with_namespace(self, uri: str, prefix: str, overwrite: bool = False) -> "GraphConfig":
        """A copy with ``prefix`` registered for ``uri``; an existing entry wins unless ``overwrite``."""
        if uri in self.namespaces and not overwrite:
            return self
        namespaces = dict(self.namespaces)
        namespaces[uri] = prefix
        return replace(self, namespaces=MappingProxyType(namespaces))

    def with_ontology(self, namespace: str, factory: NodeFactory) -> "GraphConfig":
        """A copy whose registry also maps ``namespace`` to ``factory``."""
        registry = OntologyRegistry({ns: self.ontologies.factory_for(ns) for ns in self.ontologies.namespaces()})
        registry.register(namespace, factory)
        return replace(self, ontologies=registry.freeze())

    def with_langs(self, langs: Union[str, Sequence[str]]) -> "GraphConfig":
        if isinstance(langs, str):
            langs = langs.replace(" ", ",").split(",")
        cleaned = tuple(lang.strip() for lang in langs if lang.strip())
        return replace(self, langs=cleaned)

    def prefix_for(self, uri: str) -> Optional[str]:
        return self.namespaces.get(uri)

    def namespace_for(self, prefix: str) -> Optional[str]:
        """Reverse lookup of a prefix in the default table."""
        for uri, candidate in self.namespaces.items():
            if candidate == prefix:
                return uri
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: str = "") -> "GraphConfig":
        """
        Build a config from a parsed configuration mapping.

        Raises:
            ConfigError: If a section has the wrong shape or an ontology
                factory path cannot be imported.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Configuration must be a JSON object, got {type(data).__name__}", source)

        config = cls.default()

        namespaces = data.get("namespaces", {})
        if not isinstance(namespaces, Mapping):
            raise ConfigError("'namespaces' must map namespace URIs to prefixes", source)
        for uri, prefix in namespaces.items():
            if not isinstance(prefix, str) or not prefix:
                raise ConfigError(f"Invalid prefix for namespace {uri}: {prefix!r}", source)
            config = config.with_namespace(uri, prefix, overwrite=True)

        langs = data.get("langs")
        if langs is not None:
            if not isinstance(langs, (str, list)):
                raise ConfigError("'langs' must be a list or a comma separated string", source)
            config = config.with_langs(langs)

        ontologies = data.get("ontologies", {})
        if not isinstance(ontologies, Mapping):
            raise ConfigError("'ontologies' must map namespaces to 'module:attribute' paths", source)
        for namespace, path in ontologies.items():
            config = config.with_ontology(namespace, _load_factory(path, source))

        logging_section = data.get("logging", {})
        if not isinstance(logging_section, Mapping):
            raise ConfigError("'logging' must be a JSON object", source)
        config = replace(config, logging_options=MappingProxyType(dict(logging_section)))

        logger.debug(
            f"Loaded graph configuration: {len(config.namespaces)} namespaces, "
            f"{len(config.ontologies)} ontologies, langs={list(config.langs)}"
        )
        return config


def _load_factory(path: Any, source: str) -> NodeFactory:
    """Resolve a ``module:attribute`` path to a node factory."""
    if not isinstance(path, str) or ":" not in path:
        raise ConfigError(f"Ontology factory must be a 'module:attribute' path, got {path!r}", source)
    module_name, _, attribute = path.partition(":")
    try:
        target = getattr(importlib.import_module(module_name), attribute)
    except (ImportError, AttributeError) as e:
        raise ConfigError(f"Cannot load ontology factory {path}: {e}", source) from e
    # A SubjectNode subclass contributes its for_element classmethod
    return getattr(target, "for_element", target)


def load_graph_config(config_path: Union[str, Path]) -> GraphConfig:
    """
    Load a ``GraphConfig`` from a JSON file.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ConfigError: If the file is not valid JSON or has an invalid shape.
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"File encoding error: {e}", str(path)) from e
    return GraphConfig.from_dict(data, source=str(path))
