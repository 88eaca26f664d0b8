"""
Ontology Registry - namespace to node-factory mapping.

The importer asks the registry for a node whenever it materializes a subject
from an element; a namespace with a registered factory yields a specialized
``SubjectNode`` variant, any other namespace a generic node.

Registration happens at start-up. Node classes can register themselves with
the ``register_ontology`` decorator when their module is imported:

    from rdfgraph.plugins import register_ontology

    @register_ontology("http://purl.org/ontology/po/")
    class Programme(SubjectNode):
        def transform(self) -> None:
            self.pid = self.first(PO + "pid")

``GraphConfig.default()`` snapshots the decorator-populated registry into a
frozen copy, so documents never observe registrations made while they are
being processed.
"""

import logging
from typing import Callable, Dict, Iterator, Optional, Type

from ..core.node import SubjectNode
from ..core.uri_utils import split_namespace
from ..exceptions import RegistryFrozenError

logger = logging.getLogger(__name__)

NodeFactory = Callable[[str, str], Optional[SubjectNode]]
"""Called with ``(namespace, local_name)``; may return ``None`` to decline."""


class OntologyRegistry:
    """
    Mapping from namespace URI to node factory.

    A registry is mutable until ``freeze()`` is called (or a frozen copy is
    taken with ``snapshot()``); registering into a frozen registry raises
    ``RegistryFrozenError``.
    """

    def __init__(self, factories: Optional[Dict[str, NodeFactory]] = None) -> None:
        self._factories: Dict[str, NodeFactory] = dict(factories or {})
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "OntologyRegistry":
        self._frozen = True
        return self

    def snapshot(self) -> "OntologyRegistry":
        """A frozen copy of the current registrations."""
        return OntologyRegistry(self._factories).freeze()

    def register(self, namespace: str, factory: NodeFactory, overwrite: bool = True) -> None:
        """
        Register ``factory`` for ``namespace``.

        Raises:
            RegistryFrozenError: If the registry is frozen.
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {namespace}: registry is frozen")
        if namespace in self._factories and not overwrite:
            logger.debug(f"Keeping existing ontology factory for {namespace}")
            return
        self._factories[namespace] = factory
        logger.debug(f"Registered ontology factory for {namespace}")

    def factory_for(self, namespace: str) -> Optional[NodeFactory]:
        return self._factories.get(namespace)

    def instance_for(self, namespace: str, local_name: str) -> Optional[SubjectNode]:
        """A specialized node for an element name, or ``None`` when no factory applies."""
        factory = self._factories.get(namespace)
        if factory is None:
            return None
        return factory(namespace, local_name)

    def node_for(self, namespace: str, local_name: str) -> SubjectNode:
        """As ``instance_for``, falling back to a generic ``SubjectNode``."""
        node = self.instance_for(namespace, local_name)
        if node is None:
            node = SubjectNode()
        return node

    def instance_for_class(self, class_uri: str, local_name: Optional[str] = None) -> Optional[SubjectNode]:
        """
        A specialized node for a class URI.

        If ``local_name`` is given, ``class_uri`` is taken to be the namespace;
        otherwise the URI is split with the usual ``#`` / space / ``/``
        precedence.
        """
        if local_name:
            namespace = str(class_uri)
        else:
            parts = split_namespace(str(class_uri))
            if parts is None:
                return None
            namespace, local_name = parts
        return self.instance_for(namespace, local_name)

    def namespaces(self) -> Iterator[str]:
        return iter(self._factories)

    def __contains__(self, namespace: str) -> bool:
        return namespace in self._factories

    def __len__(self) -> int:
        return len(self._factories)


_ontology_registry = OntologyRegistry()


def register_ontology(namespace: str) -> Callable[[Type[SubjectNode]], Type[SubjectNode]]:
    """
    Decorator registering a ``SubjectNode`` subclass for a namespace.

    The class's ``for_element`` classmethod becomes the factory.

    Usage:
        @register_ontology(Vocab.FOAF)
        class FoafAgent(SubjectNode):
            ...
    """
    def decorator(cls: Type[SubjectNode]) -> Type[SubjectNode]:
        _ontology_registry.register(namespace, cls.for_element)
        logger.debug(f"Registered ontology class: {cls.__name__} for {namespace}")
        return cls
    return decorator


def get_registered_ontologies() -> Dict[str, NodeFactory]:
    """Get all factories registered through ``register_ontology``."""
    return dict(_ontology_registry._factories)


def default_registry() -> OntologyRegistry:
    """The process-wide registry populated by ``register_ontology``."""
    return _ontology_registry
