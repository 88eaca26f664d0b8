"""
Built-in ontology node variants.

Importing this package registers them with the default ontology registry.
"""

from .foaf import FoafAgent

__all__ = ["FoafAgent"]
