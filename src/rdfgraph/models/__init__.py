"""
Value models for the RDF graph core.

Usage:
    from rdfgraph.models import URI, Literal, ValueSet, make_literal
"""

from .terms import (
    URI,
    Literal,
    XMLLiteral,
    DateTimeLiteral,
    Term,
    make_literal,
    normalize_datetime,
    term_as_array,
)
from .value_set import ValueSet, parse_langs

__all__ = [
    # Value variants
    "URI",
    "Literal",
    "XMLLiteral",
    "DateTimeLiteral",
    "Term",
    "make_literal",
    "normalize_datetime",
    "term_as_array",
    # Value sets
    "ValueSet",
    "parse_langs",
]
