"""
Value variants carried by subject node properties.

A property value is one of:

- ``URI``: a reference to another resource (possibly a local ``#fragment``)
- ``str``: plain text
- ``Literal``: text tagged with a datatype and/or a language
- ``XMLLiteral``: verbatim serialized markup
- ``DateTimeLiteral``: an ``xsd:dateTime`` normalized to UTC once, at construction
- a ``SubjectNode`` (see ``rdfgraph.core.node``), when the value is itself a subject

The term classes are immutable; equality is structural.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from dateutil import parser as date_parser

from ..constants import Datatypes
from ..core.uri_utils import resolve_uri

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class URI:
    """A URI reference value."""
    value: str

    @classmethod
    def resolved(cls, ref: str, base: Optional[str] = None) -> "URI":
        """Create a URI from ``ref`` resolved against ``base``."""
        return cls(resolve_uri(ref, base))

    @property
    def is_local(self) -> bool:
        """True for document-local (blank node) identifiers such as ``#a1b2``."""
        return self.value.startswith("#")

    def as_array(self) -> Dict[str, Any]:
        return {"type": "uri", "value": self.value}

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Literal:
    """
    Text tagged with a datatype, a language, or neither.

    Attributes:
        value: Lexical form.
        datatype: Datatype URI, if any.
        lang: IETF language tag, if any.
    """
    value: str
    datatype: Optional[str] = None
    lang: Optional[str] = None

    def as_array(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"type": "literal", "value": self.value}
        if self.datatype:
            result["datatype"] = self.datatype
        if self.lang:
            result["lang"] = self.lang
        return result

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class XMLLiteral(Literal):
    """Embedded markup kept verbatim; always typed ``rdf:XMLLiteral``."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "datatype", Datatypes.XML_LITERAL)


@dataclass(frozen=True)
class DateTimeLiteral(Literal):
    """
    An ``xsd:dateTime`` whose text is canonicalized to ``YYYY-MM-DDTHH:MM:SSZ``.

    Raises:
        ValueError: If the text cannot be read as a date-time. Use
            ``make_literal`` to degrade to a plain typed literal instead.
    """

    def __post_init__(self) -> None:
        normalized = normalize_datetime(self.value)
        if normalized is None:
            raise ValueError(f"Not a date-time: {self.value!r}")
        object.__setattr__(self, "value", normalized)
        object.__setattr__(self, "datatype", Datatypes.DATE_TIME)

    @classmethod
    def from_datetime(cls, when: datetime) -> "DateTimeLiteral":
        return cls(when.isoformat())


Term = Union[str, URI, Literal]


def normalize_datetime(text: str) -> Optional[str]:
    """
    Canonicalize a date-time string to UTC with seconds precision.

    Naive values are taken to be UTC already. Years are written with four
    digits. Returns ``None`` when the text cannot be parsed or its UTC form
    falls outside years 1 to 9999.
    """
    try:
        when = date_parser.parse(text)
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        when = when.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse date-time {text!r}: {e}")
        return None
    return (
        f"{when.year:04d}-{when.month:02d}-{when.day:02d}"
        f"T{when.hour:02d}:{when.minute:02d}:{when.second:02d}Z"
    )


def make_literal(
    value: str,
    datatype: Optional[str] = None,
    lang: Optional[str] = None,
    parse_type: Optional[str] = None,
    tagged: bool = False,
) -> Term:
    """
    Build the literal variant matching a datatype/language/parse-type combination.

    - parse type ``Literal`` (any case): ``XMLLiteral``
    - datatype ``xsd:dateTime``: ``DateTimeLiteral``; unparseable text degrades
      to a ``Literal`` tagged ``xsd:dateTime`` with the original text
    - any datatype or language, or ``tagged``: ``Literal``
    - otherwise plain ``str``

    Args:
        value: Lexical form.
        datatype: Datatype URI, if any.
        lang: Language tag, if any.
        parse_type: Markup parse type, if any.
        tagged: Produce a ``Literal`` even without datatype or language.
    """
    if parse_type and parse_type.lower() == "literal":
        return XMLLiteral(value, lang=lang)
    if datatype == Datatypes.DATE_TIME:
        if normalize_datetime(value) is not None:
            return DateTimeLiteral(value)
        logger.warning(f"Unparseable date-time {value!r}, keeping it as a typed literal")
        return Literal(value, datatype=datatype, lang=lang)
    if datatype or lang or tagged:
        return Literal(value, datatype=datatype or None, lang=lang or None)
    return value


def term_as_array(value: Term) -> Dict[str, Any]:
    """Project a term to its tagged ``{type, value, datatype?, lang?}`` form."""
    if isinstance(value, (URI, Literal)):
        return value.as_array()
    return {"type": "literal", "value": str(value)}


def term_lang(value: Any) -> Optional[str]:
    """Language tag of a value, or ``None`` when it carries none."""
    if isinstance(value, Literal):
        return value.lang
    return None
