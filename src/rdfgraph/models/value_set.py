"""
Value Set - an ordered view over the values of one or more predicates.

A ``ValueSet`` is assembled on demand (typically by ``SubjectNode.all``) and
is never stored in the graph. It keeps insertion order and does not
deduplicate; duplicate-freedom is an invariant of the node value lists, not
of a set built from several of them.

Usage:
    titles = node.all([Vocab.DC + "title", Vocab.RDFS + "label"])
    titles.lang(["fr", "en"])          # best match, or the untagged value
    titles.uris()                      # URI values and nested node subjects
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from ..constants import DEFAULT_LANGS
from .terms import URI, Literal, term_as_array, term_lang

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from ..core.node import SubjectNode

LangSpec = Union[str, Sequence[str], None]


def _is_node(value: Any) -> bool:
    from ..core.node import SubjectNode
    return isinstance(value, SubjectNode)


def parse_langs(langs: LangSpec, default: Sequence[str] = DEFAULT_LANGS) -> List[str]:
    """Normalize a language preference to a list; strings may be comma or space separated."""
    if langs is None:
        langs = default
    if isinstance(langs, str):
        langs = langs.replace(" ", ",").split(",")
    return [lang.strip() for lang in langs if lang and lang.strip()]


class ValueSet:
    """
    An ordered sequence of property values with lookup and projection helpers.

    Attributes:
        default_langs: Preferred languages used by ``lang`` when the caller
            supplies none.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None, default_langs: Sequence[str] = DEFAULT_LANGS) -> None:
        self._values: List[Any] = list(values) if values is not None else []
        self.default_langs = tuple(default_langs)

    @classmethod
    def from_instances(cls, keys: Union[str, Sequence[str]], *instances: Any) -> "ValueSet":
        """Build a set from the ``keys`` predicates of one or more nodes (or lists of nodes)."""
        value_set = cls()
        value_set.add_instance(keys, *instances)
        return value_set

    def add(self, *sequences: Union["ValueSet", Iterable[Any]]) -> None:
        """Append every value of each sequence or ``ValueSet``, keeping order."""
        for sequence in sequences:
            if isinstance(sequence, ValueSet):
                sequence = sequence._values
            self._values.extend(sequence)

    def add_instance(self, keys: Union[str, Sequence[str]], *instances: Any) -> None:
        """Append the ``keys`` predicates of each node; arguments may be nodes or lists of nodes."""
        for item in instances:
            nodes = item if isinstance(item, (list, tuple)) else [item]
            for node in nodes:
                self.add(node.all(keys))

    def values(self) -> List[Any]:
        return list(self._values)

    def strings(self) -> List[str]:
        return [str(v) for v in self._values]

    def first(self) -> Any:
        return self._values[0] if self._values else None

    def join(self, by: str) -> Optional[str]:
        if not self._values:
            return None
        return by.join(str(v) for v in self._values)

    def count(self) -> int:
        return len(self._values)

    def lang(self, langs: LangSpec = None, fallback_first: bool = False) -> Optional[str]:
        """
        Return the text of the value best matching a language preference.

        Each preferred language is tried in order against exact language tags.
        With no match, the first value without a language tag (plain text or
        an untagged literal) is used. Failing that, the first value of any kind
        when ``fallback_first`` is set, else ``None``.

        Args:
            langs: Preferred languages, as a list or a comma/space separated
                string. Defaults to ``default_langs``.
            fallback_first: Fall back to the first value when nothing matches.
        """
        for lang in parse_langs(langs, self.default_langs):
            for value in self._values:
                if term_lang(value) == lang:
                    return str(value)
        for value in self._values:
            if isinstance(value, str) or (isinstance(value, Literal) and not value.lang):
                return str(value)
        if fallback_first and self._values:
            return str(self._values[0])
        return None

    def value_per_language(self) -> List[Any]:
        """One representative literal per distinct language tag, first-seen order; untagged counts as a tag."""
        seen: Dict[str, Any] = {}
        for value in self._values:
            if not isinstance(value, (str, Literal)):
                continue
            key = term_lang(value) or ""
            if key not in seen:
                seen[key] = value
        return list(seen.values())

    def uris(self) -> List[URI]:
        """URI values, plus the subject of each nested node; literals are dropped."""
        result: List[URI] = []
        for value in self._values:
            if isinstance(value, URI):
                result.append(value)
            elif _is_node(value):
                result.append(value.subject())
        return result

    def as_array(self) -> List[Dict[str, Any]]:
        """Project every value to its tagged form, recursing into nested nodes."""
        result = []
        for value in self._values:
            if _is_node(value):
                result.append(value.as_array())
            else:
                result.append(term_as_array(value))
        return result

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __bool__(self) -> bool:
        return bool(self._values)

    def __str__(self) -> str:
        return self.join(", ") or ""

    def __repr__(self) -> str:
        return f"ValueSet({self._values!r})"
