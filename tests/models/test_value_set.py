"""
Tests for ValueSet lookups and projections.
"""

import pytest

from rdfgraph import SubjectNode
from rdfgraph.constants import Vocab
from rdfgraph.models import URI, Literal, ValueSet, parse_langs

HELLO = Literal("Hello", lang="en")
BONJOUR = Literal("Bonjour", lang="fr")


@pytest.mark.unit
class TestLanguageLookup:
    """Multilingual best-match selection."""

    def test_first_preferred_language_wins(self):
        values = ValueSet([HELLO, BONJOUR, "Hi"])
        assert values.lang(["fr", "en"]) == "Bonjour"

    def test_untagged_fallback(self):
        values = ValueSet([HELLO, BONJOUR, "Hi"])
        assert values.lang(["de"], fallback_first=False) == "Hi"

    def test_first_value_fallback(self):
        values = ValueSet([HELLO, BONJOUR])
        assert values.lang(["de"], fallback_first=True) == "Hello"

    def test_no_match_without_fallback(self):
        assert ValueSet([HELLO, BONJOUR]).lang(["de"]) is None

    def test_untagged_literal_counts_as_untagged(self):
        values = ValueSet([HELLO, Literal("Howdy")])
        assert values.lang(["de"]) == "Howdy"

    def test_languages_as_string(self):
        values = ValueSet([HELLO, BONJOUR])
        assert values.lang("fr, en") == "Bonjour"
        assert values.lang("de en") == "Hello"

    def test_default_languages(self):
        assert ValueSet([BONJOUR, HELLO]).lang() == "Hello"
        assert ValueSet([HELLO, BONJOUR], default_langs=("fr",)).lang() == "Bonjour"

    def test_empty_set(self):
        assert ValueSet().lang(["en"], fallback_first=True) is None

    def test_parse_langs(self):
        assert parse_langs("en-gb,en  fr") == ["en-gb", "en", "fr"]
        assert parse_langs(None, ("de",)) == ["de"]


@pytest.mark.unit
class TestValueSetAccessors:
    """Ordering, joining and projection."""

    def test_join_and_str(self):
        values = ValueSet(["a", URI("http://example.org/b"), HELLO])
        assert values.join("|") == "a|http://example.org/b|Hello"
        assert str(values) == "a, http://example.org/b, Hello"
        assert ValueSet().join(",") is None
        assert str(ValueSet()) == ""

    def test_add_keeps_order_and_duplicates(self):
        values = ValueSet(["a"])
        values.add(["b", "a"], ValueSet(["c"]))
        assert values.strings() == ["a", "b", "a", "c"]
        assert values.count() == 4
        assert len(values) == 4

    def test_first_and_indexing(self):
        values = ValueSet(["x", "y"])
        assert values.first() == "x"
        assert values[1] == "y"
        assert ValueSet().first() is None
        assert not ValueSet()

    def test_value_per_language(self):
        values = ValueSet([HELLO, Literal("Hiya", lang="en"), BONJOUR, "Hi", "Yo", URI("http://x/")])
        assert values.value_per_language() == [HELLO, BONJOUR, "Hi"]

    def test_uris_include_node_subjects(self):
        node = SubjectNode("http://example.org/n")
        values = ValueSet([URI("http://example.org/a"), "text", node])
        assert values.uris() == [URI("http://example.org/a"), URI("http://example.org/n")]

    def test_as_array_recurses_into_nodes(self):
        node = SubjectNode("http://example.org/n")
        node.add(Vocab.FOAF + "name", "N")
        result = ValueSet(["a", node]).as_array()
        assert result[0] == {"type": "literal", "value": "a"}
        assert result[1]["type"] == "node"
        assert result[1]["value"][Vocab.FOAF + "name"] == [{"type": "literal", "value": "N"}]

    def test_from_instances(self):
        a = SubjectNode("http://example.org/a")
        a.add(Vocab.FOAF + "name", "A")
        b = SubjectNode("http://example.org/b")
        b.add(Vocab.FOAF + "name", "B")
        b.add(Vocab.RDFS + "label", "Bee")
        values = ValueSet.from_instances([Vocab.FOAF + "name", Vocab.RDFS + "label"], a, [b])
        assert values.strings() == ["A", "B", "Bee"]
