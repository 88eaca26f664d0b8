"""
Tests for Document: identity resolution, promotion, replacement, primary
topic and namespace short names.
"""

import pytest

from rdfgraph import Document, GraphConfig, SubjectNode
from rdfgraph.constants import Predicates, Vocab
from rdfgraph.models import URI

P = "http://example.org/ns#p"


@pytest.mark.unit
class TestSubjects:
    """Lookup, creation and merging of subjects."""

    def test_subject_creates_once(self, doc):
        node = doc.subject("http://example.org/a")
        assert doc.subject("http://example.org/a") is node
        assert len(doc) == 1
        assert node.subject() == URI("http://example.org/a")

    def test_subject_without_create(self, doc):
        assert doc.subject("http://example.org/a", create=False) is None
        assert doc.get("http://example.org/a") is None
        assert len(doc) == 0

    def test_subject_with_type(self, doc):
        node = doc.subject("http://example.org/a", type=Vocab.FOAF + "Person")
        assert node.is_a(Vocab.FOAF + "Person")

    def test_location_is_typed_description(self):
        doc = Document(location="http://example.org/doc.rdf")
        node = doc.subject("http://example.org/doc.rdf")
        assert node.is_a(Predicates.DESCRIPTION)

    def test_lookup_by_secondary_identity(self, doc):
        node = SubjectNode("http://example.org/a")
        node.add(Predicates.ID, "http://example.org/doc#a")
        doc.merge(node)
        assert doc.subject("http://example.org/doc#a") is node
        assert "http://example.org/doc#a" in doc
        assert 42 not in doc

    def test_merge_into_existing(self, doc):
        existing = doc.subject("http://example.org/a")
        existing.add(P, "x")
        incoming = SubjectNode("http://example.org/a")
        incoming.add(P, "y")
        assert doc.merge(incoming) is existing
        assert existing.values(P) == ["x", "y"]
        assert len(doc) == 1

    def test_merge_at_position(self, doc):
        doc.subject("http://example.org/a")
        doc.subject("http://example.org/b")
        first = doc.merge(SubjectNode("http://example.org/c"), 0)
        assert doc.subjects[0] is first
        assert [str(n) for n in doc] == [
            "http://example.org/c",
            "http://example.org/a",
            "http://example.org/b",
        ]

    def test_merge_by_identifier(self, doc):
        node = doc.subject("http://example.org/a")
        assert doc.merge("http://example.org/a") is node
        assert doc.merge("http://example.org/missing") is None

    def test_merged_nodes_inherit_languages(self):
        doc = Document(config=GraphConfig.default().with_langs(["fr"]))
        node = doc.merge(SubjectNode("http://example.org/a"))
        assert node.default_langs == ("fr",)

    def test_add_promotes(self, doc):
        node = doc.add(SubjectNode("http://example.org/a"))
        assert doc.is_promoted(node)


@pytest.mark.unit
class TestTopLevel:
    """Top-level status from reference counts and promotion."""

    def test_unreferenced_is_top_level(self, doc):
        node = doc.subject("http://example.org/a")
        assert doc.is_top_level(node)

    def test_singly_referenced_is_nested(self, doc):
        parent = doc.subject("http://example.org/p")
        child = doc.subject("http://example.org/c")
        parent.add(P, child)
        assert not doc.is_top_level(child)
        assert doc.top_level_nodes() == [parent]

    def test_promoted_singly_referenced_is_top_level(self, doc):
        parent = doc.subject("http://example.org/p")
        child = doc.subject("http://example.org/c")
        parent.add(P, child)
        doc.promote(child)
        assert doc.is_top_level(child)

    def test_multiply_referenced_is_top_level(self, doc):
        child = doc.subject("http://example.org/c")
        for name in ("p", "q"):
            doc.subject("http://example.org/" + name).add(P, child)
        assert child.refcount == 2
        assert doc.is_top_level(child)


@pytest.mark.unit
class TestReplace:
    """Wholesale replacement of a subject's node."""

    def test_replace_keeps_reference_count(self, doc):
        old = doc.subject("http://example.org/c")
        for name in ("p", "q"):
            doc.subject("http://example.org/" + name).add(P, old)
        new = SubjectNode("http://example.org/c")
        new.add(P, "fresh")
        assert doc.replace(new) is new
        assert new.refcount == 2
        assert doc.subject("http://example.org/c") is new
        assert len(doc) == 3

    def test_replace_redirects_references(self, doc):
        old = doc.subject("http://example.org/c")
        parent = doc.subject("http://example.org/p")
        parent.add(P, old)
        new = SubjectNode("http://example.org/c")
        doc.replace(new)
        assert parent.first(P) is new

    def test_replace_missing_adds(self, doc):
        node = SubjectNode("http://example.org/new")
        assert doc.replace(node) is node
        assert node.refcount == 1
        assert doc.get("http://example.org/new") is node

    def test_replace_missing_without_add(self, doc):
        assert doc.replace(SubjectNode("http://example.org/new"), add_if_not_found=False) is None
        assert len(doc) == 0


@pytest.mark.unit
class TestPrimaryTopic:
    """Heuristic resolution of what a document is about."""

    def test_configured_topic(self):
        doc = Document(primary_topic="http://example.org/b")
        doc.subject("http://example.org/a")
        b = doc.subject("http://example.org/b")
        assert doc.primary_topic() is b

    def test_file_node_topic(self):
        doc = Document(location="http://example.org/doc.rdf")
        me = doc.subject("http://example.org/doc.rdf#me")
        doc.subject("http://example.org/doc.rdf").add(Predicates.PRIMARY_TOPIC, URI("http://example.org/doc.rdf#me"))
        assert doc.primary_topic() is me

    def test_first_description_topic(self, doc):
        doc.subject("http://example.org/a", type=Vocab.FOAF + "Person")
        described = doc.subject("http://example.org/b", type=Predicates.DESCRIPTION)
        assert doc.primary_topic() is described

    def test_first_node_fallback(self, doc):
        first = doc.subject("http://example.org/a")
        doc.subject("http://example.org/b")
        assert doc.primary_topic() is first

    def test_empty_document(self, doc):
        assert doc.primary_topic() is None

    def test_profile_document(self, profile_doc):
        topic = profile_doc.primary_topic()
        assert str(topic) == "http://example.org/base/doc.rdf#me"
        assert topic.title() == "Dana"


@pytest.mark.unit
class TestNamespacedName:
    """prefix:local short names."""

    def test_known_prefix(self, doc):
        assert doc.namespaced_name(Vocab.FOAF + "name") == "foaf:name"
        assert doc.namespaces[Vocab.FOAF] == "foaf"

    def test_idempotent(self, doc):
        first = doc.namespaced_name("http://example.org/ns#thing")
        assert doc.namespaced_name("http://example.org/ns#thing") == first
        assert first.endswith(":thing")

    def test_distinct_namespaces_never_collide(self, doc):
        a = doc.namespaced_name("http://example.org/one#x")
        b = doc.namespaced_name("http://example.org/two#x")
        assert a.split(":")[0] != b.split(":")[0]

    def test_generated_prefix_skips_taken_default(self, doc):
        doc.ns("http://example.org/mine/", "foaf")
        name = doc.namespaced_name(Vocab.FOAF + "name")
        assert name.endswith(":name")
        assert not name.startswith("foaf:")

    def test_without_generate(self, doc):
        uri = "http://example.org/ns#thing"
        assert doc.namespaced_name(uri, generate=False) == uri
        assert doc.namespaces == {}

    def test_registered_prefix(self, doc):
        assert doc.ns("http://example.org/ns#", "ex") == "ex"
        assert doc.namespaced_name("http://example.org/ns#thing", generate=False) == "ex:thing"

    def test_first_registration_wins(self, doc):
        doc.ns("http://example.org/ns#", "ex")
        assert doc.ns("http://example.org/ns#", "other") == "ex"
        assert doc.ns("http://example.org/ns#", "other", overwrite=True) == "other"
        assert doc.namespaced_name("http://example.org/ns#thing") == "other:thing"

    def test_prefix_bound_to_another_namespace_is_not_reused(self, doc, caplog):
        assert doc.ns("http://a.example/", "x") == "x"
        other = doc.ns("http://b.example/", "x")
        assert other != "x"
        assert doc.namespaced_name("http://a.example/foo") == "x:foo"
        assert doc.namespaced_name("http://b.example/foo") == f"{other}:foo"
        assert "already bound" in caplog.text

    def test_xml_namespace(self, doc):
        assert doc.namespaced_name(Predicates.XML_LANG) == "xml:lang"

    def test_unsplittable(self, doc):
        assert doc.namespaced_name("urn:isbn:123") == "urn:isbn:123"

    def test_empty_local_name(self, doc):
        assert doc.namespaced_name("http://example.org/ns#") == "http://example.org/ns#"
        assert doc.namespaces == {}

    def test_configured_prefix(self):
        doc = Document(config=GraphConfig.default().with_namespace("http://example.org/ns#", "ex"))
        assert doc.namespaced_name("http://example.org/ns#thing", generate=False) == "ex:thing"
