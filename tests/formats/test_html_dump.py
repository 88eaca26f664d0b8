"""
Tests for the HTML debug view.
"""

import pytest

from fixtures import FOAF_NS

from rdfgraph.formats.html_dump import OBJECT_COLOR, PREDICATE_COLOR, SUBJECT_COLOR
from rdfgraph.models import Literal


@pytest.mark.unit
class TestHtmlDump:

    def test_document_dump(self, person_doc):
        html = person_doc.dump()
        assert html.startswith("<dl>\n<dt>")
        assert html.endswith("</dl>")
        assert f'<a class="subject" href="http://example.org/me" style="color: {SUBJECT_COLOR};">' in html
        assert f'style="color: {PREDICATE_COLOR};">a</a>' in html
        assert f'style="color: {OBJECT_COLOR};">foaf:Person</a>' in html
        assert ">foaf:name</a> &rarr; <span class=\"literal\">&quot;Alice&quot;</span></dd>" in html

    def test_nested_node_gets_its_own_list(self, shared_doc):
        html = shared_doc.dump()
        assert html.count("<dl>") == 2
        assert html.count('href="http://example.org/carol"') == 2
        assert html.count('class="subject" href="http://example.org/acme"') == 1

    def test_node_dump_without_document_uses_full_uris(self, person_doc):
        html = person_doc.get("http://example.org/me").dump()
        assert f">{FOAF_NS}name</a>" in html
        assert "foaf:" not in html

    def test_literal_titles(self, literals_doc):
        html = literals_doc.dump()
        assert '<span class="literal" title="@fr">&quot;Bonjour&quot;</span>' in html
        assert 'title="http://www.w3.org/2001/XMLSchema#integer"' in html

    def test_markup_is_escaped(self, doc):
        node = doc.subject("http://example.org/x")
        node.add(FOAF_NS + "name", Literal("<b>", lang="en"))
        assert "&quot;&lt;b&gt;&quot;" in node.dump(doc)

    def test_blank_subjects_use_labels(self, blank_doc):
        assert '>_:b1</a>' in blank_doc.dump()
