"""Tests for abstract extraction."""

from article_importer.parsers import AbstractParser


class TestAbstractParser:
    def test_sanitizes_abstracts_per_locale(self, sample_document, locale_resolver):
        abstracts = AbstractParser(sample_document, locale_resolver).parse()

        assert abstracts == {
            "en": "<p>We study <em>marginalia</em> in H<sub>2</sub>O-damaged books, at scale.</p>",
            "fr": "<p>Nous étudions les <em>marginalia</em>.</p>",
        }

    def test_abstract_without_lang_uses_default_locale(self, make_document, locale_resolver):
        document = make_document("<abstract><p>Plain.</p></abstract>")

        assert AbstractParser(document, locale_resolver).parse() == {"en": "<p>Plain.</p>"}

    def test_blank_abstracts_are_skipped(self, make_document, locale_resolver):
        document = make_document(
            '<abstract xml:lang="en">  </abstract>'
            '<trans-abstract xml:lang="es"><p>Resumen</p></trans-abstract>'
        )

        abstracts = AbstractParser(document, locale_resolver).parse()

        assert abstracts == {"es": "<p>Resumen</p>"}

    def test_markup_only_abstract_is_kept(self, make_document, locale_resolver):
        """Whitelisted tags count as content even when their text is blank."""
        document = make_document('<abstract xml:lang="en"><p> </p></abstract>')

        assert AbstractParser(document, locale_resolver).parse() == {"en": "<p> </p>"}

    def test_document_order_across_abstract_kinds(self, make_document, locale_resolver):
        """A trans-abstract before the abstract is read first; the later one wins."""
        document = make_document(
            '<trans-abstract xml:lang="en"><p>First</p></trans-abstract>'
            '<abstract xml:lang="en"><p>Second</p></abstract>'
        )

        assert AbstractParser(document, locale_resolver).parse() == {"en": "<p>Second</p>"}

    def test_no_abstract(self, make_document, locale_resolver):
        assert AbstractParser(make_document(""), locale_resolver).parse() == {}
