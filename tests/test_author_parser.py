"""Tests for author extraction."""

from article_importer.parsers import AuthorParser
from schemas.publication import Publication


class TestAuthorParser:
    def test_reads_authors_in_document_order(self, sample_document, locale_resolver):
        authors = AuthorParser(sample_document, locale_resolver).parse("en")

        assert [author.family_name for author in authors] == [{"en": "Doe"}, {"en": "Roe"}]
        assert [author.seq for author in authors] == [0, 1]

    def test_editors_are_ignored(self, sample_document, locale_resolver):
        authors = AuthorParser(sample_document, locale_resolver).parse("en")

        assert all(author.family_name != {"en": "Smith"} for author in authors)

    def test_first_author_is_primary_contact(self, sample_document, locale_resolver):
        authors = AuthorParser(sample_document, locale_resolver).parse("en")

        assert authors[0].primary_contact is True
        assert authors[1].primary_contact is False

    def test_contact_details(self, sample_document, locale_resolver):
        doe = AuthorParser(sample_document, locale_resolver).parse("en")[0]

        assert doe.given_name == {"en": "Jane"}
        assert doe.email == "jane.doe@example.org"
        assert doe.orcid == "https://orcid.org/0000-0002-1825-0097"

    def test_affiliations_resolved_through_xrefs(self, sample_document, locale_resolver):
        doe, roe = AuthorParser(sample_document, locale_resolver).parse("en")

        assert doe.affiliation == {"en": "University of Examples, Springfield"}
        assert roe.affiliation == {
            "en": "University of Examples, Springfield; Institute of Testing, Canada"
        }
        assert roe.email is None

    def test_nested_affiliation(self, make_document, locale_resolver):
        document = make_document(
            '<contrib-group><contrib contrib-type="author">'
            "<name><surname>Solo</surname></name>"
            "<aff>Lone Institute</aff>"
            "</contrib></contrib-group>"
        )

        (author,) = AuthorParser(document, locale_resolver).parse("fr")

        assert author.family_name == {"fr": "Solo"}
        assert author.given_name == {}
        assert author.affiliation == {"fr": "Lone Institute"}

    def test_collab_and_nameless_contribs(self, make_document, locale_resolver):
        document = make_document(
            '<contrib-group>'
            '<contrib contrib-type="author"><collab>The Consortium</collab></contrib>'
            '<contrib contrib-type="author"><email>ghost@example.org</email></contrib>'
            "</contrib-group>"
        )

        authors = AuthorParser(document, locale_resolver).parse("en")

        assert len(authors) == 1
        assert authors[0].family_name == {"en": "The Consortium"}

    def test_defaults_to_resolver_locale(self, make_document, locale_resolver):
        document = make_document(
            '<contrib-group><contrib contrib-type="author">'
            "<name><surname>Doe</surname></name></contrib></contrib-group>"
        )

        (author,) = AuthorParser(document, locale_resolver).parse()

        assert author.family_name == {"en": "Doe"}

    def test_process_authors_uses_publication_locale(self, sample_document, locale_resolver):
        publication = Publication(submission_id=1, locale="fr")

        AuthorParser(sample_document, locale_resolver).process_authors(publication)

        assert len(publication.authors) == 2
        assert publication.authors[0].family_name == {"fr": "Doe"}
