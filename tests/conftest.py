"""Pytest fixtures for article-importer tests."""

from datetime import date

import pytest

from article_importer.jats import JatsDocument, LocaleResolver
from schemas.context import ImportContext, ImporterConfig, Issue, Section, SourceFile, Submission

SAMPLE_JATS = """<?xml version="1.0" encoding="UTF-8"?>
<article xmlns:xlink="http://www.w3.org/1999/xlink" article-type="research-article" xml:lang="en">
  <front>
    <journal-meta>
      <journal-title-group><journal-title>Journal of Tests</journal-title></journal-title-group>
    </journal-meta>
    <article-meta>
      <article-id pub-id-type="publisher-id">jt-2021-042</article-id>
      <article-id pub-id-type="DOI">10.1234/jt.2021.042</article-id>
      <title-group>
        <article-title xml:lang="en">Reading <italic>Marginalia</italic> at Scale</article-title>
        <subtitle xml:lang="en">A Corpus Study</subtitle>
        <trans-title-group xml:lang="fr">
          <trans-title>Lire les marginalia</trans-title>
          <trans-subtitle>Une étude de corpus</trans-subtitle>
        </trans-title-group>
      </title-group>
      <contrib-group>
        <contrib contrib-type="author">
          <contrib-id contrib-id-type="orcid">https://orcid.org/0000-0002-1825-0097</contrib-id>
          <name><surname>Doe</surname><given-names>Jane</given-names></name>
          <email>jane.doe@example.org</email>
          <xref ref-type="aff" rid="aff1"/>
        </contrib>
        <contrib contrib-type="author">
          <name><surname>Roe</surname><given-names>Richard</given-names></name>
          <xref ref-type="aff" rid="aff1 aff2"/>
        </contrib>
        <contrib contrib-type="editor">
          <name><surname>Smith</surname><given-names>Ed</given-names></name>
        </contrib>
        <aff id="aff1"><label>1</label>University of Examples, Springfield</aff>
        <aff id="aff2"><label>2</label><institution>Institute of Testing</institution>, <country>Canada</country></aff>
      </contrib-group>
      <pub-date pub-type="ppub"><day>15</day><month>06</month><year>2021</year></pub-date>
      <pub-date publication-format="electronic" date-type="pub"><day>02</day><month>05</month><year>2021</year></pub-date>
      <fpage>101</fpage>
      <lpage>118</lpage>
      <permissions>
        <copyright-statement>Copyright 2021 The Authors</copyright-statement>
        <copyright-year>2021</copyright-year>
        <copyright-holder>The Authors</copyright-holder>
      </permissions>
      <abstract xml:lang="en"><p>We study <italic>marginalia</italic> in H<sub>2</sub>O-damaged books, <bold>at scale</bold>.</p></abstract>
      <trans-abstract xml:lang="fr"><p>Nous étudions les <italic>marginalia</italic>.</p></trans-abstract>
    </article-meta>
  </front>
  <body/>
</article>
"""


def wrap_article_meta(article_meta: str) -> str:
    """Wrap an <article-meta> body in a minimal JATS article."""
    return (
        "<article><front><article-meta>"
        f"{article_meta}"
        "</article-meta></front></article>"
    )


@pytest.fixture
def sample_jats_xml():
    """Complete JATS front matter exercising every extracted field."""
    return SAMPLE_JATS


@pytest.fixture
def sample_document(sample_jats_xml):
    return JatsDocument.from_string(sample_jats_xml, document_id="jt-2021-042")


@pytest.fixture
def make_document():
    """Factory building a JatsDocument from an <article-meta> body."""

    def _make(article_meta: str, document_id: str = "article") -> JatsDocument:
        return JatsDocument.from_string(wrap_article_meta(article_meta), document_id=document_id)

    return _make


@pytest.fixture
def locale_resolver():
    return LocaleResolver("en")


@pytest.fixture
def sample_pdf(tmp_path):
    """A small file standing in for the ingested article PDF."""
    pdf_path = tmp_path / "incoming" / "jt-2021-042.pdf"
    pdf_path.parent.mkdir(parents=True)
    pdf_path.write_bytes(b"%PDF-1.4\n%test\n")
    return pdf_path


@pytest.fixture
def importer_config():
    return ImporterConfig(default_locale="en", editor_id=7, genre_id=3, context_id=1)


@pytest.fixture
def import_context(sample_pdf, importer_config):
    """Import context for submission 42 in issue 5, dated 2020-03-01."""
    return ImportContext(
        submission=Submission(id=42, context_id=1),
        section=Section(id=2),
        issue=Issue(id=5, date_published=date(2020, 3, 1)),
        source_file=SourceFile(path=sample_pdf),
        config=importer_config,
    )
