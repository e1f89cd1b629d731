"""Draft publication assembly from JATS front matter."""

import logging
from datetime import datetime

from article_importer.exceptions import MissingPublicationDateError
from article_importer.jats import JatsDocument, LocaleResolver, iso1_from_locale
from article_importer.protocols import ContributorProcessor
from schemas.context import ImportContext
from schemas.publication import ACCESS_OPEN, STATUS_PUBLISHED, Publication

from .abstract_parser import AbstractParser
from .author_parser import AuthorParser
from .date_parser import PublicationDateParser, format_timestamp, to_datetime
from .parser import ARTICLE_META
from .public_id_parser import PublicIdParser
from .title_parser import TitleParser

logger = logging.getLogger(__name__)

PERMISSIONS = f"{ARTICLE_META}/permissions"


class PublicationBuilder:
    """Assemble a draft Publication for one JATS document.

    The builder:
    1. Resolves the publication date, falling back to the issue date
    2. Sets the fixed fields of an imported publication
    3. Sets pages when both fpage and lpage are present
    4. Resolves titles and the publication locale/language
    5. Adds abstracts, public identifiers and copyright data
    6. Lets the contributor processor add authors

    Nothing is persisted; the returned draft goes to PublicationCommitter.

    Example:
        document = JatsDocument.from_path(Path("article.xml"))
        publication = PublicationBuilder(document, context).build()
    """

    def __init__(
        self,
        document: JatsDocument,
        context: ImportContext,
        locale_resolver: LocaleResolver | None = None,
        contributor_processor: ContributorProcessor | None = None,
    ):
        self.document = document
        self.context = context
        self.locale_resolver = locale_resolver or LocaleResolver(
            context.config.default_locale, context.config.locale_map
        )
        self.contributor_processor = contributor_processor or AuthorParser(
            document, self.locale_resolver
        )

    @property
    def document_id(self) -> str:
        return self.document.document_id or self.context.document_id

    def resolve_publication_date(self) -> datetime:
        """Return the document's pub-date, or the issue date if it has none.

        Raises:
            MissingPublicationDateError: If neither is available
        """
        try:
            return PublicationDateParser(self.document, self.locale_resolver).parse()
        except MissingPublicationDateError as e:
            issue = self.context.issue
            if issue.date_published is None:
                raise MissingPublicationDateError(
                    f"Publication date is missing from the document and issue {issue.id}",
                    document_id=self.document_id,
                ) from e
            logger.warning(
                f"No usable pub-date in {self.document_id}, "
                f"using issue {issue.id} date {issue.date_published}"
            )
            return to_datetime(issue.date_published)

    def build(self) -> Publication:
        """Build the draft publication.

        Raises:
            MissingPublicationDateError: If no publication date can be resolved
            MissingTitleError: If the document has no title text
        """
        publication_date = self.resolve_publication_date()
        submission_id = self.context.submission.id

        publication = Publication(
            submission_id=submission_id,
            status=STATUS_PUBLISHED,
            version=1,
            seq=submission_id,
            access_status=ACCESS_OPEN,
            date_published=format_timestamp(publication_date),
            section_id=self.context.section.id,
            issue_id=self.context.issue.id,
            url_path=None,
        )

        first_page = self.document.select_text(f"{ARTICLE_META}/fpage")
        last_page = self.document.select_text(f"{ARTICLE_META}/lpage")
        if first_page and last_page:
            publication.pages = f"{first_page}-{last_page}"

        titles = TitleParser(self.document, self.locale_resolver).parse()
        publication.title = titles.title
        publication.subtitle = titles.subtitle
        publication.locale = titles.locale
        publication.language = iso1_from_locale(titles.locale)

        publication.abstract = AbstractParser(self.document, self.locale_resolver).parse()
        publication.public_ids = PublicIdParser(self.document, self.locale_resolver).parse()

        default_locale = self.locale_resolver.default_locale
        holder = self.document.select_text(f"{PERMISSIONS}/copyright-holder")
        if holder:
            publication.copyright_holder = {default_locale: holder}
        notice = self.document.select_text(f"{PERMISSIONS}/copyright-statement")
        if notice:
            publication.copyright_notice = {default_locale: notice}
        publication.copyright_year = (
            self.document.select_text(f"{PERMISSIONS}/copyright-year")
            or str(publication_date.year)
        )
        publication.license_url = None

        self.contributor_processor.process_authors(publication)

        logger.info(
            f"Built publication for {self.document_id}: locale {publication.locale}, "
            f"published {publication.date_published}"
        )
        return publication
