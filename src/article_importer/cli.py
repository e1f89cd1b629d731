"""Command-line interface for article-importer."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from article_importer.clients import PublicationServiceClient
from article_importer.importer import PublicationImporter
from article_importer.persistence import JsonRepository, LocalFileStore
from schemas.context import ImportContext, ImporterConfig, Issue, Section, SourceFile, Submission

DEFAULT_OUTPUT_DIR = Path("./workspace/imported")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INCOMPLETE = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def import_article(args: argparse.Namespace) -> int:
    """Execute the import command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when published, 1 on failure, 2 when the publication
        was stored but not fully published)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    xml_path = args.xml.resolve()
    if not xml_path.exists():
        logger.error(f"JATS file not found: {xml_path}")
        return EXIT_FAILED

    pdf_path = args.pdf.resolve()
    if not pdf_path.exists():
        logger.error(f"PDF file not found: {pdf_path}")
        return EXIT_FAILED

    try:
        config = ImporterConfig.from_file(args.config) if args.config else ImporterConfig()
    except Exception as e:
        logger.error(f"Failed to load config {args.config}: {e}")
        return EXIT_FAILED

    context = ImportContext(
        submission=Submission(id=args.submission_id, context_id=config.context_id),
        section=Section(id=args.section_id),
        issue=Issue(id=args.issue_id, date_published=args.issue_date),
        source_file=SourceFile(path=pdf_path),
        config=config,
    )

    output_dir = args.output
    output_dir.mkdir(parents=True, exist_ok=True)
    file_store = LocalFileStore(output_dir / "files")

    if args.service_url:
        client_config = {
            "base_url": args.service_url,
            "headers": {"User-Agent": "article-importer/1.0"},
        }
        if args.api_token:
            client_config["api_token"] = args.api_token
        with PublicationServiceClient(client_config) as client:
            result = PublicationImporter(client, file_store).run(xml_path, context)
    else:
        repository = JsonRepository(output_dir)
        result = PublicationImporter(repository, file_store).run(xml_path, context)

    if result.ok:
        logger.info(f"Imported {result.document_id}")
        logger.info(f"  Publication: {result.publication_id}")
        logger.info(f"  Locale: {result.publication.locale}")
        logger.info(f"  Published: {result.publication.date_published}")
        logger.info(f"  Output: {output_dir}")
        return EXIT_OK

    if result.incomplete:
        logger.warning(
            f"Publication {result.publication_id} for {result.document_id} was stored "
            f"but not completed ({result.error.stage}); fix it manually"
        )
        return EXIT_INCOMPLETE

    logger.error(f"Failed to import {result.document_id}: {result.error}")
    return EXIT_FAILED


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="article-importer",
        description="Import JATS articles as published journal publications",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    import_parser = subparsers.add_parser(
        "import",
        help="Import one JATS article and its PDF",
        description="Build a publication from a JATS front matter document, store it, attach its PDF galley and publish it.",
    )
    import_parser.add_argument(
        "--xml",
        type=Path,
        required=True,
        help="Path to the JATS XML file",
    )
    import_parser.add_argument(
        "--pdf",
        type=Path,
        required=True,
        help="Path to the article PDF",
    )
    import_parser.add_argument("--submission-id", type=int, required=True, help="Submission id")
    import_parser.add_argument("--section-id", type=int, required=True, help="Journal section id")
    import_parser.add_argument("--issue-id", type=int, required=True, help="Issue id")
    import_parser.add_argument(
        "--issue-date",
        type=date.fromisoformat,
        default=None,
        help="Issue publication date, used when the article has no pub-date (ISO format: YYYY-MM-DD)",
    )
    import_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON importer configuration (locales, editor, genre)",
    )
    import_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for records and stored files (default: {DEFAULT_OUTPUT_DIR})",
    )
    import_parser.add_argument(
        "--service-url",
        type=str,
        default=None,
        help="Publishing service API base URL; records are written to --output when omitted",
    )
    import_parser.add_argument(
        "--api-token",
        type=str,
        default=None,
        help="Bearer token for the publishing service",
    )
    import_parser.set_defaults(func=import_article)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
