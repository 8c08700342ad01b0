"""Turn a mapping of raw rule texts into a validated :class:`RuleIndex`."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from rule_resolver.documents.models import Document
from rule_resolver.documents.parser import parse_document
from rule_resolver.errors import IngestionCancelledError, UnterminatedFrontMatterError
from rule_resolver.index import RuleIndex
from rule_resolver.resolution import resolve
from rule_resolver.validation import Issue, IssueKind, ValidationReporter


logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]


def load_corpus(
    sources: Mapping[str, str],
    should_cancel: CancelCheck | None = None,
) -> tuple[RuleIndex, list[Issue]]:
    """Parse, validate and index every source text.

    Problems with single documents or globs are reported in the returned issue
    list and never stop the batch. ``should_cancel`` is polled before each
    document; when it returns true, :class:`IngestionCancelledError` is raised
    and no index is produced.
    """
    reporter = ValidationReporter()
    documents: list[Document] = []
    total = len(sources)

    for order, (source_id, raw_text) in enumerate(sources.items()):
        if should_cancel is not None and should_cancel():
            logger.info(
                "corpus ingestion cancelled after %d/%d documents", order, total
            )
            raise IngestionCancelledError(processed=order, total=total)
        try:
            document = parse_document(
                raw_text, source_id, source_order=order, reporter=reporter
            )
        except UnterminatedFrontMatterError as exc:
            reporter.add(source_id, IssueKind.UNTERMINATED_FRONT_MATTER, exc.message)
            continue
        documents.append(document)

    index = RuleIndex.build(documents, reporter=reporter)
    if not len(index):
        reporter.add(
            "<corpus>",
            IssueKind.EMPTY_CORPUS,
            f"no documents loaded from {total} sources",
        )

    logger.debug(
        "loaded %d of %d rule documents (%d issues)", len(index), total, len(reporter)
    )
    return index, reporter.report()


def resolve_rules_for_file(index: RuleIndex, path: str) -> list[Document]:
    return resolve(index, path)

