from pathlib import Path


class RuleResolverError(Exception):
    """Base error for rule loading and resolution."""


class DocumentParseError(RuleResolverError):
    def __init__(self, source_id: str, message: str) -> None:
        self.source_id = source_id
        self.message = message
        super().__init__(f"{message}: {source_id}")


class UnterminatedFrontMatterError(DocumentParseError):
    def __init__(self, source_id: str) -> None:
        super().__init__(
            source_id=source_id, message="Front-matter block has no closing '---'"
        )


class InvalidPatternError(RuleResolverError):
    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid glob pattern {pattern!r} ({detail})")


class DocumentNotFoundError(RuleResolverError, KeyError):
    def __init__(self, document_id: str) -> None:
        self.document_id = document_id
        super().__init__(f"No rule document with id {document_id!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class IngestionCancelledError(RuleResolverError):
    def __init__(self, processed: int, total: int) -> None:
        self.processed = processed
        self.total = total
        super().__init__(
            f"Corpus ingestion cancelled after {processed}/{total} documents"
        )


class RuleSourceFileError(RuleResolverError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")
