from rule_resolver.documents.models import Document
from rule_resolver.documents.parser import parse_document
from rule_resolver.errors import (
    DocumentNotFoundError,
    DocumentParseError,
    IngestionCancelledError,
    InvalidPatternError,
    RuleResolverError,
    RuleSourceFileError,
    UnterminatedFrontMatterError,
)
from rule_resolver.globs.matcher import GlobMatcher, compile_glob
from rule_resolver.index import RuleIndex
from rule_resolver.loader import load_corpus, resolve_rules_for_file
from rule_resolver.registry import RuleRegistry
from rule_resolver.repository import RulesRepository
from rule_resolver.resolution import RuleMatch, explain, resolve, resolve_many
from rule_resolver.validation import (
    Issue,
    IssueKind,
    IssueSeverity,
    ValidationReporter,
)

__all__ = [
    "Document",
    "DocumentNotFoundError",
    "DocumentParseError",
    "GlobMatcher",
    "IngestionCancelledError",
    "InvalidPatternError",
    "Issue",
    "IssueKind",
    "IssueSeverity",
    "RuleIndex",
    "RuleMatch",
    "RuleRegistry",
    "RuleResolverError",
    "RuleSourceFileError",
    "RulesRepository",
    "UnterminatedFrontMatterError",
    "ValidationReporter",
    "compile_glob",
    "explain",
    "load_corpus",
    "parse_document",
    "resolve",
    "resolve_many",
    "resolve_rules_for_file",
]
