"""Holder for the currently published rule index snapshot."""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Iterable, Mapping

from rule_resolver.documents.models import Document
from rule_resolver.index import RuleIndex
from rule_resolver.loader import CancelCheck, load_corpus
from rule_resolver.resolution import resolve, resolve_many
from rule_resolver.validation import Issue


logger = logging.getLogger(__name__)


class RuleRegistry:
    """Publishes immutable :class:`RuleIndex` snapshots to concurrent readers.

    Readers take ``registry.snapshot`` once and keep using that instance; a
    reload builds a new index off to the side and swaps the reference only
    when it is complete. Reloads that started earlier than the published
    snapshot are discarded, so racing reloads cannot roll the registry back.
    """

    def __init__(self, index: RuleIndex | None = None) -> None:
        self._snapshot = index if index is not None else RuleIndex()
        self._generation = 0
        self._tickets = itertools.count(1)
        self._publish_lock = threading.Lock()

    @property
    def snapshot(self) -> RuleIndex:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._generation

    def reload(
        self,
        sources: Mapping[str, str],
        should_cancel: CancelCheck | None = None,
    ) -> list[Issue]:
        with self._publish_lock:
            ticket = next(self._tickets)
        index, issues = load_corpus(sources, should_cancel=should_cancel)
        self._publish(index, ticket)
        return issues

    def publish(self, index: RuleIndex) -> bool:
        with self._publish_lock:
            ticket = next(self._tickets)
        return self._publish(index, ticket)

    def resolve(self, target_path: str) -> list[Document]:
        return resolve(self._snapshot, target_path)

    def resolve_many(self, target_paths: Iterable[str]) -> list[Document]:
        return resolve_many(self._snapshot, target_paths)

    def _publish(self, index: RuleIndex, ticket: int) -> bool:
        with self._publish_lock:
            if ticket < self._generation:
                logger.debug(
                    "discarding stale rule index (load %d, published %d)",
                    ticket,
                    self._generation,
                )
                return False
            self._snapshot = index
            self._generation = ticket
        logger.debug("published rule index %r as generation %d", index, ticket)
        return True
