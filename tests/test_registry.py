"""Tests for publishing rule index snapshots."""

import threading

import pytest

from rule_resolver.errors import IngestionCancelledError
from rule_resolver.index import RuleIndex
from rule_resolver.loader import load_corpus
from rule_resolver.registry import RuleRegistry


def test_starts_with_empty_snapshot() -> None:
    registry = RuleRegistry()
    assert len(registry.snapshot) == 0
    assert registry.resolve("main.py") == []


def test_reload_publishes_new_snapshot(scenario_sources) -> None:
    registry = RuleRegistry()
    before = registry.snapshot

    issues = registry.reload(scenario_sources)

    assert issues == []
    assert registry.snapshot is not before
    assert [doc.id for doc in registry.resolve("main.py")] == ["A", "C"]
    assert len(before) == 0


def test_old_snapshot_keeps_serving_readers(scenario_sources) -> None:
    registry = RuleRegistry()
    registry.reload(scenario_sources)
    held = registry.snapshot

    registry.reload({"only.md": "---\nglobs: *.go\n---\n"})

    assert [doc.id for doc in held.all()] == ["A", "B", "C"]
    assert [doc.id for doc in registry.snapshot.all()] == ["only"]


def test_cancelled_reload_keeps_previous_snapshot(scenario_sources) -> None:
    registry = RuleRegistry()
    registry.reload(scenario_sources)
    published = registry.snapshot

    with pytest.raises(IngestionCancelledError):
        registry.reload({"x.md": "x"}, should_cancel=lambda: True)

    assert registry.snapshot is published


def test_stale_publish_is_discarded(scenario_sources) -> None:
    registry = RuleRegistry()
    stale_index, _ = load_corpus({"old.md": "---\nglobs: *.py\n---\n"})
    fresh_index, _ = load_corpus(scenario_sources)

    stale_ticket = next(registry._tickets)
    assert registry.publish(fresh_index) is True
    assert registry._publish(stale_index, stale_ticket) is False
    assert registry.snapshot is fresh_index


def test_generation_increases(scenario_sources) -> None:
    registry = RuleRegistry()
    registry.reload(scenario_sources)
    first = registry.generation
    registry.publish(RuleIndex())
    assert registry.generation > first


def test_concurrent_resolves_against_one_snapshot(scenario_sources) -> None:
    registry = RuleRegistry()
    registry.reload(scenario_sources)
    results: list[list[str]] = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(50):
            ids = [doc.id for doc in registry.resolve("main.py")]
            with lock:
                results.append(ids)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 200
    assert all(ids == ["A", "C"] for ids in results)


def test_resolve_many_uses_current_snapshot(scenario_sources) -> None:
    registry = RuleRegistry()
    registry.reload(scenario_sources)
    documents = registry.resolve_many(["a.py", "b.js"])
    assert [doc.id for doc in documents] == ["A", "B", "C"]
