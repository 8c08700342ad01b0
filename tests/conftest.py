import sys
from pathlib import Path

import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


from rule_resolver.documents.models import Document  # noqa: E402


@pytest.fixture
def write_rule():
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_document():
    def _make(
        doc_id: str,
        globs: tuple[str, ...] = (),
        match_all: bool = False,
        source_order: int = 0,
        description: str = "",
        body: str = "Body.\n",
    ) -> Document:
        return Document(
            id=doc_id,
            source_id=f"{doc_id}.md",
            description=description,
            globs=globs,
            body=body,
            source_order=source_order,
            match_all=match_all,
        )

    return _make


@pytest.fixture
def scenario_sources() -> dict[str, str]:
    return {
        "A.md": "---\ndescription: Python rules\nglobs: *.py\n---\nUse type hints.\n",
        "B.md": "---\ndescription: JavaScript rules\nglobs: *.js\n---\nUse const.\n",
        "C.md": "---\ndescription: Everywhere\nmatchAll: true\n---\nBe kind.\n",
    }
