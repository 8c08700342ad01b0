from pathlib import Path


def normalize_path(path: str | Path) -> str:
    """Forward-slash form of ``path`` with leading ``./`` segments removed."""
    text = str(path).replace("\\", "/")
    while text.startswith("./"):
        text = text[2:]
    return text

