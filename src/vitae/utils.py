"""Utility functions for Vitae"""

from pathlib import Path


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def truncate(text: str, limit: int = 80) -> str:
    """Shorten text to ``limit`` characters for one-line listings.

    Examples:
        >>> truncate("short")
        'short'
        >>> truncate("a" * 10, limit=6)
        'aaa...'
    """
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return f"{text[: max(limit - 3, 0)]}..."
