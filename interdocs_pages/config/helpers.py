"""Utility helpers shared by the InterDocs configuration loader."""

from __future__ import annotations

from pathlib import Path


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_base_url(value: object | None) -> str:
    """Return ``value`` as a base URL that starts and ends with a slash."""
    stripped = (_optional_str(value) or "").strip("/")
    return f"/{stripped}/" if stripped else "/"


def _resolve_dir(value: object | None, default: str, root: Path) -> Path:
    """Resolve a configured directory relative to the config file's folder."""
    path = Path(_optional_str(value) or default)
    if path.is_absolute():
        return path
    return root / path


def with_base_url(path: str, base_url: str) -> str:
    """Prefix an internal absolute ``path`` with the site ``base_url``.

    Examples
    --------
    >>> with_base_url("/docs/outline", "/")
    '/docs/outline'
    >>> with_base_url("/docs/outline", "/interdocs/")
    '/interdocs/docs/outline'
    """
    if not path.startswith("/"):
        return path
    return base_url.rstrip("/") + path


__all__ = ["_normalize_base_url", "_optional_str", "_resolve_dir", "with_base_url"]
