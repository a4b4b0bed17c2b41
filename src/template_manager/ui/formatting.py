"""Display helpers for template content."""

from __future__ import annotations

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(unsafe: str) -> str:
    """Escape text for safe display inside HTML markup or attributes.

    ``&`` goes first so already-produced entities aren't escaped twice.
    """
    for char, entity in _HTML_ESCAPES:
        unsafe = unsafe.replace(char, entity)
    return unsafe


def preview(content: str, limit: int = 80) -> str:
    """Single-line preview of template content."""
    text = " ".join(content.split())
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 3)] + "..."
