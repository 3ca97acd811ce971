"""Table formatting helpers for pages."""

from __future__ import annotations


def get_column_string(text: str, width: int) -> str:
    """Fit ``text`` into exactly ``width`` characters.

    Short text is padded with spaces, long text is cut and ends in ``...``.
    Columns narrower than four characters cannot hold a character plus the
    ellipsis, so they are filled with dots.
    """
    if not text:
        return " " * width
    if len(text) == width:
        return text
    if width < 4:
        return "." * width
    if len(text) < width:
        return text.ljust(width)
    return text[: width - 3] + "..."
