# src/elm_review/review/render.py
"""Render elm-review rich-text chunks as a small HTML document.

elm-review draws its source excerpts with literal spaces and newlines
(``48| fzef =`` followed by a ``^^^^`` pointer line), so every chunk keeps
its whitespace as ``&nbsp;`` / ``<br>`` and the document uses a monospace
font.
"""
import html
from collections.abc import Iterable
from elm_review.models.report import Chunk, StyledChunk


DEFAULT_FONT_FAMILY = "monospace"

DOCUMENT_TEMPLATE = '<html><body style="font-family: {font_family}">{body}</body></html>'


def color_hex(color: Iterable[int]) -> str:
    """Format an (r, g, b) triple as ``#rrggbb``."""
    r, g, b = (min(max(int(c), 0), 255) for c in color)
    return f"#{r:02x}{g:02x}{b:02x}"


def _escape(text: str) -> str:
    escaped = html.escape(text, quote=False)
    escaped = escaped.replace("\r\n", "\n").replace("\r", "\n")
    return escaped.replace(" ", "&nbsp;").replace("\n", "<br>")


def _span_style(chunk: StyledChunk) -> str:
    styles = [f"color: {color_hex(chunk.color)}"]
    if chunk.bold:
        styles.append("font-weight: bold")
    if chunk.underline:
        styles.append("text-decoration: underline")
    return "; ".join(styles)


def render_chunk(chunk: Chunk) -> str:
    text = _escape(chunk.text)
    if isinstance(chunk, StyledChunk):
        return f'<span style="{_span_style(chunk)}">{text}</span>'
    return text


def render_chunks(chunks: Iterable[Chunk], font_family: str = DEFAULT_FONT_FAMILY) -> str:
    """Render a chunk sequence into one HTML document, in order and without separators."""
    body = "".join(render_chunk(chunk) for chunk in chunks)
    return DOCUMENT_TEMPLATE.format(
        font_family=html.escape(font_family),
        body=body,
    )
