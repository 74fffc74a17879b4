from elm_review.models.report import decode_chunk
from .parser import load_report, flatten_report, parse_report, sort_diagnostics
from .render import render_chunks, color_hex
from .session import ReviewSession, ReviewUpdate

__all__ = [
    "decode_chunk",
    "load_report",
    "flatten_report",
    "parse_report",
    "sort_diagnostics",
    "render_chunks",
    "color_hex",
    "ReviewSession",
    "ReviewUpdate",
]
