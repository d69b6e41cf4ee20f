"""Extraction sub-package: structured table parsing and heuristic text fallback."""

from .heuristic import extract_heuristic, is_candidate_line, lines_from_text, page_text
from .structured import extract_structured, rows_from_html

__all__ = [
    "extract_heuristic",
    "extract_structured",
    "is_candidate_line",
    "lines_from_text",
    "page_text",
    "rows_from_html",
]
