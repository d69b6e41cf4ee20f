"""scopeexporter.query - one-call extraction API.

Basic usage::

    from scopeexporter.query import extract

    export = extract(html, url="https://hackerone.com/acme/policy_scopes")
    print(export.extraction_method)   # "structured" or "heuristic"
    print(export.assets["domain"])

Callers that already hold table rows or page text skip HTML parsing::

    from scopeexporter.query import extract_content

    export = extract_content(rows=[["a.com", "Domain"]])
    export = extract_content(rows=[], text=plain_text)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from scopeexporter.categories import Category
from scopeexporter.extractors.heuristic import extract_heuristic, lines_from_text, page_text
from scopeexporter.extractors.structured import MIN_COLUMNS, extract_structured, rows_from_html
from scopeexporter.items import ScopeExport
from scopeexporter.output import assemble

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _plain(assets: dict[Category, list[str]]) -> dict[str, list[str]]:
    return {category.value: values for category, values in assets.items()}


def _valid_rows(rows: Sequence[Sequence[str]]) -> list[Sequence[str]]:
    return [cols for cols in rows if len(cols) >= MIN_COLUMNS]


def extract_content(
    rows: Sequence[Sequence[str]] = (),
    text: str = "",
    url: str = "",
) -> ScopeExport:
    """Extract assets from pre-acquired *rows*, falling back to *text*.

    The heuristic path runs only when no row has two or more columns.  A table
    whose rows all have unrecognised types is still a structured result.
    """
    table = _valid_rows(rows)
    if table:
        logger.debug("Structured path: %d row(s)", len(table))
        result = extract_structured(table)
        return ScopeExport(
            url=url,
            extraction_method="structured",
            rows_considered=len(table),
            assets=_plain(assemble(result)),
            extracted_at=_now(),
        )

    lines = lines_from_text(text)
    logger.debug("No table rows; heuristic path over %d line(s)", len(lines))
    result = extract_heuristic(lines)
    return ScopeExport(
        url=url,
        extraction_method="heuristic",
        lines_considered=len(lines),
        assets=_plain(assemble(result)),
        extracted_at=_now(),
    )


def extract(html: str, url: str = "") -> ScopeExport:
    """Extract scope assets from an HTML document.

    Page text is only computed when the document has no usable table rows.
    """
    rows = rows_from_html(html)
    if rows:
        return extract_content(rows=rows, url=url)
    return extract_content(text=page_text(html), url=url)


def extract_text(text: str, url: str = "") -> ScopeExport:
    """Extract scope assets from plain text (heuristic path only)."""
    return extract_content(text=text, url=url)
