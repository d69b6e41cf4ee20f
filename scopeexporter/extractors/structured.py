"""Structured extraction from scope tables.

Each table row is read as ``[asset, type label, ...]``.  The type label is
classified with :func:`scopeexporter.categories.classify`; rows whose label
matches nothing are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from bs4 import BeautifulSoup

from scopeexporter.categories import Category, classify, empty_result

logger = logging.getLogger(__name__)

# Rows with fewer cells than this are layout, not scope entries
MIN_COLUMNS = 2


def rows_from_html(html: str) -> list[list[str]]:
    """Return the ``td`` texts of every ``table tr`` row with at least two cells.

    Header cells (``th``) are not counted as columns.  Cell text is
    whitespace-normalised and trimmed.
    """
    if not html or not html.strip():
        return []

    soup = BeautifulSoup(html, "lxml")
    rows: list[list[str]] = []
    for tr in soup.select("table tr"):
        cols = [td.get_text(" ", strip=True) for td in tr.find_all("td")]
        if len(cols) >= MIN_COLUMNS:
            rows.append(cols)
    logger.debug("Found %d table row(s) with >= %d cells", len(rows), MIN_COLUMNS)
    return rows


def extract_structured(rows: Iterable[Sequence[str]]) -> dict[Category, list[str]]:
    """Group the assets of *rows* by the category of their type label.

    Every category is present in the returned mapping.  Assets keep row order
    and are not deduplicated.
    """
    grouped = empty_result()
    for cols in rows:
        if len(cols) < MIN_COLUMNS:
            continue
        asset = cols[0].strip()
        label = cols[1].strip()
        category = classify(label)
        if category is None:
            logger.debug("Dropping %r: unrecognised type %r", asset, label)
            continue
        grouped[category].append(asset)
    return grouped
