"""Heuristic extraction from unstructured page text.

Used when a page has no scope table.  Scope listings rendered as cards or
pasted as plain text usually put the asset on one line and its type on the
same line or just below it, so:

1. a line is an asset *candidate* if it looks like a host, file or URL
   (``.xx`` extension, ``http(s)://`` scheme, or ``github.com``);
2. the candidate plus the next :data:`LOOKAHEAD_LINES` lines are joined and
   searched for category keywords;
3. the candidate line itself is filed under the first matching category.

Lines that are not candidates are never emitted, even when they contain a
keyword.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

from scopeexporter.categories import Category, empty_result, match_patterns

logger = logging.getLogger(__name__)

LOOKAHEAD_LINES = 2

# ---------------------------------------------------------------------------
# Candidate shape
# ---------------------------------------------------------------------------

_DOTTED_OR_SCHEME_RE = re.compile(r"\.\w{2,}|https?://", re.ASCII)
_GITHUB_HOST_RE = re.compile(r"github\.com", re.IGNORECASE)

_LINE_SPLIT_RE = re.compile(r"\r?\n")

# Elements whose text is never rendered
_INVISIBLE_TAGS: tuple[str, ...] = ("script", "style", "noscript", "template")

# Elements rendered on their own line(s); everything else flows inline
_BLOCK_TAGS: frozenset[str] = frozenset({
    "address", "article", "aside", "blockquote", "body", "caption", "dd",
    "details", "dialog", "div", "dl", "dt", "fieldset", "figcaption", "figure",
    "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hgroup",
    "hr", "li", "main", "nav", "ol", "p", "pre", "section", "summary", "table",
    "tbody", "tfoot", "thead", "tr", "ul",
})

# Table cells stay on their row, separated by a tab
_CELL_TAGS: frozenset[str] = frozenset({"td", "th"})

_WHITESPACE_RE = re.compile(r"\s+")


def is_candidate_line(line: str) -> bool:
    """Return True if *line* contains an asset-looking token."""
    return bool(_DOTTED_OR_SCHEME_RE.search(line) or _GITHUB_HOST_RE.search(line))


def lines_from_text(text: str) -> list[str]:
    """Split *text* into trimmed, non-empty lines."""
    if not text:
        return []
    return [stripped for raw in _LINE_SPLIT_RE.split(text) if (stripped := raw.strip())]


def page_text(html: str) -> str:
    """Return the visible text of *html*'s body, one block per line."""
    if not html or not html.strip():
        return ""

    soup = BeautifulSoup(html, "lxml")
    for tag in soup(list(_INVISIBLE_TAGS)):
        tag.decompose()
    root = soup.body or soup
    parts: list[str] = []
    _render(root, parts, preformatted=False)
    return "".join(parts)


def _render(node: Tag, parts: list[str], *, preformatted: bool) -> None:
    """Append *node*'s rendered text to *parts*.

    Inline text is joined as-is with whitespace runs collapsed; line breaks
    only come from block elements, ``<br>`` and ``<pre>`` content.
    """
    for child in node.children:
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            parts.append(str(child) if preformatted else _WHITESPACE_RE.sub(" ", child))
            continue
        name = child.name
        if name == "br":
            parts.append("\n")
        elif name in _BLOCK_TAGS:
            parts.append("\n")
            _render(child, parts, preformatted=preformatted or name == "pre")
            parts.append("\n")
        elif name in _CELL_TAGS:
            _render(child, parts, preformatted=preformatted)
            parts.append("\t")
        else:
            _render(child, parts, preformatted=preformatted)


def extract_heuristic(lines: Iterable[str]) -> dict[Category, list[str]]:
    """Group candidate lines by the first category keyword found near them.

    *lines* are trimmed and empty ones discarded before the window is built,
    so blank lines never count towards the lookahead.
    """
    cleaned = [stripped for line in lines if (stripped := line.strip())]
    grouped = empty_result()

    for i, line in enumerate(cleaned):
        if not is_candidate_line(line):
            continue
        window = [line, *cleaned[i + 1:i + 1 + LOOKAHEAD_LINES]]
        window += [""] * (LOOKAHEAD_LINES + 1 - len(window))
        look = " ".join(window).lower()
        category = match_patterns(look)
        if category is None:
            logger.debug("Candidate %r has no category keyword nearby", line)
            continue
        grouped[category].append(line)
    return grouped
