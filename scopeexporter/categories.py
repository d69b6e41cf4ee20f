"""Asset categories and the keyword table used to classify them.

Matching is plain case-insensitive substring containment.  Categories are
tried in declaration order, so when a text mentions keywords of two
categories the one declared first wins.
"""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    DOMAIN = "domain"
    IOS_APP = "ios_app"
    ANDROID = "android"
    GITHUB = "github"


# ---------------------------------------------------------------------------
# Pattern table (ordered; evaluated once at import time)
# ---------------------------------------------------------------------------

PATTERN_TABLE: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (Category.DOMAIN,  ("domain",)),
    (Category.IOS_APP, ("ios", "app store", "ios: app store")),
    (Category.ANDROID, ("android", "play store", "playstore")),
    (Category.GITHUB,  ("github",)),
)


def match_patterns(text: str) -> Category | None:
    """Return the first category with a pattern contained in *text*.

    *text* must already be lowercased.
    """
    for category, patterns in PATTERN_TABLE:
        for pattern in patterns:
            if pattern in text:
                return category
    return None


def classify(text: str | None) -> Category | None:
    """Map a free-text type label (e.g. ``"iOS: App Store"``) to a category.

    Returns ``None`` for empty input or when no keyword matches.
    """
    if not text:
        return None
    return match_patterns(text.lower())


def empty_result() -> dict[Category, list[str]]:
    """Return a fresh extraction result with every category mapped to ``[]``."""
    return {category: [] for category, _ in PATTERN_TABLE}
