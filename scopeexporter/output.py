"""Output assembly and per-category file export.

:func:`assemble` is the only place assets are trimmed and deduplicated; the
extractors may emit duplicates and blanks.  :func:`write_exports` writes one
text file per non-empty category.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from scopeexporter.categories import Category

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_RE = re.compile(r"[^a-zA-Z0-9\-_.]")


class ExportError(RuntimeError):
    """Raised when an export file cannot be written.

    Attributes:
        path -- the file that could not be written
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def sanitize_filename(name: str) -> str:
    """Replace characters outside ``[a-zA-Z0-9-_.]`` with ``_`` and lowercase."""
    return _UNSAFE_FILENAME_RE.sub("_", name).lower()


def assemble(result: Mapping[str, Sequence[str]]) -> dict[Category, list[str]]:
    """Trim, drop empties and dedupe each category, keeping first occurrences.

    Categories left empty are omitted.  The returned mapping follows
    :class:`Category` declaration order regardless of *result*'s key order.
    """
    assembled: dict[Category, list[str]] = {}
    for category in Category:
        seen: set[str] = set()
        assets: list[str] = []
        for raw in result.get(category, ()):
            asset = raw.strip()
            if asset and asset not in seen:
                seen.add(asset)
                assets.append(asset)
        if assets:
            assembled[category] = assets
    return assembled


def write_exports(
    assets: Mapping[str, Sequence[str]],
    out_dir: str | Path,
    *,
    extension: str = ".txt",
    encoding: str = "utf-8",
) -> list[Path]:
    """Write ``<category><extension>`` files for every non-empty category.

    *assets* is expected to be the output of :func:`assemble`; empty
    categories are skipped all the same.

    Returns:
        Written paths, in category order.

    Raises:
        :class:`ExportError`: If the directory or a file cannot be written.
    """
    out_path = Path(out_dir)
    try:
        out_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportError(f"Cannot create output directory {out_path}: {exc}", path=out_path) from exc

    written: list[Path] = []
    for name, values in assets.items():
        if not values:
            continue
        path = out_path / f"{sanitize_filename(str(name))}{extension}"
        try:
            path.write_text("\n".join(values), encoding=encoding)
        except OSError as exc:
            raise ExportError(f"Cannot write {path}: {exc}", path=path) from exc
        logger.info("Wrote %d asset(s) to %s", len(values), path)
        written.append(path)
    return written
