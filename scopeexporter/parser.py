"""scopeexporter.parser — High-level ScopeExporter class.

Bundles output settings with the parse/export workflow so a caller can reuse
one object for several pages.

Usage::

    from scopeexporter import ScopeExporter

    exporter = ScopeExporter(out_dir="./scope")
    export = exporter.parse(html, url="https://hackerone.com/acme")
    paths = exporter.export(export)

    # From a live Playwright page the caller already navigated
    export = exporter.parse_from_browser(page)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from scopeexporter import settings
from scopeexporter.query import extract as _extract
from scopeexporter.query import extract_text as _extract_text

if TYPE_CHECKING:
    from scopeexporter.items import ScopeExport


class ScopeExporter:
    """Parse scope pages and write per-category asset files.

    Args:
        out_dir:    Directory receiving ``<category>.txt`` files.
        extension:  File extension including the leading dot.
        force_text: If ``True``, ignore tables and always use the heuristic
                    text path.
    """

    def __init__(
        self,
        out_dir: str | Path = settings.OUTPUT_DIR,
        extension: str = settings.FILE_EXTENSION,
        force_text: bool = False,
    ) -> None:
        self._out_dir = Path(out_dir)
        self._extension = extension
        self._force_text = force_text

    # ------------------------------------------------------------------
    # Public methods
    # ------------------------------------------------------------------

    def parse(self, html: str, url: str = "") -> ScopeExport:
        """Extract assets from an HTML document — no network calls."""
        if self._force_text:
            from scopeexporter.extractors.heuristic import page_text
            return _extract_text(page_text(html), url=url)
        return _extract(html, url=url)

    def parse_text(self, text: str, url: str = "") -> ScopeExport:
        """Extract assets from plain text such as a pasted scope list."""
        return _extract_text(text, url=url)

    def parse_from_browser(self, page: Any) -> ScopeExport:
        """Parse the current state of a Playwright ``Page``.

        Only ``page.content()`` and ``page.url`` are read; the page is not
        navigated or reloaded.
        """
        html: str = page.content()
        url: str = page.url
        return self.parse(html, url=url)

    def export(self, result: ScopeExport) -> list[Path]:
        """Write *result*'s non-empty categories to the output directory.

        Raises:
            :class:`~scopeexporter.output.ExportError`: On filesystem errors.
        """
        return result.to_files(
            self._out_dir,
            extension=self._extension,
            encoding=settings.ENCODING,
        )
