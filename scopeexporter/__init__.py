"""scopeexporter - export bug-bounty scope assets grouped by category.

Quick usage::

    from scopeexporter import extract

    export = extract(html)
    for category, assets in export.assets.items():
        print(category, len(assets))

Writing one file per category::

    from scopeexporter import ScopeExporter

    exporter = ScopeExporter(out_dir="./scope")
    exporter.export(exporter.parse(html))
"""

from scopeexporter.categories import Category, classify
from scopeexporter.extractors import extract_heuristic, extract_structured
from scopeexporter.items import ScopeExport
from scopeexporter.output import ExportError, assemble, sanitize_filename, write_exports
from scopeexporter.parser import ScopeExporter
from scopeexporter.query import extract, extract_content, extract_text

__version__ = "0.1.0"
__all__ = [
    "Category",
    "ExportError",
    "ScopeExport",
    "ScopeExporter",
    "assemble",
    "classify",
    "extract",
    "extract_content",
    "extract_heuristic",
    "extract_structured",
    "extract_text",
    "sanitize_filename",
    "write_exports",
]
