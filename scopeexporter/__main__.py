"""CLI entry point: python -m scopeexporter --input PAGE.html [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from scopeexporter import settings
from scopeexporter.output import ExportError
from scopeexporter.parser import ScopeExporter
from scopeexporter.profiles import ProfileError, load_profile

if TYPE_CHECKING:
    from scopeexporter.items import ScopeExport

logger = logging.getLogger(__name__)

NO_ASSETS_MESSAGE = "No assets found (make sure the scope table is visible)."
NO_MATCHES_MESSAGE = "No matching assets to export."

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scopeexporter",
        description=(
            "Export the scope assets of a bug-bounty program page.\n"
            "Writes one file per category: domain, ios_app, android, github."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--input", default="-", metavar="PATH",
                        help="Saved HTML page or text file; '-' reads stdin (default: -)")
    parser.add_argument("--text", action="store_true", default=False,
                        help="Input is plain text, not HTML (heuristic path only)")
    parser.add_argument("--skip-tables", action="store_true", default=False,
                        help="Parse HTML input but ignore its tables (heuristic path only)")
    parser.add_argument("--url", default="", metavar="URL",
                        help="Page URL recorded in the export (informational only)")
    parser.add_argument("--out", default=settings.OUTPUT_DIR, metavar="DIR",
                        help=f"Output directory (default: {settings.OUTPUT_DIR})")
    parser.add_argument("--extension", default=settings.FILE_EXTENSION, metavar="EXT",
                        help=f"Output file extension (default: {settings.FILE_EXTENSION})")
    parser.add_argument("--json", action="store_true", default=False,
                        help="Print the extraction result as JSON on stdout")
    parser.add_argument("--dry-run", action="store_true", default=False,
                        help="Show what would be exported without writing files")
    parser.add_argument("--profile", default=None, metavar="PATH",
                        help="YAML profile providing defaults for the options above")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=_LOG_LEVELS,
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    return parser


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parse *argv*, letting a ``--profile`` supply defaults that flags override."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.profile:
        profile = load_profile(args.profile)
        parser.set_defaults(**_profile_defaults(profile))
        args = parser.parse_args(argv)
    return args


def _profile_defaults(profile: dict[str, Any]) -> dict[str, Any]:
    defaults: dict[str, Any] = {}
    if "out" in profile:
        defaults["out"] = str(profile["out"])
    if "log_level" in profile:
        level = str(profile["log_level"]).upper()
        if level not in _LOG_LEVELS:
            raise ProfileError(f"Unknown log_level {profile['log_level']!r} in profile")
        defaults["log_level"] = level
    if "text" in profile:
        defaults["text"] = bool(profile["text"])
    if "skip_tables" in profile:
        defaults["skip_tables"] = bool(profile["skip_tables"])
    if "extension" in profile:
        defaults["extension"] = str(profile["extension"])
    return defaults


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.buffer.read().decode(settings.ENCODING, errors="replace")
    return Path(path).read_text(encoding=settings.ENCODING, errors="replace")


def _print_summary(export: ScopeExport, *, stderr: bool = False) -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table

    console = Console(stderr=stderr)
    tbl = Table(
        title=f"[bold green]Scope assets ({export.extraction_method})[/bold green]",
        box=box.SIMPLE_HEAVY,
        show_lines=False,
    )
    tbl.add_column("Category", style="cyan", no_wrap=True)
    tbl.add_column("Assets", justify="right", width=7, no_wrap=True)
    tbl.add_column("First", style="blue", max_width=60, no_wrap=True)
    for category, assets in export.assets.items():
        tbl.add_row(category, str(len(assets)), assets[0] if assets else "-")
    console.print(tbl)


def main(argv: list[str] | None = None) -> int:
    try:
        args = _parse_args(argv)
    except ProfileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT)

    try:
        content = _read_input(args.input)
    except OSError as exc:
        logger.debug("Reading input failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    exporter = ScopeExporter(
        out_dir=args.out,
        extension=args.extension,
        force_text=args.skip_tables,
    )
    if args.text:
        export = exporter.parse_text(content, url=args.url)
    else:
        export = exporter.parse(content, url=args.url)

    if args.json:
        print(export.model_dump_json(indent=2))

    if export.is_empty:
        structured_hit = export.extraction_method == "structured" and export.rows_considered > 0
        message = NO_MATCHES_MESSAGE if structured_hit else NO_ASSETS_MESSAGE
        print(message, file=sys.stderr if args.json else sys.stdout)
        return 0

    _print_summary(export, stderr=args.json)

    if args.dry_run:
        logger.info("Dry run: %d asset(s) not written", export.asset_count)
        return 0

    try:
        paths = exporter.export(export)
    except ExportError as exc:
        logger.debug("Export failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    status = f"Wrote {len(paths)} file(s) to {Path(args.out).resolve()}"
    print(status, file=sys.stderr if args.json else sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
