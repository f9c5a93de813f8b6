"""Command-line front door for projectmap.

Parses CLI options, resolves the workspace and the selected top-level
entries, then dispatches to the text or image map command.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .artifacts import MapStatus, generate_image_map, generate_text_map
from .render import FontUnavailableError
from .selection import resolve_selection

NO_SELECTION_MESSAGE = "No selection made."


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projectmap",
        description="Render a project directory as a text tree and a color-coded PNG.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries and written artifacts.")
    commands = parser.add_subparsers(dest="command", required=True)

    text_parser = commands.add_parser("text", help="Write project-map.txt with one labelled line per selected root.")
    image_parser = commands.add_parser("image", help="Write project-map.txt and render it to project-map.png.")
    for sub in (text_parser, image_parser):
        sub.add_argument("path", nargs="?", default=None, help="Workspace directory. Defaults to current directory.")
        sub.add_argument(
            "--select",
            action="append",
            metavar="NAME",
            default=None,
            help="Top-level entry to include (repeatable). Defaults to every entry.",
        )
        sub.add_argument(
            "--exclude",
            action="append",
            metavar="NAME",
            default=[],
            help="Top-level entry to leave out (repeatable).",
        )
        sub.add_argument("--sort", action="store_true", help="List directories first, then by name, instead of OS order.")
        sub.add_argument("--output-dir", metavar="DIR", default=None, help="Where to write artifacts (default: workspace).")

    image_parser.add_argument("--font", metavar="PATH", default=None, help="Monospace TrueType font file.")
    image_parser.add_argument("--font-size", type=_positive_int, default=None, help="Font size in pixels.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and write the requested project map.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is the workspace.
    """
    args = build_parser().parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if default_path is None:
        default_path = Path.cwd()
    workspace = Path(args.path or default_path)
    if not workspace.exists():
        raise SystemExit(f"Path not found: {workspace}")
    if not workspace.is_dir():
        raise SystemExit(f"Not a directory: {workspace}")

    roots = resolve_selection(workspace, args.select, args.exclude)
    output_dir = Path(args.output_dir) if args.output_dir else workspace
    settings = config.load_config()

    try:
        if roots and args.output_dir:
            output_dir.mkdir(parents=True, exist_ok=True)
        if args.command == "text":
            result = generate_text_map(
                roots,
                output_dir,
                text_filename=config.load_text_filename(settings),
                sort_entries=args.sort,
            )
        else:
            result = generate_image_map(
                roots,
                output_dir,
                font_path=Path(args.font) if args.font else config.load_font_path(settings),
                font_size=args.font_size or config.load_font_size(settings),
                theme=config.load_theme(settings),
                text_filename=config.load_text_filename(settings),
                image_filename=config.load_image_filename(settings),
                sort_entries=args.sort,
            )
    except FontUnavailableError as exc:
        raise SystemExit(str(exc)) from exc
    except OSError as exc:
        raise SystemExit(f"Failed to write project map: {exc}") from exc

    if result.status is MapStatus.NO_SELECTION:
        raise SystemExit(NO_SELECTION_MESSAGE)

    sys.stdout.write(f"Project map saved as '{result.text_path}'.\n")
    if result.image_path is not None:
        sys.stdout.write(f"Project map image saved as '{result.image_path}'.\n")


if __name__ == "__main__":
    main()
