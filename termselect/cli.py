"""Command-line front door for termselect.

Reads entries from stdin, formats display strings, runs the interactive
selector on the controlling terminal, and prints the chosen entries.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import is_valid_marker, load_cursor_marker, load_theme_name
from .entries import build_display_lines, format_output, parse_entries, read_entries
from .render import DEFAULT_CURSOR_MARKER
from .selector import run_selector
from .terminal import TerminalUnavailableError
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _marker_char(value: str) -> str:
    """argparse type for a single visible marker character."""
    if not is_valid_marker(value):
        raise argparse.ArgumentTypeError(f"marker must be one visible character: {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termselect",
        description="Pick entries read from stdin in an interactive terminal list and print the selection.",
    )
    parser.add_argument("-n", "--numbered", action="store_true", help="Prefix entries with zero-padded line numbers.")
    parser.add_argument(
        "-i",
        "--identifiers",
        action="store_true",
        help="Read entries as 'identifier::text', show the text, and print identifiers.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Use monochrome highlighting.")
    parser.add_argument("--marker", type=_marker_char, default=None, help="Cursor marker character (default: '>').")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug log records to PATH.")
    return parser


def configure_logging(log_file: str | None) -> None:
    """Log to a file only; the terminal belongs to the selector UI."""
    if log_file is None:
        return
    logging.basicConfig(filename=log_file, level=logging.DEBUG, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run one selection session, and print the result.

    Exits with status 1 when stdin supplied no entries or the terminal cannot
    be used. Quitting or confirming an empty selection prints nothing and
    exits normally.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    lines = read_entries(getattr(sys.stdin, "buffer", sys.stdin))
    if not lines:
        raise SystemExit("termselect: no input entries")

    entries = parse_entries(lines, with_identifier=args.identifiers)
    display_lines = build_display_lines(entries, numbered=args.numbered)
    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    marker = args.marker or load_cursor_marker() or DEFAULT_CURSOR_MARKER

    try:
        result = run_selector(display_lines, theme=theme, marker=marker)
    except TerminalUnavailableError as exc:
        raise SystemExit(f"termselect: {exc}") from exc
    except (OSError, EOFError) as exc:
        logger.debug("terminal session aborted", exc_info=True)
        raise SystemExit(f"termselect: terminal I/O failed: {exc}") from exc

    if result.indices is None:
        logger.debug("nothing to print (%s)", result.outcome.value)
        return
    for idx in result.indices:
        sys.stdout.write(format_output(entries[idx], print_identifier=args.identifiers) + "\n")
    sys.stdout.flush()


if __name__ == "__main__":
    main()
