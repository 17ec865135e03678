"""Entry point for the surf-omnibar CLI.

surf runs it from its ``SETPROP`` hook as::

    surf-omnibar _SURF_URI _SURF_GO <window-id>
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import __version__
from .dispatcher import Dispatcher
from .log import configure, logger
from .menu import make_menu
from .persistence import HistoryStore
from .platform import default_preferences_path, find_tool
from .preferences import Preferences, load_preferences
from .results import Status
from .xprop import WindowProperties

err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Environment health checks
# ---------------------------------------------------------------------------


def _required_tools(prefs: Preferences) -> list[str]:
    tools = ["xprop"]
    if prefs.menu.program != "textual":
        tools.append(prefs.menu.program or "dmenu")
    return tools


def _run_doctor(prefs: Preferences, prefs_path: Path) -> None:
    """Print a detailed environment health report and exit."""
    console = Console()
    console.print("surf-omnibar -- Environment Doctor\n")
    console.print(f"  Python:   {sys.executable} ({sys.version.split()[0]})\n")

    all_ok = True
    for tool in _required_tools(prefs):
        path = find_tool(tool)
        if path:
            console.print(f"  [green][ok][/green] {tool:20s}  {escape(path)}")
        else:
            console.print(f"  [red][!!][/red] {tool:20s}  NOT FOUND")
            all_ok = False

    try:
        import textual

        version = getattr(textual, "__version__", "installed")
        console.print(f"  [green][ok][/green] {'textual':20s}  {version}")
    except ImportError:
        console.print(f"  [yellow][--][/yellow] {'textual':20s}  not importable")

    console.print()
    console.print(
        f"  [green][ok][/green] {'Preferences':20s}  {escape(str(prefs_path))}"
    )
    db_path = prefs.store.resolved_path()
    if db_path.exists():
        with HistoryStore.open(db_path) as store:
            count = store.count()
        console.print(
            f"  [green][ok][/green] {'Database':20s}  {escape(str(db_path))}"
            f" ({count} entries)"
        )
    else:
        console.print(
            f"  [yellow][--][/yellow] {'Database':20s}  {escape(str(db_path))}"
            " (created on first use)"
        )

    console.print()
    console.print("  All checks passed." if all_ok else "  Some checks failed.")
    sys.exit(0 if all_ok else 1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="surf-omnibar",
        description="URL prompt, history and bookmarks for surf",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"surf-omnibar {__version__}",
    )
    parser.add_argument(
        "kind",
        nargs="?",
        help="_SURF_BMARK, _SURF_URI_RAW, _SURF_URI or _SURF_URI_BMARK",
    )
    parser.add_argument(
        "prop",
        nargs="?",
        help="Property surf expects to be set (ignored)",
    )
    parser.add_argument(
        "window",
        nargs="?",
        help="X window id of the surf instance",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Preferences file (default: ~/.surf/omnibar.yaml)",
    )
    parser.add_argument(
        "--db",
        type=Path,
        help="SQLite database (overrides store.path)",
    )
    parser.add_argument(
        "--menu",
        choices=["dmenu", "textual"],
        help="Menu implementation (overrides menu.program)",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check environment health and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run surf-omnibar."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure(args.verbose)
    logger.debug("called with %s", sys.argv if argv is None else argv)

    prefs_path = args.config or default_preferences_path()
    prefs = load_preferences(prefs_path)
    if args.db:
        prefs.store.path = str(args.db)
    if args.menu:
        prefs.menu.program = args.menu

    if args.doctor:
        _run_doctor(prefs, prefs_path)
        return

    if not args.kind or not args.window:
        parser.error("the following arguments are required: kind, prop, window")

    with HistoryStore.open(prefs.store.resolved_path()) as store:
        dispatcher = Dispatcher(
            store,
            make_menu(args.window, prefs.menu),
            WindowProperties(args.window),
            prefs,
        )
        outcome = dispatcher.run(args.kind)

    if outcome.message:
        style = None if outcome.ok else "red"
        err_console.print(escape(outcome.message), style=style)
    if outcome.status is not Status.OK:
        sys.exit(outcome.exit_code)


if __name__ == "__main__":
    main()
