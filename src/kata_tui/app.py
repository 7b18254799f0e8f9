# =============================================================================
# Kata-TUI Main Application
# =============================================================================
# The Textual application class and the command-line entry point.
#
# The app manages:
#   - Configuration loading
#   - The shared RenderEngine (so every screen uses one theme and cache)
#   - Global keybindings
#
# The CLI can also skip the TUI entirely (--plain) and print the rendered
# description through a Rich console, which is handy for piping.
# =============================================================================

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from textual.app import App
from textual.binding import Binding

from kata_tui import __version__, __app_name__
from kata_tui.config import Config, ConfigError, ensure_directories, print_paths
from kata_tui.core import Problem, ProblemError
from kata_tui.rendering import RenderEngine, lines_to_text
from kata_tui.ui.screens.detail import DetailScreen
from kata_tui.ui.widgets.problem_view import build_header

logger = logging.getLogger(__name__)


class KataTUIApp(App):
    """
    The main Kata-TUI application.

    Attributes:
        config: The loaded application configuration.
        problem: The problem shown on startup.
        engine: Rendering engine shared by all screens.
    """

    TITLE = "Kata-TUI"

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("?", "show_help", "Help"),
    ]

    def __init__(self, problem: Problem, config: Config | None = None) -> None:
        """
        Initialize the Kata-TUI application.

        Args:
            problem: Problem to display.
            config: Optional pre-loaded configuration. If not provided,
                    configuration will be loaded from the default location.
        """
        super().__init__()
        self.problem = problem

        # Initialize config error tracking
        self._config_error: str | None = None

        if config is None:
            try:
                self.config = Config.load()
            except ConfigError as e:
                self.config = Config()
                self._config_error = str(e)
        else:
            self.config = config

        self.engine = RenderEngine(self.config.rendering)

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        await self.push_screen(
            DetailScreen(
                self.problem,
                self.engine,
                content_padding=self.config.ui.content_padding,
                show_tags=self.config.ui.show_tags,
            )
        )

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()

    def action_show_help(self) -> None:
        """Show the keybinding summary."""
        self.notify(
            "Keybindings: j/k=scroll, d/u=half page, g/G=top/bottom, b=back, q=quit",
            timeout=10,
        )


# =============================================================================
# Problem Loading
# =============================================================================

def load_problem(path: str) -> Problem:
    """
    Load a problem from a file or stdin.

    Args:
        path: A .json API payload, an HTML description file, or "-" to
              read HTML from stdin.

    Raises:
        ProblemError: If the file can't be read or parsed.
    """
    if path == "-":
        return Problem.from_markup(sys.stdin.read(), title="stdin")

    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProblemError(f"Cannot read {path}: {e}") from e

    if file_path.suffix.lower() == ".json":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ProblemError(f"Invalid JSON in {path}: {e}") from e
        return Problem.from_dict(data)

    return Problem.from_markup(raw, title=file_path.stem)


def print_plain(problem: Problem, config: Config, console: Console | None = None) -> None:
    """Render a problem and print it without starting the TUI."""
    console = console or Console()
    engine = RenderEngine(config.rendering)
    result = engine.render(problem)

    console.print(build_header(problem, config.ui.show_tags))
    console.print()
    console.print(lines_to_text(result.lines, indent=config.ui.content_padding))


# =============================================================================
# CLI Entry Point
# =============================================================================

def setup_logging(debug: bool) -> None:
    """
    Send debug logs to a file when --debug is given.

    The terminal belongs to Textual, so nothing is logged to stderr.
    """
    if not debug:
        return

    ensure_directories()
    handler = logging.FileHandler(Config.log_file_path(), encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger("kata_tui")
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Kata-TUI: coding problem descriptions in your terminal",
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Problem to show: a .json API payload, an HTML file, or - for stdin",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the rendered problem instead of starting the TUI",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write a debug log to the state directory",
    )

    args = parser.parse_args(argv)
    if not args.paths and args.path is None:
        parser.error("a problem file is required")
    return args


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for Kata-TUI.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and the problem
        4. Prints the problem (--plain) or starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)
    setup_logging(args.debug)

    if args.paths:
        print_paths()
        return 0

    try:
        config = Config.load(args.config)
        problem = load_problem(args.path)
    except (ConfigError, ProblemError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Showing problem '{problem.title}'")

    if args.plain:
        print_plain(problem, config)
        return 0

    app = KataTUIApp(problem, config=config)
    app.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
