"""Console output for resinline runs.

Two streams, two jobs:

* **stdout** carries data only: the per-file report (``--report``) or the
  list of files a dry run would change. It stays parseable when piped.
* **stderr** carries everything a person reads while the run happens: the
  ``Inlining resources from project: ...`` status line, warnings, one
  ``Error: An error occurred while processing <file>: <reason>`` line per
  failed file, and ``[debug]`` lines under ``--verbose``.

Colour is dropped for ``--no-color``, ``NO_COLOR`` (any value) and
``TERM=dumb``; the report is rendered as a Rich table only when stdout is a
terminal, otherwise as tab-separated text or JSON.

:class:`OutputManager` is built once by the CLI and installed with
:func:`set_output`; the runner reaches it through :func:`get_output` and the
module-level shortcuts.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from pathlib import Path

    from resinline.models import RunReport


REPORT_COLUMNS = ("path", "status", "error")

_STATUS_STYLES = {"changed": "green", "unchanged": "dim", "failed": "bold red"}


class OutputFormat(str, Enum):
    """How report data is rendered on stdout. ``AUTO`` picks RICH or PLAIN."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Renders one run's status, failures and report.

    Args:
        format: Rendering of stdout data. ``AUTO`` becomes ``RICH`` on an
            interactive terminal with colour enabled, ``PLAIN`` otherwise.
        no_color: Never emit colour or markup.
        quiet: Drop the status line and other informational messages.
            Warnings and errors are still shown.
        verbose: Show ``[debug]`` lines.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self.no_color = no_color or color_disabled()
        self.quiet = quiet
        self.verbose = verbose
        if format == OutputFormat.AUTO:
            interactive = _stdout_is_tty() and not self.no_color
            format = OutputFormat.RICH if interactive else OutputFormat.PLAIN
        self._format = format
        self._data = Console(
            file=sys.stdout,
            no_color=self.no_color,
            force_terminal=format == OutputFormat.RICH,
        )
        self._diagnostics = Console(file=sys.stderr, no_color=self.no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    # --- stderr ---

    def _emit(self, message: str, label: str = "", style: str = "") -> None:
        if self.no_color:
            line = f"{label} {message}" if label else message
            print(line, file=sys.stderr, flush=True)
        elif label:
            self._diagnostics.print(f"[{style}]{escape(label)}[/{style}] {escape(message)}")
        else:
            self._diagnostics.print(message, markup=False, highlight=False)

    def info(self, message: str) -> None:
        if not self.quiet:
            self._emit(message)

    def warning(self, message: str) -> None:
        self._emit(message, "Warning:", "yellow")

    def error(self, message: str) -> None:
        self._emit(message, "Error:", "bold red")

    def debug(self, message: str) -> None:
        if self.verbose:
            self._emit(message, "[debug]", "dim")

    def status(self, project_path: str | Path) -> None:
        """Announce the start of a run over *project_path*."""
        self.info(f"Inlining resources from project: {project_path}")

    def unit_failed(self, relative_path: str, exc: BaseException) -> None:
        """Report that one source file could not be processed."""
        self.error(f"An error occurred while processing {relative_path}: {exc}")

    def summary(self, report: RunReport) -> None:
        self.debug(
            f"{len(report.results)} file(s): {len(report.changed)} changed, "
            f"{len(report.failed)} failed"
        )

    # --- stdout ---

    def _write(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    def changed_paths(self, report: RunReport) -> None:
        """List the files the run changed (or would change), one per line."""
        for result in report.changed:
            self._write(result.path)

    def report(self, report: RunReport) -> None:
        """Print one row per processed file: path, status and error reason.

        JSON mode prints an array of ``{"path", "status", "error"}`` objects,
        with ``error`` set to ``""`` for files that did not fail.
        """
        rows = [(r.path, r.status.value, r.error or "") for r in report.results]

        if self._format == OutputFormat.JSON:
            records = [dict(zip(REPORT_COLUMNS, row)) for row in rows]
            self._write(json.dumps(records, indent=2, ensure_ascii=False))
            return

        if self._format == OutputFormat.PLAIN:
            for row in (REPORT_COLUMNS, *rows):
                self._write("\t".join(row))
            return

        title = f"Resources in {escape(report.project)}"
        if report.dry_run:
            title += " (dry run)"
        table = Table(title=title, header_style="bold cyan")
        for column in REPORT_COLUMNS:
            table.add_column(column, no_wrap=column != "error")
        for path, status, reason in rows:
            style = _STATUS_STYLES.get(status, "")
            table.add_row(escape(path), f"[{style}]{status}[/{style}]", escape(reason))
        self._data.print(table)


def _stdout_is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def color_disabled() -> bool:
    """Whether the environment asks for no colour (``NO_COLOR`` set or ``TERM=dumb``)."""
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


# --- global instance ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one if needed."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager. Tests call this between runs."""
    global _output
    _output = None


def info(message: str) -> None:
    get_output().info(message)


def warning(message: str) -> None:
    get_output().warning(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
