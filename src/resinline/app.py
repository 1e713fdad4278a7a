"""Typer application and CLI entry point for resinline.

The CLI exposes a single command taking the project root::

    resinline dist/
    resinline dist/ --exclude '**/*.spec.ts' --dry-run --report

It prints a one-line status message, resolves the configuration (see
:mod:`resinline.config`), and runs :func:`resinline.runner.inline_resources`.
Per-file failures are printed as ``Error:`` lines and, unless ``--strict``
is given, do not change the exit code.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``.
"""

from __future__ import annotations

import signal
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from resinline import __version__
from resinline.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="resinline",
    help="Inline component templates into compiled sources and strip moduleId.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"resinline {__version__}")
        raise typer.Exit()


@app.command()
def inline_command(
    project_path: Path = typer.Argument(
        ..., help="Root directory of the compiled project."
    ),
    include: Optional[list[str]] = typer.Option(
        None, "--include", "-i", help="Pattern of files to rewrite (repeatable)."
    ),
    exclude: Optional[list[str]] = typer.Option(
        None, "--exclude", "-x", help="Pattern of files to skip (repeatable)."
    ),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", help="Text encoding of sources and templates."
    ),
    no_templates: bool = typer.Option(
        False, "--no-templates", help="Do not inline templates."
    ),
    keep_module_id: bool = typer.Option(
        False, "--keep-module-id", help="Do not strip moduleId: module.id."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="List files that would change without writing."
    ),
    report: bool = typer.Option(
        False, "--report", help="Print a per-file report after the run."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with code 3 if any file failed."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Inline templates and remove moduleId in every source file under PROJECT_PATH."""
    from resinline.config import resolve_config
    from resinline.exceptions import PartialFailureError, ResinlineError
    from resinline.output import OutputFormat, OutputManager, set_output
    from resinline.runner import run

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    out = OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    set_output(out)

    out.status(project_path)
    if not project_path.is_dir():
        out.warning(f"Project path is not a directory, nothing to do: {project_path}")

    try:
        config = resolve_config(
            project_path,
            cli_include=include,
            cli_exclude=exclude,
            cli_encoding=encoding,
            cli_inline_templates=False if no_templates else None,
            cli_remove_module_id=False if keep_module_id else None,
        )
    except ResinlineError as exc:
        out.error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    out.debug(f"Effective config: {config.model_dump()}")
    result = run(project_path, config, dry_run=dry_run)

    if report:
        out.report(result)
    elif dry_run:
        out.changed_paths(result)
    out.summary(result)

    if strict and not result.ok:
        exc = PartialFailureError(
            f"{len(result.failed)} of {len(result.results)} file(s) could not be processed"
        )
        out.error(str(exc))
        raise typer.Exit(code=exc.exit_code)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``resinline`` console script.

    Unhandled :class:`~resinline.exceptions.ResinlineError` instances
    cause a clean exit with the error's ``exit_code``. All other exceptions
    print an error line and exit with :data:`EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from resinline.exceptions import ResinlineError
        from resinline.output import error

        if isinstance(exc, ResinlineError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)


if __name__ == "__main__":
    main()
