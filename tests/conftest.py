"""Shared test fixtures for resinline.

Provides a throwaway compiled project on disk, isolated environment
variables, output managers, and a CLI runner. These fixtures are
automatically discovered by pytest.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from resinline.output import OutputFormat, OutputManager, reset_output, set_output


COMPONENT_TS = """\
import { Component } from '@angular/core';

@Component({
  moduleId: module.id,
  selector: 'app-hello',
  template: require('./hello.component.html')
})
export class HelloComponent {}
"""

HELLO_HTML = """\
<div class="hello">
  <p>Hello, {{ name }}!</p>
</div>
"""


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time; CliRunner and capsys swap those streams per test.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RESINLINE_* variables from the developer's shell out of tests."""
    for var in ["RESINLINE_INCLUDE", "RESINLINE_EXCLUDE", "RESINLINE_ENCODING"]:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Project fixtures
# ---------------------------------------------------------------------------


def _write(path: Path, text: str) -> Path:
    """Write *text* to *path*, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A compiled project with one component and its template.

    Layout::

        project/
            src/hello/hello.component.ts
            src/hello/hello.component.html
    """
    root = tmp_path / "project"
    _write(root / "src" / "hello" / "hello.component.ts", COMPONENT_TS)
    _write(root / "src" / "hello" / "hello.component.html", HELLO_HTML)
    return root


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a PLAIN-format, colourless OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
