"""resinline -- Inline external component templates into compiled sources.

This package rewrites a library's compiled sources so every component is
self-contained: ``template: require('./x.html')`` references are replaced by
the template's text, and ``moduleId: module.id`` assignments are stripped.

Typical workflow::

    ngc -p tsconfig.lib.json          # compile the library
    resinline dist/                   # inline templates in place

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the package.
    config: Project-local configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    files: Source discovery and file I/O.
    output: stdout/stderr formatting system with Rich support.
    runner: Asynchronous orchestration of the per-file pipeline.
    transform: The text-to-text transform steps.
"""

__version__ = "0.1.0"
