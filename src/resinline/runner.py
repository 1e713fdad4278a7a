"""Asynchronous orchestration of discovery, transform, and write-back.

:func:`inline_resources` discovers the project's source units and runs the
read-transform-write sequence for all of them concurrently on one event
loop. Reads and writes are offloaded to worker threads with
:func:`asyncio.to_thread`; the transform itself (including the template
reads done by :func:`~resinline.transform.template.inline_template`) runs on
the event-loop thread and blocks the other in-flight units while it does.

Any exception raised while handling one unit, whether from I/O, a missing
template or a custom step, is reported on stderr and recorded in the
:class:`~resinline.models.RunReport`; it never aborts the other units and
never raises out of :func:`inline_resources`.

Usage::

    report = asyncio.run(inline_resources("dist/"))
    for result in report.failed:
        print(result.path, result.error)
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Sequence

from resinline.files import discover_sources, read_source, write_source
from resinline.models import InlineConfig, RunReport, SourceUnit, UnitResult, UnitStatus
from resinline.output import debug, get_output
from resinline.transform.pipeline import Step, build_steps, directory_resolver, transform


async def inline_resources(
    project_path: str | Path,
    config: Optional[InlineConfig] = None,
    dry_run: bool = False,
) -> RunReport:
    """Inline resources in every source file under *project_path*.

    Args:
        project_path: Root of the compiled project.
        config: Effective configuration; defaults to :class:`InlineConfig`.
        dry_run: Transform but do not write anything back.

    Returns:
        A :class:`RunReport` with one :class:`UnitResult` per discovered
        file, in discovery order. Completes only after every unit has
        finished, successfully or not.
    """
    if config is None:
        config = InlineConfig()

    units = discover_sources(project_path, config.include, config.exclude)
    debug(f"Found {len(units)} source file(s) in {project_path}")

    steps = build_steps(config)
    results = await asyncio.gather(
        *(process_unit(unit, steps, encoding=config.encoding, dry_run=dry_run) for unit in units)
    )
    return RunReport(project=str(project_path), dry_run=dry_run, results=list(results))


async def process_unit(
    unit: SourceUnit,
    steps: Sequence[Step],
    encoding: str = "utf-8",
    dry_run: bool = False,
) -> UnitResult:
    """Read, transform, and write back a single unit.

    Errors are caught here, reported through
    :meth:`~resinline.output.OutputManager.unit_failed`,
    and turned into a ``FAILED`` result.
    """
    try:
        content = await asyncio.to_thread(read_source, unit.path, encoding)
        new_content = transform(content, directory_resolver(unit.directory), steps)
        if not dry_run:
            await asyncio.to_thread(write_source, unit.path, new_content, encoding)
    except Exception as exc:
        get_output().unit_failed(unit.relative_path, exc)
        return UnitResult(path=unit.relative_path, status=UnitStatus.FAILED, error=str(exc))

    status = UnitStatus.CHANGED if new_content != content else UnitStatus.UNCHANGED
    debug(f"{unit.relative_path}: {status.value}")
    return UnitResult(path=unit.relative_path, status=status)


def run(
    project_path: str | Path,
    config: Optional[InlineConfig] = None,
    dry_run: bool = False,
) -> RunReport:
    """Blocking wrapper around :func:`inline_resources`."""
    return asyncio.run(inline_resources(project_path, config, dry_run=dry_run))
