"""Ordered transform pipeline for a single source unit.

:func:`transform` folds the content through each step in declared order,
feeding every step's output into the next. Steps never see another unit's
state; the only side effect is the template read done by
:func:`~resinline.transform.template.inline_template`.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Callable, Optional, Sequence

from resinline.models import InlineConfig
from resinline.transform.module_id import remove_module_id
from resinline.transform.template import inline_template

Resolver = Callable[[str], "str | Path"]
"""Maps a relative resource path found in a source file to a filesystem path."""

Step = Callable[[str, Resolver], str]
"""A pure text-to-text transform: ``step(content, resolver) -> content``."""

DEFAULT_STEPS: tuple[Step, ...] = (inline_template, remove_module_id)


def build_steps(config: InlineConfig) -> list[Step]:
    """Return the enabled steps for *config*, in declared order."""
    steps: list[Step] = []
    if config.inline_templates:
        steps.append(functools.partial(inline_template, encoding=config.encoding))
    if config.remove_module_id:
        steps.append(remove_module_id)
    return steps


def transform(
    content: str,
    resolver: Resolver,
    steps: Optional[Sequence[Step]] = None,
) -> str:
    """Apply *steps* (default :data:`DEFAULT_STEPS`) to *content* left to right.

    Errors raised by a step (e.g. a missing template) propagate unchanged.
    """
    for step in DEFAULT_STEPS if steps is None else steps:
        content = step(content, resolver)
    return content


def directory_resolver(directory: str | Path) -> Resolver:
    """Build a resolver that joins resource paths onto *directory*.

    A leading ``/`` does not make the path absolute: ``require('/x.html')``
    still resolves to ``directory/x.html``.
    """
    base = Path(directory)

    def _resolve(url: str) -> Path:
        return base / url.lstrip("/")

    return _resolve
