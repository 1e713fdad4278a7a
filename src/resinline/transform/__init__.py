"""Text-to-text transform steps applied to every source unit.

* :func:`inline_template` -- replaces ``template: require('x.html')`` with
  the normalised template text.
* :func:`remove_module_id` -- strips ``moduleId: module.id`` assignments.
* :func:`transform` -- applies the enabled steps in declared order.

All steps share the signature ``step(content, resolver) -> str``.
"""

from resinline.transform.module_id import remove_module_id
from resinline.transform.pipeline import (
    DEFAULT_STEPS,
    Resolver,
    Step,
    build_steps,
    directory_resolver,
    transform,
)
from resinline.transform.template import inline_template, normalize_template

__all__ = [
    "DEFAULT_STEPS",
    "Resolver",
    "Step",
    "build_steps",
    "directory_resolver",
    "inline_template",
    "normalize_template",
    "remove_module_id",
    "transform",
]
