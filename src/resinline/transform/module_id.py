"""Strip ``moduleId: module.id`` assignments from component metadata.

Once templates are inlined, components have no relative URLs left to
resolve against ``module.id``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Optional

# The assignment, an optional trailing comma, and the whitespace around it.
_MODULE_ID_RE = re.compile(r"\s*moduleId:\s*module\.id\s*,?\s*")


def remove_module_id(
    content: str,
    resolver: Optional[Callable[[str], str | Path]] = None,
) -> str:
    """Return *content* with every ``moduleId: module.id`` mention removed.

    *resolver* is accepted for pipeline compatibility and ignored. Applying
    the function twice gives the same result as applying it once.
    """
    return _MODULE_ID_RE.sub("", content)
