"""Exception hierarchy for resinline.

All exceptions inherit from :class:`ResinlineError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`resinline.exit_codes`.
The top-level error handler in :func:`resinline.app.main` catches
``ResinlineError`` and exits with the appropriate code.

Failures while processing a single source file are *not* raised through
this hierarchy: they are caught by :mod:`resinline.runner`, reported on
stderr and recorded in the run report.

Subclass hierarchy::

    ResinlineError (exit 1)
    +-- ConfigError          (exit 1)
    +-- PartialFailureError  (exit 3)
"""

from resinline.exit_codes import EXIT_GENERIC_FAILURE, EXIT_PARTIAL_FAILURE


class ResinlineError(Exception):
    """Base exception for all resinline errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(ResinlineError):
    """Raised for configuration problems (invalid ``resinline.json``, unknown encoding)."""

    exit_code = EXIT_GENERIC_FAILURE


class PartialFailureError(ResinlineError):
    """Raised by the CLI in ``--strict`` mode when some files failed."""

    exit_code = EXIT_PARTIAL_FAILURE
