"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~resinline.exceptions.ResinlineError` subclass.

Example::

    $ resinline dist/ --strict
    $ echo $?
    3   # EXIT_PARTIAL_FAILURE -- at least one file could not be processed
"""

EXIT_SUCCESS = 0
"""Every discovered file was processed (or ``--strict`` was not given)."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred, or the configuration is invalid."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_PARTIAL_FAILURE = 3
"""One or more files failed while running with ``--strict``."""
