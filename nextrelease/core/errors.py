"""Exit codes for the nextrelease CLI.

Every command ends with one of these codes. Only configuration problems and
an unknown release type are fatal; a partial release snapshot is not an error.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the CLI contract and should remain stable:
    - 0: Success (including partial snapshots)
    - 1: User error (missing input, unknown release type)
    - 2: Environment error (unreadable or invalid config file)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
