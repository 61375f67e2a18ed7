"""Process exit codes.

Every fatal condition (missing reference, malformed tag, failed ``gh`` call)
exits with the same non-zero status. The kind of failure is reported in the
message, never in the exit code.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the floatrel command."""

    OK = 0
    FAILURE = 1
