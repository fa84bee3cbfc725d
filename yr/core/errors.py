"""Exit codes for the release and language tools.

Every failure a command can report maps to one of these codes so scripts
and CI jobs can tell a misconfigured invocation from a failing gate.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the CLI contract and should remain stable:
    - 0: Success
    - 1: User error (unknown language, unknown doc type, bad config)
    - 2: Environment error (missing tool, dirty tree, wrong branch)
    - 3: Gate error (tests, doc tests or lint failed)
    - 4: Document error (malformed switcher block)
    - 5: I/O error (write failed, tag or publish command failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    GATE_ERROR = 3
    DOCUMENT_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
