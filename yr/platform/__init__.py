"""Platform abstraction layer."""

from .files import atomic_write_text, read_text_exact
from .process import ProcessError, ProcessRunner, SubprocessRunner, format_command

__all__ = [
    # files
    "atomic_write_text",
    "read_text_exact",
    # process
    "ProcessError",
    "ProcessRunner",
    "SubprocessRunner",
    "format_command",
]
