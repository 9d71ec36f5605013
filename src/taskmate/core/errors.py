# src/taskmate/core/errors.py

"""
User-facing error kinds.

Command parsing reports problems as values (CommandError) instead of raising:
every one of them is recoverable and ends up as a message to the user.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    UNKNOWN_COMMAND = "unknown_command"
    EMPTY_DESCRIPTION = "empty_description"
    MALFORMED_ARGUMENTS = "malformed_arguments"
    INVALID_DATE = "invalid_date"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    IO_ERROR = "io_error"


@dataclass(frozen=True, slots=True)
class CommandError:
    kind: ErrorKind
    message: str
