# src/taskmate/cli/parsing.py

"""
Argument parsing for command tails.

Each parser gets the raw text after the keyword and returns either the parsed
value or a CommandError describing what is wrong with it. Nothing here
touches the task collection or the store.
"""

from __future__ import annotations

import re
from datetime import datetime

from ..core.errors import CommandError, ErrorKind
from ..tasks.task_codec import FIELD_SEP

DUE_AT_FORMAT = "%d/%m/%Y %H%M"
DUE_AT_HINT = "dd/mm/yyyy hhmm"

# strptime alone accepts unpadded fields ("1/2/2024 930"); require the exact shape first.
_DUE_AT_SHAPE = re.compile(r"\d{2}/\d{2}/\d{4} \d{4}", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def split_command(line: str) -> tuple[str, str]:
    """Split an input line into (keyword, raw tail)."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    keyword = parts[0]
    tail = parts[1] if len(parts) > 1 else ""
    return keyword, tail


def _empty_description(task_word: str) -> CommandError:
    return CommandError(ErrorKind.EMPTY_DESCRIPTION, f"The description of a {task_word} cannot be empty.")


def parse_description(tail: str, task_word: str) -> str | CommandError:
    description = tail.strip()
    if not description:
        return _empty_description(task_word)
    return description


def parse_separated(tail: str, separator: str, task_word: str) -> tuple[str, str] | CommandError:
    """
    Split "<description> <separator> <detail>" into its two sides.

    Whitespace around the separator is dropped. Anything other than exactly
    one separator with text on both sides is rejected.
    """
    text = tail.strip()
    if not text:
        return _empty_description(task_word)

    parts = re.split(rf"\s*{re.escape(separator)}\s*", text)
    malformed = CommandError(
        ErrorKind.MALFORMED_ARGUMENTS,
        f"There must be exactly one argument before and one argument after the keyword {separator}.",
    )
    if len(parts) != 2:
        return malformed

    description, detail = parts[0].strip(), parts[1].strip()
    if not description:
        return _empty_description(task_word)
    # A leading/trailing "|" would merge with the separator written next to it.
    if FIELD_SEP in description or description.startswith("|") or description.endswith("|"):
        return CommandError(
            ErrorKind.MALFORMED_ARGUMENTS,
            f"The description of a {task_word} cannot contain \"{FIELD_SEP}\" or start or end with \"|\".",
        )
    if not detail:
        return malformed
    return description, detail


def parse_due_at(raw: str) -> str | CommandError:
    """Strictly validate a "dd/mm/yyyy hhmm" date-time; out-of-range fields are rejected, never rolled over."""
    value = raw.strip()
    error = CommandError(
        ErrorKind.INVALID_DATE,
        f'Date must be in the format "{DUE_AT_HINT}" and must be valid.',
    )
    if not _DUE_AT_SHAPE.fullmatch(value):
        return error
    try:
        datetime.strptime(value, DUE_AT_FORMAT)
    except ValueError:
        return error
    return value


def parse_deadline(tail: str) -> tuple[str, str] | CommandError:
    parsed = parse_separated(tail, "/by", "deadline")
    if isinstance(parsed, CommandError):
        return parsed
    description, raw_due = parsed
    due_at = parse_due_at(raw_due)
    if isinstance(due_at, CommandError):
        return due_at
    return description, due_at


def parse_event(tail: str) -> tuple[str, str] | CommandError:
    return parse_separated(tail, "/at", "event")


def parse_task_index(tail: str, size: int) -> int | CommandError:
    """
    Turn a 1-based position typed by the user into a validated 0-based index.

    `size` is the current collection size; an empty list gets its own message.
    """
    raw = tail.strip()
    if not _INTEGER.fullmatch(raw):
        if size == 0:
            hint = "Task index number must be a whole number (you have no task at the moment)."
        else:
            hint = f"Task index number must be a number from 1 to {size}."
        return CommandError(ErrorKind.NOT_A_NUMBER, hint)

    index = int(raw) - 1
    if size == 0:
        return CommandError(ErrorKind.OUT_OF_RANGE, "You have no task at the moment.")
    if not 0 <= index < size:
        return CommandError(ErrorKind.OUT_OF_RANGE, f"Task index number must be a number from 1 to {size}.")
    return index


def parse_keyword(tail: str) -> str | CommandError:
    keyword = tail.strip()
    if not keyword:
        return CommandError(ErrorKind.EMPTY_DESCRIPTION, 'The keyword for "find" cannot be empty.')
    return keyword
