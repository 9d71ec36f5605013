# tests/test_parsing.py

from __future__ import annotations

import pytest

from taskmate.cli.parsing import (
    parse_deadline,
    parse_description,
    parse_due_at,
    parse_event,
    parse_keyword,
    parse_task_index,
    split_command,
)
from taskmate.core.errors import CommandError, ErrorKind


def _kind(result) -> ErrorKind:
    assert isinstance(result, CommandError), result
    return result.kind


def test_split_command() -> None:
    assert split_command("todo  Buy milk ") == ("todo", "Buy milk ")
    assert split_command("  list") == ("list", "")
    assert split_command("   ") == ("", "")
    assert split_command("deadline a /by b") == ("deadline", "a /by b")


def test_parse_description() -> None:
    assert parse_description("  Buy milk  ", "todo") == "Buy milk"
    assert _kind(parse_description("   ", "todo")) is ErrorKind.EMPTY_DESCRIPTION


@pytest.mark.parametrize("value", ["01/12/2024 2359", "29/02/2024 0000", "25/12/2024 1800"])
def test_due_at_accepts_valid_dates(value: str) -> None:
    assert parse_due_at(value) == value


@pytest.mark.parametrize(
    "value",
    [
        "32/01/2024 1000",
        "01/13/2024 1000",
        "29/02/2023 1200",
        "01/12/2024 2400",
        "01/12/2024 1260",
        "1/12/2024 2359",
        "01/12/2024 900",
        "2024-12-01 23:59",
        "tomorrow",
        "",
    ],
)
def test_due_at_rejects_invalid_dates(value: str) -> None:
    assert _kind(parse_due_at(value)) is ErrorKind.INVALID_DATE


def test_parse_deadline() -> None:
    assert parse_deadline(" Submit report  /by   25/12/2024 1800 ") == (
        "Submit report",
        "25/12/2024 1800",
    )


@pytest.mark.parametrize(
    ("tail", "kind"),
    [
        ("", ErrorKind.EMPTY_DESCRIPTION),
        ("   ", ErrorKind.EMPTY_DESCRIPTION),
        ("/by 25/12/2024 1800", ErrorKind.EMPTY_DESCRIPTION),
        ("Submit report", ErrorKind.MALFORMED_ARGUMENTS),
        ("Submit report /by", ErrorKind.MALFORMED_ARGUMENTS),
        ("a /by 25/12/2024 1800 /by 26/12/2024 1800", ErrorKind.MALFORMED_ARGUMENTS),
        ("Submit report /by 32/13/2020 1800", ErrorKind.INVALID_DATE),
    ],
)
def test_parse_deadline_errors(tail: str, kind: ErrorKind) -> None:
    assert _kind(parse_deadline(tail)) is kind


def test_parse_event() -> None:
    assert parse_event("Team outing /at Saturday afternoon, Clementi") == (
        "Team outing",
        "Saturday afternoon, Clementi",
    )


@pytest.mark.parametrize(
    ("tail", "kind"),
    [
        ("", ErrorKind.EMPTY_DESCRIPTION),
        ("  /at noon", ErrorKind.EMPTY_DESCRIPTION),
        ("party", ErrorKind.MALFORMED_ARGUMENTS),
        ("party /at", ErrorKind.MALFORMED_ARGUMENTS),
        ("party /at noon /at night", ErrorKind.MALFORMED_ARGUMENTS),
    ],
)
def test_parse_event_errors(tail: str, kind: ErrorKind) -> None:
    assert _kind(parse_event(tail)) is kind


def test_parse_task_index() -> None:
    assert parse_task_index("1", 2) == 0
    assert parse_task_index(" 2 ", 2) == 1


@pytest.mark.parametrize("tail", ["", "abc", "1.5", "one", "1 2", "٣"])
def test_parse_task_index_not_a_number(tail: str) -> None:
    assert _kind(parse_task_index(tail, 3)) is ErrorKind.NOT_A_NUMBER


@pytest.mark.parametrize("tail", ["0", "-1", "4", "99"])
def test_parse_task_index_out_of_range(tail: str) -> None:
    result = parse_task_index(tail, 3)
    assert _kind(result) is ErrorKind.OUT_OF_RANGE
    assert "from 1 to 3" in result.message


def test_parse_task_index_empty_list_message() -> None:
    result = parse_task_index("1", 0)
    assert _kind(result) is ErrorKind.OUT_OF_RANGE
    assert "no task" in result.message


def test_parse_keyword() -> None:
    assert parse_keyword("  book ") == "book"
    assert _kind(parse_keyword("  ")) is ErrorKind.EMPTY_DESCRIPTION


@pytest.mark.parametrize(
    "tail",
    [
        "a | b /by 25/12/2024 1800",
        "report | /by 25/12/2024 1800",
        "| report /by 25/12/2024 1800",
        "| /by 25/12/2024 1800",
    ],
)
def test_parse_deadline_rejects_field_separator_in_description(tail: str) -> None:
    assert _kind(parse_deadline(tail)) is ErrorKind.MALFORMED_ARGUMENTS


def test_parse_event_keeps_pipes_inside_description_words() -> None:
    assert parse_event("a|b /at Mon | Tue") == ("a|b", "Mon | Tue")
