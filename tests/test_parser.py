import pytest

from contact_book.models import (
    AddEmailCommand,
    AddPhoneCommand,
    ExitCommand,
    ExportCommand,
    FindCommand,
    HelpCommand,
    ShowCommand,
)
from contact_book.parsing import parse, tokenize


@pytest.mark.parametrize("line", ["exit", "EXIT", "Exit"])
def test_exit_is_case_insensitive(line):
    assert parse(line) == ExitCommand()


@pytest.mark.parametrize("line", ["help", "HeLp"])
def test_help_is_case_insensitive(line):
    assert parse(line) == HelpCommand()


def test_exit_requires_exact_line():
    assert parse("exit now") == HelpCommand()
    assert parse(" exit") == HelpCommand()


def test_show_find_export():
    assert parse("show Alice") == ShowCommand(name="Alice")
    assert parse("SHOW Alice") == ShowCommand(name="Alice")
    assert parse("find +123456789") == FindCommand(query="+123456789")
    assert parse("Export out.json") == ExportCommand(path="out.json")


def test_show_with_wrong_token_count_falls_back_to_help():
    assert parse("show") == HelpCommand()
    assert parse("show Alice Smith") == HelpCommand()
    # a double space produces an empty token
    assert parse("show  Alice") == HelpCommand()


def test_show_with_trailing_space_has_empty_name():
    command = parse("show ")
    assert command == ShowCommand(name="")
    assert not command.is_valid()


def test_add_phone_and_email():
    assert parse("add Alice phone +123456789") == AddPhoneCommand(name="Alice", phone="+123456789")
    assert parse("add Alice EMAIL alice@example.com") == AddEmailCommand(
        name="Alice", email="alice@example.com"
    )


def test_add_ignores_extra_tokens():
    assert parse("add Alice phone +1 +2") == AddPhoneCommand(name="Alice", phone="+1")


def test_add_with_unknown_type_or_too_few_tokens_is_help():
    assert parse("add Alice fax +123") == HelpCommand()
    assert parse("add Alice phone") == HelpCommand()


def test_add_keyword_is_case_sensitive():
    assert parse("ADD Alice phone +123") == HelpCommand()


def test_garbage_and_empty_lines_are_help():
    assert parse("") == HelpCommand()
    assert parse("hello world") == HelpCommand()


def test_parse_is_deterministic():
    line = "add Bob email bob@example.org"
    assert parse(line) == parse(line)


def test_tokenize_splits_on_single_spaces():
    assert tokenize("a  b") == ["a", "", "b"]
