"""
Tests for command parsing.
"""

import pytest

from file_manager.entities.command import Command, Verb
from file_manager.exceptions import InvalidInputError


class TestCommand:
    """Test cases for Command.parse and the Verb enumeration."""

    def test_parse_verb_without_arguments(self):
        command = Command.parse("ls")

        assert command.verb is Verb.LS
        assert command.args == ()

    def test_parse_two_arguments(self):
        command = Command.parse("cp a.txt b.txt")

        assert command.verb is Verb.CP
        assert command.args == ("a.txt", "b.txt")
        assert command.arg(1) == "b.txt"

    def test_parse_collapses_repeated_whitespace(self):
        command = Command.parse("  rn   old.txt \t new.txt  ")

        assert command.args == ("old.txt", "new.txt")

    def test_extra_arguments_are_dropped(self):
        command = Command.parse("cat one two three")

        assert command.args == ("one",)

    def test_exit_keyword(self):
        assert Command.parse(".exit").verb is Verb.EXIT

    def test_unknown_verb(self):
        with pytest.raises(InvalidInputError, match="Unknown command: frobnicate"):
            Command.parse("frobnicate")

    def test_verbs_are_case_sensitive(self):
        with pytest.raises(InvalidInputError):
            Command.parse("LS")

    def test_missing_argument(self):
        with pytest.raises(InvalidInputError, match="'mv' expects 2 argument"):
            Command.parse("mv only_one")

    def test_blank_line(self):
        with pytest.raises(InvalidInputError, match="Empty command"):
            Command.parse("   ")

    def test_every_verb_has_unique_keyword(self):
        keywords = [verb.keyword for verb in Verb]

        assert len(keywords) == len(set(keywords))
        assert set(keywords) == {
            ".exit",
            "up",
            "cd",
            "ls",
            "cat",
            "add",
            "rn",
            "cp",
            "mv",
            "rm",
            "os",
            "hash",
            "compress",
            "decompress",
        }
