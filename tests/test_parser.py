"""Tests for the two-pass prompt line parser."""

from __future__ import annotations

import pytest

from surf_omnibar.parser import ParsedCommand, parse_line, split_back, split_front


class TestSplitFront:
    def test_single_char_token(self):
        assert split_front("n 1.2.3") == ParsedCommand("n", "1.2.3")

    def test_bang_token(self):
        assert split_front("!nightly 1.2.3") == ParsedCommand("!nightly", "1.2.3")

    def test_splits_at_first_space_only(self):
        assert split_front("s two words") == ParsedCommand("s", "two words")

    def test_rejects_longer_token(self):
        assert split_front("go to the store") is None


class TestSplitBack:
    def test_trailing_token_is_operator(self):
        assert split_back("go to the store") == ParsedCommand("store", "go to the")

    def test_two_words(self):
        assert split_back("example.com d") == ParsedCommand("d", "example.com")


class TestParseLine:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("n 1.2.3", ("n", "1.2.3")),
            ("go to the store", ("store", "go to the")),
            ("!nightly 1.2.3", ("!nightly", "1.2.3")),
            ("delete example.com", ("example.com", "delete")),
            ("some free text s", ("s", "some free text")),
            ("a b c", ("a", "b c")),
        ],
    )
    def test_examples(self, line, expected):
        assert parse_line(line) == ParsedCommand(*expected)

    def test_front_attempt_wins_over_back(self):
        # both ends are single characters; the leading one is chosen
        assert parse_line("d x s") == ParsedCommand("d", "x s")

    def test_degenerate_empty_argument_accepted(self):
        assert parse_line("! ") == ParsedCommand("!", "")

    def test_fields(self):
        command = parse_line("n 1.2.3")
        assert command.operator == "n"
        assert command.argument == "1.2.3"
