# ABOUTME: Unit tests for the suggestion table and interactive picker.
# ABOUTME: Tests rendering of absent and zero values, selection, skip, and retry on bad input.

from io import StringIO
from unittest.mock import patch

from rich.console import Console

from bookshelf.cli.picker import SuggestionPicker, render_suggestions
from bookshelf.metadata.candidate import SuggestionCandidate

CANDIDATES = [
    SuggestionCandidate("Dune", "Frank Herbert", 1965, 142),
    SuggestionCandidate("Dune Messiah", "Frank Herbert", 1969, 78),
]


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=120), buffer


class TestRenderSuggestions:
    """Tests for render_suggestions table output."""

    def test_zero_values_are_shown(self) -> None:
        """A year or edition count of 0 is a value, not a blank."""
        console, buffer = _console()
        render_suggestions(console, [SuggestionCandidate("Fragments", "Anonymous", 0, 0)])
        row = next(line for line in buffer.getvalue().splitlines() if "Fragments" in line)
        assert "—" not in row
        assert row.count(" 0 ") == 2

    def test_absent_values_use_placeholder(self) -> None:
        console, buffer = _console()
        render_suggestions(console, [SuggestionCandidate("Beowulf")])
        row = next(line for line in buffer.getvalue().splitlines() if "Beowulf" in line)
        assert row.count("—") == 3


class TestSuggestionPicker:
    """Tests for SuggestionPicker.pick."""

    def test_selects_by_number(self) -> None:
        console, _ = _console()
        with patch("bookshelf.cli.picker.click.prompt", return_value="2"):
            assert SuggestionPicker(console=console).pick(CANDIDATES) == CANDIDATES[1]

    def test_skip(self) -> None:
        console, _ = _console()
        with patch("bookshelf.cli.picker.click.prompt", return_value="s"):
            assert SuggestionPicker(console=console).pick(CANDIDATES) is None

    def test_reprompts_on_invalid_choice(self) -> None:
        """Out-of-range and non-numeric answers ask again."""
        console, _ = _console()
        with patch("bookshelf.cli.picker.click.prompt", side_effect=["9", "x", "1"]) as prompt:
            assert SuggestionPicker(console=console).pick(CANDIDATES) == CANDIDATES[0]
        assert prompt.call_count == 3

    def test_no_candidates_does_not_prompt(self) -> None:
        with patch("bookshelf.cli.picker.click.prompt") as prompt:
            assert SuggestionPicker(console=_console()[0]).pick([]) is None
        prompt.assert_not_called()
