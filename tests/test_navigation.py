"""
Test command parsing and the per-group navigation loop.
"""

import io
from datetime import date
from pathlib import Path

import pytest
from rich.console import Console

from placesort.commands import Label, NextImage, PreviousImage, Quit, parse_command
from placesort.errors import InputError, RenderError, UserCancelled
from placesort.grouping import DateGroup
from placesort.navigator import NavigationState, Navigator

from conftest import RecordingRenderer, ScriptedInput


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def group():
    return DateGroup(date(2024, 1, 1), [Path("a.jpg"), Path("b.jpg"), Path("c.mp4")])


def make_navigator(console, answers):
    renderer = RecordingRenderer(console)
    console.input = ScriptedInput(answers)
    return Navigator(console, renderer), renderer


class TestParseCommand:
    """Test interpretation of a single input line."""

    @pytest.mark.parametrize("line", ["n", "N", " n\n"])
    def test_next(self, line):
        assert parse_command(line) == NextImage()

    @pytest.mark.parametrize("line", ["p", "P", "p  "])
    def test_previous(self, line):
        assert parse_command(line) == PreviousImage()

    @pytest.mark.parametrize("line", ["q", "Q", "\tq"])
    def test_quit(self, line):
        assert parse_command(line) == Quit()

    def test_label_is_trimmed_and_keeps_case(self):
        assert parse_command("  Paris \n") == Label("Paris")
        assert parse_command("New York") == Label("New York")

    @pytest.mark.parametrize("line", ["", "   ", "\n"])
    def test_blank_input(self, line):
        assert parse_command(line) is None

    def test_reserved_letters_are_never_labels(self):
        # A place literally called "n", "p" or "q" cannot be entered
        for line in ("n", "p", "q", "N", "P", "Q"):
            assert not isinstance(parse_command(line), Label)

    def test_longer_words_starting_with_command_letters(self):
        assert parse_command("nice") == Label("nice")
        assert parse_command("Porto") == Label("Porto")
        assert parse_command("Quebec") == Label("Quebec")


class TestNavigationState:
    """Test index wrapping."""

    @pytest.mark.parametrize("size", [1, 2, 5, 13])
    def test_next_cycles_back_to_start(self, size):
        for start in range(size):
            state = NavigationState(size, start)
            for _ in range(size):
                state.next()
                assert 0 <= state.index < size
            assert state.index == start

    @pytest.mark.parametrize("size", [1, 2, 5, 13])
    def test_previous_cycles_back_to_start(self, size):
        for start in range(size):
            state = NavigationState(size, start)
            for _ in range(size):
                state.previous()
                assert 0 <= state.index < size
            assert state.index == start

    def test_wraps_at_both_ends(self):
        state = NavigationState(3)
        assert state.previous() == 2
        assert state.next() == 0
        assert state.next() == 1

    def test_empty_group_rejected(self):
        with pytest.raises(ValueError):
            NavigationState(0)


class TestNavigator:
    """Test the interactive loop for one group."""

    def test_label_returned_after_first_render(self, console, group):
        navigator, renderer = make_navigator(console, ["Paris"])

        assert navigator.review_group(group) == "Paris"
        assert renderer.rendered == [Path("a.jpg")]

    def test_navigation_renders_each_transition(self, console, group):
        navigator, renderer = make_navigator(console, ["n", "n", "n", "p", "Lyon"])

        assert navigator.review_group(group) == "Lyon"
        assert renderer.rendered == [
            Path("a.jpg"), Path("b.jpg"), Path("c.mp4"), Path("a.jpg"), Path("c.mp4"),
        ]

    def test_blank_input_reprompts_without_render(self, console, group):
        navigator, renderer = make_navigator(console, ["", "   ", "Nice"])

        assert navigator.review_group(group) == "Nice"
        assert renderer.rendered == [Path("a.jpg")]
        assert "Enter a valid city name" in console.file.getvalue()

    def test_unusable_label_reprompts(self, console, group):
        navigator, renderer = make_navigator(console, ["Par\x00is", "x/../../elsewhere", "Paris"])

        assert navigator.review_group(group) == "Paris"
        assert renderer.rendered == [Path("a.jpg")]
        output = console.file.getvalue()
        assert "null character" in output
        assert "path separator" in output

    def test_quit_cancels(self, console, group):
        navigator, _ = make_navigator(console, ["n", "q"])

        with pytest.raises(UserCancelled):
            navigator.review_group(group)

    def test_closed_input_is_fatal(self, console, group):
        navigator, _ = make_navigator(console, ["n"])

        with pytest.raises(InputError):
            navigator.review_group(group)

    def test_render_failure_is_fatal(self, console, group):
        class BrokenRenderer(RecordingRenderer):
            def render(self, file_path):
                raise RenderError(f"cannot show {file_path}")

        console.input = ScriptedInput(["Paris"])
        navigator = Navigator(console, BrokenRenderer(console))

        with pytest.raises(RenderError):
            navigator.review_group(group)

    def test_listing_shows_files_and_index(self, console, group):
        navigator, _ = make_navigator(console, ["n", "Rome"])

        navigator.review_group(group)

        output = console.file.getvalue()
        assert '"a.jpg", "b.jpg", "c.mp4"' in output
        assert "image idx: 0" in output
        assert "image idx: 1" in output
        assert "2024-01-01" in output
