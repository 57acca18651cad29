"""Tests for help flag capture."""

import dataclasses

import pytest

from helpwrap.core.capture import HelpFlagFound, HelpFlagNotFound, capture_help


class TestHelpFlagFound:
    """Captures that locate a help flag."""

    def test_short_flag_alone(self) -> None:
        assert capture_help(["-h"]) == HelpFlagFound(
            subcommand="", position=0, token="-h", original_args=("-h",)
        )

    def test_flag_after_help_command(self) -> None:
        assert capture_help(["help", "-h"]) == HelpFlagFound(
            subcommand="help", position=1, token="-h", original_args=("help", "-h")
        )

    def test_flag_before_subcommand(self) -> None:
        result = capture_help(["-h", "foo"])
        assert isinstance(result, HelpFlagFound)
        assert result.subcommand == ""
        assert result.position == 0

    def test_flag_after_subcommand(self) -> None:
        assert capture_help(["foo", "-h"]) == HelpFlagFound(
            subcommand="foo", position=1, token="-h", original_args=("foo", "-h")
        )

    def test_trailing_args_after_flag(self) -> None:
        result = capture_help(["foo", "-h", "bar"])
        assert isinstance(result, HelpFlagFound)
        assert result.subcommand == "foo"
        assert result.position == 1
        assert result.original_args == ("foo", "-h", "bar")

    def test_flag_after_positional(self) -> None:
        result = capture_help(["foo", "bar", "-h"])
        assert isinstance(result, HelpFlagFound)
        assert result.subcommand == "foo"
        assert result.position == 2

    def test_long_flag(self) -> None:
        result = capture_help(["build", "-o", "out", "--help"])
        assert isinstance(result, HelpFlagFound)
        assert result.token == "--help"
        assert result.position == 3

    def test_first_flag_wins(self) -> None:
        result = capture_help(["test", "--help", "-h"])
        assert isinstance(result, HelpFlagFound)
        assert result.token == "--help"
        assert result.position == 1

    def test_later_separator_does_not_cancel_match(self) -> None:
        result = capture_help(["foo", "-h", "--", "bar", "-h"])
        assert result == HelpFlagFound(
            subcommand="foo",
            position=1,
            token="-h",
            original_args=("foo", "-h", "--", "bar", "-h"),
        )

    def test_subcommand_after_leading_flags(self) -> None:
        result = capture_help(["-C", "dir", "build", "-h"])
        # "dir" is the first non-dash token; option values are not understood
        assert isinstance(result, HelpFlagFound)
        assert result.subcommand == "dir"

    def test_help_flag_found_property(self) -> None:
        assert capture_help(["-h"]).help_flag_found is True


class TestHelpFlagNotFound:
    """Captures without a qualifying help flag."""

    def test_empty(self) -> None:
        assert capture_help([]) == HelpFlagNotFound(subcommand="", original_args=())

    def test_help_command(self) -> None:
        assert capture_help(["help"]) == HelpFlagNotFound(
            subcommand="help", original_args=("help",)
        )

    def test_help_topic(self) -> None:
        assert capture_help(["help", "foo"]) == HelpFlagNotFound(
            subcommand="help", original_args=("help", "foo")
        )

    def test_separator_before_flag(self) -> None:
        assert capture_help(["foo", "--", "bar", "-h"]) == HelpFlagNotFound(
            subcommand="foo", original_args=("foo", "--", "bar", "-h")
        )

    def test_separator_first(self) -> None:
        result = capture_help(["--", "-h"])
        assert isinstance(result, HelpFlagNotFound)
        assert result.subcommand == ""

    def test_no_subcommand_only_flags(self) -> None:
        assert capture_help(["-v", "-x"]) == HelpFlagNotFound(
            subcommand="", original_args=("-v", "-x")
        )

    @pytest.mark.parametrize("token", ["-help", "-hv", "--help=1", "--helps", "-H", "h"])
    def test_lookalike_tokens_are_not_help_flags(self, token: str) -> None:
        result = capture_help(["run", token])
        assert isinstance(result, HelpFlagNotFound)

    def test_help_flag_found_property(self) -> None:
        assert capture_help(["foo"]).help_flag_found is False


class TestCaptureResult:
    """Shape of the capture result."""

    def test_result_is_immutable(self) -> None:
        result = capture_help(["foo", "-h"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.position = 5  # type: ignore[misc]

    def test_input_list_is_copied(self) -> None:
        args = ["foo", "bar"]
        result = capture_help(args)
        args.append("-h")
        assert result.original_args == ("foo", "bar")

    def test_not_found_has_no_position(self) -> None:
        result = capture_help(["foo"])
        assert not hasattr(result, "position")
        assert not hasattr(result, "token")

    def test_first_subcommand_is_kept(self) -> None:
        result = capture_help(["vet", "fmt", "build"])
        assert result.subcommand == "vet"

    def test_subcommand_not_captured_after_separator(self) -> None:
        result = capture_help(["-x", "--", "foo"])
        assert result.subcommand == ""
