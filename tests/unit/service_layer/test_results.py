"""Unit tests for CommandResult."""

import pytest

from studybook.service_layer.results import CommandResult, Listing


class TestCommandResult:
    """Tests for CommandResult."""

    @staticmethod
    def test_defaults() -> None:
        """Plain feedback neither shows help nor exits."""
        result = CommandResult("done")
        assert not result.show_help
        assert not result.exit
        assert result.listing is None

    @staticmethod
    def test_equality() -> None:
        """Results compare by every field."""
        assert CommandResult("a") == CommandResult("a")
        assert CommandResult("a") != CommandResult("a", show_help=True)
        assert CommandResult("a") != CommandResult("a", exit=True)
        assert CommandResult("a") != CommandResult("a", listing=Listing.TASKS)
        assert hash(CommandResult("a")) == hash(CommandResult("a"))

    @staticmethod
    def test_feedback_is_required() -> None:
        """None is not feedback."""
        with pytest.raises(TypeError):
            CommandResult(None)  # type: ignore[arg-type]
