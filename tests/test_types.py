"""Tests for core types."""

from tasklist.types import Item, OperationResult


class TestItem:
    def test_defaults_to_not_done(self) -> None:
        assert Item("x").done is False

    def test_label(self) -> None:
        assert Item("write report").label == "[ ] write report"
        assert Item("write report", done=True).label == "[✓] write report"
        assert str(Item("x", done=True)) == "[✓] x"


def test_operation_result_defaults() -> None:
    result = OperationResult(ok=True, message="Saved")
    assert result.error is None
