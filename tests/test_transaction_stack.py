from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List

import pytest

from playlister.core.transaction_stack import TransactionStack


@dataclass
class RecordingTransaction:
    name: str
    log: List[str] = field(default_factory=list)
    label: ClassVar[str] = "Recording"

    def perform(self) -> None:
        self.log.append(f"do {self.name}")

    def reverse(self) -> None:
        self.log.append(f"undo {self.name}")


def _assert_predicates(stack: TransactionStack) -> None:
    assert stack.can_undo() is (stack.position != 0)
    assert stack.can_redo() is (stack.position != stack.size)


def test_push_performs_once_and_advances_cursor() -> None:
    log: List[str] = []
    stack = TransactionStack()
    stack.push(RecordingTransaction("a", log))
    assert log == ["do a"]
    assert stack.position == 1
    assert len(stack) == 1
    _assert_predicates(stack)


def test_undo_and_redo_follow_cursor_order() -> None:
    log: List[str] = []
    stack = TransactionStack()
    for name in ("a", "b", "c"):
        stack.push(RecordingTransaction(name, log))

    assert stack.undo() is True
    assert stack.undo() is True
    _assert_predicates(stack)
    assert stack.redo() is True
    _assert_predicates(stack)

    assert log == ["do a", "do b", "do c", "undo c", "undo b", "do b"]
    assert stack.position == 2


def test_empty_stack_reports_nothing_to_undo_or_redo() -> None:
    stack = TransactionStack()
    assert stack.undo() is False
    assert stack.redo() is False
    assert stack.position == 0
    assert stack.peek_undo() is None
    assert stack.peek_redo() is None
    _assert_predicates(stack)


def test_redo_at_head_is_noop() -> None:
    log: List[str] = []
    stack = TransactionStack()
    stack.push(RecordingTransaction("a", log))
    assert stack.redo() is False
    assert log == ["do a"]


def test_push_after_undo_discards_redo_branch() -> None:
    log: List[str] = []
    stack = TransactionStack()
    stack.push(RecordingTransaction("a", log))
    stack.push(RecordingTransaction("b", log))
    stack.undo()
    assert stack.can_redo() is True

    stack.push(RecordingTransaction("c", log))

    assert stack.can_redo() is False
    assert stack.redo() is False
    assert stack.size == 2
    stack.undo()
    stack.undo()
    assert log[-2:] == ["undo c", "undo a"]


def test_peek_returns_transactions_next_to_cursor() -> None:
    stack = TransactionStack()
    first = RecordingTransaction("a")
    second = RecordingTransaction("b")
    stack.push(first)
    stack.push(second)
    stack.undo()
    assert stack.peek_undo() is first
    assert stack.peek_redo() is second


def test_clear_resets_history() -> None:
    stack = TransactionStack()
    stack.push(RecordingTransaction("a"))
    stack.push(RecordingTransaction("b"))
    stack.undo()
    stack.clear()
    assert stack.size == 0
    assert stack.position == 0
    _assert_predicates(stack)


@dataclass
class FailingTransaction:
    label: ClassVar[str] = "Failing"

    def perform(self) -> None:
        raise IndexError("song index out of range")

    def reverse(self) -> None:
        raise AssertionError("never performed")


def test_failed_perform_leaves_history_untouched() -> None:
    log: List[str] = []
    stack = TransactionStack()
    stack.push(RecordingTransaction("a", log))
    stack.push(RecordingTransaction("b", log))
    stack.undo()

    with pytest.raises(IndexError):
        stack.push(FailingTransaction())

    assert stack.size == 2
    assert stack.position == 1
    _assert_predicates(stack)
    assert stack.redo() is True
    assert log == ["do a", "do b", "undo b", "do b"]


def test_failed_perform_on_empty_stack_keeps_nothing_to_redo() -> None:
    stack = TransactionStack()

    with pytest.raises(IndexError):
        stack.push(FailingTransaction())

    assert stack.size == 0
    assert stack.can_redo() is False
    assert stack.redo() is False
