"""Reusable contract test suites for LinearSizedCollection implementations.

Subclass a suite in your own test module, give it a `Test` name and a
`create()` method returning a new, empty collection; pytest then collects
the inherited test methods:

    from klaw_bounded.testing import CompleteSuite

    class TestMyStack(CompleteSuite):
        def create(self):
            return MyStack()

Suites push ints by default. Override `values()` for collections with a
different element type: it returns two distinct elements followed by a
filler element.
"""

from __future__ import annotations

from typing import Any

from klaw_bounded.bounded import Bounded, NonEmpty
from klaw_bounded.errors import TooLarge, TooSmall
from klaw_bounded.result import Some

__all__ = ['BoundedCollectionSuite', 'CompleteSuite', 'LinearCollectionSuite']


class _Suite:
    """Shared hooks for the contract suites."""

    def create(self) -> Any:
        """Return a new, empty collection under test."""
        raise NotImplementedError('Suites must implement create()')

    def values(self) -> tuple[Any, Any, Any]:
        """Return (first, second, filler) sample elements."""
        return 10, 20, 0


class LinearCollectionSuite(_Suite):
    """Coherence of push, pop, extend_to and shrink_to."""

    def test_pop_after_push(self) -> None:
        first, second, _ = self.values()
        collection = self.create()
        collection.push(first)
        collection.push(second)

        assert collection.pop() == Some(second)
        assert collection.pop() == Some(first)

    def test_pop_empty(self) -> None:
        collection = self.create()
        assert collection.is_empty()
        assert collection.pop().is_none()

    def test_len_after_extend(self) -> None:
        _, _, filler = self.values()
        collection = self.create()
        collection.extend_to(10, filler)

        assert len(collection) == 10

    def test_extend_is_noop_when_long_enough(self) -> None:
        _, _, filler = self.values()
        collection = self.create()
        collection.extend_to(5, filler)
        collection.extend_to(3, filler)

        assert len(collection) == 5

    def test_extend_with_calls_fill_once_per_slot(self) -> None:
        _, _, filler = self.values()
        calls = 0

        def fill() -> Any:
            nonlocal calls
            calls += 1
            return filler

        collection = self.create()
        collection.extend_to_with(7, fill)

        assert calls == 7
        assert len(collection) == 7

    def test_extend_shrink(self) -> None:
        _, _, filler = self.values()
        collection = self.create()
        collection.extend_to(10, filler)
        collection.shrink_to(4)

        assert len(collection) == 4

    def test_shrink_is_noop_when_short_enough(self) -> None:
        _, _, filler = self.values()
        collection = self.create()
        collection.extend_to(2, filler)
        collection.shrink_to(4)

        assert len(collection) == 2

    def test_multiple_resizes(self) -> None:
        first, _, filler = self.values()
        collection = self.create()
        collection.extend_to(10, filler)
        collection.shrink_to(4)
        assert len(collection) == 4

        collection.extend_to(15, filler)
        assert len(collection) == 15

        collection.push(first)
        assert len(collection) == 16
        assert collection.pop() == Some(first)
        assert len(collection) == 15

        assert collection.pop() == Some(filler)
        assert len(collection) == 14

        collection.extend_to(100, filler)
        assert len(collection) == 100

        collection.shrink_to(2)
        assert len(collection) == 2

    def test_reserve_keeps_length(self) -> None:
        collection = self.create()
        collection.reserve(16)

        assert len(collection) == 0


class BoundedCollectionSuite(_Suite):
    """Construction of bounded wrappers around the collection under test."""

    def test_empty(self) -> None:
        assert Bounded[0, 1].new(self.create()).is_ok()

    def test_always_empty(self) -> None:
        assert Bounded[0, 0].new(self.create()).is_ok()

    def test_always_empty_rejects_nonempty(self) -> None:
        first, _, _ = self.values()
        collection = self.create()
        collection.push(first)

        rejected = Bounded[0, 0].new(collection).unwrap_err()
        assert isinstance(rejected.violation, TooLarge)
        assert rejected.value is collection
        assert len(collection) == 1

    def test_too_small_empty(self) -> None:
        rejected = Bounded[1, 5].new(self.create()).unwrap_err()
        assert isinstance(rejected.violation, TooSmall)

    def test_too_small_nonempty(self) -> None:
        _, _, filler = self.values()
        collection = self.create()
        collection.extend_to(3, filler)

        rejected = Bounded[100, 5000].new(collection).unwrap_err()
        assert isinstance(rejected.violation, TooSmall)
        assert len(collection) == 3

    def test_nonempty_rejects_empty(self) -> None:
        assert NonEmpty.new(self.create()).is_err()

    def test_push_pop_within_bounds(self) -> None:
        first, second, _ = self.values()
        collection = self.create()
        collection.push(first)
        bounded = Bounded[1, 2].new(collection).unwrap()

        assert bounded.push(second).is_ok()
        assert bounded.push(first).is_err()
        assert bounded.pop() == Some(second)
        assert bounded.pop().is_none()


class CompleteSuite(LinearCollectionSuite, BoundedCollectionSuite):
    """Every contract suite for the collection under test."""
