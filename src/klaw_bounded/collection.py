"""Capability protocols: LinearSizedCollection, Viewable and ViewMut.

Uses PEP 695 type parameter syntax (Python 3.12+) for automatic variance inference.

`LinearSizedCollection` is the minimal interface a backing container must
expose to be wrapped by `Bounded`. Implementors subclass it explicitly to
inherit the bulk operations derived from the primitives, and may override
them with faster native versions.
"""

from __future__ import annotations

import copy
from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from klaw_bounded.result import Option
    from klaw_bounded.views import MutableView, ReadOnlyView

__all__ = ['LinearSizedCollection', 'ViewMut', 'Viewable']


@runtime_checkable
class LinearSizedCollection[T](Protocol):
    """Protocol for linear collections with an observable length.

    Type Parameters:
        T: The element type.

    Required primitives are `__len__`, `push`, `pop` and `reserve`. A `pop`
    immediately following a `push` on an otherwise unchanged collection
    must return exactly the pushed value.
    """

    @abstractmethod
    def __len__(self) -> int:
        """Return the exact current element count."""
        ...

    @abstractmethod
    def push(self, value: T) -> None:
        """Append one element at the logical end."""
        ...

    @abstractmethod
    def pop(self) -> Option[T]:
        """Remove the most recently appended element.

        Returns:
            `Some(value)` with the removed element, or `Nothing` when empty.
        """
        ...

    @abstractmethod
    def reserve(self, additional: int) -> None:
        """Hint that `additional` more elements are about to be pushed.

        Containers without a capacity concept implement this as a no-op.
        """
        ...

    def is_empty(self) -> bool:
        """Return True if the collection holds no elements."""
        return len(self) == 0

    def shrink_to(self, length: int) -> None:
        """Remove elements from the end until `len(self) <= length`.

        The default pops one element at a time.
        """
        for _ in range(len(self) - length):
            self.pop()

    def extend_to_with(self, length: int, fill: Callable[[], T]) -> None:
        """Append `fill()` results until `len(self) == length`.

        `fill` is called exactly once per appended element. Nothing happens
        when the collection already holds `length` or more elements.
        """
        missing = length - len(self)
        if missing <= 0:
            return
        self.reserve(missing)
        for _ in range(missing):
            self.push(fill())

    def extend_to(self, length: int, value: T) -> None:
        """Append shallow copies of `value` until `len(self) == length`."""
        self.extend_to_with(length, lambda: copy.copy(value))


@runtime_checkable
class Viewable[T](Protocol):
    """Protocol for collections exposing a read-only element view."""

    @abstractmethod
    def view(self) -> ReadOnlyView[T]:
        """Return a read-only view of the elements, oldest first."""
        ...


@runtime_checkable
class ViewMut[T](Protocol):
    """Protocol for collections exposing a length-stable mutable view.

    Implementations are trusted, not checked: the returned view may change
    element values but must never change the collection's length.
    `Bounded` relies on this to keep its invariant while handing out views.
    """

    @abstractmethod
    def view_mut(self) -> MutableView[T]:
        """Return a mutable view of the elements, oldest first."""
        ...
