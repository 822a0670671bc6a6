"""Element views over indexable backing storage.

A view never owns its elements. `ReadOnlyView` is a plain `Sequence`;
`MutableView` additionally allows replacing elements in place, but offers
no operation that could change the number of elements.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any, overload

__all__ = ['MutableView', 'ReadOnlyView']


class ReadOnlyView[T](Sequence[T]):
    """Read-only sequence view over a backing container.

    Example:
        >>> view = ReadOnlyView([1, 2, 3])
        >>> view[-1], len(view)
        (3, 3)
    """

    __slots__ = ('_target',)

    def __init__(self, target: MutableSequence[T] | Any) -> None:
        self._target = target

    def __len__(self) -> int:
        return len(self._target)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...
    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return [self._target[i] for i in range(len(self._target))[index]]
        return self._target[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._target)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str | bytes):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other, strict=True))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self)!r})'


class MutableView[T](ReadOnlyView[T]):
    """Length-stable mutable view over a backing container.

    Elements can be replaced by index or by slice; a slice assignment must
    supply exactly as many values as the slice selects.

    Subclasses restrict element values by overriding `check_item`; every
    assigned value is checked before anything is written.

    Example:
        >>> data = [1, 2, 3]
        >>> view = MutableView(data)
        >>> view[0] = 10
        >>> view[1:] = [20, 30]
        >>> data
        [10, 20, 30]
    """

    __slots__ = ()

    def check_item(self, value: Any) -> None:
        """Raise if `value` may not be stored; any value is accepted here."""

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...
    @overload
    def __setitem__(self, index: slice, value: Sequence[T]) -> None: ...
    def __setitem__(self, index: int | slice, value: Any) -> None:
        if not isinstance(index, slice):
            self.check_item(value)
            self._target[index] = value
            return
        positions = range(len(self._target))[index]
        values = list(value)
        if len(values) != len(positions):
            msg = f'Slice assignment would change the length: {len(positions)} slots, {len(values)} values'
            raise ValueError(msg)
        for item in values:
            self.check_item(item)
        for position, item in zip(positions, values, strict=True):
            self._target[position] = item

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at positions `i` and `j`."""
        self._target[i], self._target[j] = self._target[j], self._target[i]

    def reverse(self) -> None:
        """Reverse the elements in place."""
        n = len(self._target)
        for i in range(n // 2):
            self.swap(i, n - 1 - i)
