"""LinearSizedCollection adapters for Python's built-in containers.

Adapters wrap mutable containers in place: `ListCollection(items)` pushes
into the caller's own list. Immutable inputs (`str`, `bytes`) are copied
into a fresh buffer.

Use `lift()` to pick the adapter for a raw container:

    >>> lift([1, 2, 3])
    ListCollection([1, 2, 3])
    >>> lift('ab')
    StringBuffer('ab')
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, Self

from klaw_bounded._dispatch import dispatch_on_type
from klaw_bounded.collection import LinearSizedCollection, ViewMut, Viewable
from klaw_bounded.errors import NoAdapterError
from klaw_bounded.result import Nothing, Option, Some
from klaw_bounded.views import MutableView, ReadOnlyView

__all__ = [
    'ByteBuffer',
    'CharView',
    'DequeCollection',
    'ListCollection',
    'StringBuffer',
    'lift',
]


class ListCollection[T](LinearSizedCollection[T], Viewable[T], ViewMut[T]):
    """Dynamic array adapter over a `list`.

    Example:
        >>> items = ListCollection([1, 2])
        >>> items.push(3)
        >>> items.pop()
        Some(value=3)
    """

    __slots__ = ('_items',)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = items if isinstance(items, list) else list(items)

    @property
    def raw(self) -> list[T]:
        """The wrapped list."""
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> Option[T]:
        if not self._items:
            return Nothing
        return Some(self._items.pop())

    def reserve(self, additional: int) -> None:
        # list over-allocates on its own; there is no capacity to hint
        pass

    def shrink_to(self, length: int) -> None:
        del self._items[max(length, 0) :]

    def view(self) -> ReadOnlyView[T]:
        return ReadOnlyView(self._items)

    def view_mut(self) -> MutableView[T]:
        return MutableView(self._items)

    def to_builtins(self) -> list[T]:
        """Return the builtin form used for serialization."""
        return list(self._items)

    @classmethod
    def from_builtins(cls, data: Iterable[T]) -> Self:
        """Build an adapter from its decoded builtin form."""
        return cls(list(data))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ListCollection):
            return self._items == other._items
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'ListCollection({self._items!r})'


class DequeCollection[T](LinearSizedCollection[T], Viewable[T], ViewMut[T]):
    """Double-ended queue adapter over a `collections.deque`.

    Pushes and pops happen at the right end.
    """

    __slots__ = ('_items',)

    def __init__(self, items: Iterable[T] = ()) -> None:
        if isinstance(items, deque):
            if items.maxlen is not None:
                # a bounded deque silently drops from the left on overflow
                msg = 'DequeCollection requires a deque without maxlen'
                raise ValueError(msg)
            self._items: deque[T] = items
        else:
            self._items = deque(items)

    @property
    def raw(self) -> deque[T]:
        """The wrapped deque."""
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> Option[T]:
        if not self._items:
            return Nothing
        return Some(self._items.pop())

    def reserve(self, additional: int) -> None:
        pass

    def view(self) -> ReadOnlyView[T]:
        return ReadOnlyView(self._items)

    def view_mut(self) -> MutableView[T]:
        return MutableView(self._items)

    def to_builtins(self) -> list[T]:
        """Return the builtin form used for serialization."""
        return list(self._items)

    @classmethod
    def from_builtins(cls, data: Iterable[T]) -> Self:
        """Build an adapter from its decoded builtin form."""
        return cls(deque(data))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DequeCollection):
            return self._items == other._items
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'DequeCollection({list(self._items)!r})'


def _require_char(value: object) -> None:
    if not isinstance(value, str) or len(value) != 1:
        msg = f'StringBuffer elements must be single characters, got {value!r}'
        raise TypeError(msg)


class CharView(MutableView[str]):
    """Mutable view over a `StringBuffer`; assigned values must be single characters."""

    __slots__ = ()

    def check_item(self, value: object) -> None:
        _require_char(value)


class StringBuffer(LinearSizedCollection[str], Viewable[str], ViewMut[str]):
    """Mutable character buffer; each element is a one-character string.

    Length is counted in characters (code points).

    Example:
        >>> buf = StringBuffer('hi')
        >>> buf.push('!')
        >>> str(buf)
        'hi!'
    """

    __slots__ = ('_chars',)

    def __init__(self, text: Iterable[str] = '') -> None:
        self._chars: list[str] = []
        for char in text:
            self.push(char)

    @property
    def raw(self) -> list[str]:
        """The wrapped character list."""
        return self._chars

    def __len__(self) -> int:
        return len(self._chars)

    def push(self, value: str) -> None:
        _require_char(value)
        self._chars.append(value)

    def pop(self) -> Option[str]:
        if not self._chars:
            return Nothing
        return Some(self._chars.pop())

    def reserve(self, additional: int) -> None:
        pass

    def shrink_to(self, length: int) -> None:
        del self._chars[max(length, 0) :]

    def view(self) -> ReadOnlyView[str]:
        return ReadOnlyView(self._chars)

    def view_mut(self) -> CharView:
        return CharView(self._chars)

    def to_builtins(self) -> str:
        """Return the builtin form used for serialization."""
        return ''.join(self._chars)

    @classmethod
    def from_builtins(cls, data: str) -> Self:
        """Build a buffer from its decoded builtin form."""
        return cls(data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return ''.join(self._chars)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringBuffer):
            return self._chars == other._chars
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'StringBuffer({str(self)!r})'


class ByteBuffer(LinearSizedCollection[int], Viewable[int], ViewMut[int]):
    """Byte buffer adapter over a `bytearray`; elements are ints in 0..255."""

    __slots__ = ('_data',)

    def __init__(self, data: Iterable[int] = b'') -> None:
        self._data: bytearray = data if isinstance(data, bytearray) else bytearray(data)

    @property
    def raw(self) -> bytearray:
        """The wrapped bytearray."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def push(self, value: int) -> None:
        self._data.append(value)

    def pop(self) -> Option[int]:
        if not self._data:
            return Nothing
        return Some(self._data.pop())

    def reserve(self, additional: int) -> None:
        pass

    def shrink_to(self, length: int) -> None:
        del self._data[max(length, 0) :]

    def view(self) -> ReadOnlyView[int]:
        return ReadOnlyView(self._data)

    def view_mut(self) -> MutableView[int]:
        return MutableView(self._data)

    def to_builtins(self) -> bytes:
        """Return the builtin form used for serialization."""
        return bytes(self._data)

    @classmethod
    def from_builtins(cls, data: bytes) -> Self:
        """Build a buffer from its decoded builtin form."""
        return cls(bytearray(data))

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteBuffer):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'ByteBuffer({bytes(self._data)!r})'


@dispatch_on_type
def lift(container: Any) -> LinearSizedCollection[Any]:
    """Return the LinearSizedCollection adapter for a raw container.

    Capability collections pass through unchanged. Register further
    adapters with `@lift.register(SomeType)`.

    Raises:
        NoAdapterError: If no adapter is registered for the container's type.
    """
    if isinstance(container, LinearSizedCollection):
        return container
    raise NoAdapterError(type(container))


@lift.register(list)
def _lift_list(container: list[Any]) -> ListCollection[Any]:
    return ListCollection(container)


@lift.register(deque)
def _lift_deque(container: deque[Any]) -> DequeCollection[Any]:
    return DequeCollection(container)


@lift.register(str)
def _lift_str(container: str) -> StringBuffer:
    return StringBuffer(container)


@lift.register(bytearray)
@lift.register(bytes)
def _lift_bytes(container: bytes | bytearray) -> ByteBuffer:
    return ByteBuffer(container)
