"""Bounded: a linear collection whose length stays within [MIN, MAX].

Bounds are part of the type. `Bounded[MIN, MAX]` returns a specialized
subclass, cached so that equal bounds give the same class and different
bounds give different, non-interchangeable classes:

    >>> Pair = Bounded[2, 2]
    >>> Pair is FixedSize[2]
    True
    >>> Pair.new([1, 2]).unwrap()
    Bounded[2, 2](ListCollection([1, 2]))

Between public operations `MIN <= len(inner()) <= MAX` always holds. Range
violations are returned as `Err`/`Nothing` values together with whatever
the caller handed in; only an impossible range (`MIN > MAX`) raises.

Instances are not thread-safe. A wrapper exclusively owns its collection;
sharing one wrapper between threads needs external locking.
"""

from __future__ import annotations

import copy
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, ClassVar, Final, Self

from klaw_bounded._config import get_config
from klaw_bounded._logging import get_logger, is_logging_enabled
from klaw_bounded.adapters import ListCollection, lift
from klaw_bounded.collection import LinearSizedCollection, ViewMut, Viewable
from klaw_bounded.errors import InvalidBoundsError, LengthViolation, Rejected, TooLarge, TooSmall
from klaw_bounded.result import Err, Nothing, Ok, Option, Result
from klaw_bounded.views import MutableView, ReadOnlyView

__all__ = [
    'UNBOUNDED',
    'Bounded',
    'FixedSize',
    'NonEmpty',
    'NonEmptyString',
]

UNBOUNDED: Final[int] = sys.maxsize
"""Conventional MAX for ranges without a ceiling."""

_specializations: dict[tuple[int, int], type[Bounded]] = {}


def _debug(event: str, **fields: Any) -> None:
    if is_logging_enabled():
        get_logger('klaw_bounded').debug(event, **fields)


def _validate_bounds(minimum: object, maximum: object) -> tuple[int, int]:
    for bound in (minimum, maximum):
        if not isinstance(bound, int) or isinstance(bound, bool):
            raise InvalidBoundsError(minimum, maximum)
    if not 0 <= minimum <= maximum <= UNBOUNDED:  # type: ignore[operator]
        raise InvalidBoundsError(minimum, maximum)
    return minimum, maximum  # type: ignore[return-value]


def _format_max(maximum: int) -> str:
    return 'UNBOUNDED' if maximum == UNBOUNDED else str(maximum)


def _none() -> None:
    return None


class _Consumed:
    """Placeholder left behind by `into_inner()`."""

    def __repr__(self) -> str:
        return '<consumed>'


_CONSUMED: Final = _Consumed()


class Bounded:
    """A linear collection with a length range fixed by its type.

    Specialize with `Bounded[MIN, MAX]` before use. Build instances through
    `new` (validating), `fit`/`fit_with` (normalizing) or `default`.

    Raw built-in containers are accepted wherever a collection is expected
    and wrapped with `lift()`; a list is wrapped in place, so the wrapper and
    the caller's list are the same storage.

    Example:
        ```python
        Slot = Bounded[0, 1]

        slot = Slot.new([]).unwrap()
        slot.push('a')            # Ok(None)
        match slot.push('b'):
            case Err(Rejected(TooLarge(), value)):
                print(f'{value} did not fit')
        ```

    Attributes:
        min_len: Lower length bound (class attribute).
        max_len: Upper length bound (class attribute).
        collection_type: Adapter class decoders rebuild the inner
            collection with. Declare it on a subclass of a specialization:

                class Digest(FixedSize[32]):
                    __slots__ = ()
                    collection_type = ByteBuffer
    """

    __slots__ = ('_collection',)

    min_len: ClassVar[int]
    max_len: ClassVar[int]
    collection_type: ClassVar[type | None] = None

    def __class_getitem__(cls, bounds: tuple[int, int]) -> type[Bounded]:
        """Return the subclass for the length range `[MIN, MAX]`.

        Raises:
            InvalidBoundsError: If the bounds are not integers with 0 <= MIN <= MAX <= UNBOUNDED.
            TypeError: If the class is already specialized.
        """
        if getattr(cls, '_specialized', False):
            msg = f'{cls.__name__} is already specialized'
            raise TypeError(msg)
        if not isinstance(bounds, tuple) or len(bounds) != 2:
            msg = 'Bounded[...] takes exactly two bounds: Bounded[MIN, MAX]'
            raise TypeError(msg)
        minimum, maximum = _validate_bounds(*bounds)

        specialized = _specializations.get((minimum, maximum))
        if specialized is None:
            name = f'Bounded[{minimum}, {_format_max(maximum)}]'
            specialized = type(
                name,
                (cls,),
                {
                    '__slots__': (),
                    '__module__': cls.__module__,
                    '__qualname__': name,
                    '_specialized': True,
                    'min_len': minimum,
                    'max_len': maximum,
                },
            )
            _specializations[(minimum, maximum)] = specialized
        return specialized

    def __init__(self, collection: Any) -> None:
        """Wrap `collection`, raising if its length is out of range.

        This is the raise-based counterpart of `new()`.

        Raises:
            LengthRangeError: If the collection does not fit.
        """
        self._require_specialized()
        lifted = lift(collection)
        match self.check(lifted):
            case Err(violation):
                raise violation.to_exception()
            case _:
                self._collection = lifted

    @classmethod
    def _require_specialized(cls) -> None:
        if not getattr(cls, '_specialized', False):
            msg = 'Bounded must be specialized with bounds first, e.g. Bounded[1, 5]'
            raise TypeError(msg)

    @classmethod
    def _wrap(cls, collection: LinearSizedCollection[Any]) -> Self:
        """Wrap a collection already known to fit."""
        instance = cls.__new__(cls)
        instance._collection = collection
        return instance

    # --- Construction ---

    @classmethod
    def new(cls, collection: Any) -> Result[Self, Rejected[Any]]:
        """Wrap `collection` if its length lies within the bounds.

        Returns:
            `Ok(wrapper)`, or `Err(Rejected(violation, collection))` handing
            back the very object passed in, unmodified.
        """
        cls._require_specialized()
        lifted = lift(collection)
        match cls.check(lifted):
            case Err(violation):
                _debug('bounded.rejected', bounds=cls.__name__, length=len(lifted), violation=type(violation).__name__)
                return Err(Rejected(violation, collection))
            case _:
                return Ok(cls._wrap(lifted))

    @classmethod
    def fit_with(cls, collection: Any, fill: Callable[[], Any]) -> Self:
        """Wrap `collection`, shrinking or growing it into range first.

        See `make_fit_with` for the normalization policy.
        """
        cls._require_specialized()
        lifted = lift(collection)
        match cls.check(lifted):
            case Err(violation):
                cls.make_fit_with(lifted, violation, fill)
        return cls._wrap(lifted)

    @classmethod
    def fit(cls, collection: Any, value: Any) -> Self:
        """Like `fit_with`, growing with shallow copies of `value`."""
        return cls.fit_with(collection, lambda: copy.copy(value))

    @classmethod
    def default(
        cls,
        fill: Callable[[], Any] = _none,
        collection_factory: Callable[[], Any] = ListCollection,
    ) -> Self:
        """Create a wrapper holding exactly `min_len` elements made by `fill`."""
        cls._require_specialized()
        collection = lift(collection_factory())
        collection.extend_to_with(cls.min_len, fill)
        match cls.check(collection):
            case Err(violation):
                cls.make_fit_with(collection, violation, fill)
        return cls._wrap(collection)

    # --- Fit check and normalization ---

    @classmethod
    def check(cls, collection: Any) -> Result[None, LengthViolation]:
        """Report whether `collection` fits the bounds, without touching it."""
        cls._require_specialized()
        length = len(collection)
        if length > cls.max_len:
            return Err(TooLarge(length, cls.max_len))
        if length < cls.min_len:
            return Err(TooSmall(length, cls.min_len))
        return Ok(None)

    @classmethod
    def make_fit_with(
        cls,
        collection: LinearSizedCollection[Any],
        violation: LengthViolation,
        fill: Callable[[], Any],
    ) -> None:
        """Heal a violation in place.

        Too large shrinks to `min_len`; too small grows to `max_len`, or to
        `min_len` when there is no ceiling (`UNBOUNDED`).
        """
        before = len(collection)
        match violation:
            case TooLarge():
                collection.shrink_to(cls.min_len)
                action = 'shrink'
            case TooSmall():
                target = cls.min_len if cls.max_len == UNBOUNDED else cls.max_len
                collection.extend_to_with(target, fill)
                action = 'extend'
        _debug(
            'bounded.fit',
            bounds=cls.__name__,
            action=action,
            before=before,
            after=len(collection),
            min_len=cls.min_len,
            max_len=cls.max_len,
        )

    @classmethod
    def make_fit(cls, collection: LinearSizedCollection[Any], violation: LengthViolation, value: Any) -> None:
        """Like `make_fit_with`, growing with shallow copies of `value`."""
        cls.make_fit_with(collection, violation, lambda: copy.copy(value))

    # --- Access ---

    def _require(self) -> LinearSizedCollection[Any]:
        collection = self._collection
        if collection is _CONSUMED:
            msg = f'{type(self).__name__} was consumed by into_inner()'
            raise RuntimeError(msg)
        return collection

    def inner(self) -> LinearSizedCollection[Any]:
        """Return the wrapped collection for reading.

        Mutating it directly can break the length invariant; use `mutate`
        or `inner_mut` for that.
        """
        return self._require()

    @contextmanager
    def inner_mut(self) -> Iterator[LinearSizedCollection[Any]]:
        """Borrow the wrapped collection for unrestricted mutation.

        The block must leave the length within bounds. On a clean exit the
        length is checked: a violation is logged as a warning, and raised
        as `LengthRangeError` when `strict_inner_mut` is configured.

        Example:
            ```python
            with bounded.inner_mut() as items:
                items.raw.insert(0, 'first')
                items.pop()
            ```
        """
        collection = self._require()
        yield collection
        match self.check(collection):
            case Err(violation):
                if is_logging_enabled():
                    get_logger('klaw_bounded').warning(
                        'bounded.inner_mut_violation',
                        bounds=type(self).__name__,
                        length=len(collection),
                        violation=type(violation).__name__,
                    )
                if get_config().strict_inner_mut:
                    raise violation.to_exception()

    def view(self) -> ReadOnlyView[Any]:
        """Return a read-only view of the elements.

        Raises:
            TypeError: If the collection has no read-only view.
        """
        collection = self._require()
        if not isinstance(collection, Viewable):
            msg = f'{type(collection).__name__} does not provide a view'
            raise TypeError(msg)
        return collection.view()

    def view_mut(self) -> MutableView[Any]:
        """Return a length-stable mutable view of the elements.

        Raises:
            TypeError: If the collection has no mutable view.
        """
        collection = self._require()
        if not isinstance(collection, ViewMut):
            msg = f'{type(collection).__name__} does not provide a mutable view'
            raise TypeError(msg)
        return collection.view_mut()

    def into_inner(self) -> LinearSizedCollection[Any]:
        """Unwrap the collection; the wrapper cannot be used afterwards."""
        collection = self._require()
        self._collection = _CONSUMED
        return collection

    # --- Mutation ---

    def mutate(self, fill: Callable[[], Any], mutator: Callable[[LinearSizedCollection[Any]], object]) -> None:
        """Apply `mutator` to the collection, then restore the invariant.

        The collection may leave the range while `mutator` runs. Afterwards
        it is normalized with `make_fit_with`, growing with `fill`.

        Example:
            ```python
            triple = FixedSize[3].new([1, 2, 3]).unwrap()
            triple.mutate(lambda: 0, lambda items: items.raw.extend([4, 5]))
            len(triple)
            # 3
            ```
        """
        collection = self._require()
        mutator(collection)
        match self.check(collection):
            case Err(violation):
                self.make_fit_with(collection, violation, fill)

    def push(self, value: Any) -> Result[None, Rejected[Any]]:
        """Append `value` unless the collection is already at `max_len`.

        Returns:
            `Ok(None)`, or `Err(Rejected(TooLarge(...), value))` handing the
            value back.
        """
        collection = self._require()
        length = len(collection)
        if length >= self.max_len:
            _debug('bounded.push_refused', bounds=type(self).__name__, length=length)
            return Err(Rejected(TooLarge(length + 1, self.max_len), value))
        collection.push(value)
        return Ok(None)

    def pop(self) -> Option[Any]:
        """Remove the last element unless the collection is at `min_len`.

        Returns `Nothing` at the lower bound even when the collection itself
        could still pop.
        """
        collection = self._require()
        length = len(collection)
        if length <= self.min_len:
            _debug('bounded.pop_refused', bounds=type(self).__name__, length=length)
            return Nothing
        return collection.pop()

    # --- Protocols ---

    def __len__(self) -> int:
        return len(self._require())

    def __iter__(self) -> Iterator[Any]:
        return iter(self._require())  # type: ignore[call-overload]

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._collection == other._collection  # type: ignore[attr-defined]
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._collection!r})'

    def __reduce__(self) -> tuple[Any, ...]:
        cls = type(self)
        if _specializations.get((cls.min_len, cls.max_len)) is cls:
            return (_rebuild, (cls.min_len, cls.max_len, self._require()))
        return (cls._wrap, (self._require(),))


def _rebuild(minimum: int, maximum: int, collection: LinearSizedCollection[Any]) -> Bounded:
    """Unpickle a wrapper; the dynamic subclass is recreated from its bounds."""
    return Bounded[minimum, maximum]._wrap(collection)


class FixedSize:
    """Factory for exact-length ranges: `FixedSize[N]` is `Bounded[N, N]`."""

    def __new__(cls, *args: Any, **kwargs: Any) -> Any:
        msg = 'FixedSize cannot be instantiated; use FixedSize[N]'
        raise TypeError(msg)

    def __class_getitem__(cls, size: int) -> type[Bounded]:
        return Bounded[size, size]


NonEmpty: Final = Bounded[1, UNBOUNDED]
"""Collections holding at least one element."""

NonEmptyString: Final = NonEmpty
"""Non-empty `StringBuffer`s, e.g. `NonEmptyString.new('text')`."""
