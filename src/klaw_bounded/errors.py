"""Length-range error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidBoundsError',
    'LengthRangeError',
    'LengthViolation',
    'NoAdapterError',
    'Rejected',
    'TooLarge',
    'TooLargeError',
    'TooSmall',
    'TooSmallError',
]


# --- Length-range violations ---


class TooLarge(msgspec.Struct, frozen=True, gc=False):
    """Length exceeds the upper bound - struct variant for Result[T, TooLarge]."""

    length: int
    maximum: int

    def to_exception(self) -> TooLargeError:
        """Convert to exception for raise-based code."""
        return TooLargeError(self.length, self.maximum)


class TooSmall(msgspec.Struct, frozen=True, gc=False):
    """Length is below the lower bound - struct variant for Result[T, TooSmall]."""

    length: int
    minimum: int

    def to_exception(self) -> TooSmallError:
        """Convert to exception for raise-based code."""
        return TooSmallError(self.length, self.minimum)


type LengthViolation = TooLarge | TooSmall


class LengthRangeError(ValueError):
    """A length fell outside its allowed range - exception variant.

    Raised only at raise-based boundaries (decoding, strict `inner_mut`).
    The violation struct is kept on `.violation`.
    """

    def __init__(self, violation: LengthViolation, message: str) -> None:
        self.violation = violation
        super().__init__(message)

    def to_struct(self) -> LengthViolation:
        """Convert to struct for Result-based code."""
        return self.violation


class TooLargeError(LengthRangeError):
    """Length exceeds the upper bound - exception variant."""

    def __init__(self, length: int, maximum: int) -> None:
        self.length = length
        self.maximum = maximum
        super().__init__(TooLarge(length, maximum), f'Length {length} exceeds maximum {maximum}')


class TooSmallError(LengthRangeError):
    """Length is below the lower bound - exception variant."""

    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(TooSmall(length, minimum), f'Length {length} is below minimum {minimum}')


# --- Ownership return ---


class Rejected[V](msgspec.Struct, frozen=True):
    """Failure payload handing a rejected value back to the caller.

    `value` is the candidate collection for a refused construction, or the
    element for a refused push. Nothing is dropped on failure.
    """

    violation: LengthViolation
    value: V


# --- Contract errors ---


class InvalidBoundsError(TypeError):
    """A bounded type was specialized with an impossible length range.

    No instance of such a type can exist, so this is raised rather than
    returned.
    """

    def __init__(self, minimum: object, maximum: object) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f'Invalid length bounds [{minimum!r}, {maximum!r}]: need 0 <= MIN <= MAX <= sys.maxsize')


class NoAdapterError(TypeError):
    """Raised when no collection adapter is registered for a type."""

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        super().__init__(f"No linear collection adapter for type '{value_type.__name__}'")
