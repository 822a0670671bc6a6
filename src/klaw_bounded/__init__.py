"""klaw-bounded: linear collections with a length range fixed by their type.

Flat imports (preferred):
    from klaw_bounded import Bounded, NonEmpty, FixedSize, UNBOUNDED
    from klaw_bounded import Ok, Err, Some, Nothing, Rejected, TooLarge, TooSmall

Submodule imports (for organization):
    from klaw_bounded.bounded import Bounded
    from klaw_bounded.collection import LinearSizedCollection
    from klaw_bounded.adapters import ListCollection, lift
    from klaw_bounded.codec import encode, decode
    from klaw_bounded.testing import CompleteSuite
"""

# Configuration and logging
from klaw_bounded._config import BoundedConfig, get_config, init
from klaw_bounded._logging import configure_logging, get_logger

# Adapters
from klaw_bounded.adapters import (
    ByteBuffer,
    CharView,
    DequeCollection,
    ListCollection,
    StringBuffer,
    lift,
)

# Bounded wrapper
from klaw_bounded.bounded import (
    UNBOUNDED,
    Bounded,
    FixedSize,
    NonEmpty,
    NonEmptyString,
)

# Codec
from klaw_bounded.codec import dec_hook, decode, enc_hook, encode

# Capability protocols
from klaw_bounded.collection import LinearSizedCollection, Viewable, ViewMut

# Errors
from klaw_bounded.errors import (
    InvalidBoundsError,
    LengthRangeError,
    LengthViolation,
    NoAdapterError,
    Rejected,
    TooLarge,
    TooLargeError,
    TooSmall,
    TooSmallError,
)

# Outcome types
from klaw_bounded.result import Err, Nothing, NothingType, Ok, Option, Result, Some

# Views
from klaw_bounded.views import MutableView, ReadOnlyView

__all__ = [
    'UNBOUNDED',
    'Bounded',
    'BoundedConfig',
    'ByteBuffer',
    'CharView',
    'DequeCollection',
    'Err',
    'FixedSize',
    'InvalidBoundsError',
    'LengthRangeError',
    'LengthViolation',
    'LinearSizedCollection',
    'ListCollection',
    'MutableView',
    'NoAdapterError',
    'NonEmpty',
    'NonEmptyString',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'ReadOnlyView',
    'Rejected',
    'Result',
    'Some',
    'StringBuffer',
    'TooLarge',
    'TooLargeError',
    'TooSmall',
    'TooSmallError',
    'ViewMut',
    'Viewable',
    'configure_logging',
    'dec_hook',
    'decode',
    'enc_hook',
    'encode',
    'get_config',
    'get_logger',
    'init',
    'lift',
]
