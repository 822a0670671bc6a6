"""JSON and MessagePack encoding of bounded collections via msgspec.

A bounded collection encodes exactly as its inner collection's builtin form
(`list`, `str` or `bytes`). Decoding re-validates the length range and
never truncates or pads: a misfit raises `LengthRangeError`.

Usage:
    >>> from klaw_bounded import Bounded
    >>> Tags = Bounded[1, 3]
    >>> data = encode(Tags.new(['a', 'b']).unwrap())
    >>> data
    b'["a","b"]'
    >>> decode(data, Tags)
    Bounded[1, 3](ListCollection(['a', 'b']))

`enc_hook` and `dec_hook` also let bounded types appear as fields of
`msgspec.Struct` models; there a misfit surfaces as
`msgspec.ValidationError`:

    class Post(msgspec.Struct):
        tags: Bounded[1, 3]

    msgspec.json.decode(b'{"tags": []}', type=Post, dec_hook=dec_hook)
    # msgspec.ValidationError: Length 0 is below minimum 1 - at `$.tags`

A struct field that holds bytes must declare its adapter, since JSON
carries bytes as base64 text that would otherwise decode as a string:

    class Digest(FixedSize[4]):
        __slots__ = ()
        collection_type = ByteBuffer
"""

from __future__ import annotations

import base64
from typing import Any, Literal

import msgspec

from klaw_bounded.adapters import ByteBuffer, ListCollection, StringBuffer
from klaw_bounded.bounded import Bounded
from klaw_bounded.result import Err

__all__ = [
    'dec_hook',
    'decode',
    'enc_hook',
    'encode',
]

type Format = Literal['json', 'msgpack']


def _to_builtins(bounded: Bounded) -> Any:
    collection = bounded.inner()
    to_builtins = getattr(collection, 'to_builtins', None)
    if to_builtins is not None:
        return to_builtins()
    return list(collection)  # type: ignore[call-overload]


def _builtin_kind(collection_type: type) -> type:
    """Return the builtin container a collection type serializes to."""
    if issubclass(collection_type, StringBuffer):
        return str
    if issubclass(collection_type, ByteBuffer):
        return bytes
    return list


def _builtin_type(collection_type: type, element_type: Any) -> Any:
    """Return the msgspec type a collection type's builtin form decodes as."""
    kind = _builtin_kind(collection_type)
    return list[element_type] if kind is list else kind


def _collection_for(bounded_type: type[Bounded], obj: Any) -> Any:
    """Rebuild the inner collection of a value decoded inside a struct.

    Without a declared `collection_type`, strings become `StringBuffer` and
    arrays become `ListCollection`.
    """
    collection_type = bounded_type.collection_type
    if collection_type is None:
        if isinstance(obj, str):
            return StringBuffer.from_builtins(obj)
        if isinstance(obj, bytes | bytearray):
            return ByteBuffer.from_builtins(obj)
        if isinstance(obj, list):
            return ListCollection.from_builtins(obj)
        msg = f'Expected an array, string or bytes, got {type(obj).__name__}'
        raise TypeError(msg)

    if issubclass(collection_type, ByteBuffer) and isinstance(obj, str):
        # JSON carries bytes as base64 text
        obj = base64.b64decode(obj, validate=True)
    expected = _builtin_kind(collection_type)
    if not isinstance(obj, expected):
        msg = f'Expected {expected.__name__} for {collection_type.__name__}, got {type(obj).__name__}'
        raise TypeError(msg)
    return collection_type.from_builtins(obj)


def _validated[B: Bounded](bounded_type: type[B], collection: Any) -> B:
    match bounded_type.new(collection):
        case Err(rejected):
            raise rejected.violation.to_exception()
        case ok:
            return ok.unwrap()


def enc_hook(obj: Any) -> Any:
    """msgspec encode hook: bounded collections encode as their builtin form."""
    if isinstance(obj, Bounded):
        return _to_builtins(obj)
    msg = f'Objects of type {type(obj).__name__} are not supported'
    raise NotImplementedError(msg)


def dec_hook(type_: type, obj: Any) -> Any:
    """msgspec decode hook: rebuild and re-validate bounded collections.

    Raises:
        LengthRangeError: If the decoded value does not fit the bounds
            (reported by msgspec as a ValidationError).
        TypeError: If the payload is not the builtin form of the declared
            `collection_type`.
    """
    if isinstance(type_, type) and issubclass(type_, Bounded):
        return _validated(type_, _collection_for(type_, obj))
    msg = f'Objects of type {type_!r} are not supported'
    raise NotImplementedError(msg)


def encode(bounded: Bounded, *, format: Format = 'json') -> bytes:  # noqa: A002
    """Encode a bounded collection as JSON or MessagePack.

    Args:
        bounded: The bounded collection to encode.
        format: "json" or "msgpack".

    Returns:
        The encoded bytes, identical to encoding the inner builtin form.
    """
    builtins = _to_builtins(bounded)
    if format == 'msgpack':
        return msgspec.msgpack.encode(builtins)
    return msgspec.json.encode(builtins)


def decode[B: Bounded](
    data: bytes | str,
    bounded_type: type[B],
    *,
    collection_type: type | None = None,
    element_type: Any = Any,
    format: Format = 'json',  # noqa: A002
) -> B:
    """Decode JSON or MessagePack into a bounded collection.

    Args:
        data: The encoded bytes.
        bounded_type: The specialized Bounded class to decode into.
        collection_type: Adapter class providing `from_builtins`. Defaults to
            `bounded_type.collection_type`, then `ListCollection`.
        element_type: Element type for list-based adapters, validated by msgspec.
        format: "json" or "msgpack".

    Returns:
        The decoded bounded collection.

    Raises:
        msgspec.DecodeError: If the data is malformed.
        msgspec.ValidationError: If elements don't match `element_type`.
        LengthRangeError: If the decoded length is outside the bounds.
    """
    if collection_type is None:
        collection_type = bounded_type.collection_type or ListCollection
    target = _builtin_type(collection_type, element_type)
    if format == 'msgpack':
        builtins = msgspec.msgpack.decode(data, type=target)
    else:
        builtins = msgspec.json.decode(data, type=target)
    return _validated(bounded_type, collection_type.from_builtins(builtins))

