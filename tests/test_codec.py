"""Tests for JSON/MessagePack encoding of bounded collections."""

from __future__ import annotations

from collections import deque

import msgspec
import pytest
from hypothesis import given
from klaw_bounded import (
    Bounded,
    ByteBuffer,
    DequeCollection,
    FixedSize,
    LengthRangeError,
    ListCollection,
    NonEmpty,
    StringBuffer,
    TooLargeError,
    TooSmallError,
    dec_hook,
    decode,
    enc_hook,
    encode,
)

from tests.strategies import fitting_lists

Tags = Bounded[1, 3]


class Post(msgspec.Struct):
    title: str
    tags: Tags  # type: ignore[valid-type]


class Digest(FixedSize[4]):  # type: ignore[misc]
    __slots__ = ()
    collection_type = ByteBuffer


class Signed(msgspec.Struct):
    body: str
    digest: Digest


class TestEncode:
    """Tests for encode()."""

    def test_json_matches_inner_builtins(self) -> None:
        bounded = Tags.new(['a', 'b']).unwrap()
        assert encode(bounded) == b'["a","b"]'

    def test_msgpack_matches_inner_builtins(self) -> None:
        bounded = Tags.new([1, 2]).unwrap()
        assert encode(bounded, format='msgpack') == msgspec.msgpack.encode([1, 2])

    def test_string_encodes_as_string(self) -> None:
        assert encode(NonEmpty.new('hi').unwrap()) == b'"hi"'

    def test_bytes_encode_as_bytes(self) -> None:
        bounded = NonEmpty.new(b'\x01\x02').unwrap()
        assert encode(bounded, format='msgpack') == msgspec.msgpack.encode(b'\x01\x02')

    def test_deque_encodes_as_array(self) -> None:
        assert encode(Tags.new(deque([1])).unwrap()) == b'[1]'


class TestDecode:
    """Tests for decode()."""

    def test_json(self) -> None:
        bounded = decode(b'["a","b"]', Tags)

        assert type(bounded) is Tags
        assert bounded.inner() == ListCollection(['a', 'b'])

    def test_msgpack(self) -> None:
        data = msgspec.msgpack.encode([1, 2, 3])
        bounded = decode(data, Tags, format='msgpack')

        assert list(bounded) == [1, 2, 3]

    def test_too_large_raises(self) -> None:
        with pytest.raises(TooLargeError) as exc_info:
            decode(b'[1,2,3,4]', Tags)

        assert exc_info.value.length == 4
        assert exc_info.value.maximum == 3

    def test_too_small_raises(self) -> None:
        with pytest.raises(TooSmallError):
            decode(b'[]', Tags)

    def test_never_truncates_or_pads(self) -> None:
        with pytest.raises(LengthRangeError):
            decode(b'[1,2,3]', FixedSize[2])

    def test_element_type_is_validated(self) -> None:
        assert list(decode(b'[1,2]', Tags, element_type=int)) == [1, 2]

        with pytest.raises(msgspec.ValidationError):
            decode(b'["x"]', Tags, element_type=int)

    def test_malformed_data(self) -> None:
        with pytest.raises(msgspec.DecodeError):
            decode(b'[1,', Tags)

    def test_collection_type(self) -> None:
        bounded = decode(b'[1]', Tags, collection_type=DequeCollection)
        assert isinstance(bounded.inner(), DequeCollection)

    def test_string_buffer(self) -> None:
        bounded = decode(b'"abc"', Tags, collection_type=StringBuffer)
        assert str(bounded.inner()) == 'abc'

    def test_string_length_is_checked(self) -> None:
        with pytest.raises(TooLargeError):
            decode(b'"abcd"', Tags, collection_type=StringBuffer)

    def test_byte_buffer(self) -> None:
        data = msgspec.msgpack.encode(b'ab')
        bounded = decode(data, Tags, collection_type=ByteBuffer, format='msgpack')

        assert bounded.inner() == ByteBuffer(b'ab')

    def test_declared_collection_type(self) -> None:
        bounded = decode(msgspec.json.encode(b'\x00\x01\xfe\xff'), Digest)

        assert type(bounded) is Digest
        assert bounded.inner() == ByteBuffer(b'\x00\x01\xfe\xff')

    def test_round_trip_preserves_type(self) -> None:
        original = NonEmpty.new(['x']).unwrap()
        restored = decode(encode(original, format='msgpack'), NonEmpty, format='msgpack')

        assert restored == original

    @given(case=fitting_lists())
    def test_round_trip(self, case: tuple[tuple[int, int], list[int]]) -> None:
        (minimum, maximum), items = case
        bounded_type = Bounded[minimum, maximum]
        bounded = bounded_type.new(items).unwrap()

        assert decode(encode(bounded), bounded_type, element_type=int) == bounded


class TestHooks:
    """Tests for bounded fields inside msgspec structs."""

    def test_encode_struct_field(self) -> None:
        post = Post(title='hello', tags=Tags.new(['a']).unwrap())
        data = msgspec.json.encode(post, enc_hook=enc_hook)

        assert data == b'{"title":"hello","tags":["a"]}'

    def test_decode_struct_field(self) -> None:
        post = msgspec.json.decode(b'{"title":"t","tags":["a","b"]}', type=Post, dec_hook=dec_hook)

        assert type(post.tags) is Tags
        assert list(post.tags) == ['a', 'b']

    def test_decode_string_field(self) -> None:
        class Named(msgspec.Struct):
            name: NonEmpty  # type: ignore[valid-type]

        named = msgspec.json.decode(b'{"name":"ab"}', type=Named, dec_hook=dec_hook)
        assert isinstance(named.name.inner(), StringBuffer)

    def test_misfit_field_is_validation_error(self) -> None:
        with pytest.raises(msgspec.ValidationError, match='below minimum 1'):
            msgspec.json.decode(b'{"title":"t","tags":[]}', type=Post, dec_hook=dec_hook)

    def test_msgpack_struct_round_trip(self) -> None:
        post = Post(title='t', tags=Tags.new([1, 2]).unwrap())
        data = msgspec.msgpack.encode(post, enc_hook=enc_hook)
        restored = msgspec.msgpack.decode(data, type=Post, dec_hook=dec_hook)

        assert restored == post

    def test_json_struct_round_trip_with_bytes(self) -> None:
        signed = Signed(body='b', digest=Digest.new(b'\x00\x01\xfe\xff').unwrap())
        data = msgspec.json.encode(signed, enc_hook=enc_hook)
        restored = msgspec.json.decode(data, type=Signed, dec_hook=dec_hook)

        assert data == b'{"body":"b","digest":"AAH+/w=="}'
        assert restored == signed
        assert isinstance(restored.digest.inner(), ByteBuffer)

    def test_declared_bytes_length_is_checked(self) -> None:
        with pytest.raises(msgspec.ValidationError, match='below minimum 4'):
            msgspec.json.decode(b'{"body":"b","digest":"YWJj"}', type=Signed, dec_hook=dec_hook)

    def test_invalid_base64_is_validation_error(self) -> None:
        with pytest.raises(msgspec.ValidationError):
            msgspec.json.decode(b'{"body":"b","digest":"not base64!"}', type=Signed, dec_hook=dec_hook)

    def test_declared_type_mismatch(self) -> None:
        with pytest.raises(TypeError, match='Expected bytes for ByteBuffer'):
            dec_hook(Digest, [1, 2, 3, 4])

    def test_unsupported_types(self) -> None:
        with pytest.raises(NotImplementedError):
            enc_hook(object())
        with pytest.raises(NotImplementedError):
            dec_hook(complex, 1)

    def test_unsupported_payload(self) -> None:
        with pytest.raises(TypeError, match='Expected an array'):
            dec_hook(Tags, 5)
