"""Tests for the Ok/Err and Some/Nothing outcome types."""

import pytest
from klaw_bounded import Err, Nothing, NothingType, Ok, Some


class TestOk:
    """Tests for the Ok variant."""

    def test_querying(self):
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_unwrap(self):
        assert Ok(42).unwrap() == 42
        assert Ok(42).unwrap_or(0) == 42
        assert Ok(42).expect('unused') == 42

    def test_unwrap_err_raises(self):
        with pytest.raises(RuntimeError, match='Called unwrap_err on Ok'):
            Ok(42).unwrap_err()

    def test_map(self):
        assert Ok(2).map(lambda x: x * 10) == Ok(20)
        assert Ok(2).map_err(str) == Ok(2)

    def test_to_option(self):
        assert Ok(3).ok() == Some(3)
        assert Ok(3).err() is Nothing

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]


class TestErr:
    """Tests for the Err variant."""

    def test_querying(self):
        assert Err('e').is_err() is True
        assert Err('e').is_ok() is False

    def test_unwrap_raises(self):
        with pytest.raises(RuntimeError, match="Called unwrap on Err: 'boom'"):
            Err('boom').unwrap()

    def test_expect_raises_with_message(self):
        with pytest.raises(RuntimeError, match="push failed: 'boom'"):
            Err('boom').expect('push failed')

    def test_unwrap_err_and_default(self):
        assert Err('boom').unwrap_err() == 'boom'
        assert Err('boom').unwrap_or(7) == 7

    def test_map(self):
        assert Err('x').map(lambda v: v + 1) == Err('x')
        assert Err('x').map_err(str.upper) == Err('X')

    def test_to_option(self):
        assert Err('x').ok() is Nothing
        assert Err('x').err() == Some('x')


class TestSome:
    """Tests for the Some variant."""

    def test_querying(self):
        assert Some(1).is_some() is True
        assert Some(1).is_none() is False

    def test_wraps_none(self):
        assert Some(None) != Nothing
        assert Some(None).unwrap() is None

    def test_unwrap_family(self):
        assert Some(5).unwrap() == 5
        assert Some(5).unwrap_or(0) == 5
        assert Some(5).unwrap_or_else(lambda: 0) == 5
        assert Some(5).expect('unused') == 5

    def test_map_and_ok_or(self):
        assert Some(5).map(str) == Some('5')
        assert Some(5).ok_or('missing') == Ok(5)


class TestNothing:
    """Tests for the Nothing singleton."""

    def test_singleton_equality(self):
        assert Nothing == NothingType()
        assert hash(Nothing) == hash(NothingType())

    def test_querying(self):
        assert Nothing.is_none() is True
        assert Nothing.is_some() is False

    def test_unwrap_raises(self):
        with pytest.raises(RuntimeError, match='Called unwrap on Nothing'):
            Nothing.unwrap()

    def test_expect_raises_with_message(self):
        with pytest.raises(RuntimeError, match='at lower bound'):
            Nothing.expect('at lower bound')

    def test_defaults(self):
        assert Nothing.unwrap_or(0) == 0
        assert Nothing.unwrap_or_else(lambda: 9) == 9
        assert Nothing.map(str) is Nothing
        assert Nothing.ok_or('missing') == Err('missing')


class TestPatternMatching:
    """Outcome types support structural pattern matching."""

    def test_match_result(self):
        match Ok(3):
            case Ok(value):
                assert value == 3
            case Err(_):
                pytest.fail('expected Ok')

    def test_match_option(self):
        match Nothing:
            case Some(_):
                pytest.fail('expected Nothing')
            case NothingType():
                pass
