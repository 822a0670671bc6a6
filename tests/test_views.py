"""Tests for read-only and mutable element views."""

from collections import deque

import pytest
from klaw_bounded import Bounded, CharView, FixedSize, ListCollection, MutableView, ReadOnlyView, StringBuffer, encode


class TestReadOnlyView:
    """Tests for ReadOnlyView."""

    def test_indexing(self):
        view = ReadOnlyView([1, 2, 3])
        assert view[0] == 1
        assert view[-1] == 3
        assert len(view) == 3

    def test_slicing_returns_list(self):
        view = ReadOnlyView(deque([1, 2, 3, 4]))
        assert view[1:3] == [2, 3]
        assert view[::-1] == [4, 3, 2, 1]

    def test_sequence_mixins(self):
        view = ReadOnlyView([1, 2, 2])
        assert 2 in view
        assert view.count(2) == 2
        assert view.index(2) == 1
        assert list(reversed(view)) == [2, 2, 1]

    def test_reflects_backing_changes(self):
        data = [1]
        view = ReadOnlyView(data)
        data.append(2)

        assert list(view) == [1, 2]

    def test_no_mutation(self):
        view = ReadOnlyView([1])
        with pytest.raises(TypeError):
            view[0] = 2  # type: ignore[index]

    def test_equality(self):
        assert ReadOnlyView([1, 2]) == [1, 2]
        assert ReadOnlyView([1, 2]) == ReadOnlyView((1, 2))
        assert ReadOnlyView([1, 2]) != [1]
        assert ReadOnlyView(['a']) != 'a'

    def test_repr(self):
        assert repr(ReadOnlyView(deque([1]))) == 'ReadOnlyView([1])'


class TestMutableView:
    """Tests for MutableView."""

    def test_setitem(self):
        data = [1, 2, 3]
        MutableView(data)[1] = 20

        assert data == [1, 20, 3]

    def test_slice_assignment_same_length(self):
        data = [1, 2, 3, 4]
        view = MutableView(data)
        view[::2] = ['a', 'b']

        assert data == ['a', 2, 'b', 4]

    def test_slice_assignment_cannot_change_length(self):
        data = [1, 2, 3]
        view = MutableView(data)

        with pytest.raises(ValueError, match='would change the length'):
            view[0:2] = [1]
        assert data == [1, 2, 3]

    def test_swap(self):
        data = [1, 2, 3]
        MutableView(data).swap(0, 2)

        assert data == [3, 2, 1]

    def test_reverse(self):
        data = deque([1, 2, 3, 4, 5])
        MutableView(data).reverse()

        assert list(data) == [5, 4, 3, 2, 1]

    def test_no_length_changing_methods(self):
        view = MutableView([1])
        for name in ('append', 'insert', 'pop', 'remove', 'extend', 'clear', '__delitem__'):
            assert not hasattr(view, name)

    def test_is_read_only_view(self):
        assert isinstance(MutableView([]), ReadOnlyView)


class TestViewsThroughBounded:
    """Views handed out by bounded wrappers keep the length invariant."""

    def test_view_reads_elements(self):
        bounded = Bounded[1, 3].new([1, 2]).unwrap()
        assert bounded.view() == [1, 2]

    def test_view_mut_edits_in_place(self):
        items = [3, 1, 2]
        bounded = Bounded[3, 3].new(items).unwrap()

        view = bounded.view_mut()
        view.reverse()
        view[0] = 9

        assert items == [9, 1, 3]
        assert len(bounded) == 3

    def test_string_view(self):
        bounded = Bounded[1, 10].new(StringBuffer('abc')).unwrap()
        view = bounded.view_mut()
        view[0] = 'z'

        assert str(bounded.inner()) == 'zbc'

    def test_view_of_adapter(self):
        assert ListCollection([1]).view() == [1]


class TestCharView:
    """String buffers hand out views that only store single characters."""

    def test_view_type(self):
        assert isinstance(StringBuffer('ab').view_mut(), CharView)

    def test_single_character_assignment(self):
        buffer = StringBuffer('ab')
        buffer.view_mut()[0] = 'z'

        assert str(buffer) == 'zb'

    def test_multi_character_assignment_raises(self):
        buffer = StringBuffer('ab')

        with pytest.raises(TypeError, match='single characters'):
            buffer.view_mut()[0] = 'xyz'
        assert str(buffer) == 'ab'
        assert len(buffer) == 2

    def test_non_string_assignment_raises(self):
        with pytest.raises(TypeError, match='single characters'):
            StringBuffer('ab').view_mut()[1] = 7

    def test_slice_assignment_is_checked_before_writing(self):
        buffer = StringBuffer('abc')

        with pytest.raises(TypeError, match='single characters'):
            buffer.view_mut()[0:3] = ['x', 'y', 'zz']
        assert str(buffer) == 'abc'

    def test_slice_assignment_from_string(self):
        buffer = StringBuffer('abc')
        buffer.view_mut()[1:] = 'yz'

        assert str(buffer) == 'ayz'

    def test_bounded_string_keeps_its_encoded_length(self):
        pair = FixedSize[2].new(StringBuffer('ab')).unwrap()

        with pytest.raises(TypeError):
            pair.view_mut()[0] = 'xyz'
        assert encode(pair) == b'"ab"'
