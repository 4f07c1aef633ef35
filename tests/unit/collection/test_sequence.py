"""Unit tests for Sequence, its lazy views, NIL and Array."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lx_commons.collection import NIL, Array, FilterType, Sequence
from lx_commons.collection.sequence import (
    CompositeSequence,
    DelegateSequence,
    FilteredSequence,
    IndexFilteredSequence,
    MappedSequence,
    ZippedSequence,
)
from lx_commons.config import LangSettings, configure
from lx_commons.kernel.errors import (
    EmptyValueError,
    IllegalArgumentError,
    ToBeDefinedError,
    UnsupportedOperationError,
)
from lx_commons.testing.fakes import CallCounter, CountingIterable, UnsizedIterable


def _even(n: int) -> bool:
    return n % 2 == 0


# ---------------------------------------------------------------------------
# head / take
# ---------------------------------------------------------------------------


class TestHead:
    def test_head_returns_first_element(self) -> None:
        assert Sequence.of([7, 8]).head() == 7

    def test_head_of_empty_raises(self) -> None:
        with pytest.raises(EmptyValueError):
            Sequence.of([]).head()

    def test_head_does_not_consume_more_than_one(self) -> None:
        source = CountingIterable([1, 2, 3])
        Sequence.of(source).head()
        assert source.pulls == 1

    def test_head_n(self) -> None:
        assert Sequence.of([1, 2, 3, 4, 5]).head(3).to_list() == [1, 2, 3]

    def test_head_n_covering_sized_sequence_is_self(self) -> None:
        seq = Sequence.of([1, 2, 3, 4, 5])
        assert seq.head(10) is seq
        assert seq.head(5) is seq

    def test_head_zero_is_nil(self) -> None:
        assert Sequence.of([1]).head(0) is NIL

    def test_head_negative_raises(self) -> None:
        with pytest.raises(IllegalArgumentError, match="'n'"):
            Sequence.of([1]).head(-1)

    def test_head_n_on_unsized_is_lazy(self) -> None:
        source = CountingIterable(range(100))
        view = Sequence.of(source).head(3)
        assert isinstance(view, IndexFilteredSequence)
        assert source.passes == 0
        assert view.to_list() == [0, 1, 2]

    def test_head_forms(self) -> None:
        seq = Sequence.of(UnsizedIterable(["a", "b", "c"]))
        assert seq.head() == "a"
        assert isinstance(seq.head(2), Sequence)

    def test_head_n_on_unsized_walks_whole_source(self) -> None:
        source = CountingIterable(range(10))
        assert Sequence.of(source).head(3).to_list() == [0, 1, 2]
        assert source.pulls == 10

    def test_take_is_head_n(self) -> None:
        assert Sequence.of("abcd").take(2).to_list() == ["a", "b"]

    @given(st.lists(st.integers()), st.integers(min_value=0, max_value=30))
    def test_head_matches_slicing(self, items: list[int], n: int) -> None:
        assert Sequence.of(items).head(n).to_list() == items[:n]


# ---------------------------------------------------------------------------
# tail / drop / drop_tail
# ---------------------------------------------------------------------------


class TestTail:
    def test_tail_of_sized(self) -> None:
        assert Sequence.of([1, 2, 3, 4, 5]).tail(2).to_list() == [4, 5]

    def test_tail_covering_whole_sequence_is_self(self) -> None:
        seq = Array.of(1, 2)
        assert seq.tail(2) is seq
        assert seq.tail(9) is seq

    def test_tail_zero_is_nil(self) -> None:
        assert Sequence.of([1]).tail(0) is NIL

    def test_negative_tail_is_head(self) -> None:
        assert Sequence.of([1, 2, 3]).tail(-2).to_list() == [1, 2]

    def test_unsized_tail_falls_back_to_first_elements(self, caplog: pytest.LogCaptureFixture) -> None:
        seq = Sequence.of(UnsizedIterable([1, 2, 3, 4]))
        with caplog.at_level(logging.WARNING, logger="lx_commons"):
            result = seq.tail(2)
        assert result.to_list() == [1, 2]
        assert any("tail(2)" in record.getMessage() for record in caplog.records)

    def test_unsized_tail_raises_in_strict_mode(self) -> None:
        configure(LangSettings(strict_tail=True))
        with pytest.raises(UnsupportedOperationError):
            Sequence.of(UnsizedIterable([1, 2, 3])).tail(1)

    def test_strict_mode_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LX_STRICT_TAIL", "true")
        with pytest.raises(UnsupportedOperationError):
            Sequence.of(UnsizedIterable([1])).tail(1)

    def test_strict_mode_does_not_affect_sized(self) -> None:
        configure(LangSettings(strict_tail=True))
        assert Sequence.of([1, 2, 3]).tail(1).to_list() == [3]

    @given(st.lists(st.integers()), st.integers(min_value=1, max_value=30))
    def test_sized_tail_matches_slicing(self, items: list[int], n: int) -> None:
        assert Sequence.of(items).tail(n).to_list() == items[-n:]


class TestDrop:
    def test_drop(self) -> None:
        assert Sequence.of([1, 2, 3, 4, 5]).drop(2).to_list() == [3, 4, 5]

    def test_drop_zero_is_self(self) -> None:
        seq = Sequence.of([1])
        assert seq.drop(0) is seq

    def test_drop_everything_from_sized_is_nil(self) -> None:
        assert Sequence.of([1, 2, 3, 4, 5]).drop(10) is NIL
        assert Sequence.of([1, 2]).drop(2) is NIL

    def test_drop_on_unsized_is_lazy(self) -> None:
        view = Sequence.of(UnsizedIterable([1, 2, 3])).drop(5)
        assert view is not NIL
        assert view.to_list() == []

    def test_negative_drop_is_drop_tail(self) -> None:
        assert Sequence.of([1, 2]).drop(-3) is NIL
        with pytest.raises(UnsupportedOperationError):
            Sequence.of([1, 2, 3]).drop(-1)

    @given(st.lists(st.integers()), st.integers(min_value=0, max_value=30))
    def test_drop_matches_slicing(self, items: list[int], n: int) -> None:
        assert Sequence.of(items).drop(n).to_list() == items[n:]


class TestDropTail:
    def test_drop_tail_zero_is_self(self) -> None:
        seq = Sequence.of([1])
        assert seq.drop_tail(0) is seq

    def test_drop_tail_covering_sized_is_nil(self) -> None:
        assert Array.of(1, 2).drop_tail(2) is NIL

    def test_drop_tail_shorter_than_sequence_unsupported(self) -> None:
        with pytest.raises(UnsupportedOperationError):
            Array.of(1, 2, 3).drop_tail(1)

    def test_drop_tail_on_unsized_unsupported(self) -> None:
        with pytest.raises(UnsupportedOperationError):
            Sequence.of(UnsizedIterable([1])).drop_tail(5)

    def test_negative_drop_tail_is_drop(self) -> None:
        assert Sequence.of([1, 2, 3]).drop_tail(-1).to_list() == [2, 3]


# ---------------------------------------------------------------------------
# drop_while / take_while
# ---------------------------------------------------------------------------


class TestWhile:
    def test_take_while(self) -> None:
        view = Sequence.of([2, 4, 5, 6]).take_while(_even)
        assert isinstance(view, FilteredSequence)
        assert view.filter_type is FilterType.WHILE
        assert view.to_list() == [2, 4]

    def test_take_while_tests_up_to_first_failure(self) -> None:
        predicate = CallCounter(_even)
        Sequence.of([2, 4, 5, 6, 8]).take_while(predicate).to_list()
        assert predicate.calls == 3

    def test_drop_while_keeps_trigger_and_rest(self) -> None:
        view = Sequence.of([1, 3, 4, 5, 6]).drop_while(_even)
        assert view.filter_type is FilterType.UNTIL
        assert view.to_list() == [4, 5, 6]


# ---------------------------------------------------------------------------
# append / prepend
# ---------------------------------------------------------------------------


class TestConcatenation:
    def test_append(self) -> None:
        result = Sequence.of([1, 2]).append(Sequence.of([3]))
        assert isinstance(result, CompositeSequence)
        assert result.to_list() == [1, 2, 3]

    def test_prepend(self) -> None:
        assert Sequence.of([3]).prepend(Array.of(1, 2)).to_list() == [1, 2, 3]

    def test_append_to_empty(self) -> None:
        assert NIL.append(Array.of(1)).to_list() == [1]
        assert Sequence.of([]).append(Sequence.of([4])).to_list() == [4]

    def test_composite_size(self) -> None:
        assert Array.of(1, 2).append(Array.of(3)).size() == 3
        assert Array.of(1).append(Sequence.of(UnsizedIterable([2]))).sized() is False

    def test_append_element_is_not_defined(self) -> None:
        with pytest.raises(ToBeDefinedError):
            Sequence.of([1]).append(2)
        with pytest.raises(NotImplementedError):
            Sequence.of([1]).prepend(0)


# ---------------------------------------------------------------------------
# zip / zip_all
# ---------------------------------------------------------------------------


class TestZip:
    def test_zip_to_shortest(self) -> None:
        result = Sequence.of([1, 2, 3]).zip(["a", "b"])
        assert isinstance(result, ZippedSequence)
        assert result.to_list() == [(1, "a"), (2, "b")]
        assert result.size() == 2

    def test_zip_all_pads(self) -> None:
        result = Sequence.of([1, 2, 3]).zip_all(["a", "b"], 0, "z")
        assert result.to_list() == [(1, "a"), (2, "b"), (3, "z")]
        assert result.size() == 3

    def test_zip_with_unsized_side_is_unsized(self) -> None:
        result = Sequence.of([1]).zip(UnsizedIterable(["a"]))
        assert result.sized() is False
        assert result.to_list() == [(1, "a")]

    def test_zip_defaults_may_be_none(self) -> None:
        assert Sequence.of([1, 2]).zip_all([], None, None).to_list() == [(1, None), (2, None)]


# ---------------------------------------------------------------------------
# Transforms, factories and NIL
# ---------------------------------------------------------------------------


class TestSequenceViews:
    def test_transforms_stay_sequences(self) -> None:
        seq = Sequence.of([1, 2, 3])
        assert isinstance(seq, DelegateSequence)
        assert isinstance(seq.map(str), MappedSequence)
        assert isinstance(seq.flat_map(lambda n: [n]), Sequence)
        assert isinstance(seq.filter(_even), Sequence)

    def test_chained_pipeline(self) -> None:
        result = (
            Sequence.of(range(20))
            .filter(_even)
            .map(lambda n: n * n)
            .drop(1)
            .head(3)
            .to_list()
        )
        assert result == [4, 16, 36]

    def test_map_keeps_size(self) -> None:
        assert Sequence.of([1, 2, 3]).map(str).size() == 3

    def test_accept_returns_self(self) -> None:
        seen: list[int] = []
        seq = Sequence.of([1, 2])
        assert seq.each(seen.append) is seq
        assert seen == [1, 2]

    def test_callback_error_raised_when_reached(self) -> None:
        def check(n: int) -> bool:
            if n > 1:
                raise RuntimeError("too big")
            return True

        view = Sequence.of([0, 1, 2]).filter(check)
        itr = view.iterator()
        assert itr.next() == 0
        assert itr.next() == 1
        with pytest.raises(RuntimeError, match="too big"):
            itr.has_next()

    def test_stop_iteration_from_callback_ends_iteration(self) -> None:
        def stop_at_two(n: int) -> int:
            if n == 2:
                raise StopIteration
            return n

        assert Sequence.of([1, 2, 3]).map(stop_at_two).to_list() == [1]

    def test_nil(self) -> None:
        assert Sequence.nil() is NIL
        assert NIL.sized() is True
        assert NIL.size() == 0
        assert NIL.to_list() == []
        assert repr(NIL) == "NIL"
        with pytest.raises(EmptyValueError):
            NIL.head()


class TestArray:
    def test_of_and_size(self) -> None:
        arr = Array.of(1, 2, 3)
        assert arr.size() == 3
        assert arr.length() == 3
        assert arr.sized() is True
        assert arr.to_list() == [1, 2, 3]

    def test_snapshot_is_independent_of_source(self) -> None:
        items = [1, 2]
        arr = Array(items)
        items.append(3)
        assert arr.to_list() == [1, 2]

    def test_restartable(self) -> None:
        arr = Array(iter(["x", "y"]))
        assert arr.to_list() == ["x", "y"]
        assert arr.to_list() == ["x", "y"]

    def test_equality_and_hash(self) -> None:
        assert Array.of(1, 2) == Array((1, 2))
        assert Array.of(1) != Array.of(2)
        assert hash(Array.of("a")) == hash(Array(["a"]))

    def test_repr(self) -> None:
        assert repr(Array.of(1, 2)) == "Array(1, 2)"

    def test_sequence_operations(self) -> None:
        arr = Array.of(1, 2, 3, 4)
        assert arr.tail(1).to_list() == [4]
        assert arr.head(2).to_list() == [1, 2]
        assert arr.reduce(lambda a, b: a + b).get() == 10
