# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Unit tests for the immutable array editor covering None handling, bounds errors,
# copy-on-no-op behaviour and the algebraic properties between operations

"""Tests for engine_devtools.experimental.arrays."""
import numpy as np
import pytest

from engine_devtools.errors import NullArgumentError, OutOfRangeError
from engine_devtools.experimental import arrays


def is_even(value):
    return value % 2 == 0


# --- append ---

def test_append_adds_item_to_end():
    source = [1, 2]
    result = arrays.append(source, 3)

    assert result == [1, 2, 3]
    assert result is not source
    assert source == [1, 2]


def test_append_none_returns_single_element():
    assert arrays.append(None, 5) == [5]


def test_append_accepts_tuple_and_returns_list():
    assert arrays.append((1, 2), 3) == [1, 2, 3]


@pytest.mark.parametrize("source", [None, [], [1], [1, 2, 3]])
def test_append_grows_by_one_and_ends_with_item(source):
    result = arrays.append(source, 42)

    assert len(result) == (0 if source is None else len(source)) + 1
    assert result[-1] == 42


# --- append_range ---

def test_append_range_combines():
    assert arrays.append_range([1, 2], 3, 4) == [1, 2, 3, 4]


def test_append_range_none_source_returns_items():
    assert arrays.append_range(None, 1, 2) == [1, 2]


def test_append_range_none_source_no_items_returns_empty():
    result = arrays.append_range(None)

    assert result == []
    assert result is not None


def test_append_range_no_items_returns_distinct_copy():
    source = [1, 2]
    result = arrays.append_range(source)

    assert result == source
    assert result is not source


def test_append_range_does_not_mutate_source():
    source = [1]
    arrays.append_range(source, 2, 3)
    assert source == [1]


# --- insert_at ---

def test_insert_at_middle():
    assert arrays.insert_at([1, 3], 1, 2) == [1, 2, 3]


def test_insert_at_start():
    assert arrays.insert_at([2, 3], 0, 1) == [1, 2, 3]


def test_insert_at_end_appends():
    assert arrays.insert_at([1, 2], 2, 3) == [1, 2, 3]


def test_insert_at_none_zero_index():
    assert arrays.insert_at(None, 0, "x") == ["x"]


def test_insert_at_none_nonzero_index_raises():
    with pytest.raises(OutOfRangeError) as excinfo:
        arrays.insert_at(None, 5, "x")
    assert excinfo.value.param_name == "index"


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_insert_at_out_of_range_raises(index):
    with pytest.raises(OutOfRangeError):
        arrays.insert_at([1, 2], index, 9)


def test_insert_at_rejects_non_integer_index():
    with pytest.raises(TypeError):
        arrays.insert_at([1, 2], 1.0, 9)
    with pytest.raises(TypeError):
        arrays.insert_at([1, 2], True, 9)


def test_insert_at_does_not_mutate_source():
    source = [1, 3]
    arrays.insert_at(source, 1, 2)
    assert source == [1, 3]


# --- remove_at ---

def test_remove_at_middle():
    assert arrays.remove_at([1, 2, 3], 1) == [1, 3]


def test_remove_at_first_and_last():
    assert arrays.remove_at([1, 2, 3], 0) == [2, 3]
    assert arrays.remove_at([1, 2, 3], 2) == [1, 2]


def test_remove_at_sole_element_returns_empty_list():
    result = arrays.remove_at([5], 0)

    assert result == []
    assert result is not None


def test_remove_at_none_raises():
    with pytest.raises(NullArgumentError) as excinfo:
        arrays.remove_at(None, 0)
    assert excinfo.value.param_name == "seq"


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_at_out_of_range_raises(index):
    with pytest.raises(OutOfRangeError):
        arrays.remove_at([1, 2, 3], index)


def test_remove_at_empty_sequence_raises():
    with pytest.raises(OutOfRangeError):
        arrays.remove_at([], 0)


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_remove_at_undoes_insert_at(index):
    source = [10, 20, 30]
    assert arrays.remove_at(arrays.insert_at(source, index, 99), index) == source


# --- remove_value ---

def test_remove_value_removes_first_occurrence_only():
    assert arrays.remove_value([1, 2, 1, 2], 2) == [1, 1, 2]


def test_remove_value_not_found_returns_distinct_copy():
    source = [1, 2, 3]
    result = arrays.remove_value(source, 4)

    assert result == source
    assert result is not source


def test_remove_value_uses_equality():
    assert arrays.remove_value(["a", "b"], "".join(["b"])) == ["a"]


def test_remove_value_none_raises():
    with pytest.raises(NullArgumentError):
        arrays.remove_value(None, 1)


# --- remove_all ---

def test_remove_all_removes_matches():
    assert arrays.remove_all([1, 2, 3, 4, 5, 6], is_even) == [1, 3, 5]


def test_remove_all_no_match_returns_distinct_copy():
    source = [1, 3, 5]
    result = arrays.remove_all(source, is_even)

    assert result == source
    assert result is not source


def test_remove_all_all_match_returns_empty_list():
    result = arrays.remove_all([2, 4], is_even)

    assert result == []
    assert result is not None


def test_remove_all_none_sequence_raises():
    with pytest.raises(NullArgumentError) as excinfo:
        arrays.remove_all(None, is_even)
    assert excinfo.value.param_name == "seq"


def test_remove_all_none_predicate_raises():
    with pytest.raises(NullArgumentError) as excinfo:
        arrays.remove_all([1, 2], None)
    assert excinfo.value.param_name == "predicate"


def test_remove_all_calls_predicate_once_per_element():
    calls = []

    def predicate(value):
        calls.append(value)
        return value > 2

    arrays.remove_all([1, 2, 3, 4], predicate)
    assert calls == [1, 2, 3, 4]


def test_remove_all_remaining_elements_fail_predicate():
    source = list(range(20))
    result = arrays.remove_all(source, is_even)

    assert not any(is_even(value) for value in result)
    assert len(result) + sum(1 for value in source if is_even(value)) == len(source)


# --- sub_sequence ---

def test_sub_sequence_middle():
    assert arrays.sub_sequence([10, 20, 30, 40, 50], 1, 3) == [20, 30, 40]


def test_sub_sequence_zero_length():
    assert arrays.sub_sequence([1, 2, 3], 3, 0) == []


def test_sub_sequence_whole():
    source = [1, 2, 3]
    result = arrays.sub_sequence(source, 0, 3)

    assert result == source
    assert result is not source


@pytest.mark.parametrize("start, length", [(1, 10), (-1, 1), (0, -1), (4, 0)])
def test_sub_sequence_out_of_range_raises(start, length):
    with pytest.raises(OutOfRangeError):
        arrays.sub_sequence([1, 2, 3], start, length)


def test_sub_sequence_none_raises():
    with pytest.raises(NullArgumentError):
        arrays.sub_sequence(None, 0, 0)


# --- copy ---

def test_copy_returns_equal_distinct_list():
    source = [1, 2, 3]
    result = arrays.copy(source)

    assert result == source
    assert result is not source


def test_copy_none_returns_none():
    assert arrays.copy(None) is None


def test_copy_is_shallow():
    inner = [1]
    result = arrays.copy([inner])
    assert result[0] is inner


# --- concat ---

def test_concat_joins_in_order():
    assert arrays.concat([1, 2], [3]) == [1, 2, 3]


def test_concat_length_is_sum():
    a, b = [1, 2, 3], [4, 5]
    assert len(arrays.concat(arrays.copy(a), arrays.copy(b))) == len(a) + len(b)


def test_concat_with_none_copies_other_side():
    first = [1, 2]
    result = arrays.concat(first, None)
    assert result == first
    assert result is not first

    second = [3]
    result = arrays.concat(None, second)
    assert result == second
    assert result is not second


def test_concat_both_none_returns_none():
    assert arrays.concat(None, None) is None


# --- other sequence types ---

def test_numpy_array_input_returns_list():
    source = np.array([1, 2, 3])
    result = arrays.remove_at(source, 0)

    assert isinstance(result, list)
    assert result == [2, 3]
    np.testing.assert_array_equal(source, [1, 2, 3])


def test_numpy_integer_index_accepted():
    assert arrays.insert_at([1, 3], np.int64(1), 2) == [1, 2, 3]
