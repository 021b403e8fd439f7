# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Immutable array editing helpers (append, insert, remove, slice, copy, concat) that
# always return a new list and validate nullness and bounds before touching any data
# Acknowledgements: Python sequence protocol documentation for slicing and copy semantics

"""Immutable array editor.

Every function takes a sequence (list, tuple, 1-D numpy array, ...) or None
and returns a NEW list reflecting one structural edit. The argument is never
mutated and the result never aliases it, so callers can keep references to the
pre-edit sequence safely.

None ("absent") is distinct from an empty sequence:
- append/append_range/insert_at(index=0) treat None as empty
- remove_at/remove_value/remove_all/sub_sequence reject None
- copy(None) and concat(None, None) return None

Preconditions are checked before any allocation. Violations raise
NullArgumentError or OutOfRangeError; indices are never clamped and negative
indices are never interpreted Python-style.

Functions:
- append(seq, item) -> list
- append_range(seq, *items) -> list
- insert_at(seq, index, item) -> list
- remove_at(seq, index) -> list
- remove_value(seq, value) -> list
- remove_all(seq, predicate) -> list
- sub_sequence(seq, start, length) -> list
- copy(seq) -> Optional[list]
- concat(first, second) -> Optional[list]
"""
import logging
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from ..errors import NullArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_index(name: str, value: Any) -> int:
    """Reject non-integer index/length arguments (bool included)."""
    if isinstance(value, bool) or not hasattr(value, "__index__"):
        raise TypeError(f"Argument '{name}' must be an integer, got {type(value).__name__}")
    return value.__index__()


def append(seq: Optional[Sequence[T]], item: T) -> List[T]:
    """Return a new list with `item` added at the end.

    If `seq` is None, returns a single-element list.
    """
    if seq is None:
        return [item]

    result = list(seq)
    result.append(item)
    return result


def append_range(seq: Optional[Sequence[T]], *items: T) -> List[T]:
    """Return a new list with `items` added at the end.

    Args:
        seq: Source sequence, or None
        *items: Elements to append (may be empty)

    Returns:
        `items` as a list when `seq` is None, a fresh copy of `seq` when no
        items are given, otherwise the concatenation.
    """
    if seq is None:
        return list(items)

    if not items:
        logger.debug(f"append_range called without items, returning copy of {len(seq)} elements")
        return list(seq)

    result = list(seq)
    result.extend(items)
    return result


def insert_at(seq: Optional[Sequence[T]], index: int, item: T) -> List[T]:
    """Return a new list with `item` placed at `index`.

    Elements at `index` and beyond shift right by one. `index == len(seq)`
    appends to the end.

    Args:
        seq: Source sequence, or None (only valid together with index 0)
        index: Insert position in [0, len(seq)]
        item: Element to insert

    Returns:
        New list of length len(seq) + 1

    Raises:
        OutOfRangeError: If index is outside [0, len(seq)], or seq is None
            and index is not 0
        TypeError: If index is not an integer
    """
    index = _require_index("index", index)

    if seq is None:
        if index == 0:
            return [item]
        raise OutOfRangeError(
            "index", index, "Cannot insert into a None sequence at a non-zero index"
        )

    length = len(seq)
    if index < 0 or index > length:
        raise OutOfRangeError("index", index, f"index must be between 0 and {length}, got {index}")

    result = list(seq[:index])
    result.append(item)
    result.extend(seq[index:])
    return result


def remove_at(seq: Sequence[T], index: int) -> List[T]:
    """Return a new list without the element at `index`.

    Removing the only element yields an empty list, not None.

    Raises:
        NullArgumentError: If seq is None
        OutOfRangeError: If index is outside [0, len(seq))
        TypeError: If index is not an integer
    """
    if seq is None:
        raise NullArgumentError("seq")

    index = _require_index("index", index)
    length = len(seq)
    if index < 0 or index >= length:
        raise OutOfRangeError(
            "index", index, f"index must be between 0 and {length - 1}, got {index}"
        )

    result = list(seq[:index])
    result.extend(seq[index + 1:])
    return result


def remove_value(seq: Sequence[T], value: T) -> List[T]:
    """Return a new list without the first element equal to `value`.

    If `value` is not present, a full copy of `seq` is returned (never `seq`
    itself).

    Raises:
        NullArgumentError: If seq is None
    """
    if seq is None:
        raise NullArgumentError("seq")

    for index, element in enumerate(seq):
        if element == value:
            return remove_at(seq, index)

    logger.debug(f"remove_value: {value!r} not found, returning copy")
    return list(seq)


def remove_all(seq: Sequence[T], predicate: Callable[[T], bool]) -> List[T]:
    """Return a new list keeping only the elements for which `predicate` is false.

    Relative order is preserved. The predicate is called exactly once per
    element. No match yields a full copy, all matching yields an empty list.

    Args:
        seq: Source sequence
        predicate: Callable deciding which elements to drop

    Raises:
        NullArgumentError: If seq or predicate is None (seq is checked first)
    """
    if seq is None:
        raise NullArgumentError("seq")
    if predicate is None:
        raise NullArgumentError("predicate")

    result = [element for element in seq if not predicate(element)]

    removed = len(seq) - len(result)
    if removed == 0:
        logger.debug("remove_all: no element matched, returning copy")
    else:
        logger.debug(f"remove_all: removed {removed} of {len(seq)} elements")

    return result


def sub_sequence(seq: Sequence[T], start: int, length: int) -> List[T]:
    """Return exactly `length` elements of `seq` beginning at `start`.

    Bounds are strict: the requested window must lie entirely inside `seq`,
    nothing is truncated.

    Args:
        seq: Source sequence
        start: First index of the window, >= 0
        length: Number of elements, >= 0

    Returns:
        New list with elements seq[start] .. seq[start + length - 1]

    Raises:
        NullArgumentError: If seq is None
        OutOfRangeError: If start < 0, length < 0 or start + length > len(seq)
        TypeError: If start or length is not an integer
    """
    if seq is None:
        raise NullArgumentError("seq")

    start = _require_index("start", start)
    length = _require_index("length", length)

    if start < 0:
        raise OutOfRangeError("start", start, f"start must be non-negative, got {start}")
    if length < 0:
        raise OutOfRangeError("length", length, f"length must be non-negative, got {length}")
    if start + length > len(seq):
        raise OutOfRangeError(
            "length",
            length,
            f"start + length ({start} + {length}) exceeds sequence length {len(seq)}",
        )

    return list(seq[start:start + length])


def copy(seq: Optional[Sequence[T]]) -> Optional[List[T]]:
    """Return a shallow copy of `seq` as a new list, or None if `seq` is None."""
    if seq is None:
        return None
    return list(seq)


def concat(first: Optional[Sequence[T]], second: Optional[Sequence[T]]) -> Optional[List[T]]:
    """Return a new list with the elements of `first` followed by `second`.

    If either side is None the result is a copy of the other side, so two
    None arguments yield None.
    """
    if first is None:
        return copy(second)
    if second is None:
        return copy(first)

    result = list(first)
    result.extend(second)
    return result
