"""Tools producing groups of items: combinations, sliding windows, cycles and repeats."""

from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from iterkit.iterbase import Pipeable, is_iterable

T = TypeVar("T")


def _check_length(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative")


def _combinations(iterable: Iterable[T], length: int) -> Iterator[tuple[T, ...]]:
    _check_length(length, "length")
    if length == 0:
        return
    pool = tuple(iterable)
    yield from itertools.combinations(pool, length)


def combinations(iterable: Any, length: int | None = None) -> Any:
    """Yield every ``length``-item combination of ``iterable`` in index order.

    A length of zero, or one larger than the iterable, yields nothing.
    Called with only a length, returns a tool for use as
    ``iterable | combinations(length)``.
    """
    if length is None:
        if is_iterable(iterable):
            raise TypeError("combinations() needs a length")
        size = iterable
        _check_length(size, "length")
        return Pipeable(lambda source: _combinations(source, size))
    return _combinations(iterable, length)


def count(start: int | float = 0, step: int | float = 1) -> Iterator:
    """Count from ``start`` by ``step`` without end; a zero step yields nothing."""
    if step == 0:
        return iter(())
    return itertools.count(start, step)


@Pipeable
def cycle(iterable: Iterable[T]) -> Iterator[T]:
    """Yield the items of ``iterable`` over and over; nothing if it is empty."""
    return itertools.cycle(iterable)


def repeat(element: T, times: int | None = None) -> Iterator[T]:
    """Yield ``element`` ``times`` times, or forever when ``times`` is None.

    A negative count is treated as zero.
    """
    if times is None:
        return itertools.repeat(element)
    return itertools.repeat(element, max(times, 0))


def _sliding_window(iterable: Iterable[T], size: int) -> Iterator[tuple[T, ...]]:
    _check_length(size, "window size")
    if size == 0:
        return
    iterator = iter(iterable)
    window = deque(itertools.islice(iterator, size), maxlen=size)
    if len(window) < size:
        return
    yield tuple(window)
    for item in iterator:
        window.append(item)
        yield tuple(window)


def sliding_window(iterable: Any, size: int | None = None) -> Any:
    """Yield each run of ``size`` consecutive items of ``iterable``.

    A size of zero, or one larger than the iterable, yields nothing.
    Called with only a size, returns a tool for use as
    ``iterable | sliding_window(size)``.
    """
    if size is None:
        if is_iterable(iterable):
            raise TypeError("sliding_window() needs a window size")
        width = iterable
        _check_length(width, "window size")
        return Pipeable(lambda source: _sliding_window(source, width))
    return _sliding_window(iterable, size)