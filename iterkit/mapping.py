"""Tools that transform, pair up or filter the items of iterables."""

from __future__ import annotations

import functools
import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, NamedTuple, TypeVar

from iterkit.iterbase import Pipeable, is_iterable

T = TypeVar("T")


class _BindSecond(Pipeable):
    """A pipeable tool whose optional second argument may be given on its own.

    ``tool(value)`` with a non-iterable ``value`` returns a tool waiting for
    the iterable, so that ``iterable | tool(value)`` means ``tool(iterable, value)``.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if len(args) == 1 and not kwargs and not is_iterable(args[0]):
            value = args[0]
            func = self._func
            return Pipeable(lambda iterable: func(iterable, value))
        return super().__call__(*args, **kwargs)


class _OptionalFirst(Pipeable):
    """A pipeable tool whose first argument falls back to None when omitted.

    ``tool(iterable)`` and ``iterable | tool`` use the default; ``tool(arg)``
    with a non-iterable ``arg`` binds it for later use with a pipe.
    """

    def __init__(self, func: Callable[..., Any]) -> None:
        super().__init__(func, position=1)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if len(args) == 1 and not kwargs and is_iterable(args[0]):
            return self._func(None, args[0])
        return super().__call__(*args, **kwargs)

    def __ror__(self, iterable: Iterable) -> Any:
        if not is_iterable(iterable):
            return NotImplemented
        return self._func(None, iterable)


_pipe_after_first = functools.partial(Pipeable, position=1)


class EnumYield(NamedTuple):
    """An item produced by :func:`enumerated`: its index and the element."""

    index: int
    element: Any

    @property
    def first(self) -> int:
        """The index, under its pair name."""
        return self.index

    @property
    def second(self) -> Any:
        """The element, under its pair name."""
        return self.element


@_BindSecond
def enumerated(iterable: Iterable[T], start: int = 0) -> Iterator[EnumYield]:
    """Yield an :class:`EnumYield` for each item, counting from ``start``."""
    return itertools.starmap(EnumYield, zip(itertools.count(start), iterable))


@_pipe_after_first
def starmap(func: Callable[..., T], iterable: Iterable[Iterable[Any]]) -> Iterator[T]:
    """Call ``func`` with each item of ``iterable`` unpacked as its arguments."""
    return itertools.starmap(func, iterable)


@_pipe_after_first
def imap(func: Callable[..., T], *iterables: Iterable[Any]) -> Iterator[T]:
    """Call ``func`` with one item from each iterable, until the shortest ends."""
    return itertools.starmap(func, zipped(*iterables))


def zipped(*iterables: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield tuples of corresponding items, stopping at the shortest iterable."""
    return zip(*iterables)


@_OptionalFirst
def filterfalse(
    predicate: Callable[[T], Any] | None, iterable: Iterable[T]
) -> Iterator[T]:
    """Yield the items for which ``predicate`` is false; truthiness when None."""
    return itertools.filterfalse(predicate, iterable)


@Pipeable
def unique_everseen(iterable: Iterable[T]) -> Iterator[T]:
    """Yield each item the first time it is seen; items must be hashable."""
    seen: set = set()
    for item in iterable:
        if item not in seen:
            seen.add(item)
            yield item


@Pipeable
def unique_justseen(iterable: Iterable[T]) -> Iterator[T]:
    """Yield the first item of every run of equal adjacent items."""
    return (key for key, _ in itertools.groupby(iterable))