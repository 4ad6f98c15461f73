"""Shared helpers for the iteration tools: pipe support and iterator stepping."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator, Sized
from itertools import islice
from typing import Any, Callable


def is_iterable(obj: Any) -> bool:
    """Return True if ``iter(obj)`` succeeds."""
    try:
        iter(obj)
    except TypeError:
        return False
    return True


def advance(iterator: Iterator, distance: int) -> int:
    """Consume up to ``distance`` items, never going past the end.

    Returns how many items were actually consumed.
    """
    if distance < 0:
        raise ValueError("distance must not be negative")
    return sum(1 for _ in islice(iterator, distance))


def skip(iterable: Iterable, distance: int) -> Iterator:
    """Return an iterator over ``iterable`` with its first ``distance`` items skipped."""
    iterator = iter(iterable)
    advance(iterator, distance)
    return iterator


def size(iterable: Iterable) -> int:
    """Number of items in ``iterable``, counting them if it has no length."""
    if isinstance(iterable, Sized):
        return len(iterable)
    return sum(1 for _ in iterable)


def are_same(*args: Any) -> bool:
    """True when every argument is the very same object (typically a type)."""
    return all(arg is args[0] for arg in args[1:])


class Pipeable:
    """A callable tool that can also be applied with ``iterable | tool``.

    ``position`` is the index of the iterable among the tool's positional
    arguments. Calling the tool without an iterable in that position binds
    the other arguments and returns a new Pipeable waiting for the iterable,
    so ``tool(arg)`` may be used as ``iterable | tool(arg)``.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        position: int = 0,
        *,
        _bound: tuple | None = None,
        _bound_kwargs: dict | None = None,
    ) -> None:
        self._func = func
        self._position = position
        self._bound = _bound
        self._bound_kwargs = _bound_kwargs or {}
        functools.update_wrapper(self, func)

    @property
    def is_partial(self) -> bool:
        """True when arguments are bound and only the iterable is missing."""
        return self._bound is not None

    def _apply(self, iterable: Iterable) -> Any:
        bound = list(self._bound or ())
        bound.insert(self._position, iterable)
        return self._func(*bound, **self._bound_kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.is_partial:
            if len(args) != 1 or kwargs:
                raise TypeError("a bound tool takes exactly one iterable argument")
            return self._apply(args[0])
        if len(args) > self._position and is_iterable(args[self._position]):
            return self._func(*args, **kwargs)
        if len(args) > self._position:
            raise TypeError(
                f"argument {self._position} of {self._func.__name__} is not iterable"
            )
        return Pipeable(
            self._func, self._position, _bound=args, _bound_kwargs=kwargs
        )

    def __ror__(self, iterable: Iterable) -> Any:
        if not is_iterable(iterable):
            return NotImplemented
        return self._apply(iterable)

    def __repr__(self) -> str:
        if self.is_partial:
            return f"<Pipeable {self._func.__name__} bound={self._bound!r}>"
        return f"<Pipeable {self._func.__name__}>"