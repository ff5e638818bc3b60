"""A single-pass view that caches the most recently produced element.

Wrapping an iterable in :class:`CacheLatestView` guarantees that each
element of the underlying sequence is produced at most once, no matter how
many times the current position is read. This matters when the underlying
iterable does work per element, such as ``map`` with an expensive or
side-effecting function.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_EMPTY: Any = object()


class NonPropagatingCache(Generic[T]):
    """An optional value that is never carried over by copying.

    A copy of a cache always starts empty, so copying an object that holds
    one never shares or duplicates what was cached.
    """

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value: Any = _EMPTY

    def __copy__(self) -> NonPropagatingCache[T]:
        return type(self)()

    def __deepcopy__(self, memo: dict) -> NonPropagatingCache[T]:
        return type(self)()

    def __bool__(self) -> bool:
        return self.has_value()

    def has_value(self) -> bool:
        """Return whether a value is currently held."""
        return self._value is not _EMPTY

    def value(self) -> T:
        """Return the held value, raising ``LookupError`` if there is none."""
        if self._value is _EMPTY:
            raise LookupError("cache is empty")
        return self._value

    def emplace(self, value: T) -> T:
        """Store ``value``, replacing anything held, and return it."""
        self._value = value
        return value

    def reset(self) -> None:
        """Drop the held value, if any."""
        self._value = _EMPTY

    def __repr__(self) -> str:
        if self._value is _EMPTY:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._value!r})"


class CacheLatestView(Generic[T]):
    """An iterable over ``base`` that computes each element only once."""

    def __init__(self, base: Iterable[T]) -> None:
        if not isinstance(base, Iterable):
            raise TypeError(f"{type(base).__name__!r} object is not iterable")
        self._base = base
        self._cache: NonPropagatingCache[T] = NonPropagatingCache()

    def base(self) -> Iterable[T]:
        """Return the wrapped iterable."""
        return self._base

    def __iter__(self) -> CacheLatestIterator[T]:
        return CacheLatestIterator(self)

    def __len__(self) -> int:
        try:
            return len(self._base)  # type: ignore[arg-type]
        except TypeError:
            raise TypeError(
                f"underlying {type(self._base).__name__!r} object has no len()"
            ) from None

    def __copy__(self) -> CacheLatestView[T]:
        return type(self)(self._base)

    def __deepcopy__(self, memo: dict) -> CacheLatestView[T]:
        return type(self)(copy.deepcopy(self._base, memo))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base!r})"


class CacheLatestIterator(Generic[T]):
    """A position in a :class:`CacheLatestView`.

    The element at the current position is pulled from the underlying
    iterator on first access and kept in the view's cache until the
    position is advanced.
    """

    def __init__(self, parent: CacheLatestView[T]) -> None:
        self._parent = parent
        self._current: Iterator[T] = iter(parent.base())
        self._exhausted = False
        parent._cache.reset()

    def _fill(self) -> bool:
        cache = self._parent._cache
        if cache.has_value():
            return True
        if self._exhausted:
            return False
        try:
            cache.emplace(next(self._current))
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def at_end(self) -> bool:
        """Return whether the position is past the last element."""
        return not self._fill()

    def get(self) -> T:
        """Return the element at the current position."""
        if not self._fill():
            raise IndexError("no element past the end of the view")
        return self._parent._cache.value()

    def advance(self) -> CacheLatestIterator[T]:
        """Move to the next position and drop the cached element."""
        if not self._fill():
            raise IndexError("cannot advance past the end of the view")
        self._parent._cache.reset()
        return self

    def __iter__(self) -> CacheLatestIterator[T]:
        return self

    def __next__(self) -> T:
        if self.at_end():
            raise StopIteration
        value = self.get()
        self.advance()
        return value


class CacheLatestAdaptor:
    """Builds a :class:`CacheLatestView` by call or by ``iterable | adaptor``."""

    def __call__(self, iterable: Iterable[T]) -> CacheLatestView[T]:
        return CacheLatestView(iterable)

    def __ror__(self, other: Iterable[T]) -> CacheLatestView[T]:
        return self(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def cache_latest(iterable: Iterable[T]) -> CacheLatestView[T]:
    """Wrap ``iterable`` in a :class:`CacheLatestView`."""
    return CacheLatestView(iterable)