# latest-cache

`latest-cache` wraps any iterable in a view that pulls each element from
the underlying iterator at most once. The element at the current position
is kept in a cache; reading it again returns the cached value, and
advancing drops the cache and moves on. This is useful when elements come
from a costly or side-effecting source, such as `map` over an expensive
function, and a consumer may look at the same element several times.

Everything lives in the module `latest_cache.view`.

## Installation

```
pip install latest-cache
```

## Wrapping an iterable

Use the function `cache_latest`, construct `CacheLatestView` directly, or
pipe an iterable into a `CacheLatestAdaptor`:

```python
from latest_cache.view import CacheLatestAdaptor, CacheLatestView, cache_latest

calls = 0

def expensive(x):
    global calls
    calls += 1
    return x * x

print(list(cache_latest(map(expensive, [1, 2, 3]))))  # [1, 4, 9]
print(calls)                                          # 3

print(list(CacheLatestView([4, 5])))                  # [4, 5]
print(list([6, 7] | CacheLatestAdaptor()))            # [6, 7]
print(list(CacheLatestAdaptor()([8, 9])))             # [8, 9]
```

Passing something that is not iterable raises `TypeError`.

`CacheLatestView.base()` returns the wrapped iterable. `len(view)` returns
the length of the wrapped iterable, and raises `TypeError` if it has none.

## Stepping through by hand

Iterating a view yields a `CacheLatestIterator`, which can also be driven
explicitly:

```python
from latest_cache.view import CacheLatestIterator, CacheLatestView

calls = 0

def expensive(x):
    global calls
    calls += 1
    return x * x

view = CacheLatestView(map(expensive, [10, 20]))
it = CacheLatestIterator(view)
it.get()      # 100, computed
it.get()      # 100, from the cache; calls is still 1
it.advance()  # drops the cached element
it.get()      # 400, computed
it.advance()
it.at_end()   # True
```

- `get()` returns the current element, raising `IndexError` at the end.
- `advance()` moves to the next position and returns the iterator,
  raising `IndexError` at the end.
- `at_end()` reports whether the position is past the last element; it
  may pull the current element to find out.
- The iterator is also an ordinary Python iterator (`next(it)`, `for`
  loops).

## The cache

`NonPropagatingCache` is the single-slot holder the view uses:

```python
from latest_cache.view import NonPropagatingCache

c = NonPropagatingCache()
c.has_value()   # False
c.emplace(42)   # 42
c.value()       # 42
c.reset()
c.value()       # raises LookupError
```

A cache is truthy when it holds a value. `copy.copy` and `copy.deepcopy`
of a cache always give an empty cache. Copying a `CacheLatestView` gives a
new view over the same base (deep-copied for `deepcopy`) with an empty
cache.

## Limitations

- The cache belongs to the view, not to the iterator. Creating a new
  iterator over a view empties its cache, and two iterators used at the
  same time over one view share, and disturb, the same cached element.
- Each iterator calls `iter()` on the wrapped object; a one-shot source
  such as a generator or `map` can only be walked once.
- The package is a library only and provides no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```