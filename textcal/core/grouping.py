"""Partition an ordered sequence into maximal runs of adjacent items.

Two strategies share the same boundary rule, ``same(previous, current)``,
evaluated only between neighbours:

* :func:`group_consecutive` materialises each group as a list before moving
  on. Used for months and weeks where groups are small.
* :class:`StreamingGrouper` hands out each group as a lazy iterator and
  buffers at most one lookahead item. Used for years so a multi-year date
  range is never held in memory.
"""

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

Adjacency = Callable[[T, T], bool]

# Marks an empty cursor slot; items themselves may be None
_EMPTY = object()


def group_consecutive(items: Iterable[T], same: Adjacency) -> Iterator[List[T]]:
    """Yield maximal runs of ``items`` where ``same`` holds between neighbours.

    Args:
        items: Ordered input sequence
        same: Adjacency predicate applied to each (previous, current) pair

    Yields:
        Non-empty lists, in input order. An empty input yields nothing.
    """
    group: List[T] = []
    for item in items:
        if group and not same(group[-1], item):
            yield group
            group = []
        group.append(item)
    if group:
        yield group


class StreamingGrouper(Generic[T]):
    """Iterator of lazy groups over a single pass of ``items``.

    The cursor is made of the last item handed out in the current group,
    one lookahead item pulled from upstream and a token identifying the
    group currently being served. Requesting the next group drains whatever
    the caller left unread in the previous one; iterators for earlier
    groups stop yielding once a newer group has been requested.

    Example:
        >>> for year in StreamingGrouper(date_range(2020, 2030), same_year):
        ...     first = next(year)
    """

    def __init__(self, items: Iterable[T], same: Adjacency) -> None:
        self._items = iter(items)
        self._same = same
        self._lookahead: object = _EMPTY
        self._last: object = _EMPTY
        self._token: Optional[object] = None
        self._primed = False

    def __iter__(self) -> "StreamingGrouper[T]":
        return self

    def __next__(self) -> Iterator[T]:
        if not self._primed:
            self._lookahead = next(self._items, _EMPTY)
            self._primed = True
        else:
            self._skip_rest_of_group()

        if self._lookahead is _EMPTY:
            self._token = None
            raise StopIteration

        self._token = token = object()
        self._last = _EMPTY
        return self._serve(token)

    def _advance(self) -> None:
        self._last = self._lookahead
        self._lookahead = next(self._items, _EMPTY)

    def _continues_group(self) -> bool:
        if self._lookahead is _EMPTY:
            return False
        if self._last is _EMPTY:
            return True
        return bool(self._same(self._last, self._lookahead))

    def _skip_rest_of_group(self) -> None:
        if self._token is None:
            return
        while self._continues_group():
            self._advance()

    def _serve(self, token: object) -> Iterator[T]:
        while self._token is token and self._continues_group():
            item = self._lookahead
            self._advance()
            yield item  # type: ignore[misc]


def stream_groups(items: Iterable[T], same: Adjacency) -> StreamingGrouper[T]:
    """Group ``items`` lazily; see :class:`StreamingGrouper`."""
    return StreamingGrouper(items, same)
