"""Read-only views over the store's collections.

A ``SafeIterator`` wraps a collection together with a function that
turns each entity into a ``Result``. Each pass over it walks the
collection afresh, so the view can be iterated any number of times and
always reflects the current contents.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from grocery.application.dto import Result

T = TypeVar("T")


class SafeIterator(Generic[T]):

    def __init__(self, source: Iterable[T], to_result: Callable[[T], Result]) -> None:
        self._source = source
        self._to_result = to_result

    def __iter__(self) -> Iterator[Result]:
        for entity in self._source:
            yield self._to_result(entity)
