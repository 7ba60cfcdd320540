import logging
from math import factorial
from typing import Iterator

from lazyperm.lptypes import Elements, Permutation, PermutationView, T

_LOGGER = logging.getLogger(__name__)


def _as_tuple(elements: Elements[T]) -> tuple[T, ...]:
    try:
        return tuple(elements)
    except TypeError:
        raise TypeError("Elements must be iterable")


class PermutationGenerator(Iterator[Permutation[T]]):
    # progress is a mixed-radix counter: indices[i] ranges over [0, i], and
    # position i is swapped with i + indices[n - 1 - i] to build each result

    def __init__(self, elements: Elements[T]):
        self._source = _as_tuple(elements)
        self._latest = list(self._source)
        self._indices = [0] * len(self._source)
        self._started = False
        self._done = False
        _LOGGER.debug("generator for %d elements", len(self._source))

    @property
    def source(self) -> tuple[T, ...]:
        return self._source

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(self._indices)

    @property
    def started(self) -> bool:
        return self._started

    @property
    def done(self) -> bool:
        return self._done

    @property
    def total(self) -> int:
        if not self._source:
            return 0
        return factorial(len(self._source))

    def _advance(self) -> bool:
        # odometer increment, least significant digit first; False on wrap
        indices = self._indices
        for i in range(len(indices)):
            if indices[i] < i:
                indices[i] += 1
                return True
            indices[i] = 0
        return False

    def _rebuild(self) -> None:
        latest, source, indices = self._latest, self._source, self._indices
        n = len(source)
        for i in range(n):
            latest[i] = source[i]
        for i in range(n - 1):
            # delta lies in [0, n - 1 - i], so the swap stays in bounds
            j = i + indices[n - 1 - i]
            latest[i], latest[j] = latest[j], latest[i]

    def step(self) -> PermutationView[T] | None:
        # returns the internal buffer, rewritten by the next call; None when
        # exhausted, and always None for an empty source
        if self._done:
            return None
        if not self._source:
            self._done = True
            return None
        if not self._started:
            self._started = True
            return self._latest
        if not self._advance():
            self._done = True
            if _LOGGER.isEnabledFor(logging.DEBUG):
                _LOGGER.debug("exhausted after %d permutations", self.total)
            return None
        self._rebuild()
        return self._latest

    def __iter__(self) -> "PermutationGenerator[T]":
        return self

    def __next__(self) -> Permutation[T]:
        latest = self.step()
        if latest is None:
            raise StopIteration
        return tuple(latest)

    def __repr__(self) -> str:
        state = "done" if self._done else (
            "started" if self._started else "fresh"
        )
        return f"PermutationGenerator({self._source!r}, {state})"
