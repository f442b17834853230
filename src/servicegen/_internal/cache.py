from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheStatistics:
    """Hit and miss counts of one cache during the current run."""

    hits: int = 0
    misses: int = 0


class IncrementalCache(Generic[K, V]):
    """Two-generation memo keyed by structural equality.

    Values computed during a run live in the current generation. Starting a
    new run moves them to the previous generation: an equal key found there is
    promoted without recomputation, and entries nobody asked for during a run
    are dropped at the next rotation.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._previous: dict[K, V] = {}
        self._current: dict[K, V] = {}
        self._hits = 0
        self._misses = 0

    def begin_run(self) -> None:
        """Rotate generations and reset statistics."""
        self._previous = self._current
        self._current = {}
        self._hits = 0
        self._misses = 0

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        """Return the value cached for ``key`` or compute and store it.

        Args:
            key: Value-equal key of the stage input.
            compute: Produces the value on a miss.

        """
        if key in self._current:
            self._hits += 1
            return self._current[key]

        if key in self._previous:
            self._hits += 1
            value = self._previous.pop(key)
        else:
            self._misses += 1
            value = compute()

        self._current[key] = value
        return value

    def retain_previous(self) -> None:
        """Carry unvisited entries of the previous generation into the current one.

        Used when a run stops early so the next rotation does not evict results
        the run never asked for.
        """
        for key, value in self._previous.items():
            self._current.setdefault(key, value)
        self._previous = {}

    def clear(self) -> None:
        self._previous.clear()
        self._current.clear()

    @property
    def statistics(self) -> CacheStatistics:
        return CacheStatistics(hits=self._hits, misses=self._misses)

    def __len__(self) -> int:
        return len(self._current)

    def log_statistics(self) -> None:
        logger.debug(
            "Cache %s: hits=%d misses=%d entries=%d",
            self.name,
            self._hits,
            self._misses,
            len(self._current),
        )
