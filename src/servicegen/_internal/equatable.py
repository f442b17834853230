from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar, overload

T = TypeVar("T")


class EquatableArray(Sequence[T], Generic[T]):
    """Immutable, order-preserving sequence compared by value.

    Two arrays are equal when they have the same length and every element is
    equal by value, regardless of identity. Arrays are hashable as long as
    their elements are, which lets pipeline outputs serve as cache keys.
    """

    __slots__ = ("_hash", "_items")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._hash: int | None = None

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> EquatableArray[T]: ...

    def __getitem__(self, index: int | slice) -> T | EquatableArray[T]:
        if isinstance(index, slice):
            return EquatableArray(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, EquatableArray):
            return NotImplemented
        if len(self._items) != len(other._items):
            return False
        return all(left == right for left, right in zip(self._items, other._items, strict=True))

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._items)
        return self._hash

    def __repr__(self) -> str:
        return f"EquatableArray({list(self._items)!r})"

    def as_tuple(self) -> tuple[T, ...]:
        return self._items


__all__ = ["EquatableArray"]
