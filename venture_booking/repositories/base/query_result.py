"""
Tagged results returned by the data-access layer.

Each repository method states which shape it produces (a row set, a
single row, or nothing) so callers never have to guess from the payload.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


class ResultKind(str, Enum):
    ROWS = "rows"
    SINGLE_ROW = "single_row"
    EMPTY = "empty"


class EmptyResultError(LookupError):
    """Raised when a row is required from an empty result."""


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """
    Result of a repository query.

    Attributes:
        kind: ROWS for collection queries (possibly zero rows),
              SINGLE_ROW for a found entity, EMPTY for a missing one
        items: The returned rows in query order
    """

    kind: ResultKind
    items: Tuple[T, ...] = field(default_factory=tuple)

    @classmethod
    def rows(cls, items: Sequence[T]) -> "QueryResult[T]":
        return cls(ResultKind.ROWS, tuple(items))

    @classmethod
    def single(cls, item: T) -> "QueryResult[T]":
        if item is None:
            raise ValueError("single() requires a row; use empty() for a missing one")
        return cls(ResultKind.SINGLE_ROW, (item,))

    @classmethod
    def empty(cls) -> "QueryResult[T]":
        return cls(ResultKind.EMPTY, ())

    @classmethod
    def single_or_empty(cls, item: Optional[T]) -> "QueryResult[T]":
        """For lookups by key: the entity when found, EMPTY otherwise."""
        return cls.empty() if item is None else cls.single(item)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def all(self) -> List[T]:
        return list(self.items)

    def one(self) -> T:
        """The single row; raises EmptyResultError when nothing was found."""
        if self.is_empty:
            raise EmptyResultError("Query returned no rows")
        if len(self.items) > 1:
            raise LookupError(f"Query returned {len(self.items)} rows, expected one")
        return self.items[0]

    def one_or_none(self) -> Optional[T]:
        return None if self.is_empty else self.one()

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return not self.is_empty
