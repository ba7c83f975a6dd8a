from __future__ import annotations

import pytest

from venture_booking.repositories.base.query_result import EmptyResultError, QueryResult, ResultKind


def test_rows_result_keeps_order():
    result = QueryResult.rows([3, 1, 2])
    assert result.kind is ResultKind.ROWS
    assert result.all() == [3, 1, 2]
    assert len(result) == 3


def test_rows_result_may_be_empty_but_keeps_kind():
    result = QueryResult.rows([])
    assert result.kind is ResultKind.ROWS
    assert result.is_empty
    assert not result


def test_single_or_empty():
    assert QueryResult.single_or_empty("room").kind is ResultKind.SINGLE_ROW
    assert QueryResult.single_or_empty(None).kind is ResultKind.EMPTY


def test_single_requires_a_row():
    with pytest.raises(ValueError):
        QueryResult.single(None)


def test_one_raises_on_empty():
    with pytest.raises(EmptyResultError):
        QueryResult.empty().one()
    assert QueryResult.empty().one_or_none() is None


def test_one_rejects_multiple_rows():
    with pytest.raises(LookupError):
        QueryResult.rows([1, 2]).one()
