from venture_booking.repositories.base.base_repository import BaseRepository
from venture_booking.repositories.base.query_result import EmptyResultError, QueryResult, ResultKind

__all__ = ["BaseRepository", "QueryResult", "ResultKind", "EmptyResultError"]
