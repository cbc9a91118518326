from typing import Any, Mapping, Protocol, Sequence
Row = Mapping[str, Any]
class DBConn(Protocol):
    """What every entity manager needs from the store.

    query_row raises sqlalchemy.exc.NoResultFound when the statement yields no row.
    """
    async def query(self, sql: str, **params: Any) -> Sequence[Row]:
        ...
    async def query_row(self, sql: str, **params: Any) -> Row:
        ...
    async def execute(self, sql: str, **params: Any) -> int:
        ...
