"""Statement helpers shared by the PostgreSQL repositories."""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from sqlalchemy import Executable, Table
from sqlalchemy.ext.asyncio import AsyncSession

Model = TypeVar("Model")
RowMapper = Callable[[dict[str, Any]], Model]


class SqlRepository:
    """Runs Core statements on the request's session.

    Rows come back as plain dicts so the mappers in
    ``forum.persistence.mappers`` stay independent of SQLAlchemy row types.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, stmt: Executable) -> dict[str, Any] | None:
        row = (await self.session.execute(stmt)).mappings().first()
        return dict(row) if row is not None else None

    async def _one_or_none(
        self, stmt: Executable, to_model: RowMapper[Model]
    ) -> Model | None:
        row = await self._first(stmt)
        return to_model(row) if row is not None else None

    async def _many(self, stmt: Executable, to_model: RowMapper[Model]) -> list[Model]:
        rows = (await self.session.execute(stmt)).mappings().all()
        return [to_model(dict(row)) for row in rows]

    async def _scalar(self, stmt: Executable) -> Any:
        return (await self.session.execute(stmt)).scalar()

    async def _write(self, stmt: Executable) -> None:
        """Execute and flush, so constraint violations surface here."""
        await self.session.execute(stmt)
        await self.session.flush()

    async def _insert(self, table: Table, values: Mapping[str, Any]) -> None:
        await self._write(table.insert().values(**values))
