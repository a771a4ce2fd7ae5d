from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import StoreUnavailable


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise StoreUnavailable(f"Commit failed: {e.__class__.__name__}") from e

    async def rollback(self):
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            raise StoreUnavailable(f"Rollback failed: {e.__class__.__name__}") from e
