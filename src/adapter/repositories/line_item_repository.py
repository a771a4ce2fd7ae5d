"""SQLAlchemy Line Item Repository Implementation"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.line_item_repository import LineItemRepository
from src.domain.line_item import LineItem
from .store_errors import translate_store_errors


class SqlAlchemyLineItemRepository(LineItemRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def get_by_document_id(self, document_id: int) -> List[LineItem]:
        statement = (
            select(LineItem)
            .where(LineItem.document_id == document_id)
            .order_by(LineItem.position)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    @translate_store_errors
    async def create_many(self, document_id: int, items: List[LineItem]) -> List[LineItem]:
        for position, item in enumerate(items):
            item.document_id = document_id
            item.position = position
            self.session.add(item)
        await self.session.flush()
        for item in items:
            await self.session.refresh(item)
        return items

    @translate_store_errors
    async def delete_by_document_id(self, document_id: int) -> None:
        await self.session.execute(delete(LineItem).where(LineItem.document_id == document_id))
        await self.session.flush()
