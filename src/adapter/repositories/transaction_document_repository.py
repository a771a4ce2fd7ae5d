"""SQLAlchemy Transaction Document Repository Implementation

Implements document persistence using SQLAlchemy async session.
"""

from typing import List, Optional, Tuple
from datetime import date
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.transaction_document_repository import TransactionDocumentRepository
from src.domain.errors import DuplicateDocumentNumber
from src.domain.transaction_document import (
    TransactionDocument,
    DocumentCollection,
    PaymentStatus,
)
from .store_errors import translate_store_errors


class SqlAlchemyTransactionDocumentRepository(TransactionDocumentRepository):
    """
    SQLAlchemy implementation of TransactionDocumentRepository

    Features:
    - Unique index on (user_id, collection, document_number) surfaces as DuplicateDocumentNumber
    - Pessimistic locking via SELECT FOR UPDATE (ignored by SQLite)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def create(self, document: TransactionDocument) -> TransactionDocument:
        self.session.add(document)
        try:
            await self.session.flush()
        except IntegrityError as e:
            if "document_number" in str(e.orig):
                raise DuplicateDocumentNumber(document.document_number) from e
            raise
        await self.session.refresh(document)
        return document

    @translate_store_errors
    async def get_by_id(
        self,
        user_id: str,
        collection: DocumentCollection,
        document_id: int,
        for_update: bool = False,
    ) -> Optional[TransactionDocument]:
        statement = (
            select(TransactionDocument)
            .where(TransactionDocument.id == document_id)
            .where(TransactionDocument.user_id == user_id)
            .where(TransactionDocument.collection == collection)
        )

        if for_update:
            statement = statement.with_for_update()

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    @translate_store_errors
    async def list(
        self,
        user_id: str,
        collection: DocumentCollection,
        search: Optional[str] = None,
        status: Optional[PaymentStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[TransactionDocument], int]:
        conditions = [
            TransactionDocument.user_id == user_id,
            TransactionDocument.collection == collection,
        ]

        if search:
            needle = search.lower()
            conditions.append(
                or_(
                    func.lower(TransactionDocument.counterparty_name).contains(needle, autoescape=True),
                    func.lower(TransactionDocument.document_number).contains(needle, autoescape=True),
                )
            )
        if status:
            conditions.append(TransactionDocument.payment_status == status)
        if start_date:
            conditions.append(TransactionDocument.issue_date >= start_date)
        if end_date:
            conditions.append(TransactionDocument.issue_date <= end_date)

        count_statement = select(func.count()).select_from(TransactionDocument).where(*conditions)
        total = (await self.session.execute(count_statement)).scalar_one()

        statement = (
            select(TransactionDocument)
            .where(*conditions)
            .order_by(TransactionDocument.created_at.desc(), TransactionDocument.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    @translate_store_errors
    async def get_in_period(
        self,
        user_id: str,
        collection: DocumentCollection,
        start_date: date,
        end_date: date,
    ) -> List[TransactionDocument]:
        statement = (
            select(TransactionDocument)
            .where(TransactionDocument.user_id == user_id)
            .where(TransactionDocument.collection == collection)
            .where(TransactionDocument.issue_date >= start_date)
            .where(TransactionDocument.issue_date <= end_date)
            .order_by(TransactionDocument.issue_date)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    @translate_store_errors
    async def get_all(self) -> List[TransactionDocument]:
        statement = select(TransactionDocument).order_by(TransactionDocument.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    @translate_store_errors
    async def list_document_numbers(
        self, user_id: str, collection: DocumentCollection
    ) -> List[str]:
        statement = (
            select(TransactionDocument.document_number)
            .where(TransactionDocument.user_id == user_id)
            .where(TransactionDocument.collection == collection)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    @translate_store_errors
    async def update(self, document: TransactionDocument) -> TransactionDocument:
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document

    @translate_store_errors
    async def delete(self, document: TransactionDocument) -> None:
        await self.session.delete(document)
        await self.session.flush()
