"""Document API Routes

FastAPI routes for sales invoices and purchase orders: numbering,
creation, edits, payments and deletion.
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.auth import CurrentUser, get_current_user
from src.api.error import raise_for_error
from src.api.schemas.document_request import (
    CreateDocumentRequestSchema,
    UpdateDocumentRequestSchema,
    RecordPaymentRequestSchema,
)
from src.app.use_cases.documents import (
    CreateDocument,
    UpdateDocument,
    RecordPayment,
    DeleteDocument,
    GetDocument,
    ListDocuments,
    PreviewDocumentNumber,
    LineItemDTO,
    CreateDocumentCommandDTO,
    UpdateDocumentCommandDTO,
    RecordPaymentCommandDTO,
    DocumentResponseDTO,
    DocumentListResponseDTO,
    NextNumberResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyTransactionDocumentRepository,
    SqlAlchemyLineItemRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.transaction_document import DocumentCollection, PaymentStatus
from src.depends import get_session

router = APIRouter(prefix="/documents", tags=["Documents"])

NOT_FOUND_RESPONSE = {
    "description": "Document not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "DOCUMENT_NOT_FOUND",
                    "message": "Document with ID 123 not found"
                }
            }
        }
    }
}

VALIDATION_RESPONSE = {
    "description": "Invalid line item, tax rate or payment",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVALID_LINE_ITEM",
                    "message": "Line item 0: invalid quantity '-1'",
                    "field": "line_items[0].quantity"
                }
            }
        }
    }
}


def _default_prefixes():
    return {
        DocumentCollection.SALES: ApplicationConfig.SALES_NUMBER_PREFIX,
        DocumentCollection.PURCHASES: ApplicationConfig.PURCHASES_NUMBER_PREFIX,
    }


def _line_items(items):
    return [LineItemDTO(**item.model_dump()) for item in items]


@router.get(
    "/{collection}/next-number",
    response_model=NextNumberResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def preview_next_number(
    collection: DocumentCollection,
    prefix: Optional[str] = Query(default=None),
    suffix: Optional[str] = Query(default=None),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Preview the number the next document of a sequence would receive.

    The number is not reserved; creation re-reads the sequence.
    """
    use_case = PreviewDocumentNumber(
        SqlAlchemyTransactionDocumentRepository(session),
        pad_width=ApplicationConfig.DOCUMENT_NUMBER_PAD_WIDTH,
        default_prefixes=_default_prefixes(),
    )
    result = await use_case.execute(user.user_id, collection, prefix, suffix)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{collection}",
    response_model=DocumentResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: VALIDATION_RESPONSE,
        409: {
            "description": "Document number taken by a concurrent writer",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "DUPLICATE_DOCUMENT_NUMBER",
                            "message": "Document number INV-004-2024 already exists",
                            "field": "document_number"
                        }
                    }
                }
            }
        },
    }
)
async def create_document(
    collection: DocumentCollection,
    request: CreateDocumentRequestSchema,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Create a sales invoice or purchase order.

    The service assigns the document number, recomputes subtotal, tax and
    grand total from the line items, and derives the payment status.

    **Returns:**
    - 201: Document created
    - 400: Invalid line item, tax rate or paid amount
    - 409: Numbering collided on every attempt
    """
    uow = SqlAlchemyUnitOfWork(session)
    document_repo = SqlAlchemyTransactionDocumentRepository(session)
    line_item_repo = SqlAlchemyLineItemRepository(session)

    command = CreateDocumentCommandDTO(
        user_id=user.user_id,
        collection=collection,
        number_prefix=request.number_prefix,
        number_suffix=request.number_suffix,
        counterparty_name=request.counterparty_name,
        counterparty_email=request.counterparty_email,
        issue_date=request.issue_date,
        due_date=request.due_date,
        line_items=_line_items(request.line_items),
        payment_mode=request.payment_mode,
        paid_amount=request.paid_amount,
        is_marked_fully_paid=request.is_marked_fully_paid,
    )

    use_case = CreateDocument(
        uow,
        document_repo,
        line_item_repo,
        allowed_tax_rates=ApplicationConfig.ALLOWED_TAX_RATES,
        pad_width=ApplicationConfig.DOCUMENT_NUMBER_PAD_WIDTH,
        max_attempts=ApplicationConfig.NUMBERING_MAX_ATTEMPTS,
        default_prefixes=_default_prefixes(),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{collection}",
    response_model=DocumentListResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_documents(
    collection: DocumentCollection,
    search: Optional[str] = Query(default=None, description="Counterparty name or document number"),
    payment_status: Optional[PaymentStatus] = Query(default=None, alias="status"),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    List documents of a collection, most recent first.

    **Query parameters:**
    - `search`: case-insensitive match on counterparty name or document number
    - `status`: pending, partial or paid
    - `start_date` / `end_date`: inclusive issue date bounds
    - `limit` / `offset`: pagination
    """
    use_case = ListDocuments(SqlAlchemyTransactionDocumentRepository(session))
    result = await use_case.execute(
        user.user_id,
        collection,
        search=search,
        status=payment_status,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{collection}/{document_id}",
    response_model=DocumentResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def get_document(
    collection: DocumentCollection,
    document_id: int,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetDocument(
        SqlAlchemyTransactionDocumentRepository(session),
        SqlAlchemyLineItemRepository(session),
    )
    result = await use_case.execute(user.user_id, collection, document_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{collection}/{document_id}",
    response_model=DocumentResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={400: VALIDATION_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def update_document(
    collection: DocumentCollection,
    document_id: int,
    request: UpdateDocumentRequestSchema,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Edit a document.

    Totals and payment status are recomputed from the stored or supplied
    line items. The document number never changes; paid_amount cannot be
    lowered.
    """
    uow = SqlAlchemyUnitOfWork(session)
    document_repo = SqlAlchemyTransactionDocumentRepository(session)
    line_item_repo = SqlAlchemyLineItemRepository(session)

    fields = request.model_dump(exclude_unset=True, exclude={"line_items"})
    command = UpdateDocumentCommandDTO(
        user_id=user.user_id,
        collection=collection,
        document_id=document_id,
        line_items=_line_items(request.line_items) if request.line_items is not None else None,
        **fields,
    )

    use_case = UpdateDocument(
        uow,
        document_repo,
        line_item_repo,
        allowed_tax_rates=ApplicationConfig.ALLOWED_TAX_RATES,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{collection}/{document_id}/payments",
    response_model=DocumentResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Non-positive payment amount",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_PAYMENT",
                            "message": "Payment amount must be greater than 0",
                            "field": "amount"
                        }
                    }
                }
            }
        },
        404: NOT_FOUND_RESPONSE,
    }
)
async def record_payment(
    collection: DocumentCollection,
    document_id: int,
    request: RecordPaymentRequestSchema,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    """
    Record a payment received against a document.

    The amount is added to paid_amount; remaining amount and payment status
    are recomputed. Payments are never reversed.
    """
    uow = SqlAlchemyUnitOfWork(session)
    command = RecordPaymentCommandDTO(
        user_id=user.user_id,
        collection=collection,
        document_id=document_id,
        amount=request.amount,
    )

    use_case = RecordPayment(
        uow,
        SqlAlchemyTransactionDocumentRepository(session),
        SqlAlchemyLineItemRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{collection}/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: NOT_FOUND_RESPONSE},
)
async def delete_document(
    collection: DocumentCollection,
    document_id: int,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteDocument(
        uow,
        SqlAlchemyTransactionDocumentRepository(session),
        SqlAlchemyLineItemRepository(session),
    )
    result = await use_case.execute(user.user_id, collection, document_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
