"""Document (sales invoice / purchase order) use cases"""
from .create_document import CreateDocument
from .update_document import UpdateDocument
from .record_payment import RecordPayment
from .delete_document import DeleteDocument
from .get_document import GetDocument
from .list_documents import ListDocuments
from .preview_document_number import PreviewDocumentNumber
from .reconcile_documents import ReconcileDocuments
from .dtos import (
    LineItemDTO,
    CreateDocumentCommandDTO,
    UpdateDocumentCommandDTO,
    RecordPaymentCommandDTO,
    LineItemResponseDTO,
    DocumentSummaryDTO,
    DocumentResponseDTO,
    DocumentListResponseDTO,
    NextNumberResponseDTO,
    DocumentDiscrepancyDTO,
    DocumentReconciliationResultDTO,
)

__all__ = [
    "CreateDocument",
    "UpdateDocument",
    "RecordPayment",
    "DeleteDocument",
    "GetDocument",
    "ListDocuments",
    "PreviewDocumentNumber",
    "ReconcileDocuments",
    "LineItemDTO",
    "CreateDocumentCommandDTO",
    "UpdateDocumentCommandDTO",
    "RecordPaymentCommandDTO",
    "LineItemResponseDTO",
    "DocumentSummaryDTO",
    "DocumentResponseDTO",
    "DocumentListResponseDTO",
    "NextNumberResponseDTO",
    "DocumentDiscrepancyDTO",
    "DocumentReconciliationResultDTO",
]
