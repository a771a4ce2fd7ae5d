"""Background workers for bookkeeping service"""
from .document_reconciler import DocumentReconcilerWorker

__all__ = ["DocumentReconcilerWorker"]
