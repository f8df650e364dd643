from services.storage.document_store import DocumentStore, get_document_store

__all__ = [
    "DocumentStore",
    "get_document_store",
]
