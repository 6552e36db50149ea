"""
Service layer for documents.

``DocumentService`` is a thin facade over ``DocumentStore``: one
method per store operation, no extra validation and no
transformation.  Store exceptions (``DocumentAlreadyExistsError`` and
``DocumentNotFoundError``) propagate unchanged so that the transport
layer decides how to report them.  The service is constructed with
the store it delegates to; there is no shared global instance.
"""

from __future__ import annotations

import logging
from typing import List

from docstore_api.app.core.store import DocumentStore
from docstore_api.app.schemas.document import Document, DocumentPatch

logger = logging.getLogger(__name__)


class DocumentService:
    """Service class for managing documents."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def create_document(self, document: Document) -> None:
        self.store.create(document)
        logger.info("Created document %s", document.id)

    def get_document(self, document_id: str) -> Document:
        return self.store.get(document_id)

    def list_documents(self) -> List[Document]:
        return self.store.list()

    def update_document(self, document_id: str, document: Document) -> None:
        self.store.update(document_id, document)
        logger.info("Updated document %s", document_id)

    def partial_update_document(self, document_id: str, patch: DocumentPatch) -> None:
        self.store.partial_update(document_id, patch)
        logger.info("Patched document %s (fields: %s)", document_id, sorted(patch.present_fields()))

    def delete_document(self, document_id: str) -> None:
        self.store.delete(document_id)
        logger.info("Deleted document %s", document_id)

    def count_documents(self) -> int:
        return self.store.count()
