"""
Thread‑safe in‑memory document store.

``DocumentStore`` owns a mapping from document id to ``Document`` and
is the only place where documents are mutated.  A single
``ReadWriteLock`` guards the mapping: ``get``, ``list`` and ``count``
run under shared access and may overlap with each other, while
``create``, ``update``, ``partial_update`` and ``delete`` take
exclusive access so that the existence check and the mutation happen
atomically.

Documents are copied on the way in and on the way out, so callers can
never alter stored state except through the store's own methods.
Nothing here performs I/O while holding the lock.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from docstore_api.app.core.errors import DocumentAlreadyExistsError, DocumentNotFoundError
from docstore_api.app.schemas.document import Document, DocumentPatch


class ReadWriteLock:
    """Many concurrent readers or one exclusive writer.

    Writers that are waiting block new readers from entering, which
    keeps a continuous stream of reads from starving writes.  The lock
    is not reentrant.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class DocumentStore:
    """In‑memory mapping of document id to document."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._documents: Dict[str, Document] = {}

    def create(self, document: Document) -> None:
        """Insert ``document``.

        Raises ``DocumentAlreadyExistsError`` if its id is already stored;
        the stored document is left untouched in that case.
        """
        with self._lock.write_lock():
            if document.id in self._documents:
                raise DocumentAlreadyExistsError(document.id)
            self._documents[document.id] = document.model_copy()

    def get(self, document_id: str) -> Document:
        """Return a copy of the document stored under ``document_id``."""
        with self._lock.read_lock():
            document = self._documents.get(document_id)
            if document is None:
                raise DocumentNotFoundError(document_id)
            return document.model_copy()

    def update(self, document_id: str, document: Document) -> None:
        """Replace every mutable field of an existing document.

        The stored id is always ``document_id``; an id carried by
        ``document`` is ignored so a document cannot be moved to another
        key through an update.
        """
        with self._lock.write_lock():
            if document_id not in self._documents:
                raise DocumentNotFoundError(document_id)
            self._documents[document_id] = document.model_copy(update={"id": document_id})

    def partial_update(self, document_id: str, patch: DocumentPatch) -> None:
        """Apply the fields present in ``patch`` to an existing document.

        Absent fields keep their values.  An empty patch succeeds
        without changing anything.
        """
        with self._lock.write_lock():
            current = self._documents.get(document_id)
            if current is None:
                raise DocumentNotFoundError(document_id)
            changes = patch.present_fields()
            if changes:
                self._documents[document_id] = current.model_copy(update=changes)

    def delete(self, document_id: str) -> None:
        with self._lock.write_lock():
            if document_id not in self._documents:
                raise DocumentNotFoundError(document_id)
            del self._documents[document_id]

    def list(self) -> List[Document]:
        """Return copies of all documents in no particular order."""
        with self._lock.read_lock():
            return [document.model_copy() for document in self._documents.values()]

    def count(self) -> int:
        with self._lock.read_lock():
            return len(self._documents)
