"""
Error types raised by the document store.

Only two failure kinds originate in the store: an identifier
collision on create and a reference to an identifier that does not
exist.  Both are ordinary exceptions; the store stays usable after
either one.  The service layer lets them propagate unchanged and the
HTTP layer translates them into status codes.
"""


class DocumentStoreError(Exception):
    """Base class for document store failures."""

    def __init__(self, document_id: str, message: str) -> None:
        super().__init__(message)
        self.document_id = document_id
        self.message = message


class DocumentAlreadyExistsError(DocumentStoreError):
    """Raised when creating a document whose id is already stored."""

    def __init__(self, document_id: str) -> None:
        super().__init__(document_id, "document already exists")


class DocumentNotFoundError(DocumentStoreError):
    """Raised when an operation references an id that is not stored."""

    def __init__(self, document_id: str) -> None:
        super().__init__(document_id, "document not found")
