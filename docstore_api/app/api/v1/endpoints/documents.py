"""
Document endpoints for API v1.

These routes expose CRUD operations over the in‑memory document
store.  Every route requires a bearer token.  Store errors are
translated here: an id collision on create becomes HTTP 409 and a
missing document becomes HTTP 404.  Handlers are plain functions, so
FastAPI runs them on its worker threadpool and the store sees truly
concurrent calls.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from docstore_api.app.core.errors import DocumentAlreadyExistsError, DocumentNotFoundError
from docstore_api.app.core.security import get_current_user
from docstore_api.app.schemas.document import Document, DocumentPatch, DocumentReplace
from docstore_api.app.services.document_service import DocumentService

router = APIRouter(dependencies=[Depends(get_current_user)])


def get_document_service(request: Request) -> DocumentService:
    """Return the service wired into the application by ``create_app``."""
    return request.app.state.document_service


def _not_found(exc: DocumentNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)


@router.post("", response_model=Document, status_code=status.HTTP_201_CREATED)
def create_document(
    document: Document,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Create a new document.  Returns HTTP 409 if the id is taken."""
    try:
        service.create_document(document)
    except DocumentAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message)
    return document


@router.get("", response_model=List[Document])
def list_documents(service: DocumentService = Depends(get_document_service)) -> List[Document]:
    """Return all documents in no particular order."""
    return service.list_documents()


@router.get("/{document_id}", response_model=Document)
def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    try:
        return service.get_document(document_id)
    except DocumentNotFoundError as exc:
        raise _not_found(exc)


@router.put("/{document_id}", response_model=Document)
def update_document(
    document_id: str,
    document_in: DocumentReplace,
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Replace a document.

    The id in the path always wins over an id in the body.  Returns
    the stored document.
    """
    try:
        service.update_document(document_id, document_in.to_document(document_id))
        return service.get_document(document_id)
    except DocumentNotFoundError as exc:
        raise _not_found(exc)


@router.patch("/{document_id}", response_model=Document)
def partial_update_document(
    document_id: str,
    updates: Dict[str, Any] = Body(...),
    service: DocumentService = Depends(get_document_service),
) -> Document:
    """Update some fields of a document.

    Only ``name`` and ``description`` with string values are applied;
    other keys and values of other types are ignored.  Returns the
    stored document.
    """
    patch = DocumentPatch.from_wire(updates)
    try:
        service.partial_update_document(document_id, patch)
        return service.get_document(document_id)
    except DocumentNotFoundError as exc:
        raise _not_found(exc)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> None:
    try:
        service.delete_document(document_id)
    except DocumentNotFoundError as exc:
        raise _not_found(exc)
