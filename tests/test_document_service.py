"""Document service: delegation and error pass-through."""

import logging

import pytest

from docstore_api.app.core.errors import DocumentAlreadyExistsError, DocumentNotFoundError
from docstore_api.app.schemas.document import Document, DocumentPatch


def test_service_round_trip(service):
    service.create_document(Document(id="1", name="A", description="x"))
    assert service.get_document("1") == Document(id="1", name="A", description="x")
    assert service.list_documents() == [Document(id="1", name="A", description="x")]
    assert service.count_documents() == 1


def test_service_writes_through_to_store(service, store):
    service.create_document(Document(id="1", name="A"))
    service.update_document("1", Document(id="other", name="B", description="y"))
    assert store.get("1") == Document(id="1", name="B", description="y")
    service.partial_update_document("1", DocumentPatch(description="z"))
    assert store.get("1").description == "z"
    service.delete_document("1")
    assert store.list() == []


def test_service_propagates_already_exists(service):
    service.create_document(Document(id="1"))
    with pytest.raises(DocumentAlreadyExistsError):
        service.create_document(Document(id="1"))


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.get_document("missing"),
        lambda s: s.update_document("missing", Document(id="missing")),
        lambda s: s.partial_update_document("missing", DocumentPatch()),
        lambda s: s.delete_document("missing"),
    ],
    ids=["get", "update", "partial_update", "delete"],
)
def test_service_propagates_not_found(service, call):
    with pytest.raises(DocumentNotFoundError):
        call(service)


def test_service_logs_mutations(service, caplog):
    with caplog.at_level(logging.INFO, logger="docstore_api.app.services.document_service"):
        service.create_document(Document(id="1"))
        service.delete_document("1")
    messages = [record.getMessage() for record in caplog.records]
    assert "Created document 1" in messages
    assert "Deleted document 1" in messages
