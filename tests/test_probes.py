"""Health and metrics probes."""

from docstore_api.app.schemas.document import Document


def test_health_is_public_and_reports_settings(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["service"] == "DocStore API"
    assert body["version"] == "1.0.0"
    assert body["environment"] == "test"
    assert body["timestamp"]


def test_metrics_reports_document_count(client, store):
    store.create(Document(id="1"))
    store.create(Document(id="2"))
    response = client.get("/metrics")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    lines = response.text.splitlines()
    assert "docstore_api_documents 2" in lines
    assert "docstore_api_health_status 1" in lines
    assert 'docstore_api_info{version="1.0.0",environment="test"} 1' in lines
    assert any(line.startswith("docstore_api_uptime_seconds ") for line in lines)
