"""DocStore client: request building and error reporting."""

import json
from unittest.mock import MagicMock

import requests

from docstore_client import DocStoreClient


def make_response(status_code, body=None, url="http://api.test"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return response


def make_client(*responses, token=None):
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return DocStoreClient(base_url="http://api.test/", token=token, session=session), session


def test_login_stores_token_for_later_requests():
    client, session = make_client(
        make_response(200, {"token": "abc", "user": "admin"}),
        make_response(200, []),
    )
    token, error = client.login("admin", "pw")
    assert (token, error) == ("abc", None)

    client.list_documents()
    login_call, list_call = session.request.call_args_list
    assert login_call.kwargs["url"] == "http://api.test/api/v1/auth/login"
    assert login_call.kwargs["json"] == {"username": "admin", "password": "pw"}
    assert list_call.kwargs["headers"] == {"Authorization": "Bearer abc"}


def test_get_document_success():
    doc = {"id": "1", "name": "A", "description": "x"}
    client, session = make_client(make_response(200, doc), token="t")
    assert client.get_document("1") == (doc, None)
    assert session.request.call_args.kwargs["method"] == "GET"
    assert session.request.call_args.kwargs["url"] == "http://api.test/api/v1/documents/1"


def test_document_id_is_url_quoted():
    client, session = make_client(make_response(204), token="t")
    client.delete_document("a/b c")
    assert session.request.call_args.kwargs["url"] == "http://api.test/api/v1/documents/a%2Fb%20c"


def test_http_error_is_reported():
    client, _ = make_client(make_response(404, {"detail": "document not found"}), token="t")
    data, error = client.get_document("missing")
    assert data is None
    assert error == {"status_code": 404, "message": "document not found"}


def test_conflict_on_create_is_reported():
    client, session = make_client(make_response(409, {"detail": "document already exists"}), token="t")
    _, error = client.create_document({"id": "1"})
    assert error["status_code"] == 409
    assert session.request.call_args.kwargs["json"] == {"id": "1"}


def test_patch_and_replace_send_bodies():
    doc = {"id": "1", "name": "B", "description": ""}
    client, session = make_client(make_response(200, doc), make_response(200, doc), token="t")
    client.patch_document("1", {"name": "B"})
    client.replace_document("1", {"name": "B"})
    patch_call, put_call = session.request.call_args_list
    assert patch_call.kwargs["method"] == "PATCH"
    assert put_call.kwargs["method"] == "PUT"
    assert put_call.kwargs["json"] == {"name": "B"}


def test_delete_success():
    client, _ = make_client(make_response(204), token="t")
    assert client.delete_document("1") == (True, None)


def test_transport_error_is_reported():
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = requests.ConnectionError("connection refused")
    client = DocStoreClient(base_url="http://api.test", session=session)
    documents, error = client.list_documents()
    assert documents == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_validation_error_list_is_flattened():
    body = {"detail": [{"msg": "Field required"}, {"msg": "Input should be a valid string"}]}
    client, _ = make_client(make_response(400, body), token="t")
    _, error = client.create_document({})
    assert error["status_code"] == 400
    assert error["message"] == "Field required; Input should be a valid string"


def test_non_object_error_body_is_stringified():
    client, _ = make_client(make_response(500, ["boom"]), token="t")
    _, error = client.list_documents()
    assert error == {"status_code": 500, "message": "['boom']"}
