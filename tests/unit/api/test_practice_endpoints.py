"""
Name: Practice API Endpoint Tests

Responsibilities:
  - End-to-end flow over HTTP: register, upload text, practice, complete
  - Auth header (X-User-Id) and ownership errors as RFC7807
  - Request id propagation, health and metrics endpoints

Collaborators:
  - fastapi.testclient.TestClient (client fixture in conftest)
  - typeten.container: dependency overrides
"""

import pytest
from fastapi.testclient import TestClient

from typeten.api.main import app
from typeten.container import get_list_texts_use_case

pytestmark = pytest.mark.unit

POEM = "\n".join(f"line {i}" for i in range(25))


def _register(client, email="ana@example.com", username="ana") -> dict:
    res = client.post("/v1/users", json={"email": email, "username": username})
    assert res.status_code == 201
    return res.json()


def _headers(user: dict) -> dict:
    return {"X-User-Id": user["id"]}


def _upload(client, user: dict, content: str = POEM, title: str = "Poem") -> dict:
    res = client.post(
        "/v1/texts",
        json={"title": title, "content": content},
        headers=_headers(user),
    )
    assert res.status_code == 201
    return res.json()


def test_register_and_me(client):
    user = _register(client, email=" ana@example.com ")

    res = client.get("/v1/users/me", headers=_headers(user))

    assert res.status_code == 200
    assert res.json()["email"] == "ana@example.com"


def test_register_duplicate_email_is_conflict(client):
    _register(client)

    res = client.post(
        "/v1/users", json={"email": "ana@example.com", "username": "other"}
    )

    assert res.status_code == 409
    assert res.json()["code"] == "CONFLICT"


def test_full_practice_flow(client):
    user = _register(client)
    text = _upload(client, user)

    assert text["total_lines"] == 25
    assert text["fragment_count"] == 3

    fragments = client.get(
        f"/v1/texts/{text['id']}/fragments", headers=_headers(user)
    ).json()["fragments"]
    assert [f["fragment_idx"] for f in fragments] == [0, 1, 2]
    assert fragments[0]["id"] == f"{text['id']}_frag_0"
    assert fragments[2]["lines"] == [f"line {i}" for i in range(20, 25)]

    session = client.post(
        "/v1/sessions", json={"text_id": text["id"]}, headers=_headers(user)
    ).json()
    assert session["is_completed"] is False

    for accuracy, wpm in ((90.0, 40.0), (100.0, 60.0)):
        res = client.post(
            f"/v1/sessions/{session['id']}/progress",
            json={"accuracy_percent": accuracy, "wpm": wpm},
            headers=_headers(user),
        )
        assert res.status_code == 200

    body = res.json()
    assert body["completed_lines"] == 2
    assert body["total_accuracy_percent"] == pytest.approx(95.0)
    assert body["average_wpm"] == pytest.approx(50.0)

    done = client.post(
        f"/v1/sessions/{session['id']}/complete", headers=_headers(user)
    )
    assert done.status_code == 200
    assert done.json()["is_completed"] is True

    again = client.post(
        f"/v1/sessions/{session['id']}/progress",
        json={"accuracy_percent": 90.0, "wpm": 40.0},
        headers=_headers(user),
    )
    assert again.status_code == 409

    listed = client.get(
        "/v1/sessions", params={"text_id": text["id"]}, headers=_headers(user)
    ).json()["sessions"]
    assert [s["id"] for s in listed] == [session["id"]]


def test_missing_user_header_is_unauthorized(client):
    res = client.get("/v1/texts")

    assert res.status_code == 401
    assert res.headers["content-type"].startswith("application/problem+json")
    assert res.json()["code"] == "UNAUTHORIZED"


def test_unknown_user_is_not_found(client):
    res = client.get("/v1/texts", headers={"X-User-Id": "ghost"})

    assert res.status_code == 404


def test_text_of_other_user_is_forbidden(client):
    ana = _register(client)
    bob = _register(client, email="bob@example.com", username="bob")
    text = _upload(client, ana)

    res = client.get(f"/v1/texts/{text['id']}", headers=_headers(bob))
    assert res.status_code == 403
    res = client.post(
        "/v1/sessions", json={"text_id": text["id"]}, headers=_headers(bob)
    )
    assert res.status_code == 403
    assert client.get("/v1/texts/missing", headers=_headers(ana)).status_code == 404


def test_blank_content_is_validation_error(client):
    user = _register(client)

    res = client.post(
        "/v1/texts",
        json={"title": "Empty", "content": " \n \n"},
        headers=_headers(user),
    )

    assert res.status_code == 422
    assert res.json()["code"] == "VALIDATION_ERROR"


def test_blank_text_id_is_validation_error(client):
    user = _register(client)

    res = client.post(
        "/v1/sessions", json={"text_id": "   "}, headers=_headers(user)
    )

    assert res.status_code == 422
    assert any(e.get("field") == "body.text_id" for e in res.json()["errors"])


def test_out_of_range_progress_is_validation_error(client):
    user = _register(client)
    text = _upload(client, user)
    session = client.post(
        "/v1/sessions", json={"text_id": text["id"]}, headers=_headers(user)
    ).json()

    res = client.post(
        f"/v1/sessions/{session['id']}/progress",
        json={"accuracy_percent": 120.0, "wpm": 40.0},
        headers=_headers(user),
    )

    assert res.status_code == 422
    stored = client.get(
        f"/v1/sessions/{session['id']}", headers=_headers(user)
    ).json()
    assert stored["completed_lines"] == 0


def test_request_body_errors_are_problem_details(client):
    user = _register(client)

    res = client.post("/v1/texts", json={"title": "x"}, headers=_headers(user))

    body = res.json()
    assert res.status_code == 422
    assert body["type"] == "about:blank/validation_error"
    assert body["status"] == 422
    assert any(e.get("field") == "body.content" for e in body["errors"])


def test_request_id_is_echoed_or_generated(client):
    echoed = client.get("/healthz", headers={"X-Request-Id": "req-123"})
    generated = client.get("/healthz", headers={"X-Request-Id": "x" * 500})

    assert echoed.headers["X-Request-Id"] == "req-123"
    assert echoed.json() == {"ok": True, "version": "0.1.0", "request_id": "req-123"}
    assert generated.headers["X-Request-Id"] != "x" * 500


def test_metrics_endpoint(client):
    user = _register(client)
    _upload(client, user)

    res = client.get("/metrics")

    assert res.status_code == 200
    assert "typeten_texts_created_total" in res.text
    assert "typeten_requests_total" in res.text


def test_use_case_override(client):
    class _BoomUseCase:
        def execute(self, actor):
            raise RuntimeError("boom")

    app.dependency_overrides[get_list_texts_use_case] = lambda: _BoomUseCase()
    with TestClient(app, raise_server_exceptions=False) as local:
        res = local.get("/v1/texts", headers={"X-User-Id": "user-1"})

    assert res.status_code == 500
    assert res.json()["code"] == "INTERNAL_ERROR"
