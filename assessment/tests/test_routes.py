"""
Test the HTTP API against an in-memory SQLite database.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client():
    with TestClient(create_app("sqlite://")) as test_client:
        yield test_client


def _new_token(client):
    response = client.post("/api/tokens")
    assert response.status_code == 201
    return response.json()["token"]


def _submit(client, token, sections):
    for section, answers in sections.items():
        response = client.post("/api/responses", json={"accessToken": token, "section": section, "answers": answers})
        assert response.status_code == 201


def test_health(client):
    assert client.get("/api/health").json()["status"] == "ok"


def test_token_lifecycle(client):
    token = _new_token(client)
    assert len(token) == 8 and token.isalnum() and token == token.upper()

    assert client.get(f"/api/tokens/verify/{token.lower()}").json()["valid"] is True
    assert client.post("/api/tokens/verify", json={"token": f"  {token.lower()} "}).status_code == 200
    assert client.get(f"/api/tokens/verify/{token}").json()["valid"] is False
    assert client.post("/api/tokens/verify", json={"token": token}).status_code == 400
    assert client.post("/api/tokens/verify", json={"token": "NOPE1234"}).status_code == 400

    assert any(t["token"] == token for t in client.get("/api/tokens").json())
    assert client.delete(f"/api/tokens/{token}").status_code == 200
    assert client.delete(f"/api/tokens/{token}").status_code == 404


def test_user_registration(client):
    token = _new_token(client)
    body = {"name": "Asha", "email": "asha@example.com", "phoneNo": "12345", "currentQualification": "Grade 10", "accessToken": token}
    created = client.post("/api/users", json=body)
    assert created.status_code == 201
    assert created.json()["currentQualification"] == "Grade 10"

    assert client.post("/api/users", json=body).status_code == 400
    assert client.get(f"/api/users/{token.lower()}").json()["name"] == "Asha"
    assert client.get("/api/users/UNKNOWN1").status_code == 404


def test_save_response_requires_fields(client):
    assert client.post("/api/responses", json={"section": "aptitude", "answers": {}}).status_code == 400
    assert client.post("/api/responses", json={"accessToken": "ABC", "answers": {}}).status_code == 400


def test_calculate_scores_and_snapshot(client, sample_sections):
    token = _new_token(client)
    assert client.post(f"/api/responses/calculate-scores/{token}").status_code == 400

    _submit(client, token, sample_sections)
    assert len(client.get(f"/api/responses/{token}").json()) == len(sample_sections)

    scored = client.post(f"/api/responses/calculate-scores/{token}")
    assert scored.status_code == 200
    payload = scored.json()
    assert payload["variant"] == "regular"
    assert payload["streamRecommendations"][0]["stream"] == "Science"
    assert "assessmentId" in payload

    stored = client.get(f"/api/responses/assessment/{token}").json()
    assert stored["assessmentId"] == payload["assessmentId"]
    assert stored["weightedScore"] == payload["weightedScore"]
    assert stored["streamRecommendations"][0]["stream"] == "Science"

    assert client.get("/api/responses/assessment/MISSING1").status_code == 404


def test_vhsc_variant_is_inferred_from_sections(client):
    token = _new_token(client)
    _submit(client, token, {"vhsc-academic": {"q1": "81-100%", "q2": "81-100%"}})
    payload = client.post(f"/api/responses/calculate-scores/{token}").json()
    assert payload["variant"] == "vhsc"
    assert payload["streamRecommendations"][0]["stream"] == "Science with PCM/PCB"


def test_unparseable_answer_keys_still_score(client):
    token = _new_token(client)
    _submit(client, token, {"career": {"q--1": "Yes", "q\u00b2": "Yes", "q1": "Yes"}})
    scored = client.post(f"/api/responses/calculate-scores/{token}")
    assert scored.status_code == 200
    assert scored.json()["interestScores"]["R"] == 1


def test_reports(client, sample_sections):
    token = _new_token(client)
    assert client.post("/api/reports", json={"accessToken": token, "mode": "auto"}).status_code == 404
    assert client.get(f"/api/reports/{token}").status_code == 404

    _submit(client, token, sample_sections)
    client.post(f"/api/responses/calculate-scores/{token}")

    auto = client.post("/api/reports", json={"accessToken": token, "mode": "auto"})
    assert auto.status_code == 201
    pdf = client.get(f"/api/reports/{token}")
    assert pdf.headers["content-type"] == "application/pdf"
    assert pdf.content.startswith(b"%PDF")

    manual = client.post("/api/reports", json={"accessToken": token, "pdfData": base64.b64encode(b"%PDF-1.4 test").decode()})
    assert manual.status_code == 201
    assert client.get(f"/api/reports/{token}").content == b"%PDF-1.4 test"

    assert client.post("/api/reports", json={"accessToken": token}).status_code == 400
    assert client.post("/api/reports", json={"accessToken": token, "pdfData": "***"}).status_code == 400

    html = client.get(f"/api/reports/{token}/html")
    assert html.status_code == 200
    assert "Stream Recommendations" in html.text

    text = client.get(f"/api/reports/{token}/text")
    assert text.status_code == 200
    assert text.headers["content-type"].startswith("text/plain")
    assert text.text.startswith("NextU Career Guidance Report")
    assert "1. Science" in text.text

    assert client.get(f"/api/reports/{_new_token(client)}/text").status_code == 404


def test_delete_responses(client, sample_sections):
    token = _new_token(client)
    _submit(client, token, sample_sections)
    assert client.delete(f"/api/responses/{token}").json()["deleted"] == len(sample_sections)
    assert client.get(f"/api/responses/{token}").json() == []
