"""
Discharge summary API tests.
"""

from datetime import datetime

import pytest

from dischargeai.core.exceptions import CompletionError, DatabaseError


def _create(client, payload):
    return client.post("/api/discharges", json=payload)


def test_create_baby_of_priya_returns_stored_record(client, completion, valid_payload):
    response = _create(client, valid_payload)
    assert response.status_code == 201
    created = response.json()
    assert isinstance(created["id"], int)
    assert created["generatedSummary"] == completion.reply
    assert created["createdAt"]

    fetched = client.get(f"/api/discharges/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_create_echoes_every_input_field(client, full_payload):
    created = _create(client, full_payload).json()
    for key, value in full_payload.items():
        assert created[key] == value, key


def test_optional_fields_default_to_null(client, valid_payload):
    created = _create(client, valid_payload).json()
    assert created["fatherName"] is None
    assert created["specialInstructions"] is None


def test_created_id_was_not_previously_listed(client, valid_payload):
    before = {s["id"] for s in client.get("/api/discharges").json()}
    created = _create(client, valid_payload).json()
    assert created["id"] not in before


def test_create_calls_provider_once_with_hospital_prompt(client, completion, valid_payload, settings):
    _create(client, valid_payload)
    assert len(completion.requests) == 1
    request = completion.requests[0]
    assert settings.hospital.name in request.system_prompt
    assert "Baby of Priya" in request.user_prompt
    assert "Blood: N/A" in request.user_prompt
    assert request.max_tokens == settings.openai.max_tokens


@pytest.mark.parametrize("field, value", [
    ("patientName", ""),
    ("patientName", "   "),
    ("ipNumber", ""),
    ("hospitalCourse", ""),
    ("age", -1),
    ("age", "two"),
    ("age", 151),
    ("age", 2**63),
    ("gender", "Unknown"),
    ("unitOfAdmission", "Ward 9"),
    ("dischargeCondition", "Deceased"),
    ("admissionDate", "2023-13-01"),
    ("dischargeDate", "05/10/2023"),
    ("admissionDate", "2023-W40-1"),
    ("dischargeDate", "2023-278"),
    ("admissionDate", "20231001"),
])
def test_invalid_field_returns_400_naming_field(client, completion, valid_payload, field, value):
    before = len(client.get("/api/discharges").json())
    response = _create(client, {**valid_payload, field: value})

    assert response.status_code == 400
    body = response.json()
    assert body["field"] == field
    assert body["message"]
    assert len(client.get("/api/discharges").json()) == before
    assert completion.requests == []


def test_missing_required_field_returns_400(client, valid_payload):
    payload = dict(valid_payload)
    del payload["consultantName"]
    response = _create(client, payload)
    assert response.status_code == 400
    assert response.json()["field"] == "consultantName"


def test_list_is_newest_first(client, valid_payload):
    ids = [_create(client, {**valid_payload, "ipNumber": f"IP{i}"}).json()["id"] for i in range(3)]

    listed = client.get("/api/discharges").json()
    assert len(listed) == 3
    assert [s["id"] for s in listed] == list(reversed(ids))
    created_at = [datetime.fromisoformat(s["createdAt"].replace("Z", "+00:00")) for s in listed]
    assert created_at == sorted(created_at, reverse=True)


def test_list_empty(client):
    response = client.get("/api/discharges")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("summary_id", ["999", "0", "abc", "1.5", "-1", "99999999999999999999999"])
def test_get_unknown_id_returns_404(client, summary_id):
    response = client.get(f"/api/discharges/{summary_id}")
    assert response.status_code == 404
    assert response.json() == {"message": "Summary not found"}


def test_pdf_export(client, valid_payload):
    created = _create(client, valid_payload).json()
    response = client.get(f"/api/discharges/{created['id']}/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == "attachment; filename=discharge_IP123456.pdf"
    assert response.content.startswith(b"%PDF")


def test_docx_export(client, valid_payload):
    created = _create(client, valid_payload).json()
    response = client.get(f"/api/discharges/{created['id']}/docx")

    assert response.status_code == 200
    assert response.headers["content-type"] == (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )
    assert response.headers["content-disposition"] == "attachment; filename=discharge_IP123456.docx"
    # DOCX files are zip archives
    assert response.content.startswith(b"PK")


def test_export_sanitises_ip_number_in_filename(client, valid_payload):
    created = _create(client, {**valid_payload, "ipNumber": 'IP 12/"34"'}).json()
    response = client.get(f"/api/discharges/{created['id']}/pdf")
    assert response.headers["content-disposition"] == "attachment; filename=discharge_IP_12__34_.pdf"


@pytest.mark.parametrize("fmt", ["pdf", "docx"])
def test_export_unknown_id_returns_404(client, fmt):
    response = client.get(f"/api/discharges/424242/{fmt}")
    assert response.status_code == 404
    assert response.json() == {"message": "Summary not found"}


def test_exports_do_not_call_provider(client, completion, valid_payload):
    created = _create(client, valid_payload).json()
    client.get(f"/api/discharges/{created['id']}/pdf")
    client.get(f"/api/discharges/{created['id']}/docx")
    assert len(completion.requests) == 1


def test_provider_failure_returns_500_and_persists_nothing(lenient_client, completion, valid_payload):
    completion.error = CompletionError("rate limited")

    response = _create(lenient_client, valid_payload)

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
    assert lenient_client.get("/api/discharges").json() == []


def test_unexpected_error_returns_generic_500(lenient_client, completion, valid_payload):
    completion.error = RuntimeError("socket closed: secret-host:443")

    response = _create(lenient_client, valid_payload)

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
    assert "secret-host" not in response.text


def test_storage_failure_returns_500(lenient_client, repository, valid_payload, monkeypatch):
    async def broken_create(summary):
        raise DatabaseError("Failed to store discharge summary")

    monkeypatch.setattr(repository, "create", broken_create)

    response = _create(lenient_client, valid_payload)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}


@pytest.mark.parametrize("reply", ["", "   ", None])
def test_empty_completion_stores_fallback_text(client, completion, valid_payload, reply):
    completion.reply = reply

    created = _create(client, valid_payload)

    assert created.status_code == 201
    assert created.json()["generatedSummary"] == "Summary generation failed."


def test_identical_inputs_call_provider_each_time(client, completion, valid_payload):
    first = _create(client, valid_payload).json()
    second = _create(client, valid_payload).json()
    assert first["id"] != second["id"]
    assert len(completion.requests) == 2


def test_request_id_is_echoed(client):
    response = client.get("/api/discharges", headers={"X-Request-ID": "req-123"})
    assert response.headers["x-request-id"] == "req-123"
    assert "x-process-time" in response.headers
