"""HTTP tests for the resume enhancer API."""

import asyncio

import pytest
from fastapi.testclient import TestClient

import main
from main import app
from models.resume_models import Domain, SessionState, Template
from services.exceptions import FileTooLargeError

FIVE_MB = 5 * 1024 * 1024


@pytest.fixture
def client():
    return TestClient(app)


def pdf_upload(content, filename="resume.pdf", content_type="application/pdf"):
    return {"file": (filename, content, content_type)}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_lists_domains_and_templates(client):
    assert client.get("/domains").json() == ["software", "marketing", "finance", "healthcare"]
    assert client.get("/templates").json() == ["modern", "classic", "minimal", "professional"]


def test_analyze_pdf(client, software_resume_pdf):
    response = client.post(
        "/analyze",
        files=pdf_upload(software_resume_pdf),
        data={"job_description": "Backend engineer", "domain": "software", "template": "minimal"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["filename"] == "resume.pdf"
    assert body["template"] == "minimal"
    analysis = body["analysis"]
    assert set(analysis["suggestions"]) == {"skills", "experience", "education", "formatting"}
    assert "python" in analysis["matched_keywords"]
    assert 0 < analysis["match_score"] <= 100


def test_analyze_rejects_non_pdf(client):
    response = client.post(
        "/analyze",
        files=pdf_upload(b"plain text", "resume.txt", "text/plain"),
        data={"job_description": "Backend engineer"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Please upload a PDF file"


def test_analyze_rejects_oversized_pdf(client):
    response = client.post(
        "/analyze",
        files=pdf_upload(b"0" * (FIVE_MB + 1)),
        data={"job_description": "Backend engineer"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "File size should be less than 5MB"


def test_analyze_requires_job_description(client, software_resume_pdf):
    response = client.post("/analyze", files=pdf_upload(software_resume_pdf))
    assert response.status_code == 400
    assert response.json()["detail"] == "Please fill in all required fields"


def test_analyze_requires_file(client):
    response = client.post("/analyze", data={"job_description": "Backend engineer"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please fill in all required fields"


def test_analyze_rejects_unknown_domain(client, software_resume_pdf):
    response = client.post(
        "/analyze",
        files=pdf_upload(software_resume_pdf),
        data={"job_description": "Backend engineer", "domain": "astronomy"},
    )
    assert response.status_code == 422


def test_analyze_unreadable_pdf(client):
    response = client.post(
        "/analyze",
        files=pdf_upload(b"%PDF-1.4 garbage"),
        data={"job_description": "Backend engineer"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Could not extract text from PDF"


def test_uploads_are_cleaned_up(client, software_resume_pdf, fast_settings):
    from pathlib import Path

    client.post(
        "/analyze",
        files=pdf_upload(software_resume_pdf),
        data={"job_description": "Backend engineer"},
    )
    assert list(Path(fast_settings.upload_dir).iterdir()) == []


def test_analyze_text(client):
    response = client.post(
        "/analyze-text",
        json={
            "resume_text": "I have experience with python and docker",
            "job_description": "Backend engineer",
            "domain": "software",
        },
    )

    assert response.status_code == 200
    analysis = response.json()["analysis"]
    assert analysis["match_score"] == 10
    assert analysis["suggestions"]["skills"][0]["severity"] == "warning"


def test_analyze_text_requires_fields(client):
    response = client.post(
        "/analyze-text",
        json={"resume_text": "python", "job_description": ""},
    )
    assert response.status_code == 400


def test_session_flow(client, software_resume_pdf):
    session_id = client.post("/sessions").json()["session_id"]

    status = client.post(f"/sessions/{session_id}/resume", files=pdf_upload(software_resume_pdf)).json()
    assert status["state"] == "file_selected"

    response = client.post(f"/sessions/{session_id}/download")
    assert response.status_code == 400

    status = client.post(
        f"/sessions/{session_id}/analyze",
        data={"job_description": "Backend engineer", "domain": "software", "template": "professional"},
    ).json()
    assert status["state"] == "results_ready"
    assert status["can_download"] is False

    response = client.post(f"/sessions/{session_id}/download")
    assert response.status_code == 400
    assert response.json()["detail"] == "Please review suggestions before downloading"

    status = client.post(f"/sessions/{session_id}/review").json()
    assert status["state"] == "reviewed"
    assert status["can_download"] is True

    download = client.post(f"/sessions/{session_id}/download").json()
    assert download["exported"] is False
    assert download["template"] == "professional"

    assert client.delete(f"/sessions/{session_id}").status_code == 204
    assert client.get(f"/sessions/{session_id}").status_code == 404


def test_session_analyze_without_resume(client):
    session_id = client.post("/sessions").json()["session_id"]
    response = client.post(
        f"/sessions/{session_id}/analyze", data={"job_description": "Backend engineer"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Please fill in all required fields"


def test_session_review_before_analysis_conflicts(client, software_resume_pdf):
    session_id = client.post("/sessions").json()["session_id"]
    client.post(f"/sessions/{session_id}/resume", files=pdf_upload(software_resume_pdf))

    assert client.post(f"/sessions/{session_id}/review").status_code == 409


def test_unknown_session(client):
    assert client.get("/sessions/missing").status_code == 404


def test_cancelled_session_analysis_can_be_retried(fast_settings):
    session = main.sessions.create()
    session.select_file("resume.pdf", "python docker")
    fast_settings.analysis_delay_seconds = 5.0

    async def cancel_midway():
        task = asyncio.ensure_future(
            main.analyze_session(session.session_id, "Backend engineer", Domain.SOFTWARE, Template.MODERN)
        )
        await asyncio.sleep(0.05)
        assert session.state == SessionState.ANALYZING
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(cancel_midway())

    assert session.state == SessionState.FILE_SELECTED
    fast_settings.analysis_delay_seconds = 0.0
    session.begin_analysis("Backend engineer", Domain.SOFTWARE)
    assert session.state == SessionState.ANALYZING


def test_declared_size_rejected_before_reading():
    class OversizedUpload:
        filename = "resume.pdf"
        content_type = "application/pdf"
        size = FIVE_MB + 1

        async def read(self):
            raise AssertionError("body should not be read")

    with pytest.raises(FileTooLargeError) as exc_info:
        asyncio.run(main.read_resume_upload(OversizedUpload()))
    assert exc_info.value.message == "File size should be less than 5MB"
