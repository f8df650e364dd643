from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from config import Settings, get_settings
from main import app
from services.auth import create_access_token
from services.storage import DocumentStore, get_document_store


TEST_SECRET = "test-secret-used-only-by-the-test-suite"

SAMPLE_RESUME = """Jane Doe
Senior Software Engineer
San Francisco, CA
jane.doe@example.com | +1 415-555-0132 | linkedin.com/in/janedoe | github.com/janedoe

Summary
Backend engineer with eight years building hiring platforms.

Experience
Senior Engineer Jan 2020 – Present
Acme Corp Remote
- Led migration of the matching service to Python and PostgreSQL
- Cut p95 latency by 40%
Software Engineer | Globex | Jun 2016 - Dec 2019
- Built REST APIs in Django

Education
Bachelor of Science in Computer Science
Stanford University
2012 - 2016

Skills
Languages: Python, Go, TypeScript
Docker, Kubernetes, Terraform

Projects
Job Tracker: Full-stack job tracker built with React and Node.js
- https://github.com/janedoe/job-tracker

Certifications
AWS Certified Solutions Architect – Associate | Amazon Web Services | Mar 2023
"""


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def make_pdf():
    """Render lines of text into a one-page PDF."""
    def _make(lines):
        buf = BytesIO()
        pdf = canvas.Canvas(buf, pagesize=letter)
        y = 750
        for line in lines:
            pdf.drawString(72, y, line)
            y -= 16
        pdf.save()
        return buf.getvalue()
    return _make


@pytest.fixture
def settings(tmp_path):
    return Settings(
        upload_dir=str(tmp_path / "uploads"),
        jwt_secret=TEST_SECRET,
        max_upload_bytes=64 * 1024,
    )


@pytest.fixture
def store(settings):
    return DocumentStore(settings.upload_dir)


@pytest.fixture
def client(settings, store):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_document_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_header(settings):
    def _make(user_id):
        return {"Authorization": f"Bearer {create_access_token(user_id, settings)}"}
    return _make
