"""
Test fixtures for the resume enhancer API
"""

import pytest

from config import settings


def build_pdf(text: str) -> bytes:
    """Build a one-page PDF that draws `text` in Helvetica"""
    content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    pdf = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(pdf))
        pdf += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(pdf)
    pdf += b"xref\n0 %d\n" % (len(objects) + 1)
    pdf += b"0000000000 65535 f \n"
    for offset in offsets:
        pdf += b"%010d 00000 n \n" % offset
    pdf += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    pdf += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(pdf)


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch, tmp_path):
    """No artificial delay and a throwaway upload directory"""
    monkeypatch.setattr(settings, "analysis_delay_seconds", 0.0)
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path))
    return settings


@pytest.fixture
def pdf_factory():
    return build_pdf


@pytest.fixture
def software_resume_pdf():
    return build_pdf("Senior engineer: python docker kubernetes aws git agile")
