import re
from pathlib import Path

import pytest

from models.document import DocumentType
from services.storage import DocumentStore


def test_save_writes_file_with_collision_resistant_name(tmp_path):
    store = DocumentStore(str(tmp_path))
    doc = store.save("alice", DocumentType.RESUME, b"%PDF-fake", "My Resume.pdf", "application/pdf")

    path = Path(doc.path)
    assert path.read_bytes() == b"%PDF-fake"
    assert re.fullmatch(r"alice_[0-9a-f]{8}-resume-\d+-[0-9a-f]{16}\.pdf", path.name)
    assert doc.original_filename == "My Resume.pdf"
    assert doc.size == len(b"%PDF-fake")
    assert store.get("alice", DocumentType.RESUME) == doc


def test_unsafe_user_id_and_extension_are_sanitised(tmp_path):
    store = DocumentStore(str(tmp_path))
    doc = store.save("../evil", DocumentType.CV, b"data", "cv.exe", "application/octet-stream")
    path = Path(doc.path)
    assert path.parent == tmp_path
    assert path.name.startswith("evil_")
    assert "-cv-" in path.name
    assert path.suffix == ""


def test_new_upload_replaces_previous_file(tmp_path):
    store = DocumentStore(str(tmp_path))
    first = store.save("alice", DocumentType.RESUME, b"first", "a.txt", "text/plain")
    second = store.save("alice", DocumentType.RESUME, b"second", "b.txt", "text/plain")

    assert not Path(first.path).exists()
    assert Path(second.path).exists()
    assert store.get("alice", DocumentType.RESUME) == second


def test_resume_and_cv_are_kept_apart(tmp_path):
    store = DocumentStore(str(tmp_path))
    resume = store.save("alice", DocumentType.RESUME, b"resume", "r.txt", "text/plain")
    cv = store.save("alice", DocumentType.CV, b"cv", "c.txt", "text/plain")

    assert Path(resume.path).exists() and Path(cv.path).exists()
    assert store.get("bob", DocumentType.RESUME) is None


def test_delete(tmp_path):
    store = DocumentStore(str(tmp_path))
    doc = store.save("alice", DocumentType.CV, b"cv", "cv.txt", "text/plain")

    assert store.delete("alice", DocumentType.CV) is True
    assert not Path(doc.path).exists()
    assert store.get("alice", DocumentType.CV) is None
    assert store.delete("alice", DocumentType.CV) is False


def test_ids_that_sanitise_alike_get_separate_files(tmp_path):
    store = DocumentStore(str(tmp_path))
    dotted = store.save("a.b", DocumentType.RESUME, b"same bytes", "r.txt", "text/plain")
    underscored = store.save("a_b", DocumentType.RESUME, b"same bytes", "r.txt", "text/plain")

    assert dotted.path != underscored.path
    store.delete("a.b", DocumentType.RESUME)
    assert Path(underscored.path).read_bytes() == b"same bytes"


def test_failed_write_leaves_no_partial_file(tmp_path, monkeypatch):
    def write_then_fail(self, data):
        with open(self, "wb") as f:
            f.write(data[:2])
        raise OSError("No space left on device")

    monkeypatch.setattr(Path, "write_bytes", write_then_fail)
    store = DocumentStore(str(tmp_path))

    with pytest.raises(OSError):
        store.save("alice", DocumentType.RESUME, b"resume bytes", "r.txt", "text/plain")
    assert list(tmp_path.iterdir()) == []
    assert store.get("alice", DocumentType.RESUME) is None


def test_upload_time_is_timezone_aware(tmp_path):
    doc = DocumentStore(str(tmp_path)).save("alice", DocumentType.CV, b"cv", "cv.txt", "text/plain")
    assert doc.uploaded_at.tzinfo is not None
