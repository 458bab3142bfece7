# tests/conftest.py
import asyncio
import pytest
from fastapi.testclient import TestClient

from app.main import app


class FakeFile:
    """Stand-in for an upload: async read with optional delay / failure."""
    def __init__(self, filename, data=b"", delay=0.0, fail=None):
        self.filename = filename
        self.data = data
        self.delay = delay
        self.fail = fail

    async def read(self):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail is not None:
            raise self.fail
        return self.data


@pytest.fixture
def fake_file():
    return FakeFile


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


# --- Sample documents ---
@pytest.fixture
def sample_xml():
    return b'<a x="1"><b>hi</b><b>bye</b></a>'


@pytest.fixture
def xml_upload(sample_xml):
    """Build multipart `files` parts: xml_upload(("a.xml", b"..."), ...)."""
    def _build(*items):
        items = items or (("a.xml", sample_xml),)
        return [("files", (name, data, "application/xml")) for name, data in items]
    return _build
