# tests/conftest.py
import errno
import io
import os
import sys

import pytest

# Make the project root importable when running pytest from a checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from blog import create_app
from blog.filetree import OpenedFile

INDEX_HTML = b"<!DOCTYPE html><title>index</title>"
APP_JS = b"console.log('app');"


class MemoryTree:
    """In-memory file tree that records every path it is asked to open."""

    def __init__(self, files, errors=None):
        self.files = dict(files)
        self.errors = dict(errors or {})
        self.opened = []

    def open(self, path):
        self.opened.append(path)
        if path in self.errors:
            raise self.errors[path]
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file", path)
        data = self.files[path]
        return OpenedFile(name=path.rsplit("/", 1)[-1], stream=io.BytesIO(data), size=len(data))


@pytest.fixture
def memory_tree():
    return MemoryTree({"/index.html": INDEX_HTML, "/app.js": APP_JS})


@pytest.fixture
def ui_dir(tmp_path):
    root = tmp_path / "ui"
    root.mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "app.js").write_bytes(APP_JS)
    (root / "docs").mkdir()
    (root / "docs" / "index.html").write_bytes(b"<title>docs</title>")
    (root / "empty").mkdir()
    (tmp_path / "secret.txt").write_bytes(b"top secret")
    return root


@pytest.fixture
def app(ui_dir):
    """Create application for the tests."""
    app = create_app(config={"ui_dir": str(ui_dir)})
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()
