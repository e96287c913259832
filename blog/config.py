"""Configuration for the blog server."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent  # blog/config.py → blog/ → project/

# Built single-page app assets
UI_DIR = str(PROJECT_ROOT / "ui")

# Entry document served for every path that is not a real asset
INDEX_DOCUMENT = "index.html"

# Server bind address and port
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 8080
