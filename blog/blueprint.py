"""Flask Blueprint serving the single-page app's static assets."""

import logging

from flask import Blueprint, abort, redirect, request, send_file

from .config import INDEX_DOCUMENT, UI_DIR
from .filetree import DirectoryTree, FallbackTree

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "ui_dir": UI_DIR,
    "index": INDEX_DOCUMENT,
}


def send_opened_file(handle):
    """Build a response streaming ``handle``; the response takes ownership of it."""
    try:
        rv = send_file(
            handle.stream,
            download_name=handle.name,
            last_modified=handle.mtime,
            conditional=False,
            etag=False,
        )
        rv.content_length = handle.size
        return rv.make_conditional(request, accept_ranges=True, complete_length=handle.size)
    except Exception:
        handle.close()
        raise


def create_blueprint(name="ui", config=None):
    """Create and return the UI Flask Blueprint.

    Args:
        name: Blueprint name (used for url_for namespacing).
        config: Optional dict overriding DEFAULT_CONFIG keys.
            - ui_dir (Path|str): Directory holding the built app.
            - index (str): Entry document served for unknown paths.

    Returns:
        A Flask Blueprint that serves the app, falling back to the entry
        document for any path that is not a real asset. Directory paths
        without a trailing slash are redirected to the slashed form.
    """
    cfg = {**DEFAULT_CONFIG, **(config or {})}
    tree = DirectoryTree(cfg["ui_dir"], index=cfg["index"])
    resolver = FallbackTree(tree, cfg["index"])
    bp = Blueprint(name, __name__)

    @bp.route("/", defaults={"filename": ""})
    @bp.route("/<path:filename>")
    def static_files(filename):
        # directories are only served under their slashed path
        if filename and not filename.endswith("/") and tree.is_dir(filename):
            target = request.path + "/"
            if request.query_string:
                target += "?" + request.query_string.decode("latin-1")
            return redirect(target, 301)

        try:
            handle = resolver.open(filename)
        except OSError as e:
            logger.error("[UI] Cannot open fallback %r in %s: %s", cfg["index"], cfg["ui_dir"], e)
            abort(500)
        return send_opened_file(handle)

    return bp
