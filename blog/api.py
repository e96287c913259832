"""Flask Blueprint for the blog post API."""

import logging

from flask import Blueprint, jsonify

from . import posts

logger = logging.getLogger(__name__)


def _json_response(build_payload):
    try:
        return jsonify(build_payload())
    except (TypeError, ValueError) as e:
        logger.error("[API] Encoding error: %s", e)
        return "Internal error\n", 500, {"Content-Type": "text/plain; charset=utf-8"}


def create_api_blueprint(name="api"):
    """Create the Blueprint serving ``/api/posts/``.

    ``/api/posts/1`` returns the single post. Everything else under
    ``/api/posts/`` returns the post list.
    """
    bp = Blueprint(name, __name__)

    @bp.route("/api/posts/1")
    def post():
        return _json_response(posts.post_payload)

    @bp.route("/api/posts/")
    @bp.route("/api/posts/<path:rest>")
    def post_list(rest=None):
        return _json_response(posts.post_list_payload)

    return bp
