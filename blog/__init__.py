"""Blog server: single-page app assets plus a fixed post API. Flask application."""

from flask import Flask

from .api import create_api_blueprint
from .blueprint import create_blueprint


def create_app(config=None):
    app = Flask(__name__, static_folder=None)
    app.json.sort_keys = False
    app.json.compact = True
    app.register_blueprint(create_api_blueprint())
    app.register_blueprint(create_blueprint(config=config), url_prefix="/")
    return app
