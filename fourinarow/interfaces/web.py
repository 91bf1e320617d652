"""
web.py - Browser interface for Four-in-a-Row

A Flask blueprint serving the game page and a small JSON API. The page
posts the start form and column clicks to the API and redraws from the view
model kept by a BrowserRenderer. The app holds one GameSession, the single
board every visitor sees.
"""

import threading

from flask import Blueprint, Flask, current_app, jsonify, render_template, request

from fourinarow.debug import debug
from fourinarow.exceptions import (InvalidColumnError, InvalidPlayerError, InvalidRequestError,
                                   NoActiveGameError)
from fourinarow.interfaces.render import BrowserRenderer
from fourinarow.session import GameSession

EXTENSION_KEY = 'fourinarow'

web_bp = Blueprint('fourinarow', __name__,
                   template_folder='templates',
                   static_folder='static',
                   static_url_path='/assets')


class WebState:
    """The app-wide session and the lock serializing requests against it."""

    def __init__(self):
        self.session = GameSession(BrowserRenderer)
        self.lock = threading.Lock()

    def view(self):
        renderer = self.session.renderer
        if renderer is None:
            return {"status": "NOT_STARTED"}
        return renderer.view


def _state() -> WebState:
    return current_app.extensions[EXTENSION_KEY]


def _payload():
    """The request body as a mapping: JSON object or form fields."""
    data = request.get_json(silent=True)
    if data is None:
        return request.form
    if not isinstance(data, dict):
        raise InvalidRequestError(f"request body must be an object, got {type(data).__name__}")
    return data


def _color(data, key):
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidPlayerError(f"{key} must be a string, got {value!r}")
    return value.strip() or None


def _column(raw) -> int:
    """Accept an integer, or a string of digits as sent by a form."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().isdecimal():
        return int(raw.strip())
    raise InvalidRequestError(f"column must be an integer, got {raw!r}")


@web_bp.route('/')
def index():
    """Display the game page."""
    debug.info(f"Page visit from {request.remote_addr}", "web")
    return render_template('fourinarow.html',
                           p1_color=current_app.config['DEFAULT_P1_COLOR'],
                           p2_color=current_app.config['DEFAULT_P2_COLOR'])


@web_bp.route('/api/state')
def state():
    with _state().lock:
        return jsonify(_state().view())


@web_bp.route('/api/start', methods=['POST'])
def start():
    data = _payload()
    p1_color = _color(data, 'p1_color') or current_app.config['DEFAULT_P1_COLOR']
    p2_color = _color(data, 'p2_color') or current_app.config['DEFAULT_P2_COLOR']

    web_state = _state()
    with web_state.lock:
        web_state.session.start(p1_color, p2_color)
        return jsonify(web_state.view())


@web_bp.route('/api/move', methods=['POST'])
def move():
    column = _column(_payload().get('column'))

    web_state = _state()
    with web_state.lock:
        web_state.session.select_column(column)
        return jsonify(web_state.view())


@web_bp.errorhandler(InvalidColumnError)
@web_bp.errorhandler(InvalidPlayerError)
@web_bp.errorhandler(InvalidRequestError)
def handle_bad_request(error):
    debug.warning(f"Bad request: {error}", "web")
    return jsonify({"error": str(error)}), 400


@web_bp.errorhandler(NoActiveGameError)
def handle_no_game(error):
    return jsonify({"error": str(error)}), 409


def create_app(overrides=None) -> Flask:
    """
    Build the Flask app.

    Args:
        overrides: Config values applied after fourinarow.config, e.g. TESTING
    """
    app = Flask(__name__)
    app.config.from_object('fourinarow.config')
    if overrides:
        app.config.update(overrides)

    app.jinja_env.trim_blocks = app.config['JINJA2_TRIM_BLOCKS']
    app.jinja_env.lstrip_blocks = app.config['JINJA2_LSTRIP_BLOCKS']

    app.extensions[EXTENSION_KEY] = WebState()
    app.register_blueprint(web_bp)

    debug.debug("Flask app created", "web")
    return app
