"""
Purpose: Headless game session over HTTP, for a browser front end.
Dependencies: flask, core/session.py.
Ext Hooks: One session per player (keyed by cookie) instead of one per app.
Server Only: Drives the logic core; the browser only paints draw/ui snapshots.

Every route runs under the app's SESSION_LOCK so input, ticks and restarts
never interleave on Flask's worker threads.
"""
import math
from functools import wraps
from flask import Blueprint, request, jsonify, current_app

bp = Blueprint('session', __name__)

MAX_FRAMES_PER_TICK = 600


def _session():
    return current_app.config['GAME_SESSION']


def _snapshot():
    session = _session()
    return jsonify({"ui": session.ui_state(), "draw": session.draw_state()})


def _payload():
    """JSON object body, {} when empty, None when it is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _invalid(message="Invalid data"):
    return jsonify({"error": message}), 400


def serialised(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        with current_app.config['SESSION_LOCK']:
            return view(*args, **kwargs)
    return wrapper


@bp.route("/api/session/state", methods=["GET"])
@serialised
def handle_state():
    return _snapshot()


@bp.route("/api/session/start", methods=["POST"])
@serialised
def handle_start():
    data = _payload()
    if data is None:
        return _invalid()
    try:
        _session().start_game(data.get('grade'), data.get('subject'))
    except (TypeError, ValueError) as e:
        return _invalid(str(e))
    return _snapshot()


@bp.route("/api/session/click", methods=["POST"])
@serialised
def handle_click():
    data = _payload()
    if not data or 'x' not in data or 'y' not in data:
        return _invalid()
    try:
        x, y = float(data['x']), float(data['y'])
    except (TypeError, ValueError):
        return _invalid()
    if not (math.isfinite(x) and math.isfinite(y)):
        return _invalid()
    accepted = _session().handle_click(x, y)
    return jsonify({"accepted": accepted})


@bp.route("/api/session/answer", methods=["POST"])
@serialised
def handle_answer():
    data = _payload()
    if not data or 'answer' not in data:
        return _invalid()
    result = _session().submit_answer(str(data['answer']))
    if result is None:
        return jsonify({"error": "No question open"}), 409
    return jsonify({"correct": result.correct, "feedback": result.feedback})


@bp.route("/api/session/pause", methods=["POST"])
@serialised
def handle_pause():
    _session().toggle_pause()
    return _snapshot()


@bp.route("/api/session/tick", methods=["POST"])
@serialised
def handle_tick():
    data = _payload()
    if data is None:
        return _invalid()
    try:
        dt = float(data.get('dt', 1 / 60))
        frames = int(data.get('frames', 1))
    except (TypeError, ValueError):
        return _invalid()
    if not math.isfinite(dt) or dt < 0 or not 1 <= frames <= MAX_FRAMES_PER_TICK:
        return _invalid()
    session = _session()
    for _ in range(frames):
        session.update(dt)
    return _snapshot()


@bp.route("/api/session/restart", methods=["POST"])
@serialised
def handle_restart():
    _session().restart()
    return _snapshot()
