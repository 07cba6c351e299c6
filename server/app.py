"""
Purpose: Flask server for question service and headless game sessions.
Dependencies: flask, threading, server/routes/questions.py, server/routes/session.py, core/session.py.
Ext Hooks: Add more routes (leaderboards).
Client/Server: Server owns quiz rules and, for browser play, the whole session.
"""

import threading
from flask import Flask
from core.session import GameSession
from server.routes import questions, session


def create_app(game_session=None):
    app = Flask(__name__)
    app.config['GAME_SESSION'] = game_session or GameSession()
    # The session is shared by every request thread; routes hold this while they touch it
    app.config['SESSION_LOCK'] = threading.Lock()
    app.register_blueprint(questions.bp)
    app.register_blueprint(session.bp)
    return app


def main():
    create_app().run(debug=True)


if __name__ == "__main__":
    main()
