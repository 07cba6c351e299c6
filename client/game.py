"""
Purpose: Desktop entry point for Hex Quest.
Dependencies: client/game_controller.py.

Run with ``python -m client.game`` or the ``hexquest`` console script.
Set HEXQUEST_USE_QUESTION_SERVER=1 to pull questions from the Flask service.
"""

from client.game_controller import GameController


def main():
    GameController().run()


if __name__ == "__main__":
    main()
