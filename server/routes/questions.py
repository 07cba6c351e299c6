"""
Purpose: Server-side question generation and answer checking.
Dependencies: flask, core/questions.
Ext Hooks: Per-class banks, answer analytics.
Server Only: Quiz rules.
"""
from flask import Blueprint, request, jsonify
from core.questions.engine import evaluate
from core.questions.generators import generate_question
from core.questions.question import Question, MEDIUM

bp = Blueprint('questions', __name__)


@bp.route("/api/question", methods=["POST"])
def handle_question():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid data"}), 400
    try:
        question = generate_question(
            data.get('difficulty', MEDIUM),
            data.get('subject', 'math-mixed'),
            str(data.get('grade', '2')),
        )
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(question.to_dict())


@bp.route("/api/answer", methods=["POST"])
def handle_answer():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'question' not in data or 'answer' not in data:
        return jsonify({"error": "Invalid data"}), 400
    try:
        question = Question.from_dict(data['question'])
    except (KeyError, TypeError, ValueError):
        return jsonify({"error": "Invalid question"}), 400
    return jsonify({"correct": evaluate(question, data['answer'])})
