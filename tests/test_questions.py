import random
import unittest
from core.questions.banks import BANKS, GRADES
from core.questions.engine import QuestionEngine, evaluate, difficulty_for_row
from core.questions.generators import generate_question, operation_mix, bank_grade, SUBJECTS
from core.questions.question import Question, NUMERIC, TEXT, EASY, MEDIUM, HARD


def wrong_answer(question):
    if question.kind == NUMERIC:
        return str(question.answer + 1)
    return "definitely not it"


class TestGenerators(unittest.TestCase):
    def setUp(self):
        self.rng = random.Random(42)

    def test_division_is_exact(self):
        for grade in ('3', '4', '5', 'K'):
            for difficulty in (EASY, MEDIUM, HARD):
                for _ in range(200):
                    q = generate_question(difficulty, 'division', grade, self.rng)
                    dividend, divisor = q.operands
                    self.assertEqual(q.operator, '÷')
                    self.assertGreaterEqual(q.answer, 1)
                    self.assertGreaterEqual(divisor, 1)
                    self.assertEqual(dividend, divisor * q.answer)

    def test_subtraction_never_negative(self):
        for grade in GRADES:
            for _ in range(200):
                q = generate_question(HARD, 'subtraction', grade, self.rng)
                self.assertGreaterEqual(q.answer, 0)
                self.assertEqual(q.answer, q.operands[0] - q.operands[1])

    def test_operation_mix_gated_by_grade(self):
        self.assertEqual(operation_mix('K'), ['addition', 'subtraction'])
        self.assertEqual(operation_mix('1'), ['addition', 'subtraction'])
        self.assertEqual(operation_mix('2'), ['addition', 'subtraction', 'multiplication'])
        self.assertEqual(operation_mix('3'), ['addition', 'subtraction', 'multiplication', 'division'])

    def test_mixed_math_respects_gate(self):
        for _ in range(300):
            q = generate_question(MEDIUM, 'math-mixed', '1', self.rng)
            self.assertIn(q.operator, ('+', '-'))
        operators = {generate_question(MEDIUM, 'math-mixed', '5', self.rng).operator for _ in range(300)}
        self.assertEqual(operators, {'+', '-', '×', '÷'})

    def test_magnitude_scales_with_grade_and_difficulty(self):
        for _ in range(200):
            q = generate_question(EASY, 'addition', 'K', self.rng)
            self.assertTrue(all(1 <= n <= 2 for n in q.operands))
            q = generate_question(HARD, 'addition', '5', self.rng)
            self.assertTrue(all(1 <= n <= 300 for n in q.operands))
        hard_max = max(max(generate_question(HARD, 'addition', '5', self.rng).operands) for _ in range(300))
        self.assertGreater(hard_max, 200)

    def test_arithmetic_prompt(self):
        q = generate_question(MEDIUM, 'multiplication', '3', self.rng)
        a, b = q.operands
        self.assertEqual(q.prompt, f"{a} × {b} = ?")
        self.assertEqual(q.answer, a * b)
        self.assertEqual(q.kind, NUMERIC)

    def test_bank_subjects_are_text(self):
        for subject in BANKS:
            q = generate_question(MEDIUM, subject, '2', self.rng)
            self.assertEqual(q.kind, TEXT)
            self.assertIn((q.prompt, q.answer), BANKS[subject]['2'])

    def test_bank_grade_shifts_with_difficulty(self):
        self.assertEqual(bank_grade('2', EASY), '1')
        self.assertEqual(bank_grade('2', HARD), '3')
        self.assertEqual(bank_grade('K', EASY), 'K')
        self.assertEqual(bank_grade('5', HARD), '5')

    def test_every_subject_and_grade_generates(self):
        for subject in SUBJECTS:
            for grade in GRADES:
                self.assertIsInstance(generate_question(HARD, subject, grade, self.rng), Question)

    def test_invalid_config(self):
        with self.assertRaises(ValueError):
            generate_question(MEDIUM, 'history', '2', self.rng)
        with self.assertRaises(ValueError):
            generate_question(MEDIUM, 'addition', '7', self.rng)
        with self.assertRaises(ValueError):
            generate_question('impossible', 'addition', '2', self.rng)

    def test_question_from_dict(self):
        q = Question.from_dict({'prompt': '3 + 4 = ?', 'answer': '7', 'kind': 'numeric', 'operands': [3, 4]})
        self.assertEqual(q.answer, 7)
        self.assertEqual(q.operands, (3, 4))


class TestEvaluate(unittest.TestCase):
    def test_numeric(self):
        q = Question(prompt="5 + 7 = ?", answer=12)
        self.assertTrue(evaluate(q, "12"))
        self.assertTrue(evaluate(q, " 12 "))
        self.assertFalse(evaluate(q, "13"))
        self.assertFalse(evaluate(q, "12abc"))  # Trailing junk is rejected, not read as 12
        self.assertFalse(evaluate(q, ""))
        self.assertFalse(evaluate(q, "twelve"))

    def test_text_is_case_insensitive(self):
        q = Question(prompt="Red Planet?", answer="mars", kind=TEXT)
        self.assertTrue(evaluate(q, "  MARS "))
        self.assertTrue(evaluate(q, "Mars"))
        self.assertFalse(evaluate(q, "venus"))


class TestQuestionEngine(unittest.TestCase):
    def setUp(self):
        self.engine = QuestionEngine(rng=random.Random(5))

    def test_difficulty_for_row(self):
        self.assertEqual(difficulty_for_row(0, 20), HARD)
        self.assertEqual(difficulty_for_row(6, 20), HARD)
        self.assertEqual(difficulty_for_row(7, 20), MEDIUM)
        self.assertEqual(difficulty_for_row(13, 20), MEDIUM)
        self.assertEqual(difficulty_for_row(14, 20), EASY)
        self.assertEqual(difficulty_for_row(19, 20), EASY)

    def test_wrong_answers_step_difficulty_down(self):
        question = self.engine.begin((6, 5), HARD)
        self.assertEqual(question.difficulty, HARD)

        result = self.engine.submit(wrong_answer(question))
        self.assertFalse(result.correct)
        self.assertEqual(result.next_difficulty, MEDIUM)
        self.assertEqual(result.feedback, "Let's try an easier one!")
        question = self.engine.reissue()
        self.assertEqual(question.difficulty, MEDIUM)

        result = self.engine.submit(wrong_answer(question))
        self.assertEqual(result.feedback, "Here's an easier question!")
        question = self.engine.reissue()
        self.assertEqual(question.difficulty, EASY)

        result = self.engine.submit(wrong_answer(question))
        self.assertEqual(result.feedback, "Try again!")
        self.assertEqual(self.engine.reissue().difficulty, EASY)
        self.assertEqual(self.engine.wrong_answer_count, 3)
        self.assertEqual(self.engine.answered_tiles, set())

    def test_correct_answer_records_tile(self):
        question = self.engine.begin((6, 5), MEDIUM)
        result = self.engine.submit(str(question.answer))
        self.assertTrue(result.correct)
        self.assertTrue(self.engine.is_answered(6, 5))
        self.engine.close()
        self.assertIsNone(self.engine.current_question)
        self.assertTrue(self.engine.is_answered(6, 5))

    def test_reset_clears_answered_tiles(self):
        question = self.engine.begin((1, 1), EASY)
        self.engine.submit(str(question.answer))
        self.engine.reset()
        self.assertEqual(self.engine.answered_tiles, set())

    def test_submit_without_question(self):
        with self.assertRaises(RuntimeError):
            self.engine.submit("1")

    def test_configure_validates(self):
        with self.assertRaises(ValueError):
            self.engine.configure('history', '2')
        self.engine.configure('science', 'k')
        self.assertEqual(self.engine.grade_level, 'K')
        self.assertEqual(self.engine.begin((0, 0), EASY).kind, TEXT)

    def test_custom_source(self):
        calls = []

        def source(difficulty, subject, grade_level):
            calls.append((difficulty, subject, grade_level))
            return Question(prompt="1 + 1 = ?", answer=2, difficulty=difficulty)

        engine = QuestionEngine(source=source)
        engine.begin((0, 0), HARD)
        self.assertEqual(calls, [(HARD, 'math-mixed', '2')])


if __name__ == '__main__':
    unittest.main()
