"""
Purpose: Question generators keyed by subject; numbers scale with grade and difficulty.
Dependencies: core/questions/question.py, core/questions/banks.py, random.
Ext Hooks: Word problems, fractions for grade 4+.
"""

import random
from core.questions.question import Question, NUMERIC, TEXT, EASY, MEDIUM, HARD, DIFFICULTIES
from core.questions.banks import BANKS, GRADES

ARITHMETIC_SUBJECTS = ('addition', 'subtraction', 'multiplication', 'division', 'math-mixed')
SUBJECTS = ARITHMETIC_SUBJECTS + tuple(BANKS)

# Largest operand for +/- and largest factor for ×/÷, per grade
MAX_OPERAND = {'K': 5, '1': 10, '2': 20, '3': 50, '4': 100, '5': 200}
MAX_FACTOR = {'K': 3, '1': 5, '2': 6, '3': 10, '4': 12, '5': 12}
DIFFICULTY_SCALE = {EASY: 0.5, MEDIUM: 1.0, HARD: 1.5}
MULTIPLICATION_GRADE = 2
DIVISION_GRADE = 3


def grade_index(grade_level):
    grade = str(grade_level).upper()
    if grade not in GRADES:
        raise ValueError(f"Invalid grade level: {grade_level}")
    return GRADES.index(grade)


def _scaled(limit, difficulty):
    return max(2, int(limit * DIFFICULTY_SCALE[difficulty]))


def _addition(rng, grade, difficulty):
    top = _scaled(MAX_OPERAND[grade], difficulty)
    a = rng.randint(1, top)
    b = rng.randint(1, top)
    return '+', (a, b), a + b


def _subtraction(rng, grade, difficulty):
    top = _scaled(MAX_OPERAND[grade], difficulty)
    a = rng.randint(2, top)
    b = rng.randint(1, a)
    return '-', (a, b), a - b


def _multiplication(rng, grade, difficulty):
    top = _scaled(MAX_FACTOR[grade], difficulty)
    a = rng.randint(1, top)
    b = rng.randint(1, top)
    return '×', (a, b), a * b


def _division(rng, grade, difficulty):
    # Quotient and divisor first so the dividend always divides exactly
    top = _scaled(MAX_FACTOR[grade], difficulty)
    quotient = rng.randint(1, top)
    divisor = rng.randint(1, top)
    return '÷', (divisor * quotient, divisor), quotient


OPERATIONS = {
    'addition': _addition,
    'subtraction': _subtraction,
    'multiplication': _multiplication,
    'division': _division,
}


def operation_mix(grade_level):
    """Operations unlocked for 'math-mixed' at a grade."""
    index = grade_index(grade_level)
    mix = ['addition', 'subtraction']
    if index >= MULTIPLICATION_GRADE:
        mix.append('multiplication')
    if index >= DIVISION_GRADE:
        mix.append('division')
    return mix


def generate_arithmetic(subject, difficulty, grade_level, rng=random):
    grade = GRADES[grade_index(grade_level)]
    operation = rng.choice(operation_mix(grade)) if subject == 'math-mixed' else subject
    op, operands, answer = OPERATIONS[operation](rng, grade, difficulty)
    return Question(
        prompt=f"{operands[0]} {op} {operands[1]} = ?",
        answer=answer,
        kind=NUMERIC,
        difficulty=difficulty,
        subject=subject,
        operator=op,
        operands=operands,
    )


def bank_grade(grade_level, difficulty):
    """Easy questions come from one grade down, hard ones from one grade up."""
    index = grade_index(grade_level)
    if difficulty == EASY:
        index -= 1
    elif difficulty == HARD:
        index += 1
    return GRADES[max(0, min(len(GRADES) - 1, index))]


def generate_from_bank(subject, difficulty, grade_level, rng=random):
    prompt, answer = rng.choice(BANKS[subject][bank_grade(grade_level, difficulty)])
    return Question(prompt=prompt, answer=answer, kind=TEXT, difficulty=difficulty, subject=subject)


def generate_question(difficulty=MEDIUM, subject='math-mixed', grade_level='2', rng=random):
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Invalid difficulty: {difficulty}")
    if subject in ARITHMETIC_SUBJECTS:
        return generate_arithmetic(subject, difficulty, grade_level, rng)
    if subject in BANKS:
        return generate_from_bank(subject, difficulty, grade_level, rng)
    raise ValueError(f"Invalid subject: {subject}")
