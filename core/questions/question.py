"""
Purpose: Question record shared by the engine, the session and the HTTP service.
Dependencies: dataclasses.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Tuple, Union

NUMERIC = 'numeric'
TEXT = 'text'

EASY = 'easy'
MEDIUM = 'medium'
HARD = 'hard'
DIFFICULTIES = (EASY, MEDIUM, HARD)


@dataclass
class Question:
    prompt: str
    answer: Union[int, str]
    kind: str = NUMERIC
    difficulty: str = MEDIUM
    subject: str = 'math-mixed'
    operator: Optional[str] = None  # '+', '-', '×', '÷' for arithmetic
    operands: Tuple[int, ...] = field(default_factory=tuple)

    def to_dict(self):
        data = asdict(self)
        data['operands'] = list(self.operands)
        return data

    @classmethod
    def from_dict(cls, data):
        answer = data['answer']
        kind = data.get('kind', NUMERIC)
        if kind == NUMERIC:
            answer = int(answer)
        return cls(
            prompt=data['prompt'],
            answer=answer,
            kind=kind,
            difficulty=data.get('difficulty', MEDIUM),
            subject=data.get('subject', 'math-mixed'),
            operator=data.get('operator'),
            operands=tuple(data.get('operands') or ()),
        )
