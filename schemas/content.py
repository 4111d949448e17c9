# services/grading/schemas/content.py
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

EXERCISE_TYPES = ("single_choice", "multiple_choice", "numerical", "algebraic", "word_problem")
QUESTION_TYPES = ("multiple_choice", "multiple_select", "true_false", "short_answer", "math_problem")


def _points_or_default(v: Any) -> int:
    # Stored rows may carry null/0 points; those are worth one point.
    if v is None or v == 0:
        return 1
    return v


class Exercise(BaseModel):
    id: str
    module_code: Optional[str] = None
    title: str = ""
    description: Optional[str] = None
    # Not restricted to EXERCISE_TYPES: unknown tags are graded by plain text equality.
    exercise_type: str
    question: str = ""
    options: Optional[List[str]] = None
    correct_answer: Any = None
    hints: Optional[List[str]] = None
    points: int = Field(default=1, ge=1)
    is_active: bool = True

    normalize_points = field_validator("points", mode="before")(_points_or_default)


class Question(BaseModel):
    id: str
    module_code: Optional[str] = None
    question_type: str
    question_text: str = ""
    options: Optional[List[str]] = None
    correct_answer: Any = None
    explanation: Optional[str] = None
    points: int = Field(default=1, ge=1)
    order: int = 0

    normalize_points = field_validator("points", mode="before")(_points_or_default)


class Quiz(BaseModel):
    id: str
    module_code: Optional[str] = None
    title: str
    description: Optional[str] = None
    passing_score: int = Field(ge=0, le=100)
    time_limit: Optional[int] = None
    xp_reward: int = 0
    is_active: bool = True
    questions: List[Question] = []

    @field_validator("questions")
    @classmethod
    def _sort_by_order(cls, v: List[Question]) -> List[Question]:
        return sorted(v, key=lambda q: q.order)


# ---------- Public views (no answers) ----------


class ExerciseOut(BaseModel):
    id: str
    module_code: Optional[str] = None
    title: str
    description: Optional[str] = None
    exercise_type: str
    question: str
    options: Optional[List[str]] = None
    hints: Optional[List[str]] = None
    points: int


class QuestionOut(BaseModel):
    id: str
    question_type: str
    question_text: str
    options: Optional[List[str]] = None
    points: int
    order: int


class QuizOut(BaseModel):
    id: str
    module_code: Optional[str] = None
    title: str
    description: Optional[str] = None
    passing_score: int
    time_limit: Optional[int] = None
    xp_reward: int
    question_count: int
