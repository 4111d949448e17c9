# services/grading/schemas/attempts.py
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.grading import QuestionResult, QuizAnswer

# ---------- Exercise attempts ----------


class ExerciseAttemptIn(BaseModel):
    exercise_id: str
    student_id: str = Field(min_length=1, max_length=64)
    answer: Any = None
    time_taken: int = Field(ge=1)  # seconds
    hints_used: int = Field(default=0, ge=0)


class ExerciseAttemptOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    exercise_id: str
    student_id: str
    answer: Any = None
    is_correct: bool
    points_earned: int
    time_taken: int
    hints_used: int
    completed_at: Optional[datetime] = None


class ExerciseAttemptResult(ExerciseAttemptOut):
    feedback: str


class ExerciseStats(BaseModel):
    total_exercises: int
    completed_exercises: int
    correct_answers: int
    total_points: int
    average_accuracy: float


# ---------- Quiz attempts ----------


class QuizAttemptIn(BaseModel):
    quiz_id: str
    student_id: str = Field(min_length=1, max_length=64)
    answers: List[QuizAnswer]
    time_taken: Optional[int] = Field(default=None, ge=0)


class QuizAttemptOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    quiz_id: str
    student_id: str
    score: int
    passed: bool
    time_taken: int
    xp_awarded: int
    completed_at: Optional[datetime] = None
    # excluded in list views
    answers: Optional[List[Any]] = None


class QuizAttemptResult(BaseModel):
    id: int
    quiz_id: str
    score: int
    passed: bool
    time_taken: int
    total_points: int
    earned_points: int
    question_results: List[QuestionResult]
    xp_awarded: int
    attempt_number: int
    suggest_help: bool
