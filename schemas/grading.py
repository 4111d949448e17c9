# services/grading/schemas/grading.py
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel


class ExerciseGrade(BaseModel):
    is_correct: bool
    points_earned: int
    feedback: str


class QuizAnswer(BaseModel):
    question_id: str
    answer: Any = None


class QuestionResult(BaseModel):
    question_id: str
    correct: bool
    earned_points: int
    max_points: int


class QuizGrade(BaseModel):
    score: int
    passed: bool
    total_points: int
    earned_points: int
    question_results: List[QuestionResult]
