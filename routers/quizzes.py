# services/grading/routers/quizzes.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException

from bank import get_quiz, get_quizzes
from schemas.content import Quiz, QuestionOut, QuizOut

router = APIRouter(prefix="/quizzes", tags=["quizzes"])


def _summary(q: Quiz) -> dict:
    data = q.model_dump(exclude={"questions"})
    data["question_count"] = len(q.questions)
    return data


def _active_quiz_or_404(quiz_id: str) -> Quiz:
    q = get_quiz(quiz_id)
    if not q or not q.is_active:
        raise HTTPException(status_code=404, detail="Quiz not found")
    return q


@router.get("", response_model=List[QuizOut])
def list_quizzes(module_code: Optional[str] = None):
    return [_summary(q) for q in get_quizzes(module_code)]


@router.get("/{quiz_id}", response_model=QuizOut)
def get_quiz_detail(quiz_id: str):
    return _summary(_active_quiz_or_404(quiz_id))


@router.get("/{quiz_id}/questions", response_model=List[QuestionOut])
def get_quiz_questions(quiz_id: str):
    # already sorted by `order`; answers and explanations stay server-side
    return [qq.model_dump() for qq in _active_quiz_or_404(quiz_id).questions]
