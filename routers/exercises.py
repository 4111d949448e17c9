# services/grading/routers/exercises.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from attempts_store import exercise_stats
from bank import get_exercise, get_exercises
from deps.auth import require_client
from deps.db import get_db
from schemas.attempts import ExerciseStats
from schemas.content import ExerciseOut

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("", response_model=List[ExerciseOut])
def list_exercises(module_code: Optional[str] = None):
    # response_model drops correct_answer
    return [e.model_dump() for e in get_exercises(module_code)]


@router.get(
    "/stats/{module_code}",
    response_model=ExerciseStats,
    dependencies=[Depends(require_client)],
)
def module_stats(
    module_code: str,
    student_id: str = Query(min_length=1),
    db: Session = Depends(get_db),
):
    ids = [e.id for e in get_exercises(module_code)]
    return exercise_stats(db, student_id, ids)


@router.get("/{exercise_id}", response_model=ExerciseOut)
def get_exercise_detail(exercise_id: str):
    e = get_exercise(exercise_id)
    if not e or not e.is_active:
        raise HTTPException(status_code=404, detail="exercise not found")
    return e.model_dump()
