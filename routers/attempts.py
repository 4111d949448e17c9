# services/grading/routers/attempts.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

import attempts_store as store
from bank import get_exercise, get_quiz
from deps.auth import require_client
from deps.db import get_db
from exercise_grading import grade_exercise
from quiz_grading import grade_quiz_attempt
from schemas.attempts import (
    ExerciseAttemptIn,
    ExerciseAttemptOut,
    ExerciseAttemptResult,
    QuizAttemptIn,
    QuizAttemptOut,
    QuizAttemptResult,
)

logger = logging.getLogger("practice-grading.attempts")

router = APIRouter(tags=["attempts"], dependencies=[Depends(require_client)])


# ---------- Exercise attempts ----------


@router.post("/exercise-attempts", response_model=ExerciseAttemptResult)
def submit_exercise_attempt(req: ExerciseAttemptIn, db: Session = Depends(get_db)):
    exercise = get_exercise(req.exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")

    # Graded here, never trusted from the client
    result = grade_exercise(exercise, req.answer)

    attempt = store.save_exercise_attempt(
        db,
        exercise_id=exercise.id,
        student_id=req.student_id,
        answer=req.answer,
        is_correct=result.is_correct,
        points_earned=result.points_earned,
        time_taken=req.time_taken,
        hints_used=req.hints_used,
    )
    logger.info(
        "exercise attempt %s: student=%s exercise=%s correct=%s",
        attempt.id,
        req.student_id,
        exercise.id,
        result.is_correct,
    )
    out = ExerciseAttemptOut.model_validate(attempt).model_dump()
    return {**out, "feedback": result.feedback}


@router.get("/exercise-attempts/my", response_model=List[ExerciseAttemptOut])
def my_exercise_attempts(
    student_id: str = Query(min_length=1),
    exercise_id: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return store.exercise_attempts_for(db, student_id, exercise_id)


@router.get("/exercise-attempts/{exercise_id}/best", response_model=Optional[ExerciseAttemptOut])
def best_exercise_attempt(
    exercise_id: str,
    student_id: str = Query(min_length=1),
    db: Session = Depends(get_db),
):
    return store.best_exercise_attempt(db, exercise_id, student_id)


# ---------- Quiz attempts ----------


@router.post("/quiz-attempts", response_model=QuizAttemptResult)
def submit_quiz_attempt(req: QuizAttemptIn, db: Session = Depends(get_db)):
    quiz = get_quiz(req.quiz_id)
    if not quiz:
        raise HTTPException(status_code=404, detail="Quiz not found")
    if not quiz.questions:
        raise HTTPException(status_code=400, detail="Quiz has no questions")

    grade = grade_quiz_attempt(quiz.questions, req.answers, quiz.passing_score)

    saved = store.save_quiz_attempt(
        db,
        quiz_id=quiz.id,
        student_id=req.student_id,
        xp_reward=quiz.xp_reward,
        answers=[a.model_dump() for a in req.answers],
        score=grade.score,
        passed=grade.passed,
        time_taken=req.time_taken or 0,
    )
    attempt = saved["attempt"]
    logger.info(
        "quiz attempt %s: student=%s quiz=%s score=%d passed=%s xp=%d",
        attempt.id,
        req.student_id,
        quiz.id,
        grade.score,
        grade.passed,
        saved["xp_awarded"],
    )

    return {
        "id": attempt.id,
        "quiz_id": attempt.quiz_id,
        "score": attempt.score,
        "passed": attempt.passed,
        "time_taken": attempt.time_taken,
        "total_points": grade.total_points,
        "earned_points": grade.earned_points,
        "question_results": grade.question_results,
        "xp_awarded": saved["xp_awarded"],
        "attempt_number": saved["attempt_number"],
        "suggest_help": saved["suggest_help"],
    }


@router.get("/quiz-attempts/my")
def my_quiz_attempts(
    student_id: str = Query(min_length=1),
    limit: int = 50,
    db: Session = Depends(get_db),
):
    limit = max(1, min(limit, 100))
    attempts = store.quiz_attempts_for(db, student_id)[:limit]

    # Reuse schema; exclude potentially large JSON "answers"
    rows = [QuizAttemptOut.model_validate(a).model_dump(exclude={"answers"}) for a in attempts]
    return {"ok": True, "items": rows, "count": len(rows)}


@router.get("/quiz-attempts/{quiz_id}/best", response_model=Optional[QuizAttemptOut])
def best_quiz_attempt(
    quiz_id: str,
    student_id: str = Query(min_length=1),
    db: Session = Depends(get_db),
):
    return store.best_quiz_attempt(db, quiz_id, student_id)
