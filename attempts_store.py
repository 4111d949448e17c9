# services/grading/attempts_store.py
"""Persistence for graded submissions. Grading itself never touches the DB."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from models import ExerciseAttempt, QuizAttempt

# ---------- Exercise attempts ----------


def save_exercise_attempt(db: Session, **fields: Any) -> ExerciseAttempt:
    attempt = ExerciseAttempt(**fields)
    db.add(attempt)
    db.commit()
    db.refresh(attempt)
    return attempt


def exercise_attempts_for(
    db: Session, student_id: str, exercise_id: Optional[str] = None
) -> List[ExerciseAttempt]:
    stmt = select(ExerciseAttempt).where(ExerciseAttempt.student_id == student_id)
    if exercise_id:
        stmt = stmt.where(ExerciseAttempt.exercise_id == exercise_id)
    stmt = stmt.order_by(ExerciseAttempt.completed_at.desc(), ExerciseAttempt.id.desc())
    return list(db.scalars(stmt))


def best_exercise_attempt(
    db: Session, exercise_id: str, student_id: str
) -> Optional[ExerciseAttempt]:
    # Most points first; among equals the fastest.
    stmt = (
        select(ExerciseAttempt)
        .where(
            ExerciseAttempt.exercise_id == exercise_id,
            ExerciseAttempt.student_id == student_id,
        )
        .order_by(ExerciseAttempt.points_earned.desc(), ExerciseAttempt.time_taken.asc())
        .limit(1)
    )
    return db.scalars(stmt).first()


def exercise_stats(db: Session, student_id: str, exercise_ids: Sequence[str]) -> Dict[str, Any]:
    total_exercises = len(exercise_ids)
    if not exercise_ids:
        return {
            "total_exercises": 0,
            "completed_exercises": 0,
            "correct_answers": 0,
            "total_points": 0,
            "average_accuracy": 0.0,
        }

    attempts = list(
        db.scalars(
            select(ExerciseAttempt).where(
                ExerciseAttempt.student_id == student_id,
                ExerciseAttempt.exercise_id.in_(list(exercise_ids)),
            )
        )
    )
    correct = sum(1 for a in attempts if a.is_correct)
    accuracy = (correct / len(attempts) * 100) if attempts else 0.0
    return {
        "total_exercises": total_exercises,
        "completed_exercises": len({a.exercise_id for a in attempts}),
        "correct_answers": correct,
        "total_points": sum(a.points_earned for a in attempts),
        "average_accuracy": round(accuracy, 1),
    }


# ---------- Quiz attempts ----------


def quiz_attempts_for(
    db: Session, student_id: str, quiz_id: Optional[str] = None
) -> List[QuizAttempt]:
    stmt = select(QuizAttempt).where(QuizAttempt.student_id == student_id)
    if quiz_id:
        stmt = stmt.where(QuizAttempt.quiz_id == quiz_id)
    stmt = stmt.order_by(QuizAttempt.completed_at.desc(), QuizAttempt.id.desc())
    return list(db.scalars(stmt))


def best_quiz_attempt(db: Session, quiz_id: str, student_id: str) -> Optional[QuizAttempt]:
    stmt = (
        select(QuizAttempt)
        .where(QuizAttempt.quiz_id == quiz_id, QuizAttempt.student_id == student_id)
        .order_by(QuizAttempt.score.desc(), QuizAttempt.id.asc())
        .limit(1)
    )
    return db.scalars(stmt).first()


def save_quiz_attempt(
    db: Session, *, quiz_id: str, student_id: str, xp_reward: int, **fields: Any
) -> Dict[str, Any]:
    """
    Store a graded quiz attempt and work out the bookkeeping that depends on
    earlier attempts by the same student:

    - XP is awarded only on the first passed attempt.
    - Help is suggested once a student has failed three times (this one included).
    """
    previous = quiz_attempts_for(db, student_id, quiz_id)
    passed = bool(fields.get("passed"))

    already_passed = any(a.passed for a in previous)
    xp_awarded = xp_reward if passed and not already_passed else 0

    attempt = QuizAttempt(
        quiz_id=quiz_id, student_id=student_id, xp_awarded=xp_awarded, **fields
    )
    db.add(attempt)
    db.commit()
    db.refresh(attempt)

    failed_before = sum(1 for a in previous if not a.passed)
    return {
        "attempt": attempt,
        "xp_awarded": xp_awarded,
        "attempt_number": len(previous) + 1,
        "suggest_help": (not passed) and failed_before >= 2,
    }
