# services/grading/exercise_grading.py
"""
Server-side grading of a single practice exercise.

The client never decides correctness: the submission handler passes the stored
exercise and the raw answer here and persists whatever comes back.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from answers import as_choice_set, first_number, is_blank, parse_number, same_text, to_text
from feedback import message
from schemas.content import Exercise
from schemas.grading import ExerciseGrade

logger = logging.getLogger("practice-grading.exercises")

# Allowed numeric deviation for numerical/word_problem answers.
NUMERIC_TOLERANCE = 0.01
# Absorbs float noise so that e.g. 1.01 vs 1.00 stays inside the tolerance.
_FLOAT_SLACK = 1e-9


def _within_tolerance(a: Optional[float], b: Optional[float]) -> bool:
    if a is None or b is None:
        return False
    return abs(a - b) <= NUMERIC_TOLERANCE + _FLOAT_SLACK


def _norm_text(v: Any) -> str:
    return to_text(v).strip().lower()


def normalize_algebraic(expr: Any) -> str:
    """
    Textual normalization only: no symbolic evaluation, so "2x+3" and "3+2x"
    stay different. '*' is rewritten before '^', which means "x**2" and "x^2"
    do not normalize to the same string either.
    """
    s = "".join(to_text(expr).strip().lower().split())
    return s.replace("*", "·").replace("^", "**")


# --- Comparators (all total) ------------------------------------------------------


def _match_text(answer: Any, correct: Any) -> bool:
    return same_text(_norm_text(answer), _norm_text(correct))


def _match_choice_set(answer: Any, correct: Any) -> bool:
    got = as_choice_set(answer)
    want = as_choice_set(correct)
    if got is None or want is None:
        return False
    return got == want


def _match_numerical(answer: Any, correct: Any) -> bool:
    return _within_tolerance(parse_number(answer), parse_number(correct))


def _match_algebraic(answer: Any, correct: Any) -> bool:
    return same_text(normalize_algebraic(answer), normalize_algebraic(correct))


def _match_word_problem(answer: Any, correct: Any) -> bool:
    return _within_tolerance(first_number(answer), first_number(correct))


COMPARATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "single_choice": _match_text,
    "multiple_choice": _match_choice_set,
    "numerical": _match_numerical,
    "algebraic": _match_algebraic,
    "word_problem": _match_word_problem,
}


def grade_exercise(
    exercise: Exercise, student_answer: Any, locale: Optional[str] = None
) -> ExerciseGrade:
    if is_blank(student_answer):
        return ExerciseGrade(
            is_correct=False, points_earned=0, feedback=message("no_answer", locale)
        )

    compare = COMPARATORS.get(exercise.exercise_type)
    if compare is None:
        logger.debug("exercise %s: no comparator for %r, using text match",
                     exercise.id, exercise.exercise_type)
        compare = _match_text

    is_correct = compare(student_answer, exercise.correct_answer)

    return ExerciseGrade(
        is_correct=is_correct,
        points_earned=exercise.points if is_correct else 0,
        feedback=message("correct" if is_correct else "incorrect", locale),
    )
