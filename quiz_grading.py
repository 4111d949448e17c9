# services/grading/quiz_grading.py
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Sequence, Union

from answers import as_list, canonical_text, is_blank, same_text, to_text
from schemas.content import Question
from schemas.grading import QuestionResult, QuizAnswer, QuizGrade

logger = logging.getLogger("practice-grading.quizzes")


def _match_text(answer: Any, correct: Any) -> bool:
    if is_blank(answer):
        return False
    return same_text(
        canonical_text(correct).strip().lower(), canonical_text(answer).strip().lower()
    )


def _same_option(a: Any, b: Any) -> bool:
    # Strict: true is not 1 and false is not 0. int and float still compare by value.
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


def _match_selection(answer: Any, correct: Any) -> bool:
    if is_blank(answer):
        return False
    want = as_list(correct)
    got = as_list(answer)
    if want is None or got is None:
        return False
    if len(want) != len(got):
        return False
    return all(any(_same_option(g, item) for g in got) for item in want)


def _match_math(answer: Any, correct: Any) -> bool:
    if is_blank(answer):
        return False
    # Exact (case-sensitive) match after trimming; missing key compares as "".
    return same_text(to_text(correct or "").strip(), to_text(answer).strip())


COMPARATORS = {
    "multiple_choice": _match_text,
    "true_false": _match_text,
    "short_answer": _match_text,
    "multiple_select": _match_selection,
    "math_problem": _match_math,
}


def _percent(earned: int, total: int) -> int:
    if total <= 0:
        return 0
    # Half-up, not banker's rounding: 12.5 -> 13.
    return int(math.floor(earned / total * 100 + 0.5))


def _answer_map(answers: Iterable[Union[QuizAnswer, Dict[str, Any]]]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for a in answers:
        if isinstance(a, QuizAnswer):
            out[a.question_id] = a.answer
        else:
            out[a.get("question_id")] = a.get("answer")
    return out


def grade_quiz_attempt(
    questions: Sequence[Question],
    answers: Iterable[Union[QuizAnswer, Dict[str, Any]]],
    passing_score: int,
) -> QuizGrade:
    """
    Grade every question in order and reduce to a percentage score.

    A missing answer, malformed answer or unknown question type only costs that
    one question; the rest of the quiz is still graded.
    """
    by_id = _answer_map(answers)
    results: List[QuestionResult] = []
    total_points = 0
    earned_points = 0

    for q in questions:
        max_points = q.points
        total_points += max_points

        compare = COMPARATORS.get(q.question_type)
        if compare is None:
            logger.warning("Unknown question type: %s (question %s)", q.question_type, q.id)
            correct = False
        else:
            correct = compare(by_id.get(q.id), q.correct_answer)

        earned = max_points if correct else 0
        earned_points += earned
        results.append(
            QuestionResult(
                question_id=q.id, correct=correct, earned_points=earned, max_points=max_points
            )
        )

    score = _percent(earned_points, total_points)
    return QuizGrade(
        score=score,
        passed=score >= passing_score,
        total_points=total_points,
        earned_points=earned_points,
        question_results=results,
    )
