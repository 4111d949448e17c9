# services/grading/bank.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from schemas.content import Exercise, Quiz

logger = logging.getLogger("practice-grading.bank")

_BASE = Path(__file__).resolve().parent

M = TypeVar("M", bound=BaseModel)


def content_dir() -> Path:
    return Path(os.getenv("CONTENT_DIR") or (_BASE / "data"))


def _iter_jsonl(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        for idx, line in enumerate(f, 1):
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("//"):
                continue
            try:
                yield json.loads(s)
            except json.JSONDecodeError:
                logger.warning("%s:%d: malformed JSON row skipped", p.name, idx)
                continue


def _iter_json(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("%s: malformed JSON file skipped", p.name)
            data = []
    if isinstance(data, list):
        for obj in data:
            yield obj
    elif isinstance(data, dict):
        # single record per file
        yield data


def _load_dir(d: Path, model: Type[M]) -> List[M]:
    items: List[M] = []
    if not d.exists():
        return items
    for p in sorted(d.rglob("*")):
        if not p.is_file():
            continue
        suf = p.suffix.lower()
        if suf == ".jsonl":
            source = _iter_jsonl(p)
        elif suf == ".json":
            source = _iter_json(p)
        else:
            continue

        for raw in source:
            try:
                items.append(model.model_validate(raw))
            except ValidationError as e:
                logger.warning(
                    "%s: invalid %s record skipped (%d errors)",
                    p.name,
                    model.__name__,
                    e.error_count(),
                )
                continue
    return items


class ContentBank:
    _exercises: Dict[str, Exercise] = {}
    _quizzes: Dict[str, Quiz] = {}
    _loaded: bool = False

    @classmethod
    def ensure_loaded(cls) -> None:
        if not cls._loaded:
            cls.reload()

    @classmethod
    def reload(cls) -> Dict[str, int]:
        root = content_dir()
        exercises = _load_dir(root / "exercises", Exercise)
        quizzes = _load_dir(root / "quizzes", Quiz)

        # Later files win on duplicate ids
        cls._exercises = {e.id: e for e in exercises}
        cls._quizzes = {q.id: q for q in quizzes}
        cls._loaded = True
        logger.info(
            "content bank loaded from %s: %d exercises, %d quizzes",
            root,
            len(cls._exercises),
            len(cls._quizzes),
        )
        return {"exercises": len(cls._exercises), "quizzes": len(cls._quizzes)}


# Public API
def get_exercises(module_code: Optional[str] = None) -> List[Exercise]:
    ContentBank.ensure_loaded()
    items = [e for e in ContentBank._exercises.values() if e.is_active]
    if module_code:
        items = [e for e in items if e.module_code == module_code]
    return items


def get_exercise(exercise_id: str) -> Optional[Exercise]:
    ContentBank.ensure_loaded()
    return ContentBank._exercises.get(exercise_id)


def get_quizzes(module_code: Optional[str] = None) -> List[Quiz]:
    ContentBank.ensure_loaded()
    items = [q for q in ContentBank._quizzes.values() if q.is_active]
    if module_code:
        items = [q for q in items if q.module_code == module_code]
    return items


def get_quiz(quiz_id: str) -> Optional[Quiz]:
    ContentBank.ensure_loaded()
    return ContentBank._quizzes.get(quiz_id)


def reload_bank() -> Dict[str, int]:
    return ContentBank.reload()
