# services/grading/feedback.py
import os
from typing import Dict, Optional

DEFAULT_LOCALE = "pl"

MESSAGES: Dict[str, Dict[str, str]] = {
    "pl": {
        "no_answer": "Brak odpowiedzi",
        "correct": "Poprawna odpowiedź! Świetna robota! 🎉",
        "incorrect": "Niepoprawna odpowiedź. Spróbuj ponownie lub użyj wskazówek.",
    },
    "en": {
        "no_answer": "No answer provided",
        "correct": "Correct answer! Great job! 🎉",
        "incorrect": "Incorrect answer. Try again or use a hint.",
    },
}


def message(key: str, locale: Optional[str] = None) -> str:
    # Unknown locales fall back to the default catalogue.
    loc = (locale or os.getenv("GRADING_LOCALE") or DEFAULT_LOCALE).lower()
    catalogue = MESSAGES.get(loc, MESSAGES[DEFAULT_LOCALE])
    return catalogue[key]
