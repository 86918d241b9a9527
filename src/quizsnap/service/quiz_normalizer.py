# src/quizsnap/service/quiz_normalizer.py
"""
Turns the free-form reply of the generation model into renderable questions.

The model is asked for a bare JSON array but regularly wraps it in a markdown
fence, prefixes options with "A." / "b)" enumerations, returns three or five
options, or names an answer that is not among the options. Structural defects
inside a parsed list are repaired; a reply that cannot be parsed at all is a
`MalformedGenerationError`.
"""

import json
import re
from typing import Any, Dict, List

from src.quizsnap.logger.logger_configuration import logger
from src.quizsnap.errors import MalformedGenerationError
from src.quizsnap.service.quiz_interface import QuizQuestion

OPTION_PREFIX_PATTERN = re.compile(r'^[A-Da-d][.):\-]\s*')

DEFAULT_QUESTION = "Question"
DEFAULT_EXPLANATION = "No explanation provided."


def placeholder_option(position: int) -> str:
    """Label used to pad a question that came back with too few options (1-based)."""
    return f"Option {position}"


def clean_option(value: Any) -> str:
    """Remove letter enumerations such as "A. ", "b) " or "C:" from an option."""
    text = "" if value is None else str(value)
    text = text.strip()
    # Loop so that cleaning an already-cleaned string is a no-op.
    while True:
        stripped = OPTION_PREFIX_PATTERN.sub('', text, count=1).strip()
        if stripped == text:
            return text
        text = stripped


def strip_code_fence(content: str) -> str:
    cleaned = content.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def parse_questions(content: str) -> List[Any]:
    """Parse the model reply into a non-empty list of raw question entries."""
    cleaned = strip_code_fence(content)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"[NORMALIZE] Invalid JSON in quiz response: {e}")
        raise MalformedGenerationError("Failed to parse quiz response") from e

    if not isinstance(parsed, list) or not parsed:
        logger.error(f"[NORMALIZE] Expected a non-empty JSON array, got {type(parsed).__name__}")
        raise MalformedGenerationError("Failed to parse quiz response")

    return parsed


def normalize_question(entry: Any, option_count: int = 4) -> QuizQuestion:
    raw: Dict[str, Any] = entry if isinstance(entry, dict) else {}

    raw_options = raw.get("options")
    if isinstance(raw_options, list):
        options = [clean_option(opt) for opt in raw_options][:option_count]
    else:
        logger.warning("[NORMALIZE] Question without an options list, using placeholders")
        options = []

    if len(options) < option_count:
        logger.warning(f"[NORMALIZE] Padding {option_count - len(options)} missing option(s)")
        position = len(options) + 1
        while len(options) < option_count:
            label = placeholder_option(position)
            if label not in options:
                options.append(label)
            position += 1

    answer = clean_option(raw.get("answer") or "")
    if answer not in options:
        logger.warning(f"[NORMALIZE] Answer '{answer}' is not an option, falling back to the first option")
        answer = options[0]

    return QuizQuestion(
        question=str(raw.get("question") or DEFAULT_QUESTION),
        options=options,
        answer=answer,
        explanation=str(raw.get("explanation") or DEFAULT_EXPLANATION),
    )


def normalize_questions(entries: List[Any], question_count: int = 5, option_count: int = 4) -> List[QuizQuestion]:
    return [normalize_question(entry, option_count) for entry in entries[:question_count]]
