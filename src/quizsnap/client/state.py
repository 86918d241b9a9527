# src/quizsnap/client/state.py
"""
Session state of the quiz client.

`SessionState` is an immutable value; every user event or relay outcome is a
pure function that takes the current state and returns the next one. Events
raised in a phase that does not accept them fail with `InvalidTransitionError`.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Tuple

from src.quizsnap.errors import InvalidTransitionError
from src.quizsnap.service.quiz_interface import QuizQuestion
from src.quizsnap.utils.file_utils import is_image_content_type

IMAGE_REQUIRED_NOTICE = "Please upload an image file"
RELAY_FAILED_NOTICE = "Failed to generate quiz. Please try again."

PROGRESS_DONE = 100.0

# (minimum percentage, message, emoji), highest first
RESULT_TIERS = (
    (80, "Excellent work!", "🎉"),
    (60, "Good job!", "👍"),
    (40, "Nice effort!", "💪"),
)
DEFAULT_TIER = ("Keep practicing!", "📚")


class Phase(str, Enum):
    UPLOAD = "upload"
    LOADING = "loading"
    MODE_SELECT = "mode_select"
    QUIZ = "quiz"
    FLASHCARDS = "flashcards"
    RESULTS = "results"


@dataclass(frozen=True)
class SessionState:
    phase: Phase = Phase.UPLOAD
    questions: Tuple[QuizQuestion, ...] = ()
    current_index: int = 0
    score: int = 0
    selected_answer: Optional[str] = None
    progress: float = 0.0
    card_flipped: bool = False
    notice: Optional[str] = None

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index == self.total - 1

    @property
    def explanation_visible(self) -> bool:
        return self.selected_answer is not None


@dataclass(frozen=True)
class ResultSummary:
    score: int
    total: int
    percentage: int
    message: str
    emoji: str


def initial_state(notice: Optional[str] = None) -> SessionState:
    return SessionState(notice=notice)


def _require(state: SessionState, event: str, *phases: Phase) -> None:
    if state.phase not in phases:
        allowed = ", ".join(phase.value for phase in phases)
        raise InvalidTransitionError(f"'{event}' is not allowed in phase '{state.phase.value}' (expected {allowed})")


# --- Upload / loading ---

def select_image(state: SessionState, content_type: Optional[str]) -> SessionState:
    """Accept an image for upload. Non-image types keep the upload phase with a notice."""
    _require(state, "select_image", Phase.UPLOAD)
    if not is_image_content_type(content_type):
        return replace(state, notice=IMAGE_REQUIRED_NOTICE)
    return replace(state, phase=Phase.LOADING, progress=0.0, notice=None)


def tick_progress(state: SessionState, increment: float, ceiling: float = 90) -> SessionState:
    """Advance the cosmetic progress value. Ticks arriving outside the loading phase are ignored."""
    if state.phase is not Phase.LOADING:
        return state
    return replace(state, progress=min(state.progress + max(increment, 0.0), ceiling))


def relay_succeeded(state: SessionState, questions: Iterable[QuizQuestion]) -> SessionState:
    _require(state, "relay_succeeded", Phase.LOADING)
    questions = tuple(questions)
    if not questions:
        raise InvalidTransitionError("A quiz needs at least one question")
    return SessionState(phase=Phase.MODE_SELECT, questions=questions, progress=PROGRESS_DONE)


def relay_failed(state: SessionState, message: str = RELAY_FAILED_NOTICE) -> SessionState:
    _require(state, "relay_failed", Phase.LOADING)
    return initial_state(notice=message)


# --- Mode selection ---

def choose_quiz(state: SessionState) -> SessionState:
    _require(state, "choose_quiz", Phase.MODE_SELECT)
    return replace(state, phase=Phase.QUIZ, current_index=0, score=0, selected_answer=None)


def choose_flashcards(state: SessionState) -> SessionState:
    _require(state, "choose_flashcards", Phase.MODE_SELECT)
    return replace(state, phase=Phase.FLASHCARDS, current_index=0, card_flipped=False)


# --- Quiz ---

def select_answer(state: SessionState, option: str) -> SessionState:
    """Commit an answer for the current question. Only the first selection counts."""
    _require(state, "select_answer", Phase.QUIZ)
    if state.selected_answer is not None:
        return state
    correct = option == state.current_question.answer
    return replace(state, selected_answer=option, score=state.score + 1 if correct else state.score)


def next_question(state: SessionState) -> SessionState:
    _require(state, "next_question", Phase.QUIZ)
    if state.selected_answer is None:
        raise InvalidTransitionError("Select an answer before moving on")
    if state.is_last_question:
        return replace(state, phase=Phase.RESULTS, selected_answer=None)
    return replace(state, current_index=state.current_index + 1, selected_answer=None)


# --- Flashcards ---

def next_card(state: SessionState) -> SessionState:
    _require(state, "next_card", Phase.FLASHCARDS)
    return replace(state, current_index=min(state.total - 1, state.current_index + 1), card_flipped=False)


def previous_card(state: SessionState) -> SessionState:
    _require(state, "previous_card", Phase.FLASHCARDS)
    return replace(state, current_index=max(0, state.current_index - 1), card_flipped=False)


def flip_card(state: SessionState) -> SessionState:
    _require(state, "flip_card", Phase.FLASHCARDS)
    return replace(state, card_flipped=not state.card_flipped)


def back_to_modes(state: SessionState) -> SessionState:
    _require(state, "back_to_modes", Phase.FLASHCARDS)
    return replace(state, phase=Phase.MODE_SELECT, current_index=0, card_flipped=False)


# --- Results / reset ---

def compute_results(score: int, total: int) -> ResultSummary:
    # half-up rounding, like Math.round in the browser
    percentage = int(math.floor(score / total * 100 + 0.5)) if total else 0
    message, emoji = DEFAULT_TIER
    for threshold, tier_message, tier_emoji in RESULT_TIERS:
        if percentage >= threshold:
            message, emoji = tier_message, tier_emoji
            break
    return ResultSummary(score=score, total=total, percentage=percentage, message=message, emoji=emoji)


def summarize(state: SessionState) -> ResultSummary:
    _require(state, "summarize", Phase.RESULTS)
    return compute_results(state.score, state.total)


def reset(state: SessionState) -> SessionState:
    _require(state, "reset", Phase.UPLOAD, Phase.MODE_SELECT, Phase.QUIZ, Phase.FLASHCARDS, Phase.RESULTS)
    return initial_state()
