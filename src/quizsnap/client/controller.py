# src/quizsnap/client/controller.py

import threading
from typing import Callable, List, Optional

import httpx

from src.quizsnap import config
from src.quizsnap.client import state as transitions
from src.quizsnap.client.progress import ProgressTicker
from src.quizsnap.client.state import Phase, ResultSummary, SessionState
from src.quizsnap.logger.logger_configuration import logger
from src.quizsnap.service.quiz_interface import QuizQuestion


class RelayRequestError(Exception):
    """The relay could not be reached or did not answer with a question list."""


class FlowController:
    """
    Owns the session state and drives it through the upload, quiz and flashcard flow.

    `http_client` is an `httpx.Client` (or anything with the same `post`) whose
    base URL points at the relay.
    """

    def __init__(self, http_client: httpx.Client, endpoint: Optional[str] = None,
                 ticker_factory: Optional[Callable[[Callable[[float], None]], ProgressTicker]] = None):
        self.http_client = http_client
        self.endpoint = endpoint or config.CLIENT_ENDPOINT
        self.ticker_factory = ticker_factory or ProgressTicker
        self._lock = threading.Lock()
        self._state = transitions.initial_state()

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    def _apply(self, transition: Callable[..., SessionState], *args) -> SessionState:
        with self._lock:
            self._state = transition(self._state, *args)
            return self._state

    def upload(self, filename: str, content: bytes, content_type: Optional[str]) -> SessionState:
        """Send an image to the relay and wait for the question set."""
        current = self._apply(transitions.select_image, content_type)
        if current.phase is not Phase.LOADING:
            logger.info(f"[CLIENT] Rejected '{filename}' ({content_type}): not an image")
            return current

        ticker = self.ticker_factory(self._apply_tick)
        ticker.start()
        try:
            questions = self._request_quiz(filename, content, content_type)
        except RelayRequestError as e:
            logger.error(f"[CLIENT] Quiz request failed: {e}")
            questions = None
        except Exception as e:
            logger.exception(f"[CLIENT] Unexpected error while requesting a quiz: {e}")
            questions = None
        finally:
            ticker.cancel()

        if questions is None:
            return self._apply(transitions.relay_failed, transitions.RELAY_FAILED_NOTICE)
        logger.info(f"[CLIENT] Received {len(questions)} question(s)")
        return self._apply(transitions.relay_succeeded, questions)

    def _apply_tick(self, increment: float):
        self._apply(transitions.tick_progress, increment, config.PROGRESS_CEILING)

    def _request_quiz(self, filename: str, content: bytes, content_type: str) -> List[QuizQuestion]:
        try:
            response = self.http_client.post(self.endpoint, files={"image": (filename, content, content_type)})
            if not 200 <= response.status_code < 300:
                raise RelayRequestError(f"Relay answered {response.status_code}: {response.text[:200]}")
            payload = response.json()
            questions = [QuizQuestion(**item) for item in payload["questions"]]
        except httpx.HTTPError as e:
            raise RelayRequestError(str(e)) from e
        except (ValueError, KeyError, TypeError) as e:
            raise RelayRequestError(f"Unexpected relay response: {e}") from e

        if not questions:
            raise RelayRequestError("Relay returned no questions")
        return questions

    # --- User events ---

    def choose_quiz(self) -> SessionState:
        return self._apply(transitions.choose_quiz)

    def choose_flashcards(self) -> SessionState:
        return self._apply(transitions.choose_flashcards)

    def select_answer(self, option: str) -> SessionState:
        return self._apply(transitions.select_answer, option)

    def next_question(self) -> SessionState:
        return self._apply(transitions.next_question)

    def next_card(self) -> SessionState:
        return self._apply(transitions.next_card)

    def previous_card(self) -> SessionState:
        return self._apply(transitions.previous_card)

    def flip_card(self) -> SessionState:
        return self._apply(transitions.flip_card)

    def back_to_modes(self) -> SessionState:
        return self._apply(transitions.back_to_modes)

    def reset(self) -> SessionState:
        return self._apply(transitions.reset)

    def results(self) -> ResultSummary:
        return transitions.summarize(self.state)
