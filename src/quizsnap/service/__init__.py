# src/quizsnap/service/__init__.py

from functools import lru_cache

from src.quizsnap.service.llm_service import QuizGenerationService
from src.quizsnap.service.quiz_service import QuizRelayService
from src.quizsnap.service.vision_services import VisionTextExtractionService


@lru_cache(maxsize=1)
def get_quiz_relay_service() -> QuizRelayService:
    """Build the relay service on first use so that importing the app does not need an API key."""
    return QuizRelayService(
        extraction_service=VisionTextExtractionService(),
        generation_service=QuizGenerationService(),
    )
