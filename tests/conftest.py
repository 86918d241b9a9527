from io import BytesIO
from typing import List

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from PIL import Image

from src.quizsnap.service.quiz_interface import (
    IQuizGenerationService,
    ITextExtractionService,
    QuizQuestion,
)


class RecordingChatModel(FakeListChatModel):
    """Fake chat model that keeps the messages of every call."""
    received: list = []

    def _call(self, messages, stop=None, run_manager=None, **kwargs):
        self.received.append(messages)
        return super()._call(messages, stop=stop, run_manager=run_manager, **kwargs)


class FailingChatModel(FakeListChatModel):
    """Fake chat model whose every call fails like an unreachable API."""

    def _call(self, messages, stop=None, run_manager=None, **kwargs):
        raise RuntimeError("503 Service Unavailable")


class StubExtractionService(ITextExtractionService):
    def __init__(self, text: str = "Photosynthesis converts light energy into chemical energy.", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        self.calls.append((image_bytes, mime_type))
        if self.error:
            raise self.error
        return self.text


class StubGenerationService(IQuizGenerationService):
    def __init__(self, questions: List[QuizQuestion] = None, error=None):
        self.questions = questions or []
        self.error = error
        self.calls = []

    def generate_questions(self, text: str) -> List[QuizQuestion]:
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.questions


def make_questions(count: int = 5) -> List[QuizQuestion]:
    return [
        QuizQuestion(
            question=f"Question {i + 1}: which organelle performs photosynthesis?",
            options=["Chloroplast", "Mitochondrion", "Nucleus", "Ribosome"],
            answer="Chloroplast",
            explanation="Chloroplasts hold the chlorophyll that captures light.",
        )
        for i in range(count)
    ]


@pytest.fixture
def jpeg_bytes() -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (64, 48), "white").save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (32, 32), "black").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def questions() -> List[QuizQuestion]:
    return make_questions()
