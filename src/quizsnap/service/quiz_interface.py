# src/quizsnap/service/quiz_interface.py

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import List


@dataclass(frozen=True)
class QuizQuestion:
    """A normalized multiple-choice question. `answer` is always one of `options`."""
    question: str
    options: List[str]
    answer: str
    explanation: str

    def to_dict(self) -> dict:
        return asdict(self)


class ITextExtractionService(ABC):
    """
    Interface for services that read the study material printed in an image.
    """

    @abstractmethod
    def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        """
        Extract the raw text of an image.

        Args:
            image_bytes: The uploaded image content.
            mime_type: The declared MIME type of the upload.

        Returns:
            The extracted text (may be empty).

        Raises:
            UpstreamUnavailableError: if the model call fails.
        """
        pass


class IQuizGenerationService(ABC):
    """
    Interface for services that write a question set from extracted text.
    """

    @abstractmethod
    def generate_questions(self, text: str) -> List[QuizQuestion]:
        """
        Generate normalized questions from the given text.

        Raises:
            UpstreamUnavailableError: if the model call fails.
            MalformedGenerationError: if the reply is not a usable question list.
        """
        pass
