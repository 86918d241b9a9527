# src/quizsnap/service/quiz_service.py

import time
from typing import List, Optional

from src.quizsnap import config
from src.quizsnap.logger.logger_configuration import logger
from src.quizsnap.errors import EmptyExtractionError, InvalidInputError
from src.quizsnap.service.quiz_interface import (
    IQuizGenerationService,
    ITextExtractionService,
    QuizQuestion,
)
from src.quizsnap.utils.file_utils import inspect_image, is_decodable_type


class QuizRelayService:
    """Image in, normalized question list out. Either every step succeeds or an error is raised."""

    def __init__(
            self,
            extraction_service: ITextExtractionService,
            generation_service: IQuizGenerationService,
    ):
        self.extraction_service = extraction_service
        self.generation_service = generation_service

    def generate_quiz(self, image_bytes: Optional[bytes], mime_type: Optional[str]) -> List[QuizQuestion]:
        total_start = time.time()
        logger.info("[RELAY] === STARTING QUIZ GENERATION ===")

        if not image_bytes:
            raise InvalidInputError("No image provided")

        mime_type = mime_type or config.DEFAULT_MIME_TYPE
        if is_decodable_type(mime_type):
            width, height = inspect_image(image_bytes)
            logger.info(f"[RELAY] Image loaded: {width}x{height} pixels ({mime_type})")
        else:
            # e.g. SVG or HEIC: left for the vision model to read
            logger.info(f"[RELAY] No local decoder for {mime_type}, forwarding as is")

        # --- 1. Text extraction ---
        vision_start = time.time()
        extracted_text = self.extraction_service.extract_text(image_bytes, mime_type)
        vision_time = time.time() - vision_start

        if not extracted_text:
            raise EmptyExtractionError("Could not extract text from image")

        if config.LOG_TIMINGS:
            logger.info(f"[VISION] Finished in {vision_time:.2f}s. Extracted {len(extracted_text)} chars.")

        # --- 2. Question generation ---
        quiz_start = time.time()
        questions = self.generation_service.generate_questions(extracted_text)
        quiz_time = time.time() - quiz_start

        if config.LOG_TIMINGS:
            logger.info(f"[QUIZ] Finished in {quiz_time:.2f}s. {len(questions)} question(s).")
            total_time = time.time() - total_start
            logger.info(
                f"[RELAY] === QUIZ GENERATION FINISHED in {total_time:.2f}s "
                f"(Vision {vision_time:.1f}s + Quiz {quiz_time:.1f}s) ===")

        return questions
