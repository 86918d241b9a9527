# src/quizsnap/service/llm_service.py

from typing import List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from src.quizsnap import config
from src.quizsnap.logger.logger_configuration import logger
from src.quizsnap.errors import MalformedGenerationError, UpstreamUnavailableError
from src.quizsnap.service.model_factory import build_chat_model
from src.quizsnap.service.quiz_interface import IQuizGenerationService, QuizQuestion
from src.quizsnap.service.quiz_normalizer import normalize_questions, parse_questions
from src.quizsnap.service.vision_services import load_prompt

USER_PROMPT_TEMPLATE = "Create a {question_count}-question quiz based on this educational content:\n\n{extracted_text}"


class QuizGenerationService(IQuizGenerationService):
    def __init__(self, llm: Optional[BaseChatModel] = None):
        self.llm = llm or build_chat_model(
            model=config.QUIZ_MODEL,
            max_tokens=config.QUIZ_MAX_TOKENS,
            temperature=config.QUIZ_TEMPERATURE,
        )
        system_prompt = load_prompt(config.QUIZ_PROMPT_FILE)
        prompt = ChatPromptTemplate.from_messages(
            [("system", system_prompt), ("human", USER_PROMPT_TEMPLATE)]
        ).partial(question_count=str(config.QUESTION_COUNT), option_count=str(config.OPTION_COUNT))
        self.quiz_chain = prompt | self.llm | StrOutputParser()

    def generate_questions(self, text: str) -> List[QuizQuestion]:
        logger.info(f"[QUIZ] Generating {config.QUESTION_COUNT} questions with {config.QUIZ_MODEL}...")
        try:
            quiz_content = self.quiz_chain.invoke({"extracted_text": text})
        except Exception as e:
            logger.error(f"[QUIZ] Quiz API error: {e}")
            raise UpstreamUnavailableError("Failed to generate quiz") from e

        if not quiz_content or not quiz_content.strip():
            raise MalformedGenerationError("Failed to generate quiz content")

        if config.LOG_MODEL_RESPONSES:
            logger.info(f"[QUIZ] Quiz response: {quiz_content[:config.RESPONSE_PREVIEW_CHARS]}...")

        entries = parse_questions(quiz_content)
        return normalize_questions(entries, config.QUESTION_COUNT, config.OPTION_COUNT)
