# src/quizsnap/service/vision_services.py

import base64
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage

from src.quizsnap import config
from src.quizsnap.logger.logger_configuration import logger
from src.quizsnap.errors import UpstreamUnavailableError
from src.quizsnap.service.model_factory import build_chat_model
from src.quizsnap.service.quiz_interface import ITextExtractionService


def load_prompt(filename: str) -> str:
    try:
        return (config.PROMPT_DIR / filename).read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Prompt file not found: {filename}")
    except Exception as e:
        raise IOError(f"Error loading prompt file '{filename}': {e}")


def message_text(message: BaseMessage) -> str:
    """Return the text of a chat model reply, whether content is a string or a list of parts."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def to_data_url(image_bytes: bytes, mime_type: str) -> str:
    image_b64 = base64.b64encode(image_bytes).decode()
    return f"data:{mime_type};base64,{image_b64}"


class VisionTextExtractionService(ITextExtractionService):
    def __init__(self, vision_llm: Optional[BaseChatModel] = None):
        self.vision_llm = vision_llm or build_chat_model(
            model=config.VISION_MODEL,
            max_tokens=config.VISION_MAX_TOKENS,
        )
        self.vision_extraction_prompt = load_prompt(config.VISION_PROMPT_FILE)

    def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        message = HumanMessage(
            content=[
                {"type": "text", "text": self.vision_extraction_prompt},
                {"type": "image_url", "image_url": {"url": to_data_url(image_bytes, mime_type)}},
            ]
        )

        logger.info(f"[VISION] Calling vision model {config.VISION_MODEL}...")
        try:
            response = self.vision_llm.invoke([message])
        except Exception as e:
            logger.error(f"[VISION] Vision API error: {e}")
            raise UpstreamUnavailableError("Failed to analyze image") from e

        extracted_text = message_text(response).strip()

        if config.LOG_MODEL_RESPONSES and extracted_text:
            logger.info(f"[VISION] Extracted text: {extracted_text[:config.RESPONSE_PREVIEW_CHARS]}...")

        return extracted_text
