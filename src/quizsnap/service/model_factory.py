# src/quizsnap/service/model_factory.py

from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_groq import ChatGroq

from src.quizsnap import config


def build_chat_model(model: str, max_tokens: int, temperature: Optional[float] = None,
                     provider: Optional[str] = None) -> BaseChatModel:
    """Build the chat model for the configured provider ("groq" or "gemini")."""
    provider = provider or config.LLM_PROVIDER

    if provider == "groq":
        if not config.GROQ_API_KEY:
            raise ValueError("GROQ_API_KEY is missing")
        kwargs = {"model": model, "api_key": config.GROQ_API_KEY, "max_tokens": max_tokens}
        if temperature is not None:
            kwargs["temperature"] = temperature
        return ChatGroq(**kwargs)

    if provider == "gemini":
        if not config.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY is missing")
        kwargs = {"model": model, "google_api_key": config.GEMINI_API_KEY, "max_output_tokens": max_tokens}
        if temperature is not None:
            kwargs["temperature"] = temperature
        return ChatGoogleGenerativeAI(**kwargs)

    raise ValueError(f"Unknown LLM provider: {provider}")
