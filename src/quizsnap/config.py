import os
from pathlib import Path
from dotenv import load_dotenv

from src.quizsnap.config_loader import load_config


# Load environment variables from .env file
load_dotenv()

# Load configuration from config.yaml
_config = load_config()

# --- Application configuration ---
APP_CONFIG = _config.get("app", {})
APP_NAME = APP_CONFIG.get("name", "QuizSnap AI")
APP_VERSION = APP_CONFIG.get("version", "1.0.0")

# --- Upload configuration ---
UPLOAD_CONFIG = _config.get("upload", {})
ALLOWED_IMAGE_EXTENSIONS = set(UPLOAD_CONFIG.get("allowed_image_extensions", []))
DEFAULT_MIME_TYPE = UPLOAD_CONFIG.get("default_mime_type", "image/jpeg")

# --- LLM configuration ---
LLM_CONFIG = _config.get("llm", {})
LLM_PROVIDER = LLM_CONFIG.get("provider", "groq")
VISION_MODEL = LLM_CONFIG.get("vision_model", "meta-llama/llama-4-scout-17b-16e-instruct")
QUIZ_MODEL = LLM_CONFIG.get("quiz_model", "llama-3.3-70b-versatile")
VISION_MAX_TOKENS = LLM_CONFIG.get("vision_max_tokens", 2048)
QUIZ_MAX_TOKENS = LLM_CONFIG.get("quiz_max_tokens", 2048)
QUIZ_TEMPERATURE = LLM_CONFIG.get("quiz_temperature", 0.7)

# --- Quiz shape ---
QUIZ_CONFIG = _config.get("quiz", {})
QUESTION_COUNT = QUIZ_CONFIG.get("question_count", 5)
OPTION_COUNT = QUIZ_CONFIG.get("option_count", 4)

# --- Client flow configuration ---
CLIENT_CONFIG = _config.get("client", {})
CLIENT_ENDPOINT = CLIENT_CONFIG.get("endpoint", "/api/generate-quiz")
PROGRESS_INTERVAL_SECONDS = CLIENT_CONFIG.get("progress_interval_seconds", 0.5)
PROGRESS_MAX_INCREMENT = CLIENT_CONFIG.get("progress_max_increment", 15)
PROGRESS_CEILING = CLIENT_CONFIG.get("progress_ceiling", 90)

# --- API keys (from .env file) ---
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# --- Application paths ---
BASE_DIR = Path(__file__).resolve().parent

# Logging
LOGGING_CONFIG = _config.get("logging", {})
LOG_MODEL_RESPONSES = LOGGING_CONFIG.get("log_model_responses", True)
LOG_TIMINGS = LOGGING_CONFIG.get("log_timings", True)
RESPONSE_PREVIEW_CHARS = LOGGING_CONFIG.get("response_preview_chars", 200)

# Prompts
PROMPTS_CONFIG = _config.get("prompts", {})
PROMPT_DIR = BASE_DIR / PROMPTS_CONFIG.get("directory", "prompts")
VISION_PROMPT_FILE = PROMPTS_CONFIG.get("vision_extraction_file", "vision_extraction_prompt.txt")
QUIZ_PROMPT_FILE = PROMPTS_CONFIG.get("quiz_generation_file", "quiz_generation_prompt.txt")
