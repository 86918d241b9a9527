# src/quizsnap/app.py
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager

from src.quizsnap import config
from src.quizsnap.api.routes import api_router, error_response
from src.quizsnap.errors import QuizGenerationError
from src.quizsnap.logger.logger_configuration import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{config.APP_NAME} {config.APP_VERSION} starting (provider: {config.LLM_PROVIDER})")
    yield


app = FastAPI(
    title=config.APP_NAME,
    description="Turns a photo of study material into a quiz or a flashcard deck.",
    version=config.APP_VERSION,
    lifespan=lifespan
)


@app.exception_handler(QuizGenerationError)
async def quiz_generation_error_handler(request: Request, exc: QuizGenerationError):
    logger.warning(f"[RELAY] Quiz generation failed ({exc.status_code}): {exc.message}")
    return error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # The only request input is the multipart "image" field
    logger.warning(f"[RELAY] Rejected request: {exc.errors()}")
    return error_response("No image provided", 400)


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/", summary="Application information")
async def read_root():
    return {"name": config.APP_NAME, "version": config.APP_VERSION}


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8000)
