import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from src.quizsnap.api.schemas import ErrorResponse, QuizResponse
from src.quizsnap.errors import QuizGenerationError
from src.quizsnap.logger.logger_configuration import logger
from src.quizsnap.service import get_quiz_relay_service
from src.quizsnap.service.quiz_service import QuizRelayService
from src.quizsnap.utils.file_utils import resolve_mime_type

api_router = APIRouter()


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@api_router.post(
    "/generate-quiz",
    response_model=QuizResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Generate a multiple-choice quiz from an image of study material",
)
async def generate_quiz(
        image: Optional[UploadFile] = File(None),
        relay_service: QuizRelayService = Depends(get_quiz_relay_service),
):
    """
    Endpoint to upload an image. Its text is extracted by a vision model, then a
    text model writes the questions, which are normalized before being returned.
    """
    try:
        image_bytes = await image.read() if image is not None else None
        content_type = resolve_mime_type(image.filename, image.content_type) if image is not None else None

        questions = await asyncio.to_thread(relay_service.generate_quiz, image_bytes, content_type)
        return {"questions": [question.to_dict() for question in questions]}

    except QuizGenerationError:
        raise
    except Exception as e:
        logger.exception(f"Error generating quiz: {e}")
        return error_response("Internal server error", 500)


@api_router.get("/health", summary="Liveness check")
async def health_check():
    return {"status": "healthy"}
