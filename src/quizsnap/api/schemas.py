from typing import List

from pydantic import BaseModel


class QuizQuestionSchema(BaseModel):
    question: str
    options: List[str]
    answer: str
    explanation: str


class QuizResponse(BaseModel):
    questions: List[QuizQuestionSchema]


class ErrorResponse(BaseModel):
    error: str
