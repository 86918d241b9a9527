# src/quizsnap/errors.py


class QuizGenerationError(Exception):
    """Base error for a quiz generation request. Carries the HTTP status to answer with."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(QuizGenerationError):
    """The upload is missing or is not a usable image."""

    status_code = 400


class UpstreamUnavailableError(QuizGenerationError):
    """A call to the vision or the generation model failed."""

    status_code = 500


class EmptyExtractionError(QuizGenerationError):
    """The vision model returned no usable text."""

    status_code = 400


class MalformedGenerationError(QuizGenerationError):
    """The generation model reply could not be turned into a question list."""

    status_code = 500


class InvalidTransitionError(ValueError):
    """A client event was triggered in a phase that does not accept it."""
