from .health_response import HealthResponse
from .question_schemas import (
    InterviewType,
    Difficulty,
    QuestionTemplate,
    GenerateQuestionsPayload,
    GenerationRequest,
    GenerateQuestionsResponse,
    ErrorResponse
)

__all__ = [
    "HealthResponse",
    "InterviewType",
    "Difficulty",
    "QuestionTemplate",
    "GenerateQuestionsPayload",
    "GenerationRequest",
    "GenerateQuestionsResponse",
    "ErrorResponse"
]
