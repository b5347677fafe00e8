"""
Generate Questions API Route

Description:
This module defines a FastAPI route that generates interview questions for a job role.
Questions come from the generation provider; when the provider is over quota or returns
unusable output the curated question bank answers instead and the response is flagged
with usedFallback.

Arguments:
- request: An instance of Request, required for rate limiting.
- payload: An instance of GenerateQuestionsPayload with the interview parameters.

Returns:
- An instance of GenerateQuestionsResponse containing the questions.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- interview_prep.core.ai_client: For the app-owned question generation service.
- interview_prep.core.route_limiters: For rate limiting functionality.
- interview_prep.services.question_generation: For validation, generation and fallback.
- loguru: For logging information about the request and any errors that occur.

Author: @kcaparas1630

"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from loguru import logger
from interview_prep.core.ai_client import get_question_service
from interview_prep.core.route_limiters import limiter, generate_questions_rate_limit
from interview_prep.schemas.question_schemas import (
    ErrorResponse,
    GenerateQuestionsPayload,
    GenerateQuestionsResponse,
)
from interview_prep.services.question_generation.question_service import (
    QuestionGenerationService,
    UNAVAILABLE_FALLBACK_MESSAGE,
)
from interview_prep.services.question_generation.request_validation import validate_generation_request

router = APIRouter(
    prefix="/api",
    tags=["generate-questions"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Question generation failed"},
    }
)


@router.post("/generate-questions", response_model=GenerateQuestionsResponse, response_model_exclude_none=True)
@limiter.limit(generate_questions_rate_limit)
async def generate_questions(
    request: Request,
    payload: GenerateQuestionsPayload,
    service: QuestionGenerationService = Depends(get_question_service),
):
    """
    Request parameter is required for rate limiting.
    """
    # Raises ValidationError (400) before any provider call
    generation_request = validate_generation_request(payload)
    logger.info(
        f"Generate questions called: {generation_request.jobRole}, "
        f"{generation_request.interviewType.value}, {generation_request.difficulty.value}, "
        f"{generation_request.numberOfQuestions} questions"
    )

    try:
        result = await service.generate_questions(generation_request)
    except Exception as e:
        logger.error(f"Error generating questions: {e}")
        # Last resort: serve curated questions
        try:
            logger.warning("Critical error, using curated fallback questions")
            result = service.fallback_response(generation_request, UNAVAILABLE_FALLBACK_MESSAGE)
        except Exception as fallback_error:
            logger.exception(f"Fallback question selection failed: {fallback_error}")
            return JSONResponse(
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "Failed to generate questions",
                    "details": str(e) or "Unknown error",
                },
            )

    logger.info(
        f"Returning {len(result.questions)} questions"
        f"{' (using fallback)' if result.usedFallback else ''}"
    )
    return result
