"""
Description:
This module defines the schemas for interview question generation: the question
record itself, the inbound request body, the validated generation request and
the response returned by the generate-questions endpoint.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.
- enum: For the interview type and difficulty vocabularies.

Author: @kcaparas1630
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class InterviewType(str, Enum):
    """Kind of interview the questions are generated for."""
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    MIXED = "mixed"


class Difficulty(str, Enum):
    """Seniority the questions are pitched at."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionTemplate(BaseModel):
    """A single interview question, spoken aloud by the voice assistant."""
    model_config = ConfigDict(frozen=True)

    question: str = Field(..., min_length=1, description="Question text read to the candidate")
    category: str = Field(..., min_length=1, description="Short category label, e.g. 'System Design'")


class GenerateQuestionsPayload(BaseModel):
    """
    Raw request body for the generate-questions endpoint.

    Every field is optional here so that missing values can be reported with a
    single user-facing message instead of a list of schema errors.
    """
    jobRole: Optional[str] = None
    company: Optional[str] = None
    interviewType: Optional[str] = None
    difficulty: Optional[str] = None
    numberOfQuestions: Optional[int] = None


class GenerationRequest(BaseModel):
    """Validated parameters for one question generation."""
    model_config = ConfigDict(frozen=True)

    jobRole: str = Field(..., min_length=1, description="Target job role")
    company: Optional[str] = Field(default=None, description="Company the candidate is interviewing with")
    interviewType: InterviewType = Field(..., description="technical, behavioral or mixed")
    difficulty: Difficulty = Field(..., description="easy, medium or hard")
    numberOfQuestions: int = Field(..., ge=3, le=10, description="Number of questions to generate")


class GenerateQuestionsResponse(BaseModel):
    success: bool = Field(default=True)
    questions: List[QuestionTemplate] = Field(default_factory=list)
    usedFallback: bool = Field(default=False, description="True when the curated question bank served the request")
    message: Optional[str] = Field(default=None, description="Explanation shown when the fallback was used")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
