"""
Question Generation Service Module

This module provides interview question generation through the generation
provider, with a curated question bank as a transparent fallback.
"""

from .fallback_selector import FallbackQuestionSelector, select_fallback
from .question_requester import QuestionRequester
from .question_service import QuestionGenerationService

__all__ = [
    "FallbackQuestionSelector",
    "select_fallback",
    "QuestionRequester",
    "QuestionGenerationService"
]
