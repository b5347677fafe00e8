"""
Fallback Question Selector Module

This module picks questions from the curated question bank when the generation
provider cannot be used. It returns the same QuestionTemplate records the
provider path produces, so callers only learn about the substitution through
the usedFallback flag on the response.

Selection rules:
- mixed interviews split the count as ceil(n/2) technical and the rest behavioral
- each partition is sampled without replacement from a shuffled private copy
- a partition smaller than its share contributes what it has; the shortfall is
  not redrawn from the other partition
- the combined result is reshuffled and truncated to the requested count

Dependencies:
- random: Shuffling, through an injectable random.Random instance.
- loguru: For logging selections.

Author: @kcaparas1630
"""

import math
import random
from typing import List, Optional, Sequence, TypeVar
from loguru import logger
from interview_prep.schemas.question_schemas import Difficulty, InterviewType, QuestionTemplate
from interview_prep.services.question_generation.question_bank import QUESTION_BANK, QuestionBank, get_pool

T = TypeVar("T")


def shuffle_copy(items: Sequence[T], rng: random.Random) -> List[T]:
    """Fisher-Yates shuffle of a private copy; the input is never modified."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def sample_questions(pool: Sequence[T], count: int, rng: random.Random) -> List[T]:
    shuffled = shuffle_copy(pool, rng)
    return shuffled[:max(0, min(count, len(shuffled)))]


def split_mixed_count(number_of_questions: int):
    """Return (technical_count, behavioral_count) for a mixed interview."""
    technical_count = math.ceil(number_of_questions / 2)
    return technical_count, number_of_questions - technical_count


class FallbackQuestionSelector:
    """
    Selects interview questions from the curated bank.

    The selector holds no per-request state. Pass a seeded random.Random to get
    reproducible selections in tests; by default an unseeded instance is used.

    Attributes:
        bank (QuestionBank): Read-only question bank to draw from.
        rng (random.Random): Randomness source for shuffling.
    """

    def __init__(self, bank: QuestionBank = QUESTION_BANK, rng: Optional[random.Random] = None):
        self.bank = bank
        self.rng = rng if rng is not None else random.Random()

    def select(
        self,
        job_role: str,
        interview_type: InterviewType,
        difficulty: Difficulty,
        number_of_questions: int,
    ) -> List[QuestionTemplate]:
        """
        Select fallback questions for an interview.

        Args:
            job_role (str): Target role. Accepted for symmetry with the provider
                path; the bank is role-agnostic so it does not affect selection.
            interview_type (InterviewType): technical, behavioral or mixed.
            difficulty (Difficulty): easy, medium or hard.
            number_of_questions (int): Requested number of questions.

        Returns:
            List[QuestionTemplate]: At most number_of_questions questions in random order.
        """
        interview_type = InterviewType(interview_type)
        difficulty = Difficulty(difficulty)
        questions: List[QuestionTemplate] = []

        if interview_type == InterviewType.MIXED:
            technical_count, behavioral_count = split_mixed_count(number_of_questions)
            questions.extend(sample_questions(get_pool(InterviewType.TECHNICAL, difficulty, self.bank), technical_count, self.rng))
            questions.extend(sample_questions(get_pool(InterviewType.BEHAVIORAL, difficulty, self.bank), behavioral_count, self.rng))
        else:
            questions.extend(sample_questions(get_pool(interview_type, difficulty, self.bank), number_of_questions, self.rng))

        selected = shuffle_copy(questions, self.rng)[:number_of_questions]
        logger.info(
            f"Selected {len(selected)} fallback questions for {job_role} "
            f"({interview_type.value}, {difficulty.value})"
        )
        return selected


def select_fallback(
    job_role: str,
    interview_type: InterviewType,
    difficulty: Difficulty,
    number_of_questions: int,
    rng: Optional[random.Random] = None,
) -> List[QuestionTemplate]:
    """Convenience wrapper around FallbackQuestionSelector for one-off selections."""
    return FallbackQuestionSelector(rng=rng).select(job_role, interview_type, difficulty, number_of_questions)
