"""Pydantic-schemes for rank options questions.

An unranked option and an unconstrained bound are `None` here and `0` on the wire.
"""
# feedback_questions/schemas/rank_options.py
from typing import List, Literal, Optional

from pydantic import Field, field_serializer, field_validator

from feedback_questions.schemas.question import (
    NO_VALUE,
    RANK_OPTIONS_ANSWER_NOT_SUBMITTED,
    FeedbackQuestionType,
    QuestionDetails,
    ResponseDetails,
)

RANK_OPTIONS_NO_LIMIT = 0


class RankOptionsQuestionDetails(QuestionDetails):
    question_type: Literal[FeedbackQuestionType.RANK_OPTIONS] = FeedbackQuestionType.RANK_OPTIONS
    options: List[str] = Field(default_factory=list)
    min_options_to_be_ranked: Optional[int] = None
    max_options_to_be_ranked: Optional[int] = None

    @field_validator("min_options_to_be_ranked", "max_options_to_be_ranked", mode="before")
    @classmethod
    def _no_limit_to_none(cls, value):
        return None if value in (RANK_OPTIONS_NO_LIMIT, NO_VALUE) else value

    @field_serializer("min_options_to_be_ranked", "max_options_to_be_ranked")
    def _none_to_no_limit(self, value: Optional[int]) -> int:
        return RANK_OPTIONS_NO_LIMIT if value is None else value


class RankOptionsResponseDetails(ResponseDetails):
    question_type: Literal[FeedbackQuestionType.RANK_OPTIONS] = FeedbackQuestionType.RANK_OPTIONS
    answers: List[Optional[int]] = Field(default_factory=list)

    @field_validator("answers", mode="before")
    @classmethod
    def _not_submitted_to_none(cls, value):
        if not isinstance(value, list):
            return value
        return [None if rank == RANK_OPTIONS_ANSWER_NOT_SUBMITTED else rank for rank in value]

    @field_serializer("answers")
    def _none_to_not_submitted(self, value: List[Optional[int]]) -> List[int]:
        return [RANK_OPTIONS_ANSWER_NOT_SUBMITTED if rank is None else rank for rank in value]
