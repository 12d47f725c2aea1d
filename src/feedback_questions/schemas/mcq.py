"""Pydantic-schemes for multiple-choice single-select (MCQ) questions.
"""
# feedback_questions/schemas/mcq.py
from typing import List, Literal

from pydantic import Field

from feedback_questions.schemas.question import (
    FeedbackParticipantType,
    FeedbackQuestionType,
    QuestionDetails,
    ResponseDetails,
)


class McqQuestionDetails(QuestionDetails):
    question_type: Literal[FeedbackQuestionType.MCQ] = FeedbackQuestionType.MCQ
    mcq_choices: List[str] = Field(default_factory=list)
    other_enabled: bool = False
    generate_options_for: FeedbackParticipantType = FeedbackParticipantType.NONE

    @property
    def num_of_mcq_choices(self) -> int:
        return len(self.mcq_choices)


class McqResponseDetails(ResponseDetails):
    question_type: Literal[FeedbackQuestionType.MCQ] = FeedbackQuestionType.MCQ
    answer: str = ""
    is_other: bool = False
    other_field_content: str = ""
