"""Pydantic-schemes for multiple-choice multi-select (MSQ) questions.

Selectable bounds are `None` when unset and travel as `NO_VALUE` on the wire.
"""
# feedback_questions/schemas/msq.py
from typing import List, Literal, Optional

from pydantic import Field, field_serializer, field_validator, model_validator

from feedback_questions.schemas.question import (
    NO_VALUE,
    FeedbackParticipantType,
    FeedbackQuestionType,
    QuestionDetails,
    ResponseDetails,
)


class MsqQuestionDetails(QuestionDetails):
    question_type: Literal[FeedbackQuestionType.MSQ] = FeedbackQuestionType.MSQ
    msq_choices: List[str] = Field(default_factory=list)
    has_assigned_weights: bool = False
    msq_weights: List[float] = Field(default_factory=list)
    other_enabled: bool = False
    msq_other_weight: float = 0.0
    max_selectable_choices: Optional[int] = None
    min_selectable_choices: Optional[int] = None
    generate_options_for: FeedbackParticipantType = FeedbackParticipantType.NONE

    @field_validator("max_selectable_choices", "min_selectable_choices", mode="before")
    @classmethod
    def _no_value_to_none(cls, value):
        return None if value == NO_VALUE else value

    @field_serializer("max_selectable_choices", "min_selectable_choices")
    def _none_to_no_value(self, value: Optional[int]) -> int:
        return NO_VALUE if value is None else value

    @model_validator(mode="after")
    def _check_weights_paired(self) -> "MsqQuestionDetails":
        if self.has_assigned_weights:
            if len(self.msq_weights) != len(self.msq_choices):
                raise ValueError(
                    f"msq_weights has {len(self.msq_weights)} item(s) "
                    f"but msq_choices has {len(self.msq_choices)}"
                )
        elif self.msq_weights:
            raise ValueError("msq_weights must be empty when weights are not assigned")
        return self


class MsqResponseDetails(ResponseDetails):
    question_type: Literal[FeedbackQuestionType.MSQ] = FeedbackQuestionType.MSQ
    answers: List[str] = Field(default_factory=list)
    is_other: bool = False
    other_field_content: str = ""
