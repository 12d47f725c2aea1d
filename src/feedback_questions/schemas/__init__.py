"""Pydantic-schemes for question details and response details.

`parse_question_details` and `parse_response_details` load wire payloads
through a union discriminated on `question_type`.
"""
# feedback_questions/schemas/__init__.py
from typing import Annotated, Any, Dict, Union

from pydantic import Field, TypeAdapter

from feedback_questions.schemas.mcq import McqQuestionDetails, McqResponseDetails
from feedback_questions.schemas.msq import MsqQuestionDetails, MsqResponseDetails
from feedback_questions.schemas.question import (
    NO_VALUE,
    RANK_OPTIONS_ANSWER_NOT_SUBMITTED,
    FeedbackParticipantType,
    FeedbackQuestionType,
    QuestionDetails,
    ResponseDetails,
)
from feedback_questions.schemas.rank_options import RankOptionsQuestionDetails, RankOptionsResponseDetails

AnyQuestionDetails = Annotated[
    Union[McqQuestionDetails, MsqQuestionDetails, RankOptionsQuestionDetails],
    Field(discriminator="question_type"),
]
AnyResponseDetails = Annotated[
    Union[McqResponseDetails, MsqResponseDetails, RankOptionsResponseDetails],
    Field(discriminator="question_type"),
]

_question_details_adapter = TypeAdapter(AnyQuestionDetails)
_response_details_adapter = TypeAdapter(AnyResponseDetails)


def parse_question_details(payload: Dict[str, Any]) -> QuestionDetails:
    """Load a question details payload into the record for its question type.

    Args:
        payload: JSON-compatible dict carrying a `question_type` tag.

    Returns:
        QuestionDetails: The typed details record.

    Raises:
        pydantic.ValidationError: If the tag is unknown or the payload is malformed.
    """
    return _question_details_adapter.validate_python(payload)


def parse_response_details(payload: Dict[str, Any]) -> ResponseDetails:
    """Load a response details payload into the record for its question type.

    Raises:
        pydantic.ValidationError: If the tag is unknown or the payload is malformed.
    """
    return _response_details_adapter.validate_python(payload)


__all__ = [
    "NO_VALUE",
    "RANK_OPTIONS_ANSWER_NOT_SUBMITTED",
    "FeedbackParticipantType",
    "FeedbackQuestionType",
    "QuestionDetails",
    "ResponseDetails",
    "McqQuestionDetails",
    "McqResponseDetails",
    "MsqQuestionDetails",
    "MsqResponseDetails",
    "RankOptionsQuestionDetails",
    "RankOptionsResponseDetails",
    "parse_question_details",
    "parse_response_details",
]
