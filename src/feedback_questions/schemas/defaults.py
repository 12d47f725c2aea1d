"""Default records a question instance starts from when it is first edited.

Each factory returns a fresh instance, so callers are free to mutate it.
"""
# feedback_questions/schemas/defaults.py
from feedback_questions.schemas.mcq import McqQuestionDetails, McqResponseDetails
from feedback_questions.schemas.msq import MsqQuestionDetails, MsqResponseDetails
from feedback_questions.schemas.rank_options import RankOptionsQuestionDetails, RankOptionsResponseDetails


def default_mcq_question_details() -> McqQuestionDetails:
    return McqQuestionDetails()


def default_mcq_response_details() -> McqResponseDetails:
    return McqResponseDetails()


def default_msq_question_details() -> MsqQuestionDetails:
    return MsqQuestionDetails()


def default_msq_response_details() -> MsqResponseDetails:
    return MsqResponseDetails()


def default_rank_options_question_details() -> RankOptionsQuestionDetails:
    return RankOptionsQuestionDetails()


def default_rank_options_response_details() -> RankOptionsResponseDetails:
    return RankOptionsResponseDetails()
