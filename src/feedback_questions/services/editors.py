"""Editor registry: which editor handles which question type.

The host keeps one editor per question instance and builds it here from the
question type tag and whatever records it already has.
"""
# feedback_questions/services/editors.py
from typing import Dict, Optional, Type, Union

from feedback_questions.schemas.question import FeedbackQuestionType, QuestionDetails, ResponseDetails
from feedback_questions.services.base import ModelChangeCallback, QuestionEditAnswerForm, QuestionEditDetailsForm
from feedback_questions.services.mcq_answer_editor import McqAnswerEditor
from feedback_questions.services.msq_details_editor import MsqDetailsEditor
from feedback_questions.services.rank_options_answer_editor import RankOptionsAnswerEditor

ANSWER_EDITORS: Dict[FeedbackQuestionType, Type[QuestionEditAnswerForm]] = {
    FeedbackQuestionType.MCQ: McqAnswerEditor,
    FeedbackQuestionType.RANK_OPTIONS: RankOptionsAnswerEditor,
}

DETAILS_EDITORS: Dict[FeedbackQuestionType, Type[QuestionEditDetailsForm]] = {
    FeedbackQuestionType.MSQ: MsqDetailsEditor,
}


def _check_record(question_type: FeedbackQuestionType, record, expected_cls: type) -> None:
    if record is None:
        return
    if not isinstance(record, expected_cls):
        raise ValueError(
            f"{question_type.value} editor expects {expected_cls.__name__}, got {type(record).__name__}"
        )


def create_answer_editor(
    question_type: Union[FeedbackQuestionType, str],
    question_details: Optional[QuestionDetails] = None,
    response_details: Optional[ResponseDetails] = None,
) -> QuestionEditAnswerForm:
    """Build the answer editor for a question instance.

    Args:
        question_type: The question type tag.
        question_details: The question's details, defaults when omitted.
        response_details: The respondent's previous answer, defaults when omitted.

    Returns:
        QuestionEditAnswerForm: An initialized editor owning both records.

    Raises:
        ValueError: If the type has no answer editor or a record is not the one that editor owns.
    """
    question_type = FeedbackQuestionType(question_type)
    editor_cls = ANSWER_EDITORS.get(question_type)
    if editor_cls is None:
        raise ValueError(f"No answer editor for question type {question_type.value}")
    _check_record(question_type, question_details, type(editor_cls.default_question_details()))
    _check_record(question_type, response_details, type(editor_cls.default_response_details()))
    return editor_cls(question_details, response_details)


def create_details_editor(
    question_type: Union[FeedbackQuestionType, str],
    question_details: Optional[QuestionDetails] = None,
    on_model_change: Optional[ModelChangeCallback] = None,
) -> QuestionEditDetailsForm:
    """Build the details editor for a question instance.

    Raises:
        ValueError: If the type has no details editor or the record is not the one that editor owns.
    """
    question_type = FeedbackQuestionType(question_type)
    editor_cls = DETAILS_EDITORS.get(question_type)
    if editor_cls is None:
        raise ValueError(f"No details editor for question type {question_type.value}")
    _check_record(question_type, question_details, type(editor_cls.default_model()))
    return editor_cls(question_details, on_model_change)
