"""Answer editor for MCQ questions.

Keeps exactly one choice, or the free-text "other" option, selected.
"""
# feedback_questions/services/mcq_answer_editor.py
from typing import List, Optional

from feedback_questions.core.logging import get_logs_writer_logger
from feedback_questions.schemas.defaults import default_mcq_question_details, default_mcq_response_details
from feedback_questions.schemas.mcq import McqQuestionDetails, McqResponseDetails
from feedback_questions.services.base import QuestionEditAnswerForm

logger = get_logs_writer_logger()


class McqAnswerEditor(QuestionEditAnswerForm[McqQuestionDetails, McqResponseDetails]):
    default_question_details = staticmethod(default_mcq_question_details)
    default_response_details = staticmethod(default_mcq_response_details)

    is_mcq_option_selected: List[bool]
    index_of_previous_option_selected: Optional[int]

    def initialize(self) -> None:
        """Mark the previously submitted answer as selected.

        An answer that is no longer among the choices is left in the response
        record but nothing is marked, so the respondent starts over. Text typed
        into the "other" field is dropped unless "other" is chosen.
        """
        self.is_mcq_option_selected = [False] * self.question_details.num_of_mcq_choices
        self.index_of_previous_option_selected = None

        if not self.response_details.is_other:
            self.response_details.other_field_content = ""

        answer = self.response_details.answer
        if answer == "" or self.response_details.is_other:
            return
        try:
            index = self.question_details.mcq_choices.index(answer)
        except ValueError:
            logger.warning("MCQ answer %r is not among the current choices, starting with no selection", answer)
            return
        self.is_mcq_option_selected[index] = True
        self.index_of_previous_option_selected = index

    @property
    def selected_index(self) -> Optional[int]:
        return self.index_of_previous_option_selected

    def toggle_other_option(self) -> None:
        """Switch the "other" option on or off.

        Turning it off drops the typed text; turning it on drops the chosen answer.
        """
        response = self.response_details
        response.is_other = not response.is_other
        if not response.is_other:
            response.other_field_content = ""
        else:
            response.answer = ""
            self._unmark_previous_option()

    def set_other_field_content(self, other_option_text: str) -> None:
        self.response_details.other_field_content = other_option_text

    def select_option(self, index: int) -> None:
        """Select the choice at `index`, replacing any earlier selection.

        A negative index counts from the last choice and is stored as the
        equivalent positive one.
        """
        index = range(self.question_details.num_of_mcq_choices)[index]
        choice = self.question_details.mcq_choices[index]
        response = self.response_details
        response.is_other = False
        response.other_field_content = ""
        self._unmark_previous_option()
        self.is_mcq_option_selected[index] = True
        self.index_of_previous_option_selected = index
        response.answer = choice

    def _unmark_previous_option(self) -> None:
        if self.index_of_previous_option_selected is not None:
            self.is_mcq_option_selected[self.index_of_previous_option_selected] = False
        self.index_of_previous_option_selected = None
