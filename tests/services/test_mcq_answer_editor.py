"""
Unit Tests for McqAnswerEditor

Selection exclusivity between the choices and the "other" option.
"""

from unittest import mock

import pytest

from feedback_questions.schemas import McqQuestionDetails, McqResponseDetails
from feedback_questions.services import mcq_answer_editor
from feedback_questions.services.mcq_answer_editor import McqAnswerEditor


class TestMcqInitialize:

    def test_initialize_when_no_answer_then_nothing_selected(self, fruit_mcq_details, empty_mcq_response):
        editor = McqAnswerEditor(fruit_mcq_details, empty_mcq_response)
        assert editor.is_mcq_option_selected == [False, False, False]
        assert editor.selected_index is None

    def test_initialize_when_previous_answer_then_marks_it(self, fruit_mcq_details):
        editor = McqAnswerEditor(fruit_mcq_details, McqResponseDetails(answer="Banana"))
        assert editor.is_mcq_option_selected == [False, True, False]
        assert editor.index_of_previous_option_selected == 1

    def test_initialize_when_answer_no_longer_a_choice_then_no_selection(self, fruit_mcq_details, monkeypatch):
        """A stale answer is not guessed at; it is logged and left unmarked."""
        fake_logger = mock.Mock()
        monkeypatch.setattr(mcq_answer_editor, "logger", fake_logger)
        response = McqResponseDetails(answer="Durian")

        editor = McqAnswerEditor(fruit_mcq_details, response)

        assert editor.is_mcq_option_selected == [False, False, False]
        assert editor.selected_index is None
        assert response.answer == "Durian"
        fake_logger.warning.assert_called_once()

    def test_initialize_when_other_answer_then_no_choice_marked(self, fruit_mcq_details):
        response = McqResponseDetails(is_other=True, other_field_content="Mango")
        editor = McqAnswerEditor(fruit_mcq_details, response)
        assert not any(editor.is_mcq_option_selected)

    def test_initialize_when_other_off_then_stale_other_text_cleared(self, fruit_mcq_details):
        response = McqResponseDetails(answer="Apple", is_other=False, other_field_content="junk")
        editor = McqAnswerEditor(fruit_mcq_details, response)
        assert response.other_field_content == ""
        assert editor.selected_index == 0

    def test_initialize_when_other_on_then_text_kept(self, fruit_mcq_details):
        response = McqResponseDetails(is_other=True, other_field_content="Mango")
        McqAnswerEditor(fruit_mcq_details, response)
        assert response.other_field_content == "Mango"

    def test_defaults_when_no_records_given(self):
        editor = McqAnswerEditor()
        assert editor.question_details.mcq_choices == []
        assert editor.response_details.answer == ""
        assert editor.is_mcq_option_selected == []


class TestMcqSelectOption:

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_select_option_then_exactly_that_choice_selected(self, fruit_mcq_details, empty_mcq_response, index):
        editor = McqAnswerEditor(fruit_mcq_details, empty_mcq_response)
        editor.select_option(0)
        editor.select_option(index)

        assert [i for i, flag in enumerate(editor.is_mcq_option_selected) if flag] == [index]
        assert editor.response_details.is_other is False
        assert editor.response_details.answer == fruit_mcq_details.mcq_choices[index]

    def test_select_option_when_other_active_then_other_cleared(self, fruit_mcq_details, empty_mcq_response):
        editor = McqAnswerEditor(fruit_mcq_details, empty_mcq_response)
        editor.toggle_other_option()
        editor.set_other_field_content("Mango")

        editor.select_option(2)

        assert editor.response_details.is_other is False
        assert editor.response_details.other_field_content == ""
        assert editor.response_details.answer == "Cherry"

    def test_select_option_when_negative_index_then_stored_as_positive(self, fruit_mcq_details, empty_mcq_response):
        editor = McqAnswerEditor(fruit_mcq_details, empty_mcq_response)
        editor.select_option(-1)
        assert editor.selected_index == 2
        assert editor.is_mcq_option_selected == [False, False, True]
        assert editor.response_details.answer == "Cherry"

        editor.select_option(0)
        assert editor.is_mcq_option_selected == [True, False, False]

    def test_select_option_when_negative_index_past_start_then_raises(self, fruit_mcq_details, empty_mcq_response):
        editor = McqAnswerEditor(fruit_mcq_details, empty_mcq_response)
        with pytest.raises(IndexError):
            editor.select_option(-4)
        assert editor.selected_index is None

    def test_select_option_when_index_out_of_range_then_state_untouched(self, fruit_mcq_details):
        editor = McqAnswerEditor(fruit_mcq_details, McqResponseDetails(answer="Apple"))
        with pytest.raises(IndexError):
            editor.select_option(5)
        assert editor.is_mcq_option_selected == [True, False, False]
        assert editor.response_details.answer == "Apple"


class TestMcqOtherOption:

    def test_toggle_other_on_then_answer_and_selection_cleared(self, fruit_mcq_details, empty_mcq_response):
        editor = McqAnswerEditor(fruit_mcq_details, empty_mcq_response)
        editor.select_option(1)

        editor.toggle_other_option()

        assert editor.response_details.is_other is True
        assert editor.response_details.answer == ""
        assert not any(editor.is_mcq_option_selected)

    def test_toggle_other_twice_then_text_not_restored(self, fruit_mcq_details, empty_mcq_response):
        editor = McqAnswerEditor(fruit_mcq_details, empty_mcq_response)
        editor.toggle_other_option()
        editor.set_other_field_content("Mango")

        editor.toggle_other_option()
        assert editor.response_details.is_other is False
        assert editor.response_details.other_field_content == ""

        editor.toggle_other_option()
        assert editor.response_details.is_other is True
        assert editor.response_details.other_field_content == ""

    def test_set_other_field_content_is_verbatim(self, fruit_mcq_details, empty_mcq_response):
        editor = McqAnswerEditor(fruit_mcq_details, empty_mcq_response)
        editor.toggle_other_option()
        editor.set_other_field_content("  Dragon fruit ")
        assert editor.response_details.other_field_content == "  Dragon fruit "
