"""Details editor for MSQ questions.

Keeps `msq_choices` and `msq_weights` paired: while weights are assigned, the
weight at position i always belongs to the choice at position i.
"""
# feedback_questions/services/msq_details_editor.py
from typing import List, Sequence, TypeVar

from feedback_questions.core.config import settings
from feedback_questions.core.logging import get_logs_writer_logger
from feedback_questions.schemas.defaults import default_msq_question_details
from feedback_questions.schemas.msq import MsqQuestionDetails
from feedback_questions.schemas.question import FeedbackParticipantType
from feedback_questions.services.base import QuestionEditDetailsForm

logger = get_logs_writer_logger()

T = TypeVar("T")

PARTICIPANT_TYPES: List[FeedbackParticipantType] = [
    FeedbackParticipantType.STUDENTS,
    FeedbackParticipantType.STUDENTS_EXCLUDING_SELF,
    FeedbackParticipantType.TEAMS,
    FeedbackParticipantType.TEAMS_EXCLUDING_SELF,
    FeedbackParticipantType.INSTRUCTORS,
]


def move_item_in_list(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """Return a copy of `items` with the item at `from_index` moved to `to_index`.

    Both indices are clamped to the list bounds, as a drag-and-drop list does
    when an item is dropped past either end.
    """
    moved = list(items)
    if not moved:
        return moved
    last = len(moved) - 1
    from_index = max(0, min(from_index, last))
    to_index = max(0, min(to_index, last))
    moved.insert(to_index, moved.pop(from_index))
    return moved


class MsqDetailsEditor(QuestionEditDetailsForm[MsqQuestionDetails]):
    PARTICIPANT_TYPES = PARTICIPANT_TYPES

    default_model = staticmethod(default_msq_question_details)

    def reorder(self, from_index: int, to_index: int) -> None:
        """Move a choice, and its weight when weights are assigned."""
        changes = {"msq_choices": move_item_in_list(self.model.msq_choices, from_index, to_index)}
        if self.model.has_assigned_weights:
            changes["msq_weights"] = move_item_in_list(self.model.msq_weights, from_index, to_index)
        self._trigger_model_change(**changes)
        logger.debug("Moved MSQ choice from %d to %d", from_index, to_index)

    def set_weight(self, index: int, value: float) -> None:
        weights = self.model.msq_weights.copy()
        weights[index] = float(value)
        self._trigger_model_change(msq_weights=weights)

    def set_choice_text(self, index: int, value: str) -> None:
        choices = self.model.msq_choices.copy()
        choices[index] = value
        self._trigger_model_change(msq_choices=choices)

    def add_choice(self) -> None:
        changes = {"msq_choices": self.model.msq_choices + [""]}
        if self.model.has_assigned_weights:
            changes["msq_weights"] = self.model.msq_weights + [0.0]
        self._trigger_model_change(**changes)
        logger.debug("Added MSQ choice, %d choice(s) now", len(self.model.msq_choices))

    def remove_choice(self, index: int) -> None:
        choices = self.model.msq_choices.copy()
        del choices[index]
        changes = {"msq_choices": choices}
        if self.model.has_assigned_weights:
            weights = self.model.msq_weights.copy()
            del weights[index]
            changes["msq_weights"] = weights
        self._trigger_model_change(**changes)
        logger.debug("Removed MSQ choice %d, %d choice(s) left", index, len(choices))

    def toggle_weights(self, enabled: bool) -> None:
        """Show or hide the weight column.

        Enabling always starts from zero weights; values entered before the
        column was hidden are not restored.
        """
        if not enabled:
            self._trigger_model_change(has_assigned_weights=False, msq_weights=[], msq_other_weight=0.0)
        else:
            self._trigger_model_change(
                has_assigned_weights=True,
                msq_weights=[0.0] * len(self.model.msq_choices),
            )
        logger.debug("MSQ weights %s", "enabled" if enabled else "disabled")

    def toggle_other_option(self, enabled: bool) -> None:
        if not enabled:
            self._trigger_model_change(other_enabled=False, msq_other_weight=0.0)
        else:
            self._trigger_model_change(other_enabled=True)

    def toggle_generated_options(self, enabled: bool) -> None:
        participant_type = FeedbackParticipantType.STUDENTS if enabled else FeedbackParticipantType.NONE
        self._trigger_model_change(generate_options_for=participant_type)

    def toggle_max_selectable(self, enabled: bool) -> None:
        max_selectable = settings.MSQ_DEFAULT_MAX_SELECTABLE if enabled else None
        self._trigger_model_change(max_selectable_choices=max_selectable)

    def toggle_min_selectable(self, enabled: bool) -> None:
        min_selectable = settings.MSQ_DEFAULT_MIN_SELECTABLE if enabled else None
        self._trigger_model_change(min_selectable_choices=min_selectable)

    @property
    def display_value_for_max_selectable_option(self) -> int:
        if self.model.max_selectable_choices is None:
            return settings.MSQ_DEFAULT_MAX_SELECTABLE
        return self.model.max_selectable_choices

    @property
    def display_value_for_min_selectable_option(self) -> int:
        if self.model.min_selectable_choices is None:
            return settings.MSQ_DEFAULT_MIN_SELECTABLE
        return self.model.min_selectable_choices

    @property
    def is_generated_options_enabled(self) -> bool:
        return self.model.generate_options_for != FeedbackParticipantType.NONE

    @property
    def is_max_selectable_choices_enabled(self) -> bool:
        return self.model.max_selectable_choices is not None

    @property
    def is_min_selectable_choices_enabled(self) -> bool:
        return self.model.min_selectable_choices is not None

    @property
    def max_min_selectable_value(self) -> int:
        """Upper bound offered for the min-selectable input, so min never exceeds max."""
        if not self.is_max_selectable_choices_enabled:
            return len(self.model.msq_choices)
        return self.model.max_selectable_choices

    display_max = display_value_for_max_selectable_option
    display_min = display_value_for_min_selectable_option
    max_allowed_for_min = max_min_selectable_value
