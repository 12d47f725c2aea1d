"""Answer editor for rank options questions.

Ranks are written without checks; duplicates and bound violations are only
reported through the read-only predicates below.
"""
# feedback_questions/services/rank_options_answer_editor.py
from typing import List, Optional

from feedback_questions.core.logging import get_logs_writer_logger
from feedback_questions.schemas.defaults import (
    default_rank_options_question_details,
    default_rank_options_response_details,
)
from feedback_questions.schemas.question import RANK_OPTIONS_ANSWER_NOT_SUBMITTED
from feedback_questions.schemas.rank_options import RankOptionsQuestionDetails, RankOptionsResponseDetails
from feedback_questions.services.base import QuestionEditAnswerForm

logger = get_logs_writer_logger()


class RankOptionsAnswerEditor(QuestionEditAnswerForm[RankOptionsQuestionDetails, RankOptionsResponseDetails]):
    RANK_OPTIONS_ANSWER_NOT_SUBMITTED = RANK_OPTIONS_ANSWER_NOT_SUBMITTED

    default_question_details = staticmethod(default_rank_options_question_details)
    default_response_details = staticmethod(default_rank_options_response_details)

    def initialize(self) -> None:
        """Resize the answers to the option count, keeping earlier positive ranks.

        Ranks recorded for options past the new count are dropped.
        """
        previous = self.response_details.answers
        answers: List[Optional[int]] = [None] * len(self.question_details.options)
        for index, rank in enumerate(previous[:len(answers)]):
            if rank is not None and rank > 0:
                answers[index] = rank
        dropped = sum(1 for rank in previous[len(answers):] if rank is not None and rank > 0)
        if dropped:
            logger.debug("Dropped %d rank(s) recorded for removed options", dropped)
        self.response_details.answers = answers

    @property
    def ranks_to_be_assigned(self) -> range:
        return range(1, len(self.question_details.options) + 1)

    def set_rank(self, index: int, rank: Optional[int]) -> None:
        """Assign `rank` to the option at `index`; `None` or 0 unranks it."""
        if rank == RANK_OPTIONS_ANSWER_NOT_SUBMITTED:
            rank = None
        self.response_details.answers[index] = rank

    @property
    def ranked_answers(self) -> List[int]:
        return [rank for rank in self.response_details.answers if rank is not None]

    @property
    def number_of_options_ranked(self) -> int:
        return len(self.ranked_answers)

    @property
    def is_no_option_ranked(self) -> bool:
        return self.number_of_options_ranked == 0

    @property
    def has_duplicate_ranks(self) -> bool:
        ranked = self.ranked_answers
        return len(set(ranked)) != len(ranked) and len(ranked) != 0

    @property
    def is_min_enabled(self) -> bool:
        return bool(self.question_details.min_options_to_be_ranked)

    @property
    def is_max_enabled(self) -> bool:
        return bool(self.question_details.max_options_to_be_ranked)

    @property
    def is_below_minimum(self) -> bool:
        """Fewer options ranked than required, once ranking has started."""
        if not self.is_min_enabled:
            return False
        ranked = self.number_of_options_ranked
        return 0 < ranked < self.question_details.min_options_to_be_ranked

    @property
    def is_above_maximum(self) -> bool:
        if not self.is_max_enabled:
            return False
        return self.number_of_options_ranked > self.question_details.max_options_to_be_ranked

    available_ranks = ranks_to_be_assigned
    is_none_ranked = is_no_option_ranked
    is_same_ranks_assigned = has_duplicate_ranks
    is_min_options_enabled = is_min_enabled
    is_max_options_enabled = is_max_enabled
    is_options_ranked_less_than_min = is_below_minimum
    is_options_ranked_more_than_max = is_above_maximum
