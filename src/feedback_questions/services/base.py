"""Generic editor bases shared by every question type.

`QuestionEditAnswerForm` owns a details record and a response record,
`QuestionEditDetailsForm` owns a details record only. Concrete editors pick the
record types and the default factories.
"""
# feedback_questions/services/base.py
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from feedback_questions.schemas.question import QuestionDetails, ResponseDetails

D = TypeVar("D", bound=QuestionDetails)
R = TypeVar("R", bound=ResponseDetails)

ModelChangeCallback = Callable[[Dict[str, Any]], None]


class QuestionEditAnswerForm(Generic[D, R]):
    """Answer editor for one question instance.

    The details record is only read; the response record is only written
    through the editor's operations.
    """

    default_question_details: Callable[[], D]
    default_response_details: Callable[[], R]

    def __init__(self, question_details: Optional[D] = None, response_details: Optional[R] = None):
        self.question_details: D = (
            question_details if question_details is not None else type(self).default_question_details()
        )
        self.response_details: R = (
            response_details if response_details is not None else type(self).default_response_details()
        )
        self.initialize()

    def initialize(self) -> None:
        """Reconcile the response record with the current details record."""


class QuestionEditDetailsForm(Generic[D]):
    """Details editor for one question instance.

    Every change goes through `_trigger_model_change`, which applies all the
    given fields before notifying the host once.
    """

    default_model: Callable[[], D]

    def __init__(self, model: Optional[D] = None, on_model_change: Optional[ModelChangeCallback] = None):
        self.model: D = model if model is not None else type(self).default_model()
        self.on_model_change = on_model_change

    def _trigger_model_change(self, **changes: Any) -> None:
        for field, value in changes.items():
            setattr(self.model, field, value)
        if self.on_model_change is not None:
            self.on_model_change(changes)
