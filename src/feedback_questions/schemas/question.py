"""Question type tags, wire sentinels and the base record schemes.
"""
# feedback_questions/schemas/question.py
import enum
from typing import Any, Dict

from pydantic import BaseModel

# "unset" for a numeric bound on the wire
NO_VALUE = -2147483648
# an option the respondent has not ranked yet
RANK_OPTIONS_ANSWER_NOT_SUBMITTED = 0


class FeedbackQuestionType(str, enum.Enum):
    MCQ = "MCQ"
    MSQ = "MSQ"
    RANK_OPTIONS = "RANK_OPTIONS"


class FeedbackParticipantType(str, enum.Enum):
    NONE = "NONE"
    STUDENTS = "STUDENTS"
    STUDENTS_EXCLUDING_SELF = "STUDENTS_EXCLUDING_SELF"
    TEAMS = "TEAMS"
    TEAMS_EXCLUDING_SELF = "TEAMS_EXCLUDING_SELF"
    INSTRUCTORS = "INSTRUCTORS"


class QuestionDetails(BaseModel):
    question_text: str = ""

    def to_payload(self) -> Dict[str, Any]:
        """Dump the details into a JSON-compatible dict with wire sentinels restored."""
        return self.model_dump(mode="json")


class ResponseDetails(BaseModel):

    def to_payload(self) -> Dict[str, Any]:
        """Dump the response into a JSON-compatible dict with wire sentinels restored."""
        return self.model_dump(mode="json")
