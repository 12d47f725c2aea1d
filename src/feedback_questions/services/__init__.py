"""Question editors.
"""
# feedback_questions/services/__init__.py
from feedback_questions.services.editors import create_answer_editor, create_details_editor
from feedback_questions.services.mcq_answer_editor import McqAnswerEditor
from feedback_questions.services.msq_details_editor import MsqDetailsEditor
from feedback_questions.services.rank_options_answer_editor import RankOptionsAnswerEditor

__all__ = [
    "McqAnswerEditor",
    "MsqDetailsEditor",
    "RankOptionsAnswerEditor",
    "create_answer_editor",
    "create_details_editor",
]
