import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to sys.path so we can import feedback_questions without installing
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Keep the editors' log file out of the working tree
os.environ.setdefault("LOG_PATH", tempfile.mkdtemp(prefix="feedback-questions-logs-"))

from feedback_questions.schemas import (  # noqa: E402
    McqQuestionDetails,
    McqResponseDetails,
    MsqQuestionDetails,
    RankOptionsQuestionDetails,
    RankOptionsResponseDetails,
)


@pytest.fixture
def fruit_mcq_details():
    """MCQ details with three choices."""
    return McqQuestionDetails(question_text="Favourite fruit?", mcq_choices=["Apple", "Banana", "Cherry"])


@pytest.fixture
def empty_mcq_response():
    return McqResponseDetails()


@pytest.fixture
def weighted_msq_details():
    """MSQ details with weights assigned to every choice."""
    return MsqQuestionDetails(
        msq_choices=["a", "b", "c"],
        has_assigned_weights=True,
        msq_weights=[1, 2, 3],
    )


@pytest.fixture
def rank_details():
    return RankOptionsQuestionDetails(options=["A", "B", "C"], min_options_to_be_ranked=2)


@pytest.fixture
def empty_rank_response():
    return RankOptionsResponseDetails()
