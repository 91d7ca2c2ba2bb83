import itertools
import random
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.sample_data import get_rng
from app.schemas import Question, Survey, SurveyResponse
from app.state import AppState, get_state

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def state():
    counter = itertools.count(1)
    return AppState(id_factory=lambda: str(next(counter)), clock=lambda: FIXED_NOW)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def client(state, rng):
    app.dependency_overrides[get_state] = lambda: state
    app.dependency_overrides[get_rng] = lambda: rng
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def questions():
    return [
        Question(id="q-text", type="text", question="Anything else?"),
        Question(id="q-radio", type="radio", question="Pick one", options=["A", "B", "C"]),
        Question(id="q-check", type="checkbox", question="Pick many", options=["X", "Y", "Z"]),
        Question(id="q-rate", type="rating", question="How likely?", max_rating=5),
    ]


@pytest.fixture
def survey(questions):
    return Survey(
        id="s-1",
        title="Customer satisfaction",
        questions=questions,
        created_at=FIXED_NOW,
    )


def make_response(response_id, answers, submitted_at=FIXED_NOW, survey_id="s-1"):
    return SurveyResponse(
        id=response_id,
        survey_id=survey_id,
        respondent_id=f"user-{response_id}",
        answers=answers,
        submitted_at=submitted_at,
    )
