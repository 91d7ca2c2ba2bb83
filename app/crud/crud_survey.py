import logging
import random
from typing import List, Optional

from app.sample_data import generate_sample_responses
from app.schemas import Question, Survey, SurveyCreate, SurveyUpdate
from app.state import AppState

logger = logging.getLogger(__name__)


def _build_questions(state: AppState, survey_in: SurveyCreate) -> List[Question]:
    return [
        Question(**q.model_dump(exclude={"id"}), id=q.id or state.new_id())
        for q in survey_in.questions
    ]


def create_survey(state: AppState, survey_in: SurveyCreate) -> Survey:
    survey = Survey(
        id=state.new_id(),
        title=survey_in.title,
        description=survey_in.description,
        status=survey_in.status,
        questions=_build_questions(state, survey_in),
        created_at=state.now(),
        responses=[],
    )
    state.surveys.add(survey)
    logger.info("Survey %s created (%d questions)", survey.id, len(survey.questions))
    return survey


def get_survey(state: AppState, survey_id: str) -> Optional[Survey]:
    return state.surveys.get(survey_id)


def get_all_surveys(state: AppState) -> List[Survey]:
    return state.surveys.all()


def update_survey(
    state: AppState, survey_id: str, survey_in: SurveyUpdate
) -> Optional[Survey]:
    with state.lock:
        db_survey = get_survey(state, survey_id)
        if db_survey is None:
            return None
        updated = db_survey.model_copy(
            update={
                "title": survey_in.title,
                "description": survey_in.description,
                "status": survey_in.status,
                "questions": _build_questions(state, survey_in),
            }
        )
        state.surveys.replace(updated)
    logger.info("Survey %s updated", survey_id)
    return updated


def replace_survey(state: AppState, survey: Survey) -> bool:
    return state.surveys.replace(survey)


def delete_survey(state: AppState, survey_id: str) -> Optional[Survey]:
    with state.lock:
        db_survey = get_survey(state, survey_id)
        if db_survey:
            state.surveys.remove(survey_id)
    if db_survey:
        logger.info("Survey %s deleted", survey_id)
    return db_survey


def duplicate_survey(state: AppState, survey_id: str) -> Optional[Survey]:
    with state.lock:
        db_survey = get_survey(state, survey_id)
        if db_survey is None:
            return None
        copy = db_survey.model_copy(
            update={
                "id": state.new_id(),
                "title": f"{db_survey.title} (Copy)",
                "created_at": state.now(),
                "status": "draft",
                "responses": [],
            },
            deep=True,
        )
        state.surveys.add(copy)
    logger.info("Survey %s duplicated as %s", survey_id, copy.id)
    return copy


def attach_sample_responses(
    state: AppState, survey_id: str, count: int, rng: random.Random
) -> Optional[Survey]:
    with state.lock:
        db_survey = get_survey(state, survey_id)
        if db_survey is None:
            return None
        responses = generate_sample_responses(
            db_survey, count, rng, state.now(), state.new_id
        )
        updated = db_survey.model_copy(update={"responses": responses})
        replace_survey(state, updated)
    logger.info("Generated %d sample responses for survey %s", count, survey_id)
    return updated
