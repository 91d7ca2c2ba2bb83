import random
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app import config
from app.crud import crud_response, crud_survey
from app.sample_data import get_rng, pick_sample_count
from app.schemas import (
    SampleDataResponse,
    Survey,
    SurveyCreate,
    SurveyDeleteResponse,
    SurveyListItem,
    SurveyUpdate,
)
from app.state import AppState, get_state

router = APIRouter()


def _survey_or_404(state: AppState, survey_id: str) -> Survey:
    db_survey = crud_survey.get_survey(state, survey_id)
    if not db_survey:
        raise HTTPException(status_code=404, detail="Survey not found")
    return db_survey


@router.post("/", response_model=Survey, status_code=status.HTTP_201_CREATED)
def create_survey_item(survey_in: SurveyCreate, state: AppState = Depends(get_state)):
    return crud_survey.create_survey(state, survey_in)


@router.get("/", response_model=List[SurveyListItem])
def read_all_surveys(state: AppState = Depends(get_state)):
    return [
        SurveyListItem(
            id=s.id,
            title=s.title,
            description=s.description,
            status=s.status,
            created_at=s.created_at,
            question_count=len(s.questions),
            response_count=len(crud_response.responses_for_survey(state, s)),
        )
        for s in crud_survey.get_all_surveys(state)
    ]


@router.get("/{survey_id}", response_model=Survey)
def read_survey_item(survey_id: str, state: AppState = Depends(get_state)):
    return _survey_or_404(state, survey_id)


@router.put("/{survey_id}", response_model=Survey)
def update_survey_item(
    survey_id: str, survey_in: SurveyUpdate, state: AppState = Depends(get_state)
):
    db_survey = crud_survey.update_survey(state, survey_id, survey_in)
    if not db_survey:
        raise HTTPException(status_code=404, detail="Survey not found")
    return db_survey


@router.delete("/{survey_id}", response_model=SurveyDeleteResponse)
def delete_survey_item(survey_id: str, state: AppState = Depends(get_state)):
    if not crud_survey.delete_survey(state, survey_id):
        raise HTTPException(status_code=404, detail="Survey not found")
    return SurveyDeleteResponse(survey_id=survey_id)


@router.post(
    "/{survey_id}/duplicate",
    response_model=Survey,
    status_code=status.HTTP_201_CREATED,
)
def duplicate_survey_item(survey_id: str, state: AppState = Depends(get_state)):
    db_survey = crud_survey.duplicate_survey(state, survey_id)
    if not db_survey:
        raise HTTPException(status_code=404, detail="Survey not found")
    return db_survey


@router.post("/{survey_id}/sample-responses", response_model=SampleDataResponse)
def generate_sample_responses(
    survey_id: str,
    count: Optional[int] = Query(None, ge=1, le=1000),
    state: AppState = Depends(get_state),
    rng: random.Random = Depends(get_rng),
):
    _survey_or_404(state, survey_id)
    if count is None:
        count = pick_sample_count(
            rng, config.SAMPLE_RESPONSES_MIN, config.SAMPLE_RESPONSES_MAX
        )
    db_survey = crud_survey.attach_sample_responses(state, survey_id, count, rng)
    return SampleDataResponse(survey_id=db_survey.id, generated=len(db_survey.responses))
