from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import config
from app.analytics import analyze_question, responses_over_time, summarize_survey
from app.crud import crud_response, crud_survey
from app.schemas import QuestionAnalysis, Survey, SurveyAnalytics, TimelinePoint
from app.state import AppState, get_state

router = APIRouter()


def _survey_or_404(state: AppState, survey_id: str) -> Survey:
    db_survey = crud_survey.get_survey(state, survey_id)
    if not db_survey:
        raise HTTPException(status_code=404, detail="Survey not found")
    return db_survey


@router.get("/{survey_id}/analytics", response_model=SurveyAnalytics)
def read_survey_analytics(survey_id: str, state: AppState = Depends(get_state)):
    survey = _survey_or_404(state, survey_id)
    responses = crud_response.responses_for_survey(state, survey)
    return summarize_survey(survey, responses, config.TIMELINE_TIMEZONE)


@router.get("/{survey_id}/analytics/timeline", response_model=List[TimelinePoint])
def read_survey_timeline(survey_id: str, state: AppState = Depends(get_state)):
    survey = _survey_or_404(state, survey_id)
    responses = crud_response.responses_for_survey(state, survey)
    return responses_over_time(responses, config.TIMELINE_TIMEZONE)


@router.get(
    "/{survey_id}/analytics/questions/{question_id}",
    response_model=QuestionAnalysis,
)
def read_question_analysis(
    survey_id: str, question_id: str, state: AppState = Depends(get_state)
):
    survey = _survey_or_404(state, survey_id)
    responses = crud_response.responses_for_survey(state, survey)
    analysis = analyze_question(survey.questions, question_id, responses)
    if analysis is None:
        raise HTTPException(status_code=404, detail="Question not found")
    return analysis
