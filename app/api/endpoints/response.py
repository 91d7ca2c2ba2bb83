from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from app import formatting
from app.crud import crud_response
from app.schemas import (
    AnswerDetail,
    ResponseDeleteResponse,
    ResponseDetail,
    SurveyResponse,
    SurveyWithResponses,
)
from app.state import AppState, get_state

router = APIRouter()


@router.get("/", response_model=List[SurveyResponse])
def read_responses(survey_id: Optional[str] = None, state: AppState = Depends(get_state)):
    return crud_response.get_responses(state, survey_id)


@router.get("/surveys", response_model=List[SurveyWithResponses])
def read_surveys_with_responses(state: AppState = Depends(get_state)):
    return crud_response.surveys_with_responses(state)


@router.get("/{response_id}", response_model=ResponseDetail)
def read_response_item(response_id: str, state: AppState = Depends(get_state)):
    db_resp = crud_response.get_response(state, response_id)
    if not db_resp:
        raise HTTPException(status_code=404, detail="Response not found")

    survey = state.surveys.get(db_resp.survey_id)
    customer = state.customers.get(db_resp.respondent_id)

    answers = []
    for question_id, value in db_resp.answers.items():
        question = survey.find_question(question_id) if survey else None
        question_type = formatting.question_type(question)
        answers.append(
            AnswerDetail(
                question_id=question_id,
                question_text=formatting.question_text(question),
                question_type=question_type,
                value=value,
                formatted=formatting.format_answer(value, question_type),
            )
        )

    return ResponseDetail(
        id=db_resp.id,
        survey_id=db_resp.survey_id,
        survey_title=formatting.survey_title(survey),
        respondent_id=db_resp.respondent_id,
        customer_name=formatting.customer_name(customer),
        customer_email=formatting.customer_email(customer),
        submitted_at=db_resp.submitted_at,
        answers=answers,
    )


@router.delete("/{response_id}", response_model=ResponseDeleteResponse)
def delete_response_item(response_id: str, state: AppState = Depends(get_state)):
    if not crud_response.delete_response(state, response_id):
        raise HTTPException(status_code=404, detail="Response not found")
    return ResponseDeleteResponse(response_id=response_id)
