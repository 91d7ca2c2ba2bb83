import logging
from typing import Iterable, List, Optional

from app.schemas import Survey, SurveyResponse, SurveyWithResponses
from app.state import AppState

logger = logging.getLogger(__name__)


def add_responses(
    state: AppState, responses: Iterable[SurveyResponse]
) -> List[SurveyResponse]:
    added = [state.responses.add(r) for r in responses]
    logger.info("Stored %d responses", len(added))
    return added


def get_response(state: AppState, response_id: str) -> Optional[SurveyResponse]:
    return state.responses.get(response_id)


def get_responses(
    state: AppState, survey_id: Optional[str] = None
) -> List[SurveyResponse]:
    if survey_id is None:
        return state.responses.all()
    return state.responses.filter(lambda r: r.survey_id == survey_id)


def responses_for_survey(state: AppState, survey: Survey) -> List[SurveyResponse]:
    """Attached sample responses first, then delivered ones, each id once."""
    seen = set()
    combined = []
    for response in list(survey.responses) + get_responses(state, survey.id):
        if response.id in seen:
            continue
        seen.add(response.id)
        combined.append(response)
    return combined


def surveys_with_responses(state: AppState) -> List[SurveyWithResponses]:
    items = []
    for survey in state.surveys:
        count = len(get_responses(state, survey.id))
        if count:
            items.append(
                SurveyWithResponses(
                    survey_id=survey.id, title=survey.title, response_count=count
                )
            )
    return items


def delete_response(state: AppState, response_id: str) -> Optional[SurveyResponse]:
    db_response = get_response(state, response_id)
    if db_response:
        state.responses.remove(response_id)
        logger.info("Response %s deleted", response_id)
    return db_response
