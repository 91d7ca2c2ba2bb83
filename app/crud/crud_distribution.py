import logging
import random
from typing import List, Optional, Tuple

from app.crud.crud_response import add_responses
from app.sample_data import simulate_delivery
from app.schemas import DistributionCreate, SurveyDistribution, SurveyResponse
from app.state import AppState

logger = logging.getLogger(__name__)


def send_survey(
    state: AppState, distribution_in: DistributionCreate, rng: random.Random
) -> Tuple[SurveyDistribution, List[SurveyResponse]]:
    """Log a distribution and store the responses it is assumed to produce.

    Nothing is delivered anywhere. The distribution is always recorded with
    status ``sent``; responses are only synthesized while the survey exists.
    """
    now = state.now()
    distribution = SurveyDistribution(
        id=state.new_id(),
        survey_id=distribution_in.survey_id,
        customer_ids=list(distribution_in.customer_ids),
        sent_at=now,
        status="sent",
    )
    state.distributions.add(distribution)

    responses = simulate_delivery(
        state.surveys.get(distribution_in.survey_id),
        distribution_in.customer_ids,
        state.customers.all(),
        rng,
        now,
        state.new_id,
    )
    add_responses(state, responses)
    logger.info(
        "Survey %s sent to %d customers",
        distribution.survey_id,
        len(distribution.customer_ids),
    )
    return distribution, responses


def get_distribution(state: AppState, distribution_id: str) -> Optional[SurveyDistribution]:
    return state.distributions.get(distribution_id)


def get_distributions(
    state: AppState, survey_id: Optional[str] = None
) -> List[SurveyDistribution]:
    if survey_id is None:
        return state.distributions.all()
    return state.distributions.filter(lambda d: d.survey_id == survey_id)
