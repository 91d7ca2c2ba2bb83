import logging
import random
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from app import formatting
from app.crud import crud_distribution
from app.sample_data import get_rng
from app.schemas import (
    DistributionCreate,
    DistributionResult,
    DistributionView,
    SurveyDistribution,
)
from app.state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()


def _view(state: AppState, distribution: SurveyDistribution) -> DistributionView:
    return DistributionView(
        **distribution.model_dump(),
        survey_title=formatting.survey_title(state.surveys.get(distribution.survey_id)),
        customer_names=[
            formatting.customer_name(state.customers.get(customer_id))
            for customer_id in distribution.customer_ids
        ],
    )


@router.post("/", response_model=DistributionResult, status_code=status.HTTP_201_CREATED)
def send_survey(
    distribution_in: DistributionCreate,
    state: AppState = Depends(get_state),
    rng: random.Random = Depends(get_rng),
):
    survey = state.surveys.get(distribution_in.survey_id)
    if not survey:
        raise HTTPException(status_code=404, detail="Survey not found")
    if survey.status != "active":
        logger.warning(
            "Refusing to send survey %s with status %s", survey.id, survey.status
        )
        raise HTTPException(
            status_code=400, detail="Only active surveys can be sent."
        )

    distribution, responses = crud_distribution.send_survey(state, distribution_in, rng)
    return DistributionResult(
        distribution=distribution,
        responses_created=len(responses),
        message=f"Survey sent to {len(distribution.customer_ids)} customers successfully",
    )


@router.get("/", response_model=List[DistributionView])
def read_distributions(
    survey_id: Optional[str] = None, state: AppState = Depends(get_state)
):
    return [
        _view(state, d) for d in crud_distribution.get_distributions(state, survey_id)
    ]


@router.get("/{distribution_id}", response_model=DistributionView)
def read_distribution(distribution_id: str, state: AppState = Depends(get_state)):
    distribution = crud_distribution.get_distribution(state, distribution_id)
    if not distribution:
        raise HTTPException(status_code=404, detail="Distribution not found")
    return _view(state, distribution)
