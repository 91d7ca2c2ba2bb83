"""Synthetic answers for demo data and simulated survey delivery."""
import logging
import random
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Sequence

from . import config
from .formatting import customer_name
from .schemas import AnswerValue, Customer, Question, Survey, SurveyResponse

logger = logging.getLogger(__name__)

SAMPLE_TEXT = "Sample response text"


def sample_answers(
    questions: Sequence[Question], rng: random.Random, text_answer: str = SAMPLE_TEXT
) -> Dict[str, AnswerValue]:
    answers: Dict[str, AnswerValue] = {}
    for question in questions:
        options = question.options or []
        if question.type in ("text", "textarea"):
            answers[question.id] = text_answer
        elif question.type in ("radio", "select"):
            answers[question.id] = options[0] if options else ""
        elif question.type == "checkbox":
            answers[question.id] = options[:2]
        elif question.type == "rating":
            answers[question.id] = rng.randint(1, question.rating_scale)
    return answers


def pick_sample_count(
    rng: random.Random,
    low: int = config.SAMPLE_RESPONSES_MIN,
    high: int = config.SAMPLE_RESPONSES_MAX,
) -> int:
    return rng.randint(low, high)


def generate_sample_responses(
    survey: Survey,
    count: int,
    rng: random.Random,
    now: datetime,
    id_factory: Callable[[], str],
    backdate_days: int = config.SAMPLE_BACKDATE_DAYS,
) -> List[SurveyResponse]:
    """Build ``count`` fake responses spread over the last ``backdate_days``.

    Each response gets its own draw of answers, so rating histograms and
    the timeline have something to show.
    """
    window = timedelta(days=backdate_days)
    return [
        SurveyResponse(
            id=id_factory(),
            survey_id=survey.id,
            respondent_id=f"user-{i}",
            answers=sample_answers(survey.questions, rng),
            submitted_at=now - window * rng.random(),
        )
        for i in range(count)
    ]


def simulate_delivery(
    survey: Optional[Survey],
    customer_ids: Sequence[str],
    customers: Sequence[Customer],
    rng: random.Random,
    now: datetime,
    id_factory: Callable[[], str],
) -> List[SurveyResponse]:
    """Pretend every addressed customer answered right away."""
    if survey is None:
        logger.warning("Survey not found, no responses simulated.")
        return []

    by_id = {c.id: c for c in customers}
    responses = []
    for customer_id in customer_ids:
        text = f"Sample response from {customer_name(by_id.get(customer_id))}"
        responses.append(
            SurveyResponse(
                id=id_factory(),
                survey_id=survey.id,
                respondent_id=customer_id,
                answers=sample_answers(survey.questions, rng, text_answer=text),
                submitted_at=now,
            )
        )
    return responses


_rng = random.Random(config.random_seed())


def get_rng() -> random.Random:
    return _rng
