"""Aggregations behind the analytics views.

Everything in here is a pure function over already loaded records:
no lookups in the application state, no logging, no exceptions for
odd answer values. Answers that cannot be interpreted are left out.
"""
import math
from collections import Counter
from datetime import date, datetime, timezone, tzinfo
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .schemas import (
    ChoiceAnalysis,
    OptionCount,
    Question,
    QuestionAnalysis,
    QuestionSummary,
    RatingAnalysis,
    RatingBucket,
    Survey,
    SurveyAnalytics,
    SurveyOverview,
    SurveyResponse,
    TextAnalysis,
    TimelinePoint,
)

TEXT_SAMPLE_LIMIT = 5
# Annahme der alten Oberfläche: auf 10 Antworten kommen 3 Abbrüche
ABANDON_RATIO = 0.3


def is_answered(value: Any) -> bool:
    return value is not None and value != "" and value != []


def _percentage(count: int, total: int) -> str:
    if total == 0:
        return "0"
    return f"{count / total * 100:.1f}"


def _coerce_rating(value: Any, scale: int) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    rating = int(number)
    if 1 <= rating <= scale:
        return rating
    return None


def _answers_for(question_id: str, responses: Iterable[SurveyResponse]) -> List[Any]:
    return [
        r.answers.get(question_id)
        for r in responses
        if is_answered(r.answers.get(question_id))
    ]


def analyze_rating(question: Question, answers: Sequence[Any]) -> RatingAnalysis:
    scale = question.rating_scale
    ratings = [
        rating
        for rating in (_coerce_rating(a, scale) for a in answers)
        if rating is not None
    ]
    counts = Counter(ratings)
    average = f"{sum(ratings) / len(ratings):.1f}" if ratings else "0"
    return RatingAnalysis(
        average=average,
        distribution=[
            RatingBucket(rating=i, count=counts.get(i, 0)) for i in range(1, scale + 1)
        ],
    )


def analyze_single_choice(answers: Sequence[Any]) -> ChoiceAnalysis:
    counts = Counter(str(a) for a in answers)
    total = len(answers)
    return ChoiceAnalysis(
        type="single-choice",
        data=[
            OptionCount(option=option, count=count, percentage=_percentage(count, total))
            for option, count in counts.items()
        ],
    )


def analyze_multiple_choice(answers: Sequence[Any], response_count: int) -> ChoiceAnalysis:
    """Count how many responses picked each option.

    A selection repeated inside one response counts once, and the
    percentage is taken against all responses rather than all selections,
    so the figures do not add up to 100.
    """
    counts: Counter = Counter()
    for answer in answers:
        selections = answer if isinstance(answer, list) else [answer]
        counts.update(dict.fromkeys(str(s) for s in selections if is_answered(s)))
    return ChoiceAnalysis(
        type="multiple-choice",
        data=[
            OptionCount(
                option=option, count=count, percentage=_percentage(count, response_count)
            )
            for option, count in counts.items()
        ],
    )


def analyze_text(answers: Sequence[Any]) -> TextAnalysis:
    return TextAnalysis(sample_responses=[str(a) for a in answers[:TEXT_SAMPLE_LIMIT]])


def analyze_question(
    questions: Sequence[Question],
    question_id: str,
    responses: Sequence[SurveyResponse],
) -> Optional[QuestionAnalysis]:
    question = next((q for q in questions if q.id == question_id), None)
    if question is None:
        return None

    answers = _answers_for(question_id, responses)
    if question.type == "rating":
        return analyze_rating(question, answers)
    if question.type in ("radio", "select"):
        return analyze_single_choice(answers)
    if question.type == "checkbox":
        return analyze_multiple_choice(answers, len(responses))
    return analyze_text(answers)


def _as_local_date(moment: datetime, tz: tzinfo) -> date:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz).date()


def responses_over_time(
    responses: Iterable[SurveyResponse], tz: tzinfo = timezone.utc
) -> List[TimelinePoint]:
    """Daily response counts, oldest day first, without empty days."""
    per_day: Dict[date, int] = Counter(_as_local_date(r.submitted_at, tz) for r in responses)
    return [TimelinePoint(date=day, responses=per_day[day]) for day in sorted(per_day)]


def completion_rate(total_responses: int, question_count: int) -> str:
    if question_count == 0:
        return "0"
    started = total_responses + math.floor(total_responses * ABANDON_RATIO)
    return _percentage(total_responses, started)


def summarize_survey(
    survey: Survey,
    responses: Sequence[SurveyResponse],
    tz: tzinfo = timezone.utc,
) -> SurveyAnalytics:
    questions = []
    for index, question in enumerate(survey.questions, start=1):
        analysis = analyze_question(survey.questions, question.id, responses)
        if analysis is None:
            continue
        questions.append(
            QuestionSummary(
                index=index,
                question_id=question.id,
                question=question.question,
                question_type=question.type,
                analysis=analysis,
            )
        )

    return SurveyAnalytics(
        survey_id=survey.id,
        title=survey.title,
        overview=SurveyOverview(
            total_responses=len(responses),
            question_count=len(survey.questions),
            completion_rate=completion_rate(len(responses), len(survey.questions)),
            status=survey.status,
        ),
        timeline=responses_over_time(responses, tz),
        questions=questions,
    )
