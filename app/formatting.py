"""Display strings for answers and placeholder names for dangling references."""
from typing import Optional

from .schemas import AnswerValue, Customer, Question, QuestionType, Survey

NO_ANSWER = "No answer"
RATING_SUFFIX = "stars"

UNKNOWN_CUSTOMER = "Unknown Customer"
UNKNOWN_EMAIL = "Unknown Email"
UNKNOWN_SURVEY = "Unknown Survey"
UNKNOWN_QUESTION = "Unknown Question"


def format_answer(answer: AnswerValue, question_type: str) -> str:
    if answer is None:
        return NO_ANSWER

    if question_type == "checkbox":
        if isinstance(answer, list):
            return ", ".join(str(item) for item in answer)
        return str(answer)
    if question_type == "rating":
        return f"{answer} {RATING_SUFFIX}"
    return str(answer)


def customer_name(customer: Optional[Customer]) -> str:
    return customer.name if customer else UNKNOWN_CUSTOMER


def customer_email(customer: Optional[Customer]) -> str:
    return customer.email if customer else UNKNOWN_EMAIL


def survey_title(survey: Optional[Survey]) -> str:
    return survey.title if survey else UNKNOWN_SURVEY


def question_text(question: Optional[Question]) -> str:
    return question.question if question else UNKNOWN_QUESTION


def question_type(question: Optional[Question]) -> QuestionType:
    # unbekannte Fragen werden wie Freitext dargestellt
    return question.type if question else "text"
