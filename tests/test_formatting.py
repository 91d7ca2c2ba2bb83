import pytest

from app import formatting
from app.formatting import format_answer
from app.schemas import Customer, Question

from conftest import FIXED_NOW


@pytest.mark.parametrize(
    "question_type", ["text", "textarea", "radio", "checkbox", "select", "rating"]
)
def test_missing_answer_placeholder_for_every_type(question_type):
    assert format_answer(None, question_type) == "No answer"


def test_checkbox_lists_are_joined():
    assert format_answer(["Red", "Blue"], "checkbox") == "Red, Blue"
    assert format_answer([], "checkbox") == ""
    assert format_answer("Red", "checkbox") == "Red"


def test_rating_gets_unit_suffix():
    assert format_answer(4, "rating") == "4 stars"


def test_other_types_are_stringified():
    assert format_answer("Hello", "text") == "Hello"
    assert format_answer(3, "select") == "3"
    assert format_answer(["a", "b"], "text") == "['a', 'b']"


def test_formatting_is_repeatable():
    assert format_answer(["x"], "checkbox") == format_answer(["x"], "checkbox")


def test_placeholders_for_missing_references():
    assert formatting.customer_name(None) == "Unknown Customer"
    assert formatting.customer_email(None) == "Unknown Email"
    assert formatting.survey_title(None) == "Unknown Survey"
    assert formatting.question_text(None) == "Unknown Question"
    assert formatting.question_type(None) == "text"


def test_resolved_references_use_record_fields():
    customer = Customer(id="c1", name="Ada", email="ada@example.com", added_at=FIXED_NOW)
    question = Question(id="q1", type="rating", question="Score?")

    assert formatting.customer_name(customer) == "Ada"
    assert formatting.customer_email(customer) == "ada@example.com"
    assert formatting.question_text(question) == "Score?"
    assert formatting.question_type(question) == "rating"
