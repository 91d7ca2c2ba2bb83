from datetime import datetime, timezone

from app.analytics import analyze_question, completion_rate, summarize_survey
from app.schemas import Question

from conftest import make_response


def test_unknown_question_is_not_analyzed(questions):
    responses = [make_response("r1", {"q-text": "hi"})]
    assert analyze_question(questions, "missing", responses) is None


def test_rating_without_valid_answers_reports_zero(questions):
    responses = [
        make_response("r1", {"q-rate": None}),
        make_response("r2", {"q-rate": "not a number"}),
        make_response("r3", {}),
    ]
    analysis = analyze_question(questions, "q-rate", responses)

    assert analysis.type == "rating"
    assert analysis.average == "0"
    assert [b.rating for b in analysis.distribution] == [1, 2, 3, 4, 5]
    assert all(b.count == 0 for b in analysis.distribution)


def test_rating_scale_defaults_to_ten():
    question = Question(id="q", type="rating", question="Score")
    analysis = analyze_question([question], "q", [])
    assert len(analysis.distribution) == 10


def test_rating_average_and_histogram_skip_invalid_values():
    question = Question(id="q", type="rating", question="Score")
    answers = [4, "4", 2, "abc", 11, 0, 2.5, True, None, ["3"]]
    responses = [make_response(str(i), {"q": a}) for i, a in enumerate(answers)]

    analysis = analyze_question([question], "q", responses)

    assert analysis.average == "3.3"
    counts = {b.rating: b.count for b in analysis.distribution}
    assert counts[4] == 2
    assert counts[2] == 1
    assert sum(counts.values()) == 3


def test_single_choice_percentages_cover_answered_responses(questions):
    responses = [
        make_response("r1", {"q-radio": "A"}),
        make_response("r2", {"q-radio": "B"}),
        make_response("r3", {"q-radio": "A"}),
        make_response("r4", {"q-radio": None}),
        make_response("r5", {}),
    ]
    analysis = analyze_question(questions, "q-radio", responses)

    assert analysis.type == "single-choice"
    assert [(d.option, d.count, d.percentage) for d in analysis.data] == [
        ("A", 2, "66.7"),
        ("B", 1, "33.3"),
    ]
    assert abs(sum(float(d.percentage) for d in analysis.data) - 100) < 0.2


def test_select_is_analyzed_as_single_choice():
    question = Question(id="q", type="select", question="Region", options=["EU", "US"])
    analysis = analyze_question([question], "q", [make_response("r1", {"q": "EU"})])
    assert analysis.type == "single-choice"
    assert analysis.data[0].percentage == "100.0"


def test_single_choice_without_answers_is_empty(questions):
    analysis = analyze_question(questions, "q-radio", [])
    assert analysis.data == []


def test_multiple_choice_percentage_is_per_response(questions):
    responses = [
        make_response("r1", {"q-check": ["X", "Y"]}),
        make_response("r2", {"q-check": ["X", "X"]}),
        make_response("r3", {"q-check": ["X"]}),
        make_response("r4", {"q-check": ["Z"]}),
    ]
    analysis = analyze_question(questions, "q-check", responses)

    assert analysis.type == "multiple-choice"
    by_option = {d.option: (d.count, d.percentage) for d in analysis.data}
    assert by_option == {
        "X": (3, "75.0"),
        "Y": (1, "25.0"),
        "Z": (1, "25.0"),
    }


def test_multiple_choice_counts_non_answering_responses_in_total(questions):
    responses = [
        make_response("r1", {"q-check": ["X"]}),
        make_response("r2", {"q-check": []}),
    ]
    analysis = analyze_question(questions, "q-check", responses)
    assert analysis.data[0].percentage == "50.0"


def test_text_returns_first_five_answers_as_strings(questions):
    answers = ["one", 2, None, "three", "four", "five", "six"]
    responses = [make_response(str(i), {"q-text": a}) for i, a in enumerate(answers)]

    analysis = analyze_question(questions, "q-text", responses)

    assert analysis.type == "text"
    assert analysis.sample_responses == ["one", "2", "three", "four", "five"]


def test_completion_rate():
    assert completion_rate(10, 3) == "76.9"
    assert completion_rate(0, 3) == "0"
    assert completion_rate(5, 0) == "0"


def test_summarize_survey(survey):
    responses = [
        make_response("r1", {"q-text": "ok", "q-radio": "A", "q-check": ["X"], "q-rate": 5},
                      submitted_at=datetime(2024, 1, 1, 9, tzinfo=timezone.utc)),
        make_response("r2", {"q-text": "fine", "q-radio": "B", "q-check": ["Y"], "q-rate": 3},
                      submitted_at=datetime(2024, 1, 2, 9, tzinfo=timezone.utc)),
    ]

    summary = summarize_survey(survey, responses)

    assert summary.overview.total_responses == 2
    assert summary.overview.question_count == 4
    assert summary.overview.completion_rate == "100.0"
    assert summary.overview.status == "draft"
    assert [p.responses for p in summary.timeline] == [1, 1]
    assert [q.index for q in summary.questions] == [1, 2, 3, 4]
    assert [q.analysis.type for q in summary.questions] == [
        "text",
        "single-choice",
        "multiple-choice",
        "rating",
    ]
    assert summary.questions[3].analysis.average == "4.0"
