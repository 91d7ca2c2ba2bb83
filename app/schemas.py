from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Dict, Union, Literal
from datetime import datetime, date as calendar_date


QuestionType = Literal["text", "textarea", "radio", "checkbox", "select", "rating"]
SurveyStatus = Literal["draft", "active", "closed"]
DistributionStatus = Literal["sent", "delivered", "failed"]

# Form einer Antwort hängt vom Fragetyp ab (Text, Mehrfachauswahl, Bewertung)
AnswerValue = Union[str, List[str], int, float, bool, None]

DEFAULT_MAX_RATING = 10


# --- Schemas für Umfrage-Definition ---


class QuestionBase(BaseModel):
    type: QuestionType = "text"
    question: str = ""
    required: bool = False
    options: Optional[List[str]] = None
    # Skala wie im Builder: 5 oder 10 Sterne
    max_rating: Optional[Literal[5, 10]] = None


class QuestionCreate(QuestionBase):
    id: Optional[str] = None  # wird beim Speichern erzeugt, wenn leer


class Question(QuestionBase):
    id: str

    @property
    def rating_scale(self) -> int:
        return self.max_rating or DEFAULT_MAX_RATING


class SurveyResponse(BaseModel):
    id: str
    survey_id: str
    respondent_id: str
    answers: Dict[str, AnswerValue] = Field(default_factory=dict)
    submitted_at: datetime


class SurveyBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    status: SurveyStatus = "draft"


class SurveyCreate(SurveyBase):
    questions: List[QuestionCreate]

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("title")
    @classmethod
    def check_title(cls, v):
        if not v:
            raise ValueError("Please enter a survey title.")
        return v

    @field_validator("questions")
    @classmethod
    def check_questions(cls, v):
        if not v:
            raise ValueError("Please add at least one question.")
        ids = [q.id for q in v if q.id]
        if len(ids) != len(set(ids)):
            raise ValueError("Question ids must be unique within a survey.")
        return v


class SurveyUpdate(SurveyCreate):
    pass


class Survey(SurveyBase):
    id: str
    questions: List[Question] = []
    created_at: datetime
    responses: List[SurveyResponse] = []

    def find_question(self, question_id: str) -> Optional[Question]:
        return next((q for q in self.questions if q.id == question_id), None)


class SurveyListItem(BaseModel):
    id: str
    title: str
    description: str
    status: SurveyStatus
    created_at: datetime
    question_count: int
    response_count: int


class SurveyDeleteResponse(BaseModel):
    survey_id: str
    message: str = "Survey deleted successfully."


class SampleDataResponse(BaseModel):
    survey_id: str
    generated: int
    message: str = "Sample responses generated for analytics."


# --- Kunden ---


class CustomerBase(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def check_required(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name and email are required")
        return v

    @field_validator("phone")
    @classmethod
    def blank_phone_is_none(cls, v):
        if v is None:
            return None
        return v.strip() or None


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CustomerBase):
    pass


class Customer(CustomerBase):
    id: str
    added_at: datetime


class CustomerDeleteResponse(BaseModel):
    customer_id: str
    message: str = "Customer deleted successfully."


# --- Versand ---


class DistributionCreate(BaseModel):
    survey_id: str
    customer_ids: List[str]

    @field_validator("customer_ids")
    @classmethod
    def check_customers(cls, v):
        if not v:
            raise ValueError("Please select at least one customer")
        return v


class SurveyDistribution(BaseModel):
    id: str
    survey_id: str
    customer_ids: List[str]
    sent_at: datetime
    status: DistributionStatus = "sent"


class DistributionView(SurveyDistribution):
    """Versandeintrag mit aufgelösten Namen für die Verlaufsansicht."""

    survey_title: str
    customer_names: List[str]


class DistributionResult(BaseModel):
    distribution: SurveyDistribution
    responses_created: int
    message: str


# --- Antworten ---


class SurveyWithResponses(BaseModel):
    survey_id: str
    title: str
    response_count: int


class AnswerDetail(BaseModel):
    question_id: str
    question_text: str
    question_type: QuestionType
    value: AnswerValue = None
    formatted: str


class ResponseDetail(BaseModel):
    id: str
    survey_id: str
    survey_title: str
    respondent_id: str
    customer_name: str
    customer_email: str
    submitted_at: datetime
    answers: List[AnswerDetail] = []


class ResponseDeleteResponse(BaseModel):
    response_id: str
    message: str = "Response deleted successfully."


# --- Auswertung ---


class RatingBucket(BaseModel):
    rating: int
    count: int


class RatingAnalysis(BaseModel):
    type: Literal["rating"] = "rating"
    average: str
    distribution: List[RatingBucket]


class OptionCount(BaseModel):
    option: str
    count: int
    percentage: str


class ChoiceAnalysis(BaseModel):
    type: Literal["single-choice", "multiple-choice"]
    data: List[OptionCount]


class TextAnalysis(BaseModel):
    type: Literal["text"] = "text"
    sample_responses: List[str]


QuestionAnalysis = Union[RatingAnalysis, ChoiceAnalysis, TextAnalysis]


class TimelinePoint(BaseModel):
    date: calendar_date
    responses: int


class QuestionSummary(BaseModel):
    index: int
    question_id: str
    question: str
    question_type: QuestionType
    analysis: QuestionAnalysis


class SurveyOverview(BaseModel):
    total_responses: int
    question_count: int
    completion_rate: str
    status: SurveyStatus


class SurveyAnalytics(BaseModel):
    survey_id: str
    title: str
    overview: SurveyOverview
    timeline: List[TimelinePoint] = []
    questions: List[QuestionSummary] = []
