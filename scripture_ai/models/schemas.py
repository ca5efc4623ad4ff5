"""
Pydantic request / response schemas for the API.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from scripture_ai.models.entities import ResponseMode, Sentiment, Tradition


# ── Assistant ────────────────────────────────────────────
class AskRequest(BaseModel):
    question: str = Field(max_length=2000)


class AskResponse(BaseModel):
    question: str
    answer: str
    kind: str
    mode: ResponseMode
    matches: List[str] = []


class RokoRequest(BaseModel):
    text: str = Field(max_length=2000)
    session_id: Optional[str] = None


class RokoResponse(BaseModel):
    session_id: str
    reply: Optional[str] = None
    active: bool
    sentiment: Optional[Sentiment] = None
    sentiment_score: Optional[float] = None
    intent: Optional[str] = None


class TeluguResponse(BaseModel):
    text: str
    explanation: str


# ── Analysis ─────────────────────────────────────────────
class TextRequest(BaseModel):
    text: str = Field(max_length=2000)


class SentimentResponse(BaseModel):
    sentiment: Sentiment
    score: float
    confidence: float
    empathetic_response: str


class IntentResponse(BaseModel):
    matched: bool
    intent: Optional[str] = None
    response: str


class ReferenceResponse(BaseModel):
    found: bool
    tradition: Optional[Tradition] = None
    book: Optional[str] = None
    chapter: Optional[int] = None
    verse: Optional[int] = None
    label: Optional[str] = None


class ModeResponse(BaseModel):
    mode: ResponseMode


# ── Knowledge Base ───────────────────────────────────────
class KnowledgeCardOut(BaseModel):
    tradition: Tradition
    reference: str
    idea: str
    summary: str
    moral: str
    keywords: List[str]

    class Config:
        from_attributes = True


class ConceptCardOut(BaseModel):
    title: str
    explanation: str
    summary: str
    moral: str
    practice: str
    keywords: List[str]
    related_reference: str

    class Config:
        from_attributes = True


class TopicSearchResponse(BaseModel):
    query: str
    count: int
    results: List[KnowledgeCardOut]
