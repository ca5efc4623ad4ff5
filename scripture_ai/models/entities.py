"""
Domain entities for the scripture knowledge base and the text pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Tradition(str, Enum):
    GITA = "Gita"
    BIBLE = "Bible"
    QURAN = "Quran"


class ResponseMode(str, Enum):
    FULL = "full"
    SUMMARY = "summary"
    MORAL = "moral"
    PRACTICE = "practice"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class KnowledgeCard:
    tradition: Tradition
    reference: str  # "2:47" for Gita / Quran, "James 1:5" for Bible
    idea: str
    summary: str
    moral: str
    keywords: tuple[str, ...]

    @property
    def label(self) -> str:
        return f"{self.tradition.value} {self.reference}"


@dataclass(frozen=True)
class ConceptCard:
    title: str
    explanation: str
    summary: str
    moral: str
    practice: str
    keywords: tuple[str, ...]
    related_reference: str


@dataclass(frozen=True)
class VerseReference:
    tradition: Tradition
    chapter: int
    verse: int
    book: Optional[str] = None  # Bible only

    @property
    def label(self) -> str:
        if self.book:
            return f"{self.book} {self.chapter}:{self.verse}"
        return f"{self.chapter}:{self.verse}"


@dataclass(frozen=True)
class SentimentScore:
    sentiment: Sentiment
    score: float
    confidence: float


@dataclass(frozen=True)
class IntentResult:
    matched: bool
    response: str
    intent: Optional[str] = None


@dataclass
class LocalAiReply:
    kind: str  # empty / greeting / help / reference / compare / concept / search / fallback
    text: str
    mode: ResponseMode = ResponseMode.FULL
    matches: list[str] = field(default_factory=list)
