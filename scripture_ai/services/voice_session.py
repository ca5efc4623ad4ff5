"""
Wake-word driven conversation state for the Roko voice assistant.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger

from scripture_ai.config import settings
from scripture_ai.models.entities import IntentResult, Sentiment, SentimentScore
from scripture_ai.services.intent_service import match_intent
from scripture_ai.services.sentiment_service import analyze_sentiment, get_empathetic_response


@dataclass
class Turn:
    speaker: str  # user / roko
    text: str
    sentiment: Optional[str] = None


@dataclass
class TurnResult:
    reply: Optional[str]
    active: bool
    sentiment: Optional[SentimentScore] = None
    intent: Optional[IntentResult] = None


@dataclass
class RokoSession:
    """
    Awaiting wake word -> active -> answers exactly one utterance -> awaiting again.
    Input heard while waiting for the wake word is dropped. Only the last
    MAX_TRANSCRIPT_TURNS turns of the transcript are kept.
    """

    session_id: str
    awaiting_wake_word: bool = True
    transcript: List[Turn] = field(default_factory=list)
    last_seen: float = field(default_factory=time.time)

    @property
    def active(self) -> bool:
        return not self.awaiting_wake_word

    @property
    def greeting(self) -> str:
        return f"{settings.ASSISTANT_NAME} here! How can I help you today?"

    def hears_wake_word(self, text: str) -> bool:
        return settings.WAKE_WORD.lower() in text.lower()

    def _remember(self, turn: Turn) -> None:
        self.transcript.append(turn)
        overflow = len(self.transcript) - settings.MAX_TRANSCRIPT_TURNS
        if overflow > 0:
            del self.transcript[:overflow]

    def handle(self, text: str) -> TurnResult:
        if self.awaiting_wake_word:
            if not self.hears_wake_word(text):
                return TurnResult(reply=None, active=False)
            self.awaiting_wake_word = False
            self._remember(Turn("roko", self.greeting))
            logger.info(f"Session [{self.session_id[:8]}] activated")
            return TurnResult(reply=self.greeting, active=True)

        self._remember(Turn("user", text))
        sentiment = analyze_sentiment(text)
        intent = match_intent(text)

        if sentiment.sentiment != Sentiment.NEUTRAL:
            reply = f"{get_empathetic_response(sentiment.sentiment)} {intent.response}"
        else:
            reply = intent.response

        self._remember(Turn("roko", reply, sentiment.sentiment.value))
        self.awaiting_wake_word = True
        return TurnResult(reply=reply, active=False, sentiment=sentiment, intent=intent)

    def reset(self) -> None:
        self.transcript.clear()
        self.awaiting_wake_word = True


# In-memory sessions keyed by session_id; idle ones expire after SESSION_TTL_SECONDS
_sessions: Dict[str, RokoSession] = {}


def _prune_expired(now: float) -> None:
    expired = [sid for sid, s in _sessions.items() if now - s.last_seen > settings.SESSION_TTL_SECONDS]
    for sid in expired:
        del _sessions[sid]
    if expired:
        logger.debug(f"Expired {len(expired)} idle Roko sessions")


def get_or_create_session(session_id: str) -> RokoSession:
    now = time.time()
    _prune_expired(now)

    session = _sessions.get(session_id)
    if session is None:
        while _sessions and len(_sessions) >= settings.MAX_SESSIONS:
            oldest = min(_sessions, key=lambda sid: _sessions[sid].last_seen)
            del _sessions[oldest]
            logger.debug(f"Session [{oldest[:8]}] evicted, {settings.MAX_SESSIONS} session limit")
        session = RokoSession(session_id=session_id)
        _sessions[session_id] = session

    session.last_seen = now
    return session


def drop_session(session_id: str) -> bool:
    return _sessions.pop(session_id, None) is not None
