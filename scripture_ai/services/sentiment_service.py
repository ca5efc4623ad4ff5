"""
Lexicon-based sentiment scoring with negation and intensifier handling.
"""

import random

from loguru import logger

from scripture_ai.config import settings
from scripture_ai.models.entities import Sentiment, SentimentScore

POSITIVE_WORDS = frozenset([
    "happy", "glad", "great", "awesome", "wonderful", "excellent", "love", "amazing",
    "brilliant", "fantastic", "good", "nice", "perfect", "beautiful", "lovely",
    "enjoyed", "thanks", "thank", "please", "grateful", "appreciative", "blessed",
])

NEGATIVE_WORDS = frozenset([
    "sad", "angry", "upset", "frustrated", "hate", "terrible", "awful", "horrible",
    "bad", "worse", "worst", "disappointing", "disappointed", "anxious",
    "worried", "stressed", "tired", "sick", "ill", "struggling", "difficult", "hard",
    "pain", "hurt", "suffering", "lonely", "alone", "depressed",
])

INTENSIFIERS = frozenset(["really", "very", "so", "extremely", "absolutely", "totally", "completely"])
NEGATORS = frozenset(["not", "no", "never", "don't", "didn't", "won't", "can't"])

_STRIP_CHARS = ".,!?;:"

_EMPATHETIC_RESPONSES = {
    Sentiment.NEGATIVE: [
        "I hear you're going through something difficult. I'm here to help.",
        "That sounds challenging. Let me assist you with what you need.",
        "I understand you're feeling down. How can I make things better?",
        "It sounds like you're struggling. I'm here for you.",
    ],
    Sentiment.POSITIVE: [
        "That's wonderful! I'm glad to help you with that.",
        "I love your energy! Let's get that done for you.",
        "Fantastic! I'm excited to assist you.",
        "That's great! Let's make it happen.",
    ],
}

NEUTRAL_RESPONSE = "How can I assist you?"


def _strip_punctuation(word: str) -> str:
    return "".join(ch for ch in word if ch not in _STRIP_CHARS)


def analyze_sentiment(text: str) -> SentimentScore:
    """
    Walk the text token by token. A negator or intensifier stays armed until
    the next lexicon word consumes it; a negated word counts -1 in its own bucket.

    The score is the positive bucket's share of all lexicon weight, so only a
    negated positive word can push it below zero.
    """
    positive = 0.0
    negative = 0.0
    boost = 1.0
    negated = False

    for raw in text.lower().split():
        word = _strip_punctuation(raw)

        if word in NEGATORS:
            negated = True
            continue
        if word in INTENSIFIERS:
            boost = settings.INTENSIFIER_BOOST
            continue

        if word in POSITIVE_WORDS:
            positive += -1 if negated else boost
        elif word in NEGATIVE_WORDS:
            negative += -1 if negated else boost
        else:
            continue
        negated = False
        boost = 1.0

    total = abs(positive) + abs(negative)
    score = positive / total if total > 0 else 0.0

    sentiment = Sentiment.NEUTRAL
    if score > settings.POLARITY_THRESHOLD:
        sentiment = Sentiment.POSITIVE
    elif score < -settings.POLARITY_THRESHOLD:
        sentiment = Sentiment.NEGATIVE

    result = SentimentScore(
        sentiment=sentiment,
        score=round(score, 2),
        confidence=round(min(abs(score), 1.0), 2),
    )
    logger.debug(f"Sentiment: {result}")
    return result


def get_empathetic_response(sentiment: Sentiment) -> str:
    responses = _EMPATHETIC_RESPONSES.get(sentiment)
    if not responses:
        return NEUTRAL_RESPONSE
    return random.choice(responses)
