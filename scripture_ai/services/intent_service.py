"""
Keyword intent matching for the Roko voice assistant.
"""

import re
from datetime import datetime
from typing import Callable, List, NamedTuple, Optional

from loguru import logger

from scripture_ai.config import settings
from scripture_ai.models.entities import IntentResult

NO_MATCH_RESPONSE = (
    "I'm not sure I understood that. Could you rephrase? You can ask me about verses, "
    "music, weather, news, or say 'help' for more options."
)


class Intent(NamedTuple):
    name: str
    patterns: List[str]  # plain substrings of the lowercased input
    handler: Callable[[str], str]


def _find(pattern: str, text: str) -> Optional[str]:
    m = re.search(pattern, text, re.IGNORECASE)
    return m.group(1) if m else None


# ─────────────────────────────────────────────────────────
#  HANDLERS
# ─────────────────────────────────────────────────────────

_SEARCH_WORDS = re.compile(r'search|find|look for|show me|get me', re.IGNORECASE)


def _search_verse(text: str) -> str:
    term = _SEARCH_WORDS.sub("", text).strip()
    return f'I\'ll search for verses about "{term}". Let me find the most relevant passages for you.'


def _gita_verse(text: str) -> str:
    chapter = _find(r'chapter\s+(\d+)', text)
    verse = _find(r'verse\s+(\d+)', text)
    if chapter and verse:
        return f"Loading Bhagavad Gita Chapter {chapter}, Verse {verse}."
    return "To access a specific Gita verse, please mention the chapter and verse number."


def _bible_verse(text: str) -> str:
    book = _find(r'(genesis|john|psalm|matthew|luke|mark)', text)
    chapter = _find(r'chapter\s+(\d+)', text)
    verse = _find(r'verse\s+(\d+)', text)
    if book and chapter and verse:
        return f"Opening {book} {chapter}:{verse} for you."
    return "To access a specific Bible verse, please mention the book, chapter, and verse."


def _music(text: str) -> str:
    genre = _find(r'\b(meditation|calming|peaceful|relaxing|uplifting|spiritual)\b', text) or "meditation"
    return f"Playing {genre} music for you. Enjoy!"


def _weather(text: str) -> str:
    location = _find(r'(?:in|at|around)\s+(\w+)', text) or "your area"
    return f"Fetching weather information for {location}. One moment please."


def _news(text: str) -> str:
    return "Fetching the latest news headlines for you."


def _time(text: str) -> str:
    now = datetime.now()
    return f"It's currently {now.strftime('%I:%M:%S %p').lstrip('0')}."


def _help(text: str) -> str:
    return (
        f"I'm {settings.ASSISTANT_NAME}, your AI voice assistant. I can help you search verses "
        "from the Bhagavad Gita and Bible, play music, get weather updates, and much more. Just ask me!"
    )


# Checked in order; the first intent with a matching pattern wins.
INTENTS: List[Intent] = [
    Intent("search_verse", ["search", "find", "look for", "show me", "get me"], _search_verse),
    Intent("gita_verse", ["gita", "bhagavad", "sloka"], _gita_verse),
    Intent("bible_verse", ["bible", "genesis", "john", "psalm", "matthew", "luke", "mark"], _bible_verse),
    Intent("music", ["play", "music", "song", "audio", "listen", "hear"], _music),
    Intent("weather", ["weather", "forecast", "temperature", "rain", "sunny"], _weather),
    Intent("news", ["news", "headlines", "latest", "update"], _news),
    Intent("time", ["time", "what time", "tell me", "what is the"], _time),
    Intent("help", ["help", "assist", "support", "guide", "tutorial"], _help),
]


def match_intent(text: str) -> IntentResult:
    lower = text.lower()
    for intent in INTENTS:
        if any(p in lower for p in intent.patterns):
            response = intent.handler(text)
            logger.debug(f"Intent '{intent.name}' matched for '{text[:40]}'")
            return IntentResult(matched=True, intent=intent.name, response=response)

    logger.debug(f"No intent matched for '{text[:40]}'")
    return IntentResult(matched=False, response=NO_MATCH_RESPONSE)
