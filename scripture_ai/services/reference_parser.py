"""
Chapter / verse extraction for the three citation styles the assistant understands.

    Gita:   "Gita 2:47", "bhagavad gita chapter 2 verse 47"
    Quran:  "Quran 2:153", "surah 2 ayah 153"
    Bible:  "James 1:5", "bible 1 corinthians 13.4"
"""

import re
from typing import Optional

from loguru import logger

from scripture_ai.models.entities import Tradition, VerseReference


_GITA_COMPACT = re.compile(r'(?:gita|bhagavad\s*gita).*?(\d+)\s*[:.]\s*(\d+)', re.IGNORECASE)
_GITA_LONG = re.compile(r'(?:gita|bhagavad\s*gita).*?chapter\s*(\d+)\D+verse\s*(\d+)', re.IGNORECASE)

_QURAN_COMPACT = re.compile(r'(?:quran|surah)\s*(\d+)\s*[:.]\s*(\d+)', re.IGNORECASE)
_QURAN_LONG = re.compile(r'(?:quran|surah)\s*(\d+)\D+(?:ayah|verse)\s*(\d+)', re.IGNORECASE)

_BIBLE = re.compile(
    r'(?:bible\s+)?([1-3]?\s*[a-zA-Z]+(?:\s+[a-zA-Z]+)*)\s+(\d+)\s*[:.]\s*(\d+)',
    re.IGNORECASE,
)


def _first_match(text: str, *patterns: re.Pattern) -> Optional[re.Match]:
    for pattern in patterns:
        m = pattern.search(text)
        if m:
            return m
    return None


def normalize_book_name(book: str) -> str:
    """'1   CORINTHIANS' -> '1 Corinthians'."""
    parts = []
    for part in book.strip().split():
        if part.isdigit():
            parts.append(part)
        else:
            parts.append(part[0].upper() + part[1:].lower())
    return " ".join(parts)


def parse_gita_reference(text: str) -> Optional[VerseReference]:
    m = _first_match(text, _GITA_COMPACT, _GITA_LONG)
    if not m:
        return None
    return VerseReference(Tradition.GITA, int(m.group(1)), int(m.group(2)))


def parse_quran_reference(text: str) -> Optional[VerseReference]:
    m = _first_match(text, _QURAN_COMPACT, _QURAN_LONG)
    if not m:
        return None
    return VerseReference(Tradition.QURAN, int(m.group(1)), int(m.group(2)))


def parse_bible_reference(text: str) -> Optional[VerseReference]:
    """
    Greedy: everything alphabetic before the numbers becomes the book, so
    "Summarize Bible James 1:5" yields book "Summarize Bible James".
    Callers match cards on the trailing "<Book> C:V".
    """
    m = _BIBLE.search(text)
    if not m:
        return None
    return VerseReference(
        Tradition.BIBLE,
        int(m.group(2)),
        int(m.group(3)),
        book=normalize_book_name(m.group(1)),
    )


def parse_reference(text: str) -> Optional[VerseReference]:
    """Try Gita, then Quran, then Bible. The first grammar that parses wins."""
    for parser in (parse_gita_reference, parse_quran_reference, parse_bible_reference):
        ref = parser(text)
        if ref:
            logger.debug(f"Parsed {ref.tradition.value} reference {ref.label} from '{text[:40]}'")
            return ref
    return None
