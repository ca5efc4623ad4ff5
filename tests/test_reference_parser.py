from scripture_ai.models.entities import Tradition
from scripture_ai.services.reference_parser import (
    normalize_book_name,
    parse_bible_reference,
    parse_gita_reference,
    parse_quran_reference,
    parse_reference,
)


def test_gita_compact_reference():
    ref = parse_gita_reference("Give moral from Gita 2:47")
    assert ref.tradition == Tradition.GITA
    assert (ref.chapter, ref.verse) == (2, 47)
    assert ref.label == "2:47"


def test_gita_dot_separator_and_leading_zeros():
    assert parse_gita_reference("bhagavad gita 02.047").label == "2:47"


def test_gita_chapter_verse_words():
    ref = parse_gita_reference("What does the Bhagavad Gita say in chapter 6, verse 26?")
    assert ref.label == "6:26"


def test_gita_requires_context_word():
    assert parse_gita_reference("chapter 2 verse 47") is None


def test_quran_compact_and_long():
    assert parse_quran_reference("Quran 2:153").label == "2:153"
    assert parse_quran_reference("surah 94 ayah 5").label == "94:5"
    assert parse_quran_reference("QURAN 13 verse 28").label == "13:28"


def test_quran_none_without_keyword():
    assert parse_quran_reference("2:153") is None


def test_bible_book_normalised():
    ref = parse_bible_reference("bible 1 corinthians 13:4")
    assert ref.tradition == Tradition.BIBLE
    assert ref.book == "1 Corinthians"
    assert ref.label == "1 Corinthians 13:4"


def test_bible_greedy_book_keeps_leading_words():
    ref = parse_bible_reference("Summarize Bible James 1:5")
    assert ref.label == "Summarize Bible James 1:5"


def test_normalize_book_name():
    assert normalize_book_name("  2   JOHN ") == "2 John"
    assert normalize_book_name("song of solomon") == "Song Of Solomon"


def test_parse_reference_prefers_gita_over_bible():
    ref = parse_reference("Gita 2:47")
    assert ref.tradition == Tradition.GITA


def test_parse_reference_none():
    assert parse_reference("tell me about peace") is None
