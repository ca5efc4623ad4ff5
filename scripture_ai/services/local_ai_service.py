"""
Offline, rule-based scripture assistant.
Matches a question against the static knowledge base and renders a template reply.
"""

import re
from typing import List, Optional

from loguru import logger

from scripture_ai.config import settings
from scripture_ai.models.entities import (
    ConceptCard,
    KnowledgeCard,
    LocalAiReply,
    ResponseMode,
    Tradition,
)
from scripture_ai.services.knowledge_base import (
    CONCEPT_CARDS,
    GREETINGS,
    KNOWLEDGE_CARDS,
    STOP_WORDS,
)
from scripture_ai.services.reference_parser import (
    parse_bible_reference,
    parse_gita_reference,
    parse_quran_reference,
)


# ─────────────────────────────────────────────────────────
#  PATTERNS
# ─────────────────────────────────────────────────────────

_MODE_PATTERNS = [
    (ResponseMode.SUMMARY, re.compile(r'\b(summary|summarize|short|brief|in short|gist)\b', re.IGNORECASE)),
    (ResponseMode.MORAL, re.compile(r'\b(moral|lesson|teaching|takeaway)\b', re.IGNORECASE)),
    (ResponseMode.PRACTICE, re.compile(
        r'\b(practice|practical|apply|implementation|daily step|how to apply)\b', re.IGNORECASE)),
]

_HELP = re.compile(r'help|how to use|commands|what can you do', re.IGNORECASE)
_COMPARE = re.compile(r'\b(compare|difference|vs)\b', re.IGNORECASE)
_NON_TOKEN = re.compile(r'[^a-z0-9\s:]')

EMPTY_PROMPT = "Please type your question. I can explain concepts, summaries, morals, and verse ideas."

GREETING_REPLY = "Hello. Ask me about Gita, Bible, or Quran concepts and I will explain with summary and moral."

HELP_REPLY = "\n".join([
    "I can answer with local AI logic (offline mode).",
    "",
    "Try:",
    "- Explain karma yoga",
    "- Give moral from Gita 2:47",
    "- Summarize Bible James 1:5",
    "- Search verses about peace",
])

FALLBACK_REPLY = "\n".join([
    "I did not find a strong match yet, but here is a helpful guidance:",
    "",
    "Summary: Live with clarity, compassion, and disciplined action.",
    "Moral: Do your duty sincerely, stay humble, and keep faith during difficulty.",
    'Try asking with a topic or reference, like "Gita 2:47" or "peace and patience".',
])

PRACTICAL_STEP = "Practical step: Reflect for 2 minutes and choose one action today based on this teaching."

DEFAULT_SEARCH_MORAL = "Choose patience, clarity, and compassion in action."


# ─────────────────────────────────────────────────────────
#  MATCHING
# ─────────────────────────────────────────────────────────

def tokenize(text: str) -> List[str]:
    cleaned = _NON_TOKEN.sub(" ", text.lower())
    return [t for t in cleaned.split() if len(t) > 1 and t not in STOP_WORDS]


def score_keywords(text: str, keywords) -> int:
    """Number of keywords that appear as a substring of `text`."""
    lower = text.lower()
    return sum(1 for keyword in keywords if keyword in lower)


def detect_response_mode(question: str) -> ResponseMode:
    for mode, pattern in _MODE_PATTERNS:
        if pattern.search(question):
            return mode
    return ResponseMode.FULL


def _rank_concepts(question: str) -> List[ConceptCard]:
    scored = [(score_keywords(question, c.keywords), c) for c in CONCEPT_CARDS]
    scored = [item for item in scored if item[0] > 0]
    # sorted() is stable, so table order breaks ties
    scored.sort(key=lambda item: item[0], reverse=True)
    return [concept for _, concept in scored]


def find_best_concept(question: str) -> Optional[ConceptCard]:
    ranked = _rank_concepts(question)
    return ranked[0] if ranked else None


def find_top_concepts(question: str, limit: int = 2) -> List[ConceptCard]:
    return _rank_concepts(question)[:limit]


def _bible_card_matches(card: KnowledgeCard, ref_label: str) -> bool:
    return ref_label == card.reference or ref_label.endswith(" " + card.reference)


def find_by_reference(question: str) -> Optional[KnowledgeCard]:
    """
    Look up a card by an explicit citation. Once a grammar parses, only that
    tradition is searched, so "Gita 3:30" never falls through to the Bible.
    """
    ref = parse_gita_reference(question)
    if ref:
        return next((c for c in KNOWLEDGE_CARDS
                     if c.tradition == Tradition.GITA and c.reference == ref.label), None)

    ref = parse_quran_reference(question)
    if ref:
        return next((c for c in KNOWLEDGE_CARDS
                     if c.tradition == Tradition.QURAN and c.reference == ref.label), None)

    ref = parse_bible_reference(question)
    if ref:
        return next((c for c in KNOWLEDGE_CARDS
                     if c.tradition == Tradition.BIBLE and _bible_card_matches(c, ref.label)), None)

    return None


def _token_hits_card(token: str, card: KnowledgeCard) -> bool:
    return any(keyword in token or token in keyword for keyword in card.keywords)


def search_by_topic(question: str, limit: Optional[int] = None) -> List[KnowledgeCard]:
    if limit is None:
        limit = settings.TOPIC_SEARCH_LIMIT
    tokens = tokenize(question)
    if not tokens:
        return []

    scored = []
    for card in KNOWLEDGE_CARDS:
        score = sum(1 for token in tokens if _token_hits_card(token, card))
        if score > 0:
            scored.append((score, card))
    scored.sort(key=lambda item: item[0], reverse=True)
    return [card for _, card in scored[:limit]]


# ─────────────────────────────────────────────────────────
#  RESPONSE BUILDERS
# ─────────────────────────────────────────────────────────

def build_card_response(card: KnowledgeCard, mode: ResponseMode) -> str:
    header = [card.label, ""]
    if mode == ResponseMode.SUMMARY:
        body = [f"Summary: {card.summary}"]
    elif mode == ResponseMode.MORAL:
        body = [f"Moral: {card.moral}"]
    elif mode == ResponseMode.PRACTICE:
        body = [f"Summary: {card.summary}", PRACTICAL_STEP, f"Moral: {card.moral}"]
    else:
        body = [
            f"Summary: {card.summary}",
            f"Explanation: {card.idea}",
            f"Moral: {card.moral}",
        ]
    return "\n".join(header + body)


def build_concept_response(concept: ConceptCard, mode: ResponseMode) -> str:
    header = [concept.title, ""]
    related = f"Related reference: {concept.related_reference}"
    if mode == ResponseMode.SUMMARY:
        body = [f"Summary: {concept.summary}", related]
    elif mode == ResponseMode.MORAL:
        body = [f"Moral: {concept.moral}", related]
    elif mode == ResponseMode.PRACTICE:
        body = [f"Practical step: {concept.practice}", f"Moral: {concept.moral}", related]
    else:
        body = [
            f"Summary: {concept.summary}",
            f"Explanation: {concept.explanation}",
            f"Moral: {concept.moral}",
            f"Practical step: {concept.practice}",
            related,
        ]
    return "\n".join(header + body)


def build_search_response(matches: List[KnowledgeCard], topic: str) -> str:
    listing = "\n".join(
        f"{i}. {card.label} - {card.summary}" for i, card in enumerate(matches, start=1)
    )
    moral = matches[0].moral if matches else DEFAULT_SEARCH_MORAL
    return "\n".join([
        f'I found {len(matches)} relevant verse ideas for "{topic}":',
        "",
        listing,
        "",
        f"Moral: {moral}",
    ])


def build_compare_response(first: ConceptCard, second: ConceptCard) -> str:
    return "\n".join([
        f"Comparison: {first.title} vs {second.title}",
        "",
        f"{first.title}: {first.summary}",
        f"Moral: {first.moral}",
        "",
        f"{second.title}: {second.summary}",
        f"Moral: {second.moral}",
        "",
        f"Practical synthesis: {first.practice}",
    ])


# ─────────────────────────────────────────────────────────
#  MAIN REPLY FUNCTION
# ─────────────────────────────────────────────────────────

def _is_greeting(lower: str) -> bool:
    return any(lower == greet or lower.startswith(f"{greet} ") for greet in GREETINGS)


def answer(question: str) -> LocalAiReply:
    clean = question.strip()
    lower = clean.lower()
    mode = detect_response_mode(lower)

    # ── 1. Conversational ────────────────────────────────
    if not clean:
        return LocalAiReply("empty", EMPTY_PROMPT, mode)
    if _is_greeting(lower):
        return LocalAiReply("greeting", GREETING_REPLY, mode)
    if _HELP.search(lower):
        return LocalAiReply("help", HELP_REPLY, mode)

    # ── 2. Explicit reference ────────────────────────────
    card = find_by_reference(clean)
    if card:
        return LocalAiReply("reference", build_card_response(card, mode), mode, [card.label])

    # ── 3. Comparison ────────────────────────────────────
    if _COMPARE.search(lower):
        concepts = find_top_concepts(clean, settings.COMPARE_LIMIT)
        if len(concepts) >= 2:
            return LocalAiReply(
                "compare",
                build_compare_response(concepts[0], concepts[1]),
                mode,
                [c.title for c in concepts[:2]],
            )

    # ── 4. Concept ───────────────────────────────────────
    concept = find_best_concept(clean)
    if concept:
        return LocalAiReply("concept", build_concept_response(concept, mode), mode, [concept.title])

    # ── 5. Topic search ──────────────────────────────────
    hits = search_by_topic(clean)
    if hits:
        return LocalAiReply("search", build_search_response(hits, clean), mode, [c.label for c in hits])

    return LocalAiReply("fallback", FALLBACK_REPLY, mode)


def generate_reply(question: str) -> str:
    reply = answer(question)
    logger.debug(f"[LOCAL AI] '{question[:40]}' -> {reply.kind} ({reply.mode.value})")
    return reply.text
