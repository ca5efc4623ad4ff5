"""
Read-only browsing of the static knowledge base.
"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from scripture_ai.models.entities import Tradition
from scripture_ai.models.schemas import ConceptCardOut, KnowledgeCardOut, TopicSearchResponse
from scripture_ai.services.knowledge_base import (
    CONCEPT_CARDS, KNOWLEDGE_CARDS, cards_for_tradition, find_concept,
)
from scripture_ai.services.local_ai_service import search_by_topic

router = APIRouter(prefix="/api/knowledge", tags=["knowledge"])


def _parse_tradition(value: str) -> Tradition:
    for tradition in Tradition:
        if tradition.value.lower() == value.strip().lower():
            return tradition
    raise HTTPException(status_code=404, detail=f"Unknown tradition '{value}'")


@router.get("/cards", response_model=list[KnowledgeCardOut])
async def list_cards(tradition: Optional[str] = None):
    cards = cards_for_tradition(_parse_tradition(tradition)) if tradition else KNOWLEDGE_CARDS
    return [KnowledgeCardOut.model_validate(card) for card in cards]


@router.get("/concepts", response_model=list[ConceptCardOut])
async def list_concepts():
    return [ConceptCardOut.model_validate(concept) for concept in CONCEPT_CARDS]


@router.get("/concepts/{title}", response_model=ConceptCardOut)
async def get_concept(title: str):
    concept = find_concept(title)
    if not concept:
        raise HTTPException(status_code=404, detail="Concept not found")
    return ConceptCardOut.model_validate(concept)


@router.get("/search", response_model=TopicSearchResponse)
async def search(q: str = Query(min_length=2, max_length=200)):
    hits = search_by_topic(q)
    return TopicSearchResponse(
        query=q,
        count=len(hits),
        results=[KnowledgeCardOut.model_validate(card) for card in hits],
    )
