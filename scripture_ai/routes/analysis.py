"""
Direct access to the individual text-understanding steps.
"""

from fastapi import APIRouter

from scripture_ai.models.schemas import (
    IntentResponse, ModeResponse, ReferenceResponse, SentimentResponse, TextRequest,
)
from scripture_ai.services.intent_service import match_intent
from scripture_ai.services.local_ai_service import detect_response_mode
from scripture_ai.services.reference_parser import parse_reference
from scripture_ai.services.sentiment_service import analyze_sentiment, get_empathetic_response

router = APIRouter(prefix="/api/analysis", tags=["analysis"])


@router.post("/sentiment", response_model=SentimentResponse)
async def sentiment(req: TextRequest):
    result = analyze_sentiment(req.text)
    return SentimentResponse(
        sentiment=result.sentiment,
        score=result.score,
        confidence=result.confidence,
        empathetic_response=get_empathetic_response(result.sentiment),
    )


@router.post("/intent", response_model=IntentResponse)
async def intent(req: TextRequest):
    result = match_intent(req.text)
    return IntentResponse(matched=result.matched, intent=result.intent, response=result.response)


@router.post("/reference", response_model=ReferenceResponse)
async def reference(req: TextRequest):
    ref = parse_reference(req.text)
    if ref is None:
        return ReferenceResponse(found=False)
    return ReferenceResponse(
        found=True,
        tradition=ref.tradition,
        book=ref.book,
        chapter=ref.chapter,
        verse=ref.verse,
        label=ref.label,
    )


@router.post("/mode", response_model=ModeResponse)
async def mode(req: TextRequest):
    return ModeResponse(mode=detect_response_mode(req.text))
