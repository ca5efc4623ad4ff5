"""
Local scripture assistant, Roko voice-assistant and Telugu explanation endpoints.
"""

import uuid
from fastapi import APIRouter, HTTPException, Request
from loguru import logger

from scripture_ai.models.schemas import (
    AskRequest, AskResponse, RokoRequest, RokoResponse, TeluguResponse, TextRequest,
)
from scripture_ai.services.local_ai_service import answer
from scripture_ai.services.translation_service import TeluguExplainer
from scripture_ai.services.voice_session import drop_session, get_or_create_session

router = APIRouter(prefix="/api/assistant", tags=["assistant"])


@router.post("/ask", response_model=AskResponse)
async def ask(req: AskRequest):
    """Answer a question from the offline knowledge base."""
    reply = answer(req.question)
    logger.info(f"Ask [{reply.kind}/{reply.mode.value}]: '{req.question[:50]}'")
    return AskResponse(
        question=req.question,
        answer=reply.text,
        kind=reply.kind,
        mode=reply.mode,
        matches=reply.matches,
    )


@router.post("/roko", response_model=RokoResponse)
async def roko_turn(req: RokoRequest):
    """
    One utterance for the wake-word assistant. Until the wake word is heard
    the reply is null; after activation the next utterance gets an answer.
    """
    session_id = req.session_id or str(uuid.uuid4())
    session = get_or_create_session(session_id)
    result = session.handle(req.text)

    if result.reply:
        logger.info(f"Roko [{session_id[:8]}]: '{req.text[:50]}' -> '{result.reply[:50]}'")

    return RokoResponse(
        session_id=session_id,
        reply=result.reply,
        active=result.active,
        sentiment=result.sentiment.sentiment if result.sentiment else None,
        sentiment_score=result.sentiment.score if result.sentiment else None,
        intent=result.intent.intent if result.intent else None,
    )


@router.delete("/roko/{session_id}")
async def reset_roko(session_id: str):
    if not drop_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "reset", "session_id": session_id}


@router.post("/telugu", response_model=TeluguResponse)
async def telugu_explanation(req: TextRequest, request: Request):
    """
    Telugu rendering of an answer or verse explanation. Provider failures
    surface as a 502 from the error middleware.
    """
    explainer: TeluguExplainer = request.app.state.telugu_explainer
    explanation = await explainer.explain(req.text)
    logger.info(f"Telugu [{explainer.cache_size} cached]: '{req.text[:50]}'")
    return TeluguResponse(text=req.text, explanation=explanation)
