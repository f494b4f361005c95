"""
API routes for the conversational assistant
"""
import logging
from fastapi import APIRouter, HTTPException

from ..models.chat import ChatRequest, ChatResponse, ClassifyRequest, IntentClassification
from ..services.chat_service import intent_router
from ..utils.validators import validate_language_code

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/message", response_model=ChatResponse)
async def send_message(request: ChatRequest):
    """
    Respond to a typed or voice-transcribed message
    """
    if not validate_language_code(request.language):
        raise HTTPException(status_code=400, detail=f"Unsupported language: {request.language}")
    
    return intent_router.handle(request.message, request.user_profile, request.language)


@router.post("/classify", response_model=IntentClassification)
async def classify_message(request: ClassifyRequest):
    """
    Classify a message without building a response
    """
    return intent_router.classify(request.message)
