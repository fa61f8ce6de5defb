"""Fleet assistant endpoint."""

from fastapi import APIRouter, Depends

from app.deps import get_storage
from app.schemas.chat import ChatQuery, ChatResponse
from app.services.chat_service import answer_query
from app.services.storage import FleetStorage

router = APIRouter()


@router.post("/chat/query", response_model=ChatResponse, summary="Ask the fleet assistant")
def chat_query(body: ChatQuery, storage: FleetStorage = Depends(get_storage)):
    """Send a quick `action` tag or a free-text `message`."""
    return ChatResponse(response=answer_query(storage, message=body.message, action=body.action))
