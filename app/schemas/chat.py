from pydantic import BaseModel
from typing import Optional


class ChatQuery(BaseModel):
    message: Optional[str] = None
    action: Optional[str] = None   # vehicle-status | maintenance-alerts | parts-inventory | schedule-maintenance


class ChatResponse(BaseModel):
    response: str
