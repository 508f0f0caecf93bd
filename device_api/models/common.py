"""Common Pydantic models shared across routes."""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class CandidateCard(BaseModel):
    key: str
    position: int
    brand: Optional[str] = None
    model: Optional[str] = None
    price: Optional[float] = None
    details: Dict[str, Any] = {}
