"""Form option models."""

from typing import Dict, List

from pydantic import BaseModel


class UsageOptionsResponse(BaseModel):
    """Usage profiles per device category, in display order."""

    categories: Dict[str, List[str]]
