"""
Candidate model: typed representation of a catalog device for the rotation pipeline.

The sampler treats candidates as opaque values; only the service layer reads
brand/model/price when building display cards. Display fields are coerced
leniently so any catalog record can be shown: a value that does not parse
becomes None instead of rejecting the record.
Built from catalog dicts via Candidate.model_validate(d).
"""

import logging
import math
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS = "₹$€£"


def parse_price(value: Any) -> Optional[float]:
    """Best-effort price: numbers pass through, strings like "₹74,999" are parsed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        price = float(value)
    elif isinstance(value, str):
        text = value.replace(",", "").strip().lstrip(CURRENCY_SYMBOLS).strip()
        try:
            price = float(text)
        except ValueError:
            return None
    else:
        return None
    return price if math.isfinite(price) else None


class Candidate(BaseModel):
    """
    Device record returned by a catalog provider.

    Catalog payloads use capitalized keys (Brand, Model, Price); both the
    aliases and the field names are accepted. Unknown keys are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    brand: Optional[str] = Field(default=None, alias="Brand")
    model: Optional[str] = Field(default=None, alias="Model")
    price: Optional[float] = Field(default=None, alias="Price")

    @field_validator("brand", "model", mode="before")
    @classmethod
    def as_text(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("price", mode="before")
    @classmethod
    def as_price(cls, value: Any) -> Optional[float]:
        return parse_price(value)

    def display_key(self, position: int) -> str:
        """List key for rendering: brand-model-position, with placeholders."""
        return f"{self.brand or 'brand'}-{self.model or 'model'}-{position}"

    def details(self) -> Dict[str, Any]:
        """Extra catalog fields (specs, ratings, links) not modelled explicitly."""
        return dict(self.model_extra or {})


def ensure_candidates(
    records: Optional[List[Union[Dict[str, Any], "Candidate"]]],
) -> List["Candidate"]:
    """Convert a catalog list to Candidates. Every dict is kept; non-record entries are skipped."""
    out: List[Candidate] = []
    for rec in records or []:
        if isinstance(rec, Candidate):
            out.append(rec)
        elif isinstance(rec, dict):
            out.append(Candidate.model_validate(rec))
        else:
            logger.warning("Skipping non-record catalog entry of type %s", type(rec).__name__)
    return out
