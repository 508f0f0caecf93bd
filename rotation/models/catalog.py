"""
Catalog request model: device category, usage profile and budget.

The usage profiles allowed for each category are a static, ordered mapping.
RecommendationRequest validates the combination when it is constructed, so a
request that exists is always one the catalog can answer.
"""

import math
from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, field_validator, model_validator

INVALID_BUDGET_MESSAGE = "Please enter a valid budget."


class DeviceCategory(str, Enum):
    LAPTOP = "laptop"
    PHONE = "phone"


class UsageProfile(str, Enum):
    GAMING = "gaming"
    BUSINESS = "business"
    BASIC = "basic"
    STUDENT = "student"
    CAMERA = "camera"


USAGE_OPTIONS: Dict[DeviceCategory, Tuple[UsageProfile, ...]] = {
    DeviceCategory.LAPTOP: (
        UsageProfile.GAMING,
        UsageProfile.BUSINESS,
        UsageProfile.BASIC,
        UsageProfile.STUDENT,
    ),
    DeviceCategory.PHONE: (
        UsageProfile.GAMING,
        UsageProfile.CAMERA,
        UsageProfile.BUSINESS,
        UsageProfile.BASIC,
    ),
}


def usage_options_for(category: DeviceCategory) -> Tuple[UsageProfile, ...]:
    """Ordered usage profiles offered for a device category."""
    return USAGE_OPTIONS[DeviceCategory(category)]


class RecommendationRequest(BaseModel):
    """What the user picked on the form: category, usage and a positive budget."""

    device_type: DeviceCategory
    usage_type: UsageProfile
    budget: float

    @field_validator("budget", mode="before")
    @classmethod
    def budget_is_positive_number(cls, value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError(INVALID_BUDGET_MESSAGE)
        try:
            budget = float(value)
        except (TypeError, ValueError):
            raise ValueError(INVALID_BUDGET_MESSAGE)
        if not math.isfinite(budget) or budget <= 0:
            raise ValueError(INVALID_BUDGET_MESSAGE)
        return budget

    @model_validator(mode="after")
    def usage_allowed_for_category(self):
        if self.usage_type not in USAGE_OPTIONS[self.device_type]:
            raise ValueError(
                f"Usage '{self.usage_type.value}' is not available for {self.device_type.value}"
            )
        return self

    def form_fields(self) -> Dict[str, str]:
        """Form payload sent to the remote catalog."""
        budget = int(self.budget) if self.budget.is_integer() else self.budget
        return {
            "device_type": self.device_type.value,
            "budget": str(budget),
            "usage_type": self.usage_type.value,
        }
