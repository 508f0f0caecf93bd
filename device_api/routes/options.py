"""Form option endpoints."""

from fastapi import APIRouter

from rotation import USAGE_OPTIONS

from ..models import UsageOptionsResponse

router = APIRouter()


@router.get("/options", response_model=UsageOptionsResponse)
def usage_options():
    """Usage profiles offered for each device category."""
    return UsageOptionsResponse(
        categories={
            category.value: [usage.value for usage in usages]
            for category, usages in USAGE_OPTIONS.items()
        }
    )
