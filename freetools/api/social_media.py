"""
Social media tool API endpoints.
"""

from typing import Optional

from fastapi import APIRouter

from freetools.api.schemas import CamelModel, ToolResponse
from freetools.calculations import engagement

router = APIRouter()


class EngagementInput(CamelModel):
    """Input for engagement rate calculation."""

    likes: Optional[float] = None
    comments: Optional[float] = None
    shares: Optional[float] = None
    followers: Optional[float] = None
    platform: Optional[str] = None


class Benchmark(CamelModel):
    average: float
    good: float
    excellent: float
    description: str


class EngagementResult(CamelModel):
    engagement_rate: float
    total_engagement: float
    engagement_per_follower: float
    likes: float
    comments: float
    shares: float
    followers: float
    platform: str
    performance_level: str
    benchmark: Benchmark


@router.post(
    "/post-engagement-calculator/calculate",
    response_model=ToolResponse[EngagementResult],
)
async def calculate_post_engagement(inputs: EngagementInput):
    """Calculate a post's engagement rate against platform benchmarks."""
    result = engagement.calculate_engagement_rate(
        inputs.likes,
        inputs.comments,
        inputs.shares,
        inputs.followers,
        inputs.platform,
    )
    return {"success": True, "data": result}
