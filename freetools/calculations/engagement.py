"""
Post Engagement Calculations

Engagement rate of a social media post against platform benchmarks.
"""

import logging
from typing import Dict, Optional

from freetools.calculations.rounding import round_to
from freetools.calculations.validation import (
    OutOfRangeError,
    require_min,
    require_positive,
)

logger = logging.getLogger(__name__)

MAX_VALUE = 1_000_000_000

BENCHMARKS = {
    "instagram": {"average": 1.5, "good": 3.0, "excellent": 6.0, "description": "Instagram engagement rates"},
    "facebook": {"average": 0.5, "good": 1.0, "excellent": 2.0, "description": "Facebook engagement rates"},
    "twitter": {"average": 0.5, "good": 1.0, "excellent": 2.0, "description": "Twitter/X engagement rates"},
    "tiktok": {"average": 3.0, "good": 6.0, "excellent": 9.0, "description": "TikTok engagement rates"},
    "youtube": {"average": 1.0, "good": 2.0, "excellent": 4.0, "description": "YouTube engagement rates"},
    "linkedin": {"average": 0.5, "good": 1.5, "excellent": 3.0, "description": "LinkedIn engagement rates"},
}

DEFAULT_BENCHMARK = {
    "average": 1.0,
    "good": 2.5,
    "excellent": 5.0,
    "description": "General social media engagement rates",
}


def get_benchmark(platform: Optional[str]) -> Dict:
    """Benchmark thresholds for a platform, or the general default."""
    return dict(BENCHMARKS.get((platform or "").lower(), DEFAULT_BENCHMARK))


def performance_level(engagement_rate: float, benchmark: Dict) -> str:
    """Label a rate against the benchmark thresholds, best match first."""
    if engagement_rate >= benchmark["excellent"]:
        return "Excellent"
    if engagement_rate >= benchmark["good"]:
        return "Good"
    if engagement_rate >= benchmark["average"]:
        return "Average"
    return "Below Average"


def validate_engagement_inputs(
    likes, comments, shares, followers, field: str = "followers", label: str = "Followers"
) -> tuple:
    likes = require_min(likes, "likes", "Likes", 0, "Likes must be a non-negative number")
    comments = require_min(
        comments, "comments", "Comments", 0, "Comments must be a non-negative number"
    )
    shares = require_min(shares, "shares", "Shares", 0, "Shares must be a non-negative number")
    followers = require_positive(
        followers, field, label, f"{label} must be a positive number"
    )

    if max(likes, comments, shares, followers) > MAX_VALUE:
        raise OutOfRangeError(
            field, "Input values are too large. Maximum value is 1 billion."
        )
    return likes, comments, shares, followers


def calculate_engagement_rate(
    likes: Optional[float],
    comments: Optional[float],
    shares: Optional[float],
    followers: Optional[float],
    platform: Optional[str] = None,
) -> Dict:
    """
    Calculate engagement rate as interactions per follower.

    Args:
        likes: Number of likes
        comments: Number of comments
        shares: Number of shares
        followers: Follower count (> 0)
        platform: Platform name used to pick the benchmark

    Returns:
        Engagement rate (percent), per-follower engagement and performance level
    """
    likes, comments, shares, followers = validate_engagement_inputs(
        likes, comments, shares, followers
    )

    total_engagement = likes + comments + shares
    engagement_rate = total_engagement / followers * 100
    benchmark = get_benchmark(platform)
    logger.debug(f"Engagement rate for {platform or 'all'}: {engagement_rate}")

    return {
        "engagement_rate": round_to(engagement_rate, 2),
        "total_engagement": total_engagement,
        "engagement_per_follower": round_to(total_engagement / followers, 4),
        "likes": likes,
        "comments": comments,
        "shares": shares,
        "followers": followers,
        "platform": platform or "all",
        "performance_level": performance_level(engagement_rate, benchmark),
        "benchmark": benchmark,
    }


def calculate_engagement_rate_by_reach(
    likes: Optional[float],
    comments: Optional[float],
    shares: Optional[float],
    reach: Optional[float],
) -> Dict:
    """Engagement rate measured against the number of people reached."""
    likes, comments, shares, reach = validate_engagement_inputs(
        likes, comments, shares, reach, field="reach", label="Reach"
    )
    total_engagement = likes + comments + shares

    return {
        "engagement_rate": round_to(total_engagement / reach * 100, 2),
        "total_engagement": total_engagement,
        "engagement_per_reach": round_to(total_engagement / reach, 4),
        "reach": reach,
    }
