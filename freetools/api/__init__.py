"""
API routes for the calculator tools.
"""

from fastapi import APIRouter

from freetools.api import finance, social_media, student

router = APIRouter()

# Include sub-routers
router.include_router(finance.router, prefix="/tools/finance", tags=["finance"])
router.include_router(student.router, prefix="/tools/student", tags=["student"])
router.include_router(
    social_media.router, prefix="/tools/social-media", tags=["social-media"]
)
