"""
API routes for SchemeSeeker
"""

from .schemes import router as schemes_router
from .eligibility import router as eligibility_router
from .chat import router as chat_router

__all__ = [
    "schemes_router",
    "eligibility_router",
    "chat_router"
]
