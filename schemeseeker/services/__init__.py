"""
Services package for SchemeSeeker
"""

from .catalog_service import CatalogService, CatalogError, catalog_service
from .recommendation_service import RecommendationService, recommendation_service
from .chat_service import IntentRouter, intent_router

__all__ = [
    "CatalogService",
    "CatalogError",
    "catalog_service",
    "RecommendationService",
    "recommendation_service",
    "IntentRouter",
    "intent_router"
]
