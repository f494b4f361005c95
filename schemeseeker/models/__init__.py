"""
Models package for SchemeSeeker
"""

from .scheme import (
    CRITERIA_FIELDS,
    EligibilityCriterion,
    EligibilitySpec,
    LocalizedText,
    Scheme,
    SchemeCatalogFile,
    SchemeDetail
)

from .user import (
    UserProfile,
    EvaluationResult,
    RecommendationSummary,
    EligibilityRequest,
    EligibilityResponse
)

from .chat import (
    IntentCategory,
    IntentClassification,
    SchemeReference,
    ChatResponse,
    ChatRequest,
    ClassifyRequest,
    TOPIC_CATEGORIES
)

__all__ = [
    # Scheme models
    "CRITERIA_FIELDS",
    "EligibilityCriterion",
    "EligibilitySpec",
    "LocalizedText",
    "Scheme",
    "SchemeCatalogFile",
    "SchemeDetail",
    
    # User models
    "UserProfile",
    "EvaluationResult",
    "RecommendationSummary",
    "EligibilityRequest",
    "EligibilityResponse",
    
    # Chat models
    "IntentCategory",
    "IntentClassification",
    "SchemeReference",
    "ChatResponse",
    "ChatRequest",
    "ClassifyRequest",
    "TOPIC_CATEGORIES"
]
