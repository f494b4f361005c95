"""
Pydantic models for the conversational intent router
"""
from enum import Enum
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from .user import UserProfile


class IntentCategory(str, Enum):
    """Topic categories an utterance can be classified into"""
    GREETING = "greeting"
    HELP = "help"
    AGRICULTURE = "agriculture"
    EDUCATION = "education"
    HEALTHCARE = "healthcare"
    HOUSING = "housing"
    EMPLOYMENT = "employment"
    FINANCE = "finance"
    PENSION = "pension"
    FOOD = "food"
    INSURANCE = "insurance"
    SCHEMES = "schemes"
    ELIGIBILITY = "eligibility"
    APPLICATION = "application"
    STATUS = "status"
    DOCUMENTS = "documents"
    SPECIFIC_SCHEME = "specific_scheme"
    IRRELEVANT = "irrelevant"
    UNKNOWN = "unknown"


# Categories whose name is also a scheme category tag in the catalog
TOPIC_CATEGORIES = (
    IntentCategory.AGRICULTURE,
    IntentCategory.EDUCATION,
    IntentCategory.HEALTHCARE,
    IntentCategory.HOUSING,
    IntentCategory.EMPLOYMENT,
    IntentCategory.FINANCE,
    IntentCategory.PENSION,
    IntentCategory.FOOD,
    IntentCategory.INSURANCE,
)


class IntentClassification(BaseModel):
    """Outcome of classifying one utterance"""
    category: IntentCategory
    priority: int = Field(..., description="Priority of the rule that won")
    scheme_id: Optional[str] = Field(None, description="Resolved scheme id for specific_scheme")
    matched_keywords: List[str] = Field(default_factory=list)


class SchemeReference(BaseModel):
    """A scheme reference returned in chat responses"""
    id: str
    name: str
    category: str
    benefits: str = ""
    application_link: str = ""
    probability: Optional[int] = Field(None, ge=0, le=100)


class ChatResponse(BaseModel):
    """Response rendered by the chat UI"""
    text: str = Field(..., min_length=1)
    category: IntentCategory
    type: Literal["text", "scheme", "eligibility"] = "text"
    schemes: List[SchemeReference] = Field(default_factory=list)
    quick_replies: List[str] = Field(default_factory=list, max_length=6)
    language: str = "en"


class ChatRequest(BaseModel):
    """Chat message request"""
    message: str = Field(..., description="Typed or voice-transcribed utterance")
    user_profile: Optional[UserProfile] = Field(None, description="Applicant profile, if completed")
    language: Optional[str] = Field(None, description="Language code for localized text (en, hi, te)")


class ClassifyRequest(BaseModel):
    """Request to classify an utterance without building a response"""
    message: str
