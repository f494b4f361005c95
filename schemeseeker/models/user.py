"""
Pydantic models for applicant profiles, evaluation results and summaries
"""
from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .scheme import Scheme


LocationClass = Literal["Urban", "Rural"]


def get_current_utc_time():
    """Get current UTC time for default values"""
    return datetime.now(timezone.utc)


class UserProfile(BaseModel):
    """Applicant profile used for eligibility checking"""
    age: int = Field(..., ge=0, le=150, description="Applicant's age in years")
    income: float = Field(..., ge=0, description="Annual household income (INR)")
    location: LocationClass = Field(..., description="Urban or Rural")
    occupation: str = Field(..., description="Applicant's occupation, e.g. Farmer")
    category: str = Field(default="General", description="Social category: General/SC/ST/OBC/EWS/BPL/...")
    has_disability: bool = Field(default=False, description="Whether applicant has a disability")
    land_ownership: bool = Field(default=False, description="Whether applicant owns land")
    education_level: str = Field(..., description="Highest education level, e.g. 10th, Graduate")
    family_size: int = Field(default=1, ge=1, description="Number of family members")
    
    @field_validator('location', mode='before')
    @classmethod
    def normalize_location(cls, v):
        if isinstance(v, str):
            return v.strip().capitalize()
        return v
    
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "age": 30,
                "income": 150000,
                "location": "Rural",
                "occupation": "Farmer",
                "category": "General",
                "has_disability": False,
                "land_ownership": True,
                "education_level": "10th",
                "family_size": 4
            }
        }
    )


class EvaluationResult(BaseModel):
    """Result of evaluating one profile against one scheme"""
    scheme: Scheme
    eligible: bool = Field(..., description="True only when every set criterion is met")
    probability: int = Field(..., ge=0, le=100, description="Percentage of set criteria met")
    missing_criteria: List[str] = Field(default_factory=list, description="Unmet criteria")
    improvement_tips: List[str] = Field(default_factory=list, description="Guidance for each unmet criterion")
    satisfied_criteria: int = Field(default=0, ge=0)
    applicable_criteria: int = Field(default=0, ge=0)
    
    model_config = ConfigDict(frozen=True)


class RecommendationSummary(BaseModel):
    """Aggregate eligibility statistics for one profile over a catalog"""
    eligible_count: int = 0
    partial_count: int = Field(default=0, description="Not eligible but probability above 50")
    ineligible_count: int = 0
    total_schemes: int = 0
    eligibility_rate: int = Field(default=0, ge=0, le=100)
    average_probability: int = Field(default=0, ge=0, le=100)
    top_category: Optional[str] = Field(None, description="Category with the highest summed probability")
    category_scores: Dict[str, int] = Field(default_factory=dict)
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "eligible_count": 8,
                "partial_count": 12,
                "ineligible_count": 17,
                "total_schemes": 37,
                "eligibility_rate": 22,
                "average_probability": 58,
                "top_category": "agriculture",
                "category_scores": {"agriculture": 500, "education": 210}
            }
        }
    )


class EligibilityRequest(BaseModel):
    """Request to check eligibility for schemes"""
    user_profile: UserProfile = Field(..., description="Applicant's profile information")
    scheme_ids: Optional[List[str]] = Field(None, description="Specific schemes to check (if None, check all)")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_profile": {
                    "age": 30,
                    "income": 150000,
                    "location": "Rural",
                    "occupation": "Farmer",
                    "category": "General",
                    "land_ownership": True,
                    "education_level": "10th"
                },
                "scheme_ids": ["PM-KISAN", "KCC"]
            }
        }
    )


class EligibilityResponse(BaseModel):
    """Complete eligibility response for a profile"""
    total_schemes_checked: int = Field(..., description="Total number of schemes checked")
    eligible_schemes: int = Field(..., description="Number of fully eligible schemes")
    partially_eligible: int = Field(default=0, description="Number of partial matches")
    results: List[EvaluationResult] = Field(..., description="Results in rank order")
    unknown_scheme_ids: List[str] = Field(default_factory=list, description="Requested ids not in the catalog")
    checked_at: datetime = Field(default_factory=get_current_utc_time)
    processing_time_ms: Optional[float] = Field(None, description="Time taken to process request")
