"""
Pydantic models for schemes and their eligibility specifications
"""
from datetime import date
from typing import Any, Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator


CriterionKind = Literal["range", "ceiling", "membership", "boolean"]
Difficulty = Literal["Easy", "Medium", "Hard"]

# (specification field, profile attribute, criterion kind) in evaluation order
CRITERIA_FIELDS: Tuple[Tuple[str, str, CriterionKind], ...] = (
    ("age_range", "age", "range"),
    ("income_ceiling", "income", "ceiling"),
    ("occupations", "occupation", "membership"),
    ("locations", "location", "membership"),
    ("categories", "category", "membership"),
    ("disability", "has_disability", "boolean"),
    ("land_ownership", "land_ownership", "boolean"),
    ("education_levels", "education_level", "membership"),
)


class LocalizedText(RootModel[Dict[str, str]]):
    """Text keyed by language code ("en", "hi", "te", ...)"""
    
    @model_validator(mode="before")
    @classmethod
    def coerce_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"en": data}
        return data
    
    def resolve(self, language: Optional[str] = None, default_language: str = "en") -> str:
        """
        Resolve the text for the active language
        
        Falls back to the default language, then to any non-empty translation.
        """
        values = self.root
        if language and values.get(language):
            return values[language]
        if values.get(default_language):
            return values[default_language]
        for text in values.values():
            if text:
                return text
        return ""


class EligibilityCriterion(BaseModel):
    """One constraint that is set on a scheme"""
    attribute: str = Field(..., description="UserProfile attribute the constraint applies to")
    kind: CriterionKind = Field(..., description="How the profile value is tested")
    value: Any = Field(..., description="Bounds, ceiling, allowed values or required flag")
    
    model_config = ConfigDict(frozen=True)


class EligibilitySpec(BaseModel):
    """Sparse eligibility specification; unset fields are not constraints"""
    age_range: Optional[Tuple[int, int]] = Field(None, description="Inclusive [min, max] age")
    income_ceiling: Optional[float] = Field(None, ge=0, description="Maximum annual income (inclusive)")
    occupations: Optional[Tuple[str, ...]] = Field(None, description="Allowed occupations")
    locations: Optional[Tuple[str, ...]] = Field(None, description="Allowed location classes")
    categories: Optional[Tuple[str, ...]] = Field(None, description="Allowed social categories")
    disability: Optional[bool] = Field(None, description="Required disability status")
    land_ownership: Optional[bool] = Field(None, description="Required land ownership")
    education_levels: Optional[Tuple[str, ...]] = Field(None, description="Allowed education levels")
    
    @field_validator('age_range')
    @classmethod
    def validate_age_range(cls, v):
        if v is not None and v[0] > v[1]:
            raise ValueError(f'age_range minimum {v[0]} is greater than maximum {v[1]}')
        return v
    
    def criteria(self) -> List[EligibilityCriterion]:
        """Return the set constraints in evaluation order"""
        criteria = []
        for field_name, attribute, kind in CRITERIA_FIELDS:
            value = getattr(self, field_name)
            if value is not None:
                criteria.append(EligibilityCriterion(attribute=attribute, kind=kind, value=value))
        return criteria
    
    model_config = ConfigDict(frozen=True)


class SchemeDetail(BaseModel):
    """Scheme with all localized fields resolved for one language"""
    id: str
    name: str
    description: str
    category: str
    benefits: str
    documents_required: List[str] = Field(default_factory=list)
    application_link: str = ""
    deadline: Optional[date] = None
    difficulty: Difficulty
    rating: float
    success_rate: int
    processing_time: str = ""
    eligibility: EligibilitySpec


class Scheme(BaseModel):
    """A government welfare scheme from the static catalog"""
    id: str = Field(..., min_length=1, description="Stable scheme identifier")
    name: LocalizedText
    description: LocalizedText
    category: str = Field(..., description="Category tag, e.g. agriculture")
    eligibility: EligibilitySpec = Field(default_factory=EligibilitySpec)
    benefits: LocalizedText
    documents_required: Tuple[LocalizedText, ...] = Field(default_factory=tuple)
    application_link: str = Field(default="", description="External application link")
    deadline: Optional[date] = Field(None, description="Application deadline, if any")
    difficulty: Difficulty = Field(default="Medium")
    rating: float = Field(default=0.0, ge=0, le=5)
    success_rate: int = Field(default=0, ge=0, le=100, description="Historical success rate (%)")
    processing_time: LocalizedText = Field(default_factory=lambda: LocalizedText({}))
    
    def localized(self, language: Optional[str] = None, default_language: str = "en") -> SchemeDetail:
        """Resolve every localized field for presentation"""
        return SchemeDetail(
            id=self.id,
            name=self.name.resolve(language, default_language),
            description=self.description.resolve(language, default_language),
            category=self.category,
            benefits=self.benefits.resolve(language, default_language),
            documents_required=[doc.resolve(language, default_language) for doc in self.documents_required],
            application_link=self.application_link,
            deadline=self.deadline,
            difficulty=self.difficulty,
            rating=self.rating,
            success_rate=self.success_rate,
            processing_time=self.processing_time.resolve(language, default_language),
            eligibility=self.eligibility
        )
    
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "PM-KISAN",
                "name": {"en": "Pradhan Mantri Kisan Samman Nidhi"},
                "description": {"en": "Income support of ₹6,000/year for small and marginal farmers"},
                "category": "agriculture",
                "eligibility": {
                    "age_range": [18, 75],
                    "income_ceiling": 200000,
                    "occupations": ["Farmer"],
                    "land_ownership": True
                },
                "benefits": {"en": "₹6,000 per year in 3 installments of ₹2,000 each"},
                "documents_required": [{"en": "Aadhaar Card"}, {"en": "Land Records"}],
                "application_link": "https://pmkisan.gov.in",
                "deadline": "2024-12-31",
                "difficulty": "Easy",
                "rating": 4.5,
                "success_rate": 89,
                "processing_time": {"en": "30-45 days"}
            }
        }
    )


class SchemeCatalogFile(BaseModel):
    """On-disk layout of the scheme catalog"""
    version: int = Field(default=1, ge=1)
    schemes: List[Scheme] = Field(default_factory=list)
