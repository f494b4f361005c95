"""
Chat service: routes classified utterances to response builders
"""
import logging
from typing import Callable, Dict, List, Optional, Sequence

from ..config import settings
from ..intent_classifier import IntentClassifier
from ..models.chat import (
    ChatResponse,
    IntentCategory,
    IntentClassification,
    SchemeReference,
    TOPIC_CATEGORIES
)
from ..models.scheme import EligibilityCriterion, Scheme
from ..models.user import EvaluationResult, UserProfile
from ..utils.formatting import format_inr
from .catalog_service import CatalogService, catalog_service
from .recommendation_service import PARTIAL_MATCH_THRESHOLD, RecommendationService, recommendation_service

logger = logging.getLogger(__name__)

CATEGORY_SCHEME_LIMIT = 6
MAX_MISSING_CRITERIA_SHOWN = 3

DEFAULT_QUICK_REPLIES = [
    'Show recommended schemes',
    'Check my eligibility',
    'Agriculture schemes',
    'Education schemes',
    'Healthcare schemes',
    'Housing schemes',
]

PROFILE_HINT = "Complete your profile (age, income, occupation and location) to get personalized matches."


def describe_criterion(criterion: EligibilityCriterion) -> str:
    """Short human-readable form of one criterion"""
    value = criterion.value
    if criterion.attribute == "age":
        return f"Age {value[0]}-{value[1]} years"
    if criterion.attribute == "income":
        return f"Income up to {format_inr(value)}"
    if criterion.attribute == "has_disability":
        return "Disability status required" if value else "No disability status required"
    if criterion.attribute == "land_ownership":
        return "Land ownership required" if value else "Must not own land"
    label = criterion.attribute.replace("_", " ").capitalize()
    return f"{label}: {', '.join(value)}"


class IntentRouter:
    """Classifies utterances and builds chat responses"""
    
    def __init__(
        self,
        catalog: CatalogService = catalog_service,
        recommender: RecommendationService = recommendation_service
    ):
        self.catalog = catalog
        self.recommender = recommender
        self.builders: Dict[IntentCategory, Callable[..., ChatResponse]] = {
            IntentCategory.GREETING: self._greeting_response,
            IntentCategory.HELP: self._help_response,
            IntentCategory.SCHEMES: self._schemes_response,
            IntentCategory.ELIGIBILITY: self._eligibility_response,
            IntentCategory.APPLICATION: self._application_response,
            IntentCategory.STATUS: self._status_response,
            IntentCategory.DOCUMENTS: self._documents_response,
            IntentCategory.SPECIFIC_SCHEME: self._specific_scheme_response,
            IntentCategory.IRRELEVANT: self._irrelevant_response,
            IntentCategory.UNKNOWN: self._unknown_response,
        }
        for topic in TOPIC_CATEGORIES:
            self.builders[topic] = self._category_response
    
    def classify(self, utterance: str) -> IntentClassification:
        return IntentClassifier.classify(utterance)
    
    def respond(
        self,
        classification: IntentClassification,
        utterance: str,
        profile: Optional[UserProfile] = None,
        language: Optional[str] = None
    ) -> ChatResponse:
        """
        Build the response for a classified utterance
        
        Args:
            classification: Result of classify()
            utterance: Original utterance
            profile: Applicant profile, None when it has not been completed
            language: Language for scheme names and benefits
        
        Returns:
            ChatResponse with non-empty text and at most six quick replies
        """
        language = self._resolve_language(language)
        builder = self.builders.get(classification.category, self._unknown_response)
        try:
            return builder(classification, utterance, profile, language)
        except Exception as e:
            logger.error(f"Error building {classification.category.value} response: {e}")
            return self._unknown_response(classification, utterance, profile, language)
    
    def handle(
        self,
        utterance: str,
        profile: Optional[UserProfile] = None,
        language: Optional[str] = None
    ) -> ChatResponse:
        """Classify an utterance and respond to it"""
        classification = self.classify(utterance)
        logger.info(f"Chat intent: {classification.category.value} (priority {classification.priority})")
        return self.respond(classification, utterance, profile, language)
    
    # Helpers
    @staticmethod
    def _resolve_language(language: Optional[str]) -> str:
        if language and language.lower() in settings.get_supported_languages_list():
            return language.lower()
        return settings.default_language
    
    @staticmethod
    def _reference(scheme: Scheme, language: str, probability: Optional[int] = None) -> SchemeReference:
        return SchemeReference(
            id=scheme.id,
            name=scheme.name.resolve(language, settings.default_language),
            category=scheme.category,
            benefits=scheme.benefits.resolve(language, settings.default_language),
            application_link=scheme.application_link,
            probability=probability
        )
    
    def _result_references(self, results: Sequence[EvaluationResult], language: str) -> List[SchemeReference]:
        return [self._reference(result.scheme, language, result.probability) for result in results]
    
    @staticmethod
    def _reply(
        text: str,
        category: IntentCategory,
        quick_replies: Sequence[str],
        language: str,
        schemes: Sequence[SchemeReference] = (),
        response_type: str = "text"
    ) -> ChatResponse:
        return ChatResponse(
            text=text,
            category=category,
            type=response_type,
            schemes=list(schemes),
            quick_replies=list(quick_replies)[:settings.max_quick_replies],
            language=language
        )
    
    # Static guidance
    def _greeting_response(self, classification, utterance, profile, language) -> ChatResponse:
        total = len(self.catalog.schemes)
        text = (
            "Namaste! 🇮🇳 Welcome to SchemeSeeker - your personal government schemes assistant!\n\n"
            "I can help you with:\n"
            "• 🌾 Agriculture & Farming schemes\n"
            "• 🎓 Education & Scholarships\n"
            "• 🏥 Healthcare & Insurance\n"
            "• 🏠 Housing\n"
            "• 💼 Employment & Skill Development\n"
            "• 💰 Finance, Pension & Food security\n\n"
            f"I can check your eligibility across {total} government schemes. How can I assist you today?"
        )
        return self._reply(text, classification.category, [
            'Show recommended schemes',
            'Check my eligibility',
            'Popular schemes',
            'Agriculture schemes',
            'Education schemes',
            'Healthcare schemes',
        ], language)
    
    def _help_response(self, classification, utterance, profile, language) -> ChatResponse:
        text = (
            "I can help you with:\n\n"
            "• Finding government schemes based on your profile\n"
            "• Checking your eligibility for specific schemes\n"
            "• Providing details about benefits and requirements\n"
            "• Guiding you through application processes\n"
            "• Recommending schemes by category\n\n"
            "Just ask me about any scheme or category you're interested in!"
        )
        return self._reply(text, classification.category, [
            'Show recommended schemes',
            'Agriculture schemes',
            'Education schemes',
            'Healthcare schemes',
        ], language)
    
    def _application_response(self, classification, utterance, profile, language) -> ChatResponse:
        text = (
            "📝 **How to Apply for Government Schemes**\n\n"
            "**Step 1:** Choose your scheme\n"
            "• Browse by category or search specific schemes\n"
            "• Check eligibility criteria\n\n"
            "**Step 2:** Gather documents\n"
            "• Aadhaar Card (mandatory for most schemes)\n"
            "• Income Certificate\n"
            "• Caste Certificate (if applicable)\n"
            "• Bank Account details\n\n"
            "**Step 3:** Apply online\n"
            "• Visit the official portal and fill the application form\n"
            "• Upload required documents, submit and note the application ID\n\n"
            "**Step 4:** Track status using your application ID\n\n"
            "💡 Apply early before deadlines and keep your documents ready in digital format!"
        )
        return self._reply(text, classification.category, [
            'Document checklist',
            'Track application',
            'Popular schemes',
            'Check my eligibility',
        ], language)
    
    def _status_response(self, classification, utterance, profile, language) -> ChatResponse:
        text = (
            "🔍 **Track Your Application Status**\n\n"
            "• PM-KISAN: pmkisan.gov.in\n"
            "• Scholarships (NSP): scholarships.gov.in\n"
            "• Ayushman Bharat: pmjay.gov.in\n"
            "• MUDRA: mudra.org.in\n\n"
            "**What you need:** application/reference number, registered mobile number "
            "and Aadhaar number.\n\n"
            "**Typical processing times:** Easy schemes 1-15 days, Medium 15-45 days, "
            "Complex 45-90 days."
        )
        return self._reply(text, classification.category, [
            'Check my eligibility',
            'How to apply',
            'Document checklist',
        ], language)
    
    def _documents_response(self, classification, utterance, profile, language) -> ChatResponse:
        text = (
            "📄 **Common Document Checklist**\n\n"
            "• Aadhaar Card\n"
            "• Income Certificate\n"
            "• Caste / Category Certificate (if applicable)\n"
            "• Bank Account details (passbook or cancelled cheque)\n"
            "• Land Records (for agriculture schemes)\n"
            "• Educational certificates (for scholarships)\n"
            "• Passport-size photographs\n\n"
            "Ask me about a specific scheme to see exactly which documents it needs."
        )
        return self._reply(text, classification.category, [
            'How to apply',
            'Popular schemes',
            'Check my eligibility',
        ], language)
    
    def _irrelevant_response(self, classification, utterance, profile, language) -> ChatResponse:
        text = (
            "I'm sorry, I can only help with government welfare schemes - finding schemes, "
            "checking eligibility, documents and applications. Try asking about a scheme category!"
        )
        return self._reply(text, classification.category, DEFAULT_QUICK_REPLIES[:4], language)
    
    def _unknown_response(self, classification, utterance, profile, language) -> ChatResponse:
        text = (
            "🤔 I didn't quite understand that, but I'd be happy to help you find relevant "
            "government schemes!\n\n"
            "**You can ask me about:**\n"
            "• Specific schemes (e.g., \"Tell me about PM Kisan\")\n"
            "• Categories (e.g., \"Show agriculture schemes\")\n"
            "• Eligibility (e.g., \"Am I eligible for healthcare schemes?\")\n"
            "• Application process (e.g., \"How to apply for MUDRA loan?\")\n"
            "• Document requirements and application status"
        )
        return self._reply(text, IntentCategory.UNKNOWN, DEFAULT_QUICK_REPLIES[:4], language)
    
    # Personalized responses
    def _schemes_response(self, classification, utterance, profile, language) -> ChatResponse:
        schemes = self.catalog.schemes
        limit = settings.chat_scheme_limit
        quick_replies = ['Show more schemes', 'Check my eligibility', 'Agriculture schemes', 'Education schemes']
        
        if profile is None:
            references = [self._reference(scheme, language) for scheme in schemes[:limit]]
            text = f"Here are some popular government schemes:\n\n{PROFILE_HINT}"
        else:
            results = self.recommender.recommend(profile, schemes, limit=limit)
            references = self._result_references(results, language)
            text = "Based on your profile, here are the schemes I recommend for you:"
        
        return self._reply(text, classification.category, quick_replies, language, references, "scheme")
    
    def _eligibility_response(self, classification, utterance, profile, language) -> ChatResponse:
        if profile is None:
            text = (
                "To check your eligibility, please complete your profile first. Go to your dashboard "
                "and fill in your details like age, income, occupation, and location."
            )
            return self._reply(text, classification.category, [
                'Show all schemes',
                'Agriculture schemes',
                'Education schemes',
                'Healthcare schemes',
            ], language)
        
        topics = IntentClassifier.topic_categories(utterance)
        topic = topics[0].value if topics else None
        label = f"{topic} " if topic else ""
        limit = settings.chat_scheme_limit
        
        schemes = self.catalog.schemes
        eligible = self.recommender.eligible(profile, schemes, category=topic)
        
        if eligible:
            text = (
                f"Great! Based on your profile, you're eligible for {len(eligible)} {label}schemes. "
                f"Here are your top matches:"
            )
            shown = eligible[:limit]
        else:
            shown = [
                result for result in self.recommender.rank(profile, schemes)
                if (topic is None or result.scheme.category == topic)
                and result.probability > PARTIAL_MATCH_THRESHOLD
            ][:limit]
            if shown:
                text = f"You don't fully qualify for any {label}schemes yet, but these are close matches:"
            else:
                text = (
                    f"You don't currently qualify for any {label}schemes. Keeping your profile up to date "
                    f"helps me find better matches."
                )
        
        return self._reply(text, classification.category, [
            'Show more eligible schemes',
            'Check partial matches',
            'How to apply',
        ], language, self._result_references(shown, language), "eligibility")
    
    def _category_response(self, classification, utterance, profile, language) -> ChatResponse:
        category = classification.category.value
        in_category = [scheme for scheme in self.catalog.schemes if scheme.category == category]
        quick_replies = ['Check my eligibility', 'Show more categories', 'How to apply']
        
        if not in_category:
            text = f"I couldn't find any {category} schemes right now. Try another category."
            return self._reply(text, classification.category, DEFAULT_QUICK_REPLIES, language)
        
        if profile is None:
            references = [self._reference(scheme, language) for scheme in in_category[:CATEGORY_SCHEME_LIMIT]]
            text = f"Here are the {category} schemes available:\n\n{PROFILE_HINT}"
        else:
            results = self.recommender.rank(profile, in_category)[:CATEGORY_SCHEME_LIMIT]
            references = self._result_references(results, language)
            text = f"Here are the {category} schemes, ranked by how well they match your profile:"
        
        return self._reply(text, classification.category, quick_replies, language, references, "scheme")
    
    def _specific_scheme_response(self, classification, utterance, profile, language) -> ChatResponse:
        scheme = self.catalog.get(classification.scheme_id) if classification.scheme_id else None
        if scheme is None:
            logger.warning(f"Scheme alias resolved to unknown id: {classification.scheme_id}")
            return self._unknown_response(classification, utterance, profile, language)
        
        detail = scheme.localized(language, settings.default_language)
        criteria = scheme.eligibility.criteria()
        eligibility_text = "; ".join(describe_criterion(c) for c in criteria) if criteria else "Open to all"
        
        lines = [
            f"📋 **{detail.name}**",
            "",
            detail.description,
            "",
            f"**Benefits:** {detail.benefits}",
            "",
            f"**Eligibility:** {eligibility_text}",
            "",
            f"**Difficulty:** {detail.difficulty}",
            f"**Success Rate:** {detail.success_rate}%",
        ]
        if detail.processing_time:
            lines.append(f"**Processing Time:** {detail.processing_time}")
        if detail.deadline:
            lines.append(f"**Deadline:** {detail.deadline.isoformat()}")
        lines.append("")
        
        probability = None
        if profile is None:
            lines.append("Complete your profile to check your eligibility for this scheme.")
        else:
            result = self.recommender.evaluator.evaluate(profile, scheme)
            probability = result.probability
            if result.eligible:
                lines.append(f"✅ You meet all {result.applicable_criteria} criteria for this scheme.")
            else:
                lines.append(
                    f"Your match: {result.probability}% "
                    f"({result.satisfied_criteria} of {result.applicable_criteria} criteria met)."
                )
                for missing in result.missing_criteria[:MAX_MISSING_CRITERIA_SHOWN]:
                    lines.append(f"• {missing}")
        
        return self._reply("\n".join(lines), classification.category, [
            'Check my eligibility',
            'How to apply',
            'Similar schemes',
            'Document checklist',
        ], language, [self._reference(scheme, language, probability)], "scheme")


# Global intent router instance
intent_router = IntentRouter()
