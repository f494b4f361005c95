import logging
from typing import List, Optional, Tuple

from .models.chat import IntentCategory, IntentClassification, TOPIC_CATEGORIES
from .utils.formatting import extract_text_snippet

logger = logging.getLogger(__name__)

IRRELEVANT_PRIORITY = 100
SPECIFIC_SCHEME_PRIORITY = 50
UNKNOWN_PRIORITY = 0

# Topics outside government schemes; checked before anything else
IRRELEVANT_KEYWORDS = (
    "weather", "temperature", "rain forecast", "cricket", "football", "match score",
    "movie", "film", "song", "music", "recipe", "joke", "game", "celebrity",
    "stock price", "horoscope",
)

# (category, priority, keywords) in declaration order; ties go to the earlier rule.
# Keywords match as plain substrings, so short tokens like "hi" are left out.
INTENT_RULES: Tuple[Tuple[IntentCategory, int, Tuple[str, ...]], ...] = (
    (IntentCategory.GREETING, 10, (
        "hello", "namaste", "good morning", "good afternoon", "good evening",
    )),
    (IntentCategory.STATUS, 9, ("status", "track", "progress")),
    (IntentCategory.APPLICATION, 9, ("apply", "application", "how to apply", "register")),
    (IntentCategory.ELIGIBILITY, 8, ("eligibility", "eligible", "qualify")),
    (IntentCategory.DOCUMENTS, 8, ("document", "certificate", "paperwork", "docs")),
    (IntentCategory.AGRICULTURE, 7, ("agriculture", "farming", "farmer", "crop", "kisan")),
    (IntentCategory.EDUCATION, 7, ("education", "scholarship", "student", "study")),
    (IntentCategory.HEALTHCARE, 7, ("health", "medical", "healthcare", "hospital")),
    (IntentCategory.HOUSING, 7, ("house", "housing", "home", "shelter")),
    (IntentCategory.EMPLOYMENT, 7, ("job", "employment", "work", "skill", "unemployed")),
    (IntentCategory.FINANCE, 7, ("finance", "loan", "bank account", "savings", "business")),
    (IntentCategory.PENSION, 7, ("pension", "senior citizen", "old age", "retirement")),
    (IntentCategory.FOOD, 7, ("food", "ration card", "nutrition", "grain")),
    (IntentCategory.INSURANCE, 7, ("insurance", "accident cover", "life cover")),
    (IntentCategory.SCHEMES, 5, ("scheme", "benefit", "program", "yojana", "recommend")),
    (IntentCategory.HELP, 4, (
        "help", "support", "assistance", "guide", "how to", "what can you do",
    )),
)

# Named-scheme phrases and the catalog id they resolve to, in lookup order
SCHEME_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("pm kisan", "PM-KISAN"),
    ("pradhan mantri kisan", "PM-KISAN"),
    ("kisan samman", "PM-KISAN"),
    ("kisan credit card", "KCC"),
    ("fasal bima", "PM-FASAL-BIMA"),
    ("ayushman bharat", "PMJAY"),
    ("ayushman", "PMJAY"),
    ("pmjay", "PMJAY"),
    ("mudra", "MUDRA-YOJANA"),
    ("pmay", "PMAY-U"),
    ("awas yojana", "PMAY-U"),
    ("pradhan mantri awas", "PMAY-U"),
    ("mgnrega", "MGNREGA"),
    ("nrega", "MGNREGA"),
    ("ujjwala", "PMUY"),
    ("jan dhan", "PMJDY"),
    ("sukanya", "SUKANYA"),
    ("skill india", "PMKVY"),
    ("pmkvy", "PMKVY"),
    ("stand up india", "STAND-UP-INDIA"),
    ("startup india", "STARTUP-INDIA"),
    ("national scholarship", "NSP"),
)


class IntentClassifier:
    """Keyword and priority based classifier for chat utterances"""
    
    @staticmethod
    def normalize(utterance: str) -> str:
        """Lower-case, trim and collapse whitespace; hyphens count as spaces"""
        text = (utterance or "").lower().replace("-", " ").replace("_", " ")
        return " ".join(text.split())
    
    @staticmethod
    def _matches(text: str, keywords: Tuple[str, ...]) -> List[str]:
        return [keyword for keyword in keywords if keyword in text]
    
    @staticmethod
    def resolve_scheme_alias(text: str) -> Optional[Tuple[str, str]]:
        """Return (alias, scheme_id) for the first alias found in normalized text"""
        for alias, scheme_id in SCHEME_ALIASES:
            if alias in text:
                return alias, scheme_id
        return None
    
    @staticmethod
    def topic_categories(utterance: str) -> List[IntentCategory]:
        """Scheme-category topics mentioned anywhere in the utterance"""
        text = IntentClassifier.normalize(utterance)
        return [
            category for category, _, keywords in INTENT_RULES
            if category in TOPIC_CATEGORIES and IntentClassifier._matches(text, keywords)
        ]
    
    @staticmethod
    def classify(utterance: str) -> IntentClassification:
        """
        Classify an utterance
        
        Order: irrelevant keywords, named-scheme aliases, then the highest
        priority matching rule; anything else is unknown.
        """
        text = IntentClassifier.normalize(utterance)
        
        irrelevant = IntentClassifier._matches(text, IRRELEVANT_KEYWORDS)
        if irrelevant:
            return IntentClassification(
                category=IntentCategory.IRRELEVANT,
                priority=IRRELEVANT_PRIORITY,
                matched_keywords=irrelevant
            )
        
        alias_match = IntentClassifier.resolve_scheme_alias(text)
        if alias_match:
            alias, scheme_id = alias_match
            return IntentClassification(
                category=IntentCategory.SPECIFIC_SCHEME,
                priority=SPECIFIC_SCHEME_PRIORITY,
                scheme_id=scheme_id,
                matched_keywords=[alias]
            )
        
        best: Optional[IntentClassification] = None
        for category, priority, keywords in INTENT_RULES:
            matched = IntentClassifier._matches(text, keywords)
            if not matched:
                continue
            if best is None or priority > best.priority:
                best = IntentClassification(category=category, priority=priority, matched_keywords=matched)
        
        if best is not None:
            return best
        
        logger.debug(f"No intent matched for utterance: {extract_text_snippet(text, 80)!r}")
        return IntentClassification(category=IntentCategory.UNKNOWN, priority=UNKNOWN_PRIORITY)
