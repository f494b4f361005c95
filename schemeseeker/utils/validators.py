"""
Validation helpers for request parameters
"""
from typing import List, Optional

from ..config import settings


VALID_DIFFICULTIES = ['Easy', 'Medium', 'Hard']


def validate_language_code(language: Optional[str], supported: List[str] = None) -> bool:
    """
    Validate a language code
    
    Args:
        language: Language code to validate (None means "use the default")
        supported: Supported codes (defaults to settings)
    
    Returns:
        True if the code is supported or not given, False otherwise
    """
    if language is None:
        return True
    
    if supported is None:
        supported = settings.get_supported_languages_list()
    
    return language.lower() in supported


def validate_scheme_filters(
    difficulty: Optional[str] = None,
    min_rating: float = 0,
    language: Optional[str] = None
) -> List[str]:
    """
    Validate scheme browser filters and return list of validation errors
    
    Args:
        difficulty: Difficulty filter
        min_rating: Minimum rating filter
        language: Language used for search and display
    
    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    
    if difficulty is not None and difficulty not in VALID_DIFFICULTIES:
        errors.append(f"Difficulty must be one of: {', '.join(VALID_DIFFICULTIES)}")
    
    if min_rating < 0 or min_rating > 5:
        errors.append("Minimum rating must be between 0 and 5")
    
    if not validate_language_code(language):
        errors.append(
            f"Language must be one of: {', '.join(settings.get_supported_languages_list())}"
        )
    
    return errors


def validate_scheme_ids(scheme_ids: Optional[List[str]], max_ids: int = 50) -> List[str]:
    """
    Validate a list of requested scheme ids
    
    Args:
        scheme_ids: Requested ids (None means "all schemes")
        max_ids: Maximum number of ids accepted in one request
    
    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    
    if scheme_ids is None:
        return errors
    
    if not scheme_ids:
        errors.append("scheme_ids must not be empty when provided")
    
    if len(scheme_ids) > max_ids:
        errors.append(f"Maximum {max_ids} schemes can be checked at once")
    
    if any(not scheme_id or not scheme_id.strip() for scheme_id in scheme_ids):
        errors.append("scheme_ids must not contain blank values")
    
    return errors
