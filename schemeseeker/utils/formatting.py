"""
Formatting helpers shared by the evaluator, ranker and chat responses
"""
from typing import Union


def round_half_up(numerator: int, denominator: int) -> int:
    """Integer quotient rounded half up (2.5 -> 3), or 0 when denominator is 0"""
    if denominator <= 0:
        return 0
    return (2 * numerator + denominator) // (2 * denominator)


def percentage(numerator: int, denominator: int) -> int:
    """
    Integer percentage rounded half up (12.5 -> 13)

    Args:
        numerator: Part count
        denominator: Whole count

    Returns:
        Rounded percentage, or 0 when denominator is 0
    """
    return round_half_up(100 * numerator, denominator)


def format_inr(amount: Union[int, float]) -> str:
    """
    Format an amount in rupees with comma grouping
    
    Args:
        amount: Amount in INR
    
    Returns:
        Formatted amount, e.g. ₹200,000 or ₹1,500.50
    """
    if float(amount).is_integer():
        return f"₹{int(amount):,}"
    return f"₹{amount:,.2f}"


def extract_text_snippet(text: str, max_length: int = 200) -> str:
    """
    Extract a snippet of text for display purposes
    
    Args:
        text: Full text
        max_length: Maximum length of snippet
    
    Returns:
        Text snippet
    """
    if not text:
        return ""
    
    if len(text) <= max_length:
        return text
    
    # Try to break at word boundary
    snippet = text[:max_length]
    last_space = snippet.rfind(' ')
    
    if last_space > max_length * 0.8:
        snippet = snippet[:last_space]
    
    return snippet + "..."
