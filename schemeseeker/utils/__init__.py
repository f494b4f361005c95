"""
Utility functions for SchemeSeeker
"""

from .formatting import (
    round_half_up,
    percentage,
    format_inr,
    extract_text_snippet
)

from .validators import (
    validate_language_code,
    validate_scheme_filters,
    validate_scheme_ids
)

__all__ = [
    "round_half_up",
    "percentage",
    "format_inr",
    "extract_text_snippet",
    "validate_language_code",
    "validate_scheme_filters",
    "validate_scheme_ids"
]
