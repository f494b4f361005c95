"""
SchemeSeeker

Deterministic eligibility scoring, scheme recommendations and conversational
guidance for government welfare schemes.
"""

__version__ = "1.0.0"
__author__ = "SchemeSeeker Team"
__description__ = "Eligibility scoring and recommendation engine for government welfare schemes"
