import logging
from typing import Any, Callable, Dict, Tuple

from .models import EligibilityCriterion, EvaluationResult, Scheme, UserProfile
from .utils.formatting import format_inr, percentage

logger = logging.getLogger(__name__)


def _in_range(value: Any, bounds: Tuple[float, float]) -> bool:
    min_val, max_val = bounds
    return min_val <= value <= max_val


def _at_most(value: Any, ceiling: float) -> bool:
    return value <= ceiling


def _is_member(value: Any, allowed: Tuple[str, ...]) -> bool:
    return value in allowed


def _matches_flag(value: Any, required: bool) -> bool:
    return isinstance(value, bool) and value == required


class RulesEvaluator:
    """Evaluates applicant profiles against scheme eligibility specifications"""
    
    CHECKS: Dict[str, Callable[[Any, Any], bool]] = {
        "range": _in_range,
        "ceiling": _at_most,
        "membership": _is_member,
        "boolean": _matches_flag,
    }
    
    @staticmethod
    def _describe_failure(criterion: EligibilityCriterion, profile_value: Any) -> Tuple[str, str]:
        """
        Build the missing-criterion text and the improvement tip for an unmet criterion
        Returns: (missing_criterion, improvement_tip)
        """
        attribute = criterion.attribute
        expected = criterion.value
        
        if attribute == "age":
            min_age, max_age = expected
            return (
                f"Age must be between {min_age} and {max_age} years",
                f"Current age: {profile_value}. You need to be between {min_age}-{max_age} years old."
            )
        elif attribute == "income":
            return (
                f"Income must not exceed {format_inr(expected)}",
                f"Your income ({format_inr(profile_value)}) exceeds the limit of {format_inr(expected)}. "
                f"Consider schemes with higher income limits."
            )
        elif attribute == "occupation":
            return (
                f"Occupation must be one of: {', '.join(expected)}",
                f"Your occupation ({profile_value}) doesn't match. Consider similar schemes for {'/'.join(expected)}."
            )
        elif attribute == "location":
            return (
                f"Location must be: {' or '.join(expected)}",
                f"You are in a {profile_value} area; this scheme is only available in {'/'.join(expected)} areas."
            )
        elif attribute == "category":
            return (
                f"Category must be: {' or '.join(expected)}",
                f"Your category ({profile_value}) is not covered; this scheme is for {'/'.join(expected)} categories only."
            )
        elif attribute == "has_disability":
            return (
                f"Disability status requirement: {'Required' if expected else 'Not required'}",
                f"This scheme {'requires' if expected else 'does not require'} disability status."
            )
        elif attribute == "land_ownership":
            return (
                f"Land ownership requirement: {'Required' if expected else 'Not required'}",
                f"You need to {'own' if expected else 'not own'} land for this scheme."
            )
        elif attribute == "education_level":
            return (
                f"Education level must be: {' or '.join(expected)}",
                f"Your education level ({profile_value}) doesn't match. Required education: {'/'.join(expected)}."
            )
        
        return (
            f"{attribute} requirement not met",
            f"Current {attribute}: {profile_value}. Required: {expected}."
        )
    
    @staticmethod
    def evaluate_criterion(profile: UserProfile, criterion: EligibilityCriterion) -> bool:
        """Test one profile attribute against one criterion"""
        check = RulesEvaluator.CHECKS.get(criterion.kind)
        if check is None:
            logger.warning(f"Unsupported criterion kind: {criterion.kind}")
            return False
        
        profile_value = getattr(profile, criterion.attribute, None)
        if profile_value is None:
            return False
        
        try:
            return check(profile_value, criterion.value)
        except (TypeError, ValueError) as e:
            logger.warning(f"Cannot compare {criterion.attribute}={profile_value!r} with {criterion.value!r}: {e}")
            return False
    
    @staticmethod
    def evaluate(profile: UserProfile, scheme: Scheme) -> EvaluationResult:
        """
        Evaluate a profile against a scheme's eligibility specification
        
        Criteria are checked in a fixed order, so missing criteria and tips are
        reproducible for identical input. A scheme with no criteria scores 0
        and is never eligible.
        """
        missing_criteria = []
        improvement_tips = []
        satisfied = 0
        applicable = 0
        
        for criterion in scheme.eligibility.criteria():
            applicable += 1
            if RulesEvaluator.evaluate_criterion(profile, criterion):
                satisfied += 1
                continue
            
            profile_value = getattr(profile, criterion.attribute, None)
            missing, tip = RulesEvaluator._describe_failure(criterion, profile_value)
            missing_criteria.append(missing)
            improvement_tips.append(tip)
        
        if applicable == 0:
            probability = 0
            eligible = False
        else:
            probability = percentage(satisfied, applicable)
            eligible = satisfied == applicable
        
        return EvaluationResult(
            scheme=scheme,
            eligible=eligible,
            probability=probability,
            missing_criteria=missing_criteria,
            improvement_tips=improvement_tips,
            satisfied_criteria=satisfied,
            applicable_criteria=applicable
        )
