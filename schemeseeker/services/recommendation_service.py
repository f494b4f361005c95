"""
Recommendation service for ranking schemes and summarizing eligibility
"""
import logging
from typing import Dict, List, Optional, Sequence

from ..config import settings
from ..models.scheme import Scheme
from ..models.user import EvaluationResult, RecommendationSummary, UserProfile
from ..rules_evaluator import RulesEvaluator
from ..utils.formatting import percentage, round_half_up

logger = logging.getLogger(__name__)

PARTIAL_MATCH_THRESHOLD = 50


class RecommendationService:
    """Service for applying the evaluator across a catalog"""
    
    def __init__(self, evaluator: type = RulesEvaluator):
        self.evaluator = evaluator
    
    def evaluate_all(self, profile: UserProfile, schemes: Sequence[Scheme]) -> List[EvaluationResult]:
        """Evaluate every scheme, keeping catalog order"""
        return [self.evaluator.evaluate(profile, scheme) for scheme in schemes]
    
    @staticmethod
    def rank_results(results: Sequence[EvaluationResult]) -> List[EvaluationResult]:
        """Sort results by probability, highest first; ties keep their input order"""
        return sorted(results, key=lambda result: result.probability, reverse=True)
    
    def rank(self, profile: UserProfile, schemes: Sequence[Scheme]) -> List[EvaluationResult]:
        """
        Rank every scheme for a profile
        
        Args:
            profile: Applicant profile
            schemes: Catalog in catalog order
        
        Returns:
            All evaluation results sorted by probability (stable on ties)
        """
        return self.rank_results(self.evaluate_all(profile, schemes))
    
    def recommend(
        self,
        profile: UserProfile,
        schemes: Sequence[Scheme],
        limit: Optional[int] = None
    ) -> List[EvaluationResult]:
        """Top-N window of the ranking"""
        if limit is None:
            limit = settings.recommendation_limit
        return self.rank(profile, schemes)[:max(limit, 0)]
    
    def eligible(
        self,
        profile: UserProfile,
        schemes: Sequence[Scheme],
        category: Optional[str] = None
    ) -> List[EvaluationResult]:
        """Fully eligible results in rank order, optionally for one category"""
        return [
            result for result in self.rank(profile, schemes)
            if result.eligible and (category is None or result.scheme.category == category)
        ]
    
    @staticmethod
    def summarize_results(results: Sequence[EvaluationResult]) -> RecommendationSummary:
        """
        Summarize evaluation results given in catalog order
        
        Category ties go to the category seen first, so the input order matters.
        """
        total_schemes = len(results)
        if total_schemes == 0:
            return RecommendationSummary()
        
        eligible_count = 0
        partial_count = 0
        category_scores: Dict[str, int] = {}
        
        for result in results:
            if result.eligible:
                eligible_count += 1
            elif result.probability > PARTIAL_MATCH_THRESHOLD:
                partial_count += 1
            
            category = result.scheme.category
            category_scores[category] = category_scores.get(category, 0) + result.probability
        
        top_category = None
        for category, score in category_scores.items():
            if top_category is None or score > category_scores[top_category]:
                top_category = category
        
        return RecommendationSummary(
            eligible_count=eligible_count,
            partial_count=partial_count,
            ineligible_count=total_schemes - eligible_count - partial_count,
            total_schemes=total_schemes,
            eligibility_rate=percentage(eligible_count, total_schemes),
            average_probability=round_half_up(sum(result.probability for result in results), total_schemes),
            top_category=top_category,
            category_scores=category_scores
        )
    
    def summarize(self, profile: UserProfile, schemes: Sequence[Scheme]) -> RecommendationSummary:
        """Eligibility summary for one profile over a catalog"""
        summary = self.summarize_results(self.evaluate_all(profile, schemes))
        logger.info(
            f"Eligibility summary: {summary.eligible_count}/{summary.total_schemes} eligible, "
            f"{summary.partial_count} partial"
        )
        return summary


# Global recommendation service instance
recommendation_service = RecommendationService()
