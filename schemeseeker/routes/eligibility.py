"""
API routes for eligibility checking and recommendations
"""
import logging
import time
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query

from ..models.user import (
    UserProfile,
    EligibilityRequest,
    EligibilityResponse,
    EvaluationResult,
    RecommendationSummary
)
from ..rules_evaluator import RulesEvaluator
from ..services.catalog_service import catalog_service
from ..services.recommendation_service import recommendation_service
from ..utils.validators import validate_scheme_ids

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/eligibility", tags=["eligibility"])


@router.post("/check", response_model=EligibilityResponse)
async def check_eligibility(request: EligibilityRequest):
    """
    Check a profile against all schemes, or against the requested scheme ids
    """
    try:
        validation_errors = validate_scheme_ids(request.scheme_ids)
        if validation_errors:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid request: {'; '.join(validation_errors)}"
            )
        
        start_time = time.time()
        unknown_ids = []
        
        if request.scheme_ids:
            schemes = []
            for scheme_id in request.scheme_ids:
                scheme = catalog_service.get(scheme_id)
                if scheme:
                    schemes.append(scheme)
                else:
                    unknown_ids.append(scheme_id)
            if unknown_ids:
                logger.warning(f"Unknown scheme ids requested: {', '.join(unknown_ids)}")
        else:
            schemes = list(catalog_service.schemes)
        
        results = recommendation_service.evaluate_all(request.user_profile, schemes)
        summary = recommendation_service.summarize_results(results)
        processing_time = (time.time() - start_time) * 1000
        
        logger.info(f"Eligibility check completed: {summary.eligible_count}/{summary.total_schemes} schemes eligible")
        
        return EligibilityResponse(
            total_schemes_checked=summary.total_schemes,
            eligible_schemes=summary.eligible_count,
            partially_eligible=summary.partial_count,
            results=recommendation_service.rank_results(results),
            unknown_scheme_ids=unknown_ids,
            processing_time_ms=processing_time
        )
        
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error checking eligibility: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to check eligibility: {str(e)}")


@router.post("/scheme/{scheme_id}", response_model=EvaluationResult)
async def check_scheme_eligibility(scheme_id: str, user_profile: UserProfile):
    """
    Check a profile against one scheme
    """
    scheme = catalog_service.get(scheme_id)
    if not scheme:
        raise HTTPException(status_code=404, detail=f"Scheme not found: {scheme_id}")
    
    try:
        return RulesEvaluator.evaluate(user_profile, scheme)
    except Exception as e:
        logger.error(f"Error checking eligibility for scheme {scheme_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to check eligibility: {str(e)}")


@router.post("/recommendations", response_model=List[EvaluationResult])
async def get_recommendations(
    user_profile: UserProfile,
    limit: Optional[int] = Query(None, ge=1, le=100, description="Number of top matches to return")
):
    """
    Get the top matching schemes for a profile
    """
    try:
        return recommendation_service.recommend(user_profile, catalog_service.schemes, limit=limit)
    except Exception as e:
        logger.error(f"Error generating recommendations: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to generate recommendations: {str(e)}")


@router.post("/summary", response_model=RecommendationSummary)
async def get_eligibility_summary(user_profile: UserProfile):
    """
    Get eligibility statistics for a profile across the catalog
    """
    try:
        return recommendation_service.summarize(user_profile, catalog_service.schemes)
    except Exception as e:
        logger.error(f"Error generating eligibility summary: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to generate eligibility summary: {str(e)}")
