"""
API routes for the scheme browser
"""
import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from ..config import settings
from ..models.scheme import SchemeDetail
from ..services.catalog_service import CatalogError, catalog_service
from ..utils.validators import validate_language_code, validate_scheme_filters

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/schemes", tags=["schemes"])


@router.get("/")
async def get_schemes(
    query: Optional[str] = Query(None, description="Search name, description or category"),
    category: Optional[str] = Query(None, description="Filter by category"),
    difficulty: Optional[str] = Query(None, description="Filter by difficulty (Easy, Medium, Hard)"),
    min_rating: float = Query(0, description="Minimum rating"),
    language: Optional[str] = Query(None, description="Language code for localized text"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of schemes to return"),
    offset: int = Query(0, ge=0, description="Number of schemes to skip")
):
    """
    Search and filter schemes
    """
    validation_errors = validate_scheme_filters(difficulty, min_rating, language)
    if validation_errors:
        logger.warning(f"Rejected scheme filters: {'; '.join(validation_errors)}")
        raise HTTPException(status_code=400, detail="; ".join(validation_errors))
    
    try:
        schemes = catalog_service.filter_schemes(
            query=query,
            category=category,
            difficulty=difficulty,
            min_rating=min_rating,
            language=language
        )
        
        # Apply pagination
        page = schemes[offset:offset + limit]
        
        return {
            "total_results": len(schemes),
            "schemes": [scheme.localized(language, settings.default_language) for scheme in page]
        }
        
    except Exception as e:
        logger.error(f"Error fetching schemes: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve schemes: {str(e)}")


@router.get("/categories/")
async def get_scheme_categories():
    """
    Get available scheme categories
    """
    try:
        categories = catalog_service.categories()
        return {
            "categories": categories,
            "total_schemes": len(catalog_service.schemes)
        }
    except Exception as e:
        logger.error(f"Error fetching categories: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve categories: {str(e)}")


@router.post("/reload")
async def reload_catalog():
    """
    Reload the scheme catalog from disk
    """
    try:
        snapshot = catalog_service.reload()
        return {
            "message": "Scheme catalog reloaded",
            "total_schemes": len(snapshot.schemes),
            "version": snapshot.version
        }
    except CatalogError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/{scheme_id}", response_model=SchemeDetail)
async def get_scheme(
    scheme_id: str,
    language: Optional[str] = Query(None, description="Language code for localized text")
):
    """
    Get a specific scheme by ID
    """
    if not validate_language_code(language):
        raise HTTPException(status_code=400, detail=f"Unsupported language: {language}")
    
    scheme = catalog_service.get(scheme_id)
    if not scheme:
        raise HTTPException(status_code=404, detail=f"Scheme not found: {scheme_id}")
    
    return scheme.localized(language, settings.default_language)
