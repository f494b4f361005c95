"""
Catalog service for loading and querying the static scheme catalog
"""
import logging
import threading
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from ..config import settings
from ..models.scheme import Scheme, SchemeCatalogFile

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a scheme catalog cannot be loaded"""


class CatalogSnapshot:
    """Immutable view of one loaded catalog"""
    
    __slots__ = ("schemes", "index", "version", "source", "loaded_at")
    
    def __init__(self, schemes: Tuple[Scheme, ...], version: int, source: str):
        self.schemes = schemes
        self.index = {scheme.id: scheme for scheme in schemes}
        self.version = version
        self.source = source
        self.loaded_at = datetime.now(timezone.utc)


class CatalogService:
    """Service for the read-only scheme catalog"""
    
    def __init__(self, path: Optional[str] = None):
        self._path = path
        self._lock = threading.Lock()
        self._snapshot: Optional[CatalogSnapshot] = None
    
    @staticmethod
    def _build_snapshot(schemes: Iterable[Scheme], version: int, source: str) -> CatalogSnapshot:
        schemes = tuple(schemes)
        counts = Counter(scheme.id for scheme in schemes)
        duplicates = sorted(scheme_id for scheme_id, count in counts.items() if count > 1)
        if duplicates:
            raise CatalogError(f"Duplicate scheme ids in catalog {source}: {', '.join(duplicates)}")
        return CatalogSnapshot(schemes, version, source)
    
    @staticmethod
    def read_catalog(path: str) -> CatalogSnapshot:
        """Read and validate a catalog file without activating it"""
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e
        
        try:
            catalog = SchemeCatalogFile.model_validate_json(raw)
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog {path}: {e.error_count()} validation error(s)\n{e}") from e
        
        return CatalogService._build_snapshot(catalog.schemes, catalog.version, str(path))
    
    def _activate(self, snapshot: CatalogSnapshot) -> CatalogSnapshot:
        # Readers hold their own reference, so the swap is a single assignment
        with self._lock:
            self._snapshot = snapshot
        logger.info(
            f"Scheme catalog loaded: {len(snapshot.schemes)} schemes "
            f"(version {snapshot.version}) from {snapshot.source}"
        )
        return snapshot
    
    def load(self, path: Optional[str] = None) -> CatalogSnapshot:
        """
        Load a catalog file and make it the active catalog
        
        On failure the previously active catalog stays in place.
        """
        path = path or self._path or settings.catalog_path
        try:
            snapshot = self.read_catalog(path)
        except CatalogError as e:
            logger.error(f"Failed to load scheme catalog: {e}")
            raise
        self._path = path
        return self._activate(snapshot)
    
    def reload(self) -> CatalogSnapshot:
        """Re-read the configured catalog file and swap it in atomically"""
        return self.load(self._path)
    
    def load_schemes(self, schemes: Iterable[Scheme], version: int = 1, source: str = "memory") -> CatalogSnapshot:
        """Activate an in-memory catalog"""
        return self._activate(self._build_snapshot(schemes, version, source))
    
    @property
    def snapshot(self) -> CatalogSnapshot:
        """Active catalog snapshot, loading the configured file on first use"""
        snapshot = self._snapshot
        if snapshot is None:
            snapshot = self.load()
        return snapshot
    
    @property
    def schemes(self) -> Tuple[Scheme, ...]:
        """All schemes in catalog order"""
        return self.snapshot.schemes
    
    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None
    
    def get(self, scheme_id: str) -> Optional[Scheme]:
        """Get a scheme by id, or None when it is not in the catalog"""
        return self.snapshot.index.get(scheme_id)
    
    def categories(self) -> List[Dict[str, Any]]:
        """Get scheme categories with counts, in first-seen catalog order"""
        counts: Dict[str, int] = {}
        for scheme in self.schemes:
            counts[scheme.category] = counts.get(scheme.category, 0) + 1
        return [{"name": name, "count": count} for name, count in counts.items()]
    
    def filter_schemes(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        difficulty: Optional[str] = None,
        min_rating: float = 0,
        language: Optional[str] = None
    ) -> List[Scheme]:
        """
        Search and filter schemes for the scheme browser
        
        Args:
            query: Case-insensitive text matched against name, description and category
            category: Exact category tag
            difficulty: Easy, Medium or Hard
            min_rating: Minimum star rating (ignored when 0)
            language: Language used to resolve name and description
        
        Returns:
            Matching schemes in catalog order
        """
        term = (query or "").strip().lower()
        default_language = settings.default_language
        matching = []
        
        for scheme in self.schemes:
            if term:
                name = scheme.name.resolve(language, default_language).lower()
                description = scheme.description.resolve(language, default_language).lower()
                if term not in name and term not in description and term not in scheme.category.lower():
                    continue
            if category and scheme.category != category:
                continue
            if difficulty and scheme.difficulty != difficulty:
                continue
            if min_rating > 0 and scheme.rating < min_rating:
                continue
            matching.append(scheme)
        
        return matching
    
    def health_check(self) -> Dict[str, Any]:
        """Describe the active catalog"""
        snapshot = self._snapshot
        if snapshot is None:
            return {"loaded": False, "total_schemes": 0}
        return {
            "loaded": True,
            "total_schemes": len(snapshot.schemes),
            "version": snapshot.version,
            "loaded_at": snapshot.loaded_at.isoformat()
        }


# Global catalog service instance
catalog_service = CatalogService()
