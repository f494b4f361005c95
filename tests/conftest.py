import pytest
from fastapi.testclient import TestClient

from schemeseeker.config import DEFAULT_CATALOG_PATH
from schemeseeker.models import EligibilitySpec, Scheme, UserProfile
from schemeseeker.services.catalog_service import CatalogService
from schemeseeker.services.chat_service import IntentRouter
from schemeseeker.services.recommendation_service import RecommendationService


@pytest.fixture
def farmer_profile():
    return UserProfile(
        age=30,
        income=150000,
        location="Rural",
        occupation="Farmer",
        category="General",
        has_disability=False,
        land_ownership=True,
        education_level="10th",
        family_size=4,
    )


@pytest.fixture
def student_profile():
    return UserProfile(
        age=20,
        income=90000,
        location="Urban",
        occupation="Student",
        category="SC",
        education_level="12th",
    )


@pytest.fixture
def scheme_factory():
    def make_scheme(scheme_id="TEST", category="agriculture", **eligibility):
        return Scheme(
            id=scheme_id,
            name={"en": f"{scheme_id} scheme", "hi": f"{scheme_id} योजना"},
            description={"en": f"Description of {scheme_id}"},
            category=category,
            benefits={"en": f"Benefits of {scheme_id}"},
            eligibility=EligibilitySpec(**eligibility),
        )

    return make_scheme


@pytest.fixture
def pm_kisan_like(scheme_factory):
    return scheme_factory(
        "PM-KISAN",
        age_range=(18, 75),
        income_ceiling=200000,
        occupations=["Farmer"],
        land_ownership=True,
    )


@pytest.fixture
def catalog():
    service = CatalogService()
    service.load(str(DEFAULT_CATALOG_PATH))
    return service


@pytest.fixture
def recommender():
    return RecommendationService()


@pytest.fixture
def router(catalog, recommender):
    return IntentRouter(catalog=catalog, recommender=recommender)


@pytest.fixture
def client():
    from schemeseeker.main import app

    with TestClient(app) as test_client:
        yield test_client
