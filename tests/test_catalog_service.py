import json

import pytest

from schemeseeker.config import DEFAULT_CATALOG_PATH
from schemeseeker.models import LocalizedText
from schemeseeker.services.catalog_service import CatalogError, CatalogService


def write_catalog(path, scheme_ids, version=1):
    payload = {
        "version": version,
        "schemes": [
            {
                "id": scheme_id,
                "name": {"en": f"{scheme_id} scheme"},
                "description": "Plain string descriptions are treated as English",
                "category": "finance",
                "benefits": {"en": "Support"},
                "eligibility": {"age_range": [18, 60]},
            }
            for scheme_id in scheme_ids
        ],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_bundled_catalog(catalog):
    ids = [scheme.id for scheme in catalog.schemes]

    assert len(ids) == 37
    assert len(set(ids)) == len(ids)
    assert ids[0] == "PM-KISAN"
    assert catalog.is_loaded


def test_get(catalog):
    scheme = catalog.get("PM-KISAN")

    assert scheme.name.resolve("en") == "Pradhan Mantri Kisan Samman Nidhi"
    assert scheme.eligibility.income_ceiling == 200000
    assert catalog.get("NOPE") is None


def test_categories_in_first_seen_order(catalog):
    categories = catalog.categories()

    assert categories[0] == {"name": "agriculture", "count": 5}
    assert sum(entry["count"] for entry in categories) == 37
    assert len({entry["name"] for entry in categories}) == len(categories)


def test_filter_by_query(catalog):
    results = catalog.filter_schemes(query="KISAN")

    assert "PM-KISAN" in [scheme.id for scheme in results]
    assert "KCC" in [scheme.id for scheme in results]


def test_filter_by_query_in_hindi(catalog):
    results = catalog.filter_schemes(query="किसान", language="hi")

    assert "PM-KISAN" in [scheme.id for scheme in results]
    for scheme in results:
        text = scheme.name.resolve("hi") + scheme.description.resolve("hi")
        assert "किसान" in text


def test_filter_by_category_difficulty_and_rating(catalog):
    assert all(s.category == "housing" for s in catalog.filter_schemes(category="housing"))
    assert all(s.difficulty == "Easy" for s in catalog.filter_schemes(difficulty="Easy"))

    rated = catalog.filter_schemes(min_rating=4.5)
    assert rated
    assert all(s.rating >= 4.5 for s in rated)


def test_filter_without_arguments_returns_everything(catalog):
    assert catalog.filter_schemes() == list(catalog.schemes)


def test_invalid_file_keeps_previous_catalog(catalog, tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text('{"version": 1, "schemes": [{"id": "X"}]}', encoding="utf-8")

    with pytest.raises(CatalogError):
        catalog.load(str(broken))

    assert len(catalog.schemes) == 37


def test_missing_file_raises(catalog, tmp_path):
    with pytest.raises(CatalogError):
        catalog.load(str(tmp_path / "missing.json"))

    assert catalog.get("PM-KISAN") is not None


def test_duplicate_ids_are_rejected(tmp_path):
    service = CatalogService()

    with pytest.raises(CatalogError, match="DUP"):
        service.load(write_catalog(tmp_path / "dup.json", ["DUP", "OK", "DUP"]))

    assert not service.is_loaded


def test_reload_picks_up_changes(tmp_path):
    path = tmp_path / "catalog.json"
    service = CatalogService(write_catalog(path, ["A"]))

    assert [scheme.id for scheme in service.schemes] == ["A"]

    write_catalog(path, ["A", "B"], version=2)
    old_snapshot = service.snapshot
    service.reload()

    assert [scheme.id for scheme in service.schemes] == ["A", "B"]
    assert service.snapshot.version == 2
    assert [scheme.id for scheme in old_snapshot.schemes] == ["A"]


def test_lazy_load_on_first_access(tmp_path):
    service = CatalogService(write_catalog(tmp_path / "lazy.json", ["LAZY"]))

    assert not service.is_loaded
    assert service.health_check() == {"loaded": False, "total_schemes": 0}

    assert service.get("LAZY") is not None
    assert service.is_loaded
    assert service.health_check()["total_schemes"] == 1


def test_load_schemes_in_memory(scheme_factory):
    service = CatalogService()
    service.load_schemes([scheme_factory("ONE"), scheme_factory("TWO", "education")])

    assert service.categories() == [
        {"name": "agriculture", "count": 1},
        {"name": "education", "count": 1},
    ]
    assert service.snapshot.source == "memory"


def test_default_catalog_path_exists():
    assert DEFAULT_CATALOG_PATH.is_file()


def test_localized_text_fallback():
    text = LocalizedText({"en": "Farmer support", "hi": "किसान सहायता", "te": ""})

    assert text.resolve("hi") == "किसान सहायता"
    assert text.resolve("te") == "Farmer support"
    assert text.resolve("fr") == "Farmer support"
    assert LocalizedText({"hi": "केवल हिंदी"}).resolve("en") == "केवल हिंदी"
    assert LocalizedText({}).resolve("en") == ""
    assert LocalizedText.model_validate("Plain").resolve("hi") == "Plain"


def test_localized_scheme_detail(catalog):
    detail = catalog.get("PM-KISAN").localized("te")

    assert detail.name == "ప్రధాన మంత్రి కిసాన్ సమ్మాన్ నిధి"
    assert detail.documents_required[0] == "ఆధార్ కార్డు"
    assert detail.deadline.isoformat() == "2024-12-31"
