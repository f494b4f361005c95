import pytest

from schemeseeker.models import IntentCategory, IntentClassification


UTTERANCES = [
    "hello",
    "help",
    "recommend some schemes",
    "am I eligible?",
    "how to apply",
    "track my application status",
    "which documents do I need",
    "tell me about PM Kisan",
    "what's the weather like",
    "xyz",
    "agriculture schemes",
    "education",
    "healthcare",
    "housing",
    "jobs",
    "loan",
    "pension",
    "ration card",
    "insurance",
]


@pytest.mark.parametrize("utterance", UTTERANCES)
def test_every_response_is_well_formed(router, farmer_profile, utterance):
    for profile in (None, farmer_profile):
        response = router.handle(utterance, profile)

        assert response.text.strip()
        assert len(response.quick_replies) <= 6
        assert response.language == "en"


def test_greeting_mentions_catalog_size(router):
    response = router.handle("Hello!")

    assert response.category == IntentCategory.GREETING
    assert "37 government schemes" in response.text
    assert response.schemes == []


def test_irrelevant_declines(router):
    response = router.handle("who won the cricket match")

    assert response.category == IntentCategory.IRRELEVANT
    assert "only help with government welfare schemes" in response.text


def test_unknown_fallback(router):
    response = router.handle("xyz")

    assert response.category == IntentCategory.UNKNOWN
    assert "didn't quite understand" in response.text


def test_eligibility_without_profile(router):
    response = router.handle("Am I eligible?")

    assert response.category == IntentCategory.ELIGIBILITY
    assert "please complete your profile first" in response.text
    assert response.schemes == []


def test_eligibility_for_topic(router, farmer_profile):
    response = router.handle("Am I eligible for agriculture schemes?", farmer_profile)

    assert response.type == "eligibility"
    assert "eligible for 5 agriculture schemes" in response.text
    assert len(response.schemes) == 5
    assert all(scheme.category == "agriculture" for scheme in response.schemes)
    assert all(scheme.probability == 100 for scheme in response.schemes)


def test_eligibility_uses_recommender_category_filter(router, farmer_profile, monkeypatch):
    calls = []
    original_eligible = router.recommender.eligible

    def recording_eligible(profile, schemes, category=None):
        calls.append(category)
        return original_eligible(profile, schemes, category=category)

    monkeypatch.setattr(router.recommender, "eligible", recording_eligible)

    response = router.handle("Am I eligible for housing schemes?", farmer_profile)

    assert calls == ["housing"]
    assert response.text.startswith("You don't fully qualify for any housing schemes yet")
    assert {scheme.id for scheme in response.schemes} == {"PMAY-G", "PMAY-U"}


def test_eligibility_across_catalog(router, student_profile):
    response = router.handle("Do I qualify for anything?", student_profile)

    assert response.text.startswith("Great! Based on your profile, you're eligible for")
    assert 0 < len(response.schemes) <= 5
    assert all(scheme.probability == 100 for scheme in response.schemes)


def test_schemes_without_profile_lists_popular(router):
    response = router.handle("show me some schemes")

    assert response.category == IntentCategory.SCHEMES
    assert response.type == "scheme"
    assert [scheme.id for scheme in response.schemes] == [
        "PM-KISAN", "PM-FASAL-BIMA", "KCC", "NSP", "PMSS"
    ]
    assert all(scheme.probability is None for scheme in response.schemes)


def test_schemes_with_profile_are_ranked(router, farmer_profile):
    response = router.handle("recommend schemes for me", farmer_profile)
    probabilities = [scheme.probability for scheme in response.schemes]

    assert len(response.schemes) == 5
    assert probabilities == sorted(probabilities, reverse=True)


def test_category_response(router, farmer_profile):
    response = router.handle("housing", farmer_profile)

    assert response.category == IntentCategory.HOUSING
    assert {scheme.id for scheme in response.schemes} == {"PMAY-G", "PMAY-U"}
    assert "ranked by how well they match your profile" in response.text


def test_category_without_schemes(router, scheme_factory):
    router.catalog.load_schemes([scheme_factory("ONLY", "agriculture", age_range=(18, 60))])

    response = router.handle("pension plans")

    assert response.category == IntentCategory.PENSION
    assert "couldn't find any pension schemes" in response.text
    assert response.schemes == []


def test_specific_scheme_with_eligible_profile(router, farmer_profile):
    response = router.handle("Tell me about PM Kisan", farmer_profile)

    assert response.category == IntentCategory.SPECIFIC_SCHEME
    assert "Pradhan Mantri Kisan Samman Nidhi" in response.text
    assert "You meet all 4 criteria" in response.text
    assert response.schemes[0].id == "PM-KISAN"
    assert response.schemes[0].probability == 100


def test_specific_scheme_lists_missing_criteria(router, student_profile):
    response = router.handle("pm kisan", student_profile)

    assert "Your match: 50% (2 of 4 criteria met)." in response.text
    assert "• Occupation must be one of: Farmer" in response.text
    assert response.schemes[0].probability == 50


def test_specific_scheme_without_profile(router):
    response = router.handle("Ayushman Bharat")

    assert response.schemes[0].id == "PMJAY"
    assert "Complete your profile to check your eligibility" in response.text


def test_specific_scheme_in_hindi(router):
    response = router.handle("PM-KISAN", language="hi")

    assert response.language == "hi"
    assert response.schemes[0].name == "प्रधानमंत्री किसान सम्मान निधि"


def test_unsupported_language_falls_back_to_default(router):
    assert router.handle("hello", language="fr").language == "en"


def test_alias_to_missing_scheme_is_unknown(router, scheme_factory):
    router.catalog.load_schemes([scheme_factory("OTHER")])

    response = router.handle("tell me about PM Kisan")

    assert response.category == IntentCategory.UNKNOWN


def test_builder_failure_falls_back_to_unknown(router, farmer_profile, monkeypatch):
    def broken_rank(*args, **kwargs):
        raise RuntimeError("ranking failed")

    monkeypatch.setattr(router.recommender, "rank", broken_rank)

    response = router.handle("agriculture schemes", farmer_profile)

    assert response.category == IntentCategory.UNKNOWN
    assert response.text.strip()


def test_respond_uses_given_classification(router):
    classification = IntentClassification(category=IntentCategory.DOCUMENTS, priority=8)

    response = router.respond(classification, "anything")

    assert response.category == IntentCategory.DOCUMENTS
    assert "Document Checklist" in response.text
