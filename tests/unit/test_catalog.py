from screener.keywords import catalog


def test_predefined_skills_are_unique() -> None:
    assert len(catalog.PREDEFINED_SKILLS) == 99
    assert len(set(catalog.PREDEFINED_SKILLS)) == len(catalog.PREDEFINED_SKILLS)


def test_all_certifications_follow_category_order() -> None:
    certs = catalog.all_certifications()
    assert certs[:5] == catalog.CERTIFICATION_OPTIONS["HR"]
    assert certs[-1] == "Scrum Master"
    assert len(certs) == 25


def test_education_levels() -> None:
    assert catalog.EDUCATION_OPTIONS == ("Bachelor's", "Master's", "Above Master's")
