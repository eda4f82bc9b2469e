from month_names import (
    DEFAULT_LANG,
    GREGORIAN_MONTHS,
    HIJRI_MONTHS,
    LANGUAGES,
    WEEKDAYS,
    gregorian_month_name,
    hijri_month_name,
    lookup,
    supported_languages,
    weekday_name,
)


def test_every_language_has_complete_tables():
    for tag, _name in LANGUAGES:
        assert len(HIJRI_MONTHS[tag]) == 12
        assert len(GREGORIAN_MONTHS[tag]) == 12
        assert len(WEEKDAYS[tag]) == 7
        assert all(HIJRI_MONTHS[tag])


def test_default_language_is_arabic():
    assert DEFAULT_LANG == "ar"
    assert supported_languages() == ["ar", "ru", "en"]


def test_hijri_month_name():
    assert hijri_month_name(1) == "المحرم"
    assert hijri_month_name(9, "ru") == "Рамадан"
    assert hijri_month_name(12, "en") == "Dhu al-Hijjah"


def test_unknown_language_falls_back():
    assert hijri_month_name(9, "xx") == hijri_month_name(9, DEFAULT_LANG)
    assert weekday_name(4, "de") == "الجمعة"


def test_weekday_name_monday_first():
    assert weekday_name(0, "en") == "Monday"
    assert weekday_name(6, "ru") == "Воскресенье"


def test_gregorian_month_name():
    assert gregorian_month_name(1, "ru") == "января"
    assert gregorian_month_name(12, "en") == "December"


def test_lookup_out_of_range_returns_number():
    assert lookup(HIJRI_MONTHS, "en", 12) == "13"
    assert lookup(HIJRI_MONTHS, "en", -1) == "0"
    assert lookup({}, "en", 0) == "1"
