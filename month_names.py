"""Month and weekday name tables for Arabic, Russian and English."""

from __future__ import annotations

DEFAULT_LANG = "ar"

# --- Hijri months ------------------------------------------------------------

HIJRI_MONTHS: dict[str, list[str]] = {
    "ar": [
        "المحرم", "صفر", "ربيع الأول", "ربيع الآخر", "جمادى الأولى", "جمادى الآخرة",
        "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة",
    ],
    "ru": [
        "Мухаррам", "Сафар", "Раби-уль-авваль", "Раби-уль-ахир", "Джумад-уль-ула",
        "Джумад-уль-ахир", "Раджаб", "Шаъбан", "Рамадан", "Шавваль", "Зуль-каъда",
        "Зуль-хиджа",
    ],
    "en": [
        "Muharram", "Safar", "Rabi al-Awwal", "Rabi al-Thani", "Jumada al-Ula",
        "Jumada al-Akhirah", "Rajab", "Shaban", "Ramadan", "Shawwal",
        "Dhu al-Qadah", "Dhu al-Hijjah",
    ],
}

# --- Weekdays (Monday first, same order as date.weekday()) -------------------

WEEKDAYS: dict[str, list[str]] = {
    "ar": ["الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد"],
    "ru": ["Понедельник", "Вторник", "Среда", "Четверг", "Пятница", "Суббота", "Воскресенье"],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}

# --- Gregorian months (Russian in genitive, as used after a day number) ------

GREGORIAN_MONTHS: dict[str, list[str]] = {
    "ar": [
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ],
    "ru": [
        "января", "февраля", "марта", "апреля", "мая", "июня",
        "июля", "августа", "сентября", "октября", "ноября", "декабря",
    ],
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}

# Language list for UI grouping
LANGUAGES: list[tuple[str, str]] = [
    ("ar", "العربية"),
    ("ru", "Русский"),
    ("en", "English"),
]


def lookup(table: dict[str, list[str]], lang: str, index: int) -> str:
    """Return ``table[lang][index]``, falling back to the default language.

    If the default table has no entry either, the 1-based number is returned
    as text so callers never end up with a blank field.
    """
    for tag in (lang, DEFAULT_LANG):
        names = table.get(tag)
        if names and 0 <= index < len(names):
            return names[index]
    return str(index + 1)


def hijri_month_name(month: int, lang: str = DEFAULT_LANG) -> str:
    """Return the name of Hijri month 1–12."""
    return lookup(HIJRI_MONTHS, lang, month - 1)


def gregorian_month_name(month: int, lang: str = DEFAULT_LANG) -> str:
    """Return the name of Gregorian month 1–12."""
    return lookup(GREGORIAN_MONTHS, lang, month - 1)


def weekday_name(weekday: int, lang: str = DEFAULT_LANG) -> str:
    """Return the weekday name for ``date.weekday()`` (0 = Monday)."""
    return lookup(WEEKDAYS, lang, weekday)


def supported_languages() -> list[str]:
    return [tag for tag, _name in LANGUAGES]
