"""Simple two-language (en/ar) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "fajr": {
        "en": "Fajr",
        "ar": "الفجر",
    },
    "sunrise": {
        "en": "Sunrise",
        "ar": "الشروق",
    },
    "dhuhr": {
        "en": "Dhuhr",
        "ar": "الظهر",
    },
    "asr": {
        "en": "Asr",
        "ar": "العصر",
    },
    "maghrib": {
        "en": "Maghrib",
        "ar": "المغرب",
    },
    "isha": {
        "en": "Isha",
        "ar": "العشاء",
    },
    "heading_times": {
        "en": "Prayer times for {date} ({place})",
        "ar": "مواقيت الصلاة ليوم {date} ({place})",
    },
    "mean_time_note": {
        "en": "Times are local mean time for this longitude, not clock time.",
        "ar": "الأوقات بالتوقيت الشمسي المتوسط لخط الطول، وليست بتوقيت الساعة.",
    },
    "next_prayer": {
        "en": "Next prayer: {name} at {time}",
        "ar": "الصلاة القادمة: {name} الساعة {time}",
    },
    "next_prayer_tomorrow": {
        "en": "Next prayer: {name} at {time} (tomorrow)",
        "ar": "الصلاة القادمة: {name} الساعة {time} (غداً)",
    },
    "reminders": {
        "en": "Reminders ({minutes} min before)",
        "ar": "التذكيرات (قبل {minutes} دقيقة)",
    },
    "qibla": {
        "en": "Qibla: {bearing}° from true north",
        "ar": "القبلة: {bearing}° من الشمال الحقيقي",
    },
    "distance": {
        "en": "Distance to Kaaba: {km} km",
        "ar": "المسافة إلى الكعبة: {km} كم",
    },
    "unknown_place": {
        "en": "your location",
        "ar": "موقعك",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
