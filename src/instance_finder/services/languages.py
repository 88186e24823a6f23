"""Language discovery and display names."""

from __future__ import annotations

from instance_finder.domain.entities import ListResponse

_NAMES_EN: dict[str, str] = {
    "ar": "Arabic", "bg": "Bulgarian", "bn": "Bengali", "cs": "Czech",
    "da": "Danish", "de": "German", "el": "Greek", "en": "English",
    "es": "Spanish", "et": "Estonian", "fa": "Persian", "fi": "Finnish",
    "fr": "French", "he": "Hebrew", "hi": "Hindi", "hr": "Croatian",
    "hu": "Hungarian", "id": "Indonesian", "it": "Italian", "ja": "Japanese",
    "ko": "Korean", "lt": "Lithuanian", "lv": "Latvian", "ms": "Malay",
    "nb": "Norwegian Bokmål", "nl": "Dutch", "pl": "Polish", "pt": "Portuguese",
    "pt-br": "Portuguese (Brazil)", "ro": "Romanian", "ru": "Russian",
    "sk": "Slovak", "sl": "Slovenian", "sr": "Serbian", "sv": "Swedish",
    "th": "Thai", "tr": "Turkish", "uk": "Ukrainian", "ur": "Urdu",
    "vi": "Vietnamese", "zh": "Chinese", "zh-cn": "Chinese (Simplified)",
    "zh-tw": "Chinese (Traditional)",
}

_NAMES_FR: dict[str, str] = {
    "ar": "Arabe", "bg": "Bulgare", "bn": "Bengali", "cs": "Tchèque",
    "da": "Danois", "de": "Allemand", "el": "Grec", "en": "Anglais",
    "es": "Espagnol", "et": "Estonien", "fa": "Persan", "fi": "Finnois",
    "fr": "Français", "he": "Hébreu", "hi": "Hindi", "hr": "Croate",
    "hu": "Hongrois", "id": "Indonésien", "it": "Italien", "ja": "Japonais",
    "ko": "Coréen", "lt": "Lituanien", "lv": "Letton", "ms": "Malais",
    "nb": "Norvégien Bokmål", "nl": "Néerlandais", "pl": "Polonais",
    "pt": "Portugais", "pt-br": "Portugais (Brésil)", "ro": "Roumain",
    "ru": "Russe", "sk": "Slovaque", "sl": "Slovène", "sr": "Serbe",
    "sv": "Suédois", "th": "Thaï", "tr": "Turc", "uk": "Ukrainien",
    "ur": "Ourdou", "vi": "Vietnamien", "zh": "Chinois",
    "zh-cn": "Chinois (simplifié)", "zh-tw": "Chinois (traditionnel)",
}


def collect_languages(response: ListResponse) -> list[str]:
    """Return the distinct, lowercased, trimmed languages of *response*, sorted."""
    seen: set[str] = set()
    for entry in response.instances:
        if entry.info is None or not entry.info.languages:
            continue
        for lang in entry.info.languages:
            normalized = lang.strip().lower()
            if normalized:
                seen.add(normalized)
    return sorted(seen)


def language_display_name(code: str, ui_lang: str = "en") -> str:
    """Human-readable name of a language *code* in ``"en"`` or ``"fr"``.

    French falls back to English; unknown codes are shown upper-cased.
    """
    key = code.lower()
    name = (_NAMES_FR.get(key) if ui_lang == "fr" else None) or _NAMES_EN.get(key)
    return name or code.upper()
