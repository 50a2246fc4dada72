from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


AUDIO_FORMATS: frozenset[str] = frozenset({"MP3", "OGG", "AAC"})

# Voices per locale as published in the VoiceRSS API documentation.
# Names are only meaningful together with their locale; the same name may
# denote different speakers elsewhere.
VOICES: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "ar-eg": frozenset({"Oda"}),
        "ar-sa": frozenset({"Salim"}),
        "bg-bg": frozenset({"Dimo"}),
        "ca-es": frozenset({"Rut"}),
        "cs-cz": frozenset({"Josef"}),
        "da-dk": frozenset({"Freja"}),
        "de-at": frozenset({"Lukas"}),
        "de-de": frozenset({"Hanna", "Lina", "Jonas"}),
        "de-ch": frozenset({"Tim"}),
        "el-gr": frozenset({"Neo"}),
        "en-au": frozenset({"Zoe", "Isla", "Evie", "Jack"}),
        "en-ca": frozenset({"Rose", "Clara", "Emma", "Mason"}),
        "en-gb": frozenset({"Alice", "Nancy", "Lily", "Harry"}),
        "en-ie": frozenset({"Oran"}),
        "en-in": frozenset({"Eka", "Jai", "Ajit"}),
        "en-us": frozenset({"Linda", "Amy", "Mary", "John", "Mike"}),
        "es-es": frozenset({"Camila", "Sofia", "Luna", "Diego"}),
        "es-mx": frozenset({"Juana", "Silvia", "Teresa", "Jose"}),
        "fi-fi": frozenset({"Aada"}),
        "fr-ca": frozenset({"Emile", "Olivia", "Logan", "Felix"}),
        "fr-fr": frozenset({"Bette", "Iva", "Zola", "Axel"}),
        "fr-ch": frozenset({"Theo"}),
        "he-il": frozenset({"Rami"}),
        "hi-in": frozenset({"Puja", "Kabir"}),
        "hr-hr": frozenset({"Nikola"}),
        "hu-hu": frozenset({"Mate"}),
        "id-id": frozenset({"Intan"}),
        "it-it": frozenset({"Bria", "Mia", "Pietro"}),
        "ja-jp": frozenset({"Hina", "Airi", "Fumi", "Akira"}),
        "ko-kr": frozenset({"Nari"}),
        "ms-my": frozenset({"Aqil"}),
        "nb-no": frozenset({"Marte", "Erik"}),
        "nl-be": frozenset({"Daan"}),
        "nl-nl": frozenset({"Lotte", "Bram"}),
        "pl-pl": frozenset({"Julia", "Jan"}),
        "pt-br": frozenset({"Marcia", "Ligia", "Yara", "Dinis"}),
        "pt-pt": frozenset({"Leonor"}),
        "ro-ro": frozenset({"Doru"}),
        "ru-ru": frozenset({"Olga", "Marina", "Peter"}),
        "sk-sk": frozenset({"Beda"}),
        "sl-si": frozenset({"Vid"}),
        "sv-se": frozenset({"Molly", "Hugo"}),
        "ta-in": frozenset({"Sai"}),
        "th-th": frozenset({"Ukrit"}),
        "tr-tr": frozenset({"Omer"}),
        "vi-vn": frozenset({"Chi"}),
        "zh-cn": frozenset({"Luli", "Shu", "Chow", "Wang"}),
        "zh-hk": frozenset({"Jia", "Xia", "Chen"}),
        "zh-tw": frozenset({"Akemi", "Lin", "Lee"}),
    }
)

LOCALES: frozenset[str] = frozenset(VOICES)

_ALL_VOICES: frozenset[str] = frozenset().union(*VOICES.values())


def normalize_locale(locale: str) -> str:
    """Return the catalog form of a locale tag ('en-US' -> 'en-us')."""
    return locale.strip().replace("_", "-").lower()


def available_audio_formats() -> frozenset[str]:
    return AUDIO_FORMATS


def available_locales() -> frozenset[str]:
    return LOCALES


def available_voices(locale: Optional[str] = None) -> frozenset[str]:
    """Return voice names for ``locale``, or for every locale if omitted.

    The union over all locales is informational only: a name shared by two
    locales collapses into a single entry. An unknown locale yields an empty
    set rather than an error.
    """
    if locale is None:
        return _ALL_VOICES
    return VOICES.get(normalize_locale(locale), frozenset())
