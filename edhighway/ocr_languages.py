"""Tesseract language names, codes and discovery of installed language data."""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

TESSDATA = "tessdata"
TRAINED_SUFFIX = ".traineddata"
NO_LANGUAGE = "None"

# Language name -> Tesseract code.
LANG_CODES: Mapping[str, str] = MappingProxyType(
    {
        "Afrikaans": "afr",
        "Albanian": "sqi",
        "Amharic": "amh",
        "Ancient Greek": "grc",
        "Arabic": "ara",
        "Assamese": "asm",
        "Azerbaijani (Alternate)": "aze_cyrl",
        "Azerbaijani": "aze",
        "Basque": "eus",
        "Belarusian": "bel",
        "Bengali": "ben",
        "Bosnian": "bos",
        "Bulgarian": "bul",
        "Burmese": "mya",
        "Catalan": "cat",
        "Cebuano": "ceb",
        "Central Khmer": "khm",
        "Cherokee": "chr",
        "Chinese - Simplified": "chi_sim",
        "Chinese - Traditional": "chi_tra",
        "Croatian": "hrv",
        "Czech": "ces",
        "Danish (Alternate)": "dan_frak",
        "Danish": "dan",
        "Dutch": "nld",
        "Dzongkha": "dzo",
        "English": "eng",
        "Esperanto": "epo",
        "Estonian": "est",
        "Finnish": "fin",
        "Frankish": "frk",
        "French": "fra",
        "Galician": "glg",
        "Georgian (Old)": "kat_old",
        "Georgian": "kat",
        "German (Alternate)": "deu_frak",
        "German": "deu",
        "Greek": "ell",
        "Gujarati": "guj",
        "Haitian": "hat",
        "Hebrew": "heb",
        "Hindi": "hin",
        "Hungarian": "hun",
        "Icelandic": "isl",
        "Indic": "inc",
        "Indonesian": "ind",
        "Inuktitut": "iku",
        "Irish": "gle",
        "Italian (Old)": "ita_old",
        "Italian": "ita",
        "Japanese": "jpn",
        "Javanese": "jav",
        "Kannada": "kan",
        "Kazakh": "kaz",
        "Kirghiz": "kir",
        "Korean": "kor",
        "Kurukh": "kru",
        "Lao": "lao",
        "Latin": "lat",
        "Latvian": "lav",
        "Lithuanian": "lit",
        "Macedonian": "mkd",
        "Malay": "msa",
        "Malayalam": "mal",
        "Maltese": "mlt",
        "Marathi": "mar",
        "Math/Equations": "equ",
        "Middle English (1100-1500)": "enm",
        "Middle French (1400-1600)": "frm",
        "Nepali": "nep",
        "Norwegian": "nor",
        "Odiya": "ori",
        "Panjabi": "pan",
        "Persian": "fas",
        "Polish": "pol",
        "Portuguese": "por",
        "Pushto": "pus",
        "Romanian": "ron",
        "Russian": "rus",
        "Sanskrit": "san",
        "Serbian": "srp",
        "Sinhala": "sin",
        "Slovak (Alternate)": "slk_frak",
        "Slovak": "slk",
        "Slovenian": "slv",
        "Spanish (Old)": "spa_old",
        "Spanish": "spa",
        "srp_latn": "srp_latn",
        "Swahili": "swa",
        "Swedish": "swe",
        "Syriac": "syr",
        "Tagalog": "tgl",
        "Tajik": "tgk",
        "Tamil": "tam",
        "Telugu": "tel",
        "Thai": "tha",
        "Tibetan": "bod",
        "Tigrinya": "tir",
        "Turkish": "tur",
        "Uighur": "uig",
        "Ukrainian": "ukr",
        "Urdu": "urd",
        "Uzbek (Alternate)": "uzb_cyrl",
        "Uzbek": "uzb",
        "Vietnamese": "vie",
        "Welsh": "cym",
        "Yiddish": "yid",
    }
)

# Tesseract code -> language name.
CODE_LANGS: Mapping[str, str] = MappingProxyType({code: name for name, code in LANG_CODES.items()})

# Alternative language name -> language name.
ALT_LANGS: Mapping[str, str] = MappingProxyType(
    {
        "Danish (Alternate)": "Danish",
        "Georgian (Old)": "Georgian",
        "German (Alternate)": "German",
        "Italian (Old)": "Italian",
        "Middle English (1100-1500)": "English",
        "Middle French (1400-1600)": "French",
        "Slovak (Alternate)": "Slovak",
        "Spanish (Old)": "Spanish",
    }
)

# Codes whose vertical-text dictionaries are shipped separately.
_VERTICAL_CODES = frozenset({"chi_sim", "chi_tra", "jpn", "kor", "HanS", "HanT", "Hangul"})


def language_code(lang: str) -> Optional[str]:
    """Return the Tesseract code of a language name, or None if unknown."""
    return LANG_CODES.get(lang)


def language_name(code: str) -> Optional[str]:
    """Return the language name of a Tesseract code, or None if unknown."""
    return CODE_LANGS.get(code)


def alt_lang_to_lang(lang: str) -> str:
    """Map an alternative language name to its main language; "None" if unknown."""
    if lang in LANG_CODES:
        return lang
    return ALT_LANGS.get(lang, NO_LANGUAGE)


def default_search_folders(home: PathLike, app_name: str, app_dir: PathLike) -> List[str]:
    """Folders, each expected to hold a "tessdata" sub-folder, in search order."""
    home_str = os.fspath(home)
    return [
        f"{home_str}/{app_name}",
        f"{home_str}/tesseract",
        f"{home_str}/.local/share/",
        os.fspath(app_dir),
    ]


def _trained_codes(folder: PathLike) -> List[str]:
    directory = Path(folder) / TESSDATA
    if not directory.is_dir():
        return []
    return [
        entry.name[: -len(TRAINED_SUFFIX)]
        for entry in directory.iterdir()
        if entry.name.endswith(TRAINED_SUFFIX)
    ]


def _scan(folders: Iterable[PathLike]) -> Tuple[Optional[str], List[str]]:
    for folder in folders:
        names = sorted(CODE_LANGS[code] for code in _trained_codes(folder) if code in CODE_LANGS)
        if names:
            return os.fspath(folder), names
    return None, []


def installed_languages(folders: Iterable[PathLike]) -> List[str]:
    """Sorted language names installed in the first folder that holds any."""
    return _scan(folders)[1]


def is_lang_installed(lang: str, folders: Iterable[PathLike]) -> bool:
    return lang in installed_languages(folders)


def first_installed_language(folders: Iterable[PathLike]) -> str:
    """The first installed language name, or "None" when nothing is installed."""
    names = installed_languages(folders)
    return names[0] if names else NO_LANGUAGE


def is_lang_code_installed(folder: PathLike, code: str) -> bool:
    """True if ``folder/tessdata/<code>.traineddata`` exists."""
    return code in _trained_codes(folder)


def tesseract_language_spec(lang: str, folder: PathLike) -> str:
    """Return the Tesseract language string for ``lang`` using data in ``folder``.

    Adds the vertical-text dictionary ("jpn+jpn_vert") when it is installed.
    """
    code = language_code(lang)
    if code is None:
        raise ValueError(f"unknown OCR language: {lang!r}")
    if not is_lang_code_installed(folder, code):
        raise FileNotFoundError(f"OCR language {lang!r} is not installed in {os.fspath(folder)}")
    if code in _VERTICAL_CODES:
        vertical = f"{code}_vert"
        if is_lang_code_installed(folder, vertical):
            return f"{code}+{vertical}"
    return code