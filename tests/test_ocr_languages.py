from pathlib import Path

import pytest

from edhighway.ocr_languages import (
    ALT_LANGS,
    CODE_LANGS,
    LANG_CODES,
    alt_lang_to_lang,
    default_search_folders,
    first_installed_language,
    installed_languages,
    is_lang_code_installed,
    is_lang_installed,
    language_code,
    language_name,
    tesseract_language_spec,
)


def make_folder(root: Path, name: str, codes):
    folder = root / name
    tessdata = folder / "tessdata"
    tessdata.mkdir(parents=True)
    for code in codes:
        (tessdata / f"{code}.traineddata").write_bytes(b"")
    return folder


def test_known_codes():
    assert language_code("English") == "eng"
    assert language_code("Japanese") == "jpn"
    assert language_code("Klingon") is None


def test_code_to_name_round_trip():
    for name, code in LANG_CODES.items():
        assert language_name(code) == name
        assert language_code(language_name(code)) == code
    assert len(CODE_LANGS) == len(LANG_CODES)


def test_alt_lang_to_lang():
    assert alt_lang_to_lang("English") == "English"
    assert alt_lang_to_lang("Danish (Alternate)") == "Danish (Alternate)"
    assert alt_lang_to_lang("Nonexistent") == "None"
    for main in ALT_LANGS.values():
        assert main in LANG_CODES


def test_default_search_folders():
    folders = default_search_folders("/home/u", "ED:HighWay", "/opt/app")
    assert folders == [
        "/home/u/ED:HighWay",
        "/home/u/tesseract",
        "/home/u/.local/share/",
        "/opt/app",
    ]


def test_installed_languages_first_non_empty_folder(tmp_path):
    empty = make_folder(tmp_path, "empty", [])
    unknown = make_folder(tmp_path, "unknown", ["zzz"])
    good = make_folder(tmp_path, "good", ["rus", "eng", "osd"])
    other = make_folder(tmp_path, "other", ["deu"])
    folders = [tmp_path / "missing", empty, unknown, good, other]
    assert installed_languages(folders) == ["English", "Russian"]
    assert first_installed_language(folders) == "English"
    assert is_lang_installed("Russian", folders)
    assert not is_lang_installed("German", folders)


def test_nothing_installed(tmp_path):
    folders = [tmp_path / "missing"]
    assert installed_languages(folders) == []
    assert first_installed_language(folders) == "None"


def test_is_lang_code_installed(tmp_path):
    folder = make_folder(tmp_path, "data", ["eng", "jpn_vert"])
    assert is_lang_code_installed(folder, "eng")
    assert is_lang_code_installed(folder, "jpn_vert")
    assert not is_lang_code_installed(folder, "jpn")


def test_spec_adds_vertical(tmp_path):
    folder = make_folder(tmp_path, "data", ["jpn", "jpn_vert", "eng", "eng_vert"])
    assert tesseract_language_spec("Japanese", folder) == "jpn+jpn_vert"
    assert tesseract_language_spec("English", folder) == "eng"


def test_spec_without_vertical(tmp_path):
    folder = make_folder(tmp_path, "data", ["kor"])
    assert tesseract_language_spec("Korean", folder) == "kor"


def test_spec_errors(tmp_path):
    folder = make_folder(tmp_path, "data", ["eng"])
    with pytest.raises(ValueError):
        tesseract_language_spec("Klingon", folder)
    with pytest.raises(FileNotFoundError):
        tesseract_language_spec("German", folder)