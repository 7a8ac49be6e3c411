import logging

import pytest

from digestkit.digest_format import DigestFormat
from digestkit.prefs import (
    Preferences,
    PreferencesError,
    View,
    choose_hash_funcs,
    load_preferences,
    save_preferences,
)

SUPPORTED = ["MD5", "SHA1", "SHA256", "SHA512"]


@pytest.mark.parametrize("view", list(View))
def test_view_round_trip(view):
    assert View.from_pref(view.to_pref()) is view


def test_view_names():
    assert View.from_pref("file-list") is View.FILE_LIST
    assert View.from_pref("text") is View.TEXT


def test_view_unknown():
    with pytest.raises(ValueError):
        View.from_pref("grid")


def test_choose_requested_in_supported_order():
    assert choose_hash_funcs(["SHA512", "MD5"], SUPPORTED, ["SHA1"]) == ["MD5", "SHA512"]


def test_choose_reports_unknown(caplog):
    with caplog.at_level(logging.WARNING):
        result = choose_hash_funcs(["XX", "SHA1"], SUPPORTED, [])
    assert result == ["SHA1"]
    assert "XX" in caplog.text and "Unknown" in caplog.text


def test_choose_falls_back_to_defaults():
    assert choose_hash_funcs(["XX"], SUPPORTED, ["SHA256", "MD5", "CRC32"]) == ["MD5", "SHA256"]


def test_choose_falls_back_to_first_supported():
    assert choose_hash_funcs([], SUPPORTED, ["CRC32"]) == ["MD5"]


def test_choose_nothing_supported():
    with pytest.raises(PreferencesError):
        choose_hash_funcs(["MD5"], [], ["MD5"])


def test_defaults():
    prefs = Preferences()
    assert prefs.digest_format is DigestFormat.HEX_LOWER
    assert prefs.view is None
    assert prefs.show_toolbar is True


def test_dict_round_trip():
    prefs = Preferences(["MD5"], DigestFormat.BASE64, View.FILE, False, True, 640, 480)
    assert Preferences.from_dict(prefs.to_dict()) == prefs


def test_dict_uses_stored_names():
    data = Preferences(digest_format=DigestFormat.HEX_UPPER, view=View.FILE_LIST).to_dict()
    assert data["digest-format"] == "hex-upper"
    assert data["view"] == "file-list"


def test_unknown_names_are_ignored():
    prefs = Preferences.from_dict({"digest-format": "octal", "view": "grid"})
    assert prefs.digest_format is DigestFormat.HEX_LOWER
    assert prefs.view is None


def test_bad_types_raise():
    with pytest.raises(PreferencesError):
        Preferences.from_dict({"hash-functions": "MD5"})
    with pytest.raises(PreferencesError):
        Preferences.from_dict({"window-width": "wide"})


def test_file_round_trip(tmp_path):
    path = tmp_path / "prefs.json"
    prefs = Preferences(["SHA1", "SHA256"], DigestFormat.HEX_UPPER, View.TEXT, True, False, 800, 600)
    save_preferences(prefs, path)
    assert load_preferences(path) == prefs


def test_missing_file_gives_defaults(tmp_path):
    assert load_preferences(tmp_path / "none.json") == Preferences()


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PreferencesError):
        load_preferences(path)


def test_non_object_file_raises(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(PreferencesError):
        load_preferences(path)