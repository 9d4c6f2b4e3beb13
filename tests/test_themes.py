import json

import pytest

from app import themes
from app.state import CharClass
from app.themes import Theme, _theme_from_dict, load_custom_themes


def test_char_color_covers_every_class():
    t = themes.THEMES[0]
    assert t.char_color(CharClass.INCORRECT) == t.error
    assert t.char_color(CharClass.CURRENT) == t.accent
    assert {t.char_color(c) for c in CharClass}


def test_theme_from_dict_requires_core_keys():
    with pytest.raises(ValueError):
        _theme_from_dict({"name": "x"})


def test_theme_from_dict_optional_colors():
    t = _theme_from_dict({"name": "x", "background": "#000", "primary": "#fff",
                          "secondary": "#888", "accent": "#f00", "error": "#f0f"})
    assert isinstance(t, Theme)
    assert t.error == "#f0f"
    assert t.correct == Theme.correct


def test_load_custom_themes_skips_bad_entries(tmp_path, monkeypatch):
    monkeypatch.setattr(themes, "THEMES", list(themes.THEMES))
    path = tmp_path / "themes.json"
    path.write_text(json.dumps([
        {"name": "Ok", "background": "#000", "primary": "#fff", "secondary": "#888", "accent": "#f00"},
        {"name": "Broken"},
        "nonsense",
    ]), encoding="utf-8")
    assert load_custom_themes(path) == 1
    assert themes.THEMES[-1].name == "Ok"


def test_load_custom_themes_ignores_invalid_json(tmp_path):
    path = tmp_path / "themes.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_custom_themes(path) == 0
