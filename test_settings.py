import json

import pytest

from settings import DisplayConfig, load_settings, save_settings


def test_defaults():
    cfg = DisplayConfig()
    assert cfg.show_week_day is True
    assert cfg.show_greg_date is False
    assert cfg.separator == "-"
    assert cfg.week_day_lang == "ar"
    assert cfg.hijri_lang == "ar"
    assert cfg.greg_lang == "ar"
    assert cfg.correction == 0


def test_from_overrides_merges_with_defaults():
    cfg = DisplayConfig.from_overrides({"hijri_lang": "ru", "correction": -1})
    assert cfg.hijri_lang == "ru"
    assert cfg.correction == -1
    assert cfg.separator == "-"
    assert cfg.show_week_day is True


def test_from_overrides_ignores_wrong_types_and_unknown_keys():
    cfg = DisplayConfig.from_overrides({
        "correction": "2",
        "show_week_day": 0,
        "separator": None,
        "hijri_lang": 5,
        "colour": "red",
    })
    assert cfg == DisplayConfig()


def test_bool_is_not_accepted_as_correction():
    assert DisplayConfig.from_overrides({"correction": True}).correction == 0


def test_from_overrides_none():
    assert DisplayConfig.from_overrides(None) == DisplayConfig()


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        DisplayConfig().correction = 1


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(str(tmp_path / "nope.json")) == DisplayConfig()


def test_save_then_load(tmp_path):
    path = str(tmp_path / "settings.json")
    cfg = DisplayConfig(hijri_lang="ru", separator="  |  ", correction=1, show_greg_date=True)
    save_settings(cfg, path)
    assert load_settings(path) == cfg
    with open(path, encoding="utf-8") as f:
        stored = json.load(f)
    assert stored["separator"] == "  |  "
    assert stored["hijri_lang"] == "ru"


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"week_day_lang": "en", "correction": "x"}), encoding="utf-8")
    cfg = load_settings(str(path))
    assert cfg.week_day_lang == "en"
    assert cfg.correction == 0


def test_corrupt_file_gives_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level("WARNING", logger="settings"):
        assert load_settings(str(path)) == DisplayConfig()
    assert "Could not read settings" in caplog.text


def test_non_object_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_settings(str(path)) == DisplayConfig()
